"""Core Game of Life logic."""

from .universe import Universe
from .game import Game, determine_new_state
from .patterns import Pattern, PatternLibrary

__all__ = ["Universe", "Game", "determine_new_state", "Pattern", "PatternLibrary"]
