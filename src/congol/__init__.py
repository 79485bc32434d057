"""Conway's Game of Life on a bounded grid."""

__version__ = "0.1.0"

from .core.universe import Universe
from .core.game import Game
from .core.patterns import Pattern, PatternLibrary

__all__ = ["Universe", "Game", "Pattern", "PatternLibrary"]
