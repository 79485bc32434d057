"""Frontend interfaces for the Game of Life."""

from .cli import CLIGame

__all__ = ["CLIGame"]
