"""Well-known Game of Life patterns for seeding a universe."""

from typing import Dict, List, Optional, Tuple

from .universe import Universe


class Pattern:
    """A named set of live-cell offsets."""

    def __init__(self, name: str, cells: List[Tuple[int, int]], description: str = "") -> None:
        """Initialize a pattern.

        Args:
            name: Pattern name
            cells: List of (x, y) offsets of living cells
            description: Optional description
        """
        self.name = name
        self.cells = cells
        self.description = description

    def apply_to_universe(self, universe: Universe, offset_x: int = 0, offset_y: int = 0) -> None:
        """Clear a universe and seed it with this pattern.

        Cells that land outside the universe are dropped.

        Args:
            universe: Target universe
            offset_x: Horizontal offset
            offset_y: Vertical offset
        """
        universe.clear()
        for x, y in self.cells:
            try:
                universe.set(x + offset_x, y + offset_y, True)
            except IndexError:
                continue

    def get_bounding_box(self) -> Tuple[int, int, int, int]:
        """Get bounding box of the pattern as (min_x, min_y, max_x, max_y)."""
        if not self.cells:
            return (0, 0, 0, 0)

        xs, ys = zip(*self.cells)
        return (min(xs), min(ys), max(xs), max(ys))

    def get_size(self) -> Tuple[int, int]:
        """Get pattern size as (width, height)."""
        min_x, min_y, max_x, max_y = self.get_bounding_box()
        return (max_x - min_x + 1, max_y - min_y + 1)

    @classmethod
    def from_universe(cls, universe: Universe, name: str, description: str = "") -> "Pattern":
        """Capture the living cells of a universe as a pattern.

        Args:
            universe: Source universe
            name: Pattern name
            description: Optional description

        Returns:
            New Pattern instance
        """
        cells = [(x, y) for x, y, alive in universe.iter() if alive]
        return cls(name, cells, description)


def _pulsar_cells() -> List[Tuple[int, int]]:
    # one quadrant, mirrored across both axes of the 13x13 bounding box
    quadrant = [(2, 0), (3, 0), (4, 0), (0, 2), (5, 2), (0, 3), (5, 3), (0, 4), (5, 4), (2, 5), (3, 5), (4, 5)]
    cells = set()
    for x, y in quadrant:
        for mx in (x, 12 - x):
            for my in (y, 12 - y):
                cells.add((mx, my))
    return sorted(cells, key=lambda cell: (cell[1], cell[0]))


class PatternLibrary:
    """In-memory collection of patterns."""

    CATEGORIES = {
        "Still Life": ["Block", "Beehive", "Loaf"],
        "Oscillators": ["Blinker", "Toad", "Beacon", "Pulsar"],
        "Spaceships": ["Glider", "Lightweight Spaceship"],
        "Methuselahs": ["R-pentomino", "Diehard", "Acorn"],
    }

    def __init__(self) -> None:
        self._patterns: Dict[str, Pattern] = {}
        self._load_builtin_patterns()

    def _load_builtin_patterns(self) -> None:
        builtins = [
            Pattern("Block", [(0, 0), (1, 0), (0, 1), (1, 1)], "2x2 still life"),
            Pattern("Beehive", [(1, 0), (2, 0), (0, 1), (3, 1), (1, 2), (2, 2)], "Six-cell still life"),
            Pattern("Loaf", [(1, 0), (2, 0), (0, 1), (3, 1), (1, 2), (3, 2), (2, 3)], "Seven-cell still life"),
            Pattern("Blinker", [(0, 1), (1, 1), (2, 1)], "Period-2 oscillator"),
            Pattern("Toad", [(1, 0), (2, 0), (3, 0), (0, 1), (1, 1), (2, 1)], "Period-2 oscillator"),
            Pattern("Beacon", [(0, 0), (1, 0), (0, 1), (3, 2), (2, 3), (3, 3)], "Period-2 oscillator"),
            Pattern("Pulsar", _pulsar_cells(), "Period-3 oscillator"),
            Pattern("Glider", [(1, 0), (2, 1), (0, 2), (1, 2), (2, 2)], "Smallest spaceship, period-4"),
            Pattern(
                "Lightweight Spaceship",
                [(0, 0), (3, 0), (4, 1), (0, 2), (4, 2), (1, 3), (2, 3), (3, 3), (4, 3)],
                "Period-4 spaceship",
            ),
            Pattern("R-pentomino", [(1, 0), (2, 0), (0, 1), (1, 1), (1, 2)], "Stabilizes after 1103 generations"),
            Pattern("Diehard", [(6, 0), (0, 1), (1, 1), (1, 2), (5, 2), (6, 2), (7, 2)], "Dies after 130 generations"),
            Pattern("Acorn", [(1, 0), (3, 1), (0, 2), (1, 2), (4, 2), (5, 2), (6, 2)], "Stabilizes after 5206 generations"),
        ]
        for pattern in builtins:
            self.add_pattern(pattern)

    def add_pattern(self, pattern: Pattern) -> None:
        """Add a pattern, replacing any pattern with the same name."""
        self._patterns[pattern.name] = pattern

    def get_pattern(self, name: str) -> Optional[Pattern]:
        """Get a pattern by name, or None if it is unknown."""
        return self._patterns.get(name)

    def list_patterns(self) -> List[str]:
        return list(self._patterns.keys())

    def get_patterns_by_category(self) -> Dict[str, List[str]]:
        """Get pattern names grouped by category.

        Patterns added at runtime are listed under "Custom". Empty categories
        are omitted.
        """
        categories = {category: list(names) for category, names in self.CATEGORIES.items()}
        known = {name for names in self.CATEGORIES.values() for name in names}
        categories["Custom"] = [name for name in self._patterns if name not in known]

        return {category: names for category, names in categories.items() if names}
