"""Conway's Game of Life implementation."""

from .universe import Universe


def determine_new_state(alive: bool, neighbor_count: int) -> bool:
    """Apply Conway's rules to a single cell.

    Args:
        alive: Current state of the cell
        neighbor_count: Number of living neighbors (0-8)

    Returns:
        State of the cell in the next generation

    Raises:
        ValueError: If neighbor_count is outside 0-8
    """
    if not 0 <= neighbor_count <= 8:
        raise ValueError(f"Neighbor count must be between 0 and 8, got {neighbor_count}")

    if alive:
        # 0-1 underpopulation, 4-8 overcrowding
        return neighbor_count in (2, 3)

    # reproduction
    return neighbor_count == 3


class Game:
    """Conway's Game of Life simulation engine.

    Implements the classic rules:
    - Live cell with 2-3 neighbors survives
    - Dead cell with exactly 3 neighbors becomes alive
    - All other cells die or stay dead

    The game owns its universe. It keeps no generation counter or history;
    callers that need one track it themselves.
    """

    def __init__(self, width: int, height: int) -> None:
        """Initialize the game with an all-dead universe.

        Args:
            width: Number of columns
            height: Number of rows
        """
        self.universe = Universe(width, height)

    def next_generation(self) -> None:
        """Advance the universe by one generation.

        Every cell is evaluated against a snapshot of the current generation,
        so cells written earlier in the sweep never affect later ones.
        """
        previous = self.universe.copy()

        for x, y, alive in previous.iter():
            new_state = determine_new_state(alive, previous.count_neighbors(x, y))
            self.universe.set(x, y, new_state)

    def __str__(self) -> str:
        return str(self.universe)
