"""Universe data structure for Conway's Game of Life."""

from typing import Iterator, Optional, Tuple
import numpy as np
import torch
import torch.nn.functional as F


# 3x3 Moore neighborhood, centre cell excluded
_NEIGHBOR_KERNEL = torch.tensor([[1, 1, 1], [1, 0, 1], [1, 1, 1]], dtype=torch.float32).unsqueeze(0).unsqueeze(0)

_NEIGHBOR_OFFSETS = [(dx, dy) for dx in (-1, 0, 1) for dy in (-1, 0, 1) if not (dx == 0 and dy == 0)]


def _check_dimension(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")


class Universe:
    """The fixed-size 2D grid of cells that make up a Game of Life.

    Cells are stored in a flat numpy boolean array in row-major order, so
    the cell at (x, y) lives at index ``y * width + x``. Edges do not wrap:
    everything outside the grid is treated as permanently dead.
    """

    def __init__(self, width: int, height: int) -> None:
        """Create a universe with every cell dead.

        Args:
            width: Number of columns
            height: Number of rows

        Raises:
            TypeError: If a dimension is not an integer
            ValueError: If a dimension is zero or negative
        """
        _check_dimension("width", width)
        _check_dimension("height", height)

        self.width = int(width)
        self.height = int(height)
        self._cells = np.zeros(self.width * self.height, dtype=bool)

    @property
    def cells(self) -> np.ndarray:
        """Read-only view of the flat cell array."""
        view = self._cells.view()
        view.flags.writeable = False
        return view

    @property
    def shape(self) -> Tuple[int, int]:
        """Get universe dimensions as (width, height)."""
        return (self.width, self.height)

    @property
    def population(self) -> int:
        """Get the number of living cells."""
        return int(np.count_nonzero(self._cells))

    def _in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, x: int, y: int) -> Optional[bool]:
        """Get the state of the cell at (x, y).

        Args:
            x: Column coordinate, may be negative
            y: Row coordinate, may be negative

        Returns:
            True if the cell is alive, False if dead, None if (x, y) is off the grid
        """
        if not self._in_bounds(x, y):
            return None

        return bool(self._cells[y * self.width + x])

    def set(self, x: int, y: int, value: bool) -> None:
        """Set the state of the cell at (x, y).

        Args:
            x: Column coordinate
            y: Row coordinate
            value: Whether the cell should be alive

        Raises:
            IndexError: If (x, y) is outside the universe
        """
        if not self._in_bounds(x, y):
            raise IndexError(f"Coordinates ({x}, {y}) out of bounds for {self.width}x{self.height} universe")

        self._cells[y * self.width + x] = bool(value)

    def count_neighbors(self, x: int, y: int) -> int:
        """Count living neighbors of the cell at (x, y).

        Off-grid neighbor positions count as dead.

        Args:
            x: Column coordinate
            y: Row coordinate

        Returns:
            Number of living neighbors (0-8)
        """
        count = 0
        for dx, dy in _NEIGHBOR_OFFSETS:
            if self.get(x + dx, y + dy):
                count += 1

        return count

    def neighbor_counts(self) -> np.ndarray:
        """Count neighbors for all cells using a PyTorch convolution.

        Zero padding keeps the edges bounded, matching count_neighbors().

        Returns:
            Array of shape (height, width) with the neighbor count of each cell
        """
        grid = torch.from_numpy(self._cells.reshape(self.height, self.width).astype(np.float32))
        neighbors = F.conv2d(grid.unsqueeze(0).unsqueeze(0), _NEIGHBOR_KERNEL, padding=1)
        return neighbors[0, 0].numpy().astype(np.int8)

    def iter(self) -> Iterator[Tuple[int, int, bool]]:
        """Iterate over every cell in row-major order.

        Yields:
            Tuples of (x, y, alive)
        """
        width = self.width
        for index in range(len(self._cells)):
            yield (index % width, index // width, bool(self._cells[index]))

    def __iter__(self) -> Iterator[Tuple[int, int, bool]]:
        return self.iter()

    def __len__(self) -> int:
        return len(self._cells)

    def copy(self) -> "Universe":
        """Return an independent copy of this universe."""
        clone = Universe(self.width, self.height)
        clone._cells[:] = self._cells
        return clone

    def clear(self) -> None:
        """Clear all cells (set all to dead)."""
        self._cells.fill(False)

    def randomize(self, probability: float = 0.1, seed: Optional[int] = None) -> None:
        """Randomly populate the universe.

        Args:
            probability: Chance each cell will be alive (0.0 to 1.0)
            seed: Optional seed for a reproducible layout

        Raises:
            ValueError: If probability is outside [0, 1]
        """
        if not 0.0 <= probability <= 1.0:
            raise ValueError(f"Probability must be between 0.0 and 1.0, got {probability}")

        rng = np.random.default_rng(seed)
        self._cells[:] = rng.random(len(self._cells)) < probability

    def __eq__(self, other: object) -> bool:
        """Check if two universes are equal."""
        if not isinstance(other, Universe):
            return NotImplemented
        return self.shape == other.shape and np.array_equal(self._cells, other._cells)

    def __str__(self) -> str:
        """Render living cells as 'X' and dead cells as ' ', one line per row."""
        rows = []
        for y in range(self.height):
            row = self._cells[y * self.width : (y + 1) * self.width]
            rows.append("".join("X" if cell else " " for cell in row) + "\n")
        return "".join(rows)
