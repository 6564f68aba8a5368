"""World generations for Conway's Game of Life on an unbounded lattice.

A World holds the live cells of exactly one generation. It is immutable:
stepping produces a new World and leaves the previous one untouched, so
generations can be kept, compared and replayed freely.
"""

from dataclasses import dataclass
from typing import Iterator, Tuple
import logging

import numpy as np

from .live_set import LiveSet, EMPTY, live_set, union, difference, bounds
from .rules import deceased, newborns

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class World:
    """One generation of live cells.

    Attributes:
        cells: Frozen set of alive cells (absence means dead)
    """
    cells: LiveSet = EMPTY

    def __post_init__(self):
        # Accept any iterable of (x, y) pairs and normalize to Cells
        object.__setattr__(self, 'cells', live_set(self.cells))

    @classmethod
    def from_array(cls, pattern: np.ndarray, x: int = 0, y: int = 0) -> 'World':
        """Create world from a 2D boolean pattern array.

        Row index maps to y and column index to x; the top-left element of
        the pattern lands on (x, y).

        Args:
            pattern: 2D array, truthy entries are alive
            x: X coordinate of the pattern's first column
            y: Y coordinate of the pattern's first row

        Returns:
            World: New world containing the pattern

        Raises:
            ValueError: If the pattern is not two-dimensional
        """
        pattern = np.asarray(pattern, dtype=bool)
        if pattern.ndim != 2:
            raise ValueError(f"Pattern must be 2D, got {pattern.ndim} dimensions")

        rows, cols = np.nonzero(pattern)
        return cls((x + int(col), y + int(row)) for row, col in zip(rows, cols))

    def step(self) -> 'World':
        """Advance one generation.

        Returns:
            New world: survivors of this generation plus newborn cells
        """
        dying = deceased(self.cells)
        born = newborns(self.cells)
        return World(union(difference(self.cells, dying), born))

    def forward(self, steps: int) -> 'World':
        """Advance a number of generations.

        Args:
            steps: Number of ticks to apply (0 returns this world)

        Returns:
            World after ``steps`` ticks

        Raises:
            ValueError: If steps is negative
        """
        if steps < 0:
            raise ValueError(f"Cannot step backwards: steps={steps}")

        world = self
        for _ in range(steps):
            world = world.step()

        logger.debug(f"Advanced {steps} ticks: {self.live_count} -> {world.live_count} live cells")
        return world

    def generations(self) -> Iterator['World']:
        """Yield this world followed by every successive generation."""
        world = self
        while True:
            yield world
            world = world.step()

    @property
    def live_count(self) -> int:
        """Number of alive cells."""
        return len(self.cells)

    def is_empty(self) -> bool:
        """Check if every cell is dead."""
        return not self.cells

    def bounds(self) -> Tuple[int, int, int, int]:
        """Get bounding box of alive cells (min_x, min_y, max_x, max_y).

        Raises:
            ValueError: If the world is empty
        """
        return bounds(self.cells)

    def center_of_mass(self) -> Tuple[float, float]:
        """Calculate center of mass of live cells.

        Returns:
            (x, y) centroid, or (0.0, 0.0) for an empty world
        """
        if not self.cells:
            return (0.0, 0.0)

        coords = np.array(sorted(self.cells), dtype=float)
        return (float(np.mean(coords[:, 0])), float(np.mean(coords[:, 1])))

    def to_array(self, pad: int = 0) -> np.ndarray:
        """Get the bounding-box window as a boolean array.

        Element [row, col] is the cell (min_x - pad + col, min_y - pad + row).

        Args:
            pad: Dead border cells added on every side

        Returns:
            2D boolean numpy array (empty world gives a 2*pad square)
        """
        if not self.cells:
            return np.zeros((2 * pad, 2 * pad), dtype=bool)

        min_x, min_y, max_x, max_y = self.bounds()
        window = np.zeros((max_y - min_y + 1 + 2 * pad, max_x - min_x + 1 + 2 * pad), dtype=bool)
        for x, y in self.cells:
            window[y - min_y + pad, x - min_x + pad] = True
        return window

    def render(self, pad: int = 0, alive: str = 'X', dead: str = '.') -> str:
        """Text picture of the live region, one line per row, y ascending."""
        if not self.cells:
            return '(empty)'

        window = self.to_array(pad)
        return '\n'.join(
            ''.join(alive if value else dead for value in row)
            for row in window
        )

    def __str__(self) -> str:
        return self.render()
