"""Lattice cell value type.

A cell is a point on the unbounded integer lattice. Coordinates are plain
Python ints, so neighbor arithmetic never overflows inside the core.
"""

from typing import NamedTuple


class Cell(NamedTuple):
    """A lattice point (x, y).

    Equality and hashing are structural, so ``Cell(1, 2) == (1, 2)``.
    """
    x: int
    y: int

    def offset(self, dx: int, dy: int) -> 'Cell':
        """Return the cell shifted by (dx, dy)."""
        return Cell(self.x + dx, self.y + dy)
