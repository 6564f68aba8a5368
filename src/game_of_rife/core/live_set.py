"""Set algebra over live cells.

A live set is an immutable ``frozenset`` of cells: membership means alive,
absence means dead. Every operation here returns a new set and never
modifies its arguments.
"""

from operator import index
from typing import FrozenSet, Iterable, Tuple

from .cell import Cell

LiveSet = FrozenSet[Cell]

EMPTY: LiveSet = frozenset()


def live_set(cells: Iterable[Tuple[int, int]] = ()) -> LiveSet:
    """Build a live set from any iterable of (x, y) pairs.

    Args:
        cells: Pairs of integer coordinates (tuples, lists or Cells)

    Returns:
        Frozen set of Cell values, duplicates collapsed

    Raises:
        TypeError: If a coordinate is not an integer (floats and strings
            are rejected rather than rounded)
    """
    return frozenset(Cell(index(x), index(y)) for x, y in cells)


def contains(cells: LiveSet, cell: Tuple[int, int]) -> bool:
    """Check whether a cell is alive."""
    return cell in cells


def union(a: LiveSet, b: LiveSet) -> LiveSet:
    """Cells alive in either set."""
    return frozenset(a) | frozenset(b)


def intersection(a: LiveSet, b: LiveSet) -> LiveSet:
    """Cells alive in both sets."""
    return frozenset(a) & frozenset(b)


def difference(a: LiveSet, b: LiveSet) -> LiveSet:
    """Relative complement: cells in ``a`` that are not in ``b``."""
    return frozenset(a) - frozenset(b)


def size(cells: LiveSet) -> int:
    """Number of cells in the set."""
    return len(cells)


def translate(cells: LiveSet, dx: int, dy: int) -> LiveSet:
    """Shift every cell by (dx, dy)."""
    return frozenset(cell.offset(dx, dy) for cell in cells)


def bounds(cells: LiveSet) -> Tuple[int, int, int, int]:
    """Get bounding box of a non-empty set (min_x, min_y, max_x, max_y).

    Raises:
        ValueError: If the set is empty
    """
    if not cells:
        raise ValueError("Empty live set has no bounding box")

    xs = [x for x, _ in cells]
    ys = [y for _, y in cells]
    return (min(xs), min(ys), max(xs), max(ys))
