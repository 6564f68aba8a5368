"""Candidate cells for the next generation."""

from .live_set import LiveSet, EMPTY
from .neighborhood import with_neighbors


def candidates(cells: LiveSet) -> LiveSet:
    """Collect every cell whose state could matter next tick.

    A candidate is any live cell or any cell adjacent to one. Cells outside
    this set have zero live neighbors and stay dead.

    Args:
        cells: Currently alive cells

    Returns:
        Union of the 3x3 blocks around every live cell
    """
    return EMPTY.union(*(with_neighbors(cell) for cell in cells))
