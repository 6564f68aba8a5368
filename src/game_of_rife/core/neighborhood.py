"""Moore neighborhood helpers."""

from typing import FrozenSet, Tuple

from .cell import Cell

# All nine offsets of the 3x3 block, including (0, 0)
BLOCK_OFFSETS: Tuple[Tuple[int, int], ...] = tuple(
    (dx, dy)
    for dx in (-1, 0, 1)
    for dy in (-1, 0, 1)
)

# The eight Moore neighbor offsets
MOORE_OFFSETS: Tuple[Tuple[int, int], ...] = tuple(
    offset for offset in BLOCK_OFFSETS if offset != (0, 0)
)


def with_neighbors(cell: Cell) -> FrozenSet[Cell]:
    """Return the 3x3 block centered on a cell (the cell plus its 8 neighbors).

    Args:
        cell: Center cell

    Returns:
        Frozen set of exactly 9 cells
    """
    return frozenset(cell.offset(dx, dy) for dx, dy in BLOCK_OFFSETS)


def neighbor_positions(cell: Cell) -> FrozenSet[Cell]:
    """Return the 8 Moore neighbors of a cell, excluding the cell itself.

    Args:
        cell: Center cell

    Returns:
        Frozen set of exactly 8 cells
    """
    return with_neighbors(cell) - {cell}
