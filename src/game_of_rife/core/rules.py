"""Conway's Game of Life rules over sparse live sets.

Classifies cells into those that die and those that are born, using the
classic B3/S23 thresholds. The rule is fixed; nothing here is configurable.
"""

from typing import Dict, FrozenSet, Tuple

from .cell import Cell
from .candidates import candidates
from .live_set import LiveSet, difference, intersection, size
from .neighborhood import neighbor_positions


# Standard Conway rules - unmodified
SURVIVAL_SET: FrozenSet[int] = frozenset({2, 3})  # Live cells survive with 2-3 neighbors
BIRTH_SET: FrozenSet[int] = frozenset({3})        # Dead cells born with exactly 3 neighbors


def next_state(alive: bool, live_neighbors: int) -> bool:
    """Apply Conway's rules to determine next cell state.

    Args:
        alive: Current cell state (True=alive, False=dead)
        live_neighbors: Number of live neighbors (0-8)

    Returns:
        Next cell state (True=alive, False=dead)
    """
    if alive:
        return live_neighbors in SURVIVAL_SET
    return live_neighbors in BIRTH_SET


def rule_table() -> Dict[Tuple[bool, int], bool]:
    """Get the complete rule table.

    Returns:
        Dictionary mapping (current_state, neighbor_count) to next_state,
        18 entries in total
    """
    return {
        (alive, neighbors): next_state(alive, neighbors)
        for alive in (False, True)
        for neighbors in range(9)
    }


def neighbor_count(cells: LiveSet, cell: Cell) -> int:
    """Count live cells among the 8 Moore neighbors of a cell.

    The cell's own state is never counted.

    Args:
        cells: Currently alive cells
        cell: Cell to inspect (alive or dead)

    Returns:
        Number of live neighbors (0-8)
    """
    return size(intersection(cells, neighbor_positions(cell)))


def deceased(cells: LiveSet) -> LiveSet:
    """Live cells that die this tick (under- or overpopulation).

    Args:
        cells: Currently alive cells

    Returns:
        Subset of ``cells`` with fewer than 2 or more than 3 live neighbors
    """
    return frozenset(
        cell for cell in cells
        if neighbor_count(cells, cell) not in SURVIVAL_SET
    )


def newborns(cells: LiveSet) -> LiveSet:
    """Dead cells that come alive this tick.

    Args:
        cells: Currently alive cells

    Returns:
        Dead candidate cells with exactly 3 live neighbors
    """
    return frozenset(
        cell for cell in difference(candidates(cells), cells)
        if neighbor_count(cells, cell) in BIRTH_SET
    )
