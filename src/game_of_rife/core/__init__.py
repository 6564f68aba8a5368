"""Generation-step engine: cells, neighborhoods, live-set algebra, rules and worlds."""

from .cell import Cell
from .neighborhood import with_neighbors, neighbor_positions
from .live_set import LiveSet, live_set, contains, union, intersection, difference, size
from .candidates import candidates
from .rules import SURVIVAL_SET, BIRTH_SET, neighbor_count, deceased, newborns
from .world import World

__all__ = [
    'Cell',
    'LiveSet',
    'live_set',
    'contains',
    'union',
    'intersection',
    'difference',
    'size',
    'with_neighbors',
    'neighbor_positions',
    'candidates',
    'SURVIVAL_SET',
    'BIRTH_SET',
    'neighbor_count',
    'deceased',
    'newborns',
    'World',
]
