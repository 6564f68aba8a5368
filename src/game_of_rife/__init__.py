"""
game_of_rife: Conway's Game of Life on an unbounded integer lattice.

Worlds are immutable sets of live cells; ``World.step`` produces the next
generation and ``World.forward`` folds it N times. ``interop.evolve`` exposes
the same engine over flat int64 coordinate arrays.
"""

from .core import Cell, LiveSet, World, live_set
from .errors import RifeError, InvalidInputError
from .interop import decode_cells, encode_cells, evolve

__version__ = "0.1.0"

__all__ = [
    'Cell',
    'LiveSet',
    'World',
    'live_set',
    'RifeError',
    'InvalidInputError',
    'decode_cells',
    'encode_cells',
    'evolve',
]
