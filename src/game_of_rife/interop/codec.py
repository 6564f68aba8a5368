"""Flat coordinate array codec and the ``evolve`` export.

Foreign callers exchange live cells as one flat array of signed 64-bit
integers with x and y interleaved::

    [x0, y0, x1, y1, ...]

Even-indexed elements are x coordinates and odd-indexed elements are y
coordinates. An odd-length array means the two coordinate streams differ in
length; it is rejected rather than silently truncated.
"""

from itertools import chain
from typing import Sequence, Union
import logging

import numpy as np

from ..core.live_set import LiveSet, EMPTY, live_set
from ..core.world import World
from ..errors import InvalidInputError

logger = logging.getLogger(__name__)

INT64_MAX = int(np.iinfo(np.int64).max)

Coordinates = Union[Sequence[int], np.ndarray]


def decode_cells(coords: Coordinates) -> LiveSet:
    """Decode an interleaved coordinate array into a live set.

    Args:
        coords: Flat sequence [x0, y0, x1, y1, ...] of int64 values

    Returns:
        Live set of the encoded cells (duplicate pairs collapse)

    Raises:
        InvalidInputError: If the array is not 1D, has odd length, is not
            integral, or holds values outside the int64 range
    """
    try:
        array = np.asarray(coords)
    except (ValueError, OverflowError) as e:
        raise InvalidInputError(f"Cannot read coordinate array: {e}") from e

    if array.ndim != 1:
        raise InvalidInputError(f"Coordinate array must be flat, got shape {array.shape}")

    if len(array) % 2 != 0:
        raise InvalidInputError(
            f"Coordinate array has odd length {len(array)}: "
            f"{(len(array) + 1) // 2} x values but {len(array) // 2} y values"
        )

    if array.size == 0:
        return EMPTY

    if not np.issubdtype(array.dtype, np.integer):
        raise InvalidInputError(f"Coordinates must be integers, got dtype {array.dtype}")

    if array.dtype == np.uint64 and int(array.max()) > INT64_MAX:
        raise InvalidInputError("Coordinate exceeds signed 64-bit range")

    pairs = array.astype(np.int64).reshape(-1, 2)
    cells = live_set(pairs.tolist())
    logger.debug(f"Decoded {len(pairs)} coordinate pairs into {len(cells)} cells")
    return cells


def encode_cells(cells: LiveSet) -> np.ndarray:
    """Encode a live set as an interleaved int64 array.

    Cells are emitted in sorted (x, y) order.

    Args:
        cells: Live cells to encode

    Returns:
        1D int64 array [x0, y0, x1, y1, ...]

    Raises:
        OverflowError: If a coordinate does not fit in int64
    """
    ordered = sorted(cells)
    encoded = np.fromiter(chain.from_iterable(ordered), dtype=np.int64, count=2 * len(ordered))
    logger.debug(f"Encoded {len(ordered)} cells")
    return encoded


def evolve(coords: Coordinates, steps: int) -> np.ndarray:
    """Run a simulation across the flat-array boundary.

    Args:
        coords: Initial live cells as [x0, y0, x1, y1, ...]
        steps: Number of ticks to apply (non-negative)

    Returns:
        Live cells after ``steps`` ticks, same interleaved encoding

    Raises:
        InvalidInputError: If coords is malformed or steps is not a
            non-negative integer
    """
    if isinstance(steps, bool) or not isinstance(steps, (int, np.integer)):
        raise InvalidInputError(f"Step count must be an integer, got {type(steps).__name__}")
    if steps < 0:
        raise InvalidInputError(f"Step count must be non-negative, got {steps}")

    world = World(decode_cells(coords))
    return encode_cells(world.forward(int(steps)).cells)
