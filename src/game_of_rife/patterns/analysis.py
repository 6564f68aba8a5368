"""Cycle detection and classification of evolving patterns.

A pattern that revisits an earlier shape, possibly translated, repeats
forever from then on because the rule is deterministic and the same at every
lattice point. Detecting the first repeat is enough to tell still lifes,
oscillators, spaceships and extinction apart.
"""

from enum import Enum
from itertools import islice
from typing import Dict, NamedTuple, Optional, Tuple

from ..core.live_set import LiveSet, EMPTY, bounds, translate
from ..core.world import World


class PatternKind(Enum):
    """Long-run behavior of a pattern."""
    EXTINCT = 0     # All cells eventually die
    STILL_LIFE = 1  # Settles into a shape unchanged by one tick
    OSCILLATOR = 2  # Settles into a cycle with period > 1, fixed in place
    SPACESHIP = 3   # Repeats its shape while translating


class Cycle(NamedTuple):
    """First repeat found while evolving a pattern."""
    start: int       # Generation index where the cycle begins
    period: int      # Ticks between repeats
    dx: int          # Translation per period along x
    dy: int          # Translation per period along y
    population: int  # Live cells in the repeating generation


def normalize(cells: LiveSet) -> Tuple[LiveSet, Tuple[int, int]]:
    """Translate a live set so its bounding box starts at (0, 0).

    Returns:
        (shape, origin) where origin is the original (min_x, min_y); an empty
        set normalizes to itself at (0, 0)
    """
    if not cells:
        return EMPTY, (0, 0)

    min_x, min_y, _, _ = bounds(cells)
    return translate(cells, -min_x, -min_y), (min_x, min_y)


def find_cycle(world: World, max_steps: int = 100) -> Optional[Cycle]:
    """Evolve until a generation repeats an earlier shape.

    Args:
        world: Starting generation
        max_steps: Maximum number of ticks to simulate

    Returns:
        The first cycle found, or None if nothing repeats within max_steps
    """
    seen: Dict[LiveSet, Tuple[int, Tuple[int, int]]] = {}

    for index, generation in enumerate(islice(world.generations(), max_steps + 1)):
        shape, origin = normalize(generation.cells)
        if shape in seen:
            first, first_origin = seen[shape]
            return Cycle(
                start=first,
                period=index - first,
                dx=origin[0] - first_origin[0],
                dy=origin[1] - first_origin[1],
                population=len(shape),
            )
        seen[shape] = (index, origin)

    return None


def classify(world: World, max_steps: int = 100) -> Optional[PatternKind]:
    """Classify where a pattern ends up.

    Args:
        world: Starting generation
        max_steps: Maximum number of ticks to simulate

    Returns:
        PatternKind, or None if no cycle shows up within max_steps
    """
    cycle = find_cycle(world, max_steps)
    if cycle is None:
        return None
    if cycle.population == 0:
        return PatternKind.EXTINCT
    if cycle.dx or cycle.dy:
        return PatternKind.SPACESHIP
    if cycle.period == 1:
        return PatternKind.STILL_LIFE
    return PatternKind.OSCILLATOR
