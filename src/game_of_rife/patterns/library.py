"""Classic Conway test patterns as live sets.

Coordinates use y growing downward when drawn with ``World.render``, so the
glider below travels toward +x, -y.
"""

from typing import Dict, Iterable

from ..core.live_set import LiveSet, live_set, translate

# Period-2 oscillator, horizontal phase centered on the origin
BLINKER: LiveSet = live_set([(-1, 0), (0, 0), (1, 0)])

# Stable 2x2 still life
BLOCK: LiveSet = live_set([(0, 0), (0, 1), (1, 0), (1, 1)])

# Period-4 spaceship, moves by (+1, -1) every period
GLIDER: LiveSet = live_set([(0, 0), (1, 0), (2, 0), (2, 1), (1, 2)])

PATTERNS: Dict[str, LiveSet] = {
    'blinker': BLINKER,
    'block': BLOCK,
    'glider': GLIDER,
}


def get_pattern(name: str, x: int = 0, y: int = 0) -> LiveSet:
    """Look up a named pattern, shifted by (x, y).

    Raises:
        ValueError: If the name is unknown
    """
    try:
        cells = PATTERNS[name]
    except KeyError:
        raise ValueError(f"Unknown pattern {name!r}, expected one of {sorted(PATTERNS)}") from None
    return translate(cells, x, y)


def cells_from_strings(rows: Iterable[str], x: int = 0, y: int = 0, alive: str = 'X') -> LiveSet:
    """Parse text rows into a live set.

    Each row is one y coordinate (first row at ``y``), each character one x
    coordinate (first column at ``x``). Any character other than ``alive``
    is dead.

    Args:
        rows: Lines of the picture, e.g. ['.X.', '..X', 'XXX']
        x: X coordinate of the first column
        y: Y coordinate of the first row
        alive: Character marking a live cell

    Returns:
        Live set of the marked cells
    """
    return live_set(
        (x + col, y + row)
        for row, line in enumerate(rows)
        for col, char in enumerate(line)
        if char == alive
    )
