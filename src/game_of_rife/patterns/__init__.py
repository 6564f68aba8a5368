"""Named patterns and long-run pattern analysis."""

from .library import BLINKER, BLOCK, GLIDER, PATTERNS, get_pattern, cells_from_strings
from .analysis import PatternKind, Cycle, normalize, find_cycle, classify

__all__ = [
    'BLINKER',
    'BLOCK',
    'GLIDER',
    'PATTERNS',
    'get_pattern',
    'cells_from_strings',
    'PatternKind',
    'Cycle',
    'normalize',
    'find_cycle',
    'classify',
]
