"""Tests for the pattern library and pattern analysis."""

import pytest
from game_of_rife.core.live_set import EMPTY, live_set
from game_of_rife.core.world import World
from game_of_rife.patterns import (
    BLINKER, BLOCK, GLIDER, PATTERNS, get_pattern, cells_from_strings,
    PatternKind, Cycle, normalize, find_cycle, classify,
)


class TestLibrary:
    """Test named patterns and text parsing."""

    def test_pattern_sizes(self):
        """Classic patterns have their usual populations."""
        assert len(BLINKER) == 3
        assert len(BLOCK) == 4
        assert len(GLIDER) == 5

    def test_get_pattern_translates(self):
        """Named lookup with offset."""
        assert get_pattern("block", 10, -2) == live_set([(10, -2), (10, -1), (11, -2), (11, -1)])
        assert get_pattern("glider") == GLIDER

    def test_get_pattern_unknown(self):
        """Unknown names raise ValueError."""
        with pytest.raises(ValueError, match="Unknown pattern"):
            get_pattern("spaceship")

    def test_registry(self):
        """Every registered pattern is reachable by name."""
        assert set(PATTERNS) == {"blinker", "block", "glider"}

    def test_cells_from_strings(self):
        """Rows are y, columns are x."""
        cells = cells_from_strings(["XXX", "..X", ".X."])
        assert cells == GLIDER

    def test_cells_from_strings_origin_and_marker(self):
        """Custom origin and live character."""
        cells = cells_from_strings(["#.", ".#"], x=-1, y=5, alive="#")
        assert cells == live_set([(-1, 5), (0, 6)])

    def test_render_parses_back(self):
        """Rendering and parsing agree."""
        world = World(GLIDER).forward(2)
        min_x, min_y, _, _ = world.bounds()
        parsed = cells_from_strings(world.render().splitlines(), x=min_x, y=min_y)
        assert parsed == world.cells


class TestAnalysis:
    """Test cycle detection and classification."""

    def test_normalize(self):
        """Shape is moved to the origin."""
        shape, origin = normalize(live_set([(5, 7), (6, 7)]))
        assert shape == live_set([(0, 0), (1, 0)])
        assert origin == (5, 7)

    def test_normalize_empty(self):
        """Empty set normalizes to itself."""
        assert normalize(EMPTY) == (EMPTY, (0, 0))

    def test_blinker_cycle(self):
        """Blinker: period 2, no drift."""
        assert find_cycle(World(BLINKER)) == Cycle(start=0, period=2, dx=0, dy=0, population=3)

    def test_glider_cycle(self):
        """Glider: period 4, drifts (+1, -1)."""
        assert find_cycle(World(GLIDER)) == Cycle(start=0, period=4, dx=1, dy=-1, population=5)

    def test_cycle_not_found(self):
        """Too few steps to see a repeat."""
        assert find_cycle(World(GLIDER), max_steps=3) is None
        assert classify(World(GLIDER), max_steps=3) is None

    @pytest.mark.parametrize("cells,kind", [
        (BLOCK, PatternKind.STILL_LIFE),
        (live_set([(0, 0), (0, 1), (1, 0)]), PatternKind.STILL_LIFE),
        (BLINKER, PatternKind.OSCILLATOR),
        (GLIDER, PatternKind.SPACESHIP),
        (live_set([(0, 0), (1, 0)]), PatternKind.EXTINCT),
        (EMPTY, PatternKind.EXTINCT),
    ])
    def test_classify(self, cells, kind):
        """Long-run behavior of classic patterns."""
        assert classify(World(cells)) == kind

    def test_settling_pattern_cycle_start(self):
        """L-tromino settles into a block after one tick."""
        cycle = find_cycle(World([(0, 0), (0, 1), (1, 0)]))
        assert cycle.start == 1
        assert cycle.period == 1
