"""Tests for live-set algebra and candidate generation."""

import numpy as np
import pytest
from game_of_rife.core.cell import Cell
from game_of_rife.core.live_set import (
    EMPTY, live_set, contains, union, intersection, difference, size, translate, bounds
)
from game_of_rife.core.candidates import candidates
from game_of_rife.core.neighborhood import with_neighbors


class TestLiveSetAlgebra:
    """Test set operations over cells."""

    def setup_method(self):
        """Create two overlapping sets for each test."""
        self.a = live_set([(0, 0), (1, 0), (2, 0)])
        self.b = live_set([(1, 0), (1, 1)])

    def test_constructor_coerces_to_cells(self):
        """Plain pairs become Cells and duplicates collapse."""
        cells = live_set([(0, 0), [0, 0], Cell(1, 1)])
        assert cells == frozenset({Cell(0, 0), Cell(1, 1)})
        assert all(isinstance(cell, Cell) for cell in cells)

    @pytest.mark.parametrize("pair", [(0.9, 0), (1, -0.5), ("3", "4"), (1.0, 2)])
    def test_constructor_rejects_non_integers(self, pair):
        """Float and string coordinates raise instead of being rounded."""
        with pytest.raises(TypeError):
            live_set([pair])

    def test_constructor_accepts_numpy_integers(self):
        """numpy integer coordinates become plain ints."""
        cells = live_set([(np.int64(2), np.int32(-3))])
        assert cells == live_set([(2, -3)])
        assert all(type(cell.x) is int for cell in cells)

    def test_contains(self):
        """Membership test on alive and dead cells."""
        assert contains(self.a, (1, 0))
        assert contains(self.a, Cell(2, 0))
        assert not contains(self.a, (1, 1))

    def test_union(self):
        """Union holds cells from either set."""
        assert union(self.a, self.b) == live_set([(0, 0), (1, 0), (2, 0), (1, 1)])

    def test_intersection(self):
        """Intersection holds cells from both sets."""
        assert intersection(self.a, self.b) == live_set([(1, 0)])

    def test_difference(self):
        """Difference keeps cells of the first set missing from the second."""
        assert difference(self.a, self.b) == live_set([(0, 0), (2, 0)])
        assert difference(self.b, self.a) == live_set([(1, 1)])

    def test_size(self):
        """Size is the cardinality."""
        assert size(self.a) == 3
        assert size(EMPTY) == 0

    def test_operations_do_not_modify_inputs(self):
        """Operands are untouched by every operation."""
        a_before, b_before = set(self.a), set(self.b)
        union(self.a, self.b)
        intersection(self.a, self.b)
        difference(self.a, self.b)
        assert set(self.a) == a_before
        assert set(self.b) == b_before

    def test_empty_set_operations(self):
        """All operations are total over the empty set."""
        assert union(EMPTY, EMPTY) == EMPTY
        assert union(self.a, EMPTY) == self.a
        assert intersection(self.a, EMPTY) == EMPTY
        assert difference(self.a, EMPTY) == self.a
        assert difference(EMPTY, self.a) == EMPTY
        assert not contains(EMPTY, (0, 0))


class TestGeometry:
    """Test translation and bounding boxes."""

    def test_translate(self):
        """Translate shifts every cell."""
        cells = live_set([(0, 0), (1, 2)])
        assert translate(cells, 3, -1) == live_set([(3, -1), (4, 1)])

    def test_bounds(self):
        """Bounds spans min and max on both axes."""
        cells = live_set([(-2, 5), (3, -1), (0, 0)])
        assert bounds(cells) == (-2, -1, 3, 5)

    def test_bounds_empty_raises(self):
        """Empty set has no bounding box."""
        with pytest.raises(ValueError):
            bounds(EMPTY)


class TestCandidates:
    """Test candidate generation."""

    def test_empty_has_no_candidates(self):
        """No live cells, nothing to consider."""
        assert candidates(EMPTY) == EMPTY

    def test_single_cell(self):
        """A single cell yields its 3x3 block."""
        cell = Cell(4, -4)
        assert candidates(frozenset({cell})) == with_neighbors(cell)

    def test_blinker_candidates(self):
        """Horizontal blinker yields a 5x3 rectangle."""
        blinker = live_set([(-1, 0), (0, 0), (1, 0)])
        expected = live_set((x, y) for x in range(-2, 3) for y in range(-1, 2))
        assert candidates(blinker) == expected

    def test_candidates_include_live_cells(self):
        """Every live cell is a candidate."""
        cells = live_set([(0, 0), (10, 10), (-5, 3)])
        assert cells <= candidates(cells)

    def test_distant_cells_are_excluded(self):
        """Cells two steps away from all live cells are not candidates."""
        cells = live_set([(0, 0)])
        assert (2, 0) not in candidates(cells)
        assert (2, 2) not in candidates(cells)
