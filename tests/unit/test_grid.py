"""Unit tests for Grid and the toggle operations."""

import numpy as np
import pytest

from switchgrid.core.errors import OutOfBounds, UnknownPattern
from switchgrid.core.grid import Cell, Grid, is_won, solved, toggle, toggle_mask
from switchgrid.core.patterns import PATTERNS, Pattern, lookup


def random_grid(rng, size):
    return Grid(rng.random((size, size)) < 0.5)


class TestGrid:
    """Tests for the Grid value type."""

    def test_solved_grid(self):
        grid = solved(5)
        assert grid.size == 5
        assert len(grid) == 25
        assert grid.lit_count == 0

    def test_one_cell_per_position(self):
        grid = solved(4)
        positions = [(cell.row, cell.col) for cell in grid.cells()]
        assert len(positions) == 16
        assert set(positions) == {(r, c) for r in range(4) for c in range(4)}

    def test_cells_row_major(self):
        cells = list(solved(2).cells())
        assert cells == [
            Cell(0, 0, False), Cell(0, 1, False),
            Cell(1, 0, False), Cell(1, 1, False),
        ]

    def test_cell_id(self):
        assert Cell(3, 1, True).id == "3-1"

    def test_from_lit(self):
        grid = Grid.from_lit(3, [(0, 2), (1, 1)])
        assert grid.cell(0, 2).lit
        assert grid.cell(1, 1).lit
        assert not grid.cell(0, 0).lit
        assert grid.lit_cells() == [(0, 2), (1, 1)]

    def test_from_lit_out_of_bounds(self):
        with pytest.raises(OutOfBounds):
            Grid.from_lit(3, [(3, 0)])

    def test_state_is_read_only(self):
        grid = solved(3)
        with pytest.raises(ValueError):
            grid.lit[0, 0] = True

    def test_as_array_is_a_copy(self):
        grid = solved(3)
        arr = grid.as_array()
        arr[0, 0] = True
        assert grid.lit_count == 0

    def test_input_array_is_copied(self):
        arr = np.zeros((3, 3), dtype=bool)
        grid = Grid(arr)
        arr[1, 1] = True
        assert grid.lit_count == 0

    def test_rejects_non_square(self):
        with pytest.raises(ValueError):
            Grid(np.zeros((2, 3), dtype=bool))

    @pytest.mark.parametrize("shape", [(3, 0), (0, 3), (0,), (0, 0, 0)])
    def test_rejects_empty_non_square(self, shape):
        with pytest.raises(ValueError):
            Grid(np.zeros(shape, dtype=bool))

    def test_non_integer_cell_lookup(self):
        with pytest.raises(OutOfBounds):
            solved(3).cell(1.5, 0)

    def test_equality_and_hash(self):
        a = Grid.from_lit(3, [(1, 1)])
        b = Grid.from_lit(3, [(1, 1)])
        assert a == b
        assert hash(a) == hash(b)
        assert a != solved(3)
        assert solved(3) != solved(4)

    def test_str(self):
        assert str(Grid.from_lit(2, [(0, 1)])) == ".#\n.."

    def test_empty_grid(self):
        grid = Grid.empty()
        assert grid.size == 0
        assert len(grid) == 0
        assert list(grid.cells()) == []


class TestToggle:
    """Tests for toggle and toggle_mask."""

    def test_center_click_scenario(self):
        grid = toggle(solved(5), 2, 2, "cross")
        expected = {(2, 2), (1, 2), (3, 2), (2, 1), (2, 3)}
        assert set(grid.lit_cells()) == expected
        assert grid.lit_count == 5
        assert not is_won(grid)

    def test_second_center_click_restores(self):
        once = toggle(solved(5), 2, 2, "cross")
        twice = toggle(once, 2, 2, "cross")
        assert twice == solved(5)
        assert is_won(twice)

    def test_corner_clipping(self):
        grid = toggle(solved(5), 0, 0, "cross")
        assert set(grid.lit_cells()) == {(0, 0), (1, 0), (0, 1)}

    def test_opposite_corner_clipping(self):
        grid = toggle(solved(5), 4, 4, "cross")
        assert set(grid.lit_cells()) == {(4, 4), (3, 4), (4, 3)}

    def test_edge_clipping(self):
        grid = toggle(solved(5), 0, 2, "cross")
        assert set(grid.lit_cells()) == {(0, 2), (0, 1), (0, 3), (1, 2)}

    def test_square_pattern(self):
        grid = toggle(solved(4), 2, 2, "square2x2")
        assert set(grid.lit_cells()) == {(2, 2), (1, 2), (2, 1), (1, 1)}

    def test_lshape_pattern(self):
        grid = toggle(solved(4), 2, 2, "lshape")
        assert set(grid.lit_cells()) == {(2, 1), (2, 2), (1, 1)}

    def test_lshape_at_origin_only_flips_self(self):
        grid = toggle(solved(4), 0, 0, "lshape")
        assert grid.lit_cells() == [(0, 0)]

    def test_accepts_pattern_object(self):
        assert toggle(solved(5), 2, 2, lookup("cross")) == toggle(solved(5), 2, 2, "cross")

    def test_pattern_without_self(self):
        ring = Pattern("ring", "Ring", frozenset({(-1, 0), (1, 0), (0, -1), (0, 1)}))
        grid = toggle(solved(3), 1, 1, ring)
        assert not grid.cell(1, 1).lit
        assert grid.lit_count == 4

    def test_one_by_one_grid(self):
        grid = toggle(solved(1), 0, 0, "cross")
        assert grid.lit_cells() == [(0, 0)]

    def test_input_not_mutated(self):
        before = Grid.from_lit(5, [(4, 4)])
        snapshot = before.as_array()
        toggle(before, 2, 2, "cross")
        assert np.array_equal(before.lit, snapshot)

    def test_flips_lit_cells_off(self):
        grid = Grid.from_lit(3, [(1, 1), (0, 1)])
        result = toggle(grid, 1, 1, "cross")
        assert set(result.lit_cells()) == {(2, 1), (1, 0), (1, 2)}

    @pytest.mark.parametrize("row,col", [(-1, 0), (0, -1), (5, 0), (0, 5), (7, 7)])
    def test_out_of_bounds(self, row, col):
        with pytest.raises(OutOfBounds):
            toggle(solved(5), row, col, "cross")

    @pytest.mark.parametrize("row,col", [(2.5, 1), (1, 0.0), ("1", 1), (None, 0)])
    def test_non_integer_coordinates(self, row, col):
        with pytest.raises(OutOfBounds):
            toggle(solved(5), row, col, "cross")

    def test_numpy_integer_coordinates(self):
        grid = toggle(solved(5), np.int64(2), np.int64(2), "cross")
        assert grid == toggle(solved(5), 2, 2, "cross")

    def test_out_of_bounds_on_empty_grid(self):
        with pytest.raises(OutOfBounds):
            toggle(Grid.empty(), 0, 0, "cross")

    def test_unknown_pattern(self):
        with pytest.raises(UnknownPattern):
            toggle(solved(5), 2, 2, "zigzag")

    def test_mask_shape(self):
        mask = toggle_mask(5, 2, 2, "cross")
        assert mask.shape == (5, 5)
        assert mask.dtype == bool
        assert mask.sum() == 5


class TestToggleAlgebra:
    """Involution and order independence of toggles."""

    @pytest.mark.parametrize("pattern_id", list(PATTERNS))
    def test_involution(self, rng, pattern_id):
        for size in (1, 2, 5, 6):
            grid = random_grid(rng, size)
            for row in range(size):
                for col in range(size):
                    once = toggle(grid, row, col, pattern_id)
                    assert toggle(once, row, col, pattern_id) == grid

    @pytest.mark.parametrize("pattern_id", list(PATTERNS))
    def test_order_independence(self, rng, pattern_id):
        size = 5
        start = random_grid(rng, size)
        moves = [tuple(int(v) for v in rng.integers(0, size, 2)) for _ in range(15)]

        expected = start
        for row, col in moves:
            expected = toggle(expected, row, col, pattern_id)

        for _ in range(10):
            order = rng.permutation(len(moves))
            grid = start
            for i in order:
                grid = toggle(grid, *moves[i], pattern_id)
            assert grid == expected

    def test_toggle_is_xor_with_mask(self, rng):
        grid = random_grid(rng, 5)
        mask = toggle_mask(5, 1, 3, "cross")
        assert np.array_equal(toggle(grid, 1, 3, "cross").lit, grid.lit ^ mask)


class TestIsWon:
    """Tests for win detection."""

    def test_solved_is_won(self):
        assert is_won(solved(5))

    def test_empty_grid_is_not_won(self):
        assert not is_won(Grid.empty())
        assert not is_won(solved(0))

    def test_single_lit_cell_is_not_won(self):
        for row in range(3):
            for col in range(3):
                assert not is_won(Grid.from_lit(3, [(row, col)]))

    def test_won_iff_no_lit_cells(self, rng):
        for _ in range(20):
            grid = random_grid(rng, 4)
            assert is_won(grid) == (grid.lit_count == 0)
