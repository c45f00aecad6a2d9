"""
Tests for core/row.py and core/result.py

The row of disks - construction, access, swaps, predicates.
"""

import pytest

from alternating_disks.core.row import DiskColor, Row
from alternating_disks.core.result import SortResult

L = DiskColor.LIGHT
D = DiskColor.DARK


class TestDiskColor:
    """Tests for the DiskColor enum."""

    def test_codes(self):
        assert DiskColor.LIGHT.code == "L"
        assert DiskColor.DARK.code == "D"

    def test_from_code(self):
        assert DiskColor.from_code("L") is DiskColor.LIGHT
        assert DiskColor.from_code("D") is DiskColor.DARK

    def test_from_code_unknown(self):
        with pytest.raises(ValueError):
            DiskColor.from_code("X")


class TestRowConstruction:
    """Tests for building rows."""

    def test_single_pair(self):
        row = Row(1)
        assert row.colors() == (D, L)

    def test_alternates_starting_dark(self):
        row = Row(4)
        for i in range(row.total_count()):
            expected = D if i % 2 == 0 else L
            assert row.get(i) == expected

    def test_counts(self):
        row = Row(5)
        assert row.total_count() == 10
        assert row.light_count() == 5
        assert row.dark_count() == 5
        assert len(row) == 10

    def test_zero_fails(self):
        with pytest.raises(ValueError):
            Row(0)

    def test_negative_fails(self):
        with pytest.raises(ValueError):
            Row(-2)

    def test_non_integer_fails(self):
        with pytest.raises(ValueError):
            Row(1.5)

    def test_from_colors_codes(self):
        row = Row.from_colors("L L D D".split())
        assert row.colors() == (L, L, D, D)

    def test_from_colors_enum_and_int(self):
        row = Row.from_colors([D, 0, 1, L])
        assert row.render() == "D L D L"

    def test_from_colors_empty(self):
        with pytest.raises(ValueError):
            Row.from_colors([])

    def test_from_colors_odd_length(self):
        with pytest.raises(ValueError):
            Row.from_colors(["L", "D", "L"])

    def test_from_colors_unbalanced(self):
        with pytest.raises(ValueError):
            Row.from_colors(["L", "L", "L", "D"])

    def test_copy_is_independent(self):
        row = Row(2)
        clone = row.copy()
        clone.swap(0)
        assert row.render() == "D L D L"
        assert clone.render() == "L D D L"


class TestRowAccess:
    """Tests for get, swap and index checks."""

    def test_is_valid_index(self):
        row = Row(2)
        assert row.is_valid_index(0)
        assert row.is_valid_index(3)
        assert not row.is_valid_index(4)
        assert not row.is_valid_index(-1)

    def test_get_out_of_range(self):
        with pytest.raises(IndexError):
            Row(2).get(4)

    def test_get_negative(self):
        with pytest.raises(IndexError):
            Row(2).get(-1)

    def test_swap_exchanges_neighbours(self):
        row = Row(2)
        row.swap(1)
        assert row.colors() == (D, D, L, L)

    def test_swap_last_valid_index(self):
        row = Row(2)
        row.swap(2)
        assert row.render() == "D L L D"

    def test_swap_past_end_fails(self):
        with pytest.raises(IndexError):
            Row(2).swap(3)

    def test_swap_negative_fails(self):
        with pytest.raises(IndexError):
            Row(2).swap(-1)

    def test_failed_swap_leaves_row(self):
        row = Row(2)
        with pytest.raises(IndexError):
            row.swap(3)
        assert row.render() == "D L D L"

    def test_swap_twice_restores(self):
        row = Row(3)
        row.swap(2)
        row.swap(2)
        assert row.equals(Row(3))


class TestRowRendering:
    """Tests for render, str and repr."""

    def test_render_n3(self):
        assert Row(3).render() == "D L D L D L"

    def test_render_n1(self):
        assert Row(1).render() == "D L"

    def test_str_matches_render(self):
        row = Row(2)
        assert str(row) == row.render()

    def test_repr(self):
        repr_str = repr(Row(2))
        assert "Row" in repr_str
        assert "n=2" in repr_str
        assert "D L D L" in repr_str

    def test_iter(self):
        assert list(Row(1)) == [D, L]


class TestRowPredicates:
    """Tests for equals, is_alternating and is_sorted."""

    def test_equals_same(self):
        assert Row(3).equals(Row(3))
        assert Row(3) == Row(3)

    def test_equals_after_swap(self):
        row = Row(3)
        row.swap(0)
        assert not row.equals(Row(3))
        assert row != Row(3)

    def test_equals_different_length(self):
        assert not Row(2).equals(Row(3))

    def test_eq_other_type(self):
        assert Row(1) != "D L"

    def test_new_row_is_alternating(self):
        for n in range(1, 8):
            assert Row(n).is_alternating()

    def test_not_alternating_after_swap(self):
        row = Row(2)
        row.swap(0)
        assert not row.is_alternating()

    def test_new_row_not_sorted(self):
        for n in range(1, 8):
            assert not Row(n).is_sorted()

    def test_sorted_row(self):
        row = Row.from_colors("L L L D D D".split())
        assert row.is_sorted()
        assert not row.is_alternating()

    def test_mirror_image_not_sorted(self):
        row = Row.from_colors("D D L L".split())
        assert not row.is_sorted()

    def test_empty_scan_is_false(self):
        # Force a degenerate zero-length row to check the explicit flag.
        row = Row(1)
        row._colors = row._colors[:0]
        assert not row.is_alternating()
        assert not row.is_sorted()


class TestSortResult:
    """Tests for the SortResult value object."""

    def test_holds_values(self):
        row = Row.from_colors("L D".split())
        result = SortResult(after=row, swap_count=1, pass_count=1, algorithm="left_to_right")
        assert result.after == row
        assert result.swap_count == 1
        assert result.pass_count == 1
        assert result.algorithm == "left_to_right"
        assert result.history == ()

    def test_owns_copy_of_row(self):
        row = Row(2)
        result = SortResult(after=row, swap_count=0)
        row.swap(0)
        assert result.after.render() == "D L D L"

    def test_is_frozen(self):
        result = SortResult(after=Row(1), swap_count=0)
        with pytest.raises(AttributeError):
            result.swap_count = 5

    def test_negative_swap_count_fails(self):
        with pytest.raises(ValueError):
            SortResult(after=Row(1), swap_count=-1)

    def test_repr(self):
        result = SortResult(after=Row(1), swap_count=0, algorithm="lawnmower")
        repr_str = repr(result)
        assert "SortResult" in repr_str
        assert "lawnmower" in repr_str
        assert "swaps=0" in repr_str
