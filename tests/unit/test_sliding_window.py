"""Tests for the circular sliding window."""

import pytest

from virchual.core.sliding_window import get_wrapped, sliding_window, window_range


class TestSlidingWindow:
    def test_window_over_left_edge(self):
        assert sliding_window([1, 2, 3, 4, 5], 0, 1) == [5, 1, 2]

    def test_window_inside(self):
        assert sliding_window([1, 2, 3, 4, 5], 1, 1) == [1, 2, 3]

    def test_window_over_right_edge(self):
        assert sliding_window([1, 2, 3, 4, 5], 4, 1) == [4, 5, 1]

    def test_window_over_left_edge_radius_two(self):
        assert sliding_window([1, 2, 3, 4, 5], 1, 2) == [5, 1, 2, 3, 4]

    def test_window_inside_radius_two(self):
        assert sliding_window([1, 2, 3, 4, 5], 2, 2) == [1, 2, 3, 4, 5]

    def test_window_over_right_edge_radius_two(self):
        assert sliding_window([1, 2, 3, 4, 5], 4, 2) == [3, 4, 5, 1, 2]

    def test_radius_zero_is_center_only(self):
        assert sliding_window(["a", "b", "c"], 2, 0) == ["c"]

    @pytest.mark.parametrize("length", [1, 2, 3, 7])
    @pytest.mark.parametrize("radius", [0, 1, 2, 4])
    def test_window_length_is_always_odd(self, length, radius):
        source = list(range(length))
        for start in range(length):
            assert len(sliding_window(source, start, radius)) == 2 * radius + 1

    def test_large_radius_repeats_items(self):
        assert sliding_window([1, 2], 0, 3) == [2, 1, 2, 1, 2, 1, 2]

    def test_empty_source_reads_none(self):
        assert sliding_window([], 0, 1) == [None, None, None]

    def test_negative_radius_rejected(self):
        with pytest.raises(AssertionError):
            sliding_window([1, 2, 3], 0, -1)

    def test_same_inputs_same_output(self):
        source = ["a", "b", "c", "d"]
        assert sliding_window(source, 3, 1) == sliding_window(source, 3, 1)
        assert source == ["a", "b", "c", "d"]


class TestGetWrapped:
    def test_in_range(self):
        assert get_wrapped([1, 2, 3], 1) == 2

    def test_below_range_reads_from_end(self):
        assert get_wrapped([1, 2, 3], -1) == 3

    def test_above_range_reads_from_start(self):
        assert get_wrapped([1, 2, 3], 3) == 1

    def test_empty_source(self):
        assert get_wrapped([], 0) is None
        assert get_wrapped([], -1) is None


class TestWindowRange:
    def test_indices_around_start(self):
        assert window_range(0, 1, 5) == [4, 0, 1]
        assert window_range(4, 2, 10) == [2, 3, 4, 5, 6]

    def test_no_items(self):
        assert window_range(0, 1, 0) == []
