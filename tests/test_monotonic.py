import pytest

from windowstack.monotonic import (
    max_histogram_area,
    max_rectangle_area,
    nearest_smaller_bounds,
    next_greater_to_right,
    stock_span,
    trapped_water,
)


def test_next_greater_decreasing_has_none():
    assert next_greater_to_right([9, 7, 5, 3]) == [-1, -1, -1, -1]


def test_next_greater_equal_value_counts():
    assert next_greater_to_right([2, 2]) == [2, -1]


def test_next_greater_increasing_points_to_neighbour():
    values = [1, 4, 6, 8]
    assert next_greater_to_right(values) == values[1:] + [-1]


@pytest.mark.parametrize("values", [[3, 1, 4, 1, 5, 9, 2, 6], [5, 5, 1, 7, 0]])
def test_next_greater_is_not_smaller_and_to_the_right(values):
    result = next_greater_to_right(values)
    assert len(result) == len(values)
    for index, found in enumerate(result):
        if found != -1:
            assert found >= values[index]
            assert found in values[index + 1:]
        else:
            assert all(v < values[index] for v in values[index + 1:])


def test_next_greater_empty():
    assert next_greater_to_right([]) == []


@pytest.mark.parametrize("heights", [[2, 1, 5, 6, 2, 3], [4, 4, 4], [1, 3, 2]])
def test_nearest_smaller_bounds_invariants(heights):
    bounds = nearest_smaller_bounds(heights)
    assert len(bounds) == len(heights)
    for index, (left, right) in enumerate(bounds):
        assert -1 <= left < index < right <= len(heights)
        if left != -1:
            assert heights[left] < heights[index]
        if right != len(heights):
            assert heights[right] < heights[index]
        assert all(h >= heights[index] for h in heights[left + 1:right])


def test_nearest_smaller_bounds_constant():
    assert nearest_smaller_bounds([4, 4, 4]) == [(-1, 3), (-1, 3), (-1, 3)]


def test_histogram_worked_example():
    assert max_histogram_area([2, 1, 5, 6, 2, 3]) == 10


def test_histogram_constant_heights():
    assert max_histogram_area([3, 3, 3, 3]) == 12


def test_histogram_single_bar_and_empty():
    assert max_histogram_area([7]) == 7
    assert max_histogram_area([]) == 0


@pytest.mark.parametrize("heights", [[1, 8, 2, 6], [5, 1, 1, 1, 1]])
def test_histogram_at_least_tallest_bar_and_full_width(heights):
    area = max_histogram_area(heights)
    assert area >= max(heights)
    assert area >= min(heights) * len(heights)


def test_rectangle_all_ones():
    assert max_rectangle_area([[1, 1, 1], [1, 1, 1]]) == 6


def test_rectangle_all_zeros():
    assert max_rectangle_area([[0, 0], [0, 0]]) == 0


def test_rectangle_single_row_matches_histogram():
    row = [1, 0, 1, 1, 1, 0]
    assert max_rectangle_area([row]) == max_histogram_area(row)


def test_rectangle_zero_breaks_column():
    matrix = [[1, 1], [0, 1], [1, 1]]
    assert max_rectangle_area(matrix) == 3


def test_rectangle_empty():
    assert max_rectangle_area([]) == 0


def test_stock_span_worked_example():
    assert stock_span([100, 80, 60, 70, 60, 75, 85]) == [1, 1, 1, 2, 1, 4, 6]


def test_stock_span_increasing():
    assert stock_span([1, 2, 3, 4, 5]) == [1, 2, 3, 4, 5]


def test_stock_span_decreasing():
    assert stock_span([5, 4, 3]) == [1, 1, 1]


def test_stock_span_equal_prices_extend():
    assert stock_span([2, 2, 2]) == [1, 2, 3]


def test_trapped_water_constant_is_zero():
    assert trapped_water([4, 4, 4, 4]) == 0


def test_trapped_water_short_inputs():
    assert trapped_water([]) == 0
    assert trapped_water([5]) == 0
    assert trapped_water([5, 1]) == 0


def test_trapped_water_small_example():
    assert trapped_water([3, 0, 2]) == 1


def test_trapped_water_non_negative():
    assert trapped_water([0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1]) >= 0