"""Monotonic-stack algorithms over sequences of numbers."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import accumulate


def next_greater_to_right(values: Sequence[int]) -> list[int]:
    """For each value, the nearest value to its right that is not smaller, or -1."""
    stack: list[int] = []
    result: list[int] = []
    for value in reversed(values):
        while stack and stack[-1] < value:
            stack.pop()
        result.append(stack[-1] if stack else -1)
        stack.append(value)
    result.reverse()
    return result


def _previous_smaller(heights: Sequence[int], order: Iterable[int], default: int) -> dict[int, int]:
    stack: list[int] = []
    found: dict[int, int] = {}
    for index in order:
        height = heights[index]
        while stack and heights[stack[-1]] >= height:
            stack.pop()
        found[index] = stack[-1] if stack else default
        stack.append(index)
    return found


def nearest_smaller_bounds(heights: Sequence[int]) -> list[tuple[int, int]]:
    """Indices of the nearest strictly smaller value on each side.

    The left bound defaults to -1 and the right bound to ``len(heights)``.
    """
    size = len(heights)
    left = _previous_smaller(heights, range(size), -1)
    right = _previous_smaller(heights, reversed(range(size)), size)
    return [(left[index], right[index]) for index in range(size)]


def max_histogram_area(heights: Sequence[int]) -> int:
    """Largest rectangle area under a histogram; 0 for an empty one."""
    bounds = nearest_smaller_bounds(heights)
    return max(
        ((right - left - 1) * height for height, (left, right) in zip(heights, bounds)),
        default=0,
    ) if heights else 0


def max_rectangle_area(matrix: Iterable[Sequence[int]]) -> int:
    """Area of the largest all-ones rectangle in a binary matrix."""
    best = 0
    column_heights: list[int] | None = None
    for row in matrix:
        if column_heights is None:
            column_heights = [0] * len(row)
        column_heights = [
            height + 1 if cell == 1 else 0 for height, cell in zip(column_heights, row)
        ]
        best = max(best, max_histogram_area(column_heights))
    return best


def stock_span(prices: Sequence[int]) -> list[int]:
    """Number of consecutive days up to each day whose price did not exceed it."""
    stack: list[int] = []
    spans: list[int] = []
    for index, price in enumerate(prices):
        while stack and prices[stack[-1]] <= price:
            stack.pop()
        spans.append(index - (stack[-1] if stack else -1))
        stack.append(index)
    return spans


def trapped_water(heights: Sequence[int]) -> int:
    """Sum over interior positions i of |left_max(i) - right_max(i)|.

    ``left_max(i)`` is the running maximum of ``heights[:i + 1]`` and
    ``right_max(i)`` the running maximum of the last ``i + 1`` heights, both
    floored at 0.
    """
    left_max = list(accumulate(heights, max, initial=0))[1:]
    right_max = list(accumulate(reversed(heights), max, initial=0))[1:]
    return sum(
        abs(left - right) for left, right in zip(left_max[1:-1], right_max[1:-1])
    )