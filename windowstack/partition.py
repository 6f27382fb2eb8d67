"""Interval-partition dynamic programming problems."""

from __future__ import annotations

from collections.abc import Sequence


def egg_drop(eggs: int, floors: int) -> int:
    """Fewest drops that always find the critical floor with ``eggs`` eggs.

    Raises ValueError when ``eggs`` is below one or ``floors`` is negative.
    """
    if eggs < 1:
        raise ValueError("at least one egg is required")
    if floors < 0:
        raise ValueError("the number of floors cannot be negative")
    fewer_eggs = list(range(floors + 1))
    for _ in range(2, eggs + 1):
        current = [0] * (floors + 1)
        for height in range(1, floors + 1):
            current[height] = 1 + min(
                max(fewer_eggs[drop - 1], current[height - drop])
                for drop in range(1, height + 1)
            )
        fewer_eggs = current
    return fewer_eggs[floors]


def count_true_parenthesizations(expression: str) -> int:
    """Number of ways to parenthesize a boolean expression so it is true.

    The expression alternates operands ``T`` or ``F`` with the operators
    ``&``, ``|`` and ``^``, as in ``"T|F&T"``. Any other operand counts as
    neither true nor false and any other operator yields no way at all.
    An empty expression has no way; one of even length raises ValueError.
    """
    if not expression:
        return 0
    if len(expression) % 2 == 0:
        raise ValueError("expression must alternate operands and operators")
    operands = expression[0::2]
    operators = expression[1::2]
    size = len(operands)
    ways: dict[tuple[int, int], tuple[int, int]] = {
        (index, index): (int(symbol == "T"), int(symbol == "F"))
        for index, symbol in enumerate(operands)
    }
    for length in range(2, size + 1):
        for low in range(size - length + 1):
            high = low + length - 1
            true_ways = false_ways = 0
            for split in range(low, high):
                left_true, left_false = ways[low, split]
                right_true, right_false = ways[split + 1, high]
                operator = operators[split]
                if operator == "&":
                    true_ways += left_true * right_true
                    false_ways += (
                        left_false * right_true
                        + left_false * right_false
                        + left_true * right_false
                    )
                elif operator == "|":
                    true_ways += (
                        left_false * right_true
                        + left_true * right_true
                        + left_true * right_false
                    )
                    false_ways += left_false * right_false
                elif operator == "^":
                    true_ways += left_false * right_true + left_true * right_false
                    false_ways += left_true * right_true + left_false * right_false
            ways[low, high] = (true_ways, false_ways)
    return ways[0, size - 1][0]


def matrix_chain_cost(dimensions: Sequence[int]) -> int:
    """Fewest scalar multiplications needed to multiply a chain of matrices.

    Matrix ``i`` has shape ``dimensions[i] x dimensions[i + 1]``. Chains of
    fewer than two matrices cost nothing.
    """
    count = len(dimensions) - 1
    if count < 2:
        return 0
    cost: dict[tuple[int, int], int] = {(index, index): 0 for index in range(count)}
    for length in range(2, count + 1):
        for first in range(count - length + 1):
            last = first + length - 1
            cost[first, last] = min(
                cost[first, split]
                + cost[split + 1, last]
                + dimensions[first] * dimensions[split + 1] * dimensions[last + 1]
                for split in range(first, last)
            )
    return cost[0, count - 1]


def is_palindrome(text: str) -> bool:
    """Whether ``text`` reads the same backwards."""
    return text == text[::-1]


def min_palindrome_cuts(text: str) -> int:
    """Fewest cuts that split ``text`` into palindromes."""
    size = len(text)
    if size == 0:
        return 0
    palindrome = [[False] * size for _ in range(size)]
    cuts: list[int] = []
    for end, last in enumerate(text):
        best = end
        for start in range(end + 1):
            if text[start] == last and (end - start < 2 or palindrome[start + 1][end - 1]):
                palindrome[start][end] = True
                best = min(best, 0 if start == 0 else cuts[start - 1] + 1)
        cuts.append(best)
    return cuts[-1]