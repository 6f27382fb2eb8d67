"""Stacks that report their minimum in constant time."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Protocol


class MinStack:
    """Stack keeping a parallel stack of running minimums."""

    def __init__(self) -> None:
        self._items: list[int] = []
        self._minimums: list[int] = []

    def push(self, value: int) -> None:
        """Push a value."""
        self._items.append(value)
        if self._minimums:
            self._minimums.append(min(value, self._minimums[-1]))
        else:
            self._minimums.append(value)

    def pop(self) -> int:
        """Remove and return the top value; IndexError on underflow."""
        if not self._items:
            raise IndexError("underflow")
        self._minimums.pop()
        return self._items.pop()

    def minimum(self) -> int:
        """Smallest value currently held."""
        if not self._minimums:
            raise IndexError("minimum of empty stack")
        return self._minimums[-1]

    def __len__(self) -> int:
        return len(self._items)


class EncodedMinStack:
    """Stack tracking its minimum with a single extra slot.

    When a new minimum ``x`` arrives, ``2 * x - previous_min`` is stored in its
    place, which lets the previous minimum be recovered on pop.
    """

    def __init__(self) -> None:
        self._items: list[int] = []
        self._minimum = 0

    def push(self, value: int) -> None:
        """Push a value."""
        if not self._items:
            self._items.append(value)
            self._minimum = value
        elif value < self._minimum:
            self._items.append(2 * value - self._minimum)
            self._minimum = value
        else:
            self._items.append(value)

    def pop(self) -> int:
        """Remove and return the top value; IndexError on underflow."""
        if not self._items:
            raise IndexError("underflow")
        top = self._items.pop()
        if top < self._minimum:
            value = self._minimum
            self._minimum = 2 * self._minimum - top
            return value
        return top

    def minimum(self) -> int:
        """Smallest value currently held."""
        if not self._items:
            raise IndexError("minimum of empty stack")
        return self._minimum

    def __len__(self) -> int:
        return len(self._items)


class _QueryStack(Protocol):
    def push(self, value: int) -> None: ...
    def pop(self) -> int: ...
    def minimum(self) -> int: ...


PUSH, POP, GET_MIN = 1, 2, 3


def run_queries(stack: _QueryStack, queries: Iterable[Sequence[int]]) -> list[int]:
    """Apply queries to a stack and return the minimums reported.

    Each query is ``(1, x)`` to push ``x``, ``(2,)`` to pop or ``(3,)`` to
    report the minimum. Other codes are ignored.
    """
    reported: list[int] = []
    for code, *args in queries:
        if code == PUSH:
            (value,) = args
            stack.push(value)
        elif code == POP:
            stack.pop()
        elif code == GET_MIN:
            reported.append(stack.minimum())
    return reported