"""Fixed and variable sized sliding-window problems."""

from __future__ import annotations

from collections import Counter, deque
from collections.abc import Sequence


def count_anagram_occurrences(text: str, pattern: str) -> int:
    """Number of windows of ``text`` that are anagrams of ``pattern``."""
    size = len(pattern)
    if size == 0 or size > len(text):
        return 0
    wanted = Counter(pattern)
    window = Counter(text[:size])
    found = int(window == wanted)
    for incoming, outgoing in zip(text[size:], text):
        window[incoming] += 1
        window[outgoing] -= 1
        if not window[outgoing]:
            del window[outgoing]
        found += window == wanted
    return found


def first_negatives(values: Sequence[int], k: int) -> list[int]:
    """First negative value of every window of size ``k``, or 0 if it has none."""
    negatives: deque[int] = deque()
    result: list[int] = []
    if k < 1:
        return result
    for end, value in enumerate(values):
        if value < 0:
            negatives.append(value)
        start = end - k + 1
        if start >= 0:
            result.append(negatives[0] if negatives else 0)
            if values[start] < 0:
                negatives.popleft()
    return result


def window_maximums(values: Sequence[int], k: int) -> list[int]:
    """Maximum of every window of size ``k``."""
    candidates: deque[int] = deque()
    result: list[int] = []
    if k < 1:
        return result
    for end, value in enumerate(values):
        while candidates and values[candidates[-1]] < value:
            candidates.pop()
        candidates.append(end)
        start = end - k + 1
        if start >= 0:
            result.append(values[candidates[0]])
            if candidates[0] == start:
                candidates.popleft()
    return result


def max_window_sum(values: Sequence[int], k: int) -> int:
    """Largest sum of ``k`` consecutive values.

    Raises ValueError when no window of size ``k`` fits in ``values``.
    """
    if not 1 <= k <= len(values):
        raise ValueError("window size must be between 1 and the number of values")
    total = sum(values[:k])
    best = total
    for incoming, outgoing in zip(values[k:], values):
        total += incoming - outgoing
        best = max(best, total)
    return best


def longest_subarray_with_sum(values: Sequence[int], target: int) -> int:
    """Length of the longest run summing to ``target``, or -1 if none does.

    The values must not be negative.
    """
    best = -1
    total = 0
    start = 0
    for end, value in enumerate(values):
        total += value
        while total > target and start <= end:
            total -= values[start]
            start += 1
        if total == target and start <= end:
            best = max(best, end - start + 1)
    return best


def longest_unique_substring(text: str) -> int:
    """Length of the longest substring with no repeated character."""
    last_seen: dict[str, int] = {}
    best = 0
    start = 0
    for end, char in enumerate(text):
        if last_seen.get(char, -1) >= start:
            start = last_seen[char] + 1
        last_seen[char] = end
        best = max(best, end - start + 1)
    return best


def longest_substring_with_k_unique(text: str, k: int) -> int:
    """Length of the longest substring with exactly ``k`` distinct characters, or -1."""
    window: Counter[str] = Counter()
    best = -1
    start = 0
    for end, char in enumerate(text):
        window[char] += 1
        while len(window) > k:
            outgoing = text[start]
            window[outgoing] -= 1
            if not window[outgoing]:
                del window[outgoing]
            start += 1
        if len(window) == k:
            best = max(best, end - start + 1)
    return best


def min_window_substring(text: str, pattern: str) -> str:
    """Shortest substring of ``text`` holding every character of ``pattern``.

    Repeated characters of ``pattern`` must be matched as often as they occur.
    The leftmost shortest window wins; "" is returned when there is none.
    """
    if not pattern:
        return ""
    needed = Counter(pattern)
    window: Counter[str] = Counter()
    matched = 0
    best: tuple[int, int] | None = None
    start = 0
    for end, char in enumerate(text):
        window[char] += 1
        if window[char] <= needed[char]:
            matched += 1
        while matched == len(pattern):
            if best is None or end + 1 - start < best[1] - best[0]:
                best = (start, end + 1)
            outgoing = text[start]
            window[outgoing] -= 1
            if window[outgoing] < needed[outgoing]:
                matched -= 1
            start += 1
    if best is None:
        return ""
    return text[best[0]:best[1]]