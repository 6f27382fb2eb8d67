# windowstack

A small collection of classic array and string algorithms with plain
Python interfaces. It needs nothing beyond the standard library.

## Modules

### `windowstack.monotonic`

Monotonic-stack techniques:

- `next_greater_to_right(values)` – for each item, the nearest value to its right that is not smaller than it, or `-1` where there is none.
- `nearest_smaller_bounds(heights)` – for each bar, a `(left, right)` pair of indices of the nearest strictly smaller bar on each side; `-1` and `len(heights)` where there is none.
- `max_histogram_area(heights)` – largest rectangle area in a histogram, `0` for an empty one.
- `max_rectangle_area(matrix)` – area of the largest all-ones rectangle in a 0/1 matrix given as rows.
- `stock_span(prices)` – for each day, the number of consecutive days up to and including it whose price did not exceed it.
- `trapped_water(heights)` – the sum, over interior positions, of the absolute difference between the running maximum from the left and the running maximum from the right (both starting from 0).

### `windowstack.minstack`

Stacks that report their minimum in constant time:

- `MinStack` – keeps a parallel stack of running minimums.
- `EncodedMinStack` – keeps a single minimum and stores an encoded value (`2 * x - previous_minimum`) whenever a new minimum `x` is pushed, so the previous minimum can be recovered on pop.

Both have `push(value)`, `pop()` (returns the value removed), `minimum()` and
`len()`. `pop()` and `minimum()` raise `IndexError` on an empty stack.

- `run_queries(stack, queries)` – applies queries to a stack and returns a list of the minimums reported. A query is `(1, x)` to push `x`, `(2,)` to pop or `(3,)` to report the minimum; other codes are ignored.

```python
from windowstack.minstack import MinStack, run_queries

stack = MinStack()
stack.push(5)
stack.push(3)
stack.minimum()   # 3
stack.pop()       # 3
stack.minimum()   # 5

run_queries(MinStack(), [(1, 4), (1, 2), (3,), (2,), (3,)])   # [2, 4]
```

### `windowstack.partition`

Interval ("array partition") dynamic programming:

- `egg_drop(eggs, floors)` – fewest drops that always find the critical floor; raises `ValueError` for fewer than one egg or a negative number of floors.
- `count_true_parenthesizations(expression)` – ways to bracket an expression such as `"T|F&T^F"` (operands `T`/`F`, operators `&`, `|`, `^`) so that it evaluates to true. An empty expression gives `0`; one of even length raises `ValueError`.
- `matrix_chain_cost(dimensions)` – fewest scalar multiplications for a matrix chain where matrix `i` is `dimensions[i] x dimensions[i + 1]`.
- `is_palindrome(text)` and `min_palindrome_cuts(text)` – the fewest cuts that split `text` into palindromes.

### `windowstack.window`

Fixed and variable sliding windows:

- `count_anagram_occurrences(text, pattern)` – windows of `text` that are anagrams of `pattern`.
- `first_negatives(values, k)` – first negative value of each window of size `k`, `0` where a window has none.
- `window_maximums(values, k)` – maximum of each window of size `k`.
- `max_window_sum(values, k)` – largest sum of `k` consecutive values; raises `ValueError` if no such window fits.
- `longest_subarray_with_sum(values, target)` – length of the longest run summing to `target`, or `-1`; the values must not be negative.
- `longest_unique_substring(text)` – length of the longest substring with no repeated character.
- `longest_substring_with_k_unique(text, k)` – length of the longest substring with exactly `k` distinct characters, or `-1`.
- `min_window_substring(text, pattern)` – leftmost shortest substring holding every character of `pattern` (with repeats), or `""`.

```python
from windowstack.window import window_maximums, min_window_substring

window_maximums([1, 3, -1, -3, 5, 3, 6, 7], 3)   # [3, 3, 5, 5, 6, 7]
min_window_substring("ADOBECODEBANC", "ABC")     # "BANC"
```

## What it does not do

The package is a library of functions and classes only. It has no
command-line program and does not read problems from standard input; call
the functions from Python.

## Running the tests

```
pip install -e ".[test]"
pytest
```