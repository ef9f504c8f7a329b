"""Dynamic-programming examples: Fibonacci and the house-robber problem."""

from __future__ import annotations

from functools import lru_cache
from typing import List, Sequence


def fibonacci_sequence(n: int) -> List[int]:
    """Return the Fibonacci numbers F(0) through F(n)."""
    if n < 0:
        raise ValueError("index must be non-negative")
    sequence = [0, 1][: n + 1]
    while len(sequence) <= n:
        sequence.append(sequence[-1] + sequence[-2])
    return sequence


def fibonacci(n: int) -> int:
    """Return the ``n``-th Fibonacci number."""
    return fibonacci_sequence(n)[-1]


def rob_memoized(nums: Sequence[int]) -> int:
    """Maximum sum of non-adjacent elements, by top-down memoisation."""
    values = tuple(nums)

    @lru_cache(maxsize=None)
    def best(index: int) -> int:
        if index == 0:
            return values[0]
        if index < 0:
            return 0
        pick = values[index] + best(index - 2)
        skip = best(index - 1)
        return max(pick, skip)

    return best(len(values) - 1)


def rob_tabulated(nums: Sequence[int]) -> int:
    """Maximum sum of non-adjacent elements, by bottom-up tabulation."""
    if not nums:
        return 0
    table = [nums[0]]
    for i, value in enumerate(nums[1:], start=1):
        pick = value + (table[i - 2] if i > 1 else 0)
        table.append(max(pick, table[i - 1]))
    return table[-1]


def rob_constant_space(nums: Sequence[int]) -> int:
    """Maximum sum of non-adjacent elements, in constant extra space."""
    if not nums:
        return 0
    previous, before_previous = nums[0], 0
    for i, value in enumerate(nums[1:], start=1):
        pick = value + (before_previous if i > 1 else 0)
        previous, before_previous = max(pick, previous), previous
    return previous