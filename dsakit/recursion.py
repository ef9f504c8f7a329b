"""Classic recursive algorithms: powers, counting problems, searches and puzzles."""

from __future__ import annotations

from collections import Counter
from typing import Any, Iterator, List, NamedTuple, Sequence


def power(x: int, n: int) -> int:
    """Return ``x`` raised to ``n`` by repeated squaring."""
    if n < 0:
        raise ValueError("exponent must be non-negative")
    if n == 0:
        return 1
    half = power(x, n // 2)
    squared = half * half
    return x * squared if n % 2 else squared


def tiling_ways(n: int) -> int:
    """Count the ways to tile a 2 x n floor with 2 x 1 tiles."""
    if n < 0:
        raise ValueError("length must be non-negative")
    previous, current = 1, 1
    for _ in range(n - 1):
        previous, current = current, previous + current
    return current


def binary_search(items: Sequence[Any], key: Any) -> int:
    """Return the index of ``key`` in the sorted ``items``, or -1 when absent."""

    def search(low: int, high: int) -> int:
        if low > high:
            return -1
        mid = (low + high) // 2
        if items[mid] == key:
            return mid
        if items[mid] > key:
            return search(low, mid - 1)
        return search(mid + 1, high)

    return search(0, len(items) - 1)


def binary_strings(n: int) -> List[str]:
    """Return every binary string of length ``n`` without two adjacent 1s."""
    if n < 0:
        raise ValueError("length must be non-negative")

    def build(prefix: str, remaining: int, last: str) -> Iterator[str]:
        if remaining == 0:
            yield prefix
            return
        yield from build(prefix + "0", remaining - 1, "0")
        if last != "1":
            yield from build(prefix + "1", remaining - 1, "1")

    return list(build("", n, "0"))


def count_same_end_substrings(text: str) -> int:
    """Count the substrings of ``text`` that start and end with the same character."""
    return sum(count * (count + 1) // 2 for count in Counter(text).values())


def find_all_occurrences(items: Sequence[Any], key: Any) -> List[int]:
    """Return the indices at which ``key`` occurs in ``items``."""
    return [index for index, item in enumerate(items) if item == key]


def friends_pairing(n: int) -> int:
    """Count the ways ``n`` friends can stay single or pair up."""
    if n < 1:
        raise ValueError("number of friends must be at least 1")
    if n <= 2:
        return n
    previous, current = 1, 2
    for people in range(3, n + 1):
        previous, current = current, current + (people - 1) * previous
    return current


def remove_duplicates(text: str) -> str:
    """Keep only the first occurrence of each character of ``text``."""
    return "".join(dict.fromkeys(text))


class Move(NamedTuple):
    """A single disk transfer in the Tower of Hanoi."""

    disk: int
    source: str
    destination: str

    def __str__(self) -> str:
        return f"transfer disk {self.disk} from {self.source} to {self.destination}"


def tower_of_hanoi(
    n: int, source: str, helper: str, destination: str
) -> List[Move]:
    """Return the moves that carry ``n`` disks from ``source`` to ``destination``."""
    if n < 1:
        raise ValueError("number of disks must be at least 1")

    def solve(disks: int, src: str, via: str, dest: str) -> Iterator[Move]:
        if disks == 1:
            yield Move(1, src, dest)
            return
        yield from solve(disks - 1, src, dest, via)
        yield Move(disks, src, dest)
        yield from solve(disks - 1, via, src, dest)

    return list(solve(n, source, helper, destination))