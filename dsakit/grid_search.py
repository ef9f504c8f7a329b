"""Breadth-first searches over grids and word graphs."""

from __future__ import annotations

import string
from collections import deque
from typing import Iterable, Sequence

_EIGHT_WAYS = tuple((dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1))
_FOUR_WAYS = ((-1, 0), (0, 1), (1, 0), (0, -1))


def count_islands(grid: Sequence[Sequence[str]]) -> int:
    """Count groups of ``'1'`` cells joined horizontally, vertically or diagonally."""
    rows = len(grid)
    if rows == 0:
        return 0
    cols = len(grid[0])
    visited = set()
    count = 0
    for row in range(rows):
        for col in range(cols):
            if grid[row][col] != "1" or (row, col) in visited:
                continue
            count += 1
            visited.add((row, col))
            queue = deque([(row, col)])
            while queue:
                r, c = queue.popleft()
                for dr, dc in _EIGHT_WAYS:
                    nr, nc = r + dr, c + dc
                    if (
                        0 <= nr < rows
                        and 0 <= nc < cols
                        and grid[nr][nc] == "1"
                        and (nr, nc) not in visited
                    ):
                        visited.add((nr, nc))
                        queue.append((nr, nc))
    return count


def oranges_rotting(grid: Sequence[Sequence[int]]) -> int:
    """Minutes until every fresh orange (1) is rotten, spreading from rotten ones (2).

    Returns -1 when some fresh orange can never rot.
    """
    rows = len(grid)
    if rows == 0:
        return 0
    cols = len(grid[0])
    queue = deque()
    rotten = set()
    fresh = 0
    for r in range(rows):
        for c in range(cols):
            if grid[r][c] == 2:
                queue.append((r, c, 0))
                rotten.add((r, c))
            elif grid[r][c] == 1:
                fresh += 1
    minutes = 0
    infected = 0
    while queue:
        r, c, time = queue.popleft()
        minutes = max(minutes, time)
        for dr, dc in _FOUR_WAYS:
            nr, nc = r + dr, c + dc
            if (
                0 <= nr < rows
                and 0 <= nc < cols
                and grid[nr][nc] == 1
                and (nr, nc) not in rotten
            ):
                rotten.add((nr, nc))
                queue.append((nr, nc, time + 1))
                infected += 1
    return minutes if infected == fresh else -1


def ladder_length(begin_word: str, end_word: str, word_list: Iterable[str]) -> int:
    """Number of words in the shortest one-letter-change chain, or 0 when none exists."""
    remaining = set(word_list)
    remaining.discard(begin_word)
    queue = deque([(begin_word, 1)])
    while queue:
        word, steps = queue.popleft()
        if word == end_word:
            return steps
        for i in range(len(word)):
            for letter in string.ascii_lowercase:
                candidate = word[:i] + letter + word[i + 1:]
                if candidate in remaining:
                    remaining.discard(candidate)
                    queue.append((candidate, steps + 1))
    return 0