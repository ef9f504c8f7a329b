"""Backtracking searches: grid paths, keypad words, N-Queens, rat maze and sudoku."""

from __future__ import annotations

from functools import lru_cache
from typing import Iterator, List, Sequence

KEYPAD = ("", "", "abc", "def", "ghi", "jkl", "mno", "pqrs", "tuv", "wxyz")

Board = List[str]
Grid = List[List[int]]


def grid_ways(rows: int, cols: int) -> int:
    """Count right/down paths from the top-left to the bottom-right cell."""

    @lru_cache(maxsize=None)
    def ways(r: int, c: int) -> int:
        if r == rows - 1 and c == cols - 1:
            return 1
        if r >= rows or c >= cols:
            return 0
        return ways(r, c + 1) + ways(r + 1, c)

    return ways(0, 0)


def keypad_combinations(number: int) -> List[str]:
    """Return the letter strings a phone keypad spells for the digits of ``number``."""
    if number < 0:
        raise ValueError("number must be non-negative")
    digits = [int(d) for d in str(number)] if number else []

    def translate(index: int, current: str) -> Iterator[str]:
        if index == len(digits):
            yield current
            return
        for letter in KEYPAD[digits[index]]:
            yield from translate(index + 1, current + letter)

    return list(translate(0, ""))


def n_queens(n: int) -> Iterator[Board]:
    """Yield every placement of ``n`` non-attacking queens, one row string per row."""
    if n < 0:
        raise ValueError("board size must be non-negative")
    columns: set = set()
    diagonals: set = set()
    anti_diagonals: set = set()
    placement: List[int] = []

    def place(row: int) -> Iterator[Board]:
        if row == n:
            yield ["." * col + "Q" + "." * (n - col - 1) for col in placement]
            return
        for col in range(n):
            if col in columns or row - col in diagonals or row + col in anti_diagonals:
                continue
            columns.add(col)
            diagonals.add(row - col)
            anti_diagonals.add(row + col)
            placement.append(col)
            yield from place(row + 1)
            placement.pop()
            columns.discard(col)
            diagonals.discard(row - col)
            anti_diagonals.discard(row + col)

    return place(0)


def count_n_queens(n: int) -> int:
    """Count the solutions of the N-Queens puzzle."""
    return sum(1 for _ in n_queens(n))


def format_board(board: Sequence[str]) -> str:
    """Render a board with its cells separated by spaces."""
    return "\n".join(" ".join(row) for row in board)


_MOVES = (("D", 1, 0), ("R", 0, 1), ("U", -1, 0), ("L", 0, -1))


def rat_maze_paths(maze: Sequence[Sequence[int]]) -> List[str]:
    """Return every path of D/R/U/L steps through open (1) cells of a square maze."""
    n = len(maze)
    if any(len(row) != n for row in maze):
        raise ValueError("maze must be square")
    if n == 0 or maze[0][0] != 1:
        return []
    visited = [[False] * n for _ in range(n)]
    result: List[str] = []

    def open_cell(row: int, col: int) -> bool:
        return 0 <= row < n and 0 <= col < n and maze[row][col] == 1 and not visited[row][col]

    def explore(row: int, col: int, path: str) -> None:
        if row == n - 1 and col == n - 1:
            result.append(path)
            return
        visited[row][col] = True
        for step, dr, dc in _MOVES:
            if open_cell(row + dr, col + dc):
                explore(row + dr, col + dc, path + step)
        visited[row][col] = False

    explore(0, 0, "")
    return result


def _is_safe(grid: Grid, row: int, col: int, digit: int) -> bool:
    if any(grid[i][col] == digit for i in range(9)):
        return False
    if digit in grid[row]:
        return False
    top, left = row // 3 * 3, col // 3 * 3
    return all(
        grid[i][j] != digit for i in range(top, top + 3) for j in range(left, left + 3)
    )


def solve_sudoku(grid: Sequence[Sequence[int]]) -> Grid:
    """Return a solved copy of a 9x9 sudoku in which 0 marks an empty cell."""
    if len(grid) != 9 or any(len(row) != 9 for row in grid):
        raise ValueError("sudoku grid must be 9x9")
    if any(not 0 <= cell <= 9 for row in grid for cell in row):
        raise ValueError("sudoku cells must hold 0 to 9")
    board = [list(row) for row in grid]

    def solve(position: int) -> bool:
        if position == 81:
            return True
        row, col = divmod(position, 9)
        if board[row][col] != 0:
            return solve(position + 1)
        for digit in range(1, 10):
            if _is_safe(board, row, col, digit):
                board[row][col] = digit
                if solve(position + 1):
                    return True
                board[row][col] = 0
        return False

    if not solve(0):
        raise ValueError("sudoku has no solution")
    return board


def format_sudoku(grid: Sequence[Sequence[int]]) -> str:
    """Render a sudoku grid as rows of space-separated digits."""
    return "\n".join(" ".join(str(cell) for cell in row) for row in grid)