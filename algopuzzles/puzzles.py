"""Assorted search and dynamic-programming puzzles."""

from __future__ import annotations

from bisect import bisect_left
from collections import deque
from collections.abc import Iterable, Sequence

_RECENT_WINDOW = 3000


class RecentCounter:
    """Counts pings that fall within the last 3000 time units."""

    def __init__(self) -> None:
        self._calls: deque[int] = deque()

    def ping(self, t: int) -> int:
        """Record a ping at time ``t``; return how many pings lie in [t - 3000, t]."""
        self._calls.append(t)
        while self._calls and self._calls[0] < t - _RECENT_WINDOW:
            self._calls.popleft()
        return len(self._calls)


def broken_calc(x: int, y: int) -> int:
    """Return the fewest doublings and decrements that turn ``x`` into ``y``."""
    if y <= x:
        return x - y
    steps = 0
    while y > x:
        if y % 2 == 0:
            y //= 2
            steps += 1
        else:
            y = (y + 1) // 2
            steps += 2
    return steps + (x - y)


def climb_stairs(n: int) -> int:
    """Return the number of ways to climb ``n`` steps taking 1 or 2 at a time.

    Zero or a negative ``n`` gives 0.
    """
    if n <= 0:
        return 0
    previous, current = 1, 1
    for _ in range(n - 1):
        previous, current = current, previous + current
    return current


def length_of_lis(nums: Iterable[int]) -> int:
    """Return the length of the longest strictly increasing subsequence."""
    tails: list[int] = []
    for value in nums:
        position = bisect_left(tails, value)
        if position == len(tails):
            tails.append(value)
        else:
            tails[position] = value
    return len(tails)


def max_area_of_island(grid: Sequence[Sequence[int]]) -> int:
    """Return the size of the largest 4-connected group of cells equal to 1.

    The grid is not modified; its width is taken from the first row.
    """
    if not grid or not grid[0]:
        return 0
    rows, cols = len(grid), len(grid[0])
    visited: set[tuple[int, int]] = set()
    best = 0
    for row in range(rows):
        for col in range(cols):
            if grid[row][col] != 1 or (row, col) in visited:
                continue
            visited.add((row, col))
            stack = [(row, col)]
            area = 0
            while stack:
                r, c = stack.pop()
                area += 1
                for nr, nc in ((r - 1, c), (r + 1, c), (r, c - 1), (r, c + 1)):
                    if (
                        0 <= nr < rows
                        and 0 <= nc < cols
                        and (nr, nc) not in visited
                        and grid[nr][nc] == 1
                    ):
                        visited.add((nr, nc))
                        stack.append((nr, nc))
            best = max(best, area)
    return best


def search_matrix(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Return True if ``target`` is in a matrix sorted along rows and columns."""
    if not matrix:
        return False
    rows, cols = len(matrix), len(matrix[0])
    row, col = 0, cols - 1
    while row < rows and col >= 0:
        value = matrix[row][col]
        if value == target:
            return True
        if target < value:
            col -= 1
        else:
            row += 1
    return False