"""Text and number patterns: concentric squares and a swastik figure."""

from __future__ import annotations


def square_pattern(n: int) -> list[list[int]]:
    """Square of side ``2n-1`` whose rings count down from ``n`` at the border to 1 at the centre."""
    if n < 1:
        raise ValueError(f"n must be at least 1, got {n}")
    side = 2 * n - 1
    last = side - 1
    return [
        [n - min(i, j, last - i, last - j) for j in range(side)]
        for i in range(side)
    ]


def swastik(size: int) -> list[str]:
    """Rows of a ``size`` by ``size`` swastik drawn with ``*`` on spaces."""
    if size < 0:
        raise ValueError(f"size must be non-negative, got {size}")
    half = size // 2
    grid = [[" "] * size for _ in range(size)]
    for r in range(half):
        grid[r][0] = "*"
        grid[r][half] = "*"
    for r in range(half, size):
        grid[r][half] = "*"
        grid[r][size - 1] = "*"
    for c in range(half):
        grid[half][c] = "*"
        grid[size - 1][c] = "*"
    for c in range(half, size):
        grid[0][c] = "*"
        grid[half][c] = "*"
    return ["".join(row) for row in grid]