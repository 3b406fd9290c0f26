"""Backtracking puzzles: N queens, sudoku, and the tower of Hanoi."""

from __future__ import annotations

from typing import Iterator, Sequence

_SIZE = 9
_BOX = 3


def solve_n_queens(n: int) -> Iterator[tuple[int, ...]]:
    """Yield every placement of ``n`` non-attacking queens.

    Each solution gives the queen's column for each row, and solutions come
    in order of ascending columns row by row.
    """
    if n < 0:
        raise ValueError(f"board size must be non-negative, got {n}")
    placement: list[int] = []
    cols: set[int] = set()
    diagonals: set[int] = set()
    anti_diagonals: set[int] = set()

    def place(row: int) -> Iterator[tuple[int, ...]]:
        if row == n:
            yield tuple(placement)
            return
        for col in range(n):
            if col in cols or row - col in diagonals or row + col in anti_diagonals:
                continue
            placement.append(col)
            cols.add(col)
            diagonals.add(row - col)
            anti_diagonals.add(row + col)
            yield from place(row + 1)
            placement.pop()
            cols.discard(col)
            diagonals.discard(row - col)
            anti_diagonals.discard(row + col)

    yield from place(0)


def count_n_queens(n: int) -> int:
    """Number of solutions to the ``n`` queens problem."""
    return sum(1 for _ in solve_n_queens(n))


def _box(row: int, col: int) -> int:
    return (row // _BOX) * _BOX + col // _BOX


def solve_sudoku(grid: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return a solved copy of a 9x9 sudoku where 0 marks an empty cell.

    Raises ValueError for a malformed grid or one that has no solution.
    """
    board = [list(row) for row in grid]
    if len(board) != _SIZE or any(len(row) != _SIZE for row in board):
        raise ValueError("sudoku grid must be 9 by 9")
    rows = [set() for _ in range(_SIZE)]
    cols = [set() for _ in range(_SIZE)]
    boxes = [set() for _ in range(_SIZE)]
    empties = []
    for r, row in enumerate(board):
        for c, value in enumerate(row):
            if not isinstance(value, int) or not 0 <= value <= _SIZE:
                raise ValueError(f"invalid cell value {value!r} at ({r}, {c})")
            if value == 0:
                empties.append((r, c))
                continue
            b = _box(r, c)
            if value in rows[r] or value in cols[c] or value in boxes[b]:
                raise ValueError(f"clue {value} at ({r}, {c}) conflicts with another clue")
            rows[r].add(value)
            cols[c].add(value)
            boxes[b].add(value)

    def fill(index: int) -> bool:
        if index == len(empties):
            return True
        r, c = empties[index]
        b = _box(r, c)
        for value in range(1, _SIZE + 1):
            if value in rows[r] or value in cols[c] or value in boxes[b]:
                continue
            board[r][c] = value
            rows[r].add(value)
            cols[c].add(value)
            boxes[b].add(value)
            if fill(index + 1):
                return True
            board[r][c] = 0
            rows[r].discard(value)
            cols[c].discard(value)
            boxes[b].discard(value)
        return False

    if not fill(0):
        raise ValueError("sudoku has no solution")
    return board


def format_grid(grid: Sequence[Sequence[int]]) -> str:
    """Render a sudoku grid with blank lines between bands and gaps between boxes."""
    lines = [""]
    for i, row in enumerate(grid):
        if i % _BOX == 0:
            lines.append("")
        cells = []
        for j, value in enumerate(row):
            if j % _BOX == 0:
                cells.append("  ")
            cells.append(f"{value} ")
        lines.append("".join(cells))
    return "\n".join(lines) + "\n"


def hanoi_moves(
    disks: int,
    source: str = "YELLOW",
    destination: str = "GREEN",
    spare: str = "RED",
) -> Iterator[tuple[int, str, str]]:
    """Yield ``(disk, from_peg, to_peg)`` moves that carry ``disks`` disks to ``destination``."""
    if disks < 0:
        raise ValueError(f"number of disks must be non-negative, got {disks}")
    if disks == 0:
        return
    yield from hanoi_moves(disks - 1, source, spare, destination)
    yield (disks, source, destination)
    yield from hanoi_moves(disks - 1, spare, destination, source)