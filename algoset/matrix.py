"""Algorithms over grids: rotation, spiral walks, zeroing, word search, chess."""

from __future__ import annotations

from itertools import product
from typing import MutableSequence, Sequence

BOARD_SIZE = 8


def rotate_matrix(matrix: MutableSequence[MutableSequence[int]]) -> None:
    """Rotate a square matrix 90 degrees clockwise, in place."""
    rotated = [list(column) for column in zip(*reversed(matrix))]
    for row, new_row in zip(matrix, rotated):
        row[:] = new_row


def spiral_order(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Return the elements read clockwise in a spiral from the top-left corner."""
    rows = [list(row) for row in matrix]
    order: list[int] = []
    while rows:
        order.extend(rows.pop(0))
        rows = [list(column) for column in zip(*rows)][::-1]
    return order


def set_zeroes(matrix: MutableSequence[MutableSequence[int]]) -> None:
    """Zero, in place, every row and column that holds a zero."""
    zero_rows = set()
    zero_columns = set()
    for r, row in enumerate(matrix):
        for c, value in enumerate(row):
            if value == 0:
                zero_rows.add(r)
                zero_columns.add(c)
    for r, row in enumerate(matrix):
        if r in zero_rows:
            row[:] = [0] * len(row)
        else:
            for c in zero_columns:
                row[c] = 0


def exist(board: Sequence[Sequence[str]], word: str) -> bool:
    """Tell whether ``word`` can be traced through horizontally or vertically
    adjacent cells, using each cell at most once. An empty word is never found."""
    if not word or not board or not board[0]:
        return False
    rows, columns = len(board), len(board[0])
    visited: set[tuple[int, int]] = set()

    def trace(index: int, r: int, c: int) -> bool:
        if not (0 <= r < rows and 0 <= c < columns):
            return False
        if (r, c) in visited or board[r][c] != word[index]:
            return False
        if index == len(word) - 1:
            return True
        visited.add((r, c))
        found = any(
            trace(index + 1, r + dr, c + dc)
            for dr, dc in ((1, 0), (-1, 0), (0, 1), (0, -1))
        )
        visited.discard((r, c))
        return found

    return any(trace(0, r, c) for r in range(rows) for c in range(columns))


def queens_attack_the_king(
    queens: Sequence[Sequence[int]], king: Sequence[int]
) -> list[list[int]]:
    """Return the queens on an 8x8 board that attack the king directly.

    Directions are scanned with the row step outermost, each from -1 to 1;
    a king off the board is attacked by nobody.
    """
    occupied = {(q[0], q[1]) for q in queens}
    king_x, king_y = king[0], king[1]
    if not (0 <= king_x < BOARD_SIZE and 0 <= king_y < BOARD_SIZE):
        return []
    attackers: list[list[int]] = []
    for dx, dy in product((-1, 0, 1), repeat=2):
        if dx == 0 and dy == 0:
            continue
        x, y = king_x + dx, king_y + dy
        while 0 <= x < BOARD_SIZE and 0 <= y < BOARD_SIZE:
            if (x, y) in occupied:
                attackers.append([x, y])
                break
            x += dx
            y += dy
    return attackers