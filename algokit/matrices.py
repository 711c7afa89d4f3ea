"""Grid problems: zeroing rows and columns, Life steps and spiral reads."""

from __future__ import annotations

from collections.abc import Sequence

_NEIGHBOURS = [(-1, -1), (-1, 0), (-1, 1), (0, 1), (1, 1), (1, 0), (1, -1), (0, -1)]


def set_zeroes(matrix: list[list[int]]) -> None:
    """Zero, in place, every row and column that holds a zero."""
    zero_rows = {r for r, row in enumerate(matrix) if 0 in row}
    zero_cols = {c for row in matrix for c, value in enumerate(row) if value == 0}
    for r, row in enumerate(matrix):
        for c in range(len(row)):
            if r in zero_rows or c in zero_cols:
                row[c] = 0


def game_of_life(board: list[list[int]]) -> None:
    """Advance a board of 0s and 1s by one Game of Life generation, in place."""
    rows = len(board)

    def live_neighbours(r: int, c: int) -> int:
        return sum(
            1
            for dr, dc in _NEIGHBOURS
            if 0 <= r + dr < rows
            and 0 <= c + dc < len(board[r + dr])
            and board[r + dr][c + dc] == 1
        )

    following = [
        [
            int(live_neighbours(r, c) in ((2, 3) if cell == 1 else (3,)))
            for c, cell in enumerate(row)
        ]
        for r, row in enumerate(board)
    ]
    for row, new_row in zip(board, following):
        row[:] = new_row


def spiral_order(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Values of ``matrix`` read clockwise from the top-left corner inwards."""
    remaining = [list(row) for row in matrix]
    result: list[int] = []
    while remaining:
        result.extend(remaining.pop(0))
        remaining = [list(column) for column in zip(*remaining)][::-1]
    return result