"""
Move generation and in-place apply/revert on a BoardState.

The search loop simulates moves by applying them to a scratch board and
reverting them afterwards, so `revert_move` must receive exactly the
(row, col) returned by the matching `apply_move`.
"""

from typing import List

from c4backend.app.engine.board import BoardState
from c4backend.app.engine.constants import ROWS, COLS, EMPTY
from c4backend.app.models.enums import Player


class IllegalMoveError(ValueError):
    """Raised when a piece is dropped into a full or out-of-range column."""

    def __init__(self, col: int, reason: str):
        self.col = col
        self.reason = reason
        super().__init__(f"Illegal move in column {col}: {reason}")


def is_legal(board: BoardState, col: int) -> bool:
    if col < 0 or col >= COLS:
        return False
    return board.grid[0][col] == EMPTY


def legal_columns(board: BoardState) -> List[int]:
    """Returns a list of column indices (0-6) that are not full. Empty means the board is full."""
    return [c for c in range(COLS) if board.grid[0][c] == EMPTY]


def apply_move(board: BoardState, col: int, player: Player) -> int:
    """
    Drops a piece for `player` into `col` and returns the row it landed on.
    """
    if col < 0 or col >= COLS:
        raise IllegalMoveError(col, "out of range")

    # Gravity: Find the lowest empty row
    for r in range(ROWS - 1, -1, -1):
        if board.grid[r][col] == EMPTY:
            board.grid[r][col] = int(player)
            board.move_count += 1
            return r
    raise IllegalMoveError(col, "column is full")


def revert_move(board: BoardState, row: int, col: int) -> None:
    # Not validated: the pair must come from the matching apply_move.
    board.grid[row][col] = EMPTY
    board.move_count -= 1
