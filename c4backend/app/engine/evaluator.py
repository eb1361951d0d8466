"""
Static position evaluation for the search leaves.

Positive scores favour `ai_player`. The score is the center-column term plus
the sum over every length-4 window (horizontal, vertical and both diagonals).
Defence is weighted above offence at the three-piece tier: an open opponent
three costs twice what an open own three earns.
"""

from typing import List

from c4backend.app.engine.board import BoardState
from c4backend.app.engine.constants import (
    ROWS, COLS, EMPTY, WIN_LENGTH, CENTER_COL,
    WIN_SCORE, THREE_SCORE, TWO_SCORE, OPPONENT_THREE_SCORE, CENTER_SCORE,
)
from c4backend.app.models.enums import Player


def score_window(window: List[int], ai_player: Player) -> int:
    ai_count = window.count(ai_player)
    opp_count = window.count(ai_player.opponent)
    empty_count = window.count(EMPTY)

    score = 0
    if ai_count == 4:
        score += WIN_SCORE
    elif ai_count == 3 and empty_count == 1:
        score += THREE_SCORE
    elif ai_count == 2 and empty_count == 2:
        score += TWO_SCORE

    if opp_count == 3 and empty_count == 1:
        score += OPPONENT_THREE_SCORE
    return score


def iter_windows(board: BoardState):
    """Yields every run of WIN_LENGTH consecutive cells on the board."""
    g = board.grid
    span = range(WIN_LENGTH)
    # Horizontal
    for r in range(ROWS):
        for c in range(COLS - WIN_LENGTH + 1):
            yield [g[r][c + i] for i in span]
    # Vertical
    for c in range(COLS):
        for r in range(ROWS - WIN_LENGTH + 1):
            yield [g[r + i][c] for i in span]
    # Diagonal \
    for r in range(ROWS - WIN_LENGTH + 1):
        for c in range(COLS - WIN_LENGTH + 1):
            yield [g[r + i][c + i] for i in span]
    # Diagonal /
    for r in range(WIN_LENGTH - 1, ROWS):
        for c in range(COLS - WIN_LENGTH + 1):
            yield [g[r - i][c + i] for i in span]


def score_position(board: BoardState, ai_player: Player) -> int:
    ai_player = Player(ai_player)
    opponent = ai_player.opponent

    score = 0
    # Center control
    for r in range(ROWS):
        cell = board.grid[r][CENTER_COL]
        if cell == ai_player:
            score += CENTER_SCORE
        elif cell == opponent:
            score -= CENTER_SCORE

    for window in iter_windows(board):
        score += score_window(window, ai_player)
    return score
