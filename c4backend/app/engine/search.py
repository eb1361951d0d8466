"""
Minimax search with alpha-beta pruning, driven by iterative deepening.

Algorithm overview:

    for depth in MIN_DEPTH..MAX_DEPTH:
        score, column = minimax(scratch, depth, -inf, +inf, maximizing=True)
        if score >= WIN_SCORE:
            break  # proven win, deeper search cannot improve it

    def minimax(board, depth, alpha, beta, maximizing):
        if depth == 0 or no legal columns:
            return static_eval(board)
        if the mover wins immediately in some column:
            return +/-WIN_SCORE, that column
        for column in ascending order:
            apply, recurse with (not maximizing), revert
            keep the first column reaching the best score
            tighten alpha (max) or beta (min); stop once alpha >= beta

All simulation happens on a private copy of the live board. Every apply is
paired with a revert before the enclosing call returns.
"""

import logging
import math
import time
from dataclasses import dataclass
from typing import NamedTuple, Optional

from c4backend.app.engine.board import BoardState
from c4backend.app.engine.constants import WIN_SCORE, MIN_DEPTH, MAX_DEPTH
from c4backend.app.engine.evaluator import score_position
from c4backend.app.engine.moves import legal_columns, apply_move, revert_move
from c4backend.app.engine.win import check_win
from c4backend.app.models.enums import Player

logger = logging.getLogger(__name__)


class SearchNode(NamedTuple):
    score: float
    column: Optional[int]


@dataclass
class SearchResult:
    """Result of an iterative deepening search."""
    best_column: Optional[int]
    score: float
    depth_reached: int
    nodes_searched: int
    time_ms: int


class SearchEngine:
    def __init__(
        self,
        min_depth: int = MIN_DEPTH,
        max_depth: int = MAX_DEPTH,
        time_budget_ms: int = 0,
        pruning: bool = True,
    ):
        """
        Args:
            min_depth: First depth searched by iterative deepening
            max_depth: Deepest level searched
            time_budget_ms: If > 0, no new depth level starts once this much
                wall-clock time has elapsed. A level in progress always completes.
            pruning: Disable to run plain minimax (same move choice, more nodes)
        """
        if min_depth < 1 or max_depth < min_depth:
            raise ValueError(f"Invalid depth range {min_depth}..{max_depth}")
        if time_budget_ms < 0:
            raise ValueError("time_budget_ms must be >= 0")

        self.min_depth = min_depth
        self.max_depth = max_depth
        self.time_budget_ms = time_budget_ms
        self.pruning = pruning

        self.nodes = 0
        self._ai_player = Player.AI

    def search(self, board: BoardState, ai_player: Player = Player.AI) -> SearchResult:
        """
        Root entry point. Picks a column for `ai_player` on `board`.
        The live board is never mutated.
        """
        start = time.monotonic()
        self.nodes = 0
        self._ai_player = Player(ai_player)
        scratch = board.copy()

        best = SearchNode(-math.inf, None)
        depth_reached = 0

        for depth in range(self.min_depth, self.max_depth + 1):
            if depth_reached and self._budget_spent(start):
                logger.debug("Time budget spent after depth %d", depth_reached)
                break

            best = self._minimax(scratch, depth, -math.inf, math.inf, True)
            depth_reached = depth
            logger.debug(
                "depth=%d column=%s score=%s nodes=%d",
                depth, best.column, best.score, self.nodes,
            )

            if best.column is None:
                # Full board: nothing to search at any depth
                break
            if best.score >= WIN_SCORE:
                break

        elapsed_ms = int((time.monotonic() - start) * 1000)
        return SearchResult(
            best_column=best.column,
            score=best.score,
            depth_reached=depth_reached,
            nodes_searched=self.nodes,
            time_ms=elapsed_ms,
        )

    def choose_column(self, board: BoardState, ai_player: Player = Player.AI) -> Optional[int]:
        return self.search(board, ai_player).best_column

    def minimax(self, board: BoardState, depth: int, ai_player: Player = Player.AI) -> SearchNode:
        """Single fixed-depth search from the AI's point of view, on a scratch copy."""
        self.nodes = 0
        self._ai_player = Player(ai_player)
        return self._minimax(board.copy(), depth, -math.inf, math.inf, True)

    def _minimax(self, board: BoardState, depth: int, alpha: float, beta: float, maximizing: bool) -> SearchNode:
        self.nodes += 1
        columns = legal_columns(board)

        if depth == 0 or not columns:
            return SearchNode(score_position(board, self._ai_player), None)

        mover = self._ai_player if maximizing else self._ai_player.opponent

        # Immediate win for the side to move
        for col in columns:
            row = apply_move(board, col, mover)
            won = check_win(board, row, col, mover)
            revert_move(board, row, col)
            if won:
                return SearchNode(WIN_SCORE if maximizing else -WIN_SCORE, col)

        best_score = -math.inf if maximizing else math.inf
        best_col = columns[0]

        for col in columns:
            row = apply_move(board, col, mover)
            try:
                child = self._minimax(board, depth - 1, alpha, beta, not maximizing)
            finally:
                revert_move(board, row, col)

            # Strict comparison: the first column reaching the best score is kept
            if maximizing:
                if child.score > best_score:
                    best_score, best_col = child.score, col
                alpha = max(alpha, best_score)
            else:
                if child.score < best_score:
                    best_score, best_col = child.score, col
                beta = min(beta, best_score)

            if self.pruning and alpha >= beta:
                break  # Cutoff

        return SearchNode(best_score, best_col)

    def _budget_spent(self, start: float) -> bool:
        if self.time_budget_ms <= 0:
            return False
        return (time.monotonic() - start) * 1000 >= self.time_budget_ms
