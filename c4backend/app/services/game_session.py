"""
Game Session - the outward-facing controller.

Single source of truth for one game:
- Move processing (human and AI)
- Terminal state resolution (win / draw)
- Status snapshots for the presentation layer

Turn order is driven by the caller: the session never switches turns or
triggers an AI move on its own, so the front end controls pacing.
"""

import logging
from typing import Optional

from c4backend.app.core.settings import SearchSettings, load_settings
from c4backend.app.engine.board import BoardState
from c4backend.app.engine.moves import is_legal, legal_columns, apply_move
from c4backend.app.engine.search import SearchEngine
from c4backend.app.engine.win import check_win, is_board_full
from c4backend.app.models.enums import Player, Winner
from c4backend.app.schemas.game_schema import GameStatus

logger = logging.getLogger(__name__)


class GameSession:
    def __init__(self, search_engine: Optional[SearchEngine] = None, settings: Optional[SearchSettings] = None):
        if search_engine is None:
            settings = settings or load_settings().search
            search_engine = SearchEngine(
                min_depth=settings.min_depth,
                max_depth=settings.max_depth,
                time_budget_ms=settings.time_budget_ms,
            )
        self.search_engine = search_engine
        self.board = BoardState()

    @property
    def current_player(self) -> Player:
        return self.board.current_player

    @property
    def game_over(self) -> bool:
        return self.board.game_over

    @property
    def winner(self) -> Optional[Winner]:
        return self.board.winner

    def reset(self) -> GameStatus:
        self.board.reset()
        logger.info("Session reset")
        return self.snapshot()

    def attempt_move(self, column: int, player: Player) -> bool:
        """
        Drops a piece for `player`.
        Returns False (board untouched) if the game is over or the move is illegal.
        """
        if self.board.game_over or not is_legal(self.board, column):
            logger.warning("Rejected move: column=%s player=%s game_over=%s", column, player, self.board.game_over)
            return False

        player = Player(player)
        row = apply_move(self.board, column, player)
        logger.info("%s played column %d (row %d)", player.name, column, row)

        if check_win(self.board, row, column, player):
            self.board.winner = Winner.from_player(player)
            logger.info("Game over: %s wins", player.name)
        elif is_board_full(self.board):
            self.board.winner = Winner.DRAW
            logger.info("Game over: draw")
        return True

    def switch_turn(self):
        self.board.current_player = self.board.current_player.opponent

    def request_ai_move(self) -> Optional[int]:
        """Searches for the AI's column and plays it. Returns None if no move was made."""
        if self.board.game_over:
            return None

        result = self.search_engine.search(self.board, Player.AI)
        logger.info(
            "AI search: column=%s score=%s depth=%d nodes=%d time=%dms",
            result.best_column, result.score, result.depth_reached,
            result.nodes_searched, result.time_ms,
        )
        if result.best_column is None:
            return None

        if not self.attempt_move(result.best_column, Player.AI):
            return None
        return result.best_column

    def snapshot(self) -> GameStatus:
        return GameStatus(
            board=tuple(tuple(row) for row in self.board.grid),
            current_player=self.board.current_player,
            game_over=self.board.game_over,
            winner=self.board.winner,
            legal_columns=tuple(legal_columns(self.board)),
        )

    def board_text(self) -> str:
        return self.board.render()
