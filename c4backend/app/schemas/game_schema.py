from pydantic import BaseModel, ConfigDict
from typing import Optional, Tuple

from c4backend.app.models.enums import Player, Winner


class GameStatus(BaseModel):
    # Read-only projection handed to the presentation layer
    model_config = ConfigDict(frozen=True)

    board: Tuple[Tuple[int, ...], ...]
    current_player: Player
    game_over: bool
    winner: Optional[Winner] = None
    legal_columns: Tuple[int, ...]


class MoveRequest(BaseModel):
    column: int
    player: Player = Player.HUMAN


class AIMoveResponse(BaseModel):
    column: Optional[int] = None
    status: GameStatus


class SessionCreated(BaseModel):
    id: int
    status: GameStatus
