from enum import IntEnum, StrEnum


class Player(IntEnum):
    HUMAN = 1
    AI = 2

    @property
    def opponent(self) -> "Player":
        return Player.AI if self is Player.HUMAN else Player.HUMAN


class Winner(StrEnum):
    HUMAN = "human"
    AI = "ai"
    DRAW = "draw"

    @classmethod
    def from_player(cls, player: Player) -> "Winner":
        return cls.HUMAN if player == Player.HUMAN else cls.AI
