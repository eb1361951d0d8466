"""
Session Registry - in-memory map of independent game sessions.

Each session owns its own board and search engine; nothing is shared
between them. `processing_ids` marks sessions with an AI search in flight
so a second request can be refused instead of racing the first.
"""

import itertools
from typing import Callable, Dict, Optional, Set

from c4backend.app.services.game_session import GameSession


class SessionRegistry:
    def __init__(self, factory: Callable[[], GameSession] = GameSession):
        self._factory = factory
        self._sessions: Dict[int, GameSession] = {}
        self._ids = itertools.count(1)
        self.processing_ids: Set[int] = set()

    def create(self) -> int:
        session_id = next(self._ids)
        self._sessions[session_id] = self._factory()
        return session_id

    def get(self, session_id: int) -> Optional[GameSession]:
        return self._sessions.get(session_id)

    def delete(self, session_id: int) -> bool:
        self.processing_ids.discard(session_id)
        return self._sessions.pop(session_id, None) is not None

    def __len__(self):
        return len(self._sessions)


# Singleton
registry = SessionRegistry()
