"""Round repository port (interface)"""
from abc import ABC, abstractmethod
from typing import List

from rps_engine.domain.entities.game_round import GameRound


class RoundRepositoryPort(ABC):
    """Port for the append-only round log"""

    @abstractmethod
    def add(self, game_round: GameRound) -> GameRound:
        """Store a round, returns it with a freshly assigned monotonic id"""
        pass

    @abstractmethod
    def list_by_session(self, session_id: str) -> List[GameRound]:
        """Rounds of a session, newest first (higher id first on equal timestamps)"""
        pass

    @abstractmethod
    def delete(self, round_id: int) -> None:
        """Remove a single round (only used to undo a half-recorded round)"""
        pass

    @abstractmethod
    def delete_by_session(self, session_id: str) -> int:
        """Remove every round of a session, returns how many were removed"""
        pass
