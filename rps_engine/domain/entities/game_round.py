"""Game round entity"""
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from rps_engine.domain.entities.choice import Choice, Result


@dataclass(frozen=True)
class GameRound:
    """Domain entity representing one played round.

    Rounds are append-only: once stored they are never changed, only erased
    together with the rest of their session on reset.
    """

    session_id: str
    player_choice: Choice
    computer_choice: Choice
    result: Result
    played_at: datetime
    id: Optional[int] = None

    def with_id(self, round_id: int) -> 'GameRound':
        """Copy of this round carrying the id assigned by storage"""
        return GameRound(
            session_id=self.session_id,
            player_choice=self.player_choice,
            computer_choice=self.computer_choice,
            result=self.result,
            played_at=self.played_at,
            id=round_id
        )

    def to_dict(self) -> dict:
        """Convert to dictionary for storage"""
        return {
            "round_id": self.id,
            "session_id": self.session_id,
            "player_choice": self.player_choice.value,
            "computer_choice": self.computer_choice.value,
            "result": self.result.value,
            "played_at": self.played_at
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'GameRound':
        """Create from dictionary"""
        return cls(
            session_id=data["session_id"],
            player_choice=Choice(data["player_choice"]),
            computer_choice=Choice(data["computer_choice"]),
            result=Result(data["result"]),
            played_at=data["played_at"],
            id=data.get("round_id")
        )
