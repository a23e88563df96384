"""Session statistics entity"""
from dataclasses import dataclass
from datetime import datetime
from typing import Dict, Optional

from rps_engine.domain.entities.choice import Result

# Aggregate counter bumped for each result
COUNTER_FIELDS: Dict[Result, str] = {
    Result.WIN: "wins",
    Result.LOSS: "losses",
    Result.TIE: "ties",
}


@dataclass
class SessionStats:
    """Running tally of a session's rounds.

    Invariant: wins + losses + ties == total_games, and total_games equals the
    number of rounds stored for the session.
    """

    session_id: str
    wins: int = 0
    losses: int = 0
    ties: int = 0
    total_games: int = 0
    last_played: Optional[datetime] = None

    @classmethod
    def zero(cls, session_id: str) -> 'SessionStats':
        """Stats of a session that has never played (or was reset)"""
        return cls(session_id=session_id)

    def apply(self, result: Result, played_at: datetime) -> 'SessionStats':
        """Return a copy with one more round of the given result counted"""
        counts = {
            "wins": self.wins,
            "losses": self.losses,
            "ties": self.ties,
        }
        counts[COUNTER_FIELDS[result]] += 1
        return SessionStats(
            session_id=self.session_id,
            total_games=self.total_games + 1,
            last_played=played_at,
            **counts
        )

    def to_dict(self) -> dict:
        """Convert to dictionary for storage"""
        return {
            "session_id": self.session_id,
            "wins": self.wins,
            "losses": self.losses,
            "ties": self.ties,
            "total_games": self.total_games,
            "last_played": self.last_played
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'SessionStats':
        """Create from dictionary"""
        return cls(
            session_id=data["session_id"],
            wins=data.get("wins", 0),
            losses=data.get("losses", 0),
            ties=data.get("ties", 0),
            total_games=data.get("total_games", 0),
            last_played=data.get("last_played")
        )
