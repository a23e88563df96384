"""Session stats response DTO"""
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from rps_engine.domain.entities.session_stats import SessionStats


def format_timestamp(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value else None


@dataclass
class SessionStatsResponse:
    """Response DTO carrying a session aggregate"""

    stats: Optional[SessionStats] = None
    error: Optional[str] = None

    def to_dict(self) -> dict:
        """Convert to camelCase dictionary (Connect protocol)"""
        return {
            "sessionId": self.stats.session_id,
            "wins": self.stats.wins,
            "losses": self.stats.losses,
            "ties": self.stats.ties,
            "totalGames": self.stats.total_games,
            "lastPlayed": format_timestamp(self.stats.last_played)
        }

    def to_snake_case(self) -> dict:
        """Convert to snake_case dictionary (REST API)"""
        return {
            "session_id": self.stats.session_id,
            "wins": self.stats.wins,
            "losses": self.stats.losses,
            "ties": self.stats.ties,
            "total_games": self.stats.total_games,
            "last_played": format_timestamp(self.stats.last_played)
        }
