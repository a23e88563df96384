"""Game history response DTO"""
from dataclasses import dataclass, field
from typing import List, Optional

from rps_engine.application.dto.session_stats_response import format_timestamp
from rps_engine.domain.entities.game_round import GameRound


@dataclass
class GameHistoryResponse:
    """Response DTO listing a session's rounds, newest first"""

    session_id: str
    rounds: List[GameRound] = field(default_factory=list)
    error: Optional[str] = None

    def to_dict(self) -> dict:
        """Convert to camelCase dictionary (Connect protocol)"""
        return {
            "sessionId": self.session_id,
            "rounds": [
                {
                    "id": r.id,
                    "sessionId": r.session_id,
                    "playerChoice": r.player_choice.value,
                    "computerChoice": r.computer_choice.value,
                    "result": r.result.value,
                    "playedAt": format_timestamp(r.played_at)
                }
                for r in self.rounds
            ]
        }

    def to_snake_case(self) -> dict:
        """Convert to snake_case dictionary (REST API)"""
        return {
            "session_id": self.session_id,
            "rounds": [
                {
                    "id": r.id,
                    "session_id": r.session_id,
                    "player_choice": r.player_choice.value,
                    "computer_choice": r.computer_choice.value,
                    "result": r.result.value,
                    "played_at": format_timestamp(r.played_at)
                }
                for r in self.rounds
            ]
        }
