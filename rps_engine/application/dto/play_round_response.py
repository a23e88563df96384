"""Play round response DTO"""
from dataclasses import dataclass
from typing import Optional

from rps_engine.application.dto.session_stats_response import SessionStatsResponse
from rps_engine.domain.entities.choice import Choice, Result
from rps_engine.domain.entities.session_stats import SessionStats


@dataclass
class PlayRoundResponse:
    """Response DTO for a played round"""

    player_choice: Optional[Choice] = None
    computer_choice: Optional[Choice] = None
    result: Optional[Result] = None
    session_stats: Optional[SessionStats] = None
    error: Optional[str] = None

    def to_dict(self) -> dict:
        """Convert to camelCase dictionary (Connect protocol)"""
        return {
            "playerChoice": self.player_choice.value,
            "computerChoice": self.computer_choice.value,
            "result": self.result.value,
            "sessionStats": SessionStatsResponse(stats=self.session_stats).to_dict()
        }

    def to_snake_case(self) -> dict:
        """Convert to snake_case dictionary (REST API)"""
        return {
            "player_choice": self.player_choice.value,
            "computer_choice": self.computer_choice.value,
            "result": self.result.value,
            "session_stats": SessionStatsResponse(stats=self.session_stats).to_snake_case()
        }
