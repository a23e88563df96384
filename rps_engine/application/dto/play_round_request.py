"""Play round request DTO"""
from dataclasses import dataclass

from rps_engine.application.dto.validation import validate_choice, validate_session_id
from rps_engine.domain.entities.choice import Choice


@dataclass
class PlayRoundRequest:
    """Request DTO for playing one round"""

    session_id: str
    player_choice: Choice

    @classmethod
    def from_dict(cls, data: dict) -> 'PlayRoundRequest':
        """Create from dictionary (Connect protocol)"""
        return cls(
            session_id=validate_session_id(data.get('sessionId')),
            player_choice=validate_choice(data.get('playerChoice'), field='playerChoice')
        )

    @classmethod
    def from_snake_case(cls, data: dict) -> 'PlayRoundRequest':
        """Create from snake_case dictionary (REST API)"""
        return cls(
            session_id=validate_session_id(data.get('session_id'), field='session_id'),
            player_choice=validate_choice(data.get('player_choice'))
        )
