"""Session-scoped request DTO (stats, history, reset)"""
from dataclasses import dataclass

from rps_engine.application.dto.validation import validate_session_id


@dataclass
class SessionRequest:
    """Request DTO naming a single session"""

    session_id: str

    @classmethod
    def from_dict(cls, data: dict) -> 'SessionRequest':
        """Create from dictionary (Connect protocol)"""
        return cls(session_id=validate_session_id(data.get('sessionId')))

    @classmethod
    def from_snake_case(cls, data: dict) -> 'SessionRequest':
        """Create from snake_case dictionary (REST API)"""
        return cls(session_id=validate_session_id(data.get('session_id'), field='session_id'))
