"""Field checks shared by request DTOs"""
from typing import Any

from rps_engine.domain.entities.choice import Choice
from rps_engine.domain.errors import ValidationError

MAX_SESSION_ID_LENGTH = 128


def validate_session_id(value: Any, field: str = 'sessionId') -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field} must be a non-empty string", field=field)
    if len(value) > MAX_SESSION_ID_LENGTH:
        raise ValidationError(
            f"{field} must be at most {MAX_SESSION_ID_LENGTH} characters", field=field
        )
    return value


def validate_choice(value: Any, field: str = 'player_choice') -> Choice:
    try:
        return Choice(value)
    except ValueError:
        raise ValidationError(
            f"{field} must be one of {', '.join(Choice.values())}", field=field
        ) from None
