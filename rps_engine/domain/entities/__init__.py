from .choice import Choice, Result, BEATS
from .game_round import GameRound
from .session_stats import SessionStats, COUNTER_FIELDS

__all__ = [
    'Choice',
    'Result',
    'BEATS',
    'GameRound',
    'SessionStats',
    'COUNTER_FIELDS'
]
