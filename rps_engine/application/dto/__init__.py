from .play_round_request import PlayRoundRequest
from .play_round_response import PlayRoundResponse
from .session_request import SessionRequest
from .session_stats_response import SessionStatsResponse
from .game_history_response import GameHistoryResponse

__all__ = [
    'PlayRoundRequest',
    'PlayRoundResponse',
    'SessionRequest',
    'SessionStatsResponse',
    'GameHistoryResponse',
]
