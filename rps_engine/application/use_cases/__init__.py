from .play_round_use_case import PlayRoundUseCase
from .get_session_stats_use_case import GetSessionStatsUseCase
from .get_game_history_use_case import GetGameHistoryUseCase
from .reset_session_use_case import ResetSessionUseCase

__all__ = [
    'PlayRoundUseCase',
    'GetSessionStatsUseCase',
    'GetGameHistoryUseCase',
    'ResetSessionUseCase',
]
