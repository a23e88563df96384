from .handlers import (
    HealthHandler,
    MetricsHandler,
    PlayRoundHandler,
    SessionStatsHandler,
    GameHistoryHandler,
    ResetSessionHandler
)

__all__ = [
    'HealthHandler',
    'MetricsHandler',
    'PlayRoundHandler',
    'SessionStatsHandler',
    'GameHistoryHandler',
    'ResetSessionHandler'
]
