from .handlers import (
    SERVICE_PATH,
    ConnectPlayRoundHandler,
    ConnectSessionStatsHandler,
    ConnectGameHistoryHandler,
    ConnectResetSessionHandler
)

__all__ = [
    'SERVICE_PATH',
    'ConnectPlayRoundHandler',
    'ConnectSessionStatsHandler',
    'ConnectGameHistoryHandler',
    'ConnectResetSessionHandler'
]
