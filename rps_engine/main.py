"""
Rock-Paper-Scissors round engine - entry point

Supports both HTTP REST and Connect protocols via environment variables:
- ENABLE_REST=true (default) - Enable HTTP REST endpoints
- ENABLE_CONNECT=true (default) - Enable Connect protocol endpoints
"""
import os
import logging

import sentry_sdk
from tornado import web, ioloop
from sentry_sdk.integrations.tornado import TornadoIntegration

from rps_engine.config.container import Container
from rps_engine.presentation.http.handlers import (
    HealthHandler,
    MetricsHandler,
    PlayRoundHandler,
    SessionStatsHandler,
    GameHistoryHandler,
    ResetSessionHandler
)
from rps_engine.presentation.connect.handlers import (
    SERVICE_PATH,
    ConnectPlayRoundHandler,
    ConnectSessionStatsHandler,
    ConnectGameHistoryHandler,
    ConnectResetSessionHandler
)

logger = logging.getLogger(__name__)

# Configuration
version = os.environ.get('APP_VERSION', '1.0.0')

# Protocol flags
ENABLE_REST = os.environ.get('ENABLE_REST', 'true').lower() == 'true'
ENABLE_CONNECT = os.environ.get('ENABLE_CONNECT', 'true').lower() == 'true'


def init_sentry():
    """Initialize Sentry; without SENTRY_DSN the SDK stays disabled"""
    sentry_sdk.init(
        dsn=os.environ.get('SENTRY_DSN'),
        integrations=[TornadoIntegration()],
        traces_sample_rate=float(os.environ.get('SENTRY_TRACES_SAMPLE_RATE', '1.0')),
        environment=os.environ.get('SENTRY_ENVIRONMENT', 'development'),
        profiles_sample_rate=float(os.environ.get('SENTRY_PROFILES_SAMPLE_RATE', '0')),
        debug=os.environ.get('SENTRY_DEBUG', 'false').lower() == 'true',
        release=f"rps-engine@{version}"
    )


def make_app(container: Container = None, enable_rest: bool = None, enable_connect: bool = None):
    """Create Tornado application"""
    container = container or Container.get_instance()
    enable_rest = ENABLE_REST if enable_rest is None else enable_rest
    enable_connect = ENABLE_CONNECT if enable_connect is None else enable_connect

    play_round = {"play_round_use_case": container.get_play_round_use_case()}
    session_stats = {"session_stats_use_case": container.get_session_stats_use_case()}
    game_history = {"game_history_use_case": container.get_game_history_use_case()}
    reset_session = {"reset_session_use_case": container.get_reset_session_use_case()}

    # Base routes (always enabled)
    routes = [
        (r"/health", HealthHandler, {"version": version}),
        (r"/metrics", MetricsHandler),
    ]

    # HTTP REST endpoints
    if enable_rest:
        logger.info("Enabling HTTP REST endpoints")
        routes.extend([
            (r"/play-round", PlayRoundHandler, play_round),
            (r"/sessions/([^/]+)/stats", SessionStatsHandler, session_stats),
            (r"/sessions/([^/]+)/history", GameHistoryHandler, game_history),
            (r"/sessions/([^/]+)/reset", ResetSessionHandler, reset_session),
        ])

    # Connect protocol endpoints
    if enable_connect:
        logger.info("Enabling Connect protocol endpoints")
        routes.extend([
            (SERVICE_PATH + r"/PlayRound", ConnectPlayRoundHandler, play_round),
            (SERVICE_PATH + r"/GetSessionStats", ConnectSessionStatsHandler, session_stats),
            (SERVICE_PATH + r"/GetGameHistory", ConnectGameHistoryHandler, game_history),
            (SERVICE_PATH + r"/ResetSession", ConnectResetSessionHandler, reset_session),
        ])

    return web.Application(routes)


def main():
    logging.basicConfig(level=os.environ.get('LOG_LEVEL', 'INFO').upper())
    init_sentry()

    app = make_app()
    port = int(os.environ.get('PORT', 8082))
    app.listen(port)

    protocols = []
    if ENABLE_REST:
        protocols.append("REST")
    if ENABLE_CONNECT:
        protocols.append("Connect")

    logger.info(f"RPS engine started on :{port}")
    logger.info(f"Protocols enabled: {', '.join(protocols) or 'none'}")
    if ENABLE_REST:
        logger.info("  REST:    POST /play-round, GET /sessions/<id>/stats, "
                    "GET /sessions/<id>/history, POST /sessions/<id>/reset")
    if ENABLE_CONNECT:
        logger.info(f"  Connect: POST {SERVICE_PATH}/{{PlayRound,GetSessionStats,GetGameHistory,ResetSession}}")

    ioloop.IOLoop.current().start()


if __name__ == "__main__":
    main()
