"""HTTP REST handlers for the round engine"""
import logging
from datetime import datetime, timezone

import sentry_sdk
from tornado import web
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST

from rps_engine.application.dto.play_round_request import PlayRoundRequest
from rps_engine.application.dto.session_request import SessionRequest
from rps_engine.application.use_cases.get_game_history_use_case import GetGameHistoryUseCase
from rps_engine.application.use_cases.get_session_stats_use_case import GetSessionStatsUseCase
from rps_engine.application.use_cases.play_round_use_case import PlayRoundUseCase
from rps_engine.application.use_cases.reset_session_use_case import ResetSessionUseCase
from rps_engine.domain.errors import ValidationError
from rps_engine.presentation.tracing import parse_json_body, start_request_transaction

logger = logging.getLogger(__name__)


class HealthHandler(web.RequestHandler):
    """Health check endpoint"""

    def initialize(self, version: str = "unknown"):
        self.version = version

    def get(self):
        self.write({
            "status": "ok",
            "version": self.version,
            "timestamp": datetime.now(timezone.utc).isoformat()
        })


class MetricsHandler(web.RequestHandler):
    """Prometheus metrics endpoint"""

    def get(self):
        self.set_header('Content-Type', CONTENT_TYPE_LATEST)
        self.write(generate_latest())


class RestHandler(web.RequestHandler):
    """Common response writing for the REST endpoints"""

    def _run(self, op: str, name: str, action):
        with start_request_transaction(self.request, op=op, name=name):
            try:
                response = action()
                if response.error:
                    self.set_status(500)
                    self.write({"error": response.error})
                else:
                    self.set_status(200)
                    self.write(response.to_snake_case())
            except ValidationError as e:
                logger.warning(f"Rejected {name} request: {e.message}")
                self.set_status(400)
                self.write({"error": e.message})
            except Exception as e:
                sentry_sdk.capture_exception(e)
                self.set_status(500)
                self.write({"error": str(e)})


class PlayRoundHandler(RestHandler):
    """POST /play-round"""

    def initialize(self, play_round_use_case: PlayRoundUseCase):
        self.play_round_use_case = play_round_use_case

    async def post(self):
        def action():
            request = PlayRoundRequest.from_snake_case(parse_json_body(self.request.body))
            sentry_sdk.set_user({"id": request.session_id})
            return self.play_round_use_case.execute(request)

        self._run("game.play_round", "play_round", action)


class SessionStatsHandler(RestHandler):
    """GET /sessions/{session_id}/stats"""

    def initialize(self, session_stats_use_case: GetSessionStatsUseCase):
        self.session_stats_use_case = session_stats_use_case

    async def get(self, session_id):
        self._run(
            "game.session_stats", "get_session_stats",
            lambda: self.session_stats_use_case.execute(
                SessionRequest.from_snake_case({"session_id": session_id})
            )
        )


class GameHistoryHandler(RestHandler):
    """GET /sessions/{session_id}/history"""

    def initialize(self, game_history_use_case: GetGameHistoryUseCase):
        self.game_history_use_case = game_history_use_case

    async def get(self, session_id):
        self._run(
            "game.history", "get_game_history",
            lambda: self.game_history_use_case.execute(
                SessionRequest.from_snake_case({"session_id": session_id})
            )
        )


class ResetSessionHandler(RestHandler):
    """POST /sessions/{session_id}/reset"""

    def initialize(self, reset_session_use_case: ResetSessionUseCase):
        self.reset_session_use_case = reset_session_use_case

    async def post(self, session_id):
        self._run(
            "game.reset_session", "reset_session",
            lambda: self.reset_session_use_case.execute(
                SessionRequest.from_snake_case({"session_id": session_id})
            )
        )
