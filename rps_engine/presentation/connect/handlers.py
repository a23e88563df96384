"""Connect protocol handlers for the round engine

Connect Protocol = HTTP POST + JSON (camelCase fields) with specific URL patterns
Routes: /rps.v1.RockPaperScissorsService/PlayRound
        /rps.v1.RockPaperScissorsService/GetSessionStats
        /rps.v1.RockPaperScissorsService/GetGameHistory
        /rps.v1.RockPaperScissorsService/ResetSession
"""
import json
import logging

import sentry_sdk
from tornado import web

from rps_engine.application.dto.play_round_request import PlayRoundRequest
from rps_engine.application.dto.session_request import SessionRequest
from rps_engine.application.use_cases.get_game_history_use_case import GetGameHistoryUseCase
from rps_engine.application.use_cases.get_session_stats_use_case import GetSessionStatsUseCase
from rps_engine.application.use_cases.play_round_use_case import PlayRoundUseCase
from rps_engine.application.use_cases.reset_session_use_case import ResetSessionUseCase
from rps_engine.domain.errors import ValidationError
from rps_engine.presentation.tracing import parse_json_body, start_request_transaction

logger = logging.getLogger(__name__)

SERVICE_PATH = "/rps.v1.RockPaperScissorsService"


class ConnectHandler(web.RequestHandler):
    """Shared request/response handling for Connect procedures"""

    procedure = None

    def handle(self, data: dict):
        raise NotImplementedError

    async def post(self):
        with start_request_transaction(
            self.request, op="rps.connect", name=f"connect_{self.procedure}"
        ):
            try:
                result = self.handle(parse_json_body(self.request.body))

                if result.error:
                    self._connect_error(result.error, "internal")
                else:
                    self.set_status(200)
                    self.set_header('Content-Type', 'application/json')
                    self.write(json.dumps(result.to_dict()))

            except ValidationError as e:
                logger.warning(f"Rejected {self.procedure} call: {e.message}")
                self._connect_error(e.message, "invalid_argument")
            except Exception as e:
                sentry_sdk.capture_exception(e)
                self._connect_error(str(e), "internal")

    def _connect_error(self, message: str, code: str):
        """Return Connect protocol error response"""
        status_map = {
            "invalid_argument": 400,
            "internal": 500
        }
        self.set_status(status_map.get(code, 500))
        self.set_header('Content-Type', 'application/json')
        self.write({
            "code": code,
            "message": message
        })


class ConnectPlayRoundHandler(ConnectHandler):
    """Route: POST /rps.v1.RockPaperScissorsService/PlayRound"""

    procedure = "PlayRound"

    def initialize(self, play_round_use_case: PlayRoundUseCase):
        self.play_round_use_case = play_round_use_case

    def handle(self, data: dict):
        request = PlayRoundRequest.from_dict(data)
        sentry_sdk.set_user({"id": request.session_id})
        return self.play_round_use_case.execute(request)


class ConnectSessionStatsHandler(ConnectHandler):
    """Route: POST /rps.v1.RockPaperScissorsService/GetSessionStats"""

    procedure = "GetSessionStats"

    def initialize(self, session_stats_use_case: GetSessionStatsUseCase):
        self.session_stats_use_case = session_stats_use_case

    def handle(self, data: dict):
        return self.session_stats_use_case.execute(SessionRequest.from_dict(data))


class ConnectGameHistoryHandler(ConnectHandler):
    """Route: POST /rps.v1.RockPaperScissorsService/GetGameHistory"""

    procedure = "GetGameHistory"

    def initialize(self, game_history_use_case: GetGameHistoryUseCase):
        self.game_history_use_case = game_history_use_case

    def handle(self, data: dict):
        return self.game_history_use_case.execute(SessionRequest.from_dict(data))


class ConnectResetSessionHandler(ConnectHandler):
    """Route: POST /rps.v1.RockPaperScissorsService/ResetSession"""

    procedure = "ResetSession"

    def initialize(self, reset_session_use_case: ResetSessionUseCase):
        self.reset_session_use_case = reset_session_use_case

    def handle(self, data: dict):
        return self.reset_session_use_case.execute(SessionRequest.from_dict(data))
