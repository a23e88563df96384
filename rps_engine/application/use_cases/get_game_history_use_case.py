"""Get game history use case"""
import logging

import sentry_sdk

from rps_engine.application.dto.game_history_response import GameHistoryResponse
from rps_engine.application.dto.session_request import SessionRequest
from rps_engine.application.ledger.session_ledger import SessionLedger
from rps_engine.domain.errors import StorageError
from rps_engine.metrics import GameMetrics

logger = logging.getLogger(__name__)


class GetGameHistoryUseCase:
    """Use case for listing a session's rounds"""

    def __init__(self, ledger: SessionLedger):
        self.ledger = ledger

    def execute(self, request: SessionRequest) -> GameHistoryResponse:
        try:
            rounds = self.ledger.get_history(request.session_id)
        except StorageError as e:
            logger.error(f"Failed to read history for session {request.session_id}: {e}")
            sentry_sdk.capture_exception(e)
            GameMetrics.track_storage_error(e.operation)
            return GameHistoryResponse(session_id=request.session_id, error="storage unavailable")

        return GameHistoryResponse(session_id=request.session_id, rounds=rounds)
