"""Get session stats use case"""
import logging

import sentry_sdk

from rps_engine.application.dto.session_request import SessionRequest
from rps_engine.application.dto.session_stats_response import SessionStatsResponse
from rps_engine.application.ledger.session_ledger import SessionLedger
from rps_engine.domain.errors import StorageError
from rps_engine.metrics import GameMetrics

logger = logging.getLogger(__name__)


class GetSessionStatsUseCase:
    """Use case for reading a session's aggregate"""

    def __init__(self, ledger: SessionLedger):
        self.ledger = ledger

    def execute(self, request: SessionRequest) -> SessionStatsResponse:
        try:
            return SessionStatsResponse(stats=self.ledger.get_aggregate(request.session_id))
        except StorageError as e:
            logger.error(f"Failed to read stats for session {request.session_id}: {e}")
            sentry_sdk.capture_exception(e)
            GameMetrics.track_storage_error(e.operation)
            return SessionStatsResponse(error="storage unavailable")
