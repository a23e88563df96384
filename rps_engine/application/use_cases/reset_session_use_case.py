"""Reset session use case"""
import logging

import sentry_sdk
from sentry_sdk import start_span

from rps_engine.application.dto.session_request import SessionRequest
from rps_engine.application.dto.session_stats_response import SessionStatsResponse
from rps_engine.application.ledger.session_ledger import SessionLedger
from rps_engine.domain.errors import StorageError
from rps_engine.metrics import GameMetrics

logger = logging.getLogger(__name__)


class ResetSessionUseCase:
    """Use case for erasing a session's history and stats"""

    def __init__(self, ledger: SessionLedger):
        self.ledger = ledger

    def execute(self, request: SessionRequest) -> SessionStatsResponse:
        """Reset the session; resetting an unknown session is not an error"""
        try:
            with start_span(op="db.ledger", name="Reset session"):
                stats = self.ledger.reset(request.session_id)
        except StorageError as e:
            logger.error(f"Failed to reset session {request.session_id}: {e}")
            sentry_sdk.capture_exception(e)
            GameMetrics.track_storage_error(e.operation)
            return SessionStatsResponse(error="storage unavailable")

        GameMetrics.track_reset()
        return SessionStatsResponse(stats=stats)
