"""Play round use case"""
import logging

import sentry_sdk
from sentry_sdk import start_span

from rps_engine.application.dto.play_round_request import PlayRoundRequest
from rps_engine.application.dto.play_round_response import PlayRoundResponse
from rps_engine.application.ledger.session_ledger import SessionLedger
from rps_engine.application.ports.chooser_port import ChooserPort
from rps_engine.domain.errors import StorageError
from rps_engine.domain.services.resolver import resolve
from rps_engine.metrics import GameMetrics

logger = logging.getLogger(__name__)


class PlayRoundUseCase:
    """Use case for playing one round against the computer.

    This is the only write path that adds rounds: the computer's choice is
    drawn, the result resolved and both handed to the ledger in one call.
    """

    def __init__(self, ledger: SessionLedger, chooser: ChooserPort):
        self.ledger = ledger
        self.chooser = chooser

    def execute(self, request: PlayRoundRequest) -> PlayRoundResponse:
        """Execute one round"""
        with start_span(op="game.choose", name="Draw computer choice"):
            computer_choice = self.chooser.choose()

        with start_span(op="game.resolve", name="Resolve round") as span:
            result = resolve(request.player_choice, computer_choice)
            span.set_data("result", result.value)

        try:
            with start_span(op="db.ledger", name="Record round") as span:
                with GameMetrics.time_ledger_write():
                    stats = self.ledger.record_round(
                        request.session_id,
                        request.player_choice,
                        computer_choice,
                        result
                    )
                span.set_data("total_games", stats.total_games)
        except StorageError as e:
            logger.error(f"Failed to record round for session {request.session_id}: {e}")
            sentry_sdk.capture_exception(e)
            GameMetrics.track_storage_error(e.operation)
            return PlayRoundResponse(error="storage unavailable")

        GameMetrics.track_round(result.value)
        sentry_sdk.set_tag("game.result", result.value)
        logger.info(
            f"Session {request.session_id}: {request.player_choice.value} vs "
            f"{computer_choice.value} -> {result.value}"
        )

        return PlayRoundResponse(
            player_choice=request.player_choice,
            computer_choice=computer_choice,
            result=result,
            session_stats=stats
        )
