"""Session ledger: owner of the round log and the per-session aggregate"""
import logging
from datetime import datetime, timezone
from typing import Callable, List, Optional

from rps_engine.application.ledger.session_locks import SessionLockRegistry
from rps_engine.application.ports.round_repository_port import RoundRepositoryPort
from rps_engine.application.ports.session_stats_repository_port import SessionStatsRepositoryPort
from rps_engine.domain.entities.choice import Choice, Result
from rps_engine.domain.entities.game_round import GameRound
from rps_engine.domain.entities.session_stats import SessionStats

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class SessionLedger:
    """Keeps the round log and the session aggregate in step.

    Writers for the same session (record_round, reset) are serialized through a
    per-session lock, and the aggregate itself is bumped with a single upsert
    by the stats repository. If the aggregate write fails after the round was
    appended, the round is removed again before the error is re-raised, so the
    log and the aggregate never disagree. Reads share the same per-session
    lock, so they never observe a round without its increment.
    """

    def __init__(
        self,
        round_repository: RoundRepositoryPort,
        stats_repository: SessionStatsRepositoryPort,
        clock: Optional[Callable[[], datetime]] = None,
        locks: Optional[SessionLockRegistry] = None
    ):
        self.round_repository = round_repository
        self.stats_repository = stats_repository
        self.clock = clock or utc_now
        self.locks = locks or SessionLockRegistry()

    def record_round(
        self,
        session_id: str,
        player_choice: Choice,
        computer_choice: Choice,
        result: Result
    ) -> SessionStats:
        """Append a round and count it, returns the updated aggregate"""
        with self.locks.hold(session_id):
            # Timestamp is taken at the same serialization point as the increment
            played_at = self.clock()
            stored = self.round_repository.add(GameRound(
                session_id=session_id,
                player_choice=player_choice,
                computer_choice=computer_choice,
                result=result,
                played_at=played_at
            ))

            try:
                stats = self.stats_repository.increment(session_id, result, played_at)
            except Exception:
                logger.error(
                    f"Aggregate update failed for session {session_id}, "
                    f"removing round {stored.id}"
                )
                self._undo_round(stored)
                raise

        logger.debug(f"Recorded round {stored.id} for session {session_id}: {result.value}")
        return stats

    def get_aggregate(self, session_id: str) -> SessionStats:
        """Current aggregate, or a zero one that is not written anywhere"""
        with self.locks.hold_shared(session_id):
            stats = self.stats_repository.get(session_id)
        if stats is None:
            return SessionStats.zero(session_id)
        return stats

    def get_history(self, session_id: str) -> List[GameRound]:
        """All rounds of the session, most recent first"""
        with self.locks.hold_shared(session_id):
            return self.round_repository.list_by_session(session_id)

    def reset(self, session_id: str) -> SessionStats:
        """Erase the session's rounds and aggregate, returns the zero aggregate"""
        with self.locks.hold(session_id):
            removed = self.round_repository.delete_by_session(session_id)
            existed = self.stats_repository.delete(session_id)

        logger.info(
            f"Reset session {session_id}: removed {removed} rounds"
            f"{'' if existed else ' (no stored stats)'}"
        )
        return SessionStats.zero(session_id)

    def _undo_round(self, game_round: GameRound) -> None:
        try:
            self.round_repository.delete(game_round.id)
        except Exception as e:
            # Both writes failed; the caller still gets the original error
            logger.error(f"Could not remove round {game_round.id}: {e}")
