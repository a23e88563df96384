"""In-memory repositories for local runs and tests"""
import itertools
from datetime import datetime
from threading import Lock
from typing import Dict, List, Optional

from rps_engine.application.ports.round_repository_port import RoundRepositoryPort
from rps_engine.application.ports.session_stats_repository_port import SessionStatsRepositoryPort
from rps_engine.domain.entities.choice import Result
from rps_engine.domain.entities.game_round import GameRound
from rps_engine.domain.entities.session_stats import SessionStats


class InMemoryRoundRepository(RoundRepositoryPort):
    """Round log kept in a dict of lists; data is lost on restart"""

    def __init__(self):
        self._rounds: Dict[str, List[GameRound]] = {}
        self._ids = itertools.count(1)
        self._lock = Lock()

    def add(self, game_round: GameRound) -> GameRound:
        with self._lock:
            stored = game_round.with_id(next(self._ids))
            self._rounds.setdefault(stored.session_id, []).append(stored)
        return stored

    def list_by_session(self, session_id: str) -> List[GameRound]:
        with self._lock:
            rounds = list(self._rounds.get(session_id, []))
        return sorted(rounds, key=lambda r: (r.played_at, r.id), reverse=True)

    def delete(self, round_id: int) -> None:
        with self._lock:
            for session_id, rounds in self._rounds.items():
                self._rounds[session_id] = [r for r in rounds if r.id != round_id]

    def delete_by_session(self, session_id: str) -> int:
        with self._lock:
            return len(self._rounds.pop(session_id, []))


class InMemorySessionStatsRepository(SessionStatsRepositoryPort):
    """Session aggregates kept in a dict.

    increment() is a plain read-modify-write; concurrent writers for one
    session must be serialized by the caller (the ledger does this).
    """

    def __init__(self):
        self._stats: Dict[str, SessionStats] = {}

    def get(self, session_id: str) -> Optional[SessionStats]:
        stats = self._stats.get(session_id)
        return SessionStats.from_dict(stats.to_dict()) if stats else None

    def increment(self, session_id: str, result: Result, played_at: datetime) -> SessionStats:
        current = self._stats.get(session_id) or SessionStats.zero(session_id)
        updated = current.apply(result, played_at)
        self._stats[session_id] = updated
        return SessionStats.from_dict(updated.to_dict())

    def delete(self, session_id: str) -> bool:
        return self._stats.pop(session_id, None) is not None
