"""Session stats repository port (interface)"""
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from rps_engine.domain.entities.choice import Result
from rps_engine.domain.entities.session_stats import SessionStats


class SessionStatsRepositoryPort(ABC):
    """Port for per-session aggregate persistence"""

    @abstractmethod
    def get(self, session_id: str) -> Optional[SessionStats]:
        """Stored stats for a session, None if no row exists"""
        pass

    @abstractmethod
    def increment(self, session_id: str, result: Result, played_at: datetime) -> SessionStats:
        """Count one round as a single upsert, returns the updated stats"""
        pass

    @abstractmethod
    def delete(self, session_id: str) -> bool:
        """Drop the stats row, returns whether one existed"""
        pass
