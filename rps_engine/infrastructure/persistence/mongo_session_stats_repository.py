"""MongoDB session stats repository implementation"""
from datetime import datetime
from typing import Optional

from pymongo import ReturnDocument
from pymongo.database import Database
from pymongo.errors import PyMongoError

from rps_engine.application.ports.session_stats_repository_port import SessionStatsRepositoryPort
from rps_engine.domain.entities.choice import Result
from rps_engine.domain.entities.session_stats import COUNTER_FIELDS, SessionStats
from rps_engine.domain.errors import StorageError
from rps_engine.infrastructure.persistence.timestamps import as_utc


class MongoSessionStatsRepository(SessionStatsRepositoryPort):
    """MongoDB implementation of the per-session aggregate"""

    def __init__(self, db: Database):
        self.db = db
        self.collection = db.session_stats

    def ensure_indexes(self) -> None:
        try:
            self.collection.create_index("session_id", unique=True)
        except PyMongoError as e:
            raise StorageError(f"Could not create stats indexes: {e}", operation="ensure_indexes") from e

    def get(self, session_id: str) -> Optional[SessionStats]:
        try:
            doc = self.collection.find_one({"session_id": session_id})
        except PyMongoError as e:
            raise StorageError(f"Could not read session stats: {e}", operation="get_stats") from e
        if doc is None:
            return None
        return self._to_entity(doc)

    def increment(self, session_id: str, result: Result, played_at: datetime) -> SessionStats:
        """Bump the matching counter and the total in one upsert.

        A missing document is created with the increment already applied; the
        two counters not being bumped are zeroed only on insert.
        """
        counter = COUNTER_FIELDS[result]
        untouched = {field: 0 for field in COUNTER_FIELDS.values() if field != counter}
        try:
            doc = self.collection.find_one_and_update(
                {"session_id": session_id},
                {
                    "$inc": {counter: 1, "total_games": 1},
                    "$set": {"last_played": played_at},
                    "$setOnInsert": untouched
                },
                upsert=True,
                return_document=ReturnDocument.AFTER
            )
        except PyMongoError as e:
            raise StorageError(f"Could not update session stats: {e}", operation="increment_stats") from e
        return self._to_entity(doc)

    def delete(self, session_id: str) -> bool:
        try:
            result = self.collection.delete_one({"session_id": session_id})
        except PyMongoError as e:
            raise StorageError(f"Could not delete session stats: {e}", operation="delete_stats") from e
        return result.deleted_count > 0

    @staticmethod
    def _to_entity(doc: dict) -> SessionStats:
        stats = SessionStats.from_dict(doc)
        stats.last_played = as_utc(stats.last_played)
        return stats
