"""MongoDB round repository implementation"""
from typing import List

from pymongo import ASCENDING, DESCENDING, ReturnDocument
from pymongo.database import Database
from pymongo.errors import PyMongoError

from rps_engine.application.ports.round_repository_port import RoundRepositoryPort
from rps_engine.domain.entities.game_round import GameRound
from rps_engine.domain.errors import StorageError
from rps_engine.infrastructure.persistence.timestamps import as_utc

ROUND_SEQUENCE = "game_rounds"


class MongoRoundRepository(RoundRepositoryPort):
    """MongoDB implementation of the round log.

    Round ids come from a counter document bumped with ``$inc``, which keeps
    them monotonic across processes sharing the database.
    """

    def __init__(self, db: Database):
        self.db = db
        self.collection = db.game_rounds
        self.counters = db.counters

    def ensure_indexes(self) -> None:
        try:
            self.collection.create_index("round_id", unique=True)
            self.collection.create_index([
                ("session_id", ASCENDING),
                ("played_at", DESCENDING),
                ("round_id", DESCENDING)
            ])
        except PyMongoError as e:
            raise StorageError(f"Could not create round indexes: {e}", operation="ensure_indexes") from e

    def add(self, game_round: GameRound) -> GameRound:
        """Insert a round with the next id from the sequence"""
        try:
            stored = game_round.with_id(self._next_id())
            data = stored.to_dict()
            self.collection.insert_one(data)
            return stored
        except PyMongoError as e:
            raise StorageError(f"Could not store round: {e}", operation="add_round") from e

    def list_by_session(self, session_id: str) -> List[GameRound]:
        try:
            cursor = self.collection.find({"session_id": session_id}).sort(
                [("played_at", DESCENDING), ("round_id", DESCENDING)]
            )
            return [self._to_entity(doc) for doc in cursor]
        except PyMongoError as e:
            raise StorageError(f"Could not read rounds: {e}", operation="list_rounds") from e

    def delete(self, round_id: int) -> None:
        try:
            self.collection.delete_one({"round_id": round_id})
        except PyMongoError as e:
            raise StorageError(f"Could not delete round: {e}", operation="delete_round") from e

    def delete_by_session(self, session_id: str) -> int:
        try:
            result = self.collection.delete_many({"session_id": session_id})
            return result.deleted_count
        except PyMongoError as e:
            raise StorageError(f"Could not delete rounds: {e}", operation="delete_rounds") from e

    def _next_id(self) -> int:
        counter = self.counters.find_one_and_update(
            {"_id": ROUND_SEQUENCE},
            {"$inc": {"seq": 1}},
            upsert=True,
            return_document=ReturnDocument.AFTER
        )
        return counter["seq"]

    @staticmethod
    def _to_entity(doc: dict) -> GameRound:
        doc = dict(doc)
        doc["played_at"] = as_utc(doc["played_at"])
        return GameRound.from_dict(doc)
