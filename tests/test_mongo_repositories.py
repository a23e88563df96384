from datetime import datetime, timedelta, timezone
from unittest import mock

import mongomock
import pytest
from pymongo.errors import ServerSelectionTimeoutError

from rps_engine.application.ledger.session_ledger import SessionLedger
from rps_engine.domain.entities.choice import Choice, Result
from rps_engine.domain.entities.game_round import GameRound
from rps_engine.domain.errors import StorageError
from rps_engine.infrastructure.persistence.mongo_round_repository import MongoRoundRepository
from rps_engine.infrastructure.persistence.mongo_session_stats_repository import MongoSessionStatsRepository

from tests.fakes import TickingClock

T0 = datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def db():
    return mongomock.MongoClient().rps_test


@pytest.fixture
def rounds(db):
    repository = MongoRoundRepository(db)
    repository.ensure_indexes()
    return repository


@pytest.fixture
def stats(db):
    repository = MongoSessionStatsRepository(db)
    repository.ensure_indexes()
    return repository


def make_round(session_id="s1", played_at=T0, result=Result.WIN):
    return GameRound(
        session_id=session_id,
        player_choice=Choice.PAPER,
        computer_choice=Choice.ROCK,
        result=result,
        played_at=played_at,
    )


def test_round_ids_are_monotonic(rounds):
    ids = [rounds.add(make_round()).id for _ in range(3)]

    assert ids == [1, 2, 3]


def test_rounds_listed_newest_first_with_id_tiebreak(rounds):
    rounds.add(make_round(played_at=T0))
    rounds.add(make_round(played_at=T0 + timedelta(seconds=5)))
    rounds.add(make_round(played_at=T0 + timedelta(seconds=5)))
    rounds.add(make_round(session_id="other", played_at=T0 + timedelta(seconds=9)))

    listed = rounds.list_by_session("s1")

    assert [r.id for r in listed] == [3, 2, 1]
    assert all(r.played_at.tzinfo is not None for r in listed)
    assert listed[0].player_choice == Choice.PAPER
    assert listed[0].result == Result.WIN


def test_delete_by_session_only_touches_that_session(rounds):
    rounds.add(make_round())
    rounds.add(make_round())
    rounds.add(make_round(session_id="other"))

    assert rounds.delete_by_session("s1") == 2
    assert rounds.list_by_session("s1") == []
    assert len(rounds.list_by_session("other")) == 1
    assert rounds.delete_by_session("s1") == 0


def test_increment_creates_then_updates_stats(stats):
    assert stats.get("s1") is None

    first = stats.increment("s1", Result.TIE, T0)
    assert (first.wins, first.losses, first.ties, first.total_games) == (0, 0, 1, 1)

    second = stats.increment("s1", Result.WIN, T0 + timedelta(seconds=1))
    assert (second.wins, second.losses, second.ties, second.total_games) == (1, 0, 1, 2)
    assert second.last_played == T0 + timedelta(seconds=1)
    assert stats.get("s1") == second


def test_delete_stats(stats):
    stats.increment("s1", Result.LOSS, T0)

    assert stats.delete("s1") is True
    assert stats.get("s1") is None
    assert stats.delete("s1") is False


def test_ledger_on_mongo_keeps_log_and_aggregate_in_step(rounds, stats):
    ledger = SessionLedger(rounds, stats, clock=TickingClock(start=T0))
    for result in (Result.WIN, Result.LOSS, Result.TIE, Result.WIN):
        ledger.record_round("s1", Choice.ROCK, Choice.SCISSORS, result)

    aggregate = ledger.get_aggregate("s1")
    history = ledger.get_history("s1")
    assert aggregate.total_games == len(history) == 4
    assert (aggregate.wins, aggregate.losses, aggregate.ties) == (2, 1, 1)
    assert aggregate.last_played == history[0].played_at

    ledger.reset("s1")
    assert ledger.get_aggregate("s1").total_games == 0
    assert ledger.get_history("s1") == []


def test_driver_errors_become_storage_errors(rounds, stats):
    timeout = ServerSelectionTimeoutError("no servers available")

    with mock.patch.object(stats.collection, "find_one", side_effect=timeout):
        with pytest.raises(StorageError) as excinfo:
            stats.get("s1")
    assert excinfo.value.operation == "get_stats"
    assert excinfo.value.__cause__ is timeout

    with mock.patch.object(rounds.collection, "insert_one", side_effect=timeout):
        with pytest.raises(StorageError):
            rounds.add(make_round())


def test_failed_increment_rolls_back_round(rounds, stats):
    ledger = SessionLedger(rounds, stats)
    timeout = ServerSelectionTimeoutError("no servers available")

    with mock.patch.object(stats.collection, "find_one_and_update", side_effect=timeout):
        with pytest.raises(StorageError):
            ledger.record_round("s1", Choice.ROCK, Choice.PAPER, Result.LOSS)

    assert rounds.list_by_session("s1") == []
    assert stats.get("s1") is None
