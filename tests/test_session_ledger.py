import threading
import time
from datetime import datetime, timezone

import pytest

from rps_engine.application.ledger.session_ledger import SessionLedger
from rps_engine.domain.entities.choice import Choice, Result
from rps_engine.domain.errors import StorageError
from rps_engine.infrastructure.persistence.in_memory_repositories import InMemorySessionStatsRepository


class FailingStatsRepository(InMemorySessionStatsRepository):
    def increment(self, session_id, result, played_at):
        raise StorageError("stats collection unavailable", operation="increment_stats")


def play(ledger, session_id, result, player=Choice.ROCK, computer=Choice.SCISSORS):
    return ledger.record_round(session_id, player, computer, result)


def test_never_played_session_reads_as_zero_without_writing(ledger, stats_repository):
    stats = ledger.get_aggregate("fresh")

    assert stats.session_id == "fresh"
    assert (stats.wins, stats.losses, stats.ties, stats.total_games) == (0, 0, 0, 0)
    assert stats.last_played is None
    assert stats_repository.get("fresh") is None
    assert ledger.get_history("fresh") == []


def test_first_round_creates_aggregate_with_increment_applied(ledger, clock):
    first_timestamp = clock.now

    stats = play(ledger, "s1", Result.WIN)

    assert (stats.wins, stats.losses, stats.ties, stats.total_games) == (1, 0, 0, 1)
    assert stats.last_played == first_timestamp
    assert ledger.get_aggregate("s1") == stats


def test_round_is_stored_with_id_and_timestamp(ledger):
    play(ledger, "s1", Result.LOSS, player=Choice.ROCK, computer=Choice.PAPER)

    [game_round] = ledger.get_history("s1")
    assert game_round.id is not None
    assert game_round.session_id == "s1"
    assert game_round.player_choice == Choice.ROCK
    assert game_round.computer_choice == Choice.PAPER
    assert game_round.result == Result.LOSS
    assert game_round.played_at.tzinfo is not None


def test_counters_add_up_to_total_and_history_length(ledger):
    results = [Result.WIN, Result.TIE, Result.LOSS, Result.WIN, Result.WIN, Result.TIE]
    for result in results:
        play(ledger, "s1", result)

    stats = ledger.get_aggregate("s1")
    assert (stats.wins, stats.losses, stats.ties) == (3, 1, 2)
    assert stats.wins + stats.losses + stats.ties == stats.total_games == len(results)
    assert len(ledger.get_history("s1")) == stats.total_games


def test_history_is_most_recent_first(ledger):
    for result in (Result.WIN, Result.LOSS, Result.TIE):
        play(ledger, "s1", result)

    history = ledger.get_history("s1")
    assert [r.result for r in history] == [Result.TIE, Result.LOSS, Result.WIN]
    played = [r.played_at for r in history]
    assert played == sorted(played, reverse=True)


def test_history_breaks_timestamp_ties_by_descending_id(round_repository, stats_repository):
    frozen = datetime(2024, 5, 1, tzinfo=timezone.utc)
    ledger = SessionLedger(round_repository, stats_repository, clock=lambda: frozen)

    for _ in range(4):
        play(ledger, "s1", Result.TIE)

    ids = [r.id for r in ledger.get_history("s1")]
    assert ids == sorted(ids, reverse=True)


def test_reset_erases_rounds_and_aggregate(ledger, stats_repository):
    play(ledger, "s1", Result.WIN)
    play(ledger, "s1", Result.LOSS)

    stats = ledger.reset("s1")

    assert stats.total_games == 0
    assert stats.last_played is None
    assert stats_repository.get("s1") is None
    assert ledger.get_history("s1") == []
    assert ledger.get_aggregate("s1").total_games == 0


def test_reset_is_idempotent(ledger):
    first = ledger.reset("never-played")
    second = ledger.reset("never-played")

    assert first == second
    assert first.total_games == 0


def test_play_after_reset_starts_from_zero(ledger):
    for _ in range(3):
        play(ledger, "s1", Result.WIN)
    ledger.reset("s1")

    stats = play(ledger, "s1", Result.TIE)

    assert (stats.wins, stats.losses, stats.ties, stats.total_games) == (0, 0, 1, 1)


def test_sessions_are_independent(ledger):
    play(ledger, "a", Result.WIN)
    play(ledger, "b", Result.LOSS)
    play(ledger, "b", Result.LOSS)

    ledger.reset("a")

    b_stats = ledger.get_aggregate("b")
    assert (b_stats.losses, b_stats.total_games) == (2, 2)
    assert len(ledger.get_history("b")) == 2
    assert ledger.get_history("a") == []


def test_concurrent_rounds_for_one_session_are_all_counted(round_repository, stats_repository):
    ledger = SessionLedger(round_repository, stats_repository)
    threads_count, rounds_per_thread = 8, 50
    results = [Result.WIN, Result.LOSS, Result.TIE]
    start = threading.Barrier(threads_count)

    def worker(offset):
        start.wait()
        for i in range(rounds_per_thread):
            play(ledger, "shared", results[(offset + i) % 3])

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(threads_count)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    stats = ledger.get_aggregate("shared")
    expected = threads_count * rounds_per_thread
    assert stats.total_games == expected
    assert stats.wins + stats.losses + stats.ties == expected
    assert len(ledger.get_history("shared")) == expected
    assert len(ledger.locks) == 0


def test_failed_aggregate_write_leaves_no_round_behind(round_repository):
    ledger = SessionLedger(round_repository, FailingStatsRepository())

    with pytest.raises(StorageError):
        play(ledger, "s1", Result.WIN)

    assert ledger.get_history("s1") == []
    assert ledger.get_aggregate("s1").total_games == 0
    assert len(ledger.locks) == 0


class BlockingFailingStatsRepository(InMemorySessionStatsRepository):
    """Parks the writer inside increment() until released, then fails"""

    def __init__(self):
        super().__init__()
        self.entered = threading.Event()
        self.release = threading.Event()

    def increment(self, session_id, result, played_at):
        self.entered.set()
        self.release.wait(timeout=5)
        raise StorageError("stats collection unavailable", operation="increment_stats")


class CrashingStatsRepository(InMemorySessionStatsRepository):
    def increment(self, session_id, result, played_at):
        raise RuntimeError("unexpected driver state")


def test_reads_wait_for_an_in_flight_write(round_repository):
    stats_repository = BlockingFailingStatsRepository()
    ledger = SessionLedger(round_repository, stats_repository)
    errors = []
    observed = {}

    def writer():
        try:
            play(ledger, "s1", Result.WIN)
        except StorageError as e:
            errors.append(e)

    def reader():
        observed["history"] = len(ledger.get_history("s1"))
        observed["total"] = ledger.get_aggregate("s1").total_games

    write_thread = threading.Thread(target=writer)
    write_thread.start()
    assert stats_repository.entered.wait(timeout=2)

    read_thread = threading.Thread(target=reader)
    read_thread.start()
    read_thread.join(timeout=0.2)
    assert read_thread.is_alive()

    stats_repository.release.set()
    write_thread.join(timeout=5)
    read_thread.join(timeout=5)

    assert len(errors) == 1
    assert observed == {"history": 0, "total": 0}
    assert len(ledger.locks) == 0


def test_unexpected_aggregate_failure_also_removes_round(round_repository):
    ledger = SessionLedger(round_repository, CrashingStatsRepository())

    with pytest.raises(RuntimeError):
        play(ledger, "s1", Result.WIN)

    assert ledger.get_history("s1") == []
    assert ledger.get_aggregate("s1").total_games == 0


def test_resets_interleaved_with_rounds_keep_log_and_aggregate_in_step(round_repository, stats_repository):
    ledger = SessionLedger(round_repository, stats_repository)
    writers, rounds_per_writer, resets = 4, 60, 15
    start = threading.Barrier(writers + 1)
    mismatches = []

    def writer():
        start.wait()
        for _ in range(rounds_per_writer):
            play(ledger, "s", Result.WIN)

    def resetter():
        start.wait()
        for _ in range(resets):
            ledger.reset("s")
            with ledger.locks.hold("s"):
                history = round_repository.list_by_session("s")
                stats = stats_repository.get("s")
            total = stats.total_games if stats else 0
            if total != len(history):
                mismatches.append((total, len(history)))
            time.sleep(0.001)

    threads = [threading.Thread(target=writer) for _ in range(writers)]
    threads.append(threading.Thread(target=resetter))
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    stats = ledger.get_aggregate("s")
    assert mismatches == []
    assert stats.total_games == len(ledger.get_history("s"))
    assert stats.wins == stats.total_games
    assert stats.total_games <= writers * rounds_per_writer
