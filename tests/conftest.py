import pytest

from rps_engine.application.ledger.session_ledger import SessionLedger
from rps_engine.application.use_cases.play_round_use_case import PlayRoundUseCase
from rps_engine.domain.entities.choice import Choice
from rps_engine.infrastructure.persistence.in_memory_repositories import (
    InMemoryRoundRepository,
    InMemorySessionStatsRepository,
)

from tests.fakes import FixedChooser, TickingClock


@pytest.fixture
def round_repository():
    return InMemoryRoundRepository()


@pytest.fixture
def stats_repository():
    return InMemorySessionStatsRepository()


@pytest.fixture
def clock():
    return TickingClock()


@pytest.fixture
def ledger(round_repository, stats_repository, clock):
    return SessionLedger(
        round_repository=round_repository,
        stats_repository=stats_repository,
        clock=clock,
    )


@pytest.fixture
def chooser():
    return FixedChooser(Choice.ROCK)


@pytest.fixture
def play_round(ledger, chooser):
    return PlayRoundUseCase(ledger=ledger, chooser=chooser)
