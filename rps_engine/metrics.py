"""Prometheus business metrics for the round engine"""
from prometheus_client import Counter, Histogram

ROUNDS_PLAYED = Counter(
    'rps_rounds_played_total',
    'Rounds played, by result from the player side',
    ['result']
)

SESSION_RESETS = Counter(
    'rps_session_resets_total',
    'Session reset requests'
)

STORAGE_ERRORS = Counter(
    'rps_storage_errors_total',
    'Storage failures surfaced to callers',
    ['operation']
)

LEDGER_WRITE_SECONDS = Histogram(
    'rps_ledger_write_seconds',
    'Time spent recording a round, lock wait included'
)


class GameMetrics:
    """Thin helpers so use cases don't touch metric objects directly"""

    @staticmethod
    def track_round(result: str) -> None:
        ROUNDS_PLAYED.labels(result=result).inc()

    @staticmethod
    def track_reset() -> None:
        SESSION_RESETS.inc()

    @staticmethod
    def track_storage_error(operation: str) -> None:
        STORAGE_ERRORS.labels(operation=operation or "unknown").inc()

    @staticmethod
    def time_ledger_write():
        return LEDGER_WRITE_SECONDS.time()
