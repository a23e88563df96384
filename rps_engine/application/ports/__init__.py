from .round_repository_port import RoundRepositoryPort
from .session_stats_repository_port import SessionStatsRepositoryPort
from .chooser_port import ChooserPort

__all__ = [
    'RoundRepositoryPort',
    'SessionStatsRepositoryPort',
    'ChooserPort',
]
