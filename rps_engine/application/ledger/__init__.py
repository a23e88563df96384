from .session_ledger import SessionLedger
from .session_locks import SessionLockRegistry

__all__ = [
    'SessionLedger',
    'SessionLockRegistry'
]
