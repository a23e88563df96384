"""Error taxonomy for the round engine"""
from typing import Optional


class RoundEngineError(Exception):
    """Base class for errors raised by the round engine"""


class ValidationError(RoundEngineError):
    """A request carried a missing or malformed session id or choice"""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.field = field


class StorageError(RoundEngineError):
    """The storage backend failed to read or write"""

    def __init__(self, message: str, operation: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.operation = operation
