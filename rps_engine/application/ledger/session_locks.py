"""Per-session reader/writer lock registry"""
from contextlib import contextmanager
from threading import Condition, Lock
from typing import Dict, Iterator


class ReadWriteLock:
    """Many readers or one writer; waiting writers keep new readers out"""

    def __init__(self):
        self._cond = Condition(Lock())
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0

    def acquire_read(self) -> None:
        with self._cond:
            while self._writer or self._writers_waiting:
                self._cond.wait()
            self._readers += 1

    def release_read(self) -> None:
        with self._cond:
            self._readers -= 1
            if self._readers == 0:
                self._cond.notify_all()

    def acquire_write(self) -> None:
        with self._cond:
            self._writers_waiting += 1
            while self._writer or self._readers:
                self._cond.wait()
            self._writers_waiting -= 1
            self._writer = True

    def release_write(self) -> None:
        with self._cond:
            self._writer = False
            self._cond.notify_all()


class SessionLockRegistry:
    """Hands out one reader/writer lock per session id.

    An entry lives only while some caller holds or waits on it, so the registry
    stays as large as the number of sessions currently in use.
    """

    def __init__(self):
        self._guard = Lock()
        self._locks: Dict[str, ReadWriteLock] = {}
        self._users: Dict[str, int] = {}

    @contextmanager
    def hold(self, session_id: str) -> Iterator[None]:
        """Exclusive access, for writers"""
        lock = self._checkout(session_id)
        lock.acquire_write()
        try:
            yield
        finally:
            lock.release_write()
            self._checkin(session_id)

    @contextmanager
    def hold_shared(self, session_id: str) -> Iterator[None]:
        """Shared access, for readers"""
        lock = self._checkout(session_id)
        lock.acquire_read()
        try:
            yield
        finally:
            lock.release_read()
            self._checkin(session_id)

    def _checkout(self, session_id: str) -> ReadWriteLock:
        with self._guard:
            lock = self._locks.setdefault(session_id, ReadWriteLock())
            self._users[session_id] = self._users.get(session_id, 0) + 1
        return lock

    def _checkin(self, session_id: str) -> None:
        with self._guard:
            self._users[session_id] -= 1
            if self._users[session_id] == 0:
                del self._users[session_id]
                del self._locks[session_id]

    def __len__(self) -> int:
        with self._guard:
            return len(self._locks)
