"""Per-clothing-set mutexes for order admission.

Admission checks availability and then writes the order. Two admissions
for the same set and overlapping dates must not both pass the check before
either has written, so the whole check-and-write runs while holding the
lock of every set on the order.
"""

from __future__ import annotations

import threading
from collections.abc import Iterable, Iterator
from contextlib import contextmanager


class SetLockRegistry:
    """Hands out one lock per clothing-set id.

    Locks are always taken in ascending id order, so two admissions that
    share several sets cannot deadlock each other.
    """

    def __init__(self) -> None:
        self._guard = threading.Lock()
        self._locks: dict[int, threading.Lock] = {}

    def _lock_for(self, clothing_set_id: int) -> threading.Lock:
        with self._guard:
            lock = self._locks.get(clothing_set_id)
            if lock is None:
                lock = self._locks[clothing_set_id] = threading.Lock()
            return lock

    @contextmanager
    def hold(self, clothing_set_ids: Iterable[int]) -> Iterator[None]:
        acquired: list[threading.Lock] = []
        try:
            for clothing_set_id in sorted(set(clothing_set_ids)):
                lock = self._lock_for(clothing_set_id)
                lock.acquire()
                acquired.append(lock)
            yield
        finally:
            for lock in reversed(acquired):
                lock.release()

    def is_locked(self, clothing_set_id: int) -> bool:
        return self._lock_for(clothing_set_id).locked()


# Shared by every handler built in this process.
admission_locks = SetLockRegistry()
