"""
Per-key mutual exclusion.
"""

from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Dict, Hashable, Iterator, List


class KeyedLock:
    """
    One lock per key, created on demand and released when unused.

    Callers holding different keys never block each other.
    """

    def __init__(self):
        self._guard = threading.Lock()
        self._locks: Dict[Hashable, List] = {}  # key -> [lock, holders]

    @contextmanager
    def hold(self, key: Hashable) -> Iterator[None]:
        with self._guard:
            entry = self._locks.setdefault(key, [threading.Lock(), 0])
            entry[1] += 1

        try:
            with entry[0]:
                yield
        finally:
            with self._guard:
                entry[1] -= 1
                if entry[1] == 0:
                    del self._locks[key]

    def __len__(self) -> int:
        with self._guard:
            return len(self._locks)
