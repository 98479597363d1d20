"""Lock registry shared by the cache writer and purger.

Two families of locks:

- artwork locks, one per ``(category, fingerprint)``, serialize writers of the
  same artwork;
- directory locks, one per ``(category, tier)``, keep a purge of a directory
  from interleaving with writes into it.

Writers take an artwork lock before any directory lock; the purger only takes
directory locks, so the two orders cannot deadlock.
"""

from __future__ import annotations

import threading
from collections.abc import Hashable, Iterator
from contextlib import contextmanager

from .catalog import MediaCategory, SizeTier


class CacheLocks:
    """Thread-safe registry of lazily created per-key locks.

    Usage::

        locks = CacheLocks()
        with locks.artwork(MediaCategory.MUSIC, 0x1234abcd):
            with locks.directory(MediaCategory.MUSIC, SizeTier.SMALL):
                ...
    """

    def __init__(self) -> None:
        self._guard = threading.Lock()
        self._locks: dict[Hashable, threading.Lock] = {}

    def _get(self, key: Hashable) -> threading.Lock:
        with self._guard:
            lock = self._locks.get(key)
            if lock is None:
                lock = self._locks[key] = threading.Lock()
            return lock

    @contextmanager
    def artwork(self, category: MediaCategory, fingerprint: int) -> Iterator[None]:
        """Hold the lock for one artwork item."""
        with self._get(("artwork", MediaCategory(category), fingerprint)):
            yield

    @contextmanager
    def directory(self, category: MediaCategory, tier: SizeTier) -> Iterator[None]:
        """Hold the lock for one ``(category, tier)`` directory."""
        with self._get(("directory", MediaCategory(category), SizeTier(tier))):
            yield

    def __len__(self) -> int:
        with self._guard:
            return len(self._locks)
