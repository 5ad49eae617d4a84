# src/cache/fingerprint_store.py - v1
"""Process-wide fingerprint cache keyed by canonical file path.

Entries are inserted lazily on first access and never removed or refreshed:
a file changed in place after its first request keeps its original
fingerprint until the store is discarded. Deployments serving files that
mutate in place must version them by path.

The store is constructed by the host and passed to every responder; there
is no module-level instance.
"""

from __future__ import annotations

import logging
import threading
from typing import Callable

from etagfiles.cache.models import FingerprintStoreStats

logger = logging.getLogger(__name__)


class FingerprintStore:
    """Thread-safe insert-if-absent map from canonical path to fingerprint."""

    def __init__(self) -> None:
        self._entries: dict[str, str] = {}
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0

    def get(self, path: str) -> str | None:
        """Return the cached fingerprint for ``path``, if any."""
        with self._lock:
            return self._entries.get(path)

    def get_or_compute(self, path: str, compute_fn: Callable[[], str]) -> str:
        """Return the fingerprint for ``path``, computing it on first access.

        ``compute_fn`` runs without the lock held, so lookups for other paths
        are never blocked by file I/O. Two threads racing on the same
        uncached path may both compute; the first committed value wins and
        is returned to both. If ``compute_fn`` raises, nothing is stored.
        """
        with self._lock:
            cached = self._entries.get(path)
            if cached is not None:
                self._hits += 1
                return cached
            self._misses += 1

        fingerprint = compute_fn()

        with self._lock:
            committed = self._entries.setdefault(path, fingerprint)
        if committed != fingerprint:
            logger.debug(
                "Concurrent fingerprint for %s already committed, keeping %s",
                path,
                committed,
            )
        return committed

    def stats(self) -> FingerprintStoreStats:
        """Snapshot of entry count and hit/miss counters."""
        with self._lock:
            return FingerprintStoreStats(
                entries=len(self._entries), hits=self._hits, misses=self._misses
            )

    def __contains__(self, path: object) -> bool:
        with self._lock:
            return path in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
