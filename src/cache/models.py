# src/cache/models.py - v1
"""Cache domain models."""

from __future__ import annotations

from pydantic import BaseModel


class FingerprintStoreStats(BaseModel):
    """Point-in-time counters of a FingerprintStore."""

    entries: int = 0
    hits: int = 0
    misses: int = 0

    @property
    def lookups(self) -> int:
        return self.hits + self.misses
