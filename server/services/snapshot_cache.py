"""
Snapshot cache: one store read per TTL window, prepared once for every view.

The clock is injected (get(now=...)) so expiry is testable without sleeping.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, List, Optional

from ratings import PreparedSnapshot, RatingConfig, prepare_snapshot, resolve_config

from .score_store import ScoreStore

logger = logging.getLogger(__name__)


@dataclass
class CachedSnapshot:
    """Raw documents as fetched, their prepared form, and when they were fetched."""

    records: List[Dict[str, Any]]
    snapshot: PreparedSnapshot
    fetched_at: datetime

    def age_seconds(self, now: datetime) -> float:
        return max(0.0, (now - self.fetched_at).total_seconds())


class SnapshotCache:
    """Holds the latest snapshot from a ScoreStore and refetches it when it expires."""

    def __init__(
        self,
        store: ScoreStore,
        ttl_seconds: float = 300.0,
        config: Optional[RatingConfig] = None,
    ):
        self._store = store
        self._ttl_seconds = ttl_seconds
        self._config = resolve_config(config)
        self._cached: Optional[CachedSnapshot] = None

    @property
    def ttl_seconds(self) -> float:
        return self._ttl_seconds

    @property
    def cached(self) -> Optional[CachedSnapshot]:
        return self._cached

    def is_expired(self, now: datetime) -> bool:
        if self._cached is None:
            return True
        return self._cached.age_seconds(now) >= self._ttl_seconds

    def get(self, now: datetime, force_refresh: bool = False) -> CachedSnapshot:
        """
        Cached snapshot, refetched when empty, expired, or forced.
        Store errors propagate and leave the previous snapshot in place.
        """
        if force_refresh or self.is_expired(now):
            records = self._store.fetch_scores()
            snapshot = prepare_snapshot(records, self._config)
            self._cached = CachedSnapshot(records=records, snapshot=snapshot, fetched_at=now)
            logger.info(
                "[snapshot] Refreshed: %d records (%d excluded)%s",
                snapshot.total_count,
                snapshot.excluded_count,
                " (forced)" if force_refresh else "",
            )
        return self._cached

    def invalidate(self) -> None:
        self._cached = None
