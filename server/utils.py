"""Route helpers: clock access, as-of query parsing, snapshot loading, cache metadata."""

from datetime import date, datetime, timezone
from typing import Optional, Union

from fastapi import HTTPException

from ratings import parse_instant

from .models import CacheInfo
from .services import CachedSnapshot, ScoreStoreError, SnapshotCache


def utc_now() -> datetime:
    """The only wall-clock read in the app; routes pass it down explicitly."""
    return datetime.now(timezone.utc)


def parse_as_of(value: Optional[str], now: datetime) -> Union[datetime, date]:
    """
    Resolve an as_of query value.

    Empty -> now. "YYYY-MM-DD" -> that calendar date, used as is.
    An ISO instant -> that instant (projected into the rating timezone by the engine).
    Raises ValueError for anything else.
    """
    if value is None or not value.strip():
        return now
    text = value.strip()
    if len(text) == 10:
        try:
            return date.fromisoformat(text)
        except ValueError:
            pass
    instant = parse_instant(text)
    if instant is None:
        raise ValueError(f"as_of must be an ISO date or instant, got {value!r}")
    return instant


def cache_info(cached: CachedSnapshot, now: datetime, ttl_seconds: float) -> CacheInfo:
    return CacheInfo(
        fetched_at=cached.fetched_at,
        age_seconds=cached.age_seconds(now),
        ttl_seconds=ttl_seconds,
    )


def load_snapshot(cache: SnapshotCache, now: datetime, force_refresh: bool = False) -> CachedSnapshot:
    """Cached snapshot for a request; a failed store read becomes HTTP 503."""
    try:
        return cache.get(now, force_refresh=force_refresh)
    except ScoreStoreError as e:
        raise HTTPException(status_code=503, detail=f"Score store unavailable: {e}")
