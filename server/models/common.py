"""Common Pydantic models shared across routes."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class CacheInfo(BaseModel):
    fetched_at: datetime
    age_seconds: float
    ttl_seconds: float


class SnapshotStats(BaseModel):
    total_records: int
    valid_records: int
    excluded_records: int
    players: int
    global_mean: float
    cache: Optional[CacheInfo] = None
