"""Stats endpoint."""

from fastapi import APIRouter

from ..models import SnapshotStats
from ..state import get_state
from ..utils import cache_info, load_snapshot, utc_now

router = APIRouter()


@router.get("/stats")
def get_stats():
    """Get current snapshot statistics."""
    state = get_state()
    now = utc_now()
    cached = load_snapshot(state.cache, now)
    snapshot = cached.snapshot
    stats = SnapshotStats(
        total_records=snapshot.total_count,
        valid_records=len(snapshot.records),
        excluded_records=snapshot.excluded_count,
        players=len(snapshot.player_names),
        global_mean=snapshot.global_mean,
        cache=cache_info(cached, now, state.cache.ttl_seconds),
    )
    return stats.model_dump(mode="json")
