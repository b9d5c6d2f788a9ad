"""Leaderboard endpoint: every view for one as-of moment."""

from typing import Optional

from fastapi import APIRouter, HTTPException, Query

from ratings import build_leaderboards

from ..state import get_state
from ..utils import cache_info, load_snapshot, parse_as_of, utc_now

router = APIRouter()


@router.get("/leaderboards")
def get_leaderboards(
    as_of: Optional[str] = Query(None, description="ISO date or instant; defaults to now"),
    refresh: bool = Query(False, description="Bypass the snapshot cache"),
):
    """Daily, weekly, all-time, raw average, most active, and wooden spoon views."""
    state = get_state()
    now = utc_now()
    try:
        as_of_value = parse_as_of(as_of, now)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    cached = load_snapshot(state.cache, now, force_refresh=refresh)
    bundle = build_leaderboards(cached.snapshot, as_of_value, state.rating_config)
    return {
        **bundle.model_dump(mode="json"),
        "cache": cache_info(cached, now, state.cache.ttl_seconds).model_dump(mode="json"),
    }
