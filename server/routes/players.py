"""Player endpoints."""

from fastapi import APIRouter, HTTPException

from ratings import build_personal_stats

from ..state import get_state
from ..utils import load_snapshot, utc_now

router = APIRouter()


@router.get("/{name}/stats")
def get_player_stats(name: str):
    """Personal statistics for one player (exact name)."""
    state = get_state()
    cached = load_snapshot(state.cache, utc_now())
    if name not in cached.snapshot.player_names:
        raise HTTPException(status_code=404, detail=f"Player not found: {name}")
    stats = build_personal_stats(cached.snapshot, name, state.rating_config)
    return stats.model_dump(mode="json")
