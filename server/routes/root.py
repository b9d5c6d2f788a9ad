"""Root and health endpoints."""

from fastapi import APIRouter

from ..state import get_state
from ..utils import utc_now

router = APIRouter()

API_NAME = "Wordle Leaderboard API"
API_VERSION = "1.0.0"


@router.get("/")
def root():
    state = get_state()
    return {
        "name": API_NAME,
        "version": API_VERSION,
        "data_source": state.config.data_source,
        "store": state.store_name,
        "endpoints": {
            "leaderboards": ["/api/leaderboards"],
            "chart": ["/api/chart"],
            "players": ["/api/players/{name}/stats"],
            "stats": ["/api/stats"],
        },
    }


@router.get("/api/health")
def health():
    state = get_state()
    cached = state.cache.cached
    return {
        "status": "healthy",
        "store": state.store_name,
        "snapshot_cached": cached is not None,
        "snapshot_expired": state.cache.is_expired(utc_now()),
    }
