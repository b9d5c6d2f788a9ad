"""Chart endpoint: per-day rating trajectories."""

from typing import Optional

from fastapi import APIRouter, HTTPException, Query

from ratings import build_time_series

from ..state import get_state
from ..utils import load_snapshot, parse_as_of, utc_now

router = APIRouter()


@router.get("/chart")
def get_chart(
    mode: str = Query("bayesian", description="bayesian | raw"),
    connect_gaps: bool = Query(False, description="Carry decayed values across days not played"),
    time_range: str = Query("all", alias="range", description="1week | 2weeks | 1month | 3months | 6months | 1year | all"),
    as_of: Optional[str] = Query(None, description="Extend the axis through this date"),
):
    state = get_state()
    now = utc_now()
    try:
        as_of_value = parse_as_of(as_of, now) if as_of else None
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    cached = load_snapshot(state.cache, now)
    try:
        series = build_time_series(
            cached.snapshot,
            connect_gaps=connect_gaps,
            mode=mode,
            config=state.rating_config,
            as_of=as_of_value,
            time_range=time_range,
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return series.model_dump(mode="json")
