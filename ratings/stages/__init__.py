"""Pipeline stages: snapshot preparation, rating formula, leaderboards, time series, personal stats."""

from .leaderboards import (
    aggregate_players,
    all_time_leaderboard,
    build_leaderboards,
    daily_leaderboard,
    most_active_leaderboard,
    raw_average_leaderboard,
    weekly_leaderboard,
    wooden_spoon_leaderboard,
)
from .personal import build_personal_stats
from .rating import compute_rating, rate_aggregate
from .snapshot import global_mean, prepare_snapshot
from .time_series import SERIES_MODES, build_time_series

__all__ = [
    "aggregate_players",
    "all_time_leaderboard",
    "build_leaderboards",
    "daily_leaderboard",
    "most_active_leaderboard",
    "raw_average_leaderboard",
    "weekly_leaderboard",
    "wooden_spoon_leaderboard",
    "build_personal_stats",
    "compute_rating",
    "rate_aggregate",
    "global_mean",
    "prepare_snapshot",
    "SERIES_MODES",
    "build_time_series",
]
