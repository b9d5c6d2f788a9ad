"""
Wordle leaderboard rating engine.

Single entry point for the ratings package:
- models/: RatingConfig, ScoreRecord, leaderboard entries, time-series and stats models
- utils/: effective dates, weekday windows, chart day axis, score normalization
- stages/: snapshot preparation, rating formula, leaderboards, time series, personal stats

Every operation is a pure function of a record list (or PreparedSnapshot) and an
explicit "as of" moment; nothing here reads the clock or does I/O.
"""

from .models import (
    DEFAULT_CONFIG,
    LeaderboardBundle,
    PersonalStats,
    PreparedSnapshot,
    RatingBreakdown,
    RatingConfig,
    ScoreRecord,
    TimeSeries,
    resolve_config,
)
from .stages import (
    SERIES_MODES,
    all_time_leaderboard,
    build_leaderboards,
    build_personal_stats,
    build_time_series,
    compute_rating,
    daily_leaderboard,
    most_active_leaderboard,
    prepare_snapshot,
    raw_average_leaderboard,
    weekly_leaderboard,
    wooden_spoon_leaderboard,
)
from .utils import (
    TIME_RANGES,
    day_axis,
    effective_date,
    is_dnf,
    normalize_guesses,
    parse_instant,
    recent_weekdays,
    time_range_start,
)

__all__ = [
    "DEFAULT_CONFIG",
    "LeaderboardBundle",
    "PersonalStats",
    "PreparedSnapshot",
    "RatingBreakdown",
    "RatingConfig",
    "ScoreRecord",
    "TimeSeries",
    "resolve_config",
    "SERIES_MODES",
    "all_time_leaderboard",
    "build_leaderboards",
    "build_personal_stats",
    "build_time_series",
    "compute_rating",
    "daily_leaderboard",
    "most_active_leaderboard",
    "prepare_snapshot",
    "raw_average_leaderboard",
    "weekly_leaderboard",
    "wooden_spoon_leaderboard",
    "TIME_RANGES",
    "day_axis",
    "effective_date",
    "is_dnf",
    "normalize_guesses",
    "parse_instant",
    "recent_weekdays",
    "time_range_start",
]
