"""Data models for the rating engine."""

from .config import DEFAULT_CONFIG, RatingConfig, resolve_config
from .record import ScoreRecord
from .scoring import (
    AllTimeEntry,
    DailyEntry,
    DnfDetail,
    LeaderboardBundle,
    LeaderboardEntry,
    MostActiveEntry,
    PlayerAggregate,
    RatingBreakdown,
    RawAverageEntry,
    WeeklyEntry,
    WoodenSpoonEntry,
)
from .series import PlayerPoint, SeriesMode, SeriesPlayer, SeriesPoint, TimeSeries
from .snapshot import PreparedSnapshot, ValidRecord
from .stats import PersonalStats

__all__ = [
    "DEFAULT_CONFIG",
    "RatingConfig",
    "resolve_config",
    "ScoreRecord",
    "AllTimeEntry",
    "DailyEntry",
    "DnfDetail",
    "LeaderboardBundle",
    "LeaderboardEntry",
    "MostActiveEntry",
    "PlayerAggregate",
    "RatingBreakdown",
    "RawAverageEntry",
    "WeeklyEntry",
    "WoodenSpoonEntry",
    "PlayerPoint",
    "SeriesMode",
    "SeriesPlayer",
    "SeriesPoint",
    "TimeSeries",
    "PreparedSnapshot",
    "ValidRecord",
    "PersonalStats",
]
