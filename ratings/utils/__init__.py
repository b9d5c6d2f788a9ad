"""Shared utilities for dates and score normalization."""

from .dates import (
    TIME_RANGES,
    as_of_date,
    day_axis,
    effective_date,
    local_date,
    parse_instant,
    recent_weekdays,
    time_range_start,
)
from .scores import DNF_SCORE, MAX_GUESSES, is_dnf, normalize_guesses

__all__ = [
    "TIME_RANGES",
    "as_of_date",
    "day_axis",
    "effective_date",
    "local_date",
    "parse_instant",
    "recent_weekdays",
    "time_range_start",
    "DNF_SCORE",
    "MAX_GUESSES",
    "is_dnf",
    "normalize_guesses",
]
