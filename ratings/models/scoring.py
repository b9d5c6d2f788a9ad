"""
Scoring models: per-player aggregates, rating breakdowns, and leaderboard rows.

Contains:
- PlayerAggregate: running totals for one player over some record subset
- RatingBreakdown: the Bayesian / recency / attempts-bonus outputs
- one entry model per leaderboard view, and LeaderboardBundle holding all six views
"""

from datetime import date, datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class PlayerAggregate(BaseModel):
    """Totals accumulated per player; rebuilt from scratch on every computation."""

    total_guesses: int = 0
    attempts: int = 0
    last_effective_date: Optional[date] = None

    def add(self, score: int, played_on: date) -> None:
        self.total_guesses += score
        self.attempts += 1
        if self.last_effective_date is None or played_on > self.last_effective_date:
            self.last_effective_date = played_on

    @property
    def raw_average(self) -> float:
        return self.total_guesses / self.attempts if self.attempts else 0.0


class RatingBreakdown(BaseModel):
    """Rating formula outputs for one player as of one evaluation date. Lower is better."""

    bayes_average: float
    days_since_play: int
    recency_factor: float
    attempts_bonus: float
    adjusted_score: float
    raw_average: float


class LeaderboardEntry(BaseModel):
    """Common shape of every leaderboard row: the ranked metric and attempt count."""

    rank: int = 0
    name: str
    metric: float
    attempts: int


class DailyEntry(LeaderboardEntry):
    first_submitted_at: datetime


class WeeklyEntry(LeaderboardEntry):
    total: int
    played_days: int
    missed_days: int
    best_by_day: Dict[date, int] = Field(default_factory=dict)


class AllTimeEntry(LeaderboardEntry):
    bayes_average: float
    recency_factor: float
    attempts_bonus: float
    days_since_play: int
    raw_average: float
    last_played: date


class RawAverageEntry(LeaderboardEntry):
    total_guesses: int


class MostActiveEntry(LeaderboardEntry):
    raw_average: float


class DnfDetail(BaseModel):
    effective_date: date
    submitted_at: datetime
    puzzle_number: Any = None
    guesses: Any = None


class WoodenSpoonEntry(LeaderboardEntry):
    dnf_count: int
    entries: List[DnfDetail] = Field(default_factory=list)


class LeaderboardBundle(BaseModel):
    """All leaderboard views for one snapshot and one as-of date."""

    as_of: date
    weekly_dates: List[date]
    global_mean: float
    total_records: int
    excluded_count: int
    daily: List[DailyEntry] = Field(default_factory=list)
    weekly: List[WeeklyEntry] = Field(default_factory=list)
    all_time: List[AllTimeEntry] = Field(default_factory=list)
    raw_average: List[RawAverageEntry] = Field(default_factory=list)
    most_active: List[MostActiveEntry] = Field(default_factory=list)
    wooden_spoon: List[WoodenSpoonEntry] = Field(default_factory=list)
