"""
Time-series models: per-day, per-player values for the rating chart.
"""

from datetime import date
from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, Field

SeriesMode = Literal["bayesian", "raw"]


class PlayerPoint(BaseModel):
    """
    One player's value on one axis day.

    value: adjusted score (bayesian mode) or running raw mean (raw mode).
    played: True when the player submitted on this exact day.
    """

    value: float
    raw_average: float
    attempts: int
    days_since_play: int
    recency_factor: float
    played: bool


class SeriesPoint(BaseModel):
    """
    One day of the chart.

    global_average: running mean over every record up to and including this day.
    players_average: mean of the player values emitted on this day.
    """

    day: date
    global_average: float
    players_average: Optional[float] = None
    values: Dict[str, PlayerPoint] = Field(default_factory=dict)


class SeriesPlayer(BaseModel):
    name: str
    first_played: date
    last_played: date
    attempts: int


class TimeSeries(BaseModel):
    mode: SeriesMode
    connect_gaps: bool
    time_range: str = "all"
    points: List[SeriesPoint] = Field(default_factory=list)
    players: List[SeriesPlayer] = Field(default_factory=list)
