"""Personal statistics model: one player's record at a glance."""

from datetime import date
from typing import Dict, Optional

from pydantic import BaseModel, Field


def _empty_distribution() -> Dict[int, int]:
    return {score: 0 for score in range(1, 8)}


class PersonalStats(BaseModel):
    """Games played, wins, streaks, and guess distribution (7 = DNF) for one player."""

    name: str
    played: int = 0
    wins: int = 0
    win_percentage: int = 0
    current_streak: int = 0
    max_streak: int = 0
    average: Optional[float] = None
    last_played: Optional[date] = None
    guess_distribution: Dict[int, int] = Field(default_factory=_empty_distribution)
