"""
Snapshot model: the validated, normalized view of a raw record list.

Built once per engine call by stages.snapshot.prepare_snapshot and shared by
every view so that the global mean (the Bayesian prior) is computed once.
"""

from datetime import date, datetime
from typing import List

from pydantic import BaseModel

from .record import ScoreRecord


class ValidRecord(BaseModel):
    """A record that has a usable submission instant, with its derived keys."""

    record: ScoreRecord
    submitted_at: datetime
    effective_date: date
    score: int

    @property
    def name(self) -> str:
        return self.record.name


class PreparedSnapshot(BaseModel):
    """
    Valid records sorted by (effective_date, submitted_at, name).

    excluded_count: records dropped for a missing/unparseable submitted_at or
    a shape that could not be read as a ScoreRecord.
    global_mean: mean normalized score over all valid records (the prior).
    """

    records: List[ValidRecord]
    excluded_count: int = 0
    global_mean: float

    @property
    def total_count(self) -> int:
        return len(self.records) + self.excluded_count

    @property
    def player_names(self) -> List[str]:
        return sorted({r.name for r in self.records})
