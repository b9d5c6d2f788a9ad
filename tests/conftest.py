"""Shared helpers for the rating engine and API tests."""

from datetime import date, datetime, time, timezone
from typing import Any, Dict, Optional
from zoneinfo import ZoneInfo

AUCKLAND = ZoneInfo("Pacific/Auckland")

# 2025-07-14 is a Monday; July is NZST (UTC+12).
MONDAY = date(2025, 7, 14)
FRIDAY = date(2025, 7, 18)
SATURDAY = date(2025, 7, 19)


def local_instant(day: date, hour: int = 9, minute: int = 0) -> str:
    """ISO instant (UTC, trailing Z) for a wall-clock time in Auckland."""
    local = datetime.combine(day, time(hour, minute), tzinfo=AUCKLAND)
    utc = local.astimezone(timezone.utc)
    return utc.strftime("%Y-%m-%dT%H:%M:%S.000Z")


def score(
    name: str,
    guesses: Any,
    day: date,
    hour: int = 9,
    minute: int = 0,
    dnf: bool = False,
    puzzle_number: Optional[int] = None,
) -> Dict[str, Any]:
    """A stored score document as the client writes it."""
    doc = {
        "name": name,
        "guesses": guesses,
        "dnf": dnf,
        "submittedAt": local_instant(day, hour, minute),
    }
    if puzzle_number is not None:
        doc["puzzleNumber"] = puzzle_number
    return doc
