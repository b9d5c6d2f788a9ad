"""
Date helpers: effective dates, the weekly window, and the chart day axis.

An effective date is the calendar date of a submission instant in the
configured civil timezone. It depends only on the instant and the zone.
"""

from datetime import date, datetime, timedelta, timezone
from typing import Any, List, Optional, Union
from zoneinfo import ZoneInfo

from dateutil.relativedelta import relativedelta

# time_range -> offset back from the last day of the axis
TIME_RANGES = {
    "1week": relativedelta(days=7),
    "2weeks": relativedelta(days=14),
    "1month": relativedelta(months=1),
    "3months": relativedelta(months=3),
    "6months": relativedelta(months=6),
    "1year": relativedelta(years=1),
    "all": None,
}

SATURDAY = 5


def _zone(tz: Union[ZoneInfo, str]) -> ZoneInfo:
    return tz if isinstance(tz, ZoneInfo) else ZoneInfo(tz)


def parse_instant(value: Any) -> Optional[datetime]:
    """
    Parse a stored submission instant into an aware datetime.

    Accepts ISO-8601 strings (trailing "Z" allowed) and datetimes. Naive values
    are taken as UTC. Returns None for missing or unparseable values.
    """
    if isinstance(value, datetime):
        dt = value
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            dt = datetime.fromisoformat(text.replace("Z", "+00:00"))
        except ValueError:
            return None
    else:
        return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def local_date(instant: datetime, tz: Union[ZoneInfo, str]) -> date:
    """Calendar date of an aware instant in the given zone."""
    return instant.astimezone(_zone(tz)).date()


def effective_date(record: Any, tz: Union[ZoneInfo, str]) -> Optional[date]:
    """Effective date of a ScoreRecord, or None when it has no usable submitted_at."""
    instant = parse_instant(getattr(record, "submitted_at", None))
    if instant is None:
        return None
    try:
        return local_date(instant, tz)
    except OverflowError:
        return None


def as_of_date(as_of: Union[datetime, date], tz: Union[ZoneInfo, str]) -> date:
    """'Today' for an injected as-of value: datetimes are projected into the zone."""
    if isinstance(as_of, datetime):
        instant = as_of if as_of.tzinfo is not None else as_of.replace(tzinfo=timezone.utc)
        return local_date(instant, tz)
    return as_of


def recent_weekdays(today: date, count: int = 5) -> List[date]:
    """The `count` most recent Mon-Fri dates ending at today (inclusive), oldest first."""
    days: List[date] = []
    current = today
    while len(days) < count:
        if current.weekday() < SATURDAY:
            days.append(current)
        current -= timedelta(days=1)
    days.reverse()
    return days


def day_axis(start: date, end: date) -> List[date]:
    """Every calendar day from start to end inclusive."""
    return [start + timedelta(days=i) for i in range((end - start).days + 1)]


def time_range_start(end: date, time_range: str) -> Optional[date]:
    """First day shown for a chart time range, or None for "all"."""
    if time_range not in TIME_RANGES:
        raise ValueError(
            f"Unknown time range {time_range!r}; expected one of {sorted(TIME_RANGES)}"
        )
    offset = TIME_RANGES[time_range]
    if offset is None:
        return None
    return end - offset
