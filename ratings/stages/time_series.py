"""
Time-series reconstruction: one chart point per calendar day, per player.

Pass 1 walks records in effective-date order, keeping running per-player totals
and a running global mean, and stamps each player's totals onto the days they played.
Pass 2 walks the day axis, remembering each player's latest play so far, and
re-rates that play as of the axis day. Days since play are counted from the axis
day, which is what makes an idle player's line decay.

The public entry point is build_time_series.
"""

import logging
from datetime import date, datetime
from typing import Any, Dict, List, Optional, Tuple, Union

from ..models.config import RatingConfig, resolve_config
from ..models.record import ScoreRecord
from ..models.scoring import PlayerAggregate
from ..models.series import PlayerPoint, SeriesPlayer, SeriesPoint, TimeSeries
from ..models.snapshot import PreparedSnapshot
from ..utils.dates import TIME_RANGES, as_of_date, day_axis, time_range_start
from .rating import compute_rating
from .snapshot import prepare_snapshot

logger = logging.getLogger(__name__)

SERIES_MODES = ("bayesian", "raw")

# (total_guesses, attempts) as of the end of a played day
_Totals = Tuple[int, int]


def _stamp_played_days(
    snapshot: PreparedSnapshot,
) -> Tuple[Dict[date, Dict[str, _Totals]], Dict[date, float], Dict[str, PlayerAggregate]]:
    """
    Pass 1: per-day player totals, end-of-day running global mean, and final
    per-player aggregates (for the player list).
    """
    running: Dict[str, PlayerAggregate] = {}
    stamped: Dict[date, Dict[str, _Totals]] = {}
    global_by_day: Dict[date, float] = {}
    global_total = 0
    global_count = 0
    for r in snapshot.records:
        agg = running.setdefault(r.name, PlayerAggregate())
        agg.add(r.score, r.effective_date)
        global_total += r.score
        global_count += 1
        stamped.setdefault(r.effective_date, {})[r.name] = (agg.total_guesses, agg.attempts)
        global_by_day[r.effective_date] = global_total / global_count
    return stamped, global_by_day, running


def _player_point(
    played_on: date,
    totals: _Totals,
    day: date,
    mode: str,
    global_mean: float,
    config: RatingConfig,
) -> PlayerPoint:
    total, attempts = totals
    if mode == "raw":
        return PlayerPoint(
            value=total / attempts,
            raw_average=total / attempts,
            attempts=attempts,
            days_since_play=(day - played_on).days,
            recency_factor=1.0,
            played=played_on == day,
        )
    rating = compute_rating(total, attempts, played_on, day, global_mean, config)
    return PlayerPoint(
        value=rating.adjusted_score,
        raw_average=rating.raw_average,
        attempts=attempts,
        days_since_play=rating.days_since_play,
        recency_factor=rating.recency_factor,
        played=played_on == day,
    )


def _series_players(
    running: Dict[str, PlayerAggregate],
    snapshot: PreparedSnapshot,
) -> List[SeriesPlayer]:
    """Players ordered by most recent play, then attempts."""
    first_played: Dict[str, date] = {}
    for r in snapshot.records:
        first_played.setdefault(r.name, r.effective_date)
    players = [
        SeriesPlayer(
            name=name,
            first_played=first_played[name],
            last_played=agg.last_effective_date,
            attempts=agg.attempts,
        )
        for name, agg in running.items()
    ]
    players.sort(key=lambda p: (-p.last_played.toordinal(), -p.attempts, p.name))
    return players


def build_time_series(
    records: Union[List[Union[Dict[str, Any], ScoreRecord]], PreparedSnapshot],
    connect_gaps: bool = False,
    mode: str = "bayesian",
    config: Optional[RatingConfig] = None,
    as_of: Optional[Union[datetime, date]] = None,
    time_range: str = "all",
) -> TimeSeries:
    """
    Reconstruct every player's rating trajectory for charting.

    connect_gaps=False emits a player's value only on days they played;
    True emits the decayed value on every day after their first play.
    mode="raw" plots the running raw mean instead of the adjusted score.
    as_of (optional) extends the axis through that day so the last point
    matches the all-time leaderboard. time_range crops the emitted days;
    values are still computed from the full history.
    """
    if mode not in SERIES_MODES:
        raise ValueError(f"Unknown series mode {mode!r}; expected one of {SERIES_MODES}")
    if time_range not in TIME_RANGES:
        raise ValueError(
            f"Unknown time range {time_range!r}; expected one of {sorted(TIME_RANGES)}"
        )
    config = resolve_config(config)
    snapshot = prepare_snapshot(records, config)
    series = TimeSeries(mode=mode, connect_gaps=connect_gaps, time_range=time_range)
    if not snapshot.records:
        return series

    first_day = snapshot.records[0].effective_date
    last_day = snapshot.records[-1].effective_date
    if as_of is not None:
        last_day = max(last_day, as_of_date(as_of, config.zone))
    window_start = time_range_start(last_day, time_range)

    stamped, global_by_day, running = _stamp_played_days(snapshot)

    # Pass 2: last play per player is updated incrementally as the axis advances.
    last_play: Dict[str, Tuple[date, _Totals]] = {}
    global_average = config.neutral_prior
    for day in day_axis(first_day, last_day):
        global_average = global_by_day.get(day, global_average)
        for name, totals in stamped.get(day, {}).items():
            last_play[name] = (day, totals)
        if window_start is not None and day < window_start:
            continue

        values: Dict[str, PlayerPoint] = {}
        for name in sorted(last_play):
            played_on, totals = last_play[name]
            if not connect_gaps and played_on != day:
                continue
            values[name] = _player_point(
                played_on, totals, day, mode, snapshot.global_mean, config
            )
        players_average = (
            sum(p.value for p in values.values()) / len(values) if values else None
        )
        series.points.append(
            SeriesPoint(
                day=day,
                global_average=global_average,
                players_average=players_average,
                values=values,
            )
        )

    series.players = _series_players(running, snapshot)
    logger.debug(
        "Time series (%s, connect_gaps=%s, range=%s): %d days, %d players",
        mode, connect_gaps, time_range, len(series.points), len(series.players),
    )
    return series
