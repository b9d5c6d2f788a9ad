"""
Leaderboard aggregation: daily, weekly, all-time (Bayesian), raw average,
most active, and wooden spoon views over one prepared snapshot.

Every view is a pure function of the snapshot and "today". Ties that the
view does not define are broken by name so output never depends on record order.

The public entry point is build_leaderboards.
"""

import logging
from collections import defaultdict
from datetime import date, datetime
from typing import Any, Dict, List, Optional, Sequence, TypeVar, Union

from ..models.config import RatingConfig, resolve_config
from ..models.record import ScoreRecord
from ..models.scoring import (
    AllTimeEntry,
    DailyEntry,
    DnfDetail,
    LeaderboardBundle,
    LeaderboardEntry,
    MostActiveEntry,
    PlayerAggregate,
    RawAverageEntry,
    WeeklyEntry,
    WoodenSpoonEntry,
)
from ..models.snapshot import PreparedSnapshot, ValidRecord
from ..utils.dates import as_of_date, recent_weekdays
from .rating import rate_aggregate
from .snapshot import prepare_snapshot

logger = logging.getLogger(__name__)

EntryT = TypeVar("EntryT", bound=LeaderboardEntry)


def _ranked(entries: List[EntryT]) -> List[EntryT]:
    """Stamp 1-based positions onto an already sorted list."""
    for position, entry in enumerate(entries, start=1):
        entry.rank = position
    return entries


def aggregate_players(records: Sequence[ValidRecord]) -> Dict[str, PlayerAggregate]:
    """Per-player totals over the given records."""
    totals: Dict[str, PlayerAggregate] = {}
    for r in records:
        totals.setdefault(r.name, PlayerAggregate()).add(r.score, r.effective_date)
    return totals


def daily_leaderboard(snapshot: PreparedSnapshot, today: date) -> List[DailyEntry]:
    """Mean score over today's records; ties go to whoever submitted first."""
    todays = [r for r in snapshot.records if r.effective_date == today]
    totals = aggregate_players(todays)
    first_at: Dict[str, datetime] = {}
    for r in todays:
        if r.name not in first_at or r.submitted_at < first_at[r.name]:
            first_at[r.name] = r.submitted_at
    entries = [
        DailyEntry(
            name=name,
            metric=agg.raw_average,
            attempts=agg.attempts,
            first_submitted_at=first_at[name],
        )
        for name, agg in totals.items()
    ]
    entries.sort(key=lambda e: (e.metric, e.first_submitted_at, e.name))
    return _ranked(entries)


def weekly_leaderboard(
    snapshot: PreparedSnapshot,
    today: date,
    config: Optional[RatingConfig] = None,
) -> List[WeeklyEntry]:
    """
    Best score per played weekday over the last N weekdays, skipped weekdays
    counted as DNF, divided by N.
    """
    config = resolve_config(config)
    window = set(recent_weekdays(today, config.weekly_days))
    best: Dict[str, Dict[date, int]] = defaultdict(dict)
    attempts: Dict[str, int] = defaultdict(int)
    for r in snapshot.records:
        if r.effective_date not in window:
            continue
        current = best[r.name].get(r.effective_date)
        if current is None or r.score < current:
            best[r.name][r.effective_date] = r.score
        attempts[r.name] += 1

    entries = []
    for name, by_day in best.items():
        played = len(by_day)
        missed = config.weekly_days - played
        total = sum(by_day.values()) + missed * config.dnf_score
        entries.append(
            WeeklyEntry(
                name=name,
                metric=total / config.weekly_days,
                attempts=attempts[name],
                total=total,
                played_days=played,
                missed_days=missed,
                best_by_day=dict(sorted(by_day.items())),
            )
        )
    entries.sort(key=lambda e: (e.metric, e.name))
    return _ranked(entries)


def all_time_leaderboard(
    snapshot: PreparedSnapshot,
    today: date,
    config: Optional[RatingConfig] = None,
) -> List[AllTimeEntry]:
    """Bayesian adjusted score with recency decay and attempts bonus."""
    config = resolve_config(config)
    entries = []
    for name, agg in aggregate_players(snapshot.records).items():
        if agg.attempts < config.min_attempts_all_time:
            continue
        rating = rate_aggregate(agg, today, snapshot.global_mean, config)
        entries.append(
            AllTimeEntry(
                name=name,
                metric=rating.adjusted_score,
                attempts=agg.attempts,
                bayes_average=rating.bayes_average,
                recency_factor=rating.recency_factor,
                attempts_bonus=rating.attempts_bonus,
                days_since_play=rating.days_since_play,
                raw_average=rating.raw_average,
                last_played=agg.last_effective_date,
            )
        )
    entries.sort(key=lambda e: (e.metric, e.name))
    return _ranked(entries)


def raw_average_leaderboard(
    snapshot: PreparedSnapshot,
    config: Optional[RatingConfig] = None,
) -> List[RawAverageEntry]:
    """Plain mean score for players with enough attempts."""
    config = resolve_config(config)
    entries = [
        RawAverageEntry(
            name=name,
            metric=agg.raw_average,
            attempts=agg.attempts,
            total_guesses=agg.total_guesses,
        )
        for name, agg in aggregate_players(snapshot.records).items()
        if agg.attempts >= config.min_attempts_raw_average
    ]
    entries.sort(key=lambda e: (e.metric, e.name))
    return _ranked(entries)


def most_active_leaderboard(snapshot: PreparedSnapshot) -> List[MostActiveEntry]:
    """Record count per player, most first."""
    entries = [
        MostActiveEntry(
            name=name,
            metric=float(agg.attempts),
            attempts=agg.attempts,
            raw_average=agg.raw_average,
        )
        for name, agg in aggregate_players(snapshot.records).items()
    ]
    entries.sort(key=lambda e: (-e.attempts, e.name))
    return _ranked(entries)


def wooden_spoon_leaderboard(
    snapshot: PreparedSnapshot,
    config: Optional[RatingConfig] = None,
) -> List[WoodenSpoonEntry]:
    """DNF rate (percent of attempts), highest first; players with no DNF are left out."""
    config = resolve_config(config)
    attempts: Dict[str, int] = defaultdict(int)
    dnfs: Dict[str, List[DnfDetail]] = defaultdict(list)
    for r in snapshot.records:
        attempts[r.name] += 1
        if r.score == config.dnf_score:
            dnfs[r.name].append(
                DnfDetail(
                    effective_date=r.effective_date,
                    submitted_at=r.submitted_at,
                    puzzle_number=r.record.puzzle_number,
                    guesses=r.record.guesses,
                )
            )

    entries = []
    for name, details in dnfs.items():
        if len(details) < config.min_dnfs_wooden_spoon:
            continue
        entries.append(
            WoodenSpoonEntry(
                name=name,
                metric=100.0 * len(details) / attempts[name],
                attempts=attempts[name],
                dnf_count=len(details),
                entries=sorted(
                    details,
                    key=lambda d: (d.effective_date, d.submitted_at),
                    reverse=True,
                ),
            )
        )
    entries.sort(key=lambda e: (-e.metric, -e.dnf_count, e.name))
    return _ranked(entries)


def build_leaderboards(
    records: Union[List[Union[Dict[str, Any], ScoreRecord]], PreparedSnapshot],
    as_of: Union[datetime, date],
    config: Optional[RatingConfig] = None,
) -> LeaderboardBundle:
    """
    Build every leaderboard view for one snapshot.

    as_of supplies "today": a datetime is projected into the configured
    timezone, a date is used as is. Empty input gives empty views.
    """
    config = resolve_config(config)
    snapshot = prepare_snapshot(records, config)
    today = as_of_date(as_of, config.zone)

    bundle = LeaderboardBundle(
        as_of=today,
        weekly_dates=recent_weekdays(today, config.weekly_days),
        global_mean=snapshot.global_mean,
        total_records=snapshot.total_count,
        excluded_count=snapshot.excluded_count,
        daily=daily_leaderboard(snapshot, today),
        weekly=weekly_leaderboard(snapshot, today, config),
        all_time=all_time_leaderboard(snapshot, today, config),
        raw_average=raw_average_leaderboard(snapshot, config),
        most_active=most_active_leaderboard(snapshot),
        wooden_spoon=wooden_spoon_leaderboard(snapshot, config),
    )
    logger.debug(
        "Leaderboards as of %s: daily=%d weekly=%d all_time=%d raw=%d active=%d spoon=%d",
        today,
        len(bundle.daily),
        len(bundle.weekly),
        len(bundle.all_time),
        len(bundle.raw_average),
        len(bundle.most_active),
        len(bundle.wooden_spoon),
    )
    return bundle
