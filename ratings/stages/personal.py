"""
Personal statistics: played, win rate, streaks, and guess distribution for one player.
"""

from typing import Any, Dict, List, Optional, Union

from ..models.config import RatingConfig, resolve_config
from ..models.record import ScoreRecord
from ..models.snapshot import PreparedSnapshot
from ..models.stats import PersonalStats
from .snapshot import prepare_snapshot


def build_personal_stats(
    records: Union[List[Union[Dict[str, Any], ScoreRecord]], PreparedSnapshot],
    name: str,
    config: Optional[RatingConfig] = None,
) -> PersonalStats:
    """
    Statistics for one player (exact, case-sensitive name).

    A win is any normalized score below the DNF score. The current streak counts
    consecutive wins back from the most recent record; records are taken in
    submission order.
    """
    config = resolve_config(config)
    snapshot = prepare_snapshot(records, config)
    mine = sorted(
        (r for r in snapshot.records if r.name == name),
        key=lambda r: r.submitted_at,
    )
    stats = PersonalStats(name=name)
    if not mine:
        return stats

    wins = [r.score < config.dnf_score for r in mine]
    for r in mine:
        stats.guess_distribution[r.score] = stats.guess_distribution.get(r.score, 0) + 1

    streak = 0
    for won in wins:
        streak = streak + 1 if won else 0
        stats.max_streak = max(stats.max_streak, streak)

    current = 0
    for won in reversed(wins):
        if not won:
            break
        current += 1

    stats.played = len(mine)
    stats.wins = sum(wins)
    stats.win_percentage = round(100 * stats.wins / stats.played)
    stats.current_streak = current
    stats.average = sum(r.score for r in mine) / len(mine)
    stats.last_played = max(r.effective_date for r in mine)
    return stats
