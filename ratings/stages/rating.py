"""
Rating formula, shared by the all-time leaderboard and the chart.

    bayes_avg      = (total_guesses + global_mean * alpha) / (attempts + alpha)
    recency_factor = 1 + days_since_play / R
    attempts_bonus = C * ln(attempts + 1)
    adjusted_score = bayes_avg * recency_factor - attempts_bonus

Lower is better. global_mean is computed once per snapshot by the caller.
"""

import math
from datetime import date
from typing import Optional

from ..models.config import RatingConfig, resolve_config
from ..models.scoring import PlayerAggregate, RatingBreakdown


def bayes_average(total_guesses: float, attempts: int, global_mean: float, prior_strength: float) -> float:
    """Player mean shrunk toward the global mean."""
    return (total_guesses + global_mean * prior_strength) / (attempts + prior_strength)


def recency_factor(days_since_play: int, recency_days: float) -> float:
    """Multiplicative penalty; 1.0 on the day of the last play, growing linearly after."""
    return 1 + max(0, days_since_play) / recency_days


def attempts_bonus(attempts: int, scale: float) -> float:
    """Small reward for volume: scale * ln(attempts + 1)."""
    return scale * math.log(attempts + 1)


def compute_rating(
    total_guesses: float,
    attempts: int,
    last_played: date,
    evaluation_date: date,
    global_mean: float,
    config: Optional[RatingConfig] = None,
) -> RatingBreakdown:
    """Rating outputs for a player's totals as of evaluation_date. A last play after evaluation_date counts as 0 days."""
    config = resolve_config(config)
    days = max(0, (evaluation_date - last_played).days)
    bayes = bayes_average(total_guesses, attempts, global_mean, config.prior_strength)
    factor = recency_factor(days, config.recency_days)
    bonus = attempts_bonus(attempts, config.attempts_bonus_scale)
    return RatingBreakdown(
        bayes_average=bayes,
        days_since_play=days,
        recency_factor=factor,
        attempts_bonus=bonus,
        adjusted_score=bayes * factor - bonus,
        raw_average=total_guesses / attempts if attempts else 0.0,
    )


def rate_aggregate(
    aggregate: PlayerAggregate,
    evaluation_date: date,
    global_mean: float,
    config: Optional[RatingConfig] = None,
) -> RatingBreakdown:
    """compute_rating for a PlayerAggregate with at least one attempt."""
    return compute_rating(
        aggregate.total_guesses,
        aggregate.attempts,
        aggregate.last_effective_date,
        evaluation_date,
        global_mean,
        config,
    )
