"""
Rating Formula Tests

    bayes_avg      = (total + global_mean * 20) / (attempts + 20)
    recency_factor = 1 + days_since_play / 40
    attempts_bonus = 0.2 * ln(attempts + 1)
    adjusted_score = bayes_avg * recency_factor - attempts_bonus
"""

import math
from datetime import date, timedelta

import pytest

from ratings import RatingConfig, compute_rating
from ratings.models import PlayerAggregate
from ratings.stages.rating import attempts_bonus, bayes_average, recency_factor, rate_aggregate

LAST_PLAYED = date(2025, 7, 14)


class TestComponents:

    def test_bayes_average_shrinks_toward_mean(self):
        assert bayes_average(40, 10, 4.5, 20) == pytest.approx(130 / 30)
        assert bayes_average(0, 0, 4.5, 20) == pytest.approx(4.5)

    def test_recency_factor(self):
        assert recency_factor(0, 40) == 1
        assert recency_factor(30, 40) == pytest.approx(1.75)

    def test_attempts_bonus(self):
        assert attempts_bonus(10, 0.2) == pytest.approx(0.2 * math.log(11))


class TestComputeRating:

    def test_active_player(self):
        rating = compute_rating(40, 10, LAST_PLAYED, LAST_PLAYED, 4.5)
        assert rating.bayes_average == pytest.approx(4.3333, abs=1e-4)
        assert rating.recency_factor == 1
        assert rating.attempts_bonus == pytest.approx(0.4796, abs=1e-4)
        assert rating.adjusted_score == pytest.approx(3.854, abs=1e-3)
        assert rating.raw_average == pytest.approx(4.0)
        assert rating.days_since_play == 0

    def test_inactivity_rots_the_score(self):
        rating = compute_rating(40, 10, LAST_PLAYED, LAST_PLAYED + timedelta(days=30), 4.5)
        assert rating.days_since_play == 30
        assert rating.recency_factor == pytest.approx(1.75)
        assert rating.adjusted_score == pytest.approx(7.104, abs=2e-3)

    def test_future_play_counts_as_today(self):
        rating = compute_rating(40, 10, LAST_PLAYED, LAST_PLAYED - timedelta(days=3), 4.5)
        assert rating.days_since_play == 0
        assert rating.recency_factor == 1

    def test_config_changes_the_formula(self):
        config = RatingConfig(prior_strength=10, recency_days=20, attempts_bonus_scale=0)
        rating = compute_rating(40, 10, LAST_PLAYED, LAST_PLAYED + timedelta(days=10), 4.5, config)
        assert rating.bayes_average == pytest.approx(85 / 20)
        assert rating.adjusted_score == pytest.approx(85 / 20 * 1.5)

    def test_rate_aggregate_matches_compute_rating(self):
        agg = PlayerAggregate()
        for score in (3, 4, 5):
            agg.add(score, LAST_PLAYED)
        evaluation = LAST_PLAYED + timedelta(days=5)
        assert rate_aggregate(agg, evaluation, 4.2) == compute_rating(12, 3, LAST_PLAYED, evaluation, 4.2)

    def test_score_never_improves_while_idle(self):
        previous = None
        for days in range(0, 400, 7):
            rating = compute_rating(40, 10, LAST_PLAYED, LAST_PLAYED + timedelta(days=days), 4.5)
            if previous is not None:
                assert rating.adjusted_score >= previous
            previous = rating.adjusted_score
