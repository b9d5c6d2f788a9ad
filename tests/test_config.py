"""RatingConfig defaults, grouped JSON loading, and validation."""

import pytest
from pydantic import ValidationError

from ratings import DEFAULT_CONFIG, RatingConfig, resolve_config


class TestRatingConfig:

    def test_defaults(self):
        config = RatingConfig()
        assert config.prior_strength == 20
        assert config.recency_days == 40
        assert config.attempts_bonus_scale == pytest.approx(0.2)
        assert config.neutral_prior == pytest.approx(4.5)
        assert config.weekly_days == 5
        assert config.dnf_score == 7
        assert config.timezone == "Pacific/Auckland"
        assert config.zone.key == "Pacific/Auckland"

    def test_resolve_none_gives_defaults(self):
        assert resolve_config(None) is DEFAULT_CONFIG
        custom = RatingConfig(recency_days=30)
        assert resolve_config(custom) is custom

    def test_from_dict_grouped(self):
        config = RatingConfig.from_dict({
            "bayesian": {"alpha": 10, "recency_days": 60, "attempts_bonus_scale": 0.1},
            "weekly": {"days": 7},
            "minimum_attempts": {"all_time": 5, "raw_average": 10, "wooden_spoon_dnfs": 2},
        })
        assert config.prior_strength == 10
        assert config.recency_days == 60
        assert config.attempts_bonus_scale == pytest.approx(0.1)
        assert config.weekly_days == 7
        assert config.min_attempts_all_time == 5
        assert config.min_attempts_raw_average == 10
        assert config.min_dnfs_wooden_spoon == 2

    def test_from_dict_flat_and_unknown_keys(self):
        config = RatingConfig.from_dict({"timezone": "UTC", "not_a_setting": 1})
        assert config.timezone == "UTC"
        assert not hasattr(config, "not_a_setting")

    @pytest.mark.parametrize("field,value", [
        ("prior_strength", 0),
        ("recency_days", -1),
        ("attempts_bonus_scale", -0.1),
        ("weekly_days", 0),
        ("max_guesses", 7),
    ])
    def test_rejects_bad_values(self, field, value):
        with pytest.raises(ValidationError):
            RatingConfig(**{field: value})

    def test_rejects_unknown_timezone(self):
        with pytest.raises(ValidationError):
            RatingConfig(timezone="Middle/Earth")
