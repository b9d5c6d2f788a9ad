"""
Rating configuration: Bayesian prior, recency decay, weekly window, view gates.

RatingConfig defaults are defined here. The server may pass a dict
(e.g. from a JSON file at RATING_CONFIG_PATH); from_dict() merges it with these defaults.
"""

from typing import Dict, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, field_validator, model_validator


class RatingConfig(BaseModel):
    """Configuration for the rating and leaderboard engine."""

    # -------------------------------------------------------------------------
    # Bayesian average
    # bayes_avg = (total_guesses + global_mean * prior_strength) / (attempts + prior_strength)
    # -------------------------------------------------------------------------

    # Prior strength (alpha). Higher = new players are pulled harder toward the global mean.
    prior_strength: float = 20.0

    # Prior used when the snapshot holds no valid records at all.
    neutral_prior: float = 4.5

    # -------------------------------------------------------------------------
    # Recency factor
    # recency_factor = 1 + days_since_play / recency_days
    # -------------------------------------------------------------------------

    # Recency scale R in days. 40 means 40 idle days doubles the Bayesian average.
    recency_days: float = 40.0

    # -------------------------------------------------------------------------
    # Attempts bonus
    # attempts_bonus = attempts_bonus_scale * ln(attempts + 1)
    # -------------------------------------------------------------------------

    attempts_bonus_scale: float = 0.2

    # -------------------------------------------------------------------------
    # Score scale
    # -------------------------------------------------------------------------

    # Largest guess count that counts as solved.
    max_guesses: int = 6
    # Normalized value for "did not finish" (also used for skipped weekdays).
    dnf_score: int = 7

    # -------------------------------------------------------------------------
    # Views
    # -------------------------------------------------------------------------

    # Number of most recent weekdays (Mon-Fri) in the weekly view; also its denominator.
    weekly_days: int = 5
    # Minimum total attempts to appear on the all-time (Bayesian) view.
    min_attempts_all_time: int = 3
    # Minimum total attempts to appear on the raw-average view.
    min_attempts_raw_average: int = 5
    # Minimum DNFs to appear on the wooden spoon view.
    min_dnfs_wooden_spoon: int = 1

    # Civil timezone that defines a record's effective date.
    timezone: str = "Pacific/Auckland"

    @field_validator("timezone")
    @classmethod
    def known_timezone(cls, value: str) -> str:
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown timezone: {value!r}") from e
        return value

    @model_validator(mode="after")
    def positive_scales(self):
        if self.prior_strength <= 0:
            raise ValueError(f"prior_strength must be positive, got {self.prior_strength}")
        if self.recency_days <= 0:
            raise ValueError(f"recency_days must be positive, got {self.recency_days}")
        if self.attempts_bonus_scale < 0:
            raise ValueError(
                f"attempts_bonus_scale must not be negative, got {self.attempts_bonus_scale}"
            )
        if self.weekly_days < 1:
            raise ValueError(f"weekly_days must be at least 1, got {self.weekly_days}")
        if not 1 <= self.max_guesses < self.dnf_score:
            raise ValueError(
                f"max_guesses must be in [1, dnf_score), got {self.max_guesses} (dnf_score={self.dnf_score})"
            )
        return self

    @property
    def zone(self) -> ZoneInfo:
        return ZoneInfo(self.timezone)

    @classmethod
    def from_dict(cls, config_dict: Dict) -> "RatingConfig":
        """Create config from dictionary (e.g., loaded from JSON)."""
        flat = {}
        if "bayesian" in config_dict:
            bayes = config_dict["bayesian"]
            if "alpha" in bayes:
                flat["prior_strength"] = bayes["alpha"]
            if "recency_days" in bayes:
                flat["recency_days"] = bayes["recency_days"]
            if "attempts_bonus_scale" in bayes:
                flat["attempts_bonus_scale"] = bayes["attempts_bonus_scale"]
            if "neutral_prior" in bayes:
                flat["neutral_prior"] = bayes["neutral_prior"]
        if "weekly" in config_dict:
            flat["weekly_days"] = config_dict["weekly"].get("days", 5)
        if "minimum_attempts" in config_dict:
            mins = config_dict["minimum_attempts"]
            if "all_time" in mins:
                flat["min_attempts_all_time"] = mins["all_time"]
            if "raw_average" in mins:
                flat["min_attempts_raw_average"] = mins["raw_average"]
            if "wooden_spoon_dnfs" in mins:
                flat["min_dnfs_wooden_spoon"] = mins["wooden_spoon_dnfs"]
        allowed = set(cls.model_fields)
        flat.update({k: v for k, v in config_dict.items() if k in allowed})
        return cls.model_validate(flat)


DEFAULT_CONFIG = RatingConfig()


def resolve_config(config: Optional["RatingConfig"]) -> "RatingConfig":
    """Return config or DEFAULT_CONFIG when none is provided."""
    return config if config is not None else DEFAULT_CONFIG
