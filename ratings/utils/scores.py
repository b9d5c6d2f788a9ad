"""
Score helpers: map raw guess counts onto the canonical 1..7 scale.

Every place that reads a raw guess count goes through normalize_guesses.
"""

import math
from typing import Any, Optional

DNF_SCORE = 7
MAX_GUESSES = 6


def _as_number(value: Any) -> Optional[float]:
    """Numeric value of a stored guess count, or None when it is not a number."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        try:
            return float(value)
        except OverflowError:
            return None
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError:
            return None
    return None


def normalize_guesses(
    guesses: Any,
    dnf: Any = False,
    max_guesses: int = MAX_GUESSES,
    dnf_score: int = DNF_SCORE,
) -> int:
    """
    Normalized score in 1..dnf_score.

    dnf=True always gives dnf_score. Otherwise anything that is not a finite
    number in [1, max_guesses] (0, None, NaN, 7, garbage) also gives dnf_score.
    """
    if dnf is True:
        return dnf_score
    number = _as_number(guesses)
    if number is None or not math.isfinite(number):
        return dnf_score
    if not 1 <= number <= max_guesses:
        return dnf_score
    return int(number)


def is_dnf(
    guesses: Any,
    dnf: Any = False,
    max_guesses: int = MAX_GUESSES,
    dnf_score: int = DNF_SCORE,
) -> bool:
    """True if the result counts as "did not finish"."""
    return normalize_guesses(guesses, dnf, max_guesses, dnf_score) == dnf_score
