"""
Score Normalization Tests

Every raw guess count maps onto 1..7, where 7 means "did not finish".
Anything ambiguous (0, missing, NaN, out of range, unparseable) counts as 7.
"""

import math

import pytest

from ratings import is_dnf, normalize_guesses


class TestNormalizeGuesses:
    """Mapping of stored guess counts onto the canonical scale."""

    @pytest.mark.parametrize("guesses", [1, 2, 3, 4, 5, 6])
    def test_solved_counts_pass_through(self, guesses):
        assert normalize_guesses(guesses) == guesses

    @pytest.mark.parametrize("guesses", [0, None, math.nan, 7, 8, -1, math.inf, 10 ** 400, "1e400"])
    def test_ambiguous_values_count_as_dnf(self, guesses):
        assert normalize_guesses(guesses) == 7

    def test_dnf_flag_overrides_guesses(self):
        assert normalize_guesses(3, dnf=True) == 7

    def test_only_literal_true_sets_dnf(self):
        assert normalize_guesses(3, dnf="yes") == 3
        assert normalize_guesses(3, dnf=1) == 3

    def test_numeric_strings_are_parsed(self):
        assert normalize_guesses("4") == 4
        assert normalize_guesses(" 2 ") == 2

    def test_garbage_strings_count_as_dnf(self):
        assert normalize_guesses("four") == 7
        assert normalize_guesses("") == 7

    def test_booleans_are_not_numbers(self):
        assert normalize_guesses(True) == 7

    def test_fractional_values_are_truncated(self):
        assert normalize_guesses(3.7) == 3

    def test_zero_missing_and_flagged_all_normalize_to_dnf(self):
        # guesses 0, guesses null, and dnf with guesses 3 all give 7
        assert normalize_guesses(0) == 7
        assert normalize_guesses(None) == 7
        assert normalize_guesses(3, dnf=True) == 7


class TestIsDnf:

    def test_dnf_detection(self):
        assert is_dnf(None)
        assert is_dnf(5, dnf=True)
        assert not is_dnf(6)
