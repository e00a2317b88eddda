"""
Tests for niche_scanner/scoring/matcher.py.

What we test
------------
match_signals():
  - A token contained in a signal matches it ("lead" → "leadership").
  - A signal contained in a longer token does NOT match (direction is
    token-in-signal only).
  - Output keeps the niche's signal order, one entry per signal.
  - Known loose match: "ai" matches "mail".

interest_coverage() / match_niche():
  - Fraction of signals matched.
  - Zero signals → 0.0 with no division error.
"""

from __future__ import annotations

import pytest

from niche_scanner.scoring.matcher import interest_coverage, match_niche, match_signals
from niche_scanner.scoring.tokenizer import tokenize


class TestMatchSignals:
    def test_exact_token_matches(self):
        assert match_signals(["leadership"], ["leadership"]) == ("leadership",)

    def test_token_prefix_matches_longer_signal(self):
        assert match_signals(["leadership"], ["lead"]) == ("leadership",)

    def test_signal_inside_longer_token_does_not_match(self):
        assert match_signals(["lead"], ["leadership"]) == ()

    def test_preserves_signal_order(self):
        signals = ["coaching", "management", "leadership"]
        tokens = tokenize("leadership and coaching")
        assert match_signals(signals, tokens) == ("coaching", "leadership")

    def test_signal_listed_once_even_with_many_hits(self):
        assert match_signals(["productivity"], ["product", "productivity"]) == (
            "productivity",
        )

    def test_short_token_matches_loosely(self):
        assert match_signals(["mail", "finance"], ["ai"]) == ("mail",)

    def test_no_tokens_no_matches(self):
        assert match_signals(["leadership"], tokenize("")) == ()


class TestInterestCoverage:
    def test_partial_coverage(self):
        assert interest_coverage(1, 4) == pytest.approx(0.25)

    def test_full_coverage(self):
        assert interest_coverage(3, 3) == 1.0

    def test_zero_signals_gives_zero(self):
        assert interest_coverage(0, 0) == 0.0


class TestMatchNiche:
    def test_zero_signal_niche(self, make_niche):
        niche = make_niche(skill_signals=())
        matched, coverage = match_niche(niche, tokenize("leadership coaching"))
        assert matched == ()
        assert coverage == 0.0

    def test_half_coverage(self, make_niche):
        niche = make_niche(skill_signals=("leadership", "finance"))
        matched, coverage = match_niche(niche, tokenize("leadership"))
        assert matched == ("leadership",)
        assert coverage == pytest.approx(0.5)
