"""Tests for niche_scanner/scoring/tokenizer.py."""

from __future__ import annotations

from niche_scanner.scoring.tokenizer import InterestTokens, tokenize


class TestTokenize:
    def test_lowercases_and_splits_on_punctuation(self):
        assert list(tokenize("Leadership Development, Tech-Career")) == [
            "leadership", "development", "tech", "career",
        ]

    def test_keeps_digits_and_plus(self):
        assert list(tokenize("C++ and web3")) == ["c++", "and", "web3"]

    def test_drops_empty_pieces(self):
        assert list(tokenize("  ,,;  fitness  //  ")) == ["fitness"]

    def test_empty_text_yields_nothing(self):
        assert list(tokenize("")) == []

    def test_none_text_yields_nothing(self):
        assert list(InterestTokens(None)) == []  # type: ignore[arg-type]

    def test_non_ascii_letters_are_separators(self):
        assert list(tokenize("café leadership")) == ["caf", "leadership"]

    def test_duplicates_are_kept(self):
        assert list(tokenize("coaching coaching")) == ["coaching", "coaching"]


class TestRestartable:
    def test_can_iterate_twice(self):
        tokens = tokenize("productivity systems")
        assert list(tokens) == list(tokens) == ["productivity", "systems"]

    def test_iteration_is_lazy(self):
        it = iter(tokenize("alpha beta"))
        assert next(it) == "alpha"
        assert next(it) == "beta"
