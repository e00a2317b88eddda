"""
Skill-signal matcher.

A signal matches when at least one interest token is a substring of it
(token inside signal, not the reverse): the token ``"lead"`` matches the
signal ``"leadership"``.

The direction is intentional: keep it token-in-signal, do not flip it to
signal-in-token.

Known limitation: short tokens match loosely.  ``"ai"`` matches ``"mail"``
and ``"training"``.  Matching is deliberately permissive and has no
word-boundary check.
"""

from __future__ import annotations

from typing import Iterable

from niche_scanner.models.niche import MicroNiche


def match_signals(
    skill_signals: Iterable[str],
    tokens:        Iterable[str],
) -> tuple[str, ...]:
    """Return the signals containing at least one token, in signal order.

    ``tokens`` is iterated once per signal, so it must be restartable
    (an ``InterestTokens`` or a list, not a bare generator).
    """
    return tuple(
        signal for signal in skill_signals
        if any(token in signal for token in tokens)
    )


def interest_coverage(matched: int, total: int) -> float:
    """Fraction of signals matched; 0.0 when the niche has no signals."""
    if total == 0:
        return 0.0
    return matched / total


def match_niche(
    niche:  MicroNiche,
    tokens: Iterable[str],
) -> tuple[tuple[str, ...], float]:
    """Return ``(matched_signals, interest_coverage)`` for one niche."""
    matched = match_signals(niche.skill_signals, tokens)
    return matched, interest_coverage(len(matched), len(niche.skill_signals))
