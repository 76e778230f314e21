"""Keyword-weighted fuzzy matching of asset names."""

from __future__ import annotations

import re
from typing import Iterable, Sequence

EXACT_SCORE = 1000
PREFIX_SCORE = 500
CONTAINS_SCORE = 300
ALL_TOKENS_SCORE = 200
TOKEN_SCORE = 50

# Names longer than this lose LENGTH_PENALTY points per extra character.
LENGTH_LIMIT = 30
LENGTH_PENALTY = 2

_SEPARATORS_RE = re.compile(r"[ \-_\t]+")


def split_keyword(keyword: str) -> list[str]:
    """Split a keyword into tokens on spaces, hyphens, underscores and tabs."""
    return [part for part in _SEPARATORS_RE.split(keyword) if part]


def _keyword_score(candidate: str, keyword: str) -> int:
    if candidate == keyword:
        return EXACT_SCORE
    if candidate.startswith(keyword):
        return PREFIX_SCORE
    if keyword in candidate:
        return CONTAINS_SCORE

    tokens = split_keyword(keyword)
    hits = sum(1 for token in tokens if token in candidate)
    if hits == len(tokens):
        return ALL_TOKENS_SCORE * len(tokens)
    return TOKEN_SCORE * hits


def score_candidate(candidate: str, keywords: Iterable[str]) -> int:
    """Score one candidate against every keyword, case-insensitively."""
    lowered = candidate.lower()
    score = sum(_keyword_score(lowered, keyword.lower()) for keyword in keywords)
    if len(lowered) > LENGTH_LIMIT:
        score -= (len(lowered) - LENGTH_LIMIT) * LENGTH_PENALTY
    return score


def best_match(candidates: Iterable[str], keywords: Sequence[str]) -> str:
    """Return the highest-scoring candidate, or "" when nothing scores above zero.

    Ties keep the earliest candidate.
    """
    best = ""
    best_score = 0
    for candidate in candidates:
        score = score_candidate(candidate, keywords)
        if score > best_score:
            best_score = score
            best = candidate
    return best
