# src/senti_lab/analysis/sentiment/core.py

"""
Lexicon Sentiment Classification.
--------------------------------
Does:
- Literal word matching of whitespace tokens against the three word banks
- Per-category counters + matched surface words (order and duplicates kept)
- Tie-break: equal positive/negative evidence cancels out to neutral
- Confidence from the winner's share of the polar signal (see scoring.py)
- High-level API: analyze_sentiment(text) → SentimentResult

Every input resolves to a result; only an invalid lexicon can raise.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import NamedTuple

from senti_lab.analysis.lexicon import Lexicon, get_lexicon
from senti_lab.analysis.sentiment.scoring import compute_confidence, pick_winner
from senti_lab.analysis.token import tokenize
from senti_lab.analysis.types import Sentiment, SentimentResult, Token
from senti_lab.utils.log import debug

__all__ = [
    "Classification",
    "classify",
    "build_result",
    "analyze_sentiment",
]

__docformat__ = "google"

logger = logging.getLogger(__name__)


class Classification(NamedTuple):
    winner: Sentiment
    counts: dict[Sentiment, int]
    matches: dict[Sentiment, list[str]]

    @property
    def score(self) -> int:
        return self.counts[self.winner]

    @property
    def matched_words(self) -> list[str]:
        return self.matches[self.winner]


# ─────────────────────────────────────────────
# Classifier
# ─────────────────────────────────────────────
def classify(tokens: Iterable[Token], lexicon: Lexicon | None = None) -> Classification:
    """
    Does: Count lexicon hits per category and keep the original token of each hit.
    Returns: Classification(winner, counts, matches).
    """
    lex = lexicon if lexicon is not None else get_lexicon()
    counts = {c: 0 for c in Sentiment}
    matches: dict[Sentiment, list[str]] = {c: [] for c in Sentiment}

    for tok in tokens:
        category = lex.lookup(tok.normalized)
        if category is None:
            continue
        counts[category] += 1
        matches[category].append(tok.original)

    return Classification(pick_winner(counts), counts, matches)


# ─────────────────────────────────────────────
# Result builder
# ─────────────────────────────────────────────
def build_result(
    sentiment: Sentiment,
    score: int,
    matched_words: Iterable[str],
    confidence: int,
    lexicon: Lexicon | None = None,
) -> SentimentResult:
    """Does: Attach the category's emoji and message; no side effects."""
    info = (lexicon if lexicon is not None else get_lexicon()).info(sentiment)
    return SentimentResult(
        sentiment=sentiment,
        confidence=confidence,
        score=score,
        matched_words=tuple(matched_words),
        emoji=info.emoji,
        message=info.message,
    )


# ─────────────────────────────────────────────
# Public API
# ─────────────────────────────────────────────
def analyze_sentiment(text: str, *, lexicon: Lexicon | None = None) -> SentimentResult:
    """
    Does: Tokenize → classify → confidence → result.
    Returns: SentimentResult; empty or unmatched text gives neutral / 0 / () / 50.
    """
    lex = lexicon if lexicon is not None else get_lexicon()
    result = classify(tokenize(text), lex)
    confidence = compute_confidence(result.winner, result.counts)

    counts_str = ", ".join(f"{c.value}={n}" for c, n in result.counts.items())
    logger.debug("analyze_sentiment: %s → %s (%d%%)", counts_str, result.winner.value, confidence)
    debug(f"counts {counts_str} → {result.winner.value} {confidence}%", topic="sentiment")

    return build_result(result.winner, result.score, result.matched_words, confidence, lex)
