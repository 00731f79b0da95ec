# src/senti_lab/analysis/sentiment/scoring.py
from __future__ import annotations

"""
scoring.py

Does: Turn per-category match counts into a winning category and an integer
      confidence percentage.
Returns: pick_winner(), compute_confidence().
Used by: sentiment.core.
"""

import math
from collections.abc import Mapping

from senti_lab.analysis.types import Sentiment

__all__ = [
    "BASELINE_CONFIDENCE",
    "MIN_CONFIDENCE",
    "MAX_CONFIDENCE",
    "pick_winner",
    "compute_confidence",
]

__docformat__ = "google"

# ── Tunables ─────────────────────────────────────────────────────────────────
BASELINE_CONFIDENCE = 50  # no positive/negative evidence at all
MIN_CONFIDENCE = 30
MAX_CONFIDENCE = 100


def pick_winner(counts: Mapping[Sentiment, int]) -> Sentiment:
    """
    Does: Resolve the winning category.
          - nothing matched                      → neutral
          - neutral strictly above pos and neg   → neutral
          - pos == neg                           → neutral (signals cancel out)
          - otherwise the larger of pos / neg
    Returns: Sentiment.
    """
    pos = counts.get(Sentiment.POSITIVE, 0)
    neg = counts.get(Sentiment.NEGATIVE, 0)
    neu = counts.get(Sentiment.NEUTRAL, 0)

    if neu > pos and neu > neg:
        return Sentiment.NEUTRAL
    if pos == neg:
        return Sentiment.NEUTRAL
    return Sentiment.POSITIVE if pos > neg else Sentiment.NEGATIVE


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def compute_confidence(winner: Sentiment, counts: Mapping[Sentiment, int]) -> int:
    """
    Does: winner_count / (pos + neg) as a percentage, rounded half-up and
          clamped to [MIN_CONFIDENCE, MAX_CONFIDENCE]. Neutral matches never
          enter the denominator; with no polar signal the baseline is returned.
    Returns: int in [0, 100].
    """
    total_signal = counts.get(Sentiment.POSITIVE, 0) + counts.get(Sentiment.NEGATIVE, 0)
    if total_signal <= 0:
        return BASELINE_CONFIDENCE
    pct = _round_half_up(counts.get(winner, 0) / total_signal * 100)
    return max(MIN_CONFIDENCE, min(MAX_CONFIDENCE, pct))
