"""
sentiment
=========

Lexicon-based sentiment classification.

Submodules:
- core    : Tokenize, count matches per category, build the result.
- scoring : Winner tie-break and confidence percentage.

Exports:
- analyze_sentiment
- classify
- build_result
- compute_confidence
- pick_winner
"""

from .core import (
    Classification,
    analyze_sentiment,
    build_result,
    classify,
)
from .scoring import compute_confidence, pick_winner

__all__ = [
    "Classification",
    "analyze_sentiment",
    "build_result",
    "classify",
    "compute_confidence",
    "pick_winner",
]

__docformat__ = "google"
