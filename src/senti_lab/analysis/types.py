# senti_lab/analysis/types.py
from __future__ import annotations

"""
types.py.

Does: Define the closed sentiment enumeration, the token pair produced by the
tokenizer and the immutable result handed back to callers.
"""

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, NamedTuple

__all__ = [
    "Sentiment",
    "SentimentLike",
    "UnknownSentimentError",
    "Token",
    "SentimentResult",
]

__docformat__ = "google"


class UnknownSentimentError(ValueError):
    """Raise when a category outside positive/negative/neutral is requested."""


class Sentiment(str, Enum):
    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"

    @classmethod
    def parse(cls, value: SentimentLike) -> Sentiment:
        """
        Does: Accept a Sentiment member or its exact string value.
        Raises: UnknownSentimentError for anything else (caller bug, not recoverable).
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            allowed = ", ".join(m.value for m in cls)
            raise UnknownSentimentError(
                f"Unknown sentiment category {value!r} (expected one of: {allowed})"
            ) from None

    @property
    def is_feeling(self) -> bool:
        """True for the two polar categories."""
        return self is not Sentiment.NEUTRAL


SentimentLike = Sentiment | str


class Token(NamedTuple):
    original: str
    normalized: str


@dataclass(frozen=True)
class SentimentResult:
    sentiment: Sentiment
    confidence: int
    score: int
    matched_words: tuple[str, ...]
    emoji: str
    message: str

    def to_dict(self) -> dict[str, Any]:
        """Does: JSON-friendly view (enum flattened, tuple → list)."""
        out = asdict(self)
        out["sentiment"] = self.sentiment.value
        out["matched_words"] = list(self.matched_words)
        return out
