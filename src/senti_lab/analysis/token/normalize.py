# senti_lab/analysis/token/normalize.py
# ──────────────────────────────────────────────────────────────
# Tokenization for literal lexicon matching
# ──────────────────────────────────────────────────────────────
"""
normalize.

Does: Split free text on whitespace and normalize each piece for lexicon
      lookups (Unicode hygiene, lowercase, strip every non-alphanumeric char),
      keeping the surface form next to the normalized one.
Returns: normalize_token(), tokenize(), get_tokens_and_counts().
Used by: Sentiment classifier, lexicon validation, feeling-finder game.
"""

from __future__ import annotations

import re
import unicodedata
from collections import Counter

from senti_lab.analysis.types import Token

__all__ = [
    "normalize_token",
    "tokenize",
    "get_tokens_and_counts",
]

_NON_ALNUM_RE = re.compile(r"[^a-z0-9]+")


def _unicode_hygiene(s: str) -> str:
    """
    Does: NFKC fold (full-width letters and ligatures → ASCII).
    Returns: Cleaned string.
    """
    return unicodedata.normalize("NFKC", s)


def normalize_token(token: str) -> str:
    """
    Does: Lowercase `token` and drop everything that is not [a-z0-9].
    Returns: Normalized form, possibly "" for pure punctuation.
    """
    if not isinstance(token, str):
        return ""
    return _NON_ALNUM_RE.sub("", _unicode_hygiene(token).lower())


def tokenize(text: str) -> list[Token]:
    """
    Does: Whitespace split; keep (original, normalized) pairs whose normalized
          form is non-empty.
    Returns: List of Token, in input order. Empty input → [].
    """
    if not isinstance(text, str) or not text:
        return []
    tokens: list[Token] = []
    for raw in text.split():
        norm = normalize_token(raw)
        if norm:
            tokens.append(Token(raw, norm))
    return tokens


def get_tokens_and_counts(text: str) -> dict[str, int]:
    """
    Does: Count normalized tokens of `text`.
    Returns: Dict[token → count].
    """
    return dict(Counter(t.normalized for t in tokenize(text)))
