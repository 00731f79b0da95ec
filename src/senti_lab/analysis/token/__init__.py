"""
token.
=====

Does: Provide the whitespace tokenizer and the matching normalization.
Exports: normalize_token, tokenize, get_tokens_and_counts
Used by: Sentiment classifier, lexicon, exercise games.
"""

from __future__ import annotations

from .normalize import (
    get_tokens_and_counts,
    normalize_token,
    tokenize,
)

__all__ = [
    "normalize_token",
    "tokenize",
    "get_tokens_and_counts",
]
