# src/senti_lab/analysis/fuzzy/suggest.py
from __future__ import annotations

"""
suggest.py

Does: "Did you mean...?" hints for misspelled words typed by the player,
      ranked by rapidfuzz similarity against every lexicon word.
Returns: suggest_words(), best_suggestion().
Used by: Word-sorting checks and the CLI. The classifier itself stays literal.
"""

import logging
from typing import NamedTuple

from rapidfuzz import fuzz, process

from senti_lab.analysis.lexicon import Lexicon, get_lexicon
from senti_lab.analysis.token import normalize_token
from senti_lab.analysis.types import Sentiment

__all__ = [
    "Suggestion",
    "suggest_words",
    "best_suggestion",
]

__docformat__ = "google"

log = logging.getLogger(__name__)

# ── Tunables ─────────────────────────────────────────────────────────────────
SUGGEST_THRESHOLD = 80
SUGGEST_LIMIT = 3


class Suggestion(NamedTuple):
    word: str
    sentiment: Sentiment
    score: float


def suggest_words(
    word: str,
    *,
    limit: int = SUGGEST_LIMIT,
    score_cutoff: float = SUGGEST_THRESHOLD,
    lexicon: Lexicon | None = None,
) -> list[Suggestion]:
    """
    Does: Rank lexicon words by fuzz.ratio against the normalized input.
    Returns: Up to `limit` suggestions scoring >= score_cutoff, best first
             (ties broken alphabetically). Empty for blank input.
    """
    query = normalize_token(word)
    if not query or limit <= 0:
        return []
    lex = lexicon if lexicon is not None else get_lexicon()
    choices = sorted(w for w, _ in lex.items())
    hits = process.extract(
        query, choices, scorer=fuzz.ratio, limit=limit, score_cutoff=score_cutoff
    )
    out = [Suggestion(w, lex.lookup(w), float(score)) for w, score, _ in hits]
    out.sort(key=lambda s: (-s.score, s.word))
    log.debug("suggest_words(%r) → %s", word, [s.word for s in out])
    return out


def best_suggestion(word: str, *, lexicon: Lexicon | None = None) -> Suggestion | None:
    hits = suggest_words(word, limit=1, lexicon=lexicon)
    return hits[0] if hits else None
