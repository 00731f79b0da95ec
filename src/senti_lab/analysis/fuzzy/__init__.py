"""
fuzzy
=====

Spelling hints against the lexicon (rapidfuzz).
"""

from .suggest import Suggestion, best_suggestion, suggest_words

__all__ = ["Suggestion", "best_suggestion", "suggest_words"]
