"""
lexicon
=======

Word banks and per-category metadata (emoji, message, fun facts).

Exports:
- Lexicon, CategoryInfo, LexiconError
- load_lexicon, get_lexicon
"""

from .lexicon import (
    CategoryInfo,
    Lexicon,
    LexiconError,
    get_lexicon,
    load_lexicon,
)

__all__ = [
    "CategoryInfo",
    "Lexicon",
    "LexiconError",
    "get_lexicon",
    "load_lexicon",
]

__docformat__ = "google"
