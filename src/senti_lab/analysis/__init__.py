# senti_lab/analysis/__init__.py

"""
analysis
========

Lexicon-based sentiment core: tokenizer, word banks, classifier, sampling
helpers and exercise helpers.

Exports:
- analyze_sentiment, get_random_words, get_fun_fact (the UI-facing trio)
- generate_example, find_feeling_words, build_sorting_round, check_word_sort
- build_finder_round, build_sentence_round
- suggest_words
- Sentiment, SentimentResult, UnknownSentimentError
- Lexicon, LexiconError, get_lexicon
"""

from .types import Sentiment, SentimentResult, Token, UnknownSentimentError
from .lexicon import Lexicon, LexiconError, get_lexicon, load_lexicon
from .sentiment import analyze_sentiment, classify
from .sampling import generate_example, get_fun_fact, get_random_words
from .fuzzy import suggest_words
from .games import (
    build_finder_round,
    build_sentence_round,
    build_sorting_round,
    check_word_sort,
    find_feeling_words,
)

__all__ = [
    "Sentiment",
    "SentimentResult",
    "Token",
    "UnknownSentimentError",
    "Lexicon",
    "LexiconError",
    "get_lexicon",
    "load_lexicon",
    "analyze_sentiment",
    "classify",
    "generate_example",
    "get_fun_fact",
    "get_random_words",
    "suggest_words",
    "build_finder_round",
    "build_sentence_round",
    "build_sorting_round",
    "check_word_sort",
    "find_feeling_words",
]

__docformat__ = "google"
