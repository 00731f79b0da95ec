# src/senti_lab/analysis/games/exercises.py

"""
exercises
=========

Does: Game-facing helpers built on the word banks:
      - Feeling Finder: mark which words of a sentence carry a feeling
      - Word Sorting: deal a shuffled round of cards and check a player's drop
      - Sentence Building: deal shuffled subjects, verbs, feeling words and endings
Used By: Exercise pages (external callers) and the CLI `find` command.
Returns: Plain immutable records; callers keep all game state (score, clicks).
"""

from __future__ import annotations

import logging
import random
from collections.abc import Mapping
from functools import lru_cache
from pathlib import Path
from typing import Any, NamedTuple

from senti_lab.analysis.fuzzy import Suggestion, suggest_words
from senti_lab.analysis.lexicon import Lexicon, LexiconError, get_lexicon
from senti_lab.analysis.sampling import get_random_words
from senti_lab.analysis.token import normalize_token
from senti_lab.analysis.types import Sentiment, SentimentLike
from senti_lab.utils.load_config import load_config

__all__ = [
    "FeelingWord",
    "SortingCard",
    "SortCheck",
    "FinderRound",
    "SentenceRound",
    "GameData",
    "find_feeling_words",
    "build_finder_round",
    "build_sorting_round",
    "check_word_sort",
    "build_sentence_round",
    "load_game_data",
    "get_game_data",
]

log = logging.getLogger(__name__)

# Default deal for one sorting round
ROUND_SIZES: dict[Sentiment, int] = {
    Sentiment.POSITIVE: 3,
    Sentiment.NEGATIVE: 3,
    Sentiment.NEUTRAL: 2,
}

# Feeling words dealt for one sentence-building round
ADJECTIVE_SIZES: dict[Sentiment, int] = {
    Sentiment.POSITIVE: 3,
    Sentiment.NEGATIVE: 3,
    Sentiment.NEUTRAL: 2,
}

GAMES_FILE = "games"


class FeelingWord(NamedTuple):
    word: str
    sentiment: Sentiment | None

    @property
    def is_feeling(self) -> bool:
        return self.sentiment is not None and self.sentiment.is_feeling


class SortingCard(NamedTuple):
    word: str
    sentiment: Sentiment


class SortCheck(NamedTuple):
    word: str
    target: Sentiment
    actual: Sentiment | None
    suggestions: tuple[Suggestion, ...]

    @property
    def correct(self) -> bool:
        return self.actual is self.target


class FinderRound(NamedTuple):
    sentence: str
    words: tuple[FeelingWord, ...]

    @property
    def feeling_count(self) -> int:
        return sum(1 for w in self.words if w.is_feeling)


class SentenceRound(NamedTuple):
    subjects: tuple[str, ...]
    verbs: tuple[str, ...]
    adjectives: tuple[str, ...]
    objects: tuple[str, ...]


class GameData(NamedTuple):
    subjects: tuple[str, ...]
    verbs: tuple[str, ...]
    objects: tuple[str, ...]
    finder_sentences: tuple[str, ...]


# ── Game data ────────────────────────────────────────────────────────────────
def _strings(raw: Any, key: str) -> tuple[str, ...]:
    if not isinstance(raw, list) or not raw:
        raise LexiconError(f"'{key}' must be a non-empty list")
    if not all(isinstance(v, str) and v.strip() for v in raw):
        raise LexiconError(f"'{key}' holds non-string or blank entries")
    return tuple(raw)


def _validate_game_data(data: Mapping[str, Any]) -> GameData:
    parts = data.get("sentence_parts")
    if not isinstance(parts, Mapping):
        raise LexiconError("'sentence_parts' must be an object")
    return GameData(
        subjects=_strings(parts.get("subjects"), "subjects"),
        verbs=_strings(parts.get("verbs"), "verbs"),
        objects=_strings(parts.get("objects"), "objects"),
        finder_sentences=_strings(data.get("finder_sentences"), "finder_sentences"),
    )


def load_game_data(base_dir: Path | None = None) -> GameData:
    """Does: Read <data>/games.json (sentence parts and Feeling Finder sentences)."""
    return load_config(GAMES_FILE, "validated_dict", base_dir=base_dir, validator=_validate_game_data)


@lru_cache(maxsize=1)
def get_game_data() -> GameData:
    return load_game_data()


# ── Feeling Finder ───────────────────────────────────────────────────────────
def find_feeling_words(sentence: str, *, lexicon: Lexicon | None = None) -> list[FeelingWord]:
    """
    Does: Look up every whitespace piece of `sentence` (surface form kept).
    Returns: One FeelingWord per piece, in order; pure punctuation maps to None.
    """
    lex = lexicon if lexicon is not None else get_lexicon()
    return [FeelingWord(w, lex.category_of(w)) for w in sentence.split()]


def build_finder_round(
    *,
    rng: random.Random | None = None,
    lexicon: Lexicon | None = None,
    data: GameData | None = None,
) -> FinderRound:
    """
    Does: Pick one Feeling Finder sentence at random and mark its words.
    Returns: FinderRound(sentence, words); `feeling_count` is how many to find.
    """
    gen = rng if rng is not None else random.Random()
    game = data if data is not None else get_game_data()
    sentence = gen.choice(game.finder_sentences)
    return FinderRound(sentence, tuple(find_feeling_words(sentence, lexicon=lexicon)))


# ── Word Sorting ─────────────────────────────────────────────────────────────
def build_sorting_round(
    *,
    positive: int = ROUND_SIZES[Sentiment.POSITIVE],
    negative: int = ROUND_SIZES[Sentiment.NEGATIVE],
    neutral: int = ROUND_SIZES[Sentiment.NEUTRAL],
    rng: random.Random | None = None,
    lexicon: Lexicon | None = None,
) -> list[SortingCard]:
    """
    Does: Draw distinct words per category and shuffle the whole deck.
    Returns: List of SortingCard.
    """
    gen = rng if rng is not None else random.Random()
    sizes = {Sentiment.POSITIVE: positive, Sentiment.NEGATIVE: negative, Sentiment.NEUTRAL: neutral}
    deck = [
        SortingCard(word, category)
        for category, n in sizes.items()
        for word in get_random_words(category, n, rng=gen, lexicon=lexicon)
    ]
    gen.shuffle(deck)
    return deck


def check_word_sort(
    word: str,
    target: SentimentLike,
    *,
    lexicon: Lexicon | None = None,
) -> SortCheck:
    """
    Does: Compare the bin a word was dropped into with its real category.
          Unknown words come back with spelling suggestions.
    """
    tgt = Sentiment.parse(target)
    lex = lexicon if lexicon is not None else get_lexicon()
    actual = lex.category_of(word)
    suggestions: tuple[Suggestion, ...] = ()
    if actual is None and normalize_token(word):
        suggestions = tuple(suggest_words(word, lexicon=lex))
    log.debug("check_word_sort(%r → %s): actual=%s", word, tgt.value, actual)
    return SortCheck(word, tgt, actual, suggestions)


# ── Sentence Building ────────────────────────────────────────────────────────
def build_sentence_round(
    *,
    rng: random.Random | None = None,
    lexicon: Lexicon | None = None,
    data: GameData | None = None,
) -> SentenceRound:
    """
    Does: Shuffle each column of sentence pieces; the feeling column is drawn
          fresh from the word banks (ADJECTIVE_SIZES per category).
    Returns: SentenceRound; the player's pick is analyzed by the caller.
    """
    gen = rng if rng is not None else random.Random()
    game = data if data is not None else get_game_data()

    def _shuffled(items) -> tuple[str, ...]:
        out = list(items)
        gen.shuffle(out)
        return tuple(out)

    adjectives = [
        word
        for category, n in ADJECTIVE_SIZES.items()
        for word in get_random_words(category, n, rng=gen, lexicon=lexicon)
    ]
    return SentenceRound(
        subjects=_shuffled(game.subjects),
        verbs=_shuffled(game.verbs),
        adjectives=_shuffled(adjectives),
        objects=_shuffled(game.objects),
    )
