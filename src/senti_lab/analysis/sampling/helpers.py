# src/senti_lab/analysis/sampling/helpers.py
from __future__ import annotations

"""
helpers.py

Does: Random draws from the word banks: practice words, fun facts and
      filled-in example sentences.
Returns: get_random_words(), get_fun_fact(), generate_example(), get_example_templates().
Used by: Playground / exercise callers and the CLI.

Randomness: pass `rng` (any random.Random) for reproducible draws; otherwise a
fresh generator is created per call, so no global state is shared.
"""

import logging
import random
from collections.abc import Mapping
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any

from senti_lab.analysis.lexicon import Lexicon, LexiconError, get_lexicon
from senti_lab.analysis.types import Sentiment, SentimentLike
from senti_lab.utils.load_config import load_config

__all__ = [
    "get_random_words",
    "get_fun_fact",
    "generate_example",
    "load_example_templates",
    "get_example_templates",
]

__docformat__ = "google"

log = logging.getLogger(__name__)

EXAMPLES_FILE = "examples"
EXAMPLE_WORDS = 3


def _rng(rng: random.Random | None) -> random.Random:
    return rng if rng is not None else random.Random()


def get_random_words(
    category: SentimentLike,
    count: int,
    *,
    rng: random.Random | None = None,
    lexicon: Lexicon | None = None,
) -> list[str]:
    """
    Does: Shuffle the category's words uniformly and keep the first `count`.
    Returns: Up to `count` distinct words; all of them when `count` exceeds the bank.
    Raises: UnknownSentimentError for a bad category, ValueError for count < 0.
    """
    lex = lexicon if lexicon is not None else get_lexicon()
    words = list(lex.words(category))
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")
    _rng(rng).shuffle(words)
    return words[:count]


def get_fun_fact(
    category: SentimentLike,
    *,
    rng: random.Random | None = None,
    lexicon: Lexicon | None = None,
) -> str:
    """Does: Pick one fun fact of the category uniformly at random."""
    lex = lexicon if lexicon is not None else get_lexicon()
    return _rng(rng).choice(lex.fun_facts(category))


# ── Example sentences ────────────────────────────────────────────────────────
def _validate_templates(data: Mapping[str, Any]) -> dict[Sentiment, tuple[str, ...]]:
    templates: dict[Sentiment, tuple[str, ...]] = {}
    for category in Sentiment:
        pool = data.get(category.value)
        if not isinstance(pool, list) or not pool:
            raise LexiconError(f"{category.value}: expected a non-empty list of templates")
        if not all(isinstance(t, str) and "{0}" in t for t in pool):
            raise LexiconError(f"{category.value}: every template needs a {{0}} placeholder")
        templates[category] = tuple(pool)
    return templates


def load_example_templates(base_dir: Path | None = None) -> dict[Sentiment, tuple[str, ...]]:
    """Does: Read <data>/examples.json (sentence templates with {0}/{1} slots)."""
    return load_config(
        EXAMPLES_FILE, "validated_dict", base_dir=base_dir, validator=_validate_templates
    )


@lru_cache(maxsize=1)
def get_example_templates() -> Mapping[Sentiment, tuple[str, ...]]:
    """Does: Return the bundled templates, read and validated on first call."""
    return MappingProxyType(load_example_templates())


def generate_example(
    category: SentimentLike,
    *,
    rng: random.Random | None = None,
    lexicon: Lexicon | None = None,
    templates: Mapping[Sentiment, tuple[str, ...]] | None = None,
) -> str:
    """
    Does: Draw a few words of the category and drop them into a random template.
    Returns: Sentence string, e.g. "What a happy and lovely day!".
    """
    cat = Sentiment.parse(category)
    gen = _rng(rng)
    pool = (templates if templates is not None else get_example_templates())[cat]
    words = get_random_words(cat, EXAMPLE_WORDS, rng=gen, lexicon=lexicon)
    # pad short banks so "{1}" still has something to fill
    while len(words) < EXAMPLE_WORDS:
        words.append(words[-1])
    template = gen.choice(pool)
    log.debug("generate_example(%s): %r with %s", cat.value, template, words)
    return template.format(*words)
