# src/senti_lab/analysis/lexicon/lexicon.py

"""
lexicon
=======

Does: Hold the three word banks (positive / negative / neutral) together with
      each category's emoji, message and fun facts, validated once and frozen.
Used By: Sentiment classifier, result builder, sampling helpers, exercise games.
Returns: Lexicon objects, plus load_lexicon() / get_lexicon() for the bundled data.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any

from senti_lab.analysis.token import normalize_token
from senti_lab.analysis.types import Sentiment, SentimentLike
from senti_lab.utils.load_config import load_config

__all__ = [
    "CategoryInfo",
    "Lexicon",
    "LexiconError",
    "load_lexicon",
    "get_lexicon",
]

log = logging.getLogger(__name__)

LEXICON_FILE = "lexicon"


class LexiconError(ValueError):
    """Raise when lexicon data breaks an invariant (unknown key, overlap, empty pool...)."""


@dataclass(frozen=True)
class CategoryInfo:
    words: tuple[str, ...]
    emoji: str
    message: str
    fun_facts: tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.words:
            raise LexiconError("'words' must be a non-empty list")
        for word in self.words:
            if not isinstance(word, str) or normalize_token(word) != word or not word:
                raise LexiconError(f"word {word!r} is not normalized")
        for key in ("emoji", "message"):
            value = getattr(self, key)
            if not isinstance(value, str) or not value.strip():
                raise LexiconError(f"'{key}' must be a non-empty string")
        if not self.fun_facts or not all(isinstance(f, str) and f.strip() for f in self.fun_facts):
            raise LexiconError("'fun_facts' must be a non-empty list of non-blank strings")


# ── Validation helpers ───────────────────────────────────────────────────────
def _require_text(raw: Mapping[str, Any], key: str, category: str) -> str:
    value = raw.get(key)
    if not isinstance(value, str) or not value.strip():
        raise LexiconError(f"{category}: '{key}' must be a non-empty string")
    return value


def _require_list(raw: Mapping[str, Any], key: str, category: str) -> list[str]:
    value = raw.get(key)
    if not isinstance(value, (list, tuple)) or not value:
        raise LexiconError(f"{category}: '{key}' must be a non-empty list")
    bad = [v for v in value if not isinstance(v, str) or not v.strip()]
    if bad:
        raise LexiconError(f"{category}: '{key}' holds non-string or blank entries: {bad[:3]!r}")
    return list(value)


def _build_category(category: Sentiment, raw: Any) -> CategoryInfo:
    name = category.value
    if not isinstance(raw, Mapping):
        raise LexiconError(f"{name}: expected an object, got {type(raw).__name__}")

    words: list[str] = []
    seen: set[str] = set()
    for word in _require_list(raw, "words", name):
        if normalize_token(word) != word:
            raise LexiconError(
                f"{name}: word {word!r} is not normalized (expected {normalize_token(word)!r})"
            )
        if word in seen:
            log.debug("Duplicate word %r in %s ignored", word, name)
            continue
        seen.add(word)
        words.append(word)

    return CategoryInfo(
        words=tuple(sorted(words)),
        emoji=_require_text(raw, "emoji", name),
        message=_require_text(raw, "message", name),
        fun_facts=tuple(_require_list(raw, "fun_facts", name)),
    )


# ── Lexicon ──────────────────────────────────────────────────────────────────
class Lexicon:
    """Read-only word banks; safe to share between threads once built."""

    __slots__ = ("_categories", "_index")

    def __init__(self, categories: Mapping[Sentiment, CategoryInfo]):
        missing = [c.value for c in Sentiment if c not in categories]
        if missing:
            raise LexiconError(f"Missing categories: {', '.join(missing)}")
        bad = [c.value for c in Sentiment if not isinstance(categories[c], CategoryInfo)]
        if bad:
            raise LexiconError(f"Expected CategoryInfo for: {', '.join(bad)}")

        index: dict[str, Sentiment] = {}
        for category in Sentiment:
            for word in categories[category].words:
                owner = index.get(word)
                if owner is not None and owner is not category:
                    raise LexiconError(
                        f"Word {word!r} listed in both {owner.value} and {category.value}"
                    )
                index[word] = category

        self._categories = MappingProxyType({c: categories[c] for c in Sentiment})
        self._index = MappingProxyType(index)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> Lexicon:
        """
        Does: Build a Lexicon from the JSON layout
              {category: {"words": [...], "emoji": str, "message": str, "fun_facts": [...]}}.
        Raises: LexiconError on unknown categories or any broken invariant.
        """
        unknown = sorted(set(data) - {c.value for c in Sentiment})
        if unknown:
            raise LexiconError(f"Unknown categories in lexicon data: {', '.join(unknown)}")
        categories = {
            c: _build_category(c, data[c.value]) for c in Sentiment if c.value in data
        }
        return cls(categories)

    # ── Lookups ──────────────────────────────────────────────────────────────
    def lookup(self, normalized: str) -> Sentiment | None:
        """Category of an already-normalized token, or None."""
        return self._index.get(normalized)

    def category_of(self, word: str) -> Sentiment | None:
        """Category of a raw word (normalized first), or None."""
        return self._index.get(normalize_token(word))

    def info(self, category: SentimentLike) -> CategoryInfo:
        return self._categories[Sentiment.parse(category)]

    def words(self, category: SentimentLike) -> tuple[str, ...]:
        return self.info(category).words

    def fun_facts(self, category: SentimentLike) -> tuple[str, ...]:
        return self.info(category).fun_facts

    def items(self) -> Iterator[tuple[str, Sentiment]]:
        """Every (word, category) pair."""
        return iter(self._index.items())

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and normalize_token(word) in self._index

    def __len__(self) -> int:
        return len(self._index)

    def __repr__(self) -> str:
        sizes = ", ".join(f"{c.value}={len(i.words)}" for c, i in self._categories.items())
        return f"Lexicon({sizes})"


# ── Loading ──────────────────────────────────────────────────────────────────
def load_lexicon(base_dir: Path | None = None, file: str = LEXICON_FILE) -> Lexicon:
    """Does: Read <data>/lexicon.json through load_config and validate it."""
    lexicon = load_config(file, "validated_dict", base_dir=base_dir, validator=Lexicon.from_mapping)
    log.debug("Loaded %r", lexicon)
    return lexicon


@lru_cache(maxsize=1)
def get_lexicon() -> Lexicon:
    """Does: Return the bundled lexicon, loading it on first call."""
    return load_lexicon()
