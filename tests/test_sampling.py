from __future__ import annotations

import json
import random

import pytest

from senti_lab.analysis.lexicon import LexiconError, get_lexicon
from senti_lab.analysis.sampling import (
    generate_example,
    get_example_templates,
    get_fun_fact,
    get_random_words,
    load_example_templates,
)
from senti_lab.analysis.types import Sentiment, UnknownSentimentError
from senti_lab.utils.load_config import ConfigParseError

"""
Tests: analysis/sampling (helpers.py)
- distinct words from the requested bank only, oversize requests
- fun facts drawn from the declared pool, non-degenerate
- example sentences filled with bank words
"""


@pytest.mark.parametrize("category", list(Sentiment))
def test_random_words_are_distinct_and_from_bank(category):
    bank = set(get_lexicon().words(category))
    rng = random.Random(7)
    for n in range(0, 6):
        words = get_random_words(category, n, rng=rng)
        assert len(words) == min(n, len(bank))
        assert len(set(words)) == len(words)
        assert set(words) <= bank


def test_oversize_request_returns_whole_bank():
    bank = get_lexicon().words("positive")
    words = get_random_words("positive", len(bank) + 50)
    assert sorted(words) == sorted(bank)


def test_zero_count_is_empty():
    assert get_random_words(Sentiment.NEGATIVE, 0) == []


def test_negative_count_is_rejected():
    with pytest.raises(ValueError):
        get_random_words("neutral", -1)


def test_seeded_rng_is_reproducible():
    a = get_random_words("positive", 5, rng=random.Random(42))
    b = get_random_words("positive", 5, rng=random.Random(42))
    assert a == b


def test_unknown_category_fails_fast():
    with pytest.raises(UnknownSentimentError):
        get_random_words("happy", 3)
    with pytest.raises(UnknownSentimentError):
        get_fun_fact("angry")


@pytest.mark.parametrize("category", list(Sentiment))
def test_fun_fact_from_pool_and_varied(category):
    pool = set(get_lexicon().fun_facts(category))
    rng = random.Random(3)
    seen = {get_fun_fact(category, rng=rng) for _ in range(200)}
    assert seen <= pool
    assert all(f.strip() for f in seen)
    if len(pool) >= 2:
        assert len(seen) > 1


# ──────────────────────────────────────────────────────────────────────────────
# Example sentences
# ──────────────────────────────────────────────────────────────────────────────

@pytest.mark.parametrize("category", list(Sentiment))
def test_generate_example_uses_bank_words(category):
    rng = random.Random(11)
    bank = set(get_lexicon().words(category))
    for _ in range(20):
        sentence = generate_example(category, rng=rng)
        assert "{" not in sentence and "}" not in sentence
        assert any(w.strip(".,!?'").lower() in bank for w in sentence.split())


def test_generate_example_with_custom_templates():
    templates = {c: ("<{0}|{1}>",) for c in Sentiment}
    out = generate_example("negative", rng=random.Random(0), templates=templates)
    first, second = out.strip("<>").split("|")
    bank = set(get_lexicon().words("negative"))
    assert first in bank and second in bank and first != second


def test_bundled_templates_cover_all_categories():
    templates = load_example_templates()
    assert set(templates) == set(Sentiment)
    assert all(templates[c] for c in Sentiment)


def test_bad_templates_rejected(tmp_path):
    (tmp_path / "examples.json").write_text(
        json.dumps({"positive": ["no slot"], "negative": ["{0}"], "neutral": ["{0}"]}),
        encoding="utf-8",
    )
    with pytest.raises(ConfigParseError):
        load_example_templates(base_dir=tmp_path)


def test_template_validator_error_type():
    from senti_lab.analysis.sampling.helpers import _validate_templates

    with pytest.raises(LexiconError):
        _validate_templates({"positive": ["{0}"], "negative": []})


def test_example_templates_are_read_once(monkeypatch):
    from senti_lab.analysis.sampling import helpers

    calls = []
    real = helpers.load_example_templates

    def counting(base_dir=None):
        calls.append(base_dir)
        return real(base_dir)

    monkeypatch.setattr(helpers, "load_example_templates", counting)
    get_example_templates.cache_clear()
    try:
        for seed in range(5):
            generate_example("positive", rng=random.Random(seed))
        assert get_example_templates() is get_example_templates()
    finally:
        get_example_templates.cache_clear()
    assert len(calls) == 1


def test_cached_templates_are_read_only():
    templates = get_example_templates()
    with pytest.raises(TypeError):
        templates[Sentiment.POSITIVE] = ("{0}",)  # type: ignore[index]
