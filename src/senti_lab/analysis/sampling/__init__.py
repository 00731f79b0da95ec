"""
sampling
========

Random helpers over the word banks (practice words, fun facts, example sentences).
"""

from .helpers import (
    generate_example,
    get_example_templates,
    get_fun_fact,
    get_random_words,
    load_example_templates,
)

__all__ = [
    "generate_example",
    "get_example_templates",
    "get_fun_fact",
    "get_random_words",
    "load_example_templates",
]
