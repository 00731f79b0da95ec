"""
senti_lab
=========

Does: Root package for the kids' sentiment lab core.
Returns: Re-exports the three calls the lesson pages use.
Used by: Playground, Exercises, Quiz and Learn pages; the `senti-lab` CLI.
"""

from .analysis import analyze_sentiment, get_fun_fact, get_random_words

__all__: list[str] = ["analyze_sentiment", "get_fun_fact", "get_random_words"]
__docformat__ = "google"
__version__ = "0.1.0"
