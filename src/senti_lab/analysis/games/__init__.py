"""
games
=====

Helpers for the Feeling Finder, Word Sorting and Sentence Building exercises.
"""

from .exercises import (
    FeelingWord,
    FinderRound,
    GameData,
    SentenceRound,
    SortCheck,
    SortingCard,
    build_finder_round,
    build_sentence_round,
    build_sorting_round,
    check_word_sort,
    find_feeling_words,
    get_game_data,
    load_game_data,
)

__all__ = [
    "FeelingWord",
    "FinderRound",
    "GameData",
    "SentenceRound",
    "SortCheck",
    "SortingCard",
    "build_finder_round",
    "build_sentence_round",
    "build_sorting_round",
    "check_word_sort",
    "find_feeling_words",
    "get_game_data",
    "load_game_data",
]
