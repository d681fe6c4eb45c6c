"""
Collaborators that feed the game: the daily answer and the dictionary.

Usage:
    from daily_wordle.providers import build_answer_provider

    provider = build_answer_provider(cache_dir)
    answer = provider.get_answer(date.today())   # None if not published yet
"""

from .base_client import AnswerClient, WordStore, WordleSolution, AnswerFetchError, format_day
from .nyt_client import NYTWordleClient
from .cache import DateWordCache
from .answer_provider import DailyAnswerProvider
from .dictionary_client import DictionaryClient, load_dictionary, read_dictionary
from .client_factory import build_answer_provider, build_dictionary_client

__all__ = [
    # Main functions
    "build_answer_provider",
    "build_dictionary_client",
    "load_dictionary",
    "read_dictionary",

    # Classes
    "NYTWordleClient",
    "DateWordCache",
    "DailyAnswerProvider",
    "DictionaryClient",

    # Base types
    "AnswerClient",
    "WordStore",
    "WordleSolution",
    "AnswerFetchError",
    "format_day",
]
