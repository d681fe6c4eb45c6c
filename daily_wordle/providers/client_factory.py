from __future__ import annotations
from pathlib import Path

import requests

from .answer_provider import DailyAnswerProvider
from .cache import DateWordCache
from .dictionary_client import DictionaryClient
from .nyt_client import NYTWordleClient
from ..core.env import Settings


def build_answer_provider(
    cache_dir: Path,
    settings: Settings | None = None,
    session: requests.Session | None = None,
) -> DailyAnswerProvider:
    """
    Wire a cache in `cache_dir` to the NYT client.

    Args:
        cache_dir: Directory holding one file per cached day
        settings: Endpoint and timeout (defaults to Settings.from_env())
        session: HTTP session shared with other clients

    Returns:
        DailyAnswerProvider ready to resolve answers
    """
    settings = settings or Settings.from_env()
    client = NYTWordleClient(
        session=session,
        url_template=settings.answer_url,
        timeout=settings.timeout,
    )
    return DailyAnswerProvider(DateWordCache(cache_dir), client)


def build_dictionary_client(
    settings: Settings | None = None,
    session: requests.Session | None = None,
) -> DictionaryClient:
    settings = settings or Settings.from_env()
    return DictionaryClient(
        session=session,
        url=settings.dictionary_url,
        timeout=settings.timeout,
    )
