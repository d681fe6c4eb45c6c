from __future__ import annotations
import logging
from pathlib import Path
from typing import FrozenSet

import requests
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential

from ..core.env import DEFAULT_DICTIONARY_URL

logger = logging.getLogger(__name__)


class DictionaryClient:
    """
    Downloads the list of accepted guesses (plain text, one word per line).
    """

    def __init__(
        self,
        session: requests.Session | None = None,
        url: str = DEFAULT_DICTIONARY_URL,
        timeout: float = 10.0,
    ):
        self.session = session or requests.Session()
        self.url = url
        self.timeout = timeout

    @retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=1, max=8),
        retry=retry_if_exception_type(requests.RequestException),
        reraise=True,
    )
    def fetch_text(self) -> str:
        logger.debug("GET %s", self.url)
        response = self.session.get(self.url, timeout=self.timeout)
        response.raise_for_status()
        return response.text

    def download(self, path: Path) -> Path:
        """Fetch the word list and write it to `path`, replacing any old copy."""
        text = self.fetch_text()
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        logger.info("Wrote dictionary to %s", path)
        return path


def read_dictionary(path: Path) -> FrozenSet[str]:
    with Path(path).open("r", encoding="utf-8") as f:
        return frozenset(line.strip().lower() for line in f if line.strip())


def load_dictionary(
    path: Path,
    client: DictionaryClient | None = None,
    refresh: bool = False,
) -> FrozenSet[str]:
    """
    Load the dictionary from `path`, downloading it first if needed.

    Args:
        path: Local dictionary file
        client: Used when the file is missing or `refresh` is set
        refresh: Re-download even if the file exists

    Returns:
        Frozen set of lowercase words
    """
    path = Path(path)
    if refresh or not path.exists():
        (client or DictionaryClient()).download(path)
    return read_dictionary(path)
