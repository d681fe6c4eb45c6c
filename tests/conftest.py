import io
from datetime import date
from typing import Dict, Optional

import pytest
from rich.console import Console

from daily_wordle.core.env import KNOWN_KEYS
from daily_wordle.providers import WordleSolution


WORDS = frozenset({
    "fable", "cable", "table", "sable", "eerie",
    "hello", "crane", "apple", "world", "gable",
})


class FakeResponse:
    """Stand-in for requests.Response with just what the clients read."""

    def __init__(self, content: bytes = b"", status_code: int = 200):
        self.content = content
        self.status_code = status_code

    @property
    def text(self) -> str:
        return self.content.decode("utf-8")

    def raise_for_status(self):
        if self.status_code >= 400:
            import requests
            raise requests.HTTPError(f"{self.status_code} error")


class FakeHttp:
    """Stand-in for requests.Session that replays queued responses."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []

    def get(self, url, timeout=None):
        self.calls.append((url, timeout))
        item = self.responses.pop(0)
        if isinstance(item, Exception):
            raise item
        return item


class FakeAnswerClient:
    """AnswerClient backed by a dict of day -> word."""

    def __init__(self, words: Dict[date, str]):
        self.words = words
        self.calls = []

    def fetch_solution(self, day: date) -> Optional[WordleSolution]:
        self.calls.append(day)
        word = self.words.get(day)
        if word is None:
            return None
        return WordleSolution(
            id=1,
            solution=word,
            print_date=day.isoformat(),
            days_since_launch=1000,
            editor="Tracy Bennett",
        )


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Keep the developer's environment and .env out of the tests."""
    for key in KNOWN_KEYS:
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)
    monkeypatch.setenv("DOTENV_PATH", str(tmp_path / "missing.env"))


@pytest.fixture
def dictionary():
    return WORDS


@pytest.fixture
def console():
    return Console(file=io.StringIO(), force_terminal=False, width=80)
