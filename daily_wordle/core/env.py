# daily_wordle/core/env.py
from __future__ import annotations
import os
from dataclasses import dataclass
from pathlib import Path
from dotenv import load_dotenv

KNOWN_KEYS = [
    "DAILY_WORDLE_CACHE_DIR",
    "DAILY_WORDLE_MAX_TRIES",
    "DAILY_WORDLE_ANSWER_URL",      # must contain "{date}"
    "DAILY_WORDLE_DICTIONARY_URL",
    "DAILY_WORDLE_TIMEOUT",
    "XDG_CACHE_HOME",
]

DEFAULT_ANSWER_URL = "https://www.nytimes.com/svc/wordle/v2/{date}.json"
DEFAULT_DICTIONARY_URL = (
    "https://gist.githubusercontent.com/dracos/dd0668f281e685bad51479e5acaadb93/raw/"
    "6bfa15d263d6d5b63840a8e5b64e04b382fdb079/valid-wordle-words.txt"
)
APP_NAME = "daily-wordle"


def load_env(dotenv_path: str | None = None) -> dict[str, str]:
    """
    Load .env once. Returns a dict of which keys are present.
    """
    load_dotenv(dotenv_path or os.getenv("DOTENV_PATH", ".env"), override=False)
    found = {}
    for k in KNOWN_KEYS:
        v = os.getenv(k)
        if v:
            found[k] = v
    return found


def default_cache_dir() -> Path:
    base = os.getenv("XDG_CACHE_HOME")
    root = Path(base) if base else Path.home() / ".cache"
    return root / APP_NAME


@dataclass(frozen=True)
class Settings:
    cache_dir: Path
    max_tries: int = 5
    answer_url: str = DEFAULT_ANSWER_URL
    dictionary_url: str = DEFAULT_DICTIONARY_URL
    timeout: float = 10.0

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from the environment; call load_env() first to pick up .env."""
        cache_dir = os.getenv("DAILY_WORDLE_CACHE_DIR")
        try:
            max_tries = int(os.getenv("DAILY_WORDLE_MAX_TRIES", "5"))
            timeout = float(os.getenv("DAILY_WORDLE_TIMEOUT", "10"))
        except ValueError as e:
            raise ValueError(f"Invalid numeric setting in environment: {e}")
        return cls(
            cache_dir=Path(cache_dir).expanduser() if cache_dir else default_cache_dir(),
            max_tries=max_tries,
            answer_url=os.getenv("DAILY_WORDLE_ANSWER_URL", DEFAULT_ANSWER_URL),
            dictionary_url=os.getenv("DAILY_WORDLE_DICTIONARY_URL", DEFAULT_DICTIONARY_URL),
            timeout=timeout,
        )
