from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from typing import Optional, Protocol

DATE_FORMAT = "%Y-%m-%d"


class AnswerFetchError(RuntimeError):
    """The answer endpoint replied with something we could not understand."""


@dataclass(frozen=True)
class WordleSolution:
    """Successful payload from the daily answer endpoint."""
    id: int
    solution: str
    print_date: str
    days_since_launch: int
    editor: str


class AnswerClient(Protocol):
    """Protocol for anything that can look up the answer for a given day."""

    def fetch_solution(self, day: date) -> Optional[WordleSolution]:
        """
        Fetch the solution for a day.

        Returns:
            WordleSolution, or None if the day has not been published yet

        Raises:
            AnswerFetchError: If the payload is malformed
            requests.RequestException: If the HTTP call fails
        """
        ...


class WordStore(Protocol):
    """Key-value store mapping a date to its answer word."""

    def get(self, day: date) -> Optional[str]:
        ...

    def put(self, day: date, word: str) -> None:
        ...


def format_day(day: date) -> str:
    return day.strftime(DATE_FORMAT)
