from __future__ import annotations
import logging
from datetime import date, timedelta
from typing import Callable, List, Optional

from .base_client import AnswerClient, WordStore, format_day

logger = logging.getLogger(__name__)


class DailyAnswerProvider:
    """Resolves the answer for a day from the cache, falling back to the remote client."""

    def __init__(self, cache: WordStore, client: AnswerClient):
        self.cache = cache
        self.client = client

    def get_answer(self, day: date) -> Optional[str]:
        """
        Return the answer for a day, or None if it is not published yet.

        A freshly fetched answer is written to the cache before returning.
        """
        word = self.cache.get(day)
        if word is not None:
            return word

        solution = self.client.fetch_solution(day)
        if solution is None:
            return None

        logger.info("Fetched word for %s", format_day(day))
        self.cache.put(day, solution.solution)
        return solution.solution

    def prefetch(
        self,
        start: date,
        on_day: Optional[Callable[[date], None]] = None,
    ) -> List[date]:
        """
        Resolve consecutive days starting at `start` until one is unpublished.

        Args:
            start: First day to resolve
            on_day: Called with each day once its word is cached

        Returns:
            The days that were read or fetched, in order
        """
        days = []
        current = start
        while self.get_answer(current) is not None:
            days.append(current)
            if on_day:
                on_day(current)
            current += timedelta(days=1)
        return days
