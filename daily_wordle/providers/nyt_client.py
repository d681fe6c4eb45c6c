from __future__ import annotations
import logging
from datetime import date
from typing import Optional

import orjson
import requests
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential

from .base_client import AnswerFetchError, WordleSolution, format_day
from ..core.env import DEFAULT_ANSWER_URL

logger = logging.getLogger(__name__)


class NYTWordleClient:
    """
    Client for the NYT daily Wordle endpoint.

    The endpoint answers with a JSON success payload for published days and
    a JSON failure payload ({"status", "errors", "results"}) for days that
    are not out yet.
    """

    def __init__(
        self,
        session: requests.Session | None = None,
        url_template: str = DEFAULT_ANSWER_URL,
        timeout: float = 10.0,
    ):
        """
        Initialize the client.

        Args:
            session: HTTP session to reuse (defaults to a new requests.Session)
            url_template: Endpoint URL with a "{date}" placeholder
            timeout: Per-request timeout in seconds
        """
        self.session = session or requests.Session()
        self.url_template = url_template
        self.timeout = timeout

    def url_for(self, day: date) -> str:
        return self.url_template.format(date=format_day(day))

    @retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=1, max=8),
        retry=retry_if_exception_type(requests.RequestException),
        reraise=True,
    )
    def fetch_solution(self, day: date) -> Optional[WordleSolution]:
        """
        Fetch the answer for a day.

        Args:
            day: Puzzle date

        Returns:
            WordleSolution, or None if the endpoint says the day is not published

        Raises:
            AnswerFetchError: If the body is not JSON or has an unknown shape
            requests.RequestException: If all attempts fail at the HTTP level
        """
        url = self.url_for(day)
        logger.debug("GET %s", url)
        response = self.session.get(url, timeout=self.timeout)
        return self._parse_response(response.content, day)

    def _parse_response(self, body: bytes, day: date) -> Optional[WordleSolution]:
        """Turn a response body into a WordleSolution or None."""
        try:
            data = orjson.loads(body)
        except orjson.JSONDecodeError as e:
            raise AnswerFetchError(f"Invalid JSON for {format_day(day)}: {e}")

        if not isinstance(data, dict):
            raise AnswerFetchError(f"Unexpected payload for {format_day(day)}: {str(data)[:200]}")

        if "solution" in data:
            try:
                return WordleSolution(
                    id=int(data["id"]),
                    solution=str(data["solution"]).strip().lower(),
                    print_date=str(data["print_date"]),
                    days_since_launch=int(data["days_since_launch"]),
                    editor=str(data.get("editor", "")),
                )
            except (KeyError, TypeError, ValueError) as e:
                raise AnswerFetchError(f"Malformed solution payload for {format_day(day)}: {e}")

        if "status" in data or "errors" in data:
            logger.info("No word published for %s (status=%s)", format_day(day), data.get("status"))
            return None

        raise AnswerFetchError(f"Unexpected payload for {format_day(day)}: {str(data)[:200]}")
