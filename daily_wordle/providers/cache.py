from __future__ import annotations
import logging
import os
import tempfile
from datetime import date
from pathlib import Path
from typing import Optional

from .base_client import format_day
from ..core.validation import is_valid_answer

logger = logging.getLogger(__name__)


class DateWordCache:
    """
    Answer cache with one file per day, named YYYY-MM-DD, holding the word.

    An empty or malformed entry (e.g. left by an interrupted write) reads
    as a miss, so the caller fetches the word again.
    """

    def __init__(self, directory: Path):
        self.directory = Path(directory)

    def path_for(self, day: date) -> Path:
        return self.directory / format_day(day)

    def __contains__(self, day: date) -> bool:
        return self.get(day) is not None

    def get(self, day: date) -> Optional[str]:
        path = self.path_for(day)
        if not path.exists():
            logger.debug("Cache miss for %s", format_day(day))
            return None
        with path.open("r", encoding="utf-8") as f:
            word = f.readline().rstrip()
        if not is_valid_answer(word):
            logger.warning("Ignoring malformed cache entry %s: %r", path, word)
            return None
        logger.debug("Cache hit for %s", format_day(day))
        return word

    def put(self, day: date, word: str) -> None:
        """
        Store the word for a day.

        Raises:
            FileExistsError: If a valid entry for the day is already cached
        """
        path = self.path_for(day)
        if self.get(day) is not None:
            raise FileExistsError(f"Word for {format_day(day)} already cached at {path}")

        self.directory.mkdir(parents=True, exist_ok=True)
        fd, tmp = tempfile.mkstemp(dir=self.directory, prefix=f".{path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(word)
            os.replace(tmp, path)
        except BaseException:
            os.unlink(tmp)
            raise
