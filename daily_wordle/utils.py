"""
Small helpers shared by the game loop and the CLI.
"""

import logging
from typing import Dict

from rich.logging import RichHandler

from .core.types import InvalidReason


INVALID_MESSAGES: Dict[InvalidReason, str] = {
    InvalidReason.TOO_SHORT: "Word can't be less than 5 characters long!",
    InvalidReason.TOO_LONG: "Word can't be more than 5 characters long!",
    InvalidReason.CONTAINS_NON_LETTERS: "Word can't contain non-letter characters! [a-z]",
    InvalidReason.NOT_IN_DICTIONARY: "Word not in dictionary!",
}


def normalize_guess(line: str) -> str:
    """Lowercase and trim a line of player input."""
    return line.lower().strip()


def invalid_message(reason: InvalidReason) -> str:
    return INVALID_MESSAGES[reason]


def configure_logging(debug: bool = False) -> None:
    """
    Route stdlib logging through rich. INFO by default, DEBUG with --debug.
    """
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=debug, show_path=debug)],
        force=True,
    )
