"""
Terminal rendering of the guess board.
"""

from __future__ import annotations
from typing import Iterable, List

from rich.text import Text

from .core.types import CharGuessKind, GuessRow

PLACEHOLDER = "_____"

STYLES = {
    CharGuessKind.NOT_IN_WORD: "black on bright_black",
    CharGuessKind.WRONG_PLACE: "black on yellow",
    CharGuessKind.CORRECT: "black on green",
}


def row_to_text(row: GuessRow) -> Text:
    text = Text()
    for cell in row:
        text.append(cell.ch, style=STYLES[cell.kind])
    return text


def board_lines(rows: Iterable[GuessRow]) -> List[Text]:
    """One Text per guess, or the placeholder line when nothing was guessed yet."""
    lines = [row_to_text(r) for r in rows]
    return lines or [Text(PLACEHOLDER)]
