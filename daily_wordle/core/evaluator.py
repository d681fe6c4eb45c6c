"""
Letter-by-letter scoring of a guess against the answer.
"""

from __future__ import annotations
from collections import Counter
from typing import List

from .types import CharGuess, CharGuessKind, GuessRow


def evaluate_guess(answer: str, guess: str) -> GuessRow:
    """
    Score a validated guess against the answer.

    A letter is CORRECT when it sits in the same position as in the answer,
    WRONG_PLACE when the answer contains it anywhere else, and NOT_IN_WORD
    otherwise. Repeated letters are not count-limited: guessing "eerie"
    against "fable" marks every non-matching "e" as WRONG_PLACE.
    """
    cells = []
    for i, ch in enumerate(guess):
        if answer[i] == ch:
            kind = CharGuessKind.CORRECT
        elif ch in answer:
            kind = CharGuessKind.WRONG_PLACE
        else:
            kind = CharGuessKind.NOT_IN_WORD
        cells.append(CharGuess(ch, kind))
    return GuessRow(tuple(cells))


def evaluate_guess_strict(answer: str, guess: str) -> GuessRow:
    """
    Score a guess the way the official game does.

    Each answer letter can satisfy at most one CORRECT or WRONG_PLACE match:
    greens are assigned first, then yellows consume whatever is left.
    """
    kinds: List[CharGuessKind] = [CharGuessKind.NOT_IN_WORD] * len(guess)
    remaining: Counter = Counter()

    # Greens first
    for i, ch in enumerate(guess):
        if answer[i] == ch:
            kinds[i] = CharGuessKind.CORRECT
        else:
            remaining[answer[i]] += 1

    for i, ch in enumerate(guess):
        if kinds[i] is CharGuessKind.NOT_IN_WORD and remaining[ch] > 0:
            kinds[i] = CharGuessKind.WRONG_PLACE
            remaining[ch] -= 1

    return GuessRow(tuple(CharGuess(ch, kind) for ch, kind in zip(guess, kinds)))
