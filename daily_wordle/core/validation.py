from __future__ import annotations
from typing import AbstractSet, Optional

from .types import ALPHABET, WORD_LENGTH, InvalidReason


def validate_guess(raw: str, dictionary: AbstractSet[str]) -> Optional[InvalidReason]:
    """
    Check a raw guess against the length, alphabet and dictionary rules.

    Checks run in order and only the first failure is reported, so "ab1"
    is TOO_SHORT rather than CONTAINS_NON_LETTERS.

    Args:
        raw: Guess exactly as the player typed it (already trimmed by the caller)
        dictionary: Lowercase words the player is allowed to guess

    Returns:
        The failing InvalidReason, or None if the guess is acceptable
    """
    if len(raw) < WORD_LENGTH:
        return InvalidReason.TOO_SHORT
    if len(raw) > WORD_LENGTH:
        return InvalidReason.TOO_LONG

    word = raw.lower()
    if any(ch not in ALPHABET for ch in word):
        return InvalidReason.CONTAINS_NON_LETTERS
    if word not in dictionary:
        return InvalidReason.NOT_IN_DICTIONARY
    return None


def is_valid_answer(word: str) -> bool:
    """True if word is exactly five ASCII lowercase letters."""
    return len(word) == WORD_LENGTH and all(ch in ALPHABET for ch in word)
