from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Tuple, Union

WORD_LENGTH = 5
ALPHABET = frozenset("abcdefghijklmnopqrstuvwxyz")


class CharGuessKind(Enum):
    NOT_IN_WORD = "not_in_word"
    WRONG_PLACE = "wrong_place"
    CORRECT = "correct"


class InvalidReason(Enum):
    TOO_SHORT = "too_short"
    TOO_LONG = "too_long"
    CONTAINS_NON_LETTERS = "contains_non_letters"
    NOT_IN_DICTIONARY = "not_in_dictionary"


class SessionState(Enum):
    ACTIVE = "active"
    WON = "won"
    LOST = "lost"


@dataclass(frozen=True)
class CharGuess:
    """One guessed letter and how it scored."""
    ch: str
    kind: CharGuessKind


@dataclass(frozen=True)
class GuessRow:
    """The five scored letters of one accepted guess."""
    cells: Tuple[CharGuess, ...]

    def __post_init__(self):
        if len(self.cells) != WORD_LENGTH:
            raise ValueError(f"GuessRow needs {WORD_LENGTH} cells, got {len(self.cells)}")

    def __iter__(self) -> Iterator[CharGuess]:
        return iter(self.cells)

    def __len__(self) -> int:
        return len(self.cells)

    def __getitem__(self, i: int) -> CharGuess:
        return self.cells[i]

    @property
    def word(self) -> str:
        return "".join(c.ch for c in self.cells)

    @property
    def kinds(self) -> Tuple[CharGuessKind, ...]:
        return tuple(c.kind for c in self.cells)

    @property
    def is_solved(self) -> bool:
        return all(c.kind is CharGuessKind.CORRECT for c in self.cells)


# Outcome of Session.submit_guess: a closed union, check with isinstance.

@dataclass(frozen=True)
class Invalid:
    reason: InvalidReason


@dataclass(frozen=True)
class Continue:
    pass


@dataclass(frozen=True)
class Win:
    pass


@dataclass(frozen=True)
class Lost:
    pass


Outcome = Union[Invalid, Continue, Win, Lost]


class SessionOverError(RuntimeError):
    """Raised when a guess is submitted to a session that already ended."""
