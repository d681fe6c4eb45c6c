"""
Game session state machine.
"""

from __future__ import annotations
from typing import AbstractSet, List, Optional, Tuple

from .evaluator import evaluate_guess, evaluate_guess_strict
from .types import (
    Continue,
    GuessRow,
    Invalid,
    Lost,
    Outcome,
    SessionOverError,
    SessionState,
    Win,
)
from .validation import is_valid_answer, validate_guess

DEFAULT_MAX_TRIES = 5


class Session:
    """
    One game against one secret answer.

    Invalid guesses are returned as Invalid(reason) and cost nothing; each
    accepted guess is scored, appended to the history and uses up one try.
    Once the session is WON or LOST, submitting another guess raises
    SessionOverError.
    """

    def __init__(
        self,
        answer: str,
        dictionary: AbstractSet[str],
        max_tries: int = DEFAULT_MAX_TRIES,
        strict: bool = False,
    ):
        """
        Args:
            answer: The secret word, five lowercase ASCII letters
            dictionary: Words accepted as guesses
            max_tries: Number of accepted guesses before the game is lost
            strict: Use count-limited duplicate letter scoring
        """
        if not is_valid_answer(answer):
            raise ValueError(f"Answer must be 5 lowercase letters a-z, got {answer!r}")
        if max_tries < 1:
            raise ValueError(f"max_tries must be >= 1, got {max_tries}")

        self._answer = answer
        self._dictionary = dictionary
        self._max_tries = max_tries
        self._remaining_tries = max_tries
        self._history: List[GuessRow] = []
        self._state = SessionState.ACTIVE
        self._evaluate = evaluate_guess_strict if strict else evaluate_guess

    @property
    def answer(self) -> str:
        return self._answer

    @property
    def max_tries(self) -> int:
        return self._max_tries

    @property
    def remaining_tries(self) -> int:
        return self._remaining_tries

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def is_over(self) -> bool:
        return self._state is not SessionState.ACTIVE

    @property
    def last_guess(self) -> Optional[str]:
        return self._history[-1].word if self._history else None

    def submit_guess(self, raw: str) -> Outcome:
        if self.is_over:
            raise SessionOverError(f"Session already ended ({self._state.value})")

        reason = validate_guess(raw, self._dictionary)
        if reason is not None:
            return Invalid(reason)

        row = self._evaluate(self._answer, raw.lower())
        self._history.append(row)
        self._remaining_tries -= 1

        if row.is_solved:
            self._state = SessionState.WON
            return Win()
        if self._remaining_tries == 0:
            self._state = SessionState.LOST
            return Lost()
        return Continue()

    def render(self) -> Tuple[GuessRow, ...]:
        """Accepted guesses in the order they were made."""
        return tuple(self._history)
