"""
Guess validation, scoring and the session state machine.
No I/O happens in here.
"""

from .types import (
    CharGuess,
    CharGuessKind,
    GuessRow,
    InvalidReason,
    SessionState,
    SessionOverError,
    Invalid,
    Continue,
    Win,
    Lost,
    Outcome,
)
from .validation import validate_guess, is_valid_answer
from .evaluator import evaluate_guess, evaluate_guess_strict
from .session import Session, DEFAULT_MAX_TRIES

__all__ = [
    # State machine
    "Session",
    "DEFAULT_MAX_TRIES",

    # Pure functions
    "validate_guess",
    "is_valid_answer",
    "evaluate_guess",
    "evaluate_guess_strict",

    # Types
    "CharGuess",
    "CharGuessKind",
    "GuessRow",
    "InvalidReason",
    "SessionState",
    "SessionOverError",

    # Outcomes
    "Invalid",
    "Continue",
    "Win",
    "Lost",
    "Outcome",
]
