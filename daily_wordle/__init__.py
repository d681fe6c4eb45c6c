"""
Daily Wordle in the terminal - Core modules.
"""

from .core import Session, validate_guess, evaluate_guess, evaluate_guess_strict
from .game_loop import play_session, show_board
from .render import board_lines, row_to_text

__all__ = [
    "Session",
    "validate_guess",
    "evaluate_guess",
    "evaluate_guess_strict",
    "play_session",
    "show_board",
    "board_lines",
    "row_to_text",
]
