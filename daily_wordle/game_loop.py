"""
Interactive loop for playing one daily Wordle in the terminal.
"""

from typing import Callable, Optional

from rich.console import Console

from .core.session import Session
from .core.types import Continue, Invalid, Lost, Outcome, Win
from .render import board_lines
from .utils import invalid_message, normalize_guess


def show_board(session: Session, console: Console) -> None:
    """Print every guess so far, one colored row per line."""
    for line in board_lines(session.render()):
        console.print(line)


def play_session(
    session: Session,
    console: Optional[Console] = None,
    read_line: Optional[Callable[[], str]] = None,
) -> Outcome:
    """
    Play a session until it is won or lost.

    Args:
        session: A fresh (ACTIVE) session
        console: Where to print the board and messages
        read_line: Returns the next line typed by the player (defaults to console.input)

    Returns:
        The terminal outcome, Win or Lost

    Raises:
        EOFError / KeyboardInterrupt: If the player closes input mid-game
    """
    console = console or Console()
    read_line = read_line or console.input

    while True:
        console.print()
        show_board(session, console)
        console.print()

        outcome = session.submit_guess(normalize_guess(read_line()))

        if isinstance(outcome, Invalid):
            # messages contain "[a-z]", so no markup
            console.print(invalid_message(outcome.reason), style="red", markup=False)
        elif isinstance(outcome, Continue):
            console.print(f"[dim]{session.remaining_tries} tries left[/]")
        elif isinstance(outcome, Win):
            show_board(session, console)
            console.print("[bold green]congratz![/]")
            return outcome
        elif isinstance(outcome, Lost):
            show_board(session, console)
            console.print("[bold red]womp womp[/]")
            console.print(f"The word was [bold]{session.answer}[/]")
            return outcome
