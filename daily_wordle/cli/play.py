from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import NoReturn, Optional

import requests
import typer
from rich.console import Console
from rich.markup import escape

from ..core.env import Settings, load_env
from ..core.session import Session
from ..game_loop import play_session
from ..providers import (
    AnswerFetchError,
    build_answer_provider,
    build_dictionary_client,
    load_dictionary,
)
from ..utils import configure_logging
from .prefetch import run_prefetch

app = typer.Typer()
console = Console()
err_console = Console(stderr=True)

DICTIONARY_FILE = "dictionary"


def fail(e: Exception, doing: str) -> NoReturn:
    """Print a one-line error for a collaborator failure and exit 1."""
    if isinstance(e, PermissionError):
        err_console.print(f"[red]Error {doing}:[/] no permission")
    else:
        err_console.print(f"[red]Error {doing}:[/] unknown error ({escape(str(e))})")
    raise SystemExit(1)


@app.command()
def main(
    day: Optional[datetime] = typer.Option(
        None, "--day", "-d", formats=["%Y-%m-%d"], help="The day of the wordle to play (default: today, UTC)"
    ),
    cache_dir: Optional[Path] = typer.Option(None, "--cache-dir", "-c", help="The directory to place data in"),
    update_dictionary: bool = typer.Option(
        False, "--update-dictionary", "-u", help="Force-update the dictionary and exit"
    ),
    prefetch_wordles: bool = typer.Option(
        False, "--prefetch-wordles", "-p", help="Cache every published wordle from --day onwards and exit"
    ),
    max_tries: Optional[int] = typer.Option(None, "--max-tries", "-t", min=1, help="Guesses allowed"),
    strict: bool = typer.Option(False, "--strict", help="Count-limited scoring of repeated letters"),
    debug: bool = False,
):
    """
    Wordle in the terminal.

    Fetches the day's word (once, then cached by date), then reads guesses
    from stdin until the word is found or the tries run out.
    """
    seen = load_env()
    configure_logging(debug)
    if debug:
        from rich import print as rprint
        rprint({"env_keys_detected": seen})

    try:
        settings = Settings.from_env()
    except ValueError as e:
        err_console.print(f"[red]{escape(str(e))}[/]")
        raise SystemExit(1)

    cache_dir = cache_dir or settings.cache_dir
    today = day.date() if day else datetime.now(timezone.utc).date()

    try:
        cache_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        fail(e, "creating cache dir")

    with requests.Session() as http:
        dict_path = cache_dir / DICTIONARY_FILE
        dict_client = build_dictionary_client(settings, http)

        if update_dictionary:
            try:
                dict_client.download(dict_path)
            except OSError as e:
                fail(e, "writing dict file")
            except requests.RequestException as e:
                fail(e, "downloading dictionary")
            console.print(f"[green]Dictionary updated[/] at {dict_path}")
            return

        provider = build_answer_provider(cache_dir, settings, http)

        if prefetch_wordles:
            try:
                run_prefetch(provider, today, err_console)
            except OSError as e:
                fail(e, "writing word cache file")
            except (requests.RequestException, AnswerFetchError) as e:
                fail(e, "fetching word")
            return

        try:
            dictionary = load_dictionary(dict_path, dict_client)
        except OSError as e:
            fail(e, "opening dictionary file")
        except requests.RequestException as e:
            fail(e, "downloading dictionary")

        try:
            answer = provider.get_answer(today)
        except OSError as e:
            fail(e, "reading word cache file")
        except (requests.RequestException, AnswerFetchError) as e:
            fail(e, "fetching word")

    if answer is None:
        err_console.print(
            "Received an error response from NYT. "
            "This probably means that the day's wordle is not published yet."
        )
        raise SystemExit(1)

    try:
        session = Session(answer, dictionary, max_tries or settings.max_tries, strict=strict)
    except ValueError as e:
        err_console.print(f"[red]Cannot start game for {today}:[/] {escape(str(e))}")
        raise SystemExit(1)

    try:
        play_session(session, console)
    except (EOFError, KeyboardInterrupt):
        console.print("\n[dim]Game abandoned.[/]")
        raise SystemExit(1)


def cli():
    """Entry point for CLI."""
    app()


if __name__ == "__main__":
    cli()
