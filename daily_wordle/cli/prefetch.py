from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from ..core.env import Settings, load_env
from ..providers import DailyAnswerProvider, build_answer_provider

app = typer.Typer()
err_console = Console(stderr=True)


def run_prefetch(provider: DailyAnswerProvider, start: date, console: Console = err_console) -> int:
    """
    Cache every published word from `start` onwards and print a summary.

    Returns:
        Number of days read or fetched
    """
    console.print(f"Wordle prefetch requested! Starting from {start}.")
    days = provider.prefetch(
        start,
        on_day=lambda d: console.print(f"{d}: [green]Successfully read/fetched the word[/]"),
    )
    unpublished = start + timedelta(days=len(days))
    console.print(
        f"{unpublished}: No word from NYtimes for this date yet. Ending prefetch process here."
    )
    console.print("Prefetch done.")

    if not days:
        console.print(
            "[yellow]No days were prefetched. This is rare. "
            "You probably set a custom --day too far into the future.[/]"
        )
    else:
        console.print(f"{len(days)} days prefetched, {start} - {days[-1]}.")
    return len(days)


@app.command()
def main(
    day: Optional[datetime] = typer.Option(None, "--day", "-d", formats=["%Y-%m-%d"]),
    cache_dir: Optional[Path] = typer.Option(None, "--cache-dir", "-c"),
):
    """Fill the answer cache with every published word from --day onwards."""
    load_env()
    settings = Settings.from_env()
    start = day.date() if day else datetime.now(timezone.utc).date()
    provider = build_answer_provider(cache_dir or settings.cache_dir, settings)
    run_prefetch(provider, start)


if __name__ == "__main__":
    app()
