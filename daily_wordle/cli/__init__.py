"""
CLI commands for playing the daily Wordle.
"""

from .play import app, cli
from .prefetch import run_prefetch

__all__ = [
    "app",
    "cli",
    "run_prefetch",
]
