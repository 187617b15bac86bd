"""Markdown logger for gameplay events (clicks, escapes, difficulty steps, runs)."""

from __future__ import annotations

import datetime

from .models import RunResult, format_time


class GameLogger:
    """Handles logging of game events to markdown file."""

    def __init__(self, log_file: str):
        """
        Initialize the game logger.

        Parameters
        ----------
        log_file : str
            Path to the log file
        """
        self.log_file = log_file
        self.setup_log()

    def setup_log(self) -> None:
        """Initialize the log file with headers."""
        try:
            with open(self.log_file, 'w', encoding='utf-8') as f:
                f.write("# Aster Click Game Log\n\n")
                f.write(f"Log started at: {datetime.datetime.now().strftime('%Y-%m-%d %H:%M:%S')}\n\n")
                f.write("## Events\n\n")
                f.write("| Timestamp | Position (x,y) | Result | Details |\n")
                f.write("|-----------|---------------|--------|----------|\n")
        except OSError as e:
            print(f"Failed to initialize log file: {e}")

    def _timestamp(self) -> str:
        return datetime.datetime.now().strftime('%H:%M:%S.%f')[:-3]  # Include milliseconds

    def _write_row(self, position: str, result: str, details: str) -> None:
        try:
            with open(self.log_file, 'a', encoding='utf-8') as f:
                f.write(f"| {self._timestamp()} | {position} | {result} | {details} |\n")
        except OSError as e:
            print(f"Failed to log {result.lower()} event: {e}")

    def log_click(self, pos: tuple[float, float], hit: bool, details: str = "") -> None:
        """
        Log a mouse click event.

        Parameters
        ----------
        pos : Tuple[float, float]
            Mouse click position (x, y)
        hit : bool
            Whether the click destroyed the asteroid
        details : str, optional
            Additional details about the click
        """
        result = "HIT" if hit else "MISS"
        self._write_row(f"({pos[0]:.0f}, {pos[1]:.0f})", result, details)

    def log_miss(self, pos: tuple[float, float]) -> None:
        """Log an asteroid leaving the play area unclicked."""
        self._write_row(f"({pos[0]:.0f}, {pos[1]:.0f})", "ESCAPED", "Asteroid left the play area")

    def log_difficulty(self, multiplier: float) -> None:
        """
        Log a difficulty step.

        Parameters
        ----------
        multiplier : float
            New time-based speed multiplier
        """
        self._write_row("DIFFICULTY UP", "SYSTEM", f"Speed multiplier x{multiplier:.1f}")

    def log_run_start(self) -> None:
        self._write_row("RUN START", "SYSTEM", "New run")

    def log_run_end(self, result: RunResult) -> None:
        details = (f"Destroyed {result.destroyed}, escaped {result.misses}, "
                   f"clicks {result.clicks}, accuracy {result.accuracy}%, "
                   f"time {format_time(result.time_sec)}")
        self._write_row("RUN END", "SYSTEM", details)
