"""Per-run counters and the summary of the last finished run."""

from __future__ import annotations

from .models import RunResult


class StatsSystem:
    """Counts destroyed hazards, escaped hazards and clicks for the current run."""

    def __init__(self, last_result: RunResult | None = None) -> None:
        self.destroyed = 0
        self.misses = 0
        self.clicks = 0
        self.last_result = last_result

    def reset_run(self) -> None:
        self.destroyed = 0
        self.misses = 0
        self.clicks = 0

    def record_destroyed(self) -> None:
        self.destroyed += 1

    def record_miss(self) -> None:
        self.misses += 1

    def record_click(self) -> None:
        self.clicks += 1

    def finalize(self, time_sec: float) -> RunResult:
        """
        Freeze the current counters into a ``RunResult``.

        Parameters
        ----------
        time_sec : float
            Unpaused duration of the run

        Returns
        -------
        RunResult
            Also kept as ``last_result`` for the start screen
        """
        self.last_result = RunResult(
            destroyed=self.destroyed,
            misses=self.misses,
            clicks=self.clicks,
            time_sec=time_sec,
        )
        return self.last_result
