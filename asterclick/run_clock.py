"""Pause-aware run timer.

All timestamps are monotonic milliseconds taken from a single source (the
frame driver passes ``pygame.time.get_ticks()``; tests pass a fake clock), so
elapsed time excludes every paused interval without wall-clock correction.
"""

from __future__ import annotations


class RunClock:
    """
    Elapsed-time tracking for one run, with pause compensation.

    Notes
    - ``toggle_pause`` and ``elapsed_seconds`` only matter while running;
      ``stop`` discards the run so it cannot be resumed.
    - While paused, elapsed time is frozen at the moment the pause began.
    """

    def __init__(self) -> None:
        self.running = False
        self.paused = False
        self.start_ms = 0.0
        self.paused_at_ms = 0.0          # when the current pause started
        self.paused_total_ms = 0.0       # cumulative time spent paused

    def start(self, now: float) -> None:
        """Reset all counters and begin a run at ``now``."""
        self.running = True
        self.paused = False
        self.start_ms = now
        self.paused_at_ms = 0.0
        self.paused_total_ms = 0.0

    def stop(self) -> None:
        self.running = False
        self.paused = False

    def toggle_pause(self, now: float) -> None:
        """
        Flip the paused flag; ignored unless running.

        Parameters
        ----------
        now : float
            Current time in milliseconds
        """
        if not self.running:
            return
        self.paused = not self.paused
        if self.paused:
            # Pausing: record when pause started
            self.paused_at_ms = now
        else:
            # Resuming: fold the finished pause into the total
            self.paused_total_ms += now - self.paused_at_ms
            self.paused_at_ms = 0.0

    def elapsed_seconds(self, now: float) -> float:
        """
        Seconds of unpaused play since ``start``.

        Returns
        -------
        float
            Never negative; 0 when the clock is not running.
        """
        if not self.running:
            return 0.0
        effective_now = self.paused_at_ms if self.paused else now
        elapsed_ms = effective_now - self.start_ms - self.paused_total_ms
        return max(0.0, elapsed_ms / 1000)
