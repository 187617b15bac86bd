"""Simulation orchestrator: run state machine and per-frame update.

``Simulation`` ties the clock, the hazard, the particles and the stats
together. It has no display dependency; ``main.py`` feeds it input events and
a millisecond clock and draws the snapshots it returns.
"""

from __future__ import annotations

import copy
import math
import random
import time
from typing import Callable

from .constants import MAX_FRAME_DT, DIFFICULTY_STEP_SECONDS, DIFFICULTY_STEP, MAX_DIFFICULTY
from .hazard import HazardSystem
from .input import FrameInput
from .logger import GameLogger
from .models import RunResult, RunState, Snapshot, Viewport
from .particles import ParticlesSystem
from .run_clock import RunClock
from .settings import Settings, SettingsPatch
from .stats import StatsSystem


def monotonic_ms() -> float:
    return time.monotonic() * 1000


def difficulty_for(elapsed: float) -> float:
    """Time-based speed multiplier: +0.1 every 10 seconds, capped at 3.0."""
    steps = math.floor(elapsed / DIFFICULTY_STEP_SECONDS)
    return min(MAX_DIFFICULTY, 1 + steps * DIFFICULTY_STEP)


class Simulation:
    """
    Owns one game session and moves it forward once per frame.

    States:
    - START:   idle; nothing moves, input is ignored.
    - PLAYING: the run clock is running and the hazard/particles update
               unless the clock is paused.

    While the quit confirmation is open (``confirm_pending``) the run is held
    paused and per-frame input is discarded.
    """

    def __init__(self,
                 get_viewport: Callable[[], Viewport],
                 clock: Callable[[], float] | None = None,
                 rng: random.Random | None = None,
                 settings: Settings | None = None,
                 logger: GameLogger | None = None,
                 last_result: RunResult | None = None) -> None:
        self.get_viewport = get_viewport
        self.clock = clock or monotonic_ms
        self.rng = rng or random.Random()
        self.settings = settings or Settings()
        self.logger = logger

        self.input = FrameInput()
        self.run_clock = RunClock()
        self.stats = StatsSystem(last_result)
        self.particles = ParticlesSystem(self.rng)
        self.hazards = HazardSystem(get_viewport, lambda: self.speed_multiplier, self.rng)

        self.state = RunState.START
        self.confirm_pending = False
        self.paused_for_confirm = False  # pause was forced by the quit confirmation
        self.difficulty = 1.0
        self.last_ms = self.clock()

    @property
    def paused(self) -> bool:
        return self.run_clock.paused

    @property
    def speed_multiplier(self) -> float:
        """Settings speed level combined with the time-based difficulty."""
        return self.settings.speed_multiplier * self.difficulty

    def apply_settings(self, patch: SettingsPatch) -> Settings:
        """Replace the settings with ``patch`` merged over them."""
        self.settings = self.settings.merged(patch)
        return self.settings

    # --------------------------------- Transitions ---------------------------------

    def start(self) -> None:
        """Begin a fresh run from any state."""
        self.stats.reset_run()
        self.particles.clear()
        self.hazards.clear()
        self.difficulty = 1.0
        self.confirm_pending = False
        self.paused_for_confirm = False

        self.run_clock.start(self.clock())
        self.state = RunState.PLAYING
        if self.logger:
            self.logger.log_run_start()

    def end(self) -> RunResult | None:
        """
        Finish the current run and return to the start screen.

        Returns
        -------
        RunResult | None
            Summary of the run, or None if no run was in progress
        """
        self.confirm_pending = False
        self.paused_for_confirm = False
        if self.state is not RunState.PLAYING:
            return None

        time_sec = self.run_clock.elapsed_seconds(self.clock())
        self.run_clock.stop()
        result = self.stats.finalize(time_sec)

        self.particles.clear()
        self.hazards.clear()
        self.state = RunState.START
        if self.logger:
            self.logger.log_run_end(result)
        return result

    def toggle_pause(self) -> None:
        if self.state is not RunState.PLAYING or self.confirm_pending:
            return
        self.run_clock.toggle_pause(self.clock())

    def open_confirm_end(self) -> None:
        """Hold the run paused while the player decides whether to quit."""
        if self.state is not RunState.PLAYING or self.confirm_pending:
            return
        if not self.run_clock.paused:
            self.run_clock.toggle_pause(self.clock())
            self.paused_for_confirm = True
        self.confirm_pending = True

    def close_confirm_end(self) -> None:
        """Dismiss the confirmation; resume only if opening it caused the pause."""
        self.confirm_pending = False
        if self.state is RunState.PLAYING and self.run_clock.paused and self.paused_for_confirm:
            self.run_clock.toggle_pause(self.clock())
        self.paused_for_confirm = False

    # --------------------------------- Loop -----------------------------------------

    def update_difficulty(self) -> None:
        if not self.settings.difficulty_progression:
            self.difficulty = 1.0
            return
        new_difficulty = difficulty_for(self.run_clock.elapsed_seconds(self.clock()))
        if new_difficulty > self.difficulty and self.logger:
            self.logger.log_difficulty(new_difficulty)
        self.difficulty = new_difficulty

    def handle_click(self, pos: tuple[float, float]) -> None:
        """Hit test one click: explosion on a hit, ring on empty space."""
        self.stats.record_click()
        hit = self.hazards.try_hit(*pos)

        if hit.hit:
            self.stats.record_destroyed()
            self.particles.explode(hit.x, hit.y, hit.radius)
            if self.logger:
                self.logger.log_click(pos, True, f"Asteroid r={hit.radius:.0f} destroyed")
        else:
            self.particles.ping(*pos)
            if self.logger:
                self.logger.log_click(pos, False, "No target hit")

    def update(self, dt: float) -> None:
        """
        Advance the simulation by ``dt`` seconds.

        Parameters
        ----------
        dt : float
            Frame delta in seconds, already clamped
        """
        if self.state is not RunState.PLAYING or self.run_clock.paused:
            return

        self.update_difficulty()

        if self.input.click is not None:
            self.handle_click(self.input.click)

        hazard = self.hazards.hazard
        if self.hazards.update(dt):
            self.stats.record_miss()
            if self.logger and hazard is not None:
                self.logger.log_miss((hazard.x, hazard.y))

        self.particles.update(dt)

    def tick(self, now_ms: float) -> Snapshot:
        """
        One display frame: clamp dt, apply buffered intents, update, snapshot.

        Parameters
        ----------
        now_ms : float
            Frame timestamp from the same clock as ``self.clock``

        Returns
        -------
        Snapshot
            What the renderer should draw this frame
        """
        dt = min(MAX_FRAME_DT, (now_ms - self.last_ms) / 1000)
        self.last_ms = now_ms

        if self.input.toggle_pause:
            self.toggle_pause()

        if self.confirm_pending:
            self.input.reset_frame()
            return self.snapshot(now_ms)

        if self.input.quit:
            self.open_confirm_end()

        self.update(dt)
        snapshot = self.snapshot(now_ms)
        self.input.reset_frame()
        return snapshot

    def snapshot(self, now_ms: float | None = None) -> Snapshot:
        """Read-only copy of everything the renderer and HUD need."""
        if now_ms is None:
            now_ms = self.clock()
        playing = self.state is RunState.PLAYING
        hazard = self.hazards.hazard

        return Snapshot(
            state=self.state,
            hazard=copy.copy(hazard) if hazard is not None else None,
            particles=tuple(copy.copy(p) for p in self.particles.particles),
            rings=tuple(copy.copy(r) for r in self.particles.rings),
            destroyed=self.stats.destroyed,
            misses=self.stats.misses,
            clicks=self.stats.clicks,
            time_sec=self.run_clock.elapsed_seconds(now_ms) if playing else 0.0,
            paused=self.run_clock.paused,
            confirm_pending=self.confirm_pending,
            speed_multiplier=self.speed_multiplier,
        )
