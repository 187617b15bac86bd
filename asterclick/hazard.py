"""Hazard system: the one asteroid in flight.

Owns spawning (through ``HazardSpawner``), motion, despawn when the asteroid
drifts past the padded play bounds, and the point-in-circle hit test. Between
two hazards a short random cooldown must elapse.
"""

from __future__ import annotations

import random
from typing import Callable

from .constants import HAZARD_BOUNDS_PAD, SPAWN_COOLDOWN_RANGE
from .models import Hazard, HitResult, Viewport
from .spawner import HazardSpawner

NO_HIT = HitResult(hit=False)


class HazardSystem:
    """
    Single active target: spawn, move, despawn, hit test.

    Lifecycle:
    - EMPTY (cooldown): waiting for the cooldown to reach zero.
    - EMPTY (ready):    the next ``update``/``ensure_one`` spawns a hazard.
    - ACTIVE:           moving; leaves on a hit or on exiting the padded bounds,
                        both of which arm a fresh cooldown.

    The viewport size and speed multiplier are read through providers at the
    moment they are needed, so resizes and difficulty changes apply to the
    next spawn without rebuilding the system.
    """

    def __init__(self,
                 get_viewport: Callable[[], Viewport],
                 get_speed_multiplier: Callable[[], float],
                 rng: random.Random | None = None) -> None:
        self.get_viewport = get_viewport
        self.get_speed_multiplier = get_speed_multiplier
        self.rng = rng or random.Random()
        self.spawner = HazardSpawner(self.rng)
        self._hazard: Hazard | None = None
        self._cooldown = 0.0

    @property
    def hazard(self) -> Hazard | None:
        return self._hazard

    @property
    def cooldown(self) -> float:
        return self._cooldown

    # ------------------------------- Update & State ----------------------------------

    def clear(self) -> None:
        self._hazard = None
        self._cooldown = 0.0

    def arm_cooldown(self) -> None:
        self._cooldown = self.rng.uniform(*SPAWN_COOLDOWN_RANGE)

    def ensure_one(self) -> None:
        """Spawn a hazard if none is active and the cooldown has run out."""
        if self._hazard is not None or self._cooldown > 0:
            return
        self._hazard = self.spawner.make_hazard(self.get_viewport(), self.get_speed_multiplier())

    def is_out_of_bounds(self, hazard: Hazard) -> bool:
        viewport = self.get_viewport()
        pad = HAZARD_BOUNDS_PAD
        return (hazard.x < -pad or hazard.x > viewport.width + pad
                or hazard.y < -pad or hazard.y > viewport.height + pad)

    def update(self, dt: float) -> bool:
        """
        Advance the cooldown and the active hazard by ``dt`` seconds.

        Parameters
        ----------
        dt : float
            Frame delta in seconds, already clamped by the driver

        Returns
        -------
        bool
            True if the hazard left the padded bounds this frame (a miss)
        """
        if self._cooldown > 0:
            self._cooldown = max(0.0, self._cooldown - dt)
        self.ensure_one()

        hazard = self._hazard
        if hazard is None:
            return False

        hazard.x += hazard.vx * dt
        hazard.y += hazard.vy * dt
        hazard.angle += hazard.spin * dt

        if self.is_out_of_bounds(hazard):
            self._hazard = None
            self.arm_cooldown()
            return True
        return False

    def try_hit(self, x: float, y: float) -> HitResult:
        """
        Circle hit test against the active hazard.

        Parameters
        ----------
        x, y : float
            Click position in screen pixels

        Returns
        -------
        HitResult
            On a hit, the destroyed hazard's center and radius; the hazard is
            removed and a cooldown armed. Otherwise nothing changes.
        """
        hazard = self._hazard
        if hazard is None:
            return NO_HIT

        dx = x - hazard.x
        dy = y - hazard.y
        if dx * dx + dy * dy <= hazard.radius * hazard.radius:
            result = HitResult(hit=True, x=hazard.x, y=hazard.y, radius=hazard.radius)
            self._hazard = None
            self.arm_cooldown()
            return result
        return NO_HIT
