from __future__ import annotations

import math
import random

from .constants import (
    HAZARD_SPAWN_OFFSET, HAZARD_TARGET_SPREAD, HAZARD_SPEED_RANGE, HAZARD_RADIUS_RANGE,
    HAZARD_SPIN_RANGE, HAZARD_VERTEX_RANGE, HAZARD_JAGGEDNESS, HAZARD_HP
)
from .models import Hazard, OutlinePoint, Viewport

# Entry sides, clockwise from the top edge
TOP, RIGHT, BOTTOM, LEFT = range(4)


class HazardSpawner:
    """
    Builds new hazards just outside the viewport, aimed at its center area.

    Notes
    - Every hazard enters from a random edge, 80px off-screen, so it never
      pops into view.
    - Targets lie in a box around the viewport center sized from the shorter
      dimension, which keeps trajectories visible and crossable.
    """

    def __init__(self, rng: random.Random) -> None:
        self.rng = rng

    def pick_target(self, viewport: Viewport) -> tuple[float, float]:
        """Random point near the viewport center."""
        cx, cy = viewport.center
        spread = min(viewport.width, viewport.height) * HAZARD_TARGET_SPREAD
        return (cx + self.rng.uniform(-spread, spread),
                cy + self.rng.uniform(-spread, spread))

    def pick_entry(self, viewport: Viewport) -> tuple[float, float]:
        """Random point along a random edge, pushed off-screen on the perpendicular axis."""
        w, h = viewport.width, viewport.height
        off = HAZARD_SPAWN_OFFSET
        side = self.rng.randrange(4)

        if side == TOP:
            return self.rng.uniform(-off, w + off), -off
        if side == RIGHT:
            return w + off, self.rng.uniform(-off, h + off)
        if side == BOTTOM:
            return self.rng.uniform(-off, w + off), h + off
        return -off, self.rng.uniform(-off, h + off)

    def make_outline(self, radius: float) -> tuple[OutlinePoint, ...]:
        """
        Jagged polygon: vertices evenly spaced in angle, each with its own radial jitter.

        Parameters
        ----------
        radius : float
            Base radius the jitter is applied to
        """
        count = self.rng.randint(*HAZARD_VERTEX_RANGE)
        points = []
        for i in range(count):
            angle = (math.tau / count) * i
            jitter = self.rng.uniform(*HAZARD_JAGGEDNESS)
            points.append(OutlinePoint(angle, radius * jitter))
        return tuple(points)

    def make_hazard(self, viewport: Viewport, speed_multiplier: float) -> Hazard:
        """
        Create a hazard heading from an off-screen entry point toward the center area.

        Parameters
        ----------
        viewport : Viewport
            Current play area size
        speed_multiplier : float
            Scales the random base speed (settings level times difficulty)

        Returns
        -------
        Hazard
            A fresh hazard with hp=1 and a randomized silhouette
        """
        target_x, target_y = self.pick_target(viewport)
        x, y = self.pick_entry(viewport)

        speed = self.rng.uniform(*HAZARD_SPEED_RANGE) * speed_multiplier
        dx = target_x - x
        dy = target_y - y
        length = math.hypot(dx, dy) or 1.0

        radius = self.rng.uniform(*HAZARD_RADIUS_RANGE)
        spin = self.rng.uniform(*HAZARD_SPIN_RANGE)
        outline = self.make_outline(radius)

        return Hazard(
            x=x,
            y=y,
            vx=dx / length * speed,
            vy=dy / length * speed,
            radius=radius,
            spin=spin,
            angle=self.rng.uniform(0, math.tau),
            hp=HAZARD_HP,
            outline=outline,
        )
