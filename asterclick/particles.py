from __future__ import annotations

import math
import random

from .constants import (
    EXPLOSION_COUNT_RANGE, PARTICLE_SPEED_RANGE, PARTICLE_LIFESPAN_RANGE, PARTICLE_SIZE_RANGE,
    PARTICLE_DAMPING, DAMPING_REFERENCE_HZ, RING_LIFESPAN, RING_RADIUS_START, RING_RADIUS_END
)
from .models import Particle, Ring


class ParticlesSystem:
    """
    Short-lived visual feedback: explosion particles and miss-click rings.

    Both kinds age by the frame delta and are dropped as soon as their age
    reaches their lifespan. Velocity damping is normalized to a 60 Hz
    reference so particles travel the same distance at any frame rate.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng or random.Random()
        self.particles: list[Particle] = []
        self.rings: list[Ring] = []

    def clear(self) -> None:
        self.particles.clear()
        self.rings.clear()

    def explode(self, x: float, y: float, power: float) -> int:
        """
        Burst of particles at a destroyed hazard.

        Parameters
        ----------
        x, y : float
            Burst center
        power : float
            Usually the hazard radius; sets the particle count (clamped to
            12..30) and scales particle speed

        Returns
        -------
        int
            Number of particles spawned
        """
        low, high = EXPLOSION_COUNT_RANGE
        count = int(min(high, max(low, power)))
        speed_scale = 0.6 + power * 0.02
        for _ in range(count):
            angle = self.rng.uniform(0, 2 * math.pi)
            speed = self.rng.uniform(*PARTICLE_SPEED_RANGE) * speed_scale
            self.particles.append(Particle(
                x=x,
                y=y,
                vx=math.cos(angle) * speed,
                vy=math.sin(angle) * speed,
                lifespan=self.rng.uniform(*PARTICLE_LIFESPAN_RANGE),
                size=self.rng.uniform(*PARTICLE_SIZE_RANGE),
            ))
        return count

    def ping(self, x: float, y: float) -> None:
        """Growing ring where a click hit empty space."""
        self.rings.append(Ring(x=x, y=y, lifespan=RING_LIFESPAN,
                               r0=RING_RADIUS_START, r1=RING_RADIUS_END))

    def update(self, dt: float) -> None:
        """Move, damp and age everything; drop what has outlived its lifespan."""
        damping = PARTICLE_DAMPING ** (dt * DAMPING_REFERENCE_HZ)

        for particle in self.particles:
            particle.age += dt
            particle.x += particle.vx * dt
            particle.y += particle.vy * dt
            particle.vx *= damping
            particle.vy *= damping

        for ring in self.rings:
            ring.age += dt

        self.particles = [p for p in self.particles if p.age < p.lifespan]
        self.rings = [r for r in self.rings if r.age < r.lifespan]
