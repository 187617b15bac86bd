"""Lightweight data models used across the game."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class RunState(enum.Enum):
    """Top-level state of the orchestrator."""
    START = "start"
    PLAYING = "playing"


@dataclass(frozen=True)
class Viewport:
    """
    Size of the play area in pixels.

    Attributes
    ----------
    width : float
        Horizontal extent; must be positive and finite.
    height : float
        Vertical extent; must be positive and finite.
    """
    width: float
    height: float

    @property
    def center(self) -> tuple[float, float]:
        return self.width / 2, self.height / 2


@dataclass(frozen=True)
class OutlinePoint:
    """One silhouette vertex in polar form, relative to the hazard center."""
    angle: float
    radius: float


@dataclass
class Hazard:
    """
    The single asteroid the player has to click.

    Attributes
    ----------
    x, y : float
        Center position in screen pixels.
    vx, vy : float
        Velocity in px/s.
    radius : float
        Hit radius in px.
    spin : float
        Angular velocity in rad/s.
    angle : float
        Current rotation in radians.
    hp : int
        Hit points; a single hit destroys it.
    outline : tuple[OutlinePoint, ...]
        Jagged silhouette, evenly spaced in angle.
    """
    x: float
    y: float
    vx: float
    vy: float
    radius: float
    spin: float
    angle: float
    hp: int = 1
    outline: tuple[OutlinePoint, ...] = ()


@dataclass(frozen=True)
class HitResult:
    """Outcome of a hit test; position and radius are the destroyed hazard's."""
    hit: bool
    x: float = 0.0
    y: float = 0.0
    radius: float = 0.0


@dataclass
class Particle:
    x: float
    y: float
    vx: float
    vy: float
    lifespan: float
    size: float
    age: float = 0.0

    @property
    def progress(self) -> float:
        return min(1.0, max(0.0, self.age / self.lifespan))


@dataclass
class Ring:
    """Expanding circle shown where a click found nothing."""
    x: float
    y: float
    lifespan: float
    r0: float
    r1: float
    age: float = 0.0

    @property
    def progress(self) -> float:
        return min(1.0, max(0.0, self.age / self.lifespan))

    @property
    def radius(self) -> float:
        return self.r0 + self.progress * (self.r1 - self.r0)


@dataclass(frozen=True)
class RunResult:
    """Summary of a finished run, shown on the start screen and persisted."""
    destroyed: int
    misses: int
    clicks: int
    time_sec: float

    @property
    def accuracy(self) -> int:
        """Destroyed per click, as a rounded percentage."""
        if self.clicks <= 0:
            return 0
        return round(self.destroyed / self.clicks * 100)


@dataclass(frozen=True)
class Snapshot:
    """
    Read-only view of one frame, handed to the renderer and HUD.

    Entity fields are copies; mutating them does not touch the simulation.
    """
    state: RunState
    hazard: Hazard | None
    particles: tuple[Particle, ...] = ()
    rings: tuple[Ring, ...] = ()
    destroyed: int = 0
    misses: int = 0
    clicks: int = 0
    time_sec: float = 0.0
    paused: bool = False
    confirm_pending: bool = False
    speed_multiplier: float = 1.0


def format_time(seconds: float) -> str:
    """Format seconds as ``mm:ss``."""
    total = max(0, int(seconds))
    minutes, secs = divmod(total, 60)
    return f"{minutes:02d}:{secs:02d}"
