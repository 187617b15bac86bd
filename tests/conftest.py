# tests/conftest.py
from __future__ import annotations

import random

import pytest

from asterclick.game import Simulation
from asterclick.models import Viewport


class FakeClock:
    """Controllable millisecond clock."""

    def __init__(self, now: float = 1000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, ms: float) -> float:
        self.now += ms
        return self.now


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture()
def viewport() -> Viewport:
    return Viewport(800, 600)


@pytest.fixture()
def sim(clock, rng, viewport) -> Simulation:
    return Simulation(lambda: viewport, clock=clock, rng=rng)


def run_until(sim: Simulation, clock: FakeClock, predicate, step_ms: float = 16.0, max_frames: int = 5000) -> int:
    """Tick ``sim`` frame by frame until ``predicate()`` holds; returns frames used."""
    for frame in range(max_frames):
        if predicate():
            return frame
        sim.tick(clock.advance(step_ms))
    raise AssertionError("condition not reached")
