import math
import random

import pytest

from asterclick.models import Particle, Ring
from asterclick.particles import ParticlesSystem


def make_system(seed=42):
    return ParticlesSystem(random.Random(seed))


@pytest.mark.parametrize("power, expected", [(5, 12), (12, 12), (20, 20), (30, 30), (46, 30), (22.7, 22)])
def test_explode_count_is_clamped(power, expected):
    system = make_system()
    assert system.explode(0, 0, power) == expected
    assert len(system.particles) == expected


def test_explode_particle_parameters():
    system = make_system()
    power = 20
    system.explode(50, 60, power)
    scale = 0.6 + power * 0.02
    for p in system.particles:
        assert (p.x, p.y) == (50, 60)
        assert p.age == 0
        assert 0.25 <= p.lifespan <= 0.7
        assert 1 <= p.size <= 3
        assert 50 * scale - 1e-9 <= math.hypot(p.vx, p.vy) <= 220 * scale + 1e-9


def test_ping_adds_ring():
    system = make_system()
    system.ping(10, 20)
    assert len(system.rings) == 1
    ring = system.rings[0]
    assert (ring.x, ring.y) == (10, 20)
    assert ring.lifespan == pytest.approx(0.35)
    assert ring.radius == pytest.approx(6)


def test_ring_radius_grows_linearly():
    ring = Ring(x=0, y=0, lifespan=0.35, r0=6, r1=28)
    ring.age = 0.175
    assert ring.radius == pytest.approx(17)
    ring.age = 0.35
    assert ring.radius == pytest.approx(28)


def test_update_moves_and_damps():
    system = make_system()
    system.particles.append(Particle(x=0, y=0, vx=100, vy=-60, lifespan=1.0, size=2))
    system.update(1 / 60)
    p = system.particles[0]
    assert p.x == pytest.approx(100 / 60)
    assert p.y == pytest.approx(-1.0)
    assert p.vx == pytest.approx(92)
    assert p.vy == pytest.approx(-55.2)
    assert p.age == pytest.approx(1 / 60)


def test_damping_is_frame_rate_independent():
    fast = make_system()
    slow = make_system()
    fast.particles.append(Particle(x=0, y=0, vx=100, vy=0, lifespan=5.0, size=1))
    slow.particles.append(Particle(x=0, y=0, vx=100, vy=0, lifespan=5.0, size=1))

    for _ in range(4):
        fast.update(1 / 120)
    for _ in range(2):
        slow.update(1 / 60)

    assert fast.particles[0].vx == pytest.approx(slow.particles[0].vx)


def test_particle_removed_exactly_at_lifespan():
    system = make_system()
    system.particles.append(Particle(x=0, y=0, vx=0, vy=0, lifespan=0.5, size=1))
    system.update(0.25)
    assert len(system.particles) == 1
    system.update(0.125)
    assert len(system.particles) == 1
    system.update(0.125)
    assert system.particles == []


def test_ring_removed_at_lifespan():
    system = make_system()
    system.rings.append(Ring(x=0, y=0, lifespan=0.25, r0=6, r1=28))
    system.update(0.125)
    assert len(system.rings) == 1
    system.update(0.125)
    assert system.rings == []


def test_all_particles_gone_after_max_lifespan():
    system = make_system()
    system.explode(0, 0, 30)
    system.ping(0, 0)
    for _ in range(25):
        system.update(0.033)
    assert system.particles == []
    assert system.rings == []


def test_clear():
    system = make_system()
    system.explode(0, 0, 15)
    system.ping(1, 1)
    system.clear()
    assert system.particles == []
    assert system.rings == []
