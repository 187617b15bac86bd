import math

import pytest

from asterclick.game import Simulation, difficulty_for
from asterclick.logger import GameLogger
from asterclick.models import Particle, RunState
from asterclick.settings import Settings, SettingsPatch

from conftest import run_until


# --------------------------------- Transitions ---------------------------------

def test_starts_idle(sim, clock):
    assert sim.state is RunState.START
    sim.update(0.033)
    snap = sim.tick(clock.advance(16))
    assert snap.hazard is None
    assert snap.time_sec == 0


def test_start_resets_run(sim, clock):
    sim.start()
    sim.stats.record_click()
    sim.particles.ping(1, 1)
    sim.tick(clock.advance(16))
    assert sim.hazards.hazard is not None

    sim.start()
    assert sim.state is RunState.PLAYING
    assert sim.stats.clicks == 0
    assert sim.particles.rings == []
    assert sim.hazards.hazard is None
    assert sim.run_clock.running


def test_end_finalizes_and_clears(sim, clock):
    sim.start()
    run_until(sim, clock, lambda: sim.hazards.hazard is not None)
    sim.particles.ping(5, 5)
    clock.advance(2000)

    result = sim.end()
    assert result is not None
    assert result.time_sec == pytest.approx((clock.now - 1000) / 1000)
    assert sim.state is RunState.START
    assert sim.hazards.hazard is None
    assert sim.particles.rings == []
    assert not sim.run_clock.running
    assert sim.stats.last_result is result


def test_end_outside_run_is_noop(sim):
    assert sim.end() is None
    assert sim.state is RunState.START


def test_toggle_pause_only_while_playing(sim):
    sim.toggle_pause()
    assert not sim.paused
    sim.start()
    sim.toggle_pause()
    assert sim.paused
    sim.toggle_pause()
    assert not sim.paused


def test_confirm_forces_pause_and_resumes(sim):
    sim.start()
    sim.open_confirm_end()
    assert sim.confirm_pending
    assert sim.paused

    # Manual pause toggling is locked while the confirmation is open
    sim.toggle_pause()
    assert sim.paused

    sim.close_confirm_end()
    assert not sim.confirm_pending
    assert not sim.paused


def test_confirm_keeps_player_pause(sim):
    sim.start()
    sim.toggle_pause()
    sim.open_confirm_end()
    sim.close_confirm_end()
    assert sim.paused


def test_confirm_ignored_when_idle(sim):
    sim.open_confirm_end()
    assert not sim.confirm_pending


def test_end_clears_confirm(sim):
    sim.start()
    sim.open_confirm_end()
    assert sim.end() is not None
    assert not sim.confirm_pending


# --------------------------------- Difficulty & settings -----------------------

@pytest.mark.parametrize("elapsed, expected", [(0, 1.0), (9.99, 1.0), (10, 1.1), (25, 1.2), (1000, 3.0)])
def test_difficulty_curve(elapsed, expected):
    assert difficulty_for(elapsed) == pytest.approx(expected)


def test_difficulty_follows_run_clock(sim, clock):
    sim.start()
    clock.advance(25_000)
    sim.update(0.0)
    assert sim.difficulty == pytest.approx(1.2)
    assert sim.speed_multiplier == pytest.approx(2.0 * 1.2)


def test_difficulty_disabled(clock, rng, viewport):
    sim = Simulation(lambda: viewport, clock=clock, rng=rng,
                     settings=Settings(difficulty_progression=False))
    sim.start()
    clock.advance(60_000)
    sim.update(0.0)
    assert sim.difficulty == 1.0


def test_out_of_range_level_still_spawns(clock, rng, viewport):
    sim = Simulation(lambda: viewport, clock=clock, rng=rng, settings=Settings(speed_level=6))
    sim.start()
    sim.update(0.016)
    assert sim.hazards.hazard is not None
    assert sim.speed_multiplier == pytest.approx(4.0)


def test_difficulty_scales_spawned_hazard_speed(sim, clock):
    sim.start()
    clock.advance(20_000)
    sim.tick(clock.advance(16))
    hazard = sim.hazards.hazard
    assert hazard is not None
    assert sim.difficulty == pytest.approx(1.2)

    scale = sim.settings.speed_multiplier * 1.2
    speed = math.hypot(hazard.vx, hazard.vy)
    assert 38 * scale - 1e-9 <= speed <= 78 * scale + 1e-9


def test_apply_settings_replaces_value(sim):
    before = sim.settings
    after = sim.apply_settings(SettingsPatch(speed_level=1))
    assert sim.settings is after
    assert before.speed_level == 3
    assert sim.speed_multiplier == pytest.approx(1.0)


# --------------------------------- Frame tick ----------------------------------

def test_tick_clamps_dt(sim, clock):
    sim.start()
    sim.particles.particles.append(Particle(x=0, y=0, vx=0, vy=0, lifespan=1.0, size=1))
    sim.tick(clock.advance(1000))
    assert sim.particles.particles[0].age == pytest.approx(0.033)


def test_tick_resets_input_once(sim, clock):
    sim.start()
    sim.input.push_click(-500, -500)
    sim.tick(clock.advance(16))
    assert sim.input.click is None
    assert sim.stats.clicks == 1
    assert len(sim.particles.rings) == 1

    sim.tick(clock.advance(16))
    assert sim.stats.clicks == 1


def test_tick_applies_pause_intent(sim, clock):
    sim.start()
    sim.input.request_pause_toggle()
    snap = sim.tick(clock.advance(16))
    assert snap.paused
    assert not sim.input.toggle_pause


def test_tick_quit_intent_opens_confirmation(sim, clock):
    sim.start()
    sim.input.request_quit()
    snap = sim.tick(clock.advance(16))
    assert snap.confirm_pending
    assert snap.paused


def test_no_simulation_while_confirm_pending(sim, clock):
    sim.start()
    run_until(sim, clock, lambda: sim.hazards.hazard is not None)
    sim.open_confirm_end()
    x = sim.hazards.hazard.x

    sim.input.push_click(-500, -500)
    sim.tick(clock.advance(16))
    assert sim.hazards.hazard.x == x
    assert sim.stats.clicks == 0
    assert sim.input.click is None


def test_clicks_ignored_while_paused(sim, clock):
    sim.start()
    sim.toggle_pause()
    sim.input.push_click(10, 10)
    sim.tick(clock.advance(16))
    assert sim.stats.clicks == 0
    assert sim.particles.rings == []


def test_snapshot_is_a_copy(sim, clock):
    sim.start()
    run_until(sim, clock, lambda: sim.hazards.hazard is not None)
    snap = sim.snapshot()
    snap.hazard.x += 1000
    assert sim.hazards.hazard.x != snap.hazard.x


# --------------------------------- End to end ----------------------------------

def test_click_on_center_destroys_hazard(sim, clock):
    sim.start()
    run_until(sim, clock, lambda: sim.hazards.hazard is not None)
    hazard = sim.hazards.hazard

    sim.input.push_click(hazard.x, hazard.y)
    snap = sim.tick(clock.advance(16))

    assert snap.destroyed == 1
    assert 12 <= len(snap.particles) <= 30
    assert snap.hazard is None
    assert sim.hazards.cooldown > 0
    assert snap.rings == ()


def test_escaped_hazard_counts_one_miss(sim, clock):
    sim.start()
    run_until(sim, clock, lambda: sim.stats.misses >= 1)

    assert sim.stats.misses == 1
    assert sim.stats.destroyed == 0
    assert sim.particles.particles == []
    assert sim.particles.rings == []
    assert sim.hazards.hazard is None
    assert 0 < sim.hazards.cooldown <= 0.5


def test_pause_freezes_run_time(sim, clock):
    sim.start()
    for _ in range(50):
        sim.tick(clock.advance(100))
    assert sim.snapshot(clock.now).time_sec == pytest.approx(5.0)

    sim.toggle_pause()
    for _ in range(30):
        snap = sim.tick(clock.advance(100))
        assert snap.time_sec == pytest.approx(5.0)

    sim.toggle_pause()
    snap = sim.tick(clock.advance(1000))
    assert snap.time_sec == pytest.approx(6.0)


def test_logger_records_run(tmp_path, clock, rng, viewport):
    log_file = tmp_path / "log.md"
    sim = Simulation(lambda: viewport, clock=clock, rng=rng, logger=GameLogger(str(log_file)))
    sim.start()
    run_until(sim, clock, lambda: sim.hazards.hazard is not None)
    hazard = sim.hazards.hazard
    sim.input.push_click(hazard.x, hazard.y)
    sim.tick(clock.advance(16))
    sim.end()

    text = log_file.read_text(encoding="utf-8")
    assert "RUN START" in text
    assert "| HIT |" in text
    assert "RUN END" in text
