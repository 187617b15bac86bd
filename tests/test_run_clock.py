import pytest

from asterclick.run_clock import RunClock


def test_not_running_reports_zero():
    clock = RunClock()
    assert clock.elapsed_seconds(5000) == 0


def test_elapsed_grows_while_running():
    clock = RunClock()
    clock.start(1000)
    assert clock.elapsed_seconds(1000) == 0
    assert clock.elapsed_seconds(2500) == pytest.approx(1.5)
    assert clock.elapsed_seconds(4000) == pytest.approx(3.0)


def test_elapsed_never_negative():
    clock = RunClock()
    clock.start(1000)
    assert clock.elapsed_seconds(500) == 0


def test_pause_freezes_elapsed():
    clock = RunClock()
    clock.start(0)
    clock.toggle_pause(2000)
    assert clock.paused
    assert clock.elapsed_seconds(2000) == pytest.approx(2.0)
    assert clock.elapsed_seconds(9000) == pytest.approx(2.0)


def test_resume_adds_exact_pause_duration():
    clock = RunClock()
    clock.start(0)
    clock.toggle_pause(1000)
    clock.toggle_pause(4500)
    assert not clock.paused
    assert clock.paused_total_ms == 3500
    assert clock.paused_at_ms == 0
    assert clock.elapsed_seconds(5500) == pytest.approx(2.0)


def test_multiple_pauses_accumulate():
    clock = RunClock()
    clock.start(0)
    clock.toggle_pause(1000)
    clock.toggle_pause(2000)
    clock.toggle_pause(3000)
    clock.toggle_pause(6000)
    assert clock.paused_total_ms == 4000
    assert clock.elapsed_seconds(7000) == pytest.approx(3.0)


def test_stop_discards_run():
    clock = RunClock()
    clock.start(0)
    clock.toggle_pause(1000)
    clock.stop()
    assert not clock.running
    assert not clock.paused
    assert clock.elapsed_seconds(5000) == 0

    clock.toggle_pause(6000)
    assert not clock.paused
    assert clock.elapsed_seconds(7000) == 0


def test_start_resets_previous_pauses():
    clock = RunClock()
    clock.start(0)
    clock.toggle_pause(1000)
    clock.toggle_pause(3000)
    clock.start(10_000)
    assert clock.paused_total_ms == 0
    assert clock.elapsed_seconds(11_000) == pytest.approx(1.0)


def test_elapsed_is_non_decreasing_while_running():
    clock = RunClock()
    clock.start(0)
    samples = [clock.elapsed_seconds(t) for t in range(0, 5000, 137)]
    assert samples == sorted(samples)
