"""Tests for step cadence policies."""

import pytest
from solar_sim.numerics.context import get_context
from solar_sim.physics.cadence import FixedRateCadence, FrameCadence, get_cadence
from solar_sim.physics.simulation import Simulation
from solar_sim.presets import UnitTwoBody


def make_simulation():
    ctx = get_context(128)
    sim = Simulation(ctx, G=1)
    sim.configure(UnitTwoBody(ctx).generate())
    return sim


def test_frame_cadence():
    """Test one step per update regardless of frame time."""
    sim = make_simulation()
    cadence = FrameCadence(sim)

    assert cadence.update(0.5) == 1
    assert cadence.update(0.0) == 1
    assert sim.step_count == 2
    assert sim.rotation_count == 2
    assert cadence.name == "frame"


def test_fixed_rate_cadence():
    """Test zero, one or several gravity steps per update."""
    sim = make_simulation()
    cadence = FixedRateCadence(sim, rate_hz=4.0)

    assert cadence.update(0.125) == 0
    assert cadence.update(0.125) == 1
    assert cadence.update(1.0) == 4
    assert sim.step_count == 5
    # Rotation advances once per update
    assert sim.rotation_count == 3
    assert cadence.pending_time == 0.0


def test_fixed_rate_catch_up_clamp():
    """Test that excess accumulated time is dropped beyond the clamp."""
    sim = make_simulation()
    cadence = FixedRateCadence(sim, rate_hz=4.0, max_steps_per_update=2)

    assert cadence.update(1.0) == 2
    assert cadence.pending_time == 0.0
    assert sim.step_count == 2


def test_cadence_validation():
    """Test invalid parameters."""
    sim = make_simulation()
    with pytest.raises(ValueError):
        FixedRateCadence(sim, rate_hz=0.0)
    with pytest.raises(ValueError):
        FixedRateCadence(sim, max_steps_per_update=0)
    with pytest.raises(ValueError):
        FixedRateCadence(sim).update(-1.0)
    with pytest.raises(ValueError):
        get_cadence("vsync", sim)

    assert isinstance(get_cadence("fixed", sim, rate_hz=60.0), FixedRateCadence)
