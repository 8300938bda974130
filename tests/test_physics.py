"""Tests for the simulation controller."""

from itertools import combinations

import numpy as np
import pytest
from solar_sim.errors import ConfigurationError
from solar_sim.numerics.context import PrecisionContext, get_context
from solar_sim.physics.body import Body
from solar_sim.physics.diagnostics import Diagnostics
from solar_sim.physics.integrators import SymplecticEulerIntegrator
from solar_sim.physics.rotation import Spin
from solar_sim.physics.simulation import Simulation
from solar_sim.presets import Triple, UnitTwoBody


def unit_simulation(**kwargs):
    ctx = get_context(128)
    sim = Simulation(ctx, G=1, **kwargs)
    sim.configure(UnitTwoBody(ctx).generate())
    return sim


def test_unit_two_body_scenario():
    """Test that step 1 accelerates without moving and step 2 moves."""
    sim = unit_simulation()
    ctx = sim.context
    a, b = sim.body("A"), sim.body("B")

    sim.step()

    assert a.acceleration == ctx.vector(1, 0, 0)
    assert b.acceleration == ctx.vector(-1, 0, 0)
    assert a.position == ctx.vector(0, 0, 0)
    assert b.position == ctx.vector(1, 0, 0)

    sim.step()

    assert a.position == ctx.vector(1, 0, 0)
    assert b.position == ctx.vector(0, 0, 0)
    assert sim.step_count == 2


def test_timestep_scales_drift_and_kick():
    """Test dt < 1 with exactly representable values."""
    sim = unit_simulation(dt="0.5")
    ctx = sim.context

    sim.step()
    assert sim.body("A").acceleration == ctx.vector("0.5", 0, 0)
    assert sim.body("A").position == ctx.zero_vector()

    sim.step()
    assert sim.body("A").position == ctx.vector("0.25", 0, 0)
    assert sim.time == 1


def test_symplectic_policy_moves_in_first_step():
    """Test that kick-then-drift ordering moves bodies immediately."""
    sim = unit_simulation(integrator=SymplecticEulerIntegrator())
    ctx = sim.context

    sim.step()

    assert sim.body("A").position == ctx.vector(1, 0, 0)
    assert sim.body("B").position == ctx.vector(0, 0, 0)


def test_reference_frame_body_is_fixed():
    """Test that the reference body never moves but still accumulates."""
    ctx = get_context(128)
    sim = Simulation(ctx, G=1)
    preset = Triple(ctx)
    sim.configure(preset.generate())
    initial = sim.body("Primary").position.copy()

    sim.run(25)

    primary = sim.body("Primary")
    assert sim.reference_frame_id == "Primary"
    assert primary.position == initial
    assert not primary.acceleration.is_zero()
    assert sim.body("Inner").position != ctx.vector(10, 0, 0)


def test_reference_frame_by_argument():
    """Test designating the reference frame at configure time."""
    ctx = get_context(128)
    sim = Simulation(ctx, G=1)
    sim.configure(Triple(ctx, with_reference_frame=False).generate(), reference_frame_id="Outer")

    assert sim.reference_frame_id == "Outer"
    assert sim.body("Outer").is_reference_frame

    sim.run(3)
    assert sim.body("Outer").position == ctx.vector(0, 0, -25)


def test_reference_frame_preserves_relative_motion():
    """Test that fixing a body leaves separations and forces unchanged step for step."""
    ctx = get_context(128)
    framed = Simulation(ctx, G=1)
    framed.configure(Triple(ctx, with_reference_frame=True).generate())
    free = Simulation(ctx, G=1)
    free.configure(Triple(ctx, with_reference_frame=False).generate())
    assert free.reference_frame_id is None

    tol = ctx.mpf("1e-25")
    for _ in range(30):
        framed.step()
        free.step()
        for (i, j) in combinations(range(3), 2):
            fa, fb = framed.bodies[i], framed.bodies[j]
            ua, ub = free.bodies[i], free.bodies[j]
            r_framed = fa.position.distance(fb.position)
            r_free = ua.position.distance(ub.position)
            assert abs(r_framed - r_free) <= r_free * tol

            f_framed = framed.solver.pair_acceleration(fa, fb)[0]
            f_free = free.solver.pair_acceleration(ua, ub)[0]
            assert abs(f_framed - f_free) <= f_free * tol

    # Absolute coordinates differ: the free primary drifts
    assert free.body("Primary").position != framed.body("Primary").position


def test_two_body_center_of_mass_conserved():
    """Test that sum(m * x) stays put over many steps without a reference frame."""
    ctx = get_context(128)
    v = ctx.sqrt(ctx.mpf("0.4"))  # circular relative speed for M = 4, r = 10
    bodies = [
        Body("heavy", ctx.mpf(3), ctx.mpf(1), ctx.vector(0, 0, 0), ctx.vector(0, -v / 4, 0)),
        Body("light", ctx.mpf(1), ctx.mpf(1), ctx.vector(10, 0, 0), ctx.vector(0, 3 * v / 4, 0)),
    ]
    sim = Simulation(ctx, G=1)
    sim.configure(bodies)
    diagnostics = Diagnostics.for_simulation(sim)

    initial = diagnostics.mass_weighted_position(sim.bodies)
    sim.run(200)
    final = diagnostics.mass_weighted_position(sim.bodies)

    assert (final - initial).magnitude() < ctx.mpf("1e-20")
    assert diagnostics.total_momentum(sim.bodies).magnitude() < ctx.mpf("1e-30")
    separation = diagnostics.separation(*sim.bodies)
    assert 5 < separation < 20


def test_configure_rejects_two_reference_frames():
    """Test that two flagged bodies are a configuration error."""
    ctx = get_context(128)
    bodies = UnitTwoBody(ctx).generate()
    for body in bodies:
        body.is_reference_frame = True

    sim = Simulation(ctx, G=1)
    with pytest.raises(ConfigurationError):
        sim.configure(bodies)
    assert not sim.configured


def test_configure_rejects_conflicting_reference_frame_argument():
    """Test a flag on one body plus an id for another."""
    ctx = get_context(128)
    bodies = Triple(ctx).generate()
    with pytest.raises(ConfigurationError):
        Simulation(ctx, G=1).configure(bodies, reference_frame_id="Inner")

    # Naming the flagged body again is fine
    Simulation(ctx, G=1).configure(Triple(ctx).generate(), reference_frame_id="Primary")


@pytest.mark.parametrize("mutate", [
    lambda ctx, bodies: setattr(bodies[0], "mass", ctx.mpf(0)),
    lambda ctx, bodies: setattr(bodies[0], "mass", ctx.mpf(-5)),
    lambda ctx, bodies: setattr(bodies[1], "estimated_radius", ctx.mpf(0)),
    lambda ctx, bodies: setattr(bodies[1], "mass", 1.0),
    lambda ctx, bodies: setattr(bodies[1], "body_id", "A"),
    lambda ctx, bodies: setattr(bodies[1], "body_id", ""),
    lambda ctx, bodies: setattr(bodies[1], "position", ctx.vector(0, 0, 0)),
])
def test_configure_rejects_invalid_bodies(mutate):
    """Test setup-time rejection of invalid body sets."""
    ctx = get_context(128)
    bodies = UnitTwoBody(ctx).generate()
    mutate(ctx, bodies)

    with pytest.raises(ConfigurationError):
        Simulation(ctx, G=1).configure(bodies)


def test_configure_rejects_unknown_reference_and_other_precision():
    """Test unknown reference id and bodies from another context."""
    ctx = get_context(128)
    with pytest.raises(ConfigurationError):
        Simulation(ctx, G=1).configure(UnitTwoBody(ctx).generate(), reference_frame_id="C")

    other = PrecisionContext(96)
    with pytest.raises(ConfigurationError):
        Simulation(ctx, G=1).configure(UnitTwoBody(other).generate())


def test_configure_only_once_and_required():
    """Test configure is one-time and stepping needs it."""
    ctx = get_context(128)
    sim = Simulation(ctx, G=1)
    with pytest.raises(ConfigurationError):
        sim.step()

    sim.configure(UnitTwoBody(ctx).generate())
    with pytest.raises(ConfigurationError):
        sim.configure(UnitTwoBody(ctx).generate())

    with pytest.raises(ConfigurationError):
        Simulation(ctx, dt=0)


def test_render_queries():
    """Test float32 positions, accelerations and physical summaries."""
    sim = unit_simulation()
    sim.step()

    positions = sim.positions()
    assert set(positions) == {"A", "B"}
    assert positions["B"].dtype == np.float32
    assert np.allclose(positions["B"], [1.0, 0.0, 0.0])
    assert np.allclose(sim.accelerations()["A"], [1.0, 0.0, 0.0])

    mass, radius = sim.physical_summary("A")
    assert mass == 1
    assert radius == sim.context.mpf("0.1")

    with pytest.raises(KeyError):
        sim.physical_summary("missing")


def test_rotation_runs_with_step():
    """Test that spins advance once per step and orientations are reported."""
    ctx = get_context(128)
    bodies = UnitTwoBody(ctx).generate()
    bodies[0].spin = Spin(0.25)
    sim = Simulation(ctx, G=1)
    sim.configure(bodies)

    sim.run(4)

    assert sim.body("A").spin.angle == pytest.approx(1.0)
    assert set(sim.orientations()) == {"A"}
    assert sim.rotation_count == 4


def test_step_callback_and_debug_table(capsys):
    """Test per-step hooks."""
    sim = unit_simulation()
    seen = []
    sim.on_step_callback = lambda s: seen.append(s.step_count)
    sim.debug_table = True
    sim.debug_table_interval = 2

    sim.run(4)

    assert seen == [1, 2, 3, 4]
    out = capsys.readouterr().out
    assert "[Diag] step=2 body=A" in out
    assert "[Diag] step=4 body=B" in out
    assert "step=3" not in out
