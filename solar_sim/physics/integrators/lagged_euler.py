"""Semi-implicit Euler with one-step-delayed force (default policy)."""

from typing import Optional

from solar_sim.physics.body import BodyArena
from solar_sim.physics.integrators.base import Integrator


class LaggedEulerIntegrator(Integrator):
    """Move with the stale acceleration, then accumulate a fresh one.

    The acceleration that moves a body in step k was computed during step
    k-1. Step 1 therefore leaves positions untouched when bodies start with
    a zero acceleration field.
    """

    @property
    def name(self) -> str:
        return "lagged_euler"

    @property
    def order(self) -> int:
        return 1

    def step(self, arena: BodyArena, solver, reference_index: Optional[int], dt) -> None:
        self.drift(arena, reference_index, dt)
        solver.accumulate(arena, dt)
