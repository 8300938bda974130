"""Symplectic (kick-then-drift) Euler."""

from typing import Optional

from solar_sim.physics.body import BodyArena
from solar_sim.physics.integrators.base import Integrator


class SymplecticEulerIntegrator(Integrator):
    """Accumulate the acceleration at the current positions, then move.

    Same pair evaluation as the lagged policy with the two phases swapped,
    so forces act on positions in the step they are computed.
    """

    @property
    def name(self) -> str:
        return "symplectic_euler"

    @property
    def order(self) -> int:
        return 1

    def step(self, arena: BodyArena, solver, reference_index: Optional[int], dt) -> None:
        solver.accumulate(arena, dt)
        self.drift(arena, reference_index, dt)
