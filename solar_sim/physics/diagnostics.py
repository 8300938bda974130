"""Diagnostics for high-precision body sets."""

from itertools import combinations
from typing import Sequence

from solar_sim.physics.body import Body


class Diagnostics:
    """Conserved-quantity bookkeeping matching the solver's force law.

    The running ``acceleration`` field of each body is its velocity proxy.
    """

    def __init__(self, context, G):
        """Initialize diagnostics.

        Args:
            context: PrecisionContext of the bodies
            G: Gravitational constant (must match the solver)
        """
        self.context = context
        self.G = context.mpf(G)

    @classmethod
    def for_simulation(cls, simulation) -> "Diagnostics":
        return cls(simulation.context, simulation.G)

    def total_mass(self, bodies: Sequence[Body]):
        return self.context.fsum(body.mass for body in bodies)

    def mass_weighted_position(self, bodies: Sequence[Body]):
        """Sum of mass * position."""
        ctx = self.context
        return ctx.vector(
            ctx.fsum(body.mass * body.position.x for body in bodies),
            ctx.fsum(body.mass * body.position.y for body in bodies),
            ctx.fsum(body.mass * body.position.z for body in bodies),
        )

    def center_of_mass(self, bodies: Sequence[Body]):
        return self.mass_weighted_position(bodies).scale(1 / self.total_mass(bodies))

    def total_momentum(self, bodies: Sequence[Body]):
        """Sum of mass * velocity proxy."""
        ctx = self.context
        return ctx.vector(
            ctx.fsum(body.mass * body.acceleration.x for body in bodies),
            ctx.fsum(body.mass * body.acceleration.y for body in bodies),
            ctx.fsum(body.mass * body.acceleration.z for body in bodies),
        )

    def kinetic_energy(self, bodies: Sequence[Body]):
        """Total kinetic energy: 0.5 * sum(m_i * v_i^2)."""
        return self.context.fsum(
            body.mass * body.acceleration.magnitude_squared() for body in bodies
        ) / 2

    def potential_energy(self, bodies: Sequence[Body]):
        """Total potential energy: -G * sum_{i<j} m_i * m_j / r_ij."""
        return -self.G * self.context.fsum(
            a.mass * b.mass / a.position.distance(b.position)
            for a, b in combinations(bodies, 2)
        )

    def total_energy(self, bodies: Sequence[Body]):
        return self.kinetic_energy(bodies) + self.potential_energy(bodies)

    def separation(self, a: Body, b: Body):
        return a.position.distance(b.position)
