"""Abstract base class for integrator policies."""

from abc import ABC, abstractmethod
from typing import Optional

from solar_sim.physics.body import BodyArena


class Integrator(ABC):
    """Orders position advancement and acceleration accumulation within a step."""

    @abstractmethod
    def step(self, arena: BodyArena, solver, reference_index: Optional[int], dt) -> None:
        """Perform one integration step in place.

        Args:
            arena: Bodies to advance
            solver: GravitySolver used to accumulate accelerations
            reference_index: Index of the fixed reference-frame body, or None
            dt: Step length (context scalar)
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this integrator."""
        pass

    @property
    @abstractmethod
    def order(self) -> int:
        """Return the order of accuracy."""
        pass

    @staticmethod
    def drift(arena: BodyArena, reference_index: Optional[int], dt) -> None:
        """Advance positions by the current acceleration field.

        The reference body is held fixed; every other body moves by its own
        displacement minus the reference body's, which keeps relative
        separations identical to an unframed run. Adding each body's own
        field alone would let separations drift from the unframed run as soon
        as the reference body accumulates a nonzero field.
        """
        offset = None
        if reference_index is not None:
            reference = arena[reference_index]
            if not reference.acceleration.is_zero():
                offset = _displacement(reference.acceleration, dt)

        for i, body in enumerate(arena):
            if i == reference_index:
                continue
            displacement = _displacement(body.acceleration, dt)
            if offset is not None:
                displacement = displacement.sub(offset)
            body.position = body.position.add(displacement)


def _displacement(acceleration, dt):
    if dt is None or dt == 1:
        return acceleration
    return acceleration.scale(dt)
