"""Physical-state records for simulated bodies."""

from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

import numpy as np

from solar_sim.numerics.vector import HPVec3
from solar_sim.physics.rotation import Spin


@dataclass
class Body:
    """One simulated massive point.

    ``acceleration`` is the running velocity proxy: it is advanced into
    ``position`` by the integrator and accumulates each step's pairwise
    accelerations.
    """
    body_id: str
    mass: object
    estimated_radius: object
    position: HPVec3
    acceleration: Optional[HPVec3] = None
    is_reference_frame: bool = False
    spin: Optional[Spin] = None

    def __post_init__(self):
        if self.acceleration is None:
            self.acceleration = self.position.context.zero_vector()

    @property
    def context(self):
        return self.position.context

    def physical_summary(self) -> Tuple:
        """Return (mass, estimated_radius)."""
        return self.mass, self.estimated_radius

    def render_position(self) -> np.ndarray:
        return self.position.to_render()

    def render_acceleration(self) -> np.ndarray:
        return self.acceleration.to_render()


class BodyArena:
    """Flat, index-addressed storage for a fixed set of bodies.

    Solver code works with indices so at most one slot per body is touched
    per pair.
    """

    def __init__(self, bodies: Sequence[Body]):
        self._bodies: List[Body] = list(bodies)
        self._index: Dict[str, int] = {}
        for i, body in enumerate(self._bodies):
            self._index[body.body_id] = i

    def __len__(self) -> int:
        return len(self._bodies)

    def __iter__(self) -> Iterator[Body]:
        return iter(self._bodies)

    def __getitem__(self, index: int) -> Body:
        return self._bodies[index]

    def index_of(self, body_id: str) -> int:
        """Index of ``body_id``.

        Raises:
            KeyError: If no body has that id
        """
        try:
            return self._index[body_id]
        except KeyError:
            raise KeyError(f"Unknown body id: {body_id!r}") from None

    def get(self, body_id: str) -> Body:
        return self._bodies[self.index_of(body_id)]

    def as_tuple(self) -> Tuple[Body, ...]:
        return tuple(self._bodies)
