"""Main simulation controller."""

from typing import Callable, Dict, Optional, Sequence, Tuple

import numpy as np

from solar_sim.errors import ConfigurationError
from solar_sim.numerics.context import PrecisionContext, get_context
from solar_sim.physics.body import Body, BodyArena
from solar_sim.physics.gravity import G_SI, GravitySolver
from solar_sim.physics.integrators.base import Integrator
from solar_sim.physics.integrators.lagged_euler import LaggedEulerIntegrator
from solar_sim.physics.rotation import RotationIntegrator


class Simulation:
    """Owns the body set and advances it one fixed step at a time.

    Between steps the body state is freely readable; a step either completes
    for every pair or raises.
    """

    def __init__(
        self,
        context: Optional[PrecisionContext] = None,
        G=G_SI,
        integrator: Optional[Integrator] = None,
        dt=1,
    ):
        """Initialize simulation.

        Args:
            context: Precision context (default: shared 128-bit context)
            G: Gravitational constant
            integrator: Integrator policy (default: lagged Euler)
            dt: Simulated time per step
        """
        self.context = context or get_context()
        self.solver = GravitySolver(self.context, G)
        self.integrator = integrator or LaggedEulerIntegrator()
        self.rotation = RotationIntegrator()
        self.dt = self.context.mpf(dt)
        if self.dt <= 0:
            raise ConfigurationError(f"Timestep must be positive, got {dt}")

        self._arena: Optional[BodyArena] = None
        self._reference_index: Optional[int] = None
        self.step_count = 0
        self.rotation_count = 0

        self.on_step_callback: Optional[Callable] = None
        self.debug_table: bool = False
        self.debug_table_interval: int = 100

    @property
    def G(self):
        return self.solver.G

    @property
    def configured(self) -> bool:
        return self._arena is not None

    def configure(self, bodies: Sequence[Body], reference_frame_id: Optional[str] = None):
        """Set up the body set once.

        Args:
            bodies: Bodies to simulate
            reference_frame_id: Optional id of the body held fixed. Bodies may
                instead carry ``is_reference_frame=True``; at most one body in
                total may be the reference frame.

        Raises:
            ConfigurationError: If the configuration violates any invariant
        """
        if self._arena is not None:
            raise ConfigurationError("Simulation is already configured")

        bodies = list(bodies)
        seen = set()
        for body in bodies:
            if not isinstance(body, Body):
                raise ConfigurationError(f"Expected Body, got {type(body).__name__}")
            if not body.body_id:
                raise ConfigurationError("Body id must be a non-empty string")
            if body.body_id in seen:
                raise ConfigurationError(f"Duplicate body id: {body.body_id!r}")
            seen.add(body.body_id)
            self._validate_body(body)

        flagged = [body.body_id for body in bodies if body.is_reference_frame]
        if reference_frame_id is not None:
            if reference_frame_id not in seen:
                raise ConfigurationError(f"Unknown reference frame body: {reference_frame_id!r}")
            flagged = sorted(set(flagged) | {reference_frame_id})
        if len(flagged) > 1:
            raise ConfigurationError(
                f"At most one reference frame body is allowed, got {len(flagged)}: {flagged}"
            )

        for i, a in enumerate(bodies):
            for b in bodies[i + 1:]:
                if a.position == b.position:
                    raise ConfigurationError(
                        f"Bodies {a.body_id!r} and {b.body_id!r} share the same position"
                    )

        arena = BodyArena(bodies)
        self._reference_index = None
        if flagged:
            self._reference_index = arena.index_of(flagged[0])
            arena[self._reference_index].is_reference_frame = True
        self._arena = arena
        self.step_count = 0
        self.rotation_count = 0

    def _validate_body(self, body: Body) -> None:
        ctx = self.context
        if body.position.context is not ctx or body.acceleration.context is not ctx:
            raise ConfigurationError(
                f"Body {body.body_id!r} was built with a {body.position.context.bits}-bit "
                f"context, simulation uses {ctx.bits} bits"
            )
        for label, value in (("mass", body.mass), ("estimated_radius", body.estimated_radius)):
            if not ctx.is_scalar(value):
                raise ConfigurationError(
                    f"Body {body.body_id!r} {label} must be a {ctx.bits}-bit scalar"
                )
            if not ctx.isfinite(value) or value <= 0:
                raise ConfigurationError(
                    f"Body {body.body_id!r} {label} must be positive, got {ctx.nstr(value)}"
                )

    def _require_configured(self) -> BodyArena:
        if self._arena is None:
            raise ConfigurationError("Simulation has not been configured")
        return self._arena

    @property
    def bodies(self) -> Tuple[Body, ...]:
        return self._require_configured().as_tuple()

    @property
    def reference_frame_id(self) -> Optional[str]:
        if self._reference_index is None:
            return None
        return self._require_configured()[self._reference_index].body_id

    @property
    def time(self):
        return self.dt * self.step_count

    def body(self, body_id: str) -> Body:
        return self._require_configured().get(body_id)

    def step(self):
        """Advance one unit of simulated time (gravity and rotation)."""
        self.step_gravity()
        self.step_rotation()

    def step_gravity(self):
        """Run one gravity step through the integrator policy."""
        arena = self._require_configured()
        self.integrator.step(arena, self.solver, self._reference_index, self.dt)
        self.step_count += 1

        if self.debug_table and (self.step_count % self.debug_table_interval == 0):
            self._log_state_table()
        if self.on_step_callback:
            self.on_step_callback(self)

    def step_rotation(self):
        """Advance every spinning body once."""
        arena = self._require_configured()
        self.rotation.step(body.spin for body in arena if body.spin is not None)
        self.rotation_count += 1

    def run(self, n_steps: int):
        """Run simulation for specified number of steps.

        Args:
            n_steps: Number of steps to run
        """
        for _ in range(n_steps):
            self.step()

    def positions(self) -> Dict[str, np.ndarray]:
        """Render-space (float32) position per body id."""
        return {body.body_id: body.render_position() for body in self._require_configured()}

    def accelerations(self) -> Dict[str, np.ndarray]:
        """Render-space (float32) acceleration field per body id."""
        return {body.body_id: body.render_acceleration() for body in self._require_configured()}

    def orientations(self) -> Dict[str, np.ndarray]:
        """Spin quaternion (w, x, y, z) per spinning body id."""
        return {
            body.body_id: body.spin.orientation()
            for body in self._require_configured()
            if body.spin is not None
        }

    def physical_summary(self, body_id: str) -> Tuple:
        """Return (mass, estimated_radius) for a body.

        Raises:
            KeyError: If no body has that id
        """
        return self.body(body_id).physical_summary()

    def _log_state_table(self):
        """Print position and acceleration magnitude per body."""
        nstr = self.context.nstr
        for body in self._require_configured():
            print(
                f"[Diag] step={self.step_count} body={body.body_id} "
                f"pos=({nstr(body.position.x, 8)}, {nstr(body.position.y, 8)}, {nstr(body.position.z, 8)}) "
                f"|acc|={nstr(body.acceleration.magnitude(), 8)}"
            )
