"""Sun and Earth preset."""

import math
from typing import List, Optional

from solar_sim.physics.body import Body
from solar_sim.physics.rotation import Spin, sidereal_rate
from solar_sim.presets.base import Preset

SUN_MASS = "1.989e30"  # kg
SUN_RADIUS = "6.96e8"  # m
SUN_ROTATION_PERIOD = 2192832.0  # s, ~25.38 days

EARTH_MASS = "5.972e24"  # kg
EARTH_RADIUS = "6.371e6"  # m
EARTH_ROTATION_PERIOD = 86164.0905  # s, sidereal day
DISTANCE_FROM_SUN = "1.496e11"  # m


class SunEarth(Preset):
    """Sun held as reference frame with Earth one astronomical unit away."""

    def __init__(self, context, dt: float = 1.0, circular: bool = False, spin: bool = True):
        """Initialize Sun-Earth preset.

        Args:
            context: PrecisionContext
            dt: Seconds per step (scales spin rates)
            circular: Seed Earth with a circular-orbit velocity instead of
                starting at rest
            spin: Attach sidereal spins to both bodies
        """
        super().__init__(context)
        self.dt = dt
        self.circular = circular
        self.spin = spin

    @property
    def name(self) -> str:
        return "sun_earth"

    @property
    def reference_frame_id(self) -> Optional[str]:
        return "Sun"

    def generate(self) -> List[Body]:
        ctx = self.context
        sun_mass = ctx.mpf(SUN_MASS)
        distance = ctx.mpf(DISTANCE_FROM_SUN)

        sun = Body(
            body_id="Sun",
            mass=sun_mass,
            estimated_radius=ctx.mpf(SUN_RADIUS),
            position=ctx.zero_vector(),
            is_reference_frame=True,
            spin=Spin(sidereal_rate(SUN_ROTATION_PERIOD, self.dt)) if self.spin else None,
        )

        earth_acceleration = None
        if self.circular:
            # v = sqrt(G*M/r), perpendicular to the Sun-Earth line
            speed = ctx.sqrt(ctx.mpf(self.G) * sun_mass / distance)
            earth_acceleration = ctx.vector(0, 0, speed)

        earth = Body(
            body_id="Earth",
            mass=ctx.mpf(EARTH_MASS),
            estimated_radius=ctx.mpf(EARTH_RADIUS),
            position=ctx.vector(distance, 0, 0),
            acceleration=earth_acceleration,
            # axial tilt about the orbital plane normal is ignored
            spin=Spin(sidereal_rate(EARTH_ROTATION_PERIOD, self.dt)) if self.spin else None,
        )
        return [sun, earth]


def orbital_period(context, central_mass=SUN_MASS, distance=DISTANCE_FROM_SUN, G=Preset.G) -> float:
    """Circular orbital period in seconds, T = 2*pi*sqrt(r^3 / (G*M))."""
    r = context.mpf(distance)
    return 2 * math.pi * float(context.sqrt(r * r * r / (context.mpf(G) * context.mpf(central_mass))))
