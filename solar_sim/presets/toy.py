"""Unit-scale presets (G = 1)."""

from typing import List, Optional

from solar_sim.physics.body import Body
from solar_sim.presets.base import Preset


class UnitTwoBody(Preset):
    """Two unit masses one unit apart on the x axis."""

    G = 1

    @property
    def name(self) -> str:
        return "unit_two_body"

    def generate(self) -> List[Body]:
        ctx = self.context
        return [
            Body("A", ctx.mpf(1), ctx.mpf("0.1"), ctx.vector(0, 0, 0)),
            Body("B", ctx.mpf(1), ctx.mpf("0.1"), ctx.vector(1, 0, 0)),
        ]


class Triple(Preset):
    """Heavy primary (reference frame) with two light companions."""

    G = 1

    def __init__(
        self,
        context,
        primary_mass=100,
        with_reference_frame: bool = True,
        orbiting: bool = True,
    ):
        """Initialize triple preset.

        Args:
            context: PrecisionContext
            primary_mass: Mass of the central body
            with_reference_frame: Flag the primary as reference frame
            orbiting: Give companions circular velocities about the primary
        """
        super().__init__(context)
        self.primary_mass = primary_mass
        self.with_reference_frame = with_reference_frame
        self.orbiting = orbiting

    @property
    def name(self) -> str:
        return "triple"

    @property
    def reference_frame_id(self) -> Optional[str]:
        return "Primary" if self.with_reference_frame else None

    def generate(self) -> List[Body]:
        ctx = self.context
        mass = ctx.mpf(self.primary_mass)
        inner_velocity = outer_velocity = None
        if self.orbiting:
            # v = sqrt(G*M/r) for r = 10 and r = 25
            inner_velocity = ctx.vector(0, ctx.sqrt(mass / 10), 0)
            outer_velocity = ctx.vector(ctx.sqrt(mass / 25), 0, 0)
        return [
            Body("Primary", mass, ctx.mpf(1), ctx.vector(0, 0, 0),
                 is_reference_frame=self.with_reference_frame),
            Body("Inner", ctx.mpf(1), ctx.mpf("0.2"), ctx.vector(10, 0, 0), inner_velocity),
            Body("Outer", ctx.mpf("0.5"), ctx.mpf("0.1"), ctx.vector(0, 0, -25), outer_velocity),
        ]
