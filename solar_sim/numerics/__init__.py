"""Arbitrary-precision scalars and 3-vectors."""

from solar_sim.numerics.context import PrecisionContext, get_context, DEFAULT_PRECISION
from solar_sim.numerics.vector import HPVec3

__all__ = ["PrecisionContext", "get_context", "DEFAULT_PRECISION", "HPVec3"]
