"""
Solar Simulator - high-precision gravitational simulation of a star and its planets.

Features:
- Arbitrary-precision positions and accelerations (mpmath, 128 bits by default)
- O(n^2) pairwise Newtonian gravity, order-independent accumulation
- Pluggable integrator policies (lagged Euler, symplectic Euler)
- Optional fixed reference-frame body
- Per-frame or fixed-rate step cadence
- Preset scenes and a CLI
"""

__version__ = "0.1.0"

from solar_sim.numerics.context import PrecisionContext, get_context
from solar_sim.physics.simulation import Simulation

__all__ = [
    "PrecisionContext",
    "get_context",
    "Simulation",
]
