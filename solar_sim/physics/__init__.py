"""Physics engine for high-precision gravity simulations."""

from solar_sim.physics.body import Body, BodyArena
from solar_sim.physics.gravity import GravitySolver
from solar_sim.physics.rotation import RotationIntegrator, Spin
from solar_sim.physics.simulation import Simulation

__all__ = ["Body", "BodyArena", "GravitySolver", "RotationIntegrator", "Spin", "Simulation"]
