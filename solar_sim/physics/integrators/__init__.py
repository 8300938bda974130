"""Integrator policies for the gravity step."""

from solar_sim.physics.integrators.base import Integrator
from solar_sim.physics.integrators.lagged_euler import LaggedEulerIntegrator
from solar_sim.physics.integrators.symplectic_euler import SymplecticEulerIntegrator
from solar_sim.physics.integrators.factory import get_integrator, list_integrators

__all__ = [
    "Integrator",
    "LaggedEulerIntegrator",
    "SymplecticEulerIntegrator",
    "get_integrator",
    "list_integrators",
]
