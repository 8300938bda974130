"""Integrator lookup by name."""

from typing import List

from solar_sim.physics.integrators.base import Integrator
from solar_sim.physics.integrators.lagged_euler import LaggedEulerIntegrator
from solar_sim.physics.integrators.symplectic_euler import SymplecticEulerIntegrator

_INTEGRATORS = {
    "lagged_euler": LaggedEulerIntegrator,
    "symplectic_euler": SymplecticEulerIntegrator,
}


def list_integrators() -> List[str]:
    return list(_INTEGRATORS)


def get_integrator(name: str) -> Integrator:
    """Get an integrator instance.

    Args:
        name: Integrator name ('lagged_euler', 'symplectic_euler')

    Returns:
        Integrator instance

    Raises:
        ValueError: If the name is unknown
    """
    integrator_class = _INTEGRATORS.get(name.lower())
    if integrator_class is None:
        raise ValueError(f"Unknown integrator '{name}'. Available: {list_integrators()}")
    return integrator_class()
