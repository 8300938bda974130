"""Step cadence policies: how often the hosting loop steps the simulation."""

from abc import ABC, abstractmethod
from typing import Optional

from solar_sim.physics.simulation import Simulation

DEFAULT_RATE_HZ = 30.0


class StepCadence(ABC):
    """Decides how many gravity steps run per host update."""

    def __init__(self, simulation: Simulation):
        self.simulation = simulation

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this cadence."""
        pass

    @abstractmethod
    def update(self, elapsed_seconds: float) -> int:
        """Advance for one host update (frame).

        Args:
            elapsed_seconds: Wall-clock time since the previous update

        Returns:
            Number of gravity steps run
        """
        pass


class FrameCadence(StepCadence):
    """One full step per presentation frame, regardless of frame time."""

    @property
    def name(self) -> str:
        return "frame"

    def update(self, elapsed_seconds: float) -> int:
        self.simulation.step()
        return 1


class FixedRateCadence(StepCadence):
    """Gravity at a fixed rate decoupled from the frame rate.

    Elapsed time is accumulated and zero, one or several gravity steps are
    run per update. Rotation still advances once per update.
    """

    def __init__(
        self,
        simulation: Simulation,
        rate_hz: float = DEFAULT_RATE_HZ,
        max_steps_per_update: Optional[int] = None,
    ):
        """Initialize fixed-rate cadence.

        Args:
            simulation: Configured simulation
            rate_hz: Gravity steps per wall-clock second
            max_steps_per_update: Optional cap on catch-up steps; excess
                accumulated time is dropped
        """
        super().__init__(simulation)
        if rate_hz <= 0:
            raise ValueError(f"Step rate must be positive, got {rate_hz}")
        if max_steps_per_update is not None and max_steps_per_update < 1:
            raise ValueError(f"max_steps_per_update must be >= 1, got {max_steps_per_update}")
        self.rate_hz = float(rate_hz)
        self.period = 1.0 / self.rate_hz
        self.max_steps_per_update = max_steps_per_update
        self._accumulator = 0.0

    @property
    def name(self) -> str:
        return "fixed"

    @property
    def pending_time(self) -> float:
        return self._accumulator

    def update(self, elapsed_seconds: float) -> int:
        if elapsed_seconds < 0:
            raise ValueError(f"Elapsed time must be non-negative, got {elapsed_seconds}")
        self._accumulator += elapsed_seconds
        n_steps = int(self._accumulator / self.period)
        if self.max_steps_per_update is not None and n_steps > self.max_steps_per_update:
            n_steps = self.max_steps_per_update
            self._accumulator = 0.0
        else:
            self._accumulator -= n_steps * self.period
        for _ in range(n_steps):
            self.simulation.step_gravity()
        self.simulation.step_rotation()
        return n_steps


def get_cadence(name: str, simulation: Simulation, **kwargs) -> StepCadence:
    """Get a cadence by name ('frame' or 'fixed')."""
    cadences = {
        "frame": FrameCadence,
        "fixed": FixedRateCadence,
    }
    cadence_class = cadences.get(name.lower())
    if cadence_class is None:
        raise ValueError(f"Unknown cadence: {name}. Available: {list(cadences.keys())}")
    return cadence_class(simulation, **kwargs)
