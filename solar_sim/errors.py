"""Exception types raised by the simulation core."""


class SimulationError(Exception):
    """Base class for all simulation errors."""


class ConfigurationError(SimulationError, ValueError):
    """Body set rejected at configure time (simulation does not start)."""


class SingularityError(SimulationError, ArithmeticError):
    """Zero separation or zero-magnitude normalization.

    Always fatal: continuing would produce meaningless trajectories.
    """


class PrecisionMismatchError(SimulationError, ValueError):
    """Operands were created by different precision contexts."""
