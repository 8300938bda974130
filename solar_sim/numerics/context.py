"""Precision contexts for arbitrary-precision simulation state.

Every scalar and vector in a simulation is created through one
``PrecisionContext``. Each context owns an independent mpmath context, so
simulations at different precisions can coexist in one process.
"""

from typing import Any, Dict, Iterable

from mpmath.ctx_mp import MPContext

DEFAULT_PRECISION = 128  # bits of binary significand

_contexts: Dict[int, "PrecisionContext"] = {}


class PrecisionContext:
    """Factory for scalars and vectors at a fixed binary precision."""

    def __init__(self, bits: int = DEFAULT_PRECISION):
        """Initialize context.

        Args:
            bits: Significand width in bits (e.g. 53 for double, 128 default)
        """
        if int(bits) < 2:
            raise ValueError(f"Precision must be at least 2 bits, got {bits}")
        self._mp = MPContext()
        self._mp.prec = int(bits)
        self.zero = self._mp.mpf(0)
        self.one = self._mp.mpf(1)

    @property
    def name(self) -> str:
        return f"mp{self.bits}"

    @property
    def bits(self) -> int:
        return self._mp.prec

    def mpf(self, value: Any):
        """Create a scalar at this context's precision.

        Strings are parsed directly at full precision, so ``"6.67430e-11"``
        is more accurate than the float literal.
        """
        return self._mp.mpf(value)

    def is_scalar(self, value: Any) -> bool:
        """True if ``value`` is a scalar created by this context."""
        return isinstance(value, self._mp.mpf)

    def sqrt(self, value):
        return self._mp.sqrt(value)

    def fsum(self, terms: Iterable):
        return self._mp.fsum(terms)

    def isfinite(self, value) -> bool:
        return bool(self._mp.isfinite(value))

    def nstr(self, value, digits: int = 10) -> str:
        """Format a scalar with ``digits`` significant digits."""
        return self._mp.nstr(value, digits)

    def vector(self, x: Any = 0, y: Any = 0, z: Any = 0):
        """Create an HPVec3 from three components."""
        from solar_sim.numerics.vector import HPVec3
        return HPVec3(self, self.mpf(x), self.mpf(y), self.mpf(z))

    def zero_vector(self):
        return self.vector(0, 0, 0)

    def from_render(self, array):
        """Re-import a render-space vector (lossy, tooling only)."""
        from solar_sim.numerics.vector import HPVec3
        return HPVec3.from_render(array, self)

    def __repr__(self) -> str:
        return f"PrecisionContext(bits={self.bits})"


def get_context(bits: int = DEFAULT_PRECISION) -> PrecisionContext:
    """Get the shared context for a bit-width.

    Args:
        bits: Significand width in bits

    Returns:
        PrecisionContext instance (one per bit-width)
    """
    bits = int(bits)
    context = _contexts.get(bits)
    if context is None:
        context = PrecisionContext(bits)
        _contexts[bits] = context
    return context
