"""High-precision 3-vector."""

from typing import Any

import numpy as np

from solar_sim.errors import PrecisionMismatchError, SingularityError

RENDER_DTYPE = np.float32


class HPVec3:
    """Arbitrary-precision 3D vector bound to one PrecisionContext.

    Arithmetic returns new vectors; ``add_in_place`` is the only mutating
    operation. Operands from different contexts are rejected.
    """

    __slots__ = ("context", "x", "y", "z")

    def __init__(self, context, x, y, z):
        """Initialize vector.

        Args:
            context: PrecisionContext that owns the components
            x: X component (scalar created by ``context``)
            y: Y component
            z: Z component
        """
        self.context = context
        self.x = x
        self.y = y
        self.z = z

    def _check(self, other: "HPVec3") -> None:
        if not isinstance(other, HPVec3):
            raise TypeError(f"Expected HPVec3, got {type(other).__name__}")
        if other.context is not self.context:
            raise PrecisionMismatchError(
                f"Cannot combine vectors of {self.context.bits} and {other.context.bits} bits"
            )

    def _scalar(self, value: Any):
        if self.context.is_scalar(value):
            return value
        if isinstance(value, (int, float, str)):
            return self.context.mpf(value)
        raise PrecisionMismatchError(
            f"Scalar {value!r} does not belong to the {self.context.bits}-bit context"
        )

    def add(self, other: "HPVec3") -> "HPVec3":
        self._check(other)
        return HPVec3(self.context, self.x + other.x, self.y + other.y, self.z + other.z)

    def sub(self, other: "HPVec3") -> "HPVec3":
        self._check(other)
        return HPVec3(self.context, self.x - other.x, self.y - other.y, self.z - other.z)

    def scale(self, scalar) -> "HPVec3":
        s = self._scalar(scalar)
        return HPVec3(self.context, self.x * s, self.y * s, self.z * s)

    def add_in_place(self, other: "HPVec3") -> "HPVec3":
        """Accumulate ``other`` into this vector.

        Returns:
            self
        """
        self._check(other)
        self.x += other.x
        self.y += other.y
        self.z += other.z
        return self

    def dot(self, other: "HPVec3"):
        self._check(other)
        return self.x * other.x + self.y * other.y + self.z * other.z

    def magnitude_squared(self):
        return self.x * self.x + self.y * self.y + self.z * self.z

    def magnitude(self):
        return self.context.sqrt(self.magnitude_squared())

    def distance(self, other: "HPVec3"):
        """Euclidean distance at full context precision."""
        return other.sub(self).magnitude()

    def normalize(self) -> "HPVec3":
        """Unit vector in the same direction.

        Raises:
            SingularityError: If the vector has zero magnitude
        """
        mag = self.magnitude()
        if mag == 0:
            raise SingularityError("Cannot normalize a zero-magnitude vector")
        return HPVec3(self.context, self.x / mag, self.y / mag, self.z / mag)

    def is_zero(self) -> bool:
        return self.x == 0 and self.y == 0 and self.z == 0

    def copy(self) -> "HPVec3":
        return HPVec3(self.context, self.x, self.y, self.z)

    def to_render(self) -> np.ndarray:
        """Lossy conversion to a float32 render-space vector of shape (3,).

        Components beyond the float32 range (about 3.4e38) become +/-inf;
        the conversion itself never raises or warns.
        """
        with np.errstate(over="ignore"):
            return np.array([float(self.x), float(self.y), float(self.z)], dtype=RENDER_DTYPE)

    @classmethod
    def from_render(cls, array, context) -> "HPVec3":
        """Import a render-space vector into ``context``.

        Only for tooling and tests; render output never re-enters simulation state.
        """
        values = np.asarray(array, dtype=np.float64).reshape(-1)
        if values.shape[0] != 3:
            raise ValueError(f"Expected 3 components, got {values.shape[0]}")
        return context.vector(float(values[0]), float(values[1]), float(values[2]))

    # Operators
    def __add__(self, other: "HPVec3") -> "HPVec3":
        return self.add(other)

    def __sub__(self, other: "HPVec3") -> "HPVec3":
        return self.sub(other)

    def __mul__(self, scalar) -> "HPVec3":
        return self.scale(scalar)

    __rmul__ = __mul__

    def __neg__(self) -> "HPVec3":
        return HPVec3(self.context, -self.x, -self.y, -self.z)

    def __eq__(self, other) -> bool:
        if not isinstance(other, HPVec3):
            return NotImplemented
        return (
            self.context.bits == other.context.bits
            and self.x == other.x
            and self.y == other.y
            and self.z == other.z
        )

    __hash__ = None

    def __iter__(self):
        return iter((self.x, self.y, self.z))

    def __repr__(self) -> str:
        nstr = self.context.nstr
        return f"HPVec3({nstr(self.x)}, {nstr(self.y)}, {nstr(self.z)}; {self.context.bits} bits)"
