"""Pairwise Newtonian gravity over a body arena.

Each unordered pair is evaluated exactly once per step (O(n^2) total work).
Per-pair contributions are parked in a slot keyed by partner index and summed
in ascending partner order afterwards, so the accumulated accelerations do not
depend on the order in which pairs were enumerated.
"""

from itertools import combinations
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

from solar_sim.errors import SingularityError
from solar_sim.physics.body import Body, BodyArena

# CODATA 2018, m^3 kg^-1 s^-2
G_SI = "6.67430e-11"


def pair_indices(n: int) -> Iterator[Tuple[int, int]]:
    """All unordered index pairs (i, j) with i < j."""
    return combinations(range(n), 2)


def _validate_pairs(pairs: Iterable[Tuple[int, int]], n: int) -> List[Tuple[int, int]]:
    """Canonicalize an explicit pair ordering and check it covers each pair once."""
    canonical = []
    for i, j in pairs:
        i, j = int(i), int(j)
        if i == j or not (0 <= i < n and 0 <= j < n):
            raise ValueError(f"Invalid pair ({i}, {j}) for {n} bodies")
        canonical.append((i, j) if i < j else (j, i))
    expected = n * (n - 1) // 2
    if len(canonical) != expected or len(set(canonical)) != expected:
        raise ValueError(
            f"Pair ordering must cover all {expected} pairs exactly once, got {len(canonical)} "
            f"({len(set(canonical))} distinct)"
        )
    return canonical


class GravitySolver:
    """Accumulates gravitational accelerations for every body pair."""

    def __init__(self, context, G=G_SI):
        """Initialize solver.

        Args:
            context: PrecisionContext for all scalars
            G: Gravitational constant (str, number or context scalar)
        """
        self.context = context
        self.G = context.mpf(G)

    def pair_acceleration(self, a: Body, b: Body) -> Tuple:
        """Gravitational interaction of one pair.

        Args:
            a: First body
            b: Second body

        Returns:
            Tuple of (force_magnitude, acc_a, acc_b) where acc_a points from a
            towards b and acc_b from b towards a

        Raises:
            SingularityError: If the bodies are co-located
        """
        r = a.position.distance(b.position)
        if r == 0:
            raise SingularityError(
                f"Bodies {a.body_id!r} and {b.body_id!r} occupy the same position"
            )
        u_ab = b.position.sub(a.position).normalize()
        u_ba = a.position.sub(b.position).normalize()

        force = self.G * a.mass * b.mass / (r * r)
        acc_a = force / a.mass
        acc_b = force / b.mass
        return force, u_ab.scale(acc_a), u_ba.scale(acc_b)

    def compute(
        self,
        arena: BodyArena,
        pairs: Optional[Sequence[Tuple[int, int]]] = None,
    ) -> List:
        """Sum this step's pairwise accelerations for every body.

        Args:
            arena: Bodies to evaluate
            pairs: Optional explicit pair ordering; must cover every pair once

        Returns:
            List of HPVec3 indexed like the arena
        """
        n = len(arena)
        if pairs is None:
            ordered = pair_indices(n)
        else:
            ordered = _validate_pairs(pairs, n)

        slots = [[None] * n for _ in range(n)]
        for i, j in ordered:
            _, acc_i, acc_j = self.pair_acceleration(arena[i], arena[j])
            slots[i][j] = acc_i
            slots[j][i] = acc_j

        totals = []
        for i in range(n):
            row = [slot for slot in slots[i] if slot is not None]
            totals.append(self.context.vector(
                self.context.fsum(v.x for v in row),
                self.context.fsum(v.y for v in row),
                self.context.fsum(v.z for v in row),
            ))
        return totals

    def accumulate(
        self,
        arena: BodyArena,
        dt=None,
        pairs: Optional[Sequence[Tuple[int, int]]] = None,
    ) -> None:
        """Fold this step's accelerations into every body's running field.

        Each body's ``acceleration`` receives exactly one ``add_in_place``.

        Args:
            arena: Bodies to update
            dt: Optional step length scaling the contribution
            pairs: Optional explicit pair ordering
        """
        totals = self.compute(arena, pairs)
        for body, total in zip(arena, totals):
            if dt is not None and dt != 1:
                total = total.scale(dt)
            body.acceleration.add_in_place(total)
