"""Lattice point tables for the simplex-style kernel.

The kernel evaluates points from two interleaved cubic lattices (together a
body-centered-cubic lattice). For each octant of the base cell there is a
chain of candidate points; a point outside the kernel radius is skipped via
its ``next_on_failure`` link, and a point inside it contributes and then
follows ``next_on_success``, which also rules out points that cannot be in
range once it is. A ``None`` link ends the walk.

Tables are built once at import and never modified afterwards.
"""

from dataclasses import dataclass

from .types import SimplexQuality
from .vectors import GRADIENT_VECTORS

# Integer offset that gives second half-lattice points distinct hashes.
_HALF_LATTICE_OFFSET = 1024

# Scales a unit gradient so that the summed contributions stay within
# roughly +/-0.5 for the given kernel radius.
_STANDARD_GRADIENT_SCALE = 54.0
_SMOOTH_GRADIENT_SCALE = 5.8


class LatticePoint:
    """One candidate lattice point relative to the base cell."""

    __slots__ = (
        "dxr",
        "dyr",
        "dzr",
        "xrv",
        "yrv",
        "zrv",
        "next_on_failure",
        "next_on_success",
    )

    def __init__(self, xrv: int, yrv: int, zrv: int, lattice: int):
        self.dxr = -xrv + lattice * 0.5
        self.dyr = -yrv + lattice * 0.5
        self.dzr = -zrv + lattice * 0.5
        self.xrv = xrv + lattice * _HALF_LATTICE_OFFSET
        self.yrv = yrv + lattice * _HALF_LATTICE_OFFSET
        self.zrv = zrv + lattice * _HALF_LATTICE_OFFSET
        self.next_on_failure: LatticePoint | None = None
        self.next_on_success: LatticePoint | None = None

    def link(
        self,
        on_failure: "LatticePoint | None",
        on_success: "LatticePoint | None",
    ) -> None:
        self.next_on_failure = on_failure
        self.next_on_success = on_success

    def __repr__(self) -> str:
        return f"LatticePoint(dxr={self.dxr}, dyr={self.dyr}, dzr={self.dzr})"


def _build_standard_lookup() -> tuple[LatticePoint, ...]:
    """Octant chains for radius^2 = 0.5 (up to 8 candidates)."""
    lookup = []
    for i in range(8):
        i1, j1, k1 = i & 1, (i >> 1) & 1, (i >> 2) & 1
        i2, j2, k2 = i1 ^ 1, j1 ^ 1, k1 ^ 1

        # The two points within this octant, one from each half-lattice.
        c0 = LatticePoint(i1, j1, k1, 0)
        c1 = LatticePoint(i1 + i2, j1 + j2, k1 + k2, 1)

        # Single steps away on the first half-lattice.
        c2 = LatticePoint(i1 ^ 1, j1, k1, 0)
        c3 = LatticePoint(i1, j1 ^ 1, k1, 0)
        c4 = LatticePoint(i1, j1, k1 ^ 1, 0)

        # Single steps away on the second half-lattice.
        c5 = LatticePoint(i1 + (i2 ^ 1), j1 + j2, k1 + k2, 1)
        c6 = LatticePoint(i1 + i2, j1 + (j2 ^ 1), k1 + k2, 1)
        c7 = LatticePoint(i1 + i2, j1 + j2, k1 + (k2 ^ 1), 1)

        c0.link(c1, c1)
        c1.link(c2, c2)

        # One hit on the first half-lattice excludes the rest of it;
        # a hit on c2 also excludes c5.
        c2.link(c3, c6)
        c3.link(c4, c5)
        c4.link(c5, c5)

        # Likewise for the second half-lattice.
        c5.link(c6, None)
        c6.link(c7, None)
        c7.link(None, None)

        lookup.append(c0)
    return tuple(lookup)


def _build_smooth_lookup() -> tuple[LatticePoint, ...]:
    """Octant chains for radius^2 = 0.75 (up to 14 candidates)."""
    lookup = []
    for i in range(8):
        i1, j1, k1 = i & 1, (i >> 1) & 1, (i >> 2) & 1
        i2, j2, k2 = i1 ^ 1, j1 ^ 1, k1 ^ 1

        c0 = LatticePoint(i1, j1, k1, 0)
        c1 = LatticePoint(i1 + i2, j1 + j2, k1 + k2, 1)

        # (1, 0, 0) vs (0, 1, 1) away from the octant, on each half-lattice.
        c2 = LatticePoint(i1 ^ 1, j1, k1, 0)
        c3 = LatticePoint(i1, j1 ^ 1, k1 ^ 1, 0)
        c4 = LatticePoint(i1 + (i2 ^ 1), j1 + j2, k1 + k2, 1)
        c5 = LatticePoint(i1 + i2, j1 + (j2 ^ 1), k1 + (k2 ^ 1), 1)

        # (0, 1, 0) vs (1, 0, 1)
        c6 = LatticePoint(i1, j1 ^ 1, k1, 0)
        c7 = LatticePoint(i1 ^ 1, j1, k1 ^ 1, 0)
        c8 = LatticePoint(i1 + i2, j1 + (j2 ^ 1), k1 + k2, 1)
        c9 = LatticePoint(i1 + (i2 ^ 1), j1 + j2, k1 + (k2 ^ 1), 1)

        # (0, 0, 1) vs (1, 1, 0)
        ca = LatticePoint(i1, j1, k1 ^ 1, 0)
        cb = LatticePoint(i1 ^ 1, j1 ^ 1, k1, 0)
        cc = LatticePoint(i1 + i2, j1 + j2, k1 + (k2 ^ 1), 1)
        cd = LatticePoint(i1 + (i2 ^ 1), j1 + (j2 ^ 1), k1 + k2, 1)

        c0.link(c1, c1)
        c1.link(c2, c2)

        # Within each pair, a hit on the single step excludes the opposite
        # double step.
        c2.link(c3, c5)
        c3.link(c4, c4)
        c4.link(c5, c6)
        c5.link(c6, c6)

        c6.link(c7, c9)
        c7.link(c8, c8)
        c8.link(c9, ca)
        c9.link(ca, ca)

        ca.link(cb, cd)
        cb.link(cc, cc)
        cc.link(cd, None)
        cd.link(None, None)

        lookup.append(c0)
    return tuple(lookup)


def _scaled_vectors(scale: float) -> tuple[tuple[float, float, float], ...]:
    return tuple((x * scale, y * scale, z * scale) for x, y, z in GRADIENT_VECTORS)


@dataclass(frozen=True)
class SimplexKernel:
    """Constants for one simplex-style quality level."""

    squared_radius: float
    random_vectors: tuple[tuple[float, float, float], ...]
    lookup: tuple[LatticePoint, ...]


SIMPLEX_KERNELS: dict[SimplexQuality, SimplexKernel] = {
    SimplexQuality.STANDARD: SimplexKernel(
        squared_radius=0.5,
        random_vectors=_scaled_vectors(_STANDARD_GRADIENT_SCALE),
        lookup=_build_standard_lookup(),
    ),
    SimplexQuality.SMOOTH: SimplexKernel(
        squared_radius=0.75,
        random_vectors=_scaled_vectors(_SMOOTH_GRADIENT_SCALE),
        lookup=_build_smooth_lookup(),
    ),
}


def iter_chain(start: LatticePoint) -> list[LatticePoint]:
    """All distinct points reachable from an octant's first point."""
    seen: list[LatticePoint] = []
    pending = [start]
    while pending:
        point = pending.pop()
        if any(point is p for p in seen):
            continue
        seen.append(point)
        for nxt in (point.next_on_failure, point.next_on_success):
            if nxt is not None:
                pending.append(nxt)
    return seen
