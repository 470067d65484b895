"""Configuration enums consumed by the noise kernels."""

from enum import Enum


class NoiseQuality(str, Enum):
    """Interpolation order for the cubic-lattice coherent noise kernels."""

    FAST = "fast"
    STANDARD = "standard"
    BEST = "best"


class SimplexQuality(str, Enum):
    """Lattice constants for the simplex-style kernel.

    SMOOTH uses a larger kernel radius and visits more candidate lattice
    points per cell than STANDARD.
    """

    STANDARD = "standard"
    SMOOTH = "smooth"


class LatticeOrientation(str, Enum):
    """Rotation applied to input coordinates before simplex-style lookup.

    CLASSIC rotates toward the main diagonal. XY_BEFORE_Z and XZ_BEFORE_Y
    keep one axis (z and y respectively) unskewed, which suits fields where
    that axis means "up", e.g. terrain height.
    """

    CLASSIC = "classic"
    XY_BEFORE_Z = "xy_before_z"
    XZ_BEFORE_Y = "xz_before_y"
