"""Coherent-noise kernels.

Provides integer hash noise, value noise, gradient (Perlin-style) noise and
simplex-style gradient noise over three-dimensional input. Every function is
a pure function of its arguments and the constant tables, so identical input
always produces identical output.

Integer arithmetic is done on Python ints and masked, which yields the same
low bits as 32-bit wrapping arithmetic.
"""

import math

from .interp import linear_interp, s_curve3, s_curve5
from .lattice import SIMPLEX_KERNELS
from .types import LatticeOrientation, NoiseQuality, SimplexQuality
from .vectors import GRADIENT_VECTORS

# These must remain prime for the hash to spread well.
X_NOISE_GEN = 1619
Y_NOISE_GEN = 31337
Z_NOISE_GEN = 6971
SEED_NOISE_GEN = 1013
SHIFT_NOISE_GEN = 8

# Orthonormal rotation constants for the axis-preserving orientations.
_SKEW = -0.211324865405187
_ROOT3_INV = 0.577350269189626

# Trilinear gradient noise with unit gradients is bounded by sqrt(3)/2, so
# scaling by 1/sqrt(3) keeps the blended result within 0.5 +/- 0.5.
_PERLIN_GRADIENT_SCALE = 1.0 / math.sqrt(3.0)

PERLIN_VECTORS: tuple[tuple[float, float, float], ...] = tuple(
    (x * _PERLIN_GRADIENT_SCALE, y * _PERLIN_GRADIENT_SCALE, z * _PERLIN_GRADIENT_SCALE)
    for x, y, z in GRADIENT_VECTORS
)


def _lattice_floor(v: float) -> int:
    return int(v) if v > 0.0 else int(v) - 1


def _interpolant(t: float, quality: NoiseQuality) -> float:
    if quality == NoiseQuality.FAST:
        return t
    if quality == NoiseQuality.STANDARD:
        return s_curve3(t)
    return s_curve5(t)


def _vector_index(ix: int, iy: int, iz: int, seed: int) -> int:
    n = X_NOISE_GEN * ix + Y_NOISE_GEN * iy + Z_NOISE_GEN * iz + SEED_NOISE_GEN * seed
    n ^= n >> SHIFT_NOISE_GEN
    return n & 0xFF


def int_value_noise_3d(x: int, y: int, z: int, seed: int) -> int:
    """Integer noise for a lattice point.

    Args:
        x: Integer x coordinate.
        y: Integer y coordinate.
        z: Integer z coordinate.
        seed: Random seed.

    Returns:
        Value in [0, 2147483647].
    """
    n = (X_NOISE_GEN * x + Y_NOISE_GEN * y + Z_NOISE_GEN * z + SEED_NOISE_GEN * seed) & 0x7FFFFFFF
    n = (n >> 13) ^ n
    return (n * (n * n * 60493 + 19990303) + 1376312589) & 0x7FFFFFFF


def value_noise_3d(x: int, y: int, z: int, seed: int) -> float:
    """Integer noise for a lattice point normalized to [0, 1]."""
    return int_value_noise_3d(x, y, z, seed) / 2147483647.0


def gradient_noise_3d(
    fx: float,
    fy: float,
    fz: float,
    ix: int,
    iy: int,
    iz: int,
    seed: int,
) -> float:
    """Gradient noise contributed by one lattice vertex.

    Picks a pseudo-random unit gradient for the vertex (ix, iy, iz) and
    returns its dot product with the offset from the vertex to the input
    point, shifted by 0.5. Each of |fx - ix|, |fy - iy|, |fz - iz| must be
    at most 1; this is not checked.

    Returns:
        Value in roughly [0, 1].
    """
    xv_gradient, yv_gradient, zv_gradient = PERLIN_VECTORS[_vector_index(ix, iy, iz, seed)]

    xv_point = fx - ix
    yv_point = fy - iy
    zv_point = fz - iz

    return (xv_gradient * xv_point + yv_gradient * yv_point + zv_gradient * zv_point) + 0.5


def gradient_coherent_noise_3d(
    x: float,
    y: float,
    z: float,
    seed: int,
    quality: NoiseQuality = NoiseQuality.STANDARD,
) -> float:
    """Perlin-style gradient coherent noise.

    Evaluates gradient noise at the eight vertices of the unit cube around
    the point and blends them with trilinear interpolation, shaping the
    weights with the S-curve selected by quality.

    Args:
        x: X coordinate.
        y: Y coordinate.
        z: Z coordinate.
        seed: Random seed.
        quality: Interpolation quality.

    Returns:
        Value in [0, 1].
    """
    x0 = _lattice_floor(x)
    x1 = x0 + 1
    y0 = _lattice_floor(y)
    y1 = y0 + 1
    z0 = _lattice_floor(z)
    z1 = z0 + 1

    xs = _interpolant(x - x0, quality)
    ys = _interpolant(y - y0, quality)
    zs = _interpolant(z - z0, quality)

    n0 = gradient_noise_3d(x, y, z, x0, y0, z0, seed)
    n1 = gradient_noise_3d(x, y, z, x1, y0, z0, seed)
    ix0 = linear_interp(n0, n1, xs)
    n0 = gradient_noise_3d(x, y, z, x0, y1, z0, seed)
    n1 = gradient_noise_3d(x, y, z, x1, y1, z0, seed)
    ix1 = linear_interp(n0, n1, xs)
    iy0 = linear_interp(ix0, ix1, ys)

    n0 = gradient_noise_3d(x, y, z, x0, y0, z1, seed)
    n1 = gradient_noise_3d(x, y, z, x1, y0, z1, seed)
    ix0 = linear_interp(n0, n1, xs)
    n0 = gradient_noise_3d(x, y, z, x0, y1, z1, seed)
    n1 = gradient_noise_3d(x, y, z, x1, y1, z1, seed)
    ix1 = linear_interp(n0, n1, xs)
    iy1 = linear_interp(ix0, ix1, ys)

    return linear_interp(iy0, iy1, zs)


def value_coherent_noise_3d(
    x: float,
    y: float,
    z: float,
    seed: int,
    quality: NoiseQuality = NoiseQuality.STANDARD,
) -> float:
    """Value coherent noise: interpolated lattice values, in [0, 1]."""
    x0 = _lattice_floor(x)
    x1 = x0 + 1
    y0 = _lattice_floor(y)
    y1 = y0 + 1
    z0 = _lattice_floor(z)
    z1 = z0 + 1

    xs = _interpolant(x - x0, quality)
    ys = _interpolant(y - y0, quality)
    zs = _interpolant(z - z0, quality)

    ix0 = linear_interp(value_noise_3d(x0, y0, z0, seed), value_noise_3d(x1, y0, z0, seed), xs)
    ix1 = linear_interp(value_noise_3d(x0, y1, z0, seed), value_noise_3d(x1, y1, z0, seed), xs)
    iy0 = linear_interp(ix0, ix1, ys)

    ix0 = linear_interp(value_noise_3d(x0, y0, z1, seed), value_noise_3d(x1, y0, z1, seed), xs)
    ix1 = linear_interp(value_noise_3d(x0, y1, z1, seed), value_noise_3d(x1, y1, z1, seed), xs)
    iy1 = linear_interp(ix0, ix1, ys)

    return linear_interp(iy0, iy1, zs)


def simplex_style_gradient_coherent_noise_3d(
    x: float,
    y: float,
    z: float,
    seed: int,
    orientation: LatticeOrientation = LatticeOrientation.XZ_BEFORE_Y,
    quality: SimplexQuality = SimplexQuality.STANDARD,
) -> float:
    """Simplex-style gradient coherent noise on a rotated BCC lattice.

    Args:
        x: X coordinate.
        y: Y coordinate.
        z: Z coordinate.
        seed: Random seed.
        orientation: Rotation applied before lattice lookup.
        quality: Kernel radius and candidate table.

    Returns:
        Value in approximately [0, 1], centered on 0.5.
    """
    kernel = SIMPLEX_KERNELS[quality]
    squared_radius = kernel.squared_radius
    random_vectors = kernel.random_vectors

    if orientation == LatticeOrientation.CLASSIC:
        r = (2.0 / 3.0) * (x + y + z)
        xr = r - x
        yr = r - y
        zr = r - z
    elif orientation == LatticeOrientation.XY_BEFORE_Z:
        xy = x + y
        s2 = xy * _SKEW
        zz = z * _ROOT3_INV
        xr = x + s2 - zz
        yr = y + s2 - zz
        zr = xy * _ROOT3_INV + zz
    else:
        xz = x + z
        s2 = xz * _SKEW
        yy = y * _ROOT3_INV
        xr = x + s2 - yy
        zr = z + s2 - yy
        yr = xz * _ROOT3_INV + yy

    # Base cell of the first lattice and the offset inside it.
    xrb = _lattice_floor(xr)
    yrb = _lattice_floor(yr)
    zrb = _lattice_floor(zr)
    xri = xr - xrb
    yri = yr - yrb
    zri = zr - zrb

    # The octant picks the cell in the second lattice and the first candidate.
    index = int(xri + 0.5) | (int(yri + 0.5) << 1) | (int(zri + 0.5) << 2)

    value = 0.5
    point = kernel.lookup[index]
    while point is not None:
        dxr = xri + point.dxr
        dyr = yri + point.dyr
        dzr = zri + point.dzr
        attn = squared_radius - dxr * dxr - dyr * dyr - dzr * dzr
        if attn < 0:
            point = point.next_on_failure
            continue

        gx, gy, gz = random_vectors[
            _vector_index(xrb + point.xrv, yrb + point.yrv, zrb + point.zrv, seed)
        ]
        ramped = gx * dxr + gy * dyr + gz * dzr

        attn *= attn
        value += attn * attn * ramped
        point = point.next_on_success

    return value
