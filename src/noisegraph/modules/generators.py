"""Generator modules: leaves of a noise graph with no source modules."""

import math

from ..interp import make_int32_range
from ..module import NoiseModule
from ..noise import (
    gradient_coherent_noise_3d,
    simplex_style_gradient_coherent_noise_3d,
    value_noise_3d,
)
from ..settings import (
    BillowSettings,
    PerlinSettings,
    RidgedMultiSettings,
    SimplexSettings,
    VoronoiSettings,
)

_SQRT_3 = math.sqrt(3.0)


class Const(NoiseModule):
    """Outputs a constant value everywhere."""

    def __init__(self, value: float = 0.0):
        super().__init__(0)
        self.value = value

    def evaluate(self, x: float, y: float, z: float) -> float:
        return self.value


class Perlin(NoiseModule):
    """Summed octaves of Perlin-style gradient noise.

    Each octave is in [0, 1], so the output lies in
    [0, 1 + p + p^2 + ... + p^(octave_count - 1)] for persistence p.
    """

    def __init__(self, settings: PerlinSettings | None = None):
        super().__init__(0)
        self.settings = settings if settings is not None else PerlinSettings()

    def evaluate(self, x: float, y: float, z: float) -> float:
        s = self.settings
        value = 0.0
        cur_persistence = 1.0

        x *= s.frequency
        y *= s.frequency
        z *= s.frequency

        for octave in range(s.octave_count):
            nx = make_int32_range(x)
            ny = make_int32_range(y)
            nz = make_int32_range(z)

            signal = gradient_coherent_noise_3d(nx, ny, nz, s.seed + octave, s.quality)
            value += signal * cur_persistence

            x *= s.lacunarity
            y *= s.lacunarity
            z *= s.lacunarity
            cur_persistence *= s.persistence

        return value


class Billow(NoiseModule):
    """Perlin-style octaves folded about their midpoint.

    Each octave contributes |2n - 1| for kernel output n, which gives
    rounded, cloud-like lumps instead of smooth hills.
    """

    def __init__(self, settings: BillowSettings | None = None):
        super().__init__(0)
        self.settings = settings if settings is not None else BillowSettings()

    def evaluate(self, x: float, y: float, z: float) -> float:
        s = self.settings
        value = 0.0
        cur_persistence = 1.0

        x *= s.frequency
        y *= s.frequency
        z *= s.frequency

        for octave in range(s.octave_count):
            nx = make_int32_range(x)
            ny = make_int32_range(y)
            nz = make_int32_range(z)

            signal = gradient_coherent_noise_3d(nx, ny, nz, s.seed + octave, s.quality)
            value += abs(2.0 * signal - 1.0) * cur_persistence

            x *= s.lacunarity
            y *= s.lacunarity
            z *= s.lacunarity
            cur_persistence *= s.persistence

        return value


class Simplex(NoiseModule):
    """Summed octaves of simplex-style gradient noise."""

    def __init__(self, settings: SimplexSettings | None = None):
        super().__init__(0)
        self.settings = settings if settings is not None else SimplexSettings()

    @property
    def max_value(self) -> float:
        """Theoretical ceiling of the output for the current settings.

        Octave i adds at most persistence^i, so the ceiling is the geometric
        series (p^o - 1) / (p - 1); for p == 1 it is the octave count.
        """
        p = self.settings.persistence
        o = self.settings.octave_count
        if p == 1.0:
            return float(o)
        return (math.pow(p, o) - 1) / (p - 1)

    def evaluate(self, x: float, y: float, z: float) -> float:
        s = self.settings
        value = 0.0
        cur_persistence = 1.0

        x *= s.frequency
        y *= s.frequency
        z *= s.frequency

        for octave in range(s.octave_count):
            nx = make_int32_range(x)
            ny = make_int32_range(y)
            nz = make_int32_range(z)

            signal = simplex_style_gradient_coherent_noise_3d(
                nx, ny, nz, s.seed + octave, s.orientation, s.quality
            )
            value += signal * cur_persistence

            x *= s.lacunarity
            y *= s.lacunarity
            z *= s.lacunarity
            cur_persistence *= s.persistence

        return value


class RidgedMulti(NoiseModule):
    """Ridged multifractal noise, suited to mountain ranges.

    Each octave uses 1 - |2n - 1| squared, weighted by the previous octave's
    signal so that detail gathers along the ridges. Octave i is scaled by the
    spectral weight lacunarity^-i. Output is roughly in [-1, 1].
    """

    _OFFSET = 1.0
    _GAIN = 2.0

    def __init__(self, settings: RidgedMultiSettings | None = None):
        super().__init__(0)
        self.settings = settings if settings is not None else RidgedMultiSettings()

    def evaluate(self, x: float, y: float, z: float) -> float:
        s = self.settings
        value = 0.0
        weight = 1.0
        spectral_weight = 1.0

        x *= s.frequency
        y *= s.frequency
        z *= s.frequency

        for octave in range(s.octave_count):
            nx = make_int32_range(x)
            ny = make_int32_range(y)
            nz = make_int32_range(z)

            signal = gradient_coherent_noise_3d(nx, ny, nz, s.seed + octave, s.quality)
            signal = self._OFFSET - abs(2.0 * signal - 1.0)
            signal *= signal
            signal *= weight

            weight = min(max(signal * self._GAIN, 0.0), 1.0)

            value += signal * spectral_weight

            x *= s.lacunarity
            y *= s.lacunarity
            z *= s.lacunarity
            spectral_weight /= s.lacunarity

        return (value * 1.25) - 1.0


class Voronoi(NoiseModule):
    """Voronoi cells with a pseudo-random value per cell.

    Cell points are jittered inside their unit cubes using value noise.
    The output is displacement times a value in [0, 1] chosen by the
    nearest cell point; with enable_distance the scaled distance to that
    point is added, so cell borders stand out.
    """

    def __init__(self, settings: VoronoiSettings | None = None):
        super().__init__(0)
        self.settings = settings if settings is not None else VoronoiSettings()

    def evaluate(self, x: float, y: float, z: float) -> float:
        s = self.settings
        seed = s.seed

        x *= s.frequency
        y *= s.frequency
        z *= s.frequency

        x_int = int(x) if x > 0.0 else int(x) - 1
        y_int = int(y) if y > 0.0 else int(y) - 1
        z_int = int(z) if z > 0.0 else int(z) - 1

        min_dist = 2147483647.0
        x_candidate = y_candidate = z_candidate = 0.0

        # The nearest cell point can be up to two cells away.
        for z_cur in range(z_int - 2, z_int + 3):
            for y_cur in range(y_int - 2, y_int + 3):
                for x_cur in range(x_int - 2, x_int + 3):
                    x_pos = x_cur + value_noise_3d(x_cur, y_cur, z_cur, seed)
                    y_pos = y_cur + value_noise_3d(x_cur, y_cur, z_cur, seed + 1)
                    z_pos = z_cur + value_noise_3d(x_cur, y_cur, z_cur, seed + 2)
                    x_dist = x_pos - x
                    y_dist = y_pos - y
                    z_dist = z_pos - z
                    dist = x_dist * x_dist + y_dist * y_dist + z_dist * z_dist

                    if dist < min_dist:
                        min_dist = dist
                        x_candidate = x_pos
                        y_candidate = y_pos
                        z_candidate = z_pos

        if s.enable_distance:
            x_dist = x_candidate - x
            y_dist = y_candidate - y
            z_dist = z_candidate - z
            value = math.sqrt(x_dist * x_dist + y_dist * y_dist + z_dist * z_dist) * _SQRT_3 - 1.0
        else:
            value = 0.0

        return value + s.displacement * value_noise_3d(
            math.floor(x_candidate),
            math.floor(y_candidate),
            math.floor(z_candidate),
            0,
        )


class Checkerboard(NoiseModule):
    """Alternating unit cubes of -1 and +1."""

    def __init__(self):
        super().__init__(0)

    def evaluate(self, x: float, y: float, z: float) -> float:
        ix = math.floor(make_int32_range(x))
        iy = math.floor(make_int32_range(y))
        iz = math.floor(make_int32_range(z))
        return -1.0 if (ix & 1) ^ (iy & 1) ^ (iz & 1) else 1.0
