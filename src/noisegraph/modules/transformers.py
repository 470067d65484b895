"""Transformer modules: change the input coordinates before sampling a source.

The source's output value is returned unchanged.
"""

import math

from ..module import NoiseModule


class ScalePoint(NoiseModule):
    """Multiplies each input coordinate by a per-axis factor."""

    def __init__(self, x_scale: float = 1.0, y_scale: float = 1.0, z_scale: float = 1.0):
        super().__init__(1)
        self.x_scale = x_scale
        self.y_scale = y_scale
        self.z_scale = z_scale

    def set_scale(self, scale: float) -> None:
        """Use the same factor on all three axes."""
        self.x_scale = self.y_scale = self.z_scale = scale

    def evaluate(self, x: float, y: float, z: float) -> float:
        return self.source(0).evaluate(x * self.x_scale, y * self.y_scale, z * self.z_scale)


class TranslatePoint(NoiseModule):
    """Offsets the input coordinates."""

    def __init__(self, x_translation: float = 0.0, y_translation: float = 0.0, z_translation: float = 0.0):
        super().__init__(1)
        self.x_translation = x_translation
        self.y_translation = y_translation
        self.z_translation = z_translation

    def evaluate(self, x: float, y: float, z: float) -> float:
        return self.source(0).evaluate(
            x + self.x_translation,
            y + self.y_translation,
            z + self.z_translation,
        )


class RotatePoint(NoiseModule):
    """Rotates the input coordinates around the origin.

    Angles are in degrees. The rotation matrix is rebuilt whenever the
    angles change, not on every evaluation.
    """

    def __init__(self, x_angle: float = 0.0, y_angle: float = 0.0, z_angle: float = 0.0):
        super().__init__(1)
        self.set_angles(x_angle, y_angle, z_angle)

    @property
    def angles(self) -> tuple[float, float, float]:
        """Rotation around the x, y and z axes in degrees."""
        return self._angles

    def set_angles(self, x_angle: float, y_angle: float, z_angle: float) -> None:
        x_cos = math.cos(math.radians(x_angle))
        y_cos = math.cos(math.radians(y_angle))
        z_cos = math.cos(math.radians(z_angle))
        x_sin = math.sin(math.radians(x_angle))
        y_sin = math.sin(math.radians(y_angle))
        z_sin = math.sin(math.radians(z_angle))

        self._matrix = (
            (
                y_sin * x_sin * z_sin + y_cos * z_cos,
                x_cos * z_sin,
                y_sin * z_cos - y_cos * x_sin * z_sin,
            ),
            (
                y_sin * x_sin * z_cos - y_cos * z_sin,
                x_cos * z_cos,
                -y_cos * x_sin * z_cos - y_sin * z_sin,
            ),
            (
                -y_sin * x_cos,
                x_sin,
                y_cos * x_cos,
            ),
        )
        self._angles = (x_angle, y_angle, z_angle)

    def evaluate(self, x: float, y: float, z: float) -> float:
        (x1, y1, z1), (x2, y2, z2), (x3, y3, z3) = self._matrix
        nx = x1 * x + y1 * y + z1 * z
        ny = x2 * x + y2 * y + z2 * z
        nz = x3 * x + y3 * y + z3 * z
        return self.source(0).evaluate(nx, ny, nz)
