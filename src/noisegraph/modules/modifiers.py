"""Modifier modules: transform the output value of a single source."""

import bisect
import math
from typing import NamedTuple

from ..exceptions import InvalidConfigurationError
from ..interp import cubic_interp
from ..module import NoiseModule


class ScaleBias(NoiseModule):
    """Applies value * scale + bias to the source output.

    The defaults (scale 1, bias 0) pass the source value through unchanged.
    """

    DEFAULT_SCALE = 1.0
    DEFAULT_BIAS = 0.0

    def __init__(self, scale: float = DEFAULT_SCALE, bias: float = DEFAULT_BIAS):
        super().__init__(1)
        self.scale = scale
        self.bias = bias

    def evaluate(self, x: float, y: float, z: float) -> float:
        return self.source(0).evaluate(x, y, z) * self.scale + self.bias


class Invert(NoiseModule):
    """Negates the source output."""

    def __init__(self):
        super().__init__(1)

    def evaluate(self, x: float, y: float, z: float) -> float:
        return -self.source(0).evaluate(x, y, z)


class Abs(NoiseModule):
    """Absolute value of the source output."""

    def __init__(self):
        super().__init__(1)

    def evaluate(self, x: float, y: float, z: float) -> float:
        return abs(self.source(0).evaluate(x, y, z))


class Clamp(NoiseModule):
    """Clamps the source output into [lower_bound, upper_bound]."""

    def __init__(self, lower_bound: float = 0.0, upper_bound: float = 1.0):
        super().__init__(1)
        self.set_bounds(lower_bound, upper_bound)

    @property
    def lower_bound(self) -> float:
        return self._lower_bound

    @property
    def upper_bound(self) -> float:
        return self._upper_bound

    def set_bounds(self, lower_bound: float, upper_bound: float) -> None:
        """Set both bounds.

        Raises:
            InvalidConfigurationError: If lower_bound > upper_bound.
        """
        if lower_bound > upper_bound:
            raise InvalidConfigurationError(
                f"lower_bound {lower_bound} must not exceed upper_bound {upper_bound}"
            )
        self._lower_bound = lower_bound
        self._upper_bound = upper_bound

    def evaluate(self, x: float, y: float, z: float) -> float:
        value = self.source(0).evaluate(x, y, z)
        if value < self._lower_bound:
            return self._lower_bound
        if value > self._upper_bound:
            return self._upper_bound
        return value


class Exponent(NoiseModule):
    """Applies an exponential curve to the source output.

    The source value is treated as lying in [-1, 1]: it is mapped to [0, 1],
    raised to the exponent and mapped back, so the ends of the range stay
    fixed while the middle is pulled down (exponent > 1) or pushed up
    (exponent < 1).
    """

    def __init__(self, exponent: float = 1.0):
        super().__init__(1)
        self.exponent = exponent

    @property
    def exponent(self) -> float:
        return self._exponent

    @exponent.setter
    def exponent(self, exponent: float) -> None:
        if exponent <= 0.0:
            raise InvalidConfigurationError(f"exponent must be > 0, got {exponent}")
        self._exponent = exponent

    def evaluate(self, x: float, y: float, z: float) -> float:
        value = self.source(0).evaluate(x, y, z)
        return math.pow(abs((value + 1.0) / 2.0), self._exponent) * 2.0 - 1.0


class ControlPoint(NamedTuple):
    """A mapping from a source value to an output value on a Curve."""

    input_value: float
    output_value: float


class Curve(NoiseModule):
    """Maps the source output onto a cubic spline through control points.

    At least four control points are needed before evaluation. Source values
    outside the range of control point inputs are clamped to the end points.
    """

    MIN_CONTROL_POINTS = 4

    def __init__(self, control_points: list[tuple[float, float]] | None = None):
        super().__init__(1)
        self._control_points: list[ControlPoint] = []
        for input_value, output_value in control_points or []:
            self.add_control_point(input_value, output_value)

    @property
    def control_points(self) -> tuple[ControlPoint, ...]:
        """Control points sorted by input value."""
        return tuple(self._control_points)

    def add_control_point(self, input_value: float, output_value: float) -> None:
        """Add a control point, keeping the points sorted by input value.

        Raises:
            InvalidConfigurationError: If a point with this input already exists.
        """
        inputs = [cp.input_value for cp in self._control_points]
        pos = bisect.bisect_left(inputs, input_value)
        if pos < len(inputs) and inputs[pos] == input_value:
            raise InvalidConfigurationError(
                f"Curve already has a control point at input {input_value}"
            )
        self._control_points.insert(pos, ControlPoint(input_value, output_value))

    def clear_control_points(self) -> None:
        self._control_points.clear()

    def evaluate(self, x: float, y: float, z: float) -> float:
        """Map the source output through the spline.

        Raises:
            MissingSourceError: If the source module is not connected.
            InvalidConfigurationError: If fewer than four control points have
                been added.
        """
        source = self.source(0)
        points = self._control_points
        count = len(points)
        if count < self.MIN_CONTROL_POINTS:
            raise InvalidConfigurationError(
                f"Curve needs at least {self.MIN_CONTROL_POINTS} control points, has {count}"
            )

        source_value = source.evaluate(x, y, z)

        # First control point whose input exceeds the source value.
        index_pos = 0
        while index_pos < count and source_value >= points[index_pos].input_value:
            index_pos += 1

        last = count - 1
        index0 = min(max(index_pos - 2, 0), last)
        index1 = min(max(index_pos - 1, 0), last)
        index2 = min(max(index_pos, 0), last)
        index3 = min(max(index_pos + 1, 0), last)

        # Outside the control range both neighbours collapse to the end point.
        if index1 == index2:
            return points[index1].output_value

        input0 = points[index1].input_value
        input1 = points[index2].input_value
        alpha = (source_value - input0) / (input1 - input0)

        return cubic_interp(
            points[index0].output_value,
            points[index1].output_value,
            points[index2].output_value,
            points[index3].output_value,
            alpha,
        )
