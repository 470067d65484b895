"""Selector modules: a control module decides how two sources combine.

Slot 0 and slot 1 hold the sources; slot 2 always holds the control module.
"""

from ..exceptions import InvalidConfigurationError
from ..interp import clamp, linear_interp, s_curve3
from ..module import NoiseModule

CONTROL_INDEX = 2


class Blend(NoiseModule):
    """Interpolates between source 0 and source 1.

    The control output is clamped to [0, 1] and shaped with the cubic
    S-curve: a control of 0 gives source 0, 1 gives source 1.
    """

    def __init__(self):
        super().__init__(3)

    def evaluate(self, x: float, y: float, z: float) -> float:
        v0 = self.source(0).evaluate(x, y, z)
        v1 = self.source(1).evaluate(x, y, z)
        control = self.source(CONTROL_INDEX).evaluate(x, y, z)
        alpha = s_curve3(clamp(control, 0.0, 1.0))
        return linear_interp(v0, v1, alpha)


class Select(NoiseModule):
    """Chooses source 0 or source 1 by the control output.

    Control values inside [lower_bound, upper_bound] select source 1 and
    values outside select source 0. A positive edge falloff blends the two
    sources with the cubic S-curve over a band of that half-width around
    each bound. Only the sources needed for the result are evaluated.
    """

    DEFAULT_LOWER_BOUND = -1.0
    DEFAULT_UPPER_BOUND = 1.0
    DEFAULT_EDGE_FALLOFF = 0.0

    def __init__(
        self,
        lower_bound: float = DEFAULT_LOWER_BOUND,
        upper_bound: float = DEFAULT_UPPER_BOUND,
        edge_falloff: float = DEFAULT_EDGE_FALLOFF,
    ):
        super().__init__(3)
        self._edge_falloff = 0.0
        self.set_bounds(lower_bound, upper_bound)
        self.edge_falloff = edge_falloff

    @property
    def lower_bound(self) -> float:
        return self._lower_bound

    @property
    def upper_bound(self) -> float:
        return self._upper_bound

    def set_bounds(self, lower_bound: float, upper_bound: float) -> None:
        """Set the selection range.

        The edge falloff is re-clamped to fit the new range.

        Raises:
            InvalidConfigurationError: If lower_bound >= upper_bound.
        """
        if lower_bound >= upper_bound:
            raise InvalidConfigurationError(
                f"lower_bound {lower_bound} must be less than upper_bound {upper_bound}"
            )
        self._lower_bound = lower_bound
        self._upper_bound = upper_bound
        self.edge_falloff = self._edge_falloff

    @property
    def edge_falloff(self) -> float:
        """Half-width of the blend band around each bound."""
        return self._edge_falloff

    @edge_falloff.setter
    def edge_falloff(self, edge_falloff: float) -> None:
        if edge_falloff < 0.0:
            raise InvalidConfigurationError(f"edge_falloff must be >= 0, got {edge_falloff}")
        # Bands around the two bounds must not overlap.
        half_size = (self._upper_bound - self._lower_bound) / 2.0
        self._edge_falloff = min(edge_falloff, half_size)

    def evaluate(self, x: float, y: float, z: float) -> float:
        source0 = self.source(0)
        source1 = self.source(1)
        control = self.source(CONTROL_INDEX).evaluate(x, y, z)

        lower = self._lower_bound
        upper = self._upper_bound
        falloff = self._edge_falloff

        if falloff > 0.0:
            if control < lower - falloff:
                return source0.evaluate(x, y, z)
            if control < lower + falloff:
                lower_curve = lower - falloff
                upper_curve = lower + falloff
                alpha = s_curve3((control - lower_curve) / (upper_curve - lower_curve))
                return linear_interp(source0.evaluate(x, y, z), source1.evaluate(x, y, z), alpha)
            if control < upper - falloff:
                return source1.evaluate(x, y, z)
            if control < upper + falloff:
                lower_curve = upper - falloff
                upper_curve = upper + falloff
                alpha = s_curve3((control - lower_curve) / (upper_curve - lower_curve))
                return linear_interp(source1.evaluate(x, y, z), source0.evaluate(x, y, z), alpha)
            return source0.evaluate(x, y, z)

        if control < lower or control > upper:
            return source0.evaluate(x, y, z)
        return source1.evaluate(x, y, z)
