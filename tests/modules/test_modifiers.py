"""Tests for modifier modules."""

import math

import pytest

from noisegraph.exceptions import InvalidConfigurationError, MissingSourceError
from noisegraph.modules import Abs, Clamp, Const, ControlPoint, Curve, Exponent, Invert, ScaleBias


def _with_source(module, source):
    module.set_source(0, source)
    return module


class TestScaleBias:
    """Tests for ScaleBias."""

    def test_defaults_are_identity(self, perlin, sample_points) -> None:
        """Scale 1 and bias 0 return the source value unchanged."""
        sb = _with_source(ScaleBias(), perlin)
        for point in sample_points:
            assert sb.evaluate(*point) == perlin.evaluate(*point)

    def test_scale_and_bias(self) -> None:
        """Output is value * scale + bias."""
        sb = _with_source(ScaleBias(scale=3.0, bias=-1.0), Const(2.0))
        assert sb.evaluate(0.0, 0.0, 0.0) == 5.0

    def test_attributes_mutable(self) -> None:
        """Changing scale takes effect on the next evaluation."""
        sb = _with_source(ScaleBias(), Const(2.0))
        sb.scale = 0.5
        assert sb.evaluate(0.0, 0.0, 0.0) == 1.0

    def test_missing_source(self) -> None:
        """Evaluating without a source fails."""
        with pytest.raises(MissingSourceError):
            ScaleBias(scale=2.0).evaluate(0.0, 0.0, 0.0)


class TestInvertAndAbs:
    """Tests for Invert and Abs."""

    def test_invert(self) -> None:
        """Invert negates."""
        assert _with_source(Invert(), Const(0.75)).evaluate(1.0, 1.0, 1.0) == -0.75

    def test_abs(self) -> None:
        """Abs drops the sign."""
        assert _with_source(Abs(), Const(-0.75)).evaluate(1.0, 1.0, 1.0) == 0.75


class TestClamp:
    """Tests for Clamp."""

    @pytest.mark.parametrize("value, expected", [(-5.0, -1.0), (0.25, 0.25), (9.0, 2.0)])
    def test_clamps(self, value: float, expected: float) -> None:
        """Values are pinned into the bounds."""
        c = _with_source(Clamp(-1.0, 2.0), Const(value))
        assert c.evaluate(0.0, 0.0, 0.0) == expected

    def test_defaults(self) -> None:
        """Default bounds are [0, 1]."""
        c = Clamp()
        assert (c.lower_bound, c.upper_bound) == (0.0, 1.0)

    def test_equal_bounds_allowed(self) -> None:
        """A zero-width range pins every value."""
        c = _with_source(Clamp(0.5, 0.5), Const(3.0))
        assert c.evaluate(0.0, 0.0, 0.0) == 0.5

    def test_inverted_bounds_rejected(self) -> None:
        """lower_bound above upper_bound is an error and leaves bounds unchanged."""
        c = Clamp(-1.0, 1.0)
        with pytest.raises(InvalidConfigurationError):
            c.set_bounds(2.0, 1.0)
        assert (c.lower_bound, c.upper_bound) == (-1.0, 1.0)


class TestExponent:
    """Tests for Exponent."""

    def test_midpoint_pulled_down(self) -> None:
        """Exponent 2 maps 0 to -0.5 via the [0, 1] range."""
        assert _with_source(Exponent(2.0), Const(0.0)).evaluate(0.0, 0.0, 0.0) == pytest.approx(-0.5)

    def test_outside_range(self) -> None:
        """Values above 1 are mapped the same way."""
        assert _with_source(Exponent(2.0), Const(3.0)).evaluate(0.0, 0.0, 0.0) == pytest.approx(7.0)

    @pytest.mark.parametrize("value", [-1.0, 1.0])
    def test_end_points_fixed(self, value: float) -> None:
        """-1 and 1 map to themselves for any exponent."""
        for exponent in (0.5, 2.0, 3.0):
            e = _with_source(Exponent(exponent), Const(value))
            assert e.evaluate(0.0, 0.0, 0.0) == pytest.approx(value)

    def test_fractional_exponent(self) -> None:
        """Exponents below 1 push the middle up."""
        e = _with_source(Exponent(0.5), Const(0.0))
        assert e.evaluate(0.0, 0.0, 0.0) == pytest.approx(math.sqrt(0.5) * 2.0 - 1.0)

    def test_default_identity(self) -> None:
        """Default exponent 1 passes values through."""
        assert _with_source(Exponent(), Const(-0.3)).evaluate(0.0, 0.0, 0.0) == pytest.approx(-0.3)

    @pytest.mark.parametrize("exponent", [0.0, -1.0])
    def test_non_positive_rejected(self, exponent: float) -> None:
        """The exponent must be positive."""
        with pytest.raises(InvalidConfigurationError):
            Exponent(exponent)
        e = Exponent(2.0)
        with pytest.raises(InvalidConfigurationError):
            e.exponent = exponent
        assert e.exponent == 2.0


class TestCurve:
    """Tests for Curve."""

    @pytest.fixture
    def curve(self) -> Curve:
        return Curve([(1.0, 1.0), (-1.0, -1.0), (0.0, 0.5), (0.5, 0.7)])

    def test_points_sorted(self, curve: Curve) -> None:
        """Control points are kept ordered by input."""
        inputs = [cp.input_value for cp in curve.control_points]
        assert inputs == [-1.0, 0.0, 0.5, 1.0]
        assert curve.control_points[1] == ControlPoint(0.0, 0.5)

    def test_duplicate_input_rejected(self, curve: Curve) -> None:
        """Two points cannot share an input value."""
        with pytest.raises(InvalidConfigurationError):
            curve.add_control_point(0.5, 0.1)
        assert len(curve.control_points) == 4

    def test_passes_through_control_points(self, curve: Curve) -> None:
        """Source values at a control input map to its output."""
        for cp in curve.control_points[:-1]:
            curve.set_source(0, Const(cp.input_value))
            assert curve.evaluate(0.0, 0.0, 0.0) == cp.output_value

    @pytest.mark.parametrize("value, expected", [(-7.0, -1.0), (1.0, 1.0), (42.0, 1.0)])
    def test_clamps_outside_range(self, curve: Curve, value: float, expected: float) -> None:
        """Values beyond the end points take the end outputs."""
        curve.set_source(0, Const(value))
        assert curve.evaluate(0.0, 0.0, 0.0) == expected

    def test_collinear_points_midpoint(self) -> None:
        """Halfway between two evenly spaced collinear points lands on the line."""
        curve = Curve([(-1.0, -1.0), (0.0, 0.0), (1.0, 1.0), (2.0, 2.0)])
        curve.set_source(0, Const(0.5))
        assert curve.evaluate(0.0, 0.0, 0.0) == pytest.approx(0.5)

    def test_too_few_points(self) -> None:
        """Fewer than four points cannot be evaluated."""
        curve = _with_source(Curve([(0.0, 0.0), (1.0, 1.0), (2.0, 2.0)]), Const(0.5))
        with pytest.raises(InvalidConfigurationError):
            curve.evaluate(0.0, 0.0, 0.0)

    def test_missing_source_reported_first(self) -> None:
        """An unwired curve reports the missing source even without points."""
        with pytest.raises(MissingSourceError):
            Curve().evaluate(0.0, 0.0, 0.0)

    def test_clear(self, curve: Curve) -> None:
        """Clearing removes every point."""
        curve.clear_control_points()
        assert curve.control_points == ()
