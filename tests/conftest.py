"""Shared test fixtures for noise graph tests."""

import pytest

from noisegraph.module import NoiseModule
from noisegraph.modules import Const, Perlin
from noisegraph.settings import PerlinSettings


class CoordinateProbe(NoiseModule):
    """Generator that records the coordinates it is evaluated at.

    Returns x + 10y + 100z so tests can also check which point was sampled.
    """

    def __init__(self):
        super().__init__(0)
        self.calls: list[tuple[float, float, float]] = []

    def evaluate(self, x: float, y: float, z: float) -> float:
        self.calls.append((x, y, z))
        return x + 10.0 * y + 100.0 * z


@pytest.fixture
def probe() -> CoordinateProbe:
    """Fresh coordinate-recording generator."""
    return CoordinateProbe()


@pytest.fixture
def zero() -> Const:
    """Const module outputting 0."""
    return Const(0.0)


@pytest.fixture
def one() -> Const:
    """Const module outputting 1."""
    return Const(1.0)


@pytest.fixture
def perlin() -> Perlin:
    """Perlin generator with a small octave count to keep tests fast."""
    return Perlin(PerlinSettings(octave_count=3, seed=7))


@pytest.fixture
def sample_points() -> list[tuple[float, float, float]]:
    """Deterministic spread of points, including negatives and integers."""
    points = []
    for i in range(-6, 7):
        for j in range(-3, 4):
            points.append((i * 0.731 + 0.05, j * 1.37 - 0.2, (i - j) * 0.419))
    points.extend([(0.0, 0.0, 0.0), (1.0, -1.0, 2.0), (-3.5, 4.25, -7.75)])
    return points


@pytest.fixture
def second_probe() -> CoordinateProbe:
    """Another recording generator, for modules with two sources."""
    return CoordinateProbe()
