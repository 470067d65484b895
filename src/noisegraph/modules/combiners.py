"""Combiner modules: merge the outputs of two source modules."""

from ..module import NoiseModule


class Add(NoiseModule):
    """Sum of the two source outputs."""

    def __init__(self):
        super().__init__(2)

    def evaluate(self, x: float, y: float, z: float) -> float:
        return self.source(0).evaluate(x, y, z) + self.source(1).evaluate(x, y, z)


class Multiply(NoiseModule):
    """Product of the two source outputs."""

    def __init__(self):
        super().__init__(2)

    def evaluate(self, x: float, y: float, z: float) -> float:
        return self.source(0).evaluate(x, y, z) * self.source(1).evaluate(x, y, z)


class Max(NoiseModule):
    """Larger of the two source outputs."""

    def __init__(self):
        super().__init__(2)

    def evaluate(self, x: float, y: float, z: float) -> float:
        return max(self.source(0).evaluate(x, y, z), self.source(1).evaluate(x, y, z))


class Min(NoiseModule):
    """Smaller of the two source outputs."""

    def __init__(self):
        super().__init__(2)

    def evaluate(self, x: float, y: float, z: float) -> float:
        return min(self.source(0).evaluate(x, y, z), self.source(1).evaluate(x, y, z))
