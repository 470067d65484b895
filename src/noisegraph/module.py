"""NoiseModule base class for composable noise graphs."""

from abc import ABC, abstractmethod

from .exceptions import InvalidIndexError, MissingSourceError


class NoiseModule(ABC):
    """Abstract base class for noise modules.

    A noise module maps a three-dimensional input coordinate to a float.
    Generator modules compute that value directly; every other kind reads
    the output of one or more source modules connected by index and
    combines or transforms it.

    The number of source slots is fixed per concrete class. Modules do not
    own their sources: a module may feed several consumers, so a graph is a
    DAG. Cycles are not detected during evaluation; use
    ``graph.validate_graph`` to check a graph up front.

    Example:
        perlin = Perlin()
        scaled = ScaleBias(scale=0.5, bias=0.25)
        scaled.set_source(0, perlin)
        height = scaled.evaluate(1.25, 0.0, 3.5)
    """

    def __init__(self, source_count: int):
        self._sources: list[NoiseModule | None] = [None] * source_count

    @property
    def source_count(self) -> int:
        """Number of source modules this module requires."""
        return len(self._sources)

    @property
    def sources(self) -> tuple["NoiseModule | None", ...]:
        """Snapshot of the source slots, unset slots as None."""
        return tuple(self._sources)

    def source(self, index: int) -> "NoiseModule":
        """Get the source module connected at index.

        Raises:
            MissingSourceError: If index is out of range or the slot is unset.
        """
        if index < 0 or index >= len(self._sources):
            raise MissingSourceError(index)
        module = self._sources[index]
        if module is None:
            raise MissingSourceError(index)
        return module

    def set_source(self, index: int, module: "NoiseModule") -> None:
        """Connect a source module, replacing any module already at index.

        Modules without source slots ignore the call.

        Raises:
            InvalidIndexError: If index is outside [0, source_count).
        """
        if not self._sources:
            return
        if index < 0 or index >= len(self._sources):
            raise InvalidIndexError(index, len(self._sources))
        self._sources[index] = module

    def is_connected(self) -> bool:
        """Whether every source slot of this module is set."""
        return all(module is not None for module in self._sources)

    @abstractmethod
    def evaluate(self, x: float, y: float, z: float) -> float:
        """Compute the output value at (x, y, z).

        Raises:
            MissingSourceError: If a required source module is not connected.
        """
        ...

    def __call__(self, x: float, y: float, z: float) -> float:
        return self.evaluate(x, y, z)

    def __repr__(self) -> str:
        connected = sum(module is not None for module in self._sources)
        if not self._sources:
            return f"{type(self).__name__}()"
        return f"{type(self).__name__}(sources={connected}/{len(self._sources)})"
