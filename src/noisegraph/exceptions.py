"""Custom exceptions for noise module graphs."""


class NoiseGraphError(Exception):
    """Base exception for noise graph errors."""

    pass


class MissingSourceError(NoiseGraphError):
    """Raised when a required source module is not connected."""

    def __init__(self, index: int):
        super().__init__(f"No source module connected at index {index}")
        self.index = index


class InvalidIndexError(NoiseGraphError, IndexError):
    """Raised when a source index is outside the module's slot range."""

    def __init__(self, index: int, source_count: int):
        super().__init__(
            f"Source index {index} out of range [0, {source_count})"
        )
        self.index = index
        self.source_count = source_count


class InvalidConfigurationError(NoiseGraphError, ValueError):
    """Raised when a module setting is outside its valid domain."""

    pass


class GraphCycleError(NoiseGraphError):
    """Raised when a module is reachable from its own sources."""

    pass
