"""Sampling a module graph into a 2D noise map."""

from typing import Any

import numpy as np
import structlog
from numpy.typing import NDArray
from pydantic import BaseModel, Field, ValidationError, model_validator

from .exceptions import InvalidConfigurationError
from .graph import validate_graph
from .interp import linear_interp
from .module import NoiseModule

logger = structlog.get_logger()


class PlaneBounds(BaseModel, frozen=True):
    """Rectangle of the y = 0 plane to sample, x across and z down."""

    lower_x: float = Field(default=0.0, description="Left edge")
    upper_x: float = Field(default=1.0, description="Right edge")
    lower_z: float = Field(default=0.0, description="Top edge")
    upper_z: float = Field(default=1.0, description="Bottom edge")

    def __init__(self, **data: Any):
        try:
            super().__init__(**data)
        except ValidationError as e:
            raise InvalidConfigurationError(str(e)) from e

    @model_validator(mode="after")
    def _check_extent(self) -> "PlaneBounds":
        if self.lower_x >= self.upper_x or self.lower_z >= self.upper_z:
            raise ValueError("Bounds must have lower < upper on both axes")
        return self


class NoiseMapBuilder:
    """Builds height maps by sampling a module over a plane.

    The module graph is validated once before sampling, so a malformed
    graph fails before any work is done.
    """

    def __init__(
        self,
        module: NoiseModule,
        width: int,
        height: int,
        bounds: PlaneBounds | None = None,
        seamless: bool = False,
    ):
        """Initialize NoiseMapBuilder.

        Args:
            module: Root module to sample.
            width: Output width in samples.
            height: Output height in samples.
            bounds: Region of the plane to cover.
            seamless: Blend opposite edges so the map tiles.

        Raises:
            InvalidConfigurationError: If width or height is not positive.
        """
        if width <= 0 or height <= 0:
            raise InvalidConfigurationError(
                f"Map size must be positive, got {width}x{height}"
            )
        self.module = module
        self.width = width
        self.height = height
        self.bounds = bounds if bounds is not None else PlaneBounds()
        self.seamless = seamless

    def build(self) -> NDArray[np.float64]:
        """Sample the module.

        Returns:
            Array of shape (height, width).
        """
        validate_graph(self.module)
        b = self.bounds
        x_extent = b.upper_x - b.lower_x
        z_extent = b.upper_z - b.lower_z
        x_delta = x_extent / self.width
        z_delta = z_extent / self.height

        logger.debug(
            "noise_map_build_started",
            width=self.width,
            height=self.height,
            seamless=self.seamless,
        )

        result = np.empty((self.height, self.width), dtype=np.float64)
        for row in range(self.height):
            z = b.lower_z + row * z_delta
            for col in range(self.width):
                x = b.lower_x + col * x_delta
                if self.seamless:
                    result[row, col] = self._seamless_value(x, z, x_extent, z_extent)
                else:
                    result[row, col] = self.module.evaluate(x, 0.0, z)

        logger.debug(
            "noise_map_build_finished",
            min=float(result.min()),
            max=float(result.max()),
        )
        return result

    def _seamless_value(self, x: float, z: float, x_extent: float, z_extent: float) -> float:
        b = self.bounds
        sw = self.module.evaluate(x, 0.0, z)
        se = self.module.evaluate(x + x_extent, 0.0, z)
        nw = self.module.evaluate(x, 0.0, z + z_extent)
        ne = self.module.evaluate(x + x_extent, 0.0, z + z_extent)
        x_blend = 1.0 - (x - b.lower_x) / x_extent
        z_blend = 1.0 - (z - b.lower_z) / z_extent
        z0 = linear_interp(sw, se, x_blend)
        z1 = linear_interp(nw, ne, x_blend)
        return linear_interp(z0, z1, z_blend)
