"""Generator settings models.

A generator module holds a reference to one of these records and reads it
on every evaluation, so a record may be shared between modules and changes
take effect immediately. Records validate on construction and on attribute
assignment; invalid values raise InvalidConfigurationError at set time.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .exceptions import InvalidConfigurationError
from .types import LatticeOrientation, NoiseQuality, SimplexQuality

MAX_OCTAVE_COUNT = 30


class ModuleSettings(BaseModel):
    """Base for mutable, validated module settings."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    def __init__(self, **data: Any):
        try:
            super().__init__(**data)
        except ValidationError as e:
            raise InvalidConfigurationError(str(e)) from e

    def __setattr__(self, name: str, value: Any) -> None:
        try:
            super().__setattr__(name, value)
        except ValidationError as e:
            raise InvalidConfigurationError(str(e)) from e


class OctaveSettings(ModuleSettings):
    """Parameters shared by the octave-summing generators."""

    seed: int = Field(default=0, description="Seed of the first octave")
    frequency: float = Field(default=1.0, description="Frequency of the first octave")
    lacunarity: float = Field(default=2.0, description="Frequency multiplier per octave")
    octave_count: int = Field(
        default=6,
        ge=1,
        le=MAX_OCTAVE_COUNT,
        description="Number of octaves summed",
    )


class PerlinSettings(OctaveSettings):
    """Perlin-style fBm parameters."""

    persistence: float = Field(default=0.5, description="Amplitude multiplier per octave")
    quality: NoiseQuality = Field(default=NoiseQuality.STANDARD, description="Interpolation quality")


class BillowSettings(PerlinSettings):
    """Billow parameters; same shape as Perlin."""

    pass


class SimplexSettings(OctaveSettings):
    """Simplex-style fBm parameters."""

    persistence: float = Field(default=0.5, description="Amplitude multiplier per octave")
    orientation: LatticeOrientation = Field(
        default=LatticeOrientation.XZ_BEFORE_Y,
        description="Lattice rotation applied before lookup",
    )
    quality: SimplexQuality = Field(
        default=SimplexQuality.STANDARD,
        description="Kernel radius and candidate table",
    )


class RidgedMultiSettings(OctaveSettings):
    """Ridged multifractal parameters.

    The spectral weights for each octave are derived from lacunarity, so
    there is no persistence.
    """

    quality: NoiseQuality = Field(default=NoiseQuality.STANDARD, description="Interpolation quality")


class VoronoiSettings(ModuleSettings):
    """Voronoi cell parameters."""

    seed: int = Field(default=0, description="Seed for cell point placement")
    frequency: float = Field(default=1.0, description="Cell density")
    displacement: float = Field(default=1.0, description="Scale of the per-cell value")
    enable_distance: bool = Field(
        default=False,
        description="Add distance from the cell point to the output",
    )
