"""Composable coherent-noise modules for procedural content.

Build a graph of noise modules (generators at the leaves, modifiers,
transformers, combiners and selectors above them), connect sources by
index, then evaluate the root module at any (x, y, z).
"""

from .builder import NoiseMapBuilder, PlaneBounds
from .exceptions import (
    GraphCycleError,
    InvalidConfigurationError,
    InvalidIndexError,
    MissingSourceError,
    NoiseGraphError,
)
from .graph import GraphSpec, NodeSpec, build_graph, iter_modules, validate_graph
from .module import NoiseModule
from .modules import (
    Abs,
    Add,
    Billow,
    Blend,
    Checkerboard,
    Clamp,
    Const,
    ControlPoint,
    Curve,
    Exponent,
    Invert,
    Max,
    Min,
    Multiply,
    Perlin,
    RidgedMulti,
    RotatePoint,
    ScaleBias,
    ScalePoint,
    Select,
    Simplex,
    TranslatePoint,
    Voronoi,
)
from .noise import (
    gradient_coherent_noise_3d,
    gradient_noise_3d,
    int_value_noise_3d,
    simplex_style_gradient_coherent_noise_3d,
    value_coherent_noise_3d,
    value_noise_3d,
)
from .settings import (
    MAX_OCTAVE_COUNT,
    BillowSettings,
    PerlinSettings,
    RidgedMultiSettings,
    SimplexSettings,
    VoronoiSettings,
)
from .types import LatticeOrientation, NoiseQuality, SimplexQuality

__all__ = [
    # Types
    "LatticeOrientation",
    "NoiseQuality",
    "SimplexQuality",
    # Kernels
    "gradient_coherent_noise_3d",
    "gradient_noise_3d",
    "int_value_noise_3d",
    "simplex_style_gradient_coherent_noise_3d",
    "value_coherent_noise_3d",
    "value_noise_3d",
    # Base
    "NoiseModule",
    # Generators
    "Billow",
    "Checkerboard",
    "Const",
    "Perlin",
    "RidgedMulti",
    "Simplex",
    "Voronoi",
    # Modifiers
    "Abs",
    "Clamp",
    "ControlPoint",
    "Curve",
    "Exponent",
    "Invert",
    "ScaleBias",
    # Transformers
    "RotatePoint",
    "ScalePoint",
    "TranslatePoint",
    # Combiners
    "Add",
    "Max",
    "Min",
    "Multiply",
    # Selectors
    "Blend",
    "Select",
    # Settings
    "MAX_OCTAVE_COUNT",
    "BillowSettings",
    "PerlinSettings",
    "RidgedMultiSettings",
    "SimplexSettings",
    "VoronoiSettings",
    # Graph
    "GraphSpec",
    "NodeSpec",
    "build_graph",
    "iter_modules",
    "validate_graph",
    # Map building
    "NoiseMapBuilder",
    "PlaneBounds",
    # Exceptions
    "NoiseGraphError",
    "MissingSourceError",
    "InvalidIndexError",
    "InvalidConfigurationError",
    "GraphCycleError",
]
