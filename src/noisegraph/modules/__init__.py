"""Concrete noise modules.

Generators have no sources; modifiers and transformers take one; combiners
take two; selectors take two sources plus a control module in slot 2.
"""

from .combiners import Add, Max, Min, Multiply
from .generators import Billow, Checkerboard, Const, Perlin, RidgedMulti, Simplex, Voronoi
from .modifiers import Abs, Clamp, ControlPoint, Curve, Exponent, Invert, ScaleBias
from .selectors import Blend, Select
from .transformers import RotatePoint, ScalePoint, TranslatePoint

__all__ = [
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
]
