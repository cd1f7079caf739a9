"""
flat — 2D Point/Vector value types.

Point (позиция в аффинном пространстве) и Vector (смещение), параметризованные
типом элементов: Vector[float], Point[int], Vector[Fraction], ...
"""

from src.flat.components import COMPONENT_NAMES, ComponentIndexError, Components
from src.flat.math.element_types import ElementTypeError
from src.flat.ordering import (
    lex_greater,
    lex_greater_equal,
    lex_less,
    lex_less_equal,
    lexicographic_key,
    sort_lexicographic,
)
from src.flat.point import Point
from src.flat.vector import Vector, length, normalized

__all__ = [
    # Models
    "Components",
    "Point",
    "Vector",
    "COMPONENT_NAMES",
    # Exceptions
    "ComponentIndexError",
    "ElementTypeError",
    # Geometry functions
    "length",
    "normalized",
    # Lexicographic order
    "lexicographic_key",
    "lex_less",
    "lex_greater",
    "lex_less_equal",
    "lex_greater_equal",
    "sort_lexicographic",
]
