"""
Vector — Свободное смещение (displacement) в 2D

Алгебра:
    Vector ± Vector = Vector      (покомпонентно, common type элементов)
    Vector * scalar = Vector      (и scalar * Vector)
    Vector / scalar = Vector
    length(v)     = sqrt(x² + y²) (тип результата = T)
    normalized(v) = v / length(v), либо нулевой вектор при length(v) == 0

Деление следует семантике Python "/": Vector[int] / 2 → Vector[float].
Составной /= для целочисленного вектора поэтому отклоняется conversion gate.
"""

import cmath
import math
import numbers
from decimal import Decimal
from typing import Any, Generic, TypeVar

from src.flat.components import (
    Components,
    binary_element_type,
    parametrize,
)
from src.flat.math.element_types import common_type, is_scalar

T = TypeVar("T")


class Vector(Components[T], Generic[T]):
    """
    Вектор смещения с компонентами (x, y) типа T.

    Examples:
        >>> Vector[float](3.0, -1.0) + Vector[float](1.0, 1.0)
        Vector[float](x=4.0, y=0.0)
        >>> str(Vector[int](1, 2) * 3)
        '3, 6'
    """

    # =========================================================================
    # ARITHMETIC
    # =========================================================================

    def __add__(self, other: "Vector[Any]") -> "Vector[Any]":
        if not isinstance(other, Vector):
            return NotImplemented
        element_type = binary_element_type(self.element_type(), other.element_type())
        return parametrize(Vector, element_type)(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector[Any]") -> "Vector[Any]":
        if not isinstance(other, Vector):
            return NotImplemented
        element_type = binary_element_type(self.element_type(), other.element_type())
        return parametrize(Vector, element_type)(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: Any) -> "Vector[Any]":
        if not is_scalar(scalar):
            return NotImplemented
        element_type = binary_element_type(self.element_type(), type(scalar))
        return parametrize(Vector, element_type)(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar: Any) -> "Vector[Any]":
        return self.__mul__(scalar)

    def __truediv__(self, scalar: Any) -> "Vector[Any]":
        if not is_scalar(scalar):
            return NotImplemented
        element_type = binary_element_type(self.element_type(), type(scalar))
        x, y = self.x / scalar, self.y / scalar
        if element_type is not None:
            # int / int → float: тип частного расширяет common type
            element_type = common_type(element_type, type(x))
        return parametrize(Vector, element_type)(x, y)

    # =========================================================================
    # COMPOUND ASSIGNMENT (in place)
    # =========================================================================

    def __iadd__(self, other: "Vector[Any]") -> "Vector[T]":
        if not isinstance(other, Vector):
            return NotImplemented
        self._require_operand(other.element_type())
        self._set_components(self.x + other.x, self.y + other.y)
        return self

    def __isub__(self, other: "Vector[Any]") -> "Vector[T]":
        if not isinstance(other, Vector):
            return NotImplemented
        self._require_operand(other.element_type())
        self._set_components(self.x - other.x, self.y - other.y)
        return self

    def __imul__(self, scalar: Any) -> "Vector[T]":
        if not is_scalar(scalar):
            return NotImplemented
        self._require_operand(type(scalar))
        self._set_components(self.x * scalar, self.y * scalar)
        return self

    def __itruediv__(self, scalar: Any) -> "Vector[T]":
        if not is_scalar(scalar):
            return NotImplemented
        self._require_operand(type(scalar))
        self._set_components(self.x / scalar, self.y / scalar)
        return self


# =============================================================================
# GEOMETRY FUNCTIONS
# =============================================================================


def length(vector: Vector[T]) -> T:
    """
    Евклидова длина вектора: sqrt(x² + y²).

    Тип результата совпадает с типом элементов: для целочисленных векторов
    результат усекается (integer square root). Для точности используйте
    вещественный тип элементов. Для complex берётся главный корень
    cmath.sqrt(x² + y²), а не модуль.

    Args:
        vector: Вектор

    Returns:
        Длина вектора типа T

    Examples:
        >>> length(Vector[float](3.0, 4.0))
        5.0
        >>> length(Vector[int](1, 1))
        1
    """
    squared = vector.x * vector.x + vector.y * vector.y
    element_type = vector.element_type() or type(squared)

    if isinstance(squared, complex):
        root = cmath.sqrt(squared)
    elif isinstance(squared, Decimal):
        root = squared.sqrt()
    elif issubclass(element_type, numbers.Integral):
        root = math.isqrt(squared)
    else:
        root = math.sqrt(squared)

    return element_type(root)


def normalized(vector: Vector[T]) -> Vector[Any]:
    """
    Единичный вектор того же направления.

    Zero-guard: при length(v) == 0 (точное сравнение, без epsilon)
    возвращается нулевой вектор того же класса, деление не выполняется.

    ВАЖНО: результат строится через "/", поэтому тип элементов может
    расшириться. Для целочисленного вектора результат — Vector[float]
    (Vector[int](3, 4) → Vector[float](0.6, 0.8)), а не Vector[int].
    Zero-guard возвращает вектор исходного типа (Vector[int]() для Vector[int]).

    Args:
        vector: Вектор

    Returns:
        v / length(v) или нулевой вектор
    """
    magnitude = length(vector)
    if magnitude == 0:
        return type(vector)()
    return vector / magnitude
