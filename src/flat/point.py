"""
Point — Позиция в аффинном 2D пространстве

Алгебра:
    Point ± Vector = Point   (трансляция)
    Point - Point  = Vector  (смещение между позициями)

Point + Point, Point * scalar, Point / scalar НЕ определены: пространство
позиций аффинное, а не векторное. Такие выражения вызывают TypeError.
"""

from typing import Any, Generic, TypeVar, Union

from src.flat.components import (
    Components,
    binary_element_type,
    parametrize,
)
from src.flat.vector import Vector

T = TypeVar("T")


class Point(Components[T], Generic[T]):
    """
    Позиция с компонентами (x, y) типа T.

    Examples:
        >>> Point[float](1.0, 2.0) + Vector[float](3.0, -1.0)
        Point[float](x=4.0, y=1.0)
        >>> Point[float](4.0, 1.0) - Point[float](1.0, 2.0)
        Vector[float](x=3.0, y=-1.0)
    """

    def __add__(self, other: Vector[Any]) -> "Point[Any]":
        if not isinstance(other, Vector):
            return NotImplemented
        element_type = binary_element_type(self.element_type(), other.element_type())
        return parametrize(Point, element_type)(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Union["Point[Any]", Vector[Any]]) -> Union[Vector[Any], "Point[Any]"]:
        if isinstance(other, Point):
            element_type = binary_element_type(self.element_type(), other.element_type())
            return parametrize(Vector, element_type)(self.x - other.x, self.y - other.y)
        if isinstance(other, Vector):
            element_type = binary_element_type(self.element_type(), other.element_type())
            return parametrize(Point, element_type)(self.x - other.x, self.y - other.y)
        return NotImplemented

    def __iadd__(self, other: Vector[Any]) -> "Point[T]":
        if not isinstance(other, Vector):
            return NotImplemented
        self._require_operand(other.element_type())
        self._set_components(self.x + other.x, self.y + other.y)
        return self

    def __isub__(self, other: Vector[Any]) -> "Point[T]":
        if isinstance(other, Point):
            # без этой проверки Python откатится к __sub__ и p станет Vector
            raise TypeError("unsupported operand type(s) for -=: Point and Point")
        if not isinstance(other, Vector):
            return NotImplemented
        self._require_operand(other.element_type())
        self._set_components(self.x - other.x, self.y - other.y)
        return self
