"""
Components — Базовая модель пары компонент (x, y)

Общая часть Point и Vector:
- Construction: default (нулевые компоненты) или явные x, y
- Conversion gate: convert_from / astype / assign только при расширяющем
  преобразовании типа элементов
- Indexed access: индекс 0 → x, 1 → y
- Equality: покомпонентное
- Dominance order: a <= b ⇔ a.x <= b.x и a.y <= b.y (частичный порядок)

Лексикографический порядок для сортировки определён отдельно
(src.flat.ordering) и НЕ использует операторы <, <=, >, >=.

Модели mutable: составные операторы (+=, -=, ...) изменяют экземпляр на месте.
Для независимой копии используйте model_copy().
"""

import numbers
from typing import Any, Final, Generic, Mapping, Optional, TypeVar

from pydantic import BaseModel

from src.flat.math.element_types import (
    common_type,
    convert,
    require_convertible,
    zero_of,
)
from src.flat.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    is_close,
)

T = TypeVar("T")

# Имена компонент в порядке индексации
COMPONENT_NAMES: Final[tuple[str, str]] = ("x", "y")


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ComponentIndexError(IndexError):
    """
    Нарушение precondition индексного доступа: индекс вне {0, 1}.

    Это ошибка программирования, а не восстанавливаемая ситуация.
    """

    pass


# =============================================================================
# HELPERS
# =============================================================================


def model_origin(cls: type) -> type:
    """Непараметризованный класс модели: Vector[float] → Vector."""
    return cls.__pydantic_generic_metadata__["origin"] or cls


def parametrize(origin: type, element_type: Optional[type]) -> type:
    """Класс модели для типа элементов (None → непараметризованный)."""
    if element_type is None:
        return origin
    return origin[element_type]


def binary_element_type(left: Optional[type], right: Optional[type]) -> Optional[type]:
    """
    Тип элементов результата бинарной операции.

    Если хотя бы один операнд непараметризован, результат тоже
    непараметризован (None).
    """
    if left is None or right is None:
        return None
    return common_type(left, right)


# =============================================================================
# COMPONENTS MODEL
# =============================================================================


class Components(BaseModel, Generic[T]):
    """
    Пара однородных компонент (x, y) типа T.

    Параметризованная модель (Vector[float]) хранит компоненты строго типа T:
    значения проходят через conversion gate при создании и присваивании.
    Непараметризованная модель (Vector) принимает значения как есть.
    """

    x: T
    y: T

    model_config = {
        "strict": True,
        "validate_assignment": True,
        "arbitrary_types_allowed": True,
    }

    def __init__(self, x: Any = None, y: Any = None, **data: Any) -> None:
        if (x is None) != (y is None):
            raise TypeError(f"{type(self).__name__} requires both x and y, or neither")

        element_type = type(self).element_type()
        if x is None:
            x = y = zero_of(element_type)
        elif element_type is not None:
            x = convert(x, element_type)
            y = convert(y, element_type)

        super().__init__(x=x, y=y, **data)

    # -------------------------------------------------------------------------
    # Типы элементов и преобразования
    # -------------------------------------------------------------------------

    @classmethod
    def element_type(cls) -> Optional[type]:
        """
        Тип элементов параметризованной модели.

        Returns:
            float для Vector[float], None для Vector
        """
        args = cls.__pydantic_generic_metadata__["args"]
        if args and isinstance(args[0], type):
            return args[0]
        return None

    @classmethod
    def convert_from(cls, other: "Components[Any]") -> "Components[Any]":
        """
        Явное преобразование модели того же вида с другим типом элементов.

        Args:
            other: Исходная модель (Vector → Vector, Point → Point)

        Returns:
            Новый экземпляр cls

        Raises:
            TypeError: Если other другого вида (Point вместо Vector и т.п.)
            ElementTypeError: Если тип элементов other не конвертируется

        Examples:
            >>> Vector[float].convert_from(Vector[int](1, 2))
            Vector[float](x=1.0, y=2.0)
        """
        origin = model_origin(cls)
        if not isinstance(other, origin):
            raise TypeError(f"Cannot convert {type(other).__name__} to {cls.__name__}")

        source, target = type(other).element_type(), cls.element_type()
        if source is not None and target is not None:
            require_convertible(source, target)

        return cls(other.x, other.y)

    def astype(self, element_type: type) -> "Components[Any]":
        """Копия с другим типом элементов (через conversion gate)."""
        return model_origin(type(self))[element_type].convert_from(self)

    def assign(self, other: "Components[Any]") -> "Components[T]":
        """
        Присваивание компонент другой модели того же вида на месте.

        Raises:
            TypeError: Если other другого вида
            ElementTypeError: Если тип элементов other не конвертируется в T
        """
        if not self._same_kind(other):
            raise TypeError(f"Cannot assign {type(other).__name__} to {type(self).__name__}")
        self._require_operand(type(other).element_type())
        self._set_components(other.x, other.y)
        return self

    def model_copy(
        self, *, update: Optional[Mapping[str, Any]] = None, deep: bool = False
    ) -> "Components[T]":
        """
        Копия модели; компоненты из update проходят через conversion gate.

        Raises:
            ElementTypeError: Если значение из update не конвертируется в T
        """
        if update:
            update = {
                name: self._coerce(value) if name in COMPONENT_NAMES else value
                for name, value in update.items()
            }
        return super().model_copy(update=update, deep=deep)

    def _coerce(self, value: Any) -> Any:
        element_type = type(self).element_type()
        if element_type is None:
            return value
        return convert(value, element_type)

    def _require_operand(self, source: Optional[type]) -> None:
        target = type(self).element_type()
        if source is not None and target is not None:
            require_convertible(source, target)

    def _set_components(self, x: Any, y: Any) -> None:
        # Обе компоненты проверяются до присваивания: экземпляр не остаётся
        # в частично изменённом состоянии
        x = self._coerce(x)
        y = self._coerce(y)
        self.x = x
        self.y = y

    def _same_kind(self, other: Any) -> bool:
        return isinstance(other, Components) and model_origin(type(other)) is model_origin(
            type(self)
        )

    def __setattr__(self, name: str, value: Any) -> None:
        if name in COMPONENT_NAMES:
            value = self._coerce(value)
        super().__setattr__(name, value)

    # -------------------------------------------------------------------------
    # Indexed access
    # -------------------------------------------------------------------------

    @staticmethod
    def _component_name(index: Any) -> str:
        if (
            not isinstance(index, numbers.Integral)
            or isinstance(index, bool)
            or not 0 <= index < len(COMPONENT_NAMES)
        ):
            raise ComponentIndexError(f"Component index must be 0 or 1, got {index!r}")
        return COMPONENT_NAMES[int(index)]

    def __getitem__(self, index: int) -> T:
        return getattr(self, self._component_name(index))

    def __setitem__(self, index: int, value: Any) -> None:
        setattr(self, self._component_name(index), value)

    def as_tuple(self) -> tuple[T, T]:
        return (self.x, self.y)

    # -------------------------------------------------------------------------
    # Equality & dominance order
    # -------------------------------------------------------------------------

    def __eq__(self, other: Any) -> bool:
        if not self._same_kind(other):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __ne__(self, other: Any) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __le__(self, other: Any) -> bool:
        if not self._same_kind(other):
            return NotImplemented
        return self.x <= other.x and self.y <= other.y

    def __ge__(self, other: Any) -> bool:
        if not self._same_kind(other):
            return NotImplemented
        return other <= self

    def __lt__(self, other: Any) -> bool:
        if not self._same_kind(other):
            return NotImplemented
        return self <= other and self != other

    def __gt__(self, other: Any) -> bool:
        if not self._same_kind(other):
            return NotImplemented
        return other < self

    __hash__ = None  # mutable

    def is_close(
        self,
        other: "Components[Any]",
        rel_tol: float = EPS_FLOAT_COMPARE_REL,
        abs_tol: float = EPS_FLOAT_COMPARE_ABS,
    ) -> bool:
        """
        Покомпонентное сравнение с толерантностью.

        Используется для float-моделей, где точное == неприменимо
        после арифметики (например, (v * s) / s).

        Raises:
            TypeError: Если other другого вида
            ValueError: Если толерантность невалидна
        """
        if not self._same_kind(other):
            raise TypeError(f"Cannot compare {type(self).__name__} with {type(other).__name__}")
        return is_close(self.x, other.x, rel_tol, abs_tol) and is_close(
            self.y, other.y, rel_tol, abs_tol
        )

    # -------------------------------------------------------------------------
    # Textual rendering
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        return f"{self.x}, {self.y}"
