"""
Element Types — Conversion Gate для компонент Point/Vector

Модуль определяет, какие типы элементов допустимы и как они преобразуются:
- Числовая башня: Integral → Rational → Real → Complex
- Decimal: принимает только Integral (точное преобразование)
- Common type: результирующий тип бинарной операции
- Zero value: значение по умолчанию для компонент

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Разрешены только расширяющие преобразования (int → float, но не float → int)
2. Отказ в преобразовании → ElementTypeError (подкласс TypeError)
3. Значение, уже имеющее точный целевой тип, не изменяется
"""

import logging
import numbers
from decimal import Decimal
from typing import Any, Final, Optional

logger = logging.getLogger(__name__)


# =============================================================================
# ЧИСЛОВАЯ БАШНЯ
# =============================================================================

# Уровни башни в порядке расширения. Индекс = ранг типа.
NUMERIC_TOWER: Final[tuple[type, ...]] = (
    numbers.Integral,
    numbers.Rational,
    numbers.Real,
    numbers.Complex,
)

# Ранг Integral: единственный уровень, точно представимый в Decimal
INTEGRAL_RANK: Final[int] = 0


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ElementTypeError(TypeError):
    """
    Недопустимое преобразование или смешение типов элементов.

    Возникает, когда тип-источник не конвертируется в целевой тип без потерь
    (например, Vector[float] → Vector[int]) либо когда у двух типов нет
    общего типа (например, Decimal и float).
    """

    pass


# =============================================================================
# КЛАССИФИКАЦИЯ ТИПОВ
# =============================================================================


def numeric_rank(tp: type) -> Optional[int]:
    """
    Ранг типа в числовой башне.

    Args:
        tp: Проверяемый тип

    Returns:
        0 (Integral), 1 (Rational), 2 (Real), 3 (Complex) или None

    Examples:
        >>> numeric_rank(int)
        0
        >>> numeric_rank(float)
        2
        >>> numeric_rank(Decimal) is None
        True
    """
    for rank, abc in enumerate(NUMERIC_TOWER):
        if issubclass(tp, abc):
            return rank
    return None


def is_element_type(tp: Any) -> bool:
    """Поддерживается ли tp как тип элемента Point/Vector."""
    if not isinstance(tp, type):
        return False
    return numeric_rank(tp) is not None or issubclass(tp, Decimal)


def is_scalar(value: Any) -> bool:
    """
    Можно ли использовать значение как скаляр для умножения/деления.

    Point и Vector скалярами не являются.
    """
    return is_element_type(type(value))


# =============================================================================
# CONVERSION GATE
# =============================================================================


def is_convertible(source: type, target: type) -> bool:
    """
    Проверка неявной (расширяющей) конвертируемости source → target.

    Правила:
    - тот же тип или подкласс → True
    - bool принимает только bool
    - Decimal принимает Integral
    - иначе ранг source не выше ранга target в числовой башне

    Args:
        source: Тип-источник
        target: Целевой тип

    Returns:
        True если преобразование разрешено

    Examples:
        >>> is_convertible(int, float)
        True
        >>> is_convertible(float, int)
        False
        >>> is_convertible(int, Decimal)
        True
        >>> is_convertible(float, Decimal)
        False
    """
    if source is target or issubclass(source, target):
        return True

    if target is bool:
        return False

    source_rank = numeric_rank(source)

    if issubclass(target, Decimal):
        return source_rank == INTEGRAL_RANK

    target_rank = numeric_rank(target)
    if source_rank is None or target_rank is None:
        return False

    return source_rank <= target_rank


def require_convertible(source: type, target: type) -> None:
    """
    Проверка конвертируемости с exception.

    Raises:
        ElementTypeError: Если source не конвертируется в target
    """
    if not is_convertible(source, target):
        logger.debug("Conversion refused: %s -> %s", source.__name__, target.__name__)
        raise ElementTypeError(
            f"Element type {source.__name__} is not implicitly convertible "
            f"to {target.__name__}"
        )


def common_type(left: type, right: type) -> type:
    """
    Общий тип элементов для бинарной операции.

    Аналог обычного арифметического продвижения типов: результатом является
    более широкий из двух типов.

    Args:
        left: Тип элементов левого операнда
        right: Тип элементов правого операнда

    Returns:
        Общий тип

    Raises:
        ElementTypeError: Если ни один тип не конвертируется в другой

    Examples:
        >>> common_type(int, float)
        <class 'float'>
        >>> common_type(Fraction, int)
        <class 'fractions.Fraction'>
    """
    if left is right:
        return left

    if is_convertible(right, left):
        return left
    if is_convertible(left, right):
        return right

    logger.debug("No common type: %s, %s", left.__name__, right.__name__)
    raise ElementTypeError(
        f"Element types {left.__name__} and {right.__name__} have no common type"
    )


def convert(value: Any, target: type) -> Any:
    """
    Преобразование значения в целевой тип через conversion gate.

    Args:
        value: Исходное значение
        target: Целевой тип элементов

    Returns:
        value без изменений, если его тип уже target; иначе target(value)

    Raises:
        ElementTypeError: Если тип значения не конвертируется в target

    Examples:
        >>> convert(1, float)
        1.0
        >>> convert(2.5, float)
        2.5
    """
    if type(value) is target:
        return value

    require_convertible(type(value), target)
    return target(value)


def zero_of(target: Optional[type]) -> Any:
    """
    Нулевое значение типа элементов (default construction).

    Для непараметризованных моделей (target=None) возвращает 0.
    """
    if target is None:
        return 0
    return target()
