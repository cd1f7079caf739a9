"""
Numerical Safeguards — Float Tolerance Primitives

Модуль обеспечивает сравнение компонент с учётом машинной точности:
- Epsilon-параметры для относительной и абсолютной толерантности
- Сравнение чисел (float, Fraction, Decimal, complex) с толерантностью
- Проверка конечности значений

ВАЖНО: эти функции НЕ используются в операторах ==, <=, < моделей Point/Vector
и в zero-guard функции normalized — там сравнение строго точное. Толерантность
применяется только явно, через is_close.
"""

import cmath
import math
from typing import Any, Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Epsilon для сравнения float (относительная толерантность)
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Epsilon для сравнения float (абсолютная толерантность)
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12


# =============================================================================
# ВАЛИДАЦИЯ ПАРАМЕТРОВ
# =============================================================================


def validate_tolerance(rel_tol: float, abs_tol: float) -> None:
    """
    Проверка корректности толерантностей.

    Raises:
        ValueError: Если толерантность отрицательная или не конечная
    """
    for name, tol in (("rel_tol", rel_tol), ("abs_tol", abs_tol)):
        if not is_valid_float(tol) or tol < 0:
            raise ValueError(f"{name} must be a finite non-negative number, got {tol}")


# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: Any) -> bool:
    """
    Проверка, является ли значение конечным (не NaN, не Inf).

    Для complex проверяются обе части.
    """
    if isinstance(value, complex):
        return cmath.isfinite(value)
    return math.isfinite(value)


# =============================================================================
# EPSILON-СРАВНЕНИЯ
# =============================================================================


def is_close(
    a: Any,
    b: Any,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение чисел с учётом машинной точности.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Точно равные значения (включая int, Fraction, Decimal) всегда близки.
    complex сравнивается через cmath.isclose.

    Args:
        a: Первое значение
        b: Второе значение
        rel_tol: Относительная толерантность (default: 1e-9)
        abs_tol: Абсолютная толерантность (default: 1e-12)

    Returns:
        True если значения близки с учётом толерантности

    Raises:
        ValueError: Если толерантность невалидна

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10)
        True
        >>> is_close(1.0, 1.1)
        False
        >>> is_close(0.0, 1e-13)
        True
    """
    validate_tolerance(rel_tol, abs_tol)

    if a == b:
        return True

    if isinstance(a, complex) or isinstance(b, complex):
        return cmath.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)

    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)
