"""
Тесты для модуля Numerical Safeguards

Проверяет:
1. Epsilon-сравнения чисел разных типов
2. Проверку конечности значений
3. Валидацию толерантностей
"""

import math
from decimal import Decimal
from fractions import Fraction

import pytest

from src.flat.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    is_close,
    is_valid_float,
    validate_tolerance,
)

# =============================================================================
# EPSILON-СРАВНЕНИЯ
# =============================================================================


class TestIsClose:
    """Тесты для is_close"""

    def test_constants(self) -> None:
        assert EPS_FLOAT_COMPARE_REL == 1e-9
        assert EPS_FLOAT_COMPARE_ABS == 1e-12

    def test_exact_equality(self) -> None:
        assert is_close(1.0, 1.0)
        assert is_close(3, 3)
        assert is_close(Fraction(1, 3), Fraction(1, 3))
        assert is_close(Decimal("0.1"), Decimal("0.1"))

    def test_within_tolerance(self) -> None:
        assert is_close(1.0, 1.0 + 1e-10)
        assert is_close(0.1 + 0.2, 0.3)
        assert is_close(0.0, 1e-13)

    def test_outside_tolerance(self) -> None:
        assert not is_close(1.0, 1.1)
        assert not is_close(0.0, 1e-6)

    def test_custom_tolerance(self) -> None:
        assert is_close(1.0, 1.05, rel_tol=0.1)
        assert is_close(0.0, 0.5, abs_tol=1.0)

    def test_complex(self) -> None:
        assert is_close(1 + 1j, 1 + (1 + 1e-12) * 1j)
        assert not is_close(1 + 1j, 1 - 1j)

    def test_nan_never_close(self) -> None:
        assert not is_close(math.nan, math.nan)

    def test_invalid_tolerance_raises(self) -> None:
        with pytest.raises(ValueError, match="rel_tol must be a finite non-negative"):
            is_close(1.0, 1.0, rel_tol=-1e-9)

        with pytest.raises(ValueError, match="abs_tol must be a finite non-negative"):
            is_close(1.0, 1.0, abs_tol=math.inf)


# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


class TestIsValidFloat:
    """Тесты для is_valid_float"""

    def test_finite(self) -> None:
        assert is_valid_float(1.0)
        assert is_valid_float(0)
        assert is_valid_float(1 + 2j)

    def test_non_finite(self) -> None:
        assert not is_valid_float(math.nan)
        assert not is_valid_float(math.inf)
        assert not is_valid_float(-math.inf)
        assert not is_valid_float(complex(math.inf, 0))

    def test_validate_tolerance_accepts_zero(self) -> None:
        validate_tolerance(0.0, 0.0)
