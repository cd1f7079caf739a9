"""
Тесты для модуля Element Types (conversion gate)

Проверяет:
1. Ранги числовой башни
2. Расширяющие и сужающие преобразования
3. Common type бинарных операций
4. Преобразование значений и нулевые значения
5. Логирование отказов
"""

import logging
from decimal import Decimal
from fractions import Fraction

import pytest

from src.flat.math.element_types import (
    ElementTypeError,
    common_type,
    convert,
    is_convertible,
    is_element_type,
    is_scalar,
    numeric_rank,
    require_convertible,
    zero_of,
)
from src.flat.point import Point
from src.flat.vector import Vector

# =============================================================================
# ЧИСЛОВАЯ БАШНЯ
# =============================================================================


class TestNumericRank:
    """Тесты для numeric_rank"""

    @pytest.mark.parametrize(
        "tp, rank",
        [(bool, 0), (int, 0), (Fraction, 1), (float, 2), (complex, 3)],
    )
    def test_tower_levels(self, tp: type, rank: int) -> None:
        """Стандартные типы на своих уровнях башни"""
        assert numeric_rank(tp) == rank

    def test_non_numeric_has_no_rank(self) -> None:
        """Decimal и str вне башни"""
        assert numeric_rank(Decimal) is None
        assert numeric_rank(str) is None

    def test_element_types(self) -> None:
        """Decimal допустим как тип элементов, str — нет"""
        assert is_element_type(float)
        assert is_element_type(Decimal)
        assert not is_element_type(str)
        assert not is_element_type(1.0)

    def test_scalars(self) -> None:
        """Числа — скаляры, модели — нет"""
        assert is_scalar(2)
        assert is_scalar(2.5)
        assert is_scalar(Fraction(1, 3))
        assert is_scalar(Decimal("1.5"))
        assert not is_scalar("2")
        assert not is_scalar(Vector(1, 2))
        assert not is_scalar(Point(1, 2))


# =============================================================================
# CONVERSION GATE
# =============================================================================


class TestIsConvertible:
    """Тесты для is_convertible"""

    @pytest.mark.parametrize(
        "source, target",
        [
            (int, int),
            (int, float),
            (int, Fraction),
            (Fraction, float),
            (float, complex),
            (bool, int),
            (int, Decimal),
            (Decimal, Decimal),
        ],
    )
    def test_widening_allowed(self, source: type, target: type) -> None:
        """Расширяющие преобразования разрешены"""
        assert is_convertible(source, target)

    @pytest.mark.parametrize(
        "source, target",
        [
            (float, int),
            (Fraction, int),
            (complex, float),
            (int, bool),
            (float, Decimal),
            (Decimal, float),
            (Decimal, int),
            (str, float),
            (float, str),
        ],
    )
    def test_narrowing_refused(self, source: type, target: type) -> None:
        """Сужающие и несвязанные преобразования запрещены"""
        assert not is_convertible(source, target)

    def test_require_convertible_raises(self) -> None:
        """require_convertible вызывает ElementTypeError"""
        require_convertible(int, float)

        with pytest.raises(ElementTypeError, match="float is not implicitly convertible to int"):
            require_convertible(float, int)

    def test_element_type_error_is_type_error(self) -> None:
        """ElementTypeError — подкласс TypeError"""
        assert issubclass(ElementTypeError, TypeError)

    def test_refusal_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """Отказ в преобразовании пишется в debug-лог"""
        with caplog.at_level(logging.DEBUG, logger="src.flat.math.element_types"):
            with pytest.raises(ElementTypeError):
                require_convertible(complex, float)

        assert "Conversion refused: complex -> float" in caplog.text


# =============================================================================
# COMMON TYPE
# =============================================================================


class TestCommonType:
    """Тесты для common_type"""

    def test_same_type(self) -> None:
        assert common_type(float, float) is float

    def test_wider_type_wins(self) -> None:
        """Результат — более широкий тип независимо от порядка"""
        assert common_type(int, float) is float
        assert common_type(float, int) is float
        assert common_type(Fraction, int) is Fraction
        assert common_type(float, complex) is complex

    def test_decimal_with_int(self) -> None:
        assert common_type(Decimal, int) is Decimal
        assert common_type(int, Decimal) is Decimal

    def test_no_common_type_raises(self) -> None:
        """Decimal и float несовместимы"""
        with pytest.raises(ElementTypeError, match="have no common type"):
            common_type(Decimal, float)


# =============================================================================
# ПРЕОБРАЗОВАНИЕ ЗНАЧЕНИЙ
# =============================================================================


class TestConvert:
    """Тесты для convert и zero_of"""

    def test_exact_type_unchanged(self) -> None:
        """Значение точного типа возвращается как есть"""
        value = Fraction(1, 3)
        assert convert(value, Fraction) is value

    def test_widening_conversion(self) -> None:
        result = convert(1, float)
        assert result == 1.0
        assert type(result) is float

        assert convert(2, Decimal) == Decimal(2)
        assert convert(True, int) == 1
        assert type(convert(True, int)) is int

    def test_narrowing_conversion_raises(self) -> None:
        with pytest.raises(ElementTypeError):
            convert(1.5, int)

        with pytest.raises(ElementTypeError):
            convert("1", float)

    @pytest.mark.parametrize("tp", [int, float, Fraction, Decimal, complex])
    def test_zero_of(self, tp: type) -> None:
        """Нулевое значение типа = default construction"""
        zero = zero_of(tp)
        assert zero == 0
        assert type(zero) is tp

    def test_zero_of_unparametrized(self) -> None:
        assert zero_of(None) == 0
