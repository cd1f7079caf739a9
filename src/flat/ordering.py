"""
Ordering — Лексикографический порядок для сортировки Point/Vector

Строгий тотальный порядок: сначала сравнивается x, при равенстве — y.
Используется ТОЛЬКО для детерминированной сортировки и sorted-контейнеров.

НЕ путать с dominance order операторов <, <=, >, >= моделей:
    Point(1, 2) < Point(2, 1)          → False (несравнимы по dominance)
    lex_less(Point(1, 2), Point(2, 1)) → True

sorted(points) использует dominance "<" и не даёт детерминированного
результата — используйте sort_lexicographic или key=lexicographic_key.
"""

from typing import Any, Iterable, TypeVar

from src.flat.components import Components, model_origin

C = TypeVar("C", bound=Components)


def lexicographic_key(item: Components[Any]) -> tuple[Any, Any]:
    """
    Ключ сортировки (x, y).

    Examples:
        >>> sorted([Point(2, 1), Point(1, 5)], key=lexicographic_key)
        [Point(x=1, y=5), Point(x=2, y=1)]
    """
    return (item.x, item.y)


def _check_same_kind(lhs: Components[Any], rhs: Components[Any]) -> None:
    if not (
        isinstance(lhs, Components)
        and isinstance(rhs, Components)
        and model_origin(type(lhs)) is model_origin(type(rhs))
    ):
        raise TypeError(
            f"Lexicographic comparison requires operands of the same kind, "
            f"got {type(lhs).__name__} and {type(rhs).__name__}"
        )


def lex_less(lhs: Components[Any], rhs: Components[Any]) -> bool:
    """lhs строго меньше rhs в лексикографическом порядке."""
    _check_same_kind(lhs, rhs)
    return lexicographic_key(lhs) < lexicographic_key(rhs)


def lex_greater(lhs: Components[Any], rhs: Components[Any]) -> bool:
    return lex_less(rhs, lhs)


def lex_less_equal(lhs: Components[Any], rhs: Components[Any]) -> bool:
    return not lex_greater(lhs, rhs)


def lex_greater_equal(lhs: Components[Any], rhs: Components[Any]) -> bool:
    return not lex_less(lhs, rhs)


def sort_lexicographic(items: Iterable[C], reverse: bool = False) -> list[C]:
    """
    Сортировка Point/Vector в лексикографическом порядке.

    Args:
        items: Модели одного вида
        reverse: Сортировка по убыванию

    Returns:
        Новый отсортированный список

    Raises:
        TypeError: Если в items смешаны Point и Vector
    """
    result = list(items)
    for item in result[1:]:
        _check_same_kind(result[0], item)
    return sorted(result, key=lexicographic_key, reverse=reverse)
