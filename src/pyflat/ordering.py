"""
Total order for Vector and Point.

Relational operators of both types implement product order, which is
partial: (1, 5) and (5, 1) are incomparable, and `sorted()` over such
values gives an arbitrary result. Whenever total order is needed
(sorting, sorted containers, min/max, bisect) use lexicographic order below:
x is compared first, y breaks ties.

E.g.
```
sorted(points, key=lexicographic_key)
sorted(points, key=functools.cmp_to_key(lex_compare))
```
"""
from typing import Any, Tuple

from pyflat.geometry import Coordinates


def lexicographic_key(item: Coordinates) -> Tuple[Any, Any]:
    return item.x, item.y


def _check_shapes(lhs: Coordinates, rhs: Coordinates):
    if not (isinstance(lhs, Coordinates) and isinstance(rhs, Coordinates)):
        raise TypeError(
            f"Can't order {type(lhs).__name__} and {type(rhs).__name__}"
        )
    if lhs.shape() is not rhs.shape():
        raise TypeError(
            f"Can't order {lhs.shape().__name__} and {rhs.shape().__name__}"
        )


def lex_less(lhs: Coordinates, rhs: Coordinates) -> bool:
    _check_shapes(lhs, rhs)
    return bool(lexicographic_key(lhs) < lexicographic_key(rhs))


def lex_greater(lhs: Coordinates, rhs: Coordinates) -> bool:
    return lex_less(rhs, lhs)


def lex_less_equal(lhs: Coordinates, rhs: Coordinates) -> bool:
    return not lex_greater(lhs, rhs)


def lex_greater_equal(lhs: Coordinates, rhs: Coordinates) -> bool:
    return not lex_less(lhs, rhs)


def lex_compare(lhs: Coordinates, rhs: Coordinates) -> int:
    """
    Three-way lexicographic comparison, suitable for functools.cmp_to_key.
    :return: -1, 0 or 1
    """
    if lex_less(lhs, rhs):
        return -1
    if lex_less(rhs, lhs):
        return 1
    return 0
