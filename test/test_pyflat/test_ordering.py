import functools

import pytest

from pyflat import (
    Point,
    Vector,
    lex_compare,
    lex_greater,
    lex_greater_equal,
    lex_less,
    lex_less_equal,
    lexicographic_key,
)


def test_total_order_on_incomparable_pair():
    a, b = Vector(1, 5), Vector(5, 1)

    # product order can't tell
    assert not a <= b
    assert not b <= a

    assert lex_less(a, b)
    assert not lex_less(b, a)
    assert lex_greater(b, a)
    assert lex_less_equal(a, b)
    assert lex_greater_equal(b, a)
    assert lex_compare(a, b) == -1
    assert lex_compare(b, a) == 1


def test_equal_values():
    a, b = Point(1, 2), Point(1.0, 2.0)
    assert not lex_less(a, b)
    assert not lex_greater(a, b)
    assert lex_less_equal(a, b)
    assert lex_greater_equal(a, b)
    assert lex_compare(a, b) == 0


def test_y_breaks_ties():
    assert lex_less(Point(1, 2), Point(1, 3))
    assert lex_greater(Point(1, 3), Point(1, 2))


def test_sorting():
    points = [Point(2, 1), Point(1, 5), Point(1, 2)]
    expected = [Point(1, 2), Point(1, 5), Point(2, 1)]

    assert sorted(points, key=lexicographic_key) == expected
    assert sorted(points, key=functools.cmp_to_key(lex_compare)) == expected
    assert min(points, key=lexicographic_key) == Point(1, 2)


def test_shapes_do_not_mix():
    with pytest.raises(TypeError):
        lex_less(Vector(1, 2), Point(1, 2))
    with pytest.raises(TypeError):
        lex_compare(Point(1, 2), (1, 2))
