from decimal import Decimal
from fractions import Fraction

import numpy as np
import pytest

from pyflat.errors import ConversionError, Error
from pyflat.numeric import common_type, convert, is_convertible, promote, sqrt


def test_common_type_tower():
    assert common_type(int, int) is int
    assert common_type(bool, int) is int
    assert common_type(int, float) is float
    assert common_type(float, int) is float
    assert common_type(int, Fraction) is Fraction
    assert common_type(Fraction, float) is float
    assert common_type(float, complex) is complex
    assert common_type(int, int, float) is float


def test_common_type_decimal():
    assert common_type(int, Decimal) is Decimal
    assert common_type(Decimal, bool) is Decimal

    with pytest.raises(ConversionError):
        common_type(Decimal, float)

    # ConversionError is a TypeError as well
    with pytest.raises(TypeError):
        common_type(Fraction, Decimal)


def test_common_type_numpy():
    assert common_type(np.float32, np.float64) is np.float64
    assert common_type(np.int32, np.int32) is np.int32

    # Python scalars don't widen numpy types
    assert common_type(np.float32, float) is np.float32
    assert common_type(int, np.float32) is np.float32


def test_is_convertible():
    assert is_convertible(int, int)
    assert is_convertible(bool, int)
    assert is_convertible(int, float)
    assert is_convertible(Fraction, float)
    assert is_convertible(int, Decimal)

    assert not is_convertible(float, int)
    assert not is_convertible(complex, float)
    assert not is_convertible(float, Decimal)


def test_is_convertible_numpy():
    assert is_convertible(np.float32, float)
    assert is_convertible(np.float32, np.float64)
    assert is_convertible(int, np.float64)

    assert not is_convertible(np.float64, np.float32)
    assert not is_convertible(np.float64, int)
    assert not is_convertible(np.float64, Decimal)


def test_convert():
    v = convert(1, float)
    assert v == 1.0
    assert type(v) is float

    f = 2.5
    assert convert(f, float) is f

    with pytest.raises(ConversionError):
        convert(1.5, int)

    # narrowing is rejected even if no information is lost
    with pytest.raises(ConversionError):
        convert(2.0, int)


def test_promote():
    x, y = promote(1, 2.5)
    assert (x, y) == (1.0, 2.5)
    assert type(x) is float
    assert type(y) is float

    assert promote(1, True) == (1, 1)


def test_sqrt():
    assert sqrt(4) == 2.0
    assert sqrt(Fraction(9, 4)) == 1.5

    d = sqrt(Decimal(4))
    assert type(d) is Decimal
    assert d == Decimal(2)

    n = sqrt(np.float32(4))
    assert type(n) is np.float32
    assert n == 2

    with pytest.raises(TypeError):
        sqrt(1j)


def test_error_message():
    with pytest.raises(ConversionError) as e:
        convert(1.5, int)
    assert e.value.message == "Can't implicitly convert float to int"
    assert str(e.value) == e.value.message


def test_error_exitcode():
    assert Error("x").exitcode == 1
    assert Error("x", exitcode=3).exitcode == 3
    assert ConversionError("x").exitcode == 1
