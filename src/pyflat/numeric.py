"""
Element type rules shared by Vector and Point.

A coordinate type is bound to an element type (e.g. Vector[float]), and
these helpers decide which element types mix, which one wins,
and when a value may be stored into a bound coordinate type without
losing information.

Promotion follows the numeric tower: bool < int < Fraction < float < complex.
Decimal mixes with bool and int only. numpy scalar types promote the way
numpy promotes them, with Python scalar types treated as weak, the same way
numpy treats Python scalars.
"""
import logging
import math
import numbers
from decimal import Decimal
from functools import reduce
from typing import Any, Optional, Tuple

import numpy as np

from pyflat.errors import ConversionError

LOG = logging.getLogger(__name__)

# bool goes first: it is registered as Integral too.
_TOWER = (bool, numbers.Integral, numbers.Rational, numbers.Real, numbers.Complex)


def _rank(t: type) -> Optional[int]:
    for i, abc in enumerate(_TOWER):
        if issubclass(t, abc):
            return i
    return None


def _is_numpy(t: type) -> bool:
    return issubclass(t, np.generic)


def _no_common_type(a: type, b: type) -> ConversionError:
    return ConversionError(
        f"No common type for {a.__name__} and {b.__name__}"
    )


def _numpy_common(a: type, b: type) -> type:
    # Python scalar types take part as values, so numpy treats them as weak.
    args = [t if _is_numpy(t) else t() for t in (a, b)]
    try:
        res = np.result_type(*args)
    except TypeError:
        raise _no_common_type(a, b)

    if res == np.dtype(object):
        raise _no_common_type(a, b)

    LOG.debug(f"numpy promotion: {a.__name__}, {b.__name__} -> {res}")
    return res.type


def _common_pair(a: type, b: type) -> type:
    if a is b:
        return a

    if _is_numpy(a) or _is_numpy(b):
        return _numpy_common(a, b)

    if issubclass(a, b):
        return b
    if issubclass(b, a):
        return a

    if issubclass(b, Decimal):
        a, b = b, a
    if issubclass(a, Decimal):
        if _rank(b) in (0, 1):
            return a
        raise _no_common_type(a, b)

    rank_a, rank_b = _rank(a), _rank(b)
    if rank_a is None or rank_b is None or rank_a == rank_b:
        raise _no_common_type(a, b)

    return a if rank_a > rank_b else b


def common_type(*types: type) -> type:
    """
    Resolves the type binary operations between given element types produce,
    e.g. common_type(int, float) is float.
    :param types: element types, at least one
    :return: the widest of given types
    :raises ConversionError: if types don't mix
    """
    return reduce(_common_pair, types)


def is_convertible(src: type, dst: type) -> bool:
    """
    Checks whether values of `src` type can be stored as `dst` implicitly,
    which only holds for widening conversions.
    """
    if issubclass(src, dst):
        return True

    if _is_numpy(src):
        try:
            dst_dtype = np.dtype(dst)
        except TypeError:
            return False
        if dst_dtype == np.dtype(object):
            return False
        return bool(np.can_cast(src, dst_dtype, casting="safe"))

    try:
        return _common_pair(src, dst) is dst
    except ConversionError:
        return False


def convert(value: Any, dst: type) -> Any:
    src = type(value)
    if src is dst:
        return value

    if not is_convertible(src, dst):
        LOG.debug(f"rejected implicit conversion of {value!r} to {dst.__name__}")
        raise ConversionError(
            f"Can't implicitly convert {src.__name__} to {dst.__name__}"
        )

    return dst(value)


def promote(*values: Any) -> Tuple[Any, ...]:
    """
    Converts all values to their common type.
    """
    dst = common_type(*map(type, values))
    return tuple(convert(v, dst) for v in values)


def sqrt(value: Any) -> Any:
    """
    Square root, computed by the value's own type where it has one:
    numpy for numpy scalars, `sqrt()` method for Decimal.
    """
    if isinstance(value, np.generic):
        return np.sqrt(value)

    own_sqrt = getattr(value, "sqrt", None)
    if callable(own_sqrt):
        return own_sqrt()

    return math.sqrt(value)
