"""
Vector: a free 2D displacement, it has magnitude and direction
but no fixed location.
"""
import numbers
from typing import Any, Generic

import numpy as np

from pyflat.geometry import Coordinates, T, build
from pyflat.numeric import common_type, sqrt


def _is_scalar(value: Any) -> bool:
    return isinstance(value, (numbers.Number, np.generic))


class Vector(Coordinates[T], Generic[T]):
    """
    Supports vector addition and subtraction, and scaling by a scalar.
    Operands may have different element types; result element type
    is their common type (see pyflat.numeric.common_type).

    In-place operations keep element type of bound vectors (e.g. Vector[int]),
    so right operand must be implicitly convertible to it, and so must
    the result: `Vector[int](1, 2) /= 2` raises ConversionError.

    Division is not checked for zero, it behaves as element type division does.
    """

    def __add__(self, other: "Vector") -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        return build(
            Vector, self.x + other.x, self.y + other.y,
            self.element_type(), other.element_type()
        )

    def __sub__(self, other: "Vector") -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        return build(
            Vector, self.x - other.x, self.y - other.y,
            self.element_type(), other.element_type()
        )

    def __mul__(self, scalar: Any) -> "Vector":
        if not _is_scalar(scalar):
            return NotImplemented
        return build(
            Vector, self.x * scalar, self.y * scalar,
            self.element_type(), type(scalar)
        )

    def __rmul__(self, scalar: Any) -> "Vector":
        return self.__mul__(scalar)

    def __truediv__(self, scalar: Any) -> "Vector":
        if not _is_scalar(scalar):
            return NotImplemented
        return build(
            Vector, self.x / scalar, self.y / scalar,
            self.element_type(), type(scalar)
        )

    def __iadd__(self, other: "Vector") -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        self._require_convertible(other.element_type())
        self._store(self.x + other.x, self.y + other.y)
        return self

    def __isub__(self, other: "Vector") -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        self._require_convertible(other.element_type())
        self._store(self.x - other.x, self.y - other.y)
        return self

    def __imul__(self, scalar: Any) -> "Vector":
        if not _is_scalar(scalar):
            return NotImplemented
        self._require_convertible(type(scalar))
        self._store(self.x * scalar, self.y * scalar)
        return self

    def __itruediv__(self, scalar: Any) -> "Vector":
        if not _is_scalar(scalar):
            return NotImplemented
        self._require_convertible(type(scalar))
        self._store(self.x / scalar, self.y / scalar)
        return self


def length(vector: Vector):
    """
    Euclidean length, square root is taken with element type's own sqrt.
    For integral vectors that is math.sqrt, so result is float.
    """
    if not isinstance(vector, Vector):
        raise TypeError(f"Expected Vector, got {type(vector).__name__}")
    return sqrt(vector.x * vector.x + vector.y * vector.y)


def normalized(vector: Vector) -> Vector:
    """
    Unit vector of the same direction.
    Zero vector is returned as is (well, as zero vector of the type division
    would give), rather than divided by its zero length.
    """
    norm = length(vector)
    if norm == 0:
        return Vector[common_type(vector.element_type(), type(norm))]()
    return vector / norm
