"""
Point: a fixed 2D position.

Points only combine with vectors:
* point + vector -> point (translation)
* point - vector -> point
* point - point -> vector (displacement between them)

Adding two points, as well as scaling a point, is meaningless and raises TypeError.
"""
from typing import Generic, Union, overload

from pyflat.geometry import Coordinates, T, build
from pyflat.vector import Vector


class Point(Coordinates[T], Generic[T]):

    def __add__(self, other: Vector) -> "Point":
        if not isinstance(other, Vector):
            return NotImplemented
        return build(
            Point, self.x + other.x, self.y + other.y,
            self.element_type(), other.element_type()
        )

    @overload
    def __sub__(self, other: "Point") -> Vector: ...

    @overload
    def __sub__(self, other: Vector) -> "Point": ...

    def __sub__(self, other: Union["Point", Vector]) -> Union["Point", Vector]:
        if isinstance(other, Point):
            shape = Vector
        elif isinstance(other, Vector):
            shape = Point
        else:
            return NotImplemented
        return build(
            shape, self.x - other.x, self.y - other.y,
            self.element_type(), other.element_type()
        )

    def __iadd__(self, other: Vector) -> "Point":
        if not isinstance(other, Vector):
            return NotImplemented
        self._require_convertible(other.element_type())
        self._store(self.x + other.x, self.y + other.y)
        return self

    def __isub__(self, other: Vector) -> "Point":
        if not isinstance(other, Vector):
            return NotImplemented
        self._require_convertible(other.element_type())
        self._store(self.x - other.x, self.y - other.y)
        return self
