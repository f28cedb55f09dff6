"""
Library of geometry classes.

Coordinates holds what Vector and Point have in common: construction,
element type binding, indexing, comparison and text output.

Coordinate types are pydantic generic models. A parameterized type,
e.g. Vector[float], binds its element type: every coordinate stored into
it is converted to that type, and only widening conversions are accepted.
The plain type, e.g. Vector, infers the element type from the coordinates
it is constructed with.
"""
from typing import Any, Generic, Iterator, Optional, Tuple, Type, TypeVar

import numpy as np
from pydantic import BaseModel, ConfigDict

from pyflat.errors import ConversionError, ShapeError
from pyflat.numeric import common_type, convert, is_convertible, promote

T = TypeVar("T")


def _xy(x, y):
    return x, y


class Coordinates(BaseModel, Generic[T]):
    model_config = ConfigDict(arbitrary_types_allowed=True)

    # Makes numpy scalars hand binary operators over to us.
    __array_ufunc__ = None

    x: T
    y: T

    def __init__(self, *args: Any, **kwargs: Any):
        """
        Supported forms:
        * `Vector()`: zero value of the element type,
          `int` zeros for the plain type.
        * `Vector(x, y)` or `Vector(x=x, y=y)`
        * `Vector(other)`: conversion from another Vector,
          possibly of different element type.
        """
        if len(args) == 1 and not kwargs:
            x, y = type(self)._convert_from(args[0])
        elif not args and not kwargs:
            bound = type(self).bound_type()
            x = y = bound() if bound is not None else 0
        else:
            x, y = type(self)._coerce(*_xy(*args, **kwargs))
        super().__init__(x=x, y=y)

    @classmethod
    def shape(cls) -> type:
        """
        :return: class without element type parameter, e.g. Vector for Vector[int].
        """
        return cls.__pydantic_generic_metadata__["origin"] or cls

    @classmethod
    def bound_type(cls) -> Optional[type]:
        """
        :return: element type this class is parameterized with,
            None for plain Vector and Point.
        """
        args = cls.__pydantic_generic_metadata__["args"]
        if not args or not isinstance(args[0], type):
            return None
        return args[0]

    @classmethod
    def from_xy(cls, x, y):
        return cls(x, y)

    @classmethod
    def from_numpy(cls, npa: np.ndarray):
        if npa.shape != (2,):
            raise ShapeError(f"Expected array of shape (2,), got {npa.shape}")
        x, y = npa
        return cls(x, y)

    @classmethod
    def _coerce(cls, x, y) -> Tuple[Any, Any]:
        bound = cls.bound_type()
        if bound is None:
            return promote(x, y)
        return convert(x, bound), convert(y, bound)

    @classmethod
    def _convert_from(cls, other: Any) -> Tuple[Any, Any]:
        if not isinstance(other, Coordinates) or other.shape() is not cls.shape():
            raise TypeError(
                f"Can't convert {type(other).__name__} to {cls.__name__}"
            )

        bound = cls.bound_type()
        if bound is None:
            return other.x, other.y

        src = other.element_type()
        if not is_convertible(src, bound):
            raise ConversionError(
                f"Can't implicitly convert {type(other).__name__} to {cls.__name__}"
            )
        return convert(other.x, bound), convert(other.y, bound)

    def element_type(self) -> type:
        bound = self.bound_type()
        if bound is not None:
            return bound
        return common_type(type(self.x), type(self.y))

    def astype(self, element_type: type):
        """
        Explicit conversion, narrowing included: each coordinate
        is converted by `element_type` constructor,
        e.g. Vector(2.7, 3.1).astype(int) is Vector[int](2, 3).
        """
        target = self.shape()[element_type]
        return target(element_type(self.x), element_type(self.y))

    def assign(self, other: "Coordinates"):
        """
        Copies coordinates of other instance of the same shape.
        Other element type must be implicitly convertible to ours.
        :return: self
        """
        self._store(*type(self)._convert_from(other))
        return self

    def to_vec(self) -> Tuple[T, T]:
        return self.x, self.y

    def to_numpy(self, dtype=None) -> np.ndarray:
        return np.array([self.x, self.y], dtype=dtype)

    def _require_convertible(self, src: type):
        bound = self.bound_type()
        if bound is not None and not is_convertible(src, bound):
            raise ConversionError(
                f"Can't implicitly convert {src.__name__} to {bound.__name__}"
            )

    def _store(self, x, y):
        x, y = type(self)._coerce(x, y)
        super().__setattr__("x", x)
        super().__setattr__("y", y)

    def __setattr__(self, name: str, value: Any):
        if name in ("x", "y"):
            bound = self.bound_type()
            if bound is not None:
                value = convert(value, bound)
            else:
                # plain instance: both coordinates keep their common type
                other = "y" if name == "x" else "x"
                value, other_value = promote(value, getattr(self, other))
                super().__setattr__(other, other_value)
        super().__setattr__(name, value)

    # indexing: 0 is x, 1 is y

    def __getitem__(self, idx: int) -> T:
        if idx == 0:
            return self.x
        elif idx == 1:
            return self.y
        else:
            raise IndexError(f"{type(self).__name__} index out of range: {idx}")

    def __setitem__(self, idx: int, value: T):
        if idx == 0:
            self.x = value
        elif idx == 1:
            self.y = value
        else:
            raise IndexError(f"{type(self).__name__} index out of range: {idx}")

    def __len__(self) -> int:
        return 2

    def __iter__(self) -> Iterator[T]:
        yield self.x
        yield self.y

    # relational operators, product order.
    # Note, it is partial: neither (1, 5) <= (5, 1) nor (5, 1) <= (1, 5).
    # See pyflat.ordering for total order.

    def _same_shape(self, other: Any) -> bool:
        return isinstance(other, Coordinates) and other.shape() is self.shape()

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Coordinates):
            return NotImplemented
        if not self._same_shape(other):
            return False
        return bool(self.x == other.x and self.y == other.y)

    def __ne__(self, other: Any) -> bool:
        res = self.__eq__(other)
        if res is NotImplemented:
            return res
        return not res

    def __le__(self, other: Any) -> bool:
        if not self._same_shape(other):
            return NotImplemented
        return bool(self.x <= other.x and self.y <= other.y)

    def __ge__(self, other: Any) -> bool:
        if not self._same_shape(other):
            return NotImplemented
        return other.__le__(self)

    def __lt__(self, other: Any) -> bool:
        if not self._same_shape(other):
            return NotImplemented
        return self.__le__(other) and self.__ne__(other)

    def __gt__(self, other: Any) -> bool:
        if not self._same_shape(other):
            return NotImplemented
        return other.__lt__(self)

    # text output

    def __str__(self) -> str:
        return f"{self.x}, {self.y}"

    def __format__(self, format_spec: str) -> str:
        if not format_spec:
            return str(self)
        return f"{self.x:{format_spec}}, {self.y:{format_spec}}"


def build(shape: Type[Coordinates], x, y, *operand_types: type) -> Coordinates:
    """
    Makes result of a binary operation.
    Element type is common for operands and computed coordinates,
    so that e.g. Vector[int] / 2 gives Vector[float].
    """
    element_type = common_type(*operand_types, type(x), type(y))
    return shape[element_type](x, y)
