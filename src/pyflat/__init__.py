"""Generic 2D geometry primitives: points and vectors over any numeric element type."""

__version__ = "0.1"

from .errors import ConversionError, Error, ShapeError
from .numeric import common_type, is_convertible
from .vector import Vector, length, normalized
from .point import Point
from .ordering import (
    lex_compare,
    lex_greater,
    lex_greater_equal,
    lex_less,
    lex_less_equal,
    lexicographic_key,
)

__all__ = [
    "Vector",
    "Point",
    "length",
    "normalized",
    "lexicographic_key",
    "lex_less",
    "lex_greater",
    "lex_less_equal",
    "lex_greater_equal",
    "lex_compare",
    "common_type",
    "is_convertible",
    "Error",
    "ConversionError",
    "ShapeError",
]
