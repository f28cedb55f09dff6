"""
Exceptions raised by pyflat.

Operations on incompatible shapes (e.g. adding two points) are not
reported here: they return NotImplemented and Python raises TypeError.
"""


class Error(Exception):
    def __init__(self, message: str, exitcode: int = 1):
        super().__init__(message)
        self.message = message
        self.exitcode = exitcode


class ConversionError(Error, TypeError):
    """
    Element type can't be converted implicitly,
    or two element types have no common type.
    """


class ShapeError(Error, ValueError):
    pass
