"""
errors.py

Exception hierarchy for world file handling. Every failure raised by the
package derives from `WorldFileError`, and each kind also derives from the
matching builtin so callers that already catch `OSError` or `ValueError`
keep working.

- `WorldFileIOError` : a file or stream could not be opened, read or written
- `ParseError`       : fewer than six lines, or a line is not a number
- `ValidationError`  : parsed fine but a scale coefficient is zero
- `DomainError`      : inverse mapping of a singular transform
"""
from typing import Optional


class WorldFileError(Exception):
    """Base class for all world file errors."""


class WorldFileIOError(WorldFileError, OSError):
    """Underlying resource could not be opened, read, or written."""

    def __init__(self, message: str, path=None):
        super().__init__(message)
        self.path = path


class ParseError(WorldFileError, ValueError):
    """Malformed world file text.

    `line_number` is 1-based; it is None when the text is simply too short.
    """

    def __init__(self, message: str, line_number: Optional[int] = None, line: Optional[str] = None):
        super().__init__(message)
        self.line_number = line_number
        self.line = line


class ValidationError(WorldFileError, ValueError):
    """Coefficients parsed but violate the transform invariants."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class DomainError(WorldFileError, ArithmeticError):
    """Inverse mapping requested on a transform with zero determinant."""

    def __init__(self, message: str, determinant: float = 0.0):
        super().__init__(message)
        self.determinant = determinant
