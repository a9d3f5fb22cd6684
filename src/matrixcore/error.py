"""
Error handling for matrixcore.

Every failure raised by the library is a :class:`MatrixError` carrying a
numeric code. The concrete subclasses also derive from the matching builtin
exception, so ``except IndexError`` or ``except ValueError`` keep working
for callers that do not know about this module.
"""

from __future__ import annotations

from typing import Optional


# =============================================================================
# Error Codes
# =============================================================================

# Success
MATRIX_OK = 0

# General errors (1-9)
MATRIX_ERROR_UNKNOWN = 1
MATRIX_ERROR_INTERNAL = 2

# Argument errors (10-19)
MATRIX_ERROR_INVALID_ARGUMENT = 10
MATRIX_ERROR_DIMENSION_MISMATCH = 11
MATRIX_ERROR_INDEX_OUT_OF_BOUNDS = 14
MATRIX_ERROR_UNBOUND_LABEL = 15

# Type errors (20-29)
MATRIX_ERROR_TYPE_ERROR = 20

# Format errors (30-39)
MATRIX_ERROR_FORMAT = 30


_ERROR_MESSAGES = {
    MATRIX_OK: "Success",
    MATRIX_ERROR_UNKNOWN: "Unknown error",
    MATRIX_ERROR_INTERNAL: "Internal error",
    MATRIX_ERROR_INVALID_ARGUMENT: "Invalid argument",
    MATRIX_ERROR_DIMENSION_MISMATCH: "Dimension mismatch",
    MATRIX_ERROR_INDEX_OUT_OF_BOUNDS: "Index out of bounds",
    MATRIX_ERROR_UNBOUND_LABEL: "Unbound label",
    MATRIX_ERROR_TYPE_ERROR: "Type error",
    MATRIX_ERROR_FORMAT: "Malformed matrix document",
}


# =============================================================================
# Exception Classes
# =============================================================================

class MatrixError(Exception):
    """
    Base exception for all matrixcore errors.

    Attributes:
        code: Numeric error code (one of the ``MATRIX_ERROR_*`` constants)
        message: Human readable description
    """

    def __init__(self, code: int, message: Optional[str] = None):
        self.code = code
        if message is None:
            message = _ERROR_MESSAGES.get(code, f"Unknown error (code={code})")
        self.message = message
        super().__init__(message)

    @classmethod
    def from_code(cls, code: int, context: str = "") -> "MatrixError":
        """Create exception from error code with optional context."""
        base_msg = _ERROR_MESSAGES.get(code, "Unknown error")
        msg = f"{context}: {base_msg}" if context else base_msg
        return cls(code, msg)


class IndexOutOfBoundsError(MatrixError, IndexError):
    """A checked accessor received an index outside ``[0, cardinality)``."""

    def __init__(self, index: int, cardinality: int):
        self.index = index
        self.cardinality = cardinality
        super().__init__(
            MATRIX_ERROR_INDEX_OUT_OF_BOUNDS,
            f"Index {index} is outside allowable range of [0,{cardinality})",
        )


class CardinalityError(MatrixError, ValueError):
    """Two operands (or an operand and a bulk input) disagree in size."""

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(
            MATRIX_ERROR_DIMENSION_MISMATCH,
            f"Required cardinality {expected} but got {actual}",
        )


class UnboundLabelError(MatrixError, LookupError):
    """A label accessor was used without bindings, or with an unknown label."""

    def __init__(self, label: Optional[str] = None):
        self.label = label
        if label is None:
            message = "No label bindings registered"
        else:
            message = f"Label {label!r} is not bound"
        super().__init__(MATRIX_ERROR_UNBOUND_LABEL, message)


class MatrixFormatError(MatrixError, ValueError):
    """A serialized matrix document could not be decoded."""

    def __init__(self, message: str):
        super().__init__(MATRIX_ERROR_FORMAT, message)


# =============================================================================
# Checking Functions
# =============================================================================

def check_index(index: int, cardinality: int) -> None:
    """
    Raise if ``index`` is not a valid position for ``cardinality`` elements.

    Negative indices are rejected, never wrapped.

    Raises:
        IndexOutOfBoundsError: If ``index < 0`` or ``index >= cardinality``
    """
    if index < 0 or index >= cardinality:
        raise IndexOutOfBoundsError(index, cardinality)


def check_cardinality(expected: int, actual: int) -> None:
    """
    Raise if two sizes differ.

    Raises:
        CardinalityError: If ``expected != actual``
    """
    if expected != actual:
        raise CardinalityError(expected, actual)
