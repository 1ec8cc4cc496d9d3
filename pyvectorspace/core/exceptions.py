"""
Exception hierarchy for pyvectorspace.

All exceptions inherit from VectorSpaceError to allow catching any
library-specific error. Errors raised by element vectors themselves
(numpy casting errors, torch runtime errors, ...) are never wrapped:
they reach the caller unchanged.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class VectorSpaceError(Exception):
    """Base exception for all pyvectorspace errors."""
    pass


class ValidationError(VectorSpaceError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks, e.g. an
    empty element list or a flat numeric array passed where a sequence
    of element vectors was expected.
    """
    pass


class DimensionError(ValidationError):
    """
    Vector dimensions are incorrect or inconsistent.

    Raised when the structure of two operands doesn't match.
    """
    pass


class LengthMismatchError(DimensionError):
    """
    Two composite vectors have a different number of elements.

    Raised before any element is touched, so in-place operations never
    leave their target partially updated.

    Attributes:
        operation: Name of the operation that was attempted
        left_length: Number of elements of the first composite operand
        right_length: Number of elements of the second composite operand
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        left_length: int | None = None,
        right_length: int | None = None
    ):
        super().__init__(message)
        self.operation = operation
        self.left_length = left_length
        self.right_length = right_length


class UnsupportedVectorError(VectorSpaceError, TypeError):
    """
    A value does not implement the requested vector-space operation.

    Raised when no element adapter is registered for a type and the type
    does not implement the VectorSpace protocol itself, or when an
    in-place operation is requested on an immutable value (e.g. a scalar).

    Attributes:
        vector_type: The offending type
        operation: Name of the operation that was attempted
    """

    def __init__(
        self,
        message: str,
        vector_type: type | None = None,
        operation: str | None = None
    ):
        super().__init__(message)
        self.vector_type = vector_type
        self.operation = operation


class MixedScalarTypeWarning(UserWarning):
    """
    Elements of a composite vector have different scalar types.

    This is a notice, not a validation failure: results follow the
    promotion rules of the element types themselves.
    """
    pass
