"""
Input validation utilities for pyvectorspace.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent truncation or extension of element sequences
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter or operation names included in all error messages

Scalar-field compatibility of elements is deliberately NOT validated here:
whatever the element types do with mixed fields is what the caller gets.
"""

from numbers import Number
from typing import Any, Sequence

import numpy as np

from pyvectorspace.core.exceptions import (
    LengthMismatchError,
    ValidationError,
)


def check_same_length(left: Sequence[Any], right: Sequence[Any], operation: str) -> None:
    """
    Verify two composite operands hold the same number of elements.

    Args:
        left: First composite operand
        right: Second composite operand
        operation: Operation name for error messages

    Raises:
        LengthMismatchError: If the element counts differ
    """
    n_left, n_right = len(left), len(right)
    if n_left != n_right:
        raise LengthMismatchError(
            f"{operation}: composite vectors have different lengths "
            f"({n_left} vs {n_right})",
            operation=operation,
            left_length=n_left,
            right_length=n_right,
        )


def check_nonempty(elements: Sequence[Any], name: str) -> None:
    """
    Verify a composite is built from at least one element.

    Raises:
        ValidationError: If elements is empty
    """
    if len(elements) == 0:
        raise ValidationError(f"{name}: requires at least 1 element, got 0")


def check_homogeneous(elements: Sequence[Any], name: str) -> type:
    """
    Verify all elements share one Python type.

    Args:
        elements: Non-empty element sequence
        name: Parameter name for error messages

    Returns:
        The shared element type

    Raises:
        ValidationError: If element types differ
    """
    element_type = type(elements[0])
    others = sorted({type(e).__name__ for e in elements if type(e) is not element_type})
    if others:
        raise ValidationError(
            f"{name}: homogeneous storage requires one element type, "
            f"got {element_type.__name__} and {', '.join(others)}"
        )
    return element_type


def check_not_flat_numeric(elements: Any, name: str) -> None:
    """
    Reject a flat numeric array where a sequence of element vectors is expected.

    A numeric ndarray, or a sequence whose entries are all plain numbers,
    is one vector, not many scalar elements. Wrapping it is the job of
    from_array().

    Raises:
        ValidationError: If elements is a flat numeric array
    """
    if isinstance(elements, np.ndarray):
        flat = elements.dtype != object
        shape = elements.shape
    else:
        flat = len(elements) > 0 and all(isinstance(e, Number) for e in elements)
        shape = (len(elements),)
    if flat:
        raise ValidationError(
            f"{name}: got a numeric array of shape {shape}; "
            f"use from_array() to wrap it as a single element"
        )
