"""
Core infrastructure for pyvectorspace.

This module provides shared abstractions and utilities used by the
element adapters (interface) and the composite vector (recursive).

Key components:
    protocols: VectorSpace protocol
    exceptions: Exception and warning hierarchy
    validation: Input validators
    tolerances: Precision tiers for approximate comparison
"""

from pyvectorspace.core.protocols import VectorSpace
from pyvectorspace.core.exceptions import (
    VectorSpaceError,
    ValidationError,
    DimensionError,
    LengthMismatchError,
    UnsupportedVectorError,
    MixedScalarTypeWarning,
)
from pyvectorspace.core.tolerances import (
    ToleranceTier,
    FP64,
    FP32,
    FP16,
    machine_epsilon,
    select_tolerance,
)

__all__ = [
    # Protocols
    "VectorSpace",
    # Exceptions
    "VectorSpaceError",
    "ValidationError",
    "DimensionError",
    "LengthMismatchError",
    "UnsupportedVectorError",
    "MixedScalarTypeWarning",
    # Tolerances
    "ToleranceTier",
    "FP64",
    "FP32",
    "FP16",
    "machine_epsilon",
    "select_tolerance",
]
