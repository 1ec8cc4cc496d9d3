"""
Vector-space operation protocol.

Free functions that generic Krylov-type algorithms are written against,
plus the adapter registry that maps element types to implementations.

Public API:
    scalartype(v)                  - scalar field
    zerovector(v, dtype)           - zero vector shaped like v
    scale(v, a), add(w, v, a, b)   - out-of-place arithmetic
    *_inplace, *_maybe_inplace     - mutating / possibly mutating variants
    inner(v, w), norm(v)           - inner product and Euclidean norm
    similar(v), copy(v), copy_into(w, v), ldiv(a, v)
    isapprox(v, w)                 - approximate equality in norm
    register_ops(cls, ops)         - support a new element type

Built-in element types: numpy.ndarray, numbers.Number, torch.Tensor
(once torch is imported), and anything implementing VectorSpace.
"""

from numbers import Number
import numpy as np

from pyvectorspace.interface._ops import (
    ElementOps,
    ProtocolOps,
    register_ops,
    ops_for,
)
from pyvectorspace.interface._numpy import NumpyOps, ScalarOps
from pyvectorspace.interface.functions import (
    scalartype,
    promote_scalartypes,
    zerovector,
    zerovector_inplace,
    zerovector_maybe_inplace,
    scale,
    scale_inplace,
    scale_into,
    scale_maybe_inplace,
    scale_into_maybe_inplace,
    add,
    add_inplace,
    add_maybe_inplace,
    inner,
    norm,
    similar,
    copy,
    copy_into,
    ldiv,
    isapprox,
)

register_ops(np.ndarray, NumpyOps())
register_ops(Number, ScalarOps())

__all__ = [
    # Adapters
    "ElementOps",
    "ProtocolOps",
    "NumpyOps",
    "ScalarOps",
    "register_ops",
    "ops_for",
    # Protocol
    "scalartype",
    "promote_scalartypes",
    "zerovector",
    "zerovector_inplace",
    "zerovector_maybe_inplace",
    "scale",
    "scale_inplace",
    "scale_into",
    "scale_maybe_inplace",
    "scale_into_maybe_inplace",
    "add",
    "add_inplace",
    "add_maybe_inplace",
    "inner",
    "norm",
    "similar",
    "copy",
    "copy_into",
    "ldiv",
    "isapprox",
]
