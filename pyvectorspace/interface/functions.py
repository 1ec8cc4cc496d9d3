"""
The vector-space protocol as free functions.

Generic algorithms call these; each one resolves the adapter for the type
of its first vector argument and forwards. For two-vector operations that
argument is the one being written to (w in add(w, v, ...)), so the result
kind follows the target.

Conventions:
    add(w, v, a, b)          b*w + a*v
    inner(v, w)              conjugate-linear in v
    *_inplace(...)           mutate the target, return it
    *_maybe_inplace(...)     may reuse the target; use only the return value
"""

from __future__ import annotations

from numbers import Number
from typing import Any
import numpy as np

from pyvectorspace.core.tolerances import select_tolerance
from pyvectorspace.interface._ops import ops_for


def scalartype(v: Any) -> Any:
    """Scalar field of v (numpy dtype or torch dtype)."""
    return ops_for(v, 'scalartype').scalartype(v)


def promote_scalartypes(*types: Any) -> Any:
    """
    Common scalar type of several scalar types.

    Identical types are returned unchanged (this covers torch dtypes);
    otherwise numpy promotion applies. Incompatible families surface
    numpy's own error.
    """
    first = types[0]
    if all(t == first for t in types[1:]):
        return first
    return np.result_type(*types)


def zerovector(v: Any, dtype: Any = None) -> Any:
    """
    New zero vector shaped like v.

    Args:
        v: Template vector
        dtype: Scalar type of the result; defaults to scalartype(v)
    """
    return ops_for(v, 'zerovector').zerovector(v, dtype)


def zerovector_inplace(v: Any) -> Any:
    return ops_for(v, 'zerovector_inplace').zerovector_inplace(v)


def zerovector_maybe_inplace(v: Any) -> Any:
    return ops_for(v, 'zerovector_maybe_inplace').zerovector_maybe_inplace(v)


def scale(v: Any, a: Number) -> Any:
    """New vector a*v."""
    return ops_for(v, 'scale').scale(v, a)


def scale_inplace(v: Any, a: Number) -> Any:
    """v <- a*v, returns v."""
    return ops_for(v, 'scale_inplace').scale_inplace(v, a)


def scale_into(w: Any, v: Any, a: Number) -> Any:
    """w <- a*v, returns w."""
    return ops_for(w, 'scale_into').scale_into(w, v, a)


def scale_maybe_inplace(v: Any, a: Number) -> Any:
    """a*v, possibly stored in v. Discard v and use the returned value."""
    return ops_for(v, 'scale_maybe_inplace').scale_maybe_inplace(v, a)


def scale_into_maybe_inplace(w: Any, v: Any, a: Number) -> Any:
    """a*v, possibly stored in w. Discard w and use the returned value."""
    return ops_for(w, 'scale_into_maybe_inplace').scale_into_maybe_inplace(w, v, a)


def add(w: Any, v: Any, a: Number = 1, b: Number = 1) -> Any:
    """New vector b*w + a*v."""
    return ops_for(w, 'add').add(w, v, a, b)


def add_inplace(w: Any, v: Any, a: Number = 1, b: Number = 1) -> Any:
    """w <- b*w + a*v, returns w."""
    return ops_for(w, 'add_inplace').add_inplace(w, v, a, b)


def add_maybe_inplace(w: Any, v: Any, a: Number = 1, b: Number = 1) -> Any:
    """b*w + a*v, possibly stored in w. Discard w and use the returned value."""
    return ops_for(w, 'add_maybe_inplace').add_maybe_inplace(w, v, a, b)


def inner(v: Any, w: Any) -> Any:
    """Inner product <v, w>, conjugating v."""
    return ops_for(v, 'inner').inner(v, w)


def norm(v: Any) -> float:
    """Euclidean norm of v."""
    return ops_for(v, 'norm').norm(v)


def similar(v: Any) -> Any:
    """Vector shaped like v with unspecified contents."""
    return ops_for(v, 'similar').similar(v)


def copy(v: Any) -> Any:
    return ops_for(v, 'copy').copy(v)


def copy_into(w: Any, v: Any) -> Any:
    """Copy the contents of v into w, returns w."""
    return ops_for(w, 'copy_into').copy_into(w, v)


def ldiv(a: Number, v: Any) -> Any:
    """Left division a \\ v = a^-1 * v."""
    return ops_for(v, 'ldiv').ldiv(a, v)


def isapprox(v: Any, w: Any, rtol: float | None = None, atol: float = 0.0) -> bool:
    """
    Approximate equality in norm.

    Uses the formula: norm(v - w) <= max(atol, rtol * max(norm(v), norm(w)))

    Args:
        v: First vector
        w: Second vector
        rtol: Relative tolerance. Defaults to sqrt(eps) of the promoted
              scalar type when atol is 0, and to 0 otherwise.
        atol: Absolute tolerance

    Returns:
        True if v and w are close
    """
    if rtol is None:
        if atol > 0:
            rtol = 0.0
        else:
            dtype = promote_scalartypes(scalartype(v), scalartype(w))
            rtol = select_tolerance(dtype).rtol
    difference = norm(add(v, w, -1, 1))
    return difference <= max(atol, rtol * max(norm(v), norm(w)))
