"""
Element adapters for numpy arrays and scalars.

NumpyOps is the CPU reference implementation of the protocol:
    - out-of-place operations follow numpy's type promotion
    - in-place operations write through out= and keep numpy's
      'same_kind' casting rule, so e.g. scaling a float64 array in place
      by a complex number raises numpy's UFuncTypeError unchanged
    - maybe-in-place operations reuse the array exactly when it is
      writeable and the result needs no dtype promotion

ScalarOps treats Python and numpy scalars as one-dimensional vectors.
Scalars are immutable, so in-place operations are unsupported and
maybe-in-place operations always return a new value.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import NDArray

from pyvectorspace.core.exceptions import UnsupportedVectorError
from pyvectorspace.interface._ops import ElementOps


def _can_reuse(v: NDArray, result_dtype: np.dtype) -> bool:
    """True if the result of an operation can be written into v."""
    return bool(v.flags.writeable) and np.dtype(result_dtype) == v.dtype


class NumpyOps(ElementOps):
    """Vector-space protocol for numpy.ndarray (any shape, entries flattened)."""

    @property
    def name(self) -> str:
        return 'numpy'

    def scalartype(self, v: NDArray) -> np.dtype:
        return v.dtype

    def zerovector(self, v: NDArray, dtype: Any = None) -> NDArray:
        return np.zeros_like(v, dtype=dtype)

    def zerovector_inplace(self, v: NDArray) -> NDArray:
        v.fill(0)
        return v

    def zerovector_maybe_inplace(self, v: NDArray) -> NDArray:
        if v.flags.writeable:
            return self.zerovector_inplace(v)
        return self.zerovector(v)

    def scale(self, v: NDArray, a) -> NDArray:
        return np.multiply(v, a)

    def scale_inplace(self, v: NDArray, a) -> NDArray:
        np.multiply(v, a, out=v)
        return v

    def scale_into(self, w: NDArray, v: NDArray, a) -> NDArray:
        np.multiply(v, a, out=w)
        return w

    def scale_maybe_inplace(self, v: NDArray, a) -> NDArray:
        if _can_reuse(v, np.result_type(v, a)):
            return self.scale_inplace(v, a)
        return self.scale(v, a)

    def scale_into_maybe_inplace(self, w: NDArray, v: NDArray, a) -> NDArray:
        if _can_reuse(w, np.result_type(v, a)):
            return self.scale_into(w, v, a)
        return self.scale(v, a)

    def add(self, w: NDArray, v: NDArray, a=1, b=1) -> NDArray:
        return np.add(np.multiply(w, b), np.multiply(v, a))

    def add_inplace(self, w: NDArray, v: NDArray, a=1, b=1) -> NDArray:
        # both terms are formed before w is written, so v may alias w
        np.add(np.multiply(w, b), np.multiply(v, a), out=w)
        return w

    def add_maybe_inplace(self, w: NDArray, v: NDArray, a=1, b=1) -> NDArray:
        if _can_reuse(w, np.result_type(w, v, a, b)):
            return self.add_inplace(w, v, a, b)
        return self.add(w, v, a, b)

    def inner(self, v: NDArray, w: NDArray):
        # vdot flattens and conjugates its first argument
        return np.vdot(v, w)

    def norm(self, v: NDArray) -> float:
        return float(np.linalg.norm(v))

    def similar(self, v: NDArray) -> NDArray:
        return np.empty_like(v)

    def copy(self, v: NDArray) -> NDArray:
        return v.copy()

    def copy_into(self, w: NDArray, v: NDArray) -> NDArray:
        np.copyto(w, v)
        return w

    def ldiv(self, a, v: NDArray) -> NDArray:
        return np.divide(v, a)


class ScalarOps(ElementOps):
    """Vector-space protocol for numbers.Number (Python and numpy scalars)."""

    @property
    def name(self) -> str:
        return 'scalar'

    def scalartype(self, v) -> np.dtype:
        return np.result_type(v)

    def zerovector(self, v, dtype: Any = None):
        if dtype is None:
            dtype = self.scalartype(v)
        return np.dtype(dtype).type(0)

    def zerovector_inplace(self, v):
        raise self._immutable(v, 'zerovector_inplace')

    def zerovector_maybe_inplace(self, v):
        return self.zerovector(v)

    def scale(self, v, a):
        return v * a

    def scale_inplace(self, v, a):
        raise self._immutable(v, 'scale_inplace')

    def scale_into(self, w, v, a):
        raise self._immutable(w, 'scale_into')

    def scale_maybe_inplace(self, v, a):
        return v * a

    def scale_into_maybe_inplace(self, w, v, a):
        return v * a

    def add(self, w, v, a=1, b=1):
        return w * b + v * a

    def add_inplace(self, w, v, a=1, b=1):
        raise self._immutable(w, 'add_inplace')

    def add_maybe_inplace(self, w, v, a=1, b=1):
        return w * b + v * a

    def inner(self, v, w):
        return v.conjugate() * w

    def norm(self, v) -> float:
        return float(abs(v))

    def similar(self, v):
        return self.zerovector(v)

    def copy(self, v):
        return v

    def copy_into(self, w, v):
        raise self._immutable(w, 'copy_into')

    def ldiv(self, a, v):
        return v / a

    @staticmethod
    def _immutable(v, operation: str) -> UnsupportedVectorError:
        return UnsupportedVectorError(
            f"{operation}: scalars of type {type(v).__name__} are immutable; "
            f"use the out-of-place or maybe-in-place form",
            vector_type=type(v),
            operation=operation,
        )
