"""
RecursiveVec: composite (direct-sum) vector.

Bundles one or more element vectors into a single value that satisfies the
VectorSpace protocol itself. Every protocol operation is forwarded to each
element through pyvectorspace.interface, then either aggregated (inner:
sum, norm: Euclidean norm of the element norms) or reassembled into a new
composite of the same storage kind. Elements may be composites again.

Two storage kinds share this contract, see storage.py:
    TupleVec  - heterogeneous, tuple storage, read-only indexing
    ListVec   - homogeneous, list storage, read/write indexing

Construction (explicit, never inferred from the element values):
    TupleVec.from_array(x)          x is ONE element
    TupleVec.from_elements([x, y])  each entry is one element
    TupleVec.of(x, y)               each argument is one element

Maybe-in-place policy: the container is always rebuilt around the
element results; each element decides on its own whether it reuses its
storage. Only the returned composite is valid afterwards.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from numbers import Number
from typing import Any, Iterable, Iterator, Sequence
import math
import operator
import warnings

import numpy as np

from pyvectorspace.core.exceptions import (
    MixedScalarTypeWarning,
    UnsupportedVectorError,
)
from pyvectorspace.core.validation import (
    check_nonempty,
    check_not_flat_numeric,
    check_same_length,
)
from pyvectorspace import interface as vi


@dataclass(frozen=True, eq=False, repr=False)
class RecursiveVec(ABC):
    """
    Composite vector over an ordered, fixed-length sequence of elements.

    Construct via factory classmethods, not directly. The number of
    elements never changes after construction. Elements are held by
    reference: in-place operations mutate caller-owned storage.

    Binary operations require the other operand to be a RecursiveVec with
    the same number of elements; the check happens before any element is
    touched. Scalar-field compatibility of elements is not checked.
    """
    _elements: Sequence[Any]

    # numpy scalars and arrays must defer to our reflected operators
    __array_ufunc__ = None

    # === Construction ===

    @classmethod
    def from_array(cls, array: Any) -> RecursiveVec:
        """
        Wrap a single vector as a one-element composite.

        A flat numeric array of length k gives a composite of length 1,
        never k scalar elements. Lists and tuples are converted with
        np.asarray; anything else is held as-is.
        """
        if isinstance(array, (list, tuple)):
            array = np.asarray(array)
        return cls._create([array], 'array')

    @classmethod
    def from_elements(cls, elements: Iterable[Any]) -> RecursiveVec:
        """
        Wrap each entry of a sequence as one element.

        Raises:
            ValidationError: If elements is empty, or is a flat numeric
                array (use from_array for that)
        """
        if not isinstance(elements, np.ndarray):
            elements = list(elements)
        check_not_flat_numeric(elements, 'elements')
        return cls._create(list(elements), 'elements')

    @classmethod
    def of(cls, *elements: Any) -> RecursiveVec:
        """Wrap each positional argument as one element."""
        return cls._create(list(elements), 'elements')

    @classmethod
    def _create(cls, elements: list[Any], name: str) -> RecursiveVec:
        check_nonempty(elements, name)
        cls._check_elements(elements, name)
        _warn_mixed_scalartypes(elements)
        return cls._build(elements)

    @classmethod
    def _check_elements(cls, elements: list[Any], name: str) -> None:
        """Storage-specific validation hook for public constructors."""
        pass

    @classmethod
    @abstractmethod
    def _build(cls, elements: Iterable[Any]) -> RecursiveVec:
        """Assemble a composite of this storage kind without validation."""
        ...

    # === Structure ===

    def __len__(self) -> int:
        return len(self._elements)

    def __getitem__(self, i: int) -> Any:
        return self._elements[operator.index(i)]

    def __iter__(self) -> Iterator[Any]:
        return iter(self._elements)

    @property
    def size(self) -> tuple[int]:
        return (len(self._elements),)

    @property
    def first(self) -> Any:
        return self._elements[0]

    @property
    def last(self) -> Any:
        return self._elements[-1]

    @property
    @abstractmethod
    def element_type(self) -> Any:
        ...

    def __repr__(self) -> str:
        names = ', '.join(type(e).__name__ for e in self._elements)
        return f"{self.__class__.__name__}(n={len(self)}, elements=[{names}])"

    # === Arithmetic operators ===

    def __neg__(self) -> RecursiveVec:
        return self._build([-x for x in self])

    def __add__(self, other: Any) -> RecursiveVec:
        if not isinstance(other, RecursiveVec):
            return NotImplemented
        check_same_length(self, other, '__add__')
        return self._build([x + y for x, y in zip(self, other)])

    def __sub__(self, other: Any) -> RecursiveVec:
        if not isinstance(other, RecursiveVec):
            return NotImplemented
        check_same_length(self, other, '__sub__')
        return self._build([x - y for x, y in zip(self, other)])

    def __mul__(self, a: Any) -> RecursiveVec:
        if not isinstance(a, Number):
            return NotImplemented
        return self._build([x * a for x in self])

    def __rmul__(self, a: Any) -> RecursiveVec:
        if not isinstance(a, Number):
            return NotImplemented
        return self._build([a * x for x in self])

    def __truediv__(self, a: Any) -> RecursiveVec:
        if not isinstance(a, Number):
            return NotImplemented
        return self._build([x / a for x in self])

    def ldiv(self, a: Number) -> RecursiveVec:
        """Left division a \\ self = a^-1 * self, element-wise."""
        return self._build([vi.ldiv(a, x) for x in self])

    # === VectorSpace protocol ===

    def scalartype(self) -> Any:
        return vi.promote_scalartypes(*(vi.scalartype(x) for x in self))

    def zerovector(self, dtype: Any = None) -> RecursiveVec:
        return self._build([vi.zerovector(x, dtype) for x in self])

    def zerovector_inplace(self) -> RecursiveVec:
        for x in self:
            vi.zerovector_inplace(x)
        return self

    def zerovector_maybe_inplace(self) -> RecursiveVec:
        return self._build([vi.zerovector_maybe_inplace(x) for x in self])

    def scale(self, a: Number) -> RecursiveVec:
        return self._build([vi.scale(x, a) for x in self])

    def scale_inplace(self, a: Number) -> RecursiveVec:
        for x in self:
            vi.scale_inplace(x, a)
        return self

    def scale_into(self, v: RecursiveVec, a: Number) -> RecursiveVec:
        _check_operand(self, v, 'scale_into')
        for x, y in zip(self, v):
            vi.scale_into(x, y, a)
        return self

    def scale_maybe_inplace(self, a: Number) -> RecursiveVec:
        return self._build([vi.scale_maybe_inplace(x, a) for x in self])

    def scale_into_maybe_inplace(self, v: RecursiveVec, a: Number) -> RecursiveVec:
        _check_operand(self, v, 'scale_into_maybe_inplace')
        return self._build([vi.scale_into_maybe_inplace(x, y, a) for x, y in zip(self, v)])

    def add(self, v: RecursiveVec, a: Number = 1, b: Number = 1) -> RecursiveVec:
        _check_operand(self, v, 'add')
        return self._build([vi.add(x, y, a, b) for x, y in zip(self, v)])

    def add_inplace(self, v: RecursiveVec, a: Number = 1, b: Number = 1) -> RecursiveVec:
        _check_operand(self, v, 'add_inplace')
        for x, y in zip(self, v):
            vi.add_inplace(x, y, a, b)
        return self

    def add_maybe_inplace(self, v: RecursiveVec, a: Number = 1, b: Number = 1) -> RecursiveVec:
        _check_operand(self, v, 'add_maybe_inplace')
        return self._build([vi.add_maybe_inplace(x, y, a, b) for x, y in zip(self, v)])

    def inner(self, w: RecursiveVec) -> Any:
        _check_operand(self, w, 'inner')
        return sum(vi.inner(x, y) for x, y in zip(self, w))

    def norm(self) -> float:
        return math.hypot(*(vi.norm(x) for x in self))

    def similar(self) -> RecursiveVec:
        return self._build([vi.similar(x) for x in self])

    def copy(self) -> RecursiveVec:
        return self._build([vi.copy(x) for x in self])

    def copy_into(self, v: RecursiveVec) -> RecursiveVec:
        _check_operand(self, v, 'copy_into')
        for x, y in zip(self, v):
            vi.copy_into(x, y)
        return self


def _check_operand(target: RecursiveVec, other: Any, operation: str) -> None:
    """Second operand must be a composite of the same length."""
    if not isinstance(other, RecursiveVec):
        raise UnsupportedVectorError(
            f"{operation}: expected a RecursiveVec operand, got {type(other).__name__}",
            vector_type=type(other),
            operation=operation,
        )
    check_same_length(target, other, operation)


def _warn_mixed_scalartypes(elements: list[Any]) -> None:
    names = list(dict.fromkeys(str(vi.scalartype(e)) for e in elements))
    if len(names) > 1:
        warnings.warn(
            f"Composite vector elements have mixed scalar types ({', '.join(names)}); "
            f"results follow the element types' own promotion rules",
            MixedScalarTypeWarning,
            stacklevel=4,
        )
