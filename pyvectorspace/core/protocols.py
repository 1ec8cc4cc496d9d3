"""
Core protocol for pyvectorspace.

VectorSpace is the structural interface a type implements to be usable as
a vector by Krylov-type algorithms. We use Protocol (structural typing)
rather than ABC (nominal typing) so that user types never have to inherit
from anything in this package.

Types that cannot carry methods (numpy arrays, scalars, torch tensors) are
supported through element adapters instead, see pyvectorspace.interface.

Design Principles:
    - Minimal contract: only what Lanczos/Arnoldi/GMRES/CG actually call
    - In-place methods return the mutated object
    - "maybe in place" methods return the result; callers drop the argument
"""

from __future__ import annotations

from numbers import Number
from typing import Any, Protocol, TypeVar, runtime_checkable

V = TypeVar('V', bound='VectorSpace')


@runtime_checkable
class VectorSpace(Protocol):
    """
    Vector-space operation protocol.

    Conventions shared by all methods:
        - add(w, v, a, b) computes b*w + a*v (w is the receiver)
        - inner is conjugate-linear in the receiver
        - *_inplace mutate the receiver and return it
        - *_maybe_inplace may reuse the receiver's storage; only the
          returned value is valid afterwards
    """

    def scalartype(self) -> Any:
        """Scalar field of the vector (numpy dtype or torch dtype)."""
        ...

    def zerovector(self, dtype: Any = None) -> VectorSpace:
        """New zero vector of the same shape, over dtype if given."""
        ...

    def zerovector_inplace(self) -> VectorSpace:
        ...

    def zerovector_maybe_inplace(self) -> VectorSpace:
        ...

    def scale(self, a: Number) -> VectorSpace:
        """New vector a * self."""
        ...

    def scale_inplace(self, a: Number) -> VectorSpace:
        ...

    def scale_into(self, v: VectorSpace, a: Number) -> VectorSpace:
        """Overwrite self with a * v and return self."""
        ...

    def scale_maybe_inplace(self, a: Number) -> VectorSpace:
        ...

    def scale_into_maybe_inplace(self, v: VectorSpace, a: Number) -> VectorSpace:
        ...

    def add(self, v: VectorSpace, a: Number = 1, b: Number = 1) -> VectorSpace:
        """New vector b * self + a * v."""
        ...

    def add_inplace(self, v: VectorSpace, a: Number = 1, b: Number = 1) -> VectorSpace:
        ...

    def add_maybe_inplace(self, v: VectorSpace, a: Number = 1, b: Number = 1) -> VectorSpace:
        ...

    def inner(self, w: VectorSpace) -> Any:
        """Inner product <self, w>, conjugating self."""
        ...

    def norm(self) -> float:
        """Euclidean norm."""
        ...

    def similar(self) -> VectorSpace:
        """Same-shape vector with unspecified contents."""
        ...

    def copy(self) -> VectorSpace:
        ...

    def copy_into(self, v: VectorSpace) -> VectorSpace:
        """Overwrite self with the contents of v and return self."""
        ...

    def ldiv(self, a: Number) -> VectorSpace:
        """Left division a \\ self, i.e. a^-1 * self."""
        ...
