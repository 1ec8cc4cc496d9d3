"""
Element adapters and their registry.

An ElementOps instance implements the vector-space protocol on behalf of a
family of values that cannot carry the methods themselves (numpy arrays,
scalars, torch tensors). Values that do implement the VectorSpace protocol
(composite vectors, user types) are served by ProtocolOps, which forwards
to their own methods.

Lookup is by type only, never by inspecting values:
    1. exact MRO match in the registry
    2. registered abstract base classes (numbers.Number, ...)
    3. the VectorSpace protocol
Results are cached per type.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from numbers import Number
from typing import Any
import sys

from pyvectorspace.core.exceptions import UnsupportedVectorError
from pyvectorspace.core.protocols import VectorSpace


class ElementOps(ABC):
    """Vector-space protocol implemented for one family of element types."""

    @property
    @abstractmethod
    def name(self) -> str:
        ...

    @abstractmethod
    def scalartype(self, v: Any) -> Any:
        ...

    @abstractmethod
    def zerovector(self, v: Any, dtype: Any = None) -> Any:
        ...

    @abstractmethod
    def zerovector_inplace(self, v: Any) -> Any:
        ...

    @abstractmethod
    def zerovector_maybe_inplace(self, v: Any) -> Any:
        ...

    @abstractmethod
    def scale(self, v: Any, a: Number) -> Any:
        ...

    @abstractmethod
    def scale_inplace(self, v: Any, a: Number) -> Any:
        ...

    @abstractmethod
    def scale_into(self, w: Any, v: Any, a: Number) -> Any:
        ...

    @abstractmethod
    def scale_maybe_inplace(self, v: Any, a: Number) -> Any:
        ...

    @abstractmethod
    def scale_into_maybe_inplace(self, w: Any, v: Any, a: Number) -> Any:
        ...

    @abstractmethod
    def add(self, w: Any, v: Any, a: Number = 1, b: Number = 1) -> Any:
        """b * w + a * v."""
        ...

    @abstractmethod
    def add_inplace(self, w: Any, v: Any, a: Number = 1, b: Number = 1) -> Any:
        ...

    @abstractmethod
    def add_maybe_inplace(self, w: Any, v: Any, a: Number = 1, b: Number = 1) -> Any:
        ...

    @abstractmethod
    def inner(self, v: Any, w: Any) -> Any:
        ...

    @abstractmethod
    def norm(self, v: Any) -> float:
        ...

    @abstractmethod
    def similar(self, v: Any) -> Any:
        ...

    @abstractmethod
    def copy(self, v: Any) -> Any:
        ...

    @abstractmethod
    def copy_into(self, w: Any, v: Any) -> Any:
        ...

    @abstractmethod
    def ldiv(self, a: Number, v: Any) -> Any:
        """a \\ v, i.e. a^-1 * v."""
        ...

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class ProtocolOps(ElementOps):
    """Forwards every operation to the value's own VectorSpace methods."""

    @property
    def name(self) -> str:
        return 'protocol'

    def scalartype(self, v):
        return v.scalartype()

    def zerovector(self, v, dtype=None):
        return v.zerovector(dtype)

    def zerovector_inplace(self, v):
        return v.zerovector_inplace()

    def zerovector_maybe_inplace(self, v):
        return v.zerovector_maybe_inplace()

    def scale(self, v, a):
        return v.scale(a)

    def scale_inplace(self, v, a):
        return v.scale_inplace(a)

    def scale_into(self, w, v, a):
        return w.scale_into(v, a)

    def scale_maybe_inplace(self, v, a):
        return v.scale_maybe_inplace(a)

    def scale_into_maybe_inplace(self, w, v, a):
        return w.scale_into_maybe_inplace(v, a)

    def add(self, w, v, a=1, b=1):
        return w.add(v, a, b)

    def add_inplace(self, w, v, a=1, b=1):
        return w.add_inplace(v, a, b)

    def add_maybe_inplace(self, w, v, a=1, b=1):
        return w.add_maybe_inplace(v, a, b)

    def inner(self, v, w):
        return v.inner(w)

    def norm(self, v):
        return v.norm()

    def similar(self, v):
        return v.similar()

    def copy(self, v):
        return v.copy()

    def copy_into(self, w, v):
        return w.copy_into(v)

    def ldiv(self, a, v):
        return v.ldiv(a)


PROTOCOL_OPS = ProtocolOps()

_REGISTRY: dict[type, ElementOps] = {}
_CACHE: dict[type, ElementOps] = {}
_torch_registered = False


def register_ops(cls: type, ops: ElementOps) -> None:
    """
    Register an adapter for a type and all its subclasses.

    Abstract base classes (e.g. numbers.Number) are honored through
    issubclass(), so virtual subclasses are covered too.

    Args:
        cls: Element type to serve
        ops: Adapter implementing the protocol for cls
    """
    if not isinstance(ops, ElementOps):
        raise TypeError(f"ops must be an ElementOps instance, got {type(ops).__name__}")
    _REGISTRY[cls] = ops
    _CACHE.clear()


def ops_for(v: Any, operation: str = 'ops_for') -> ElementOps:
    """
    Return the adapter serving the type of v.

    Args:
        v: Element value
        operation: Operation name for error messages

    Raises:
        UnsupportedVectorError: If no adapter is registered and the type
            does not implement the VectorSpace protocol
    """
    cls = type(v)
    ops = _CACHE.get(cls)
    if ops is None:
        ops = _resolve(cls)
        if ops is None:
            raise UnsupportedVectorError(
                f"{operation}: {cls.__name__} does not implement the vector-space "
                f"protocol; implement VectorSpace or call register_ops()",
                vector_type=cls,
                operation=operation,
            )
        _CACHE[cls] = ops
    return ops


def _resolve(cls: type) -> ElementOps | None:
    ops = _lookup(cls)
    if ops is None and not _torch_registered and 'torch' in sys.modules:
        # torch is registered only once the caller has imported it
        _register_torch()
        ops = _lookup(cls)
    return ops


def _lookup(cls: type) -> ElementOps | None:
    for base in cls.__mro__:
        if base in _REGISTRY:
            return _REGISTRY[base]
    for registered, ops in _REGISTRY.items():
        if issubclass(cls, registered):
            return ops
    if issubclass(cls, VectorSpace):
        return PROTOCOL_OPS
    return None


def _register_torch() -> None:
    global _torch_registered
    import torch
    from pyvectorspace.interface._torch import TorchOps

    register_ops(torch.Tensor, TorchOps())
    _torch_registered = True
