"""
Storage kinds for RecursiveVec.

TupleVec holds a tuple and accepts elements of different types (e.g. a
numpy block next to a torch block, or an array next to a nested
composite). ListVec holds a list of elements that all share one Python
type, and allows replacing elements in place.

Operations return the storage kind of the composite they were called on.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable
import operator

from pyvectorspace.core.exceptions import ValidationError
from pyvectorspace.core.validation import check_homogeneous
from pyvectorspace.recursive.base import RecursiveVec


@dataclass(frozen=True, eq=False, repr=False)
class TupleVec(RecursiveVec):
    """
    Heterogeneous composite vector (tuple storage).

    Construction:
        TupleVec.from_array(x)
        TupleVec.from_elements([x, y, z])
        TupleVec.of(x, y, z)

    Indexing is read-only.
    """
    _elements: tuple[Any, ...]

    @classmethod
    def _build(cls, elements: Iterable[Any]) -> TupleVec:
        return cls(tuple(elements))

    @property
    def element_type(self) -> tuple[type, ...]:
        """Types of the elements, in storage order."""
        return tuple(type(e) for e in self._elements)


@dataclass(frozen=True, eq=False, repr=False)
class ListVec(RecursiveVec):
    """
    Homogeneous composite vector (list storage).

    All elements share one Python type, checked by the public
    constructors and by item assignment. Item assignment replaces an
    element; the number of elements never changes.

    Construction:
        ListVec.from_array(x)
        ListVec.from_elements([x, y, z])
        ListVec.of(x, y, z)
    """
    _elements: list[Any]
    _element_type: type

    @classmethod
    def _check_elements(cls, elements: list[Any], name: str) -> None:
        check_homogeneous(elements, name)

    @classmethod
    def _build(cls, elements: Iterable[Any]) -> ListVec:
        elements = list(elements)
        return cls(elements, type(elements[0]))

    @property
    def element_type(self) -> type:
        """The shared element type."""
        return self._element_type

    def __setitem__(self, i: int, value: Any) -> None:
        if type(value) is not self._element_type:
            raise ValidationError(
                f"value: homogeneous storage requires {self._element_type.__name__}, "
                f"got {type(value).__name__}"
            )
        self._elements[operator.index(i)] = value
