"""
Composite (direct-sum) vectors.

Public API:
    RecursiveVec  - abstract composite implementing the VectorSpace protocol
    TupleVec      - heterogeneous elements, tuple storage
    ListVec       - homogeneous elements, list storage
"""

from pyvectorspace.recursive.base import RecursiveVec
from pyvectorspace.recursive.storage import TupleVec, ListVec

__all__ = [
    "RecursiveVec",
    "TupleVec",
    "ListVec",
]
