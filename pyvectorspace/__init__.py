"""
pyvectorspace: composite vectors for Krylov-type algorithms.

Generic iterative linear algebra (Lanczos, Arnoldi, GMRES, CG) only needs
a small vector-space protocol: scale, add, inner product, norm, zero
vector, copy. This package provides that protocol for numpy arrays,
scalars and torch tensors, and a composite vector that implements it
recursively over several independently typed blocks.

Submodules:
    core: Protocol, exceptions, validation, tolerance tiers
    interface: The protocol as free functions and the adapter registry
    recursive: Composite vectors (TupleVec, ListVec)
"""

__version__ = "0.1.0"

from pyvectorspace import core
from pyvectorspace import interface
from pyvectorspace import recursive
from pyvectorspace.recursive import RecursiveVec, TupleVec, ListVec

__all__ = [
    "__version__",
    "core",
    "interface",
    "recursive",
    "RecursiveVec",
    "TupleVec",
    "ListVec",
]
