"""
Tolerance tiers for approximate vector comparison.

Defines precision expectations per scalar type:
- FP64: double precision (numpy float64/complex128, torch float64/complex128)
- FP32: single precision
- FP16: half precision (torch float16/bfloat16, numpy float16)

The relative tolerance of each tier is sqrt(eps), the usual default for
comparing results of iterative linear algebra. Used by isapprox() and by
the test suite.
"""

from dataclasses import dataclass
from typing import Any
import math

import numpy as np


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Machine epsilon for float64
EPSILON_64: float = float(np.finfo(np.float64).eps)  # ~2.22e-16

# Machine epsilon for float32
EPSILON_32: float = float(np.finfo(np.float32).eps)  # ~1.19e-7

# Machine epsilon for float16
EPSILON_16: float = float(np.finfo(np.float16).eps)  # ~9.77e-4

FP64 = ToleranceTier(
    rtol=math.sqrt(EPSILON_64),
    atol=0.0,
    name='fp64',
    description='double precision, rtol = sqrt(eps)',
)

FP32 = ToleranceTier(
    rtol=math.sqrt(EPSILON_32),
    atol=0.0,
    name='fp32',
    description='single precision, rtol = sqrt(eps)',
)

FP16 = ToleranceTier(
    rtol=math.sqrt(EPSILON_16),
    atol=0.0,
    name='fp16',
    description='half precision, rtol = sqrt(eps)',
)


def machine_epsilon(dtype: Any = np.float64) -> float:
    """
    Get machine epsilon for a scalar type.

    Accepts numpy dtypes / scalar types and torch dtypes. Complex types
    report the epsilon of their real part. Integer and boolean types
    report float64 epsilon, since any arithmetic on them promotes.

    Args:
        dtype: numpy dtype, numpy/Python scalar type, or torch dtype

    Returns:
        Machine epsilon as a Python float
    """
    if _is_torch_dtype(dtype):
        import torch
        if dtype.is_floating_point or dtype.is_complex:
            return float(torch.finfo(dtype).eps)
        return EPSILON_64

    np_dtype = np.dtype(dtype)
    if np.issubdtype(np_dtype, np.inexact):
        return float(np.finfo(np_dtype).eps)
    return EPSILON_64


def select_tolerance(dtype: Any = np.float64) -> ToleranceTier:
    """Select the tolerance tier matching the precision of a scalar type."""
    eps = machine_epsilon(dtype)
    if eps <= EPSILON_64:
        return FP64
    if eps <= EPSILON_32:
        return FP32
    return FP16


def _is_torch_dtype(dtype: Any) -> bool:
    return type(dtype).__module__ == 'torch' and type(dtype).__name__ == 'dtype'
