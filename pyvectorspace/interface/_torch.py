"""
Element adapter for torch tensors.

Lets composite vectors hold device-resident blocks (CUDA, MPS or CPU
tensors). Registered lazily: the adapter is installed the first time a
tensor is looked up after the caller imported torch, so importing
pyvectorspace never pays the torch import cost.

Scalar results (inner, norm) are returned as Python numbers via .item(),
which synchronizes the device.
"""

from __future__ import annotations

from typing import Any
import torch

from pyvectorspace.interface._ops import ElementOps


class TorchOps(ElementOps):
    """Vector-space protocol for torch.Tensor (any shape, entries flattened)."""

    @property
    def name(self) -> str:
        return 'torch'

    def scalartype(self, v: torch.Tensor) -> torch.dtype:
        return v.dtype

    def zerovector(self, v: torch.Tensor, dtype: Any = None) -> torch.Tensor:
        return torch.zeros_like(v, dtype=dtype)

    def zerovector_inplace(self, v: torch.Tensor) -> torch.Tensor:
        return v.zero_()

    def zerovector_maybe_inplace(self, v: torch.Tensor) -> torch.Tensor:
        return v.zero_()

    def scale(self, v: torch.Tensor, a) -> torch.Tensor:
        return v * a

    def scale_inplace(self, v: torch.Tensor, a) -> torch.Tensor:
        return v.mul_(a)

    def scale_into(self, w: torch.Tensor, v: torch.Tensor, a) -> torch.Tensor:
        torch.mul(v, a, out=w)
        return w

    def scale_maybe_inplace(self, v: torch.Tensor, a) -> torch.Tensor:
        if torch.result_type(v, a) == v.dtype:
            return v.mul_(a)
        return v * a

    def scale_into_maybe_inplace(self, w: torch.Tensor, v: torch.Tensor, a) -> torch.Tensor:
        if torch.result_type(v, a) == w.dtype:
            return self.scale_into(w, v, a)
        return v * a

    def add(self, w: torch.Tensor, v: torch.Tensor, a=1, b=1) -> torch.Tensor:
        return w * b + v * a

    def add_inplace(self, w: torch.Tensor, v: torch.Tensor, a=1, b=1) -> torch.Tensor:
        # both terms are formed before w is written, so v may alias w
        return torch.add(w * b, v * a, out=w)

    def add_maybe_inplace(self, w: torch.Tensor, v: torch.Tensor, a=1, b=1) -> torch.Tensor:
        result_dtype = torch.promote_types(
            torch.result_type(w, b), torch.result_type(v, a)
        )
        if result_dtype == w.dtype:
            return self.add_inplace(w, v, a, b)
        return self.add(w, v, a, b)

    def inner(self, v: torch.Tensor, w: torch.Tensor):
        # vdot conjugates its first argument and only accepts 1-D input
        return torch.vdot(v.reshape(-1), w.reshape(-1)).item()

    def norm(self, v: torch.Tensor) -> float:
        return float(torch.linalg.vector_norm(v).item())

    def similar(self, v: torch.Tensor) -> torch.Tensor:
        return torch.empty_like(v)

    def copy(self, v: torch.Tensor) -> torch.Tensor:
        return v.clone()

    def copy_into(self, w: torch.Tensor, v: torch.Tensor) -> torch.Tensor:
        return w.copy_(v)

    def ldiv(self, a, v: torch.Tensor) -> torch.Tensor:
        return v / a
