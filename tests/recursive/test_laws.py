"""
Algebraic laws of the composite vector space.

For compatible composites u, v, w and scalars a, b:
    v + w == w + v
    (u + v) + w == u + (v + w)
    v + (-v) == zerovector(v)
    scale(v, 1) == v, scale(v, 0) == zerovector(v)
    scale(v, a + b) == scale(v, a) + scale(v, b)
    norm of a one-element composite equals the element's norm exactly
    norm of a composite equals the Euclidean norm of its element norms
"""

import math

import numpy as np
import pytest

from pyvectorspace import ListVec, TupleVec
from pyvectorspace import interface as vi
from pyvectorspace.core.exceptions import LengthMismatchError


def make_vec(kind, rng, complex_=False):
    def block(*shape):
        x = rng.standard_normal(shape)
        if complex_:
            x = x + 1j * rng.standard_normal(shape)
        return x
    return kind.of(block(3), block(2, 2), block(4))


@pytest.fixture(params=[
    (TupleVec, False),
    (TupleVec, True),
    (ListVec, False),
    (ListVec, True),
], ids=['tuple-real', 'tuple-complex', 'list-real', 'list-complex'])
def triple(request, rng):
    kind, complex_ = request.param
    return tuple(make_vec(kind, rng, complex_) for _ in range(3))


class TestAdditiveLaws:

    def test_commutativity(self, triple):
        u, v, _ = triple
        for a, b in zip(u + v, v + u):
            np.testing.assert_array_equal(a, b)

    def test_associativity(self, triple):
        u, v, w = triple
        assert vi.isapprox((u + v) + w, u + (v + w))

    def test_additive_inverse(self, triple):
        v = triple[0]
        result = v + (-v)
        zero = vi.zerovector(v, vi.scalartype(v))
        for a, b in zip(result, zero):
            np.testing.assert_array_equal(a, b)

    def test_add_via_protocol_matches_operator(self, triple):
        u, v, _ = triple
        for a, b in zip(vi.add(u, v), u + v):
            np.testing.assert_array_equal(a, b)


class TestScalarLaws:

    def test_identity(self, triple):
        v = triple[0]
        for a, b in zip(vi.scale(v, 1), v):
            np.testing.assert_array_equal(a, b)

    def test_zero(self, triple):
        v = triple[0]
        assert vi.norm(vi.scale(v, 0)) == 0.0

    def test_distributivity_over_scalars(self, triple):
        v = triple[0]
        a, b = 0.75, -2.5
        assert vi.isapprox(vi.scale(v, a + b), vi.scale(v, a) + vi.scale(v, b))

    def test_distributivity_over_vectors(self, triple):
        u, v, _ = triple
        a = 1.5 - 0.5j
        assert vi.isapprox(vi.scale(u + v, a), vi.scale(u, a) + vi.scale(v, a))


class TestNormLaws:

    def test_single_element_identity(self, rng):
        x = rng.standard_normal(7)
        assert vi.norm(TupleVec.from_array(x)) == vi.norm(x)

    def test_single_nested_element_identity(self, rng):
        inner_vec = TupleVec.of(rng.standard_normal(3), rng.standard_normal(2))
        outer = TupleVec.of(inner_vec)
        assert vi.norm(outer) == vi.norm(inner_vec)

    def test_composition(self, triple):
        v = triple[0]
        expected = math.hypot(*(vi.norm(x) for x in v))
        assert vi.norm(v) == expected

    def test_matches_sqrt_inner(self, triple):
        v = triple[0]
        assert vi.norm(v) == pytest.approx(math.sqrt(vi.inner(v, v).real), rel=1e-13)

    def test_no_overflow(self):
        """Combining element norms does not square huge values."""
        v = TupleVec.of(1e200, 1e200)
        assert vi.norm(v) == pytest.approx(math.sqrt(2) * 1e200)


class TestInnerLaws:

    def test_conjugate_symmetry(self, triple):
        u, v, _ = triple
        assert vi.inner(u, v) == pytest.approx(np.conj(vi.inner(v, u)), rel=1e-13)

    def test_linear_in_second_argument(self, triple):
        u, v, w = triple
        lhs = vi.inner(u, vi.add(v, w, 2.0, 1.0))
        rhs = vi.inner(u, v) + 2.0 * vi.inner(u, w)
        assert lhs == pytest.approx(rhs, rel=1e-12)


class TestShapeMismatch:
    """Binary operations never silently truncate."""

    @pytest.mark.parametrize("operation", [
        lambda v, w: v + w,
        lambda v, w: v - w,
        lambda v, w: vi.add(v, w),
        lambda v, w: vi.add_inplace(v, w),
        lambda v, w: vi.add_maybe_inplace(v, w),
        lambda v, w: vi.inner(v, w),
        lambda v, w: vi.scale_into(v, w, 1.0),
        lambda v, w: vi.scale_into_maybe_inplace(v, w, 1.0),
        lambda v, w: vi.copy_into(v, w),
    ])
    def test_mismatch_raises(self, operation, rng):
        v = TupleVec.of(rng.standard_normal(2), rng.standard_normal(3))
        w = TupleVec.of(rng.standard_normal(2))
        with pytest.raises(LengthMismatchError):
            operation(v, w)
