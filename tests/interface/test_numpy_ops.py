"""
Tests for the numpy element adapter.

Out-of-place operations promote, in-place operations keep numpy's casting
rules, maybe-in-place operations reuse the array exactly when no promotion
is needed.
"""

import numpy as np
import pytest

from pyvectorspace import interface as vi


class TestOutOfPlace:

    def test_scalartype(self):
        assert vi.scalartype(np.zeros(3, dtype=np.float32)) == np.float32

    def test_zerovector_keeps_dtype(self):
        z = vi.zerovector(np.ones(3, dtype=np.float32))
        assert z.dtype == np.float32
        np.testing.assert_array_equal(z, 0.0)

    def test_zerovector_with_dtype(self):
        z = vi.zerovector(np.ones((2, 2)), np.complex128)
        assert z.dtype == np.complex128
        assert z.shape == (2, 2)

    def test_scale_does_not_mutate(self):
        v = np.array([1.0, 2.0])
        w = vi.scale(v, 3.0)
        np.testing.assert_array_equal(w, [3.0, 6.0])
        np.testing.assert_array_equal(v, [1.0, 2.0])

    def test_scale_promotes(self):
        assert vi.scale(np.ones(2), 1j).dtype == np.complex128

    def test_add_default_coefficients(self):
        w = np.array([1.0, 2.0])
        v = np.array([10.0, 20.0])
        np.testing.assert_array_equal(vi.add(w, v), [11.0, 22.0])

    def test_add_is_b_w_plus_a_v(self):
        w = np.array([1.0, 2.0])
        v = np.array([10.0, 20.0])
        np.testing.assert_array_equal(vi.add(w, v, 2.0, 3.0), [23.0, 46.0])

    def test_inner_conjugates_first_argument(self):
        v = np.array([1j, 0.0])
        w = np.array([1j, 1.0])
        assert vi.inner(v, w) == pytest.approx(1.0)

    def test_inner_flattens(self):
        v = np.arange(4.0).reshape(2, 2)
        assert vi.inner(v, v) == pytest.approx(14.0)

    def test_norm(self):
        assert vi.norm(np.array([3.0, 4.0])) == 5.0

    def test_norm_is_python_float(self):
        assert type(vi.norm(np.array([3.0, 4.0]))) is float

    def test_similar_shape_and_dtype(self):
        v = np.ones((2, 3), dtype=np.float32)
        s = vi.similar(v)
        assert s.shape == (2, 3)
        assert s.dtype == np.float32
        assert s is not v

    def test_copy_is_independent(self):
        v = np.array([1.0, 2.0])
        c = vi.copy(v)
        c[0] = 99.0
        assert v[0] == 1.0

    def test_ldiv(self):
        np.testing.assert_allclose(vi.ldiv(2.0, np.array([2.0, 4.0])), [1.0, 2.0])


class TestInPlace:

    def test_scale_inplace_returns_same_object(self):
        v = np.array([1.0, 2.0])
        assert vi.scale_inplace(v, 2.0) is v
        np.testing.assert_array_equal(v, [2.0, 4.0])

    def test_scale_inplace_complex_into_real_raises(self):
        """numpy's casting error reaches the caller unchanged."""
        with pytest.raises(TypeError):
            vi.scale_inplace(np.ones(2), 1j)

    def test_scale_into(self):
        w = np.zeros(2)
        v = np.array([1.0, 2.0])
        assert vi.scale_into(w, v, -1.0) is w
        np.testing.assert_array_equal(w, [-1.0, -2.0])

    def test_add_inplace(self):
        w = np.array([1.0, 2.0])
        v = np.array([10.0, 20.0])
        assert vi.add_inplace(w, v, 2.0, 3.0) is w
        np.testing.assert_array_equal(w, [23.0, 46.0])

    def test_add_inplace_aliased_operand(self):
        """w and v the same array: b*w + a*v uses the unscaled w."""
        v = np.array([1.0, 2.0])
        assert vi.add_inplace(v, v, 1.0, 2.0) is v
        np.testing.assert_array_equal(v, [3.0, 6.0])

    def test_add_inplace_overlapping_views(self):
        buf = np.array([1.0, 2.0, 3.0])
        vi.add_inplace(buf[1:], buf[:-1], 1.0, 2.0)
        np.testing.assert_array_equal(buf, [1.0, 5.0, 8.0])

    def test_add_inplace_failed_cast_leaves_target(self):
        w = np.array([1.0, 2.0])
        with pytest.raises(TypeError):
            vi.add_inplace(w, np.ones(2), 1j, 3.0)
        np.testing.assert_array_equal(w, [1.0, 2.0])

    def test_zerovector_inplace(self):
        v = np.array([1.0, 2.0])
        assert vi.zerovector_inplace(v) is v
        np.testing.assert_array_equal(v, 0.0)

    def test_copy_into(self):
        w = np.zeros(3)
        v = np.array([1.0, 2.0, 3.0])
        assert vi.copy_into(w, v) is w
        np.testing.assert_array_equal(w, v)


class TestMaybeInPlace:
    """Reuse exactly when writeable and no promotion is needed."""

    def test_scale_reuses_when_dtype_fits(self):
        v = np.array([1.0, 2.0])
        assert vi.scale_maybe_inplace(v, 2.0) is v

    def test_scale_allocates_on_promotion(self):
        v = np.array([1.0, 2.0])
        result = vi.scale_maybe_inplace(v, 1j)
        assert result is not v
        assert result.dtype == np.complex128
        np.testing.assert_array_equal(v, [1.0, 2.0])

    def test_scale_allocates_for_readonly(self):
        v = np.array([1.0, 2.0])
        v.flags.writeable = False
        result = vi.scale_maybe_inplace(v, 2.0)
        assert result is not v
        np.testing.assert_array_equal(result, [2.0, 4.0])

    def test_scale_into_reuses_target(self):
        w = np.zeros(2)
        assert vi.scale_into_maybe_inplace(w, np.ones(2), 3.0) is w
        np.testing.assert_array_equal(w, 3.0)

    def test_add_reuses_when_dtype_fits(self):
        w = np.array([1.0, 2.0])
        result = vi.add_maybe_inplace(w, np.ones(2), 1.0, 2.0)
        assert result is w
        np.testing.assert_array_equal(result, [3.0, 5.0])

    def test_add_aliased_operand(self):
        v = np.array([1.0, 2.0])
        result = vi.add_maybe_inplace(v, v, 1.0, 2.0)
        assert result is v
        np.testing.assert_array_equal(result, [3.0, 6.0])

    def test_add_allocates_on_promotion(self):
        w = np.ones(2, dtype=np.float32)
        v = np.ones(2, dtype=np.float64)
        result = vi.add_maybe_inplace(w, v)
        assert result is not w
        assert result.dtype == np.float64

    def test_zerovector_maybe_inplace(self):
        v = np.ones(2)
        assert vi.zerovector_maybe_inplace(v) is v
        np.testing.assert_array_equal(v, 0.0)
