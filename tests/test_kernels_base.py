# -*- coding: utf-8 -*-
"""
Tests for the kernel base classes: element type handling, scalar and
array evaluation, shared singleton instances and value semantics.

Author
------
Duane Smalley, PhD
duane.d.smalley@gmail.com

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-10-19

Modified
--------
2026-10-19
"""

# Standard library
import copy
import pickle

# Third-party
import numpy as np
import pytest

# Kernels internal
import interp_kernels
from interp_kernels import (
    BoxKernel,
    CatmullRomKernel,
    CubicKernel,
    DTypeError,
    Kernel,
    KernelError,
    KeysKernel,
    MitchellNetravaliKernel,
    QuadraticKernel,
    SingletonKernel,
    TriangleKernel,
)


ALL_CLASSES = [
    BoxKernel,
    TriangleKernel,
    QuadraticKernel,
    CubicKernel,
    CatmullRomKernel,
    KeysKernel,
    MitchellNetravaliKernel,
]


# ── Element type ────────────────────────────────────────────────────────


class TestElementType:
    """Construction accepts floating types only."""

    @pytest.mark.parametrize('cls', ALL_CLASSES)
    @pytest.mark.parametrize('dtype', [
        np.float16, np.float32, np.float64, np.longdouble,
        float, 'float32', np.dtype('float64'),
    ])
    def test_accepts_floating(self, cls, dtype):
        kernel = cls(dtype)
        assert kernel.dtype == np.dtype(dtype)
        assert np.issubdtype(kernel.dtype, np.floating)

    @pytest.mark.parametrize('cls', ALL_CLASSES)
    @pytest.mark.parametrize('dtype', [
        np.int32, int, bool, np.complex128, object, 'not-a-dtype',
    ])
    def test_rejects_non_floating(self, cls, dtype):
        with pytest.raises(DTypeError, match="floating-point dtype"):
            cls(dtype)

    @pytest.mark.parametrize('cls', ALL_CLASSES)
    def test_rejects_none(self, cls):
        with pytest.raises(DTypeError, match="floating-point dtype"):
            cls(None)

    @pytest.mark.parametrize('cls', ALL_CLASSES)
    @pytest.mark.parametrize('order', ['<', '>'])
    def test_byte_order_normalized(self, cls, order):
        kernel = cls(np.dtype(np.float32).newbyteorder(order))
        assert kernel.dtype == np.float32
        assert kernel.dtype.isnative
        assert kernel(np.linspace(-2.0, 2.0, 5)).dtype == kernel.dtype

    @pytest.mark.parametrize('order', ['<', '>'])
    def test_byte_order_shares_singleton(self, order):
        swapped = np.dtype(np.float64).newbyteorder(order)
        assert CubicKernel(swapped) is CubicKernel(np.float64)

    def test_dtype_error_is_type_error(self):
        with pytest.raises(TypeError):
            KeysKernel(np.int64)
        with pytest.raises(KernelError):
            BoxKernel(np.uint8)

    def test_default_is_float64(self):
        assert KeysKernel().dtype == np.float64
        assert BoxKernel().dtype == np.float64

    def test_cannot_instantiate_kernel(self):
        with pytest.raises(TypeError):
            Kernel()


# ── Scalar evaluation ───────────────────────────────────────────────────


class TestScalarEvaluation:
    """Scalar arguments give scalars of the kernel element type."""

    @pytest.mark.parametrize('cls', ALL_CLASSES)
    @pytest.mark.parametrize('dtype', [np.float32, np.float64])
    def test_result_type(self, cls, dtype):
        kernel = cls(dtype)
        for x in (0.0, 0.3, -1.2, 5.0):
            value = kernel(x)
            assert isinstance(value, np.generic)
            assert value.dtype == dtype

    @pytest.mark.parametrize('x', [0, 1, np.int64(2), np.float32(0.25), 0.75])
    def test_any_real_input(self, x):
        value = CubicKernel(np.float32)(x)
        assert value.dtype == np.float32

    @pytest.mark.parametrize('cls', ALL_CLASSES)
    @pytest.mark.parametrize('x', [10**400, -10**400])
    def test_huge_integer_is_outside_support(self, cls, x):
        value = cls()(x)
        assert value == 0
        assert value.dtype == np.float64

    def test_input_converted_before_evaluation(self):
        ker = KeysKernel(np.float32, a=-0.75)
        x = 0.1234567890123
        assert ker(x) == ker(np.float32(x))


# ── Array evaluation ────────────────────────────────────────────────────


class TestArrayEvaluation:
    """Array arguments are mapped elementwise, shape preserved."""

    @pytest.mark.parametrize('cls', ALL_CLASSES)
    @pytest.mark.parametrize('shape', [(7,), (3, 4), (2, 3, 5)])
    def test_shape_preserved(self, cls, shape):
        x = np.linspace(-3.0, 3.0, int(np.prod(shape))).reshape(shape)
        result = cls()(x)
        assert isinstance(result, np.ndarray)
        assert result.shape == shape

    @pytest.mark.parametrize('cls', ALL_CLASSES)
    @pytest.mark.parametrize('in_dtype', [np.int16, np.float32, np.float64])
    @pytest.mark.parametrize('dtype', [np.float16, np.float32, np.float64])
    def test_output_dtype_follows_kernel(self, cls, in_dtype, dtype):
        x = np.arange(-3, 4).astype(in_dtype)
        result = cls(dtype)(x)
        assert result.dtype == dtype

    @pytest.mark.parametrize('cls', ALL_CLASSES)
    @pytest.mark.parametrize('dtype', [np.float32, np.float64])
    def test_matches_scalar(self, cls, dtype):
        """Every element equals the scalar evaluation exactly."""
        kernel = cls(dtype)
        x = np.concatenate([
            np.linspace(-2.5, 2.5, 161),
            [-2.0, -1.5, -1.0, -0.5, 0.5, 1.0, 1.5, 2.0],
        ])
        expected = np.array([kernel(v) for v in x], dtype=dtype)
        np.testing.assert_array_equal(kernel(x), expected)

    def test_list_input(self):
        result = TriangleKernel()([0.0, 0.5, 1.0])
        np.testing.assert_array_equal(result, [1.0, 0.5, 0.0])

    def test_nested_list_input(self):
        result = BoxKernel(np.float32)([[0.0, 0.5], [-0.5, 1.0]])
        assert result.shape == (2, 2)
        assert result.dtype == np.float32
        np.testing.assert_array_equal(result, [[1, 0], [1, 0]])

    def test_zero_dimensional_array(self):
        result = CatmullRomKernel()(np.array(0.0))
        assert isinstance(result, np.ndarray)
        assert result.shape == ()
        assert result == 1

    def test_empty_array(self):
        result = KeysKernel(np.float32)(np.empty((0, 3)))
        assert result.shape == (0, 3)
        assert result.dtype == np.float32

    @pytest.mark.parametrize('cls', ALL_CLASSES)
    @pytest.mark.parametrize('dtype', [np.float32, np.float64])
    def test_huge_integers_in_array(self, cls, dtype):
        kernel = cls(dtype)
        result = kernel([[10**400, 0.0], [-10**400, 0.25]])
        assert result.shape == (2, 2)
        assert result.dtype == dtype
        assert result[0, 0] == 0
        assert result[1, 0] == 0
        assert result[0, 1] == kernel(0.0)
        assert result[1, 1] == kernel(0.25)

    def test_input_not_modified(self):
        x = np.linspace(-2.0, 2.0, 9)
        original = x.copy()
        for cls in ALL_CLASSES:
            result = cls()(x)
            assert result is not x
        np.testing.assert_array_equal(x, original)

    def test_nan_follows_outer_piece(self):
        """NaN input gives the same result on both evaluation paths."""
        for cls in ALL_CLASSES:
            kernel = cls()
            scalar = kernel(np.nan)
            array = kernel(np.array([np.nan]))[0]
            np.testing.assert_array_equal(array, scalar)


# ── Shared instances ────────────────────────────────────────────────────


class TestSingletons:
    """Parameterless kernels are shared per element type."""

    @pytest.mark.parametrize('cls', [
        BoxKernel, TriangleKernel, QuadraticKernel, CubicKernel,
        CatmullRomKernel,
    ])
    def test_same_instance(self, cls):
        assert cls() is cls(np.float64)
        assert cls('float64') is cls(float)
        assert cls(np.float32) is cls('float32')
        assert cls(np.float32) is not cls(np.float64)
        assert issubclass(cls, SingletonKernel)

    def test_distinct_per_class(self):
        assert BoxKernel() is not TriangleKernel()

    def test_parametrized_not_shared(self):
        assert KeysKernel() is not KeysKernel()
        assert not issubclass(KeysKernel, SingletonKernel)
        assert not issubclass(MitchellNetravaliKernel, SingletonKernel)

    def test_default_instances(self):
        assert interp_kernels.box is BoxKernel()
        assert interp_kernels.triangle is TriangleKernel()
        assert interp_kernels.quadratic is QuadraticKernel()
        assert interp_kernels.cubic is CubicKernel()
        assert interp_kernels.catmull_rom is CatmullRomKernel()
        assert interp_kernels.keys == KeysKernel(np.float64, a=-0.5)
        assert interp_kernels.mitchell_netravali == MitchellNetravaliKernel()


# ── Value semantics ─────────────────────────────────────────────────────


class TestValueSemantics:
    """Equality, hashing, pickling and read-only attributes."""

    def test_equality(self):
        assert KeysKernel(a=-0.75) == KeysKernel(a=-0.75)
        assert KeysKernel(a=-0.75) != KeysKernel(a=-0.5)
        assert KeysKernel(np.float32) != KeysKernel(np.float64)
        assert MitchellNetravaliKernel(b=0.0, c=0.5) != CatmullRomKernel()

    def test_hash(self):
        kernels = {
            KeysKernel(a=-0.75),
            KeysKernel(a=-0.75),
            MitchellNetravaliKernel(),
            MitchellNetravaliKernel(),
            BoxKernel(),
        }
        assert len(kernels) == 3

    @pytest.mark.parametrize('kernel', [
        BoxKernel(np.float32),
        CubicKernel(),
        KeysKernel(np.float32, a=-0.75),
        MitchellNetravaliKernel(b=0.2, c=0.4),
    ], ids=repr)
    def test_pickle_roundtrip(self, kernel):
        restored = pickle.loads(pickle.dumps(kernel))
        assert restored == kernel
        assert restored.dtype == kernel.dtype
        if hasattr(kernel, 'coefficients'):
            assert restored.coefficients == kernel.coefficients

    def test_pickle_keeps_singleton(self):
        box32 = BoxKernel(np.float32)
        assert pickle.loads(pickle.dumps(box32)) is box32
        assert copy.copy(box32) is box32
        assert BoxKernel().dtype == np.float64

    def test_read_only_metadata(self):
        keys = KeysKernel()
        with pytest.raises(AttributeError):
            keys.a = 1.0
        with pytest.raises(AttributeError):
            keys.support_length = 8
        with pytest.raises(AttributeError):
            keys.coefficients = None

    def test_repr(self):
        assert repr(BoxKernel(np.float32)) == "BoxKernel('float32')"
        assert repr(KeysKernel(a=-0.75)) == "KeysKernel('float64', a=-0.75)"
        assert repr(MitchellNetravaliKernel(b=0.0, c=0.5)) == (
            "MitchellNetravaliKernel('float64', b=0.0, c=0.5)"
        )
