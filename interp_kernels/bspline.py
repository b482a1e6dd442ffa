# -*- coding: utf-8 -*-
"""
B-Spline Kernels - Box, triangle, quadratic and cubic B-splines.

The centered B-splines of order 1 through 4. None of them takes a
shape parameter, so each is a ``SingletonKernel``: one shared instance
per element type. All four have the partition of unity property; only
the box and the triangle are cardinal.

=============  =======  ========  ==========
Kernel         Support  Cardinal  Normalized
=============  =======  ========  ==========
Box            1        yes       yes
Triangle       2        yes       yes
Quadratic      3        no        yes
Cubic          4        no        yes
=============  =======  ========  ==========

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
from typing import Any

# Third-party
import numpy as np

# Kernels internal
from interp_kernels.base import SingletonKernel
from interp_kernels.vocabulary import KernelFamily


class BoxKernel(SingletonKernel):
    """Box kernel, the order 1 (constant) B-spline.

    Also known as the Fourier or Dirichlet window. Equal to ``1`` on the
    half-open interval ``[-1/2, 1/2)`` and ``0`` elsewhere, so
    ``box(-0.5) == 1`` but ``box(0.5) == 0``. This keeps exactly one
    integer shift of the kernel nonzero at every position.

    Examples
    --------
    >>> box = BoxKernel(np.float32)
    >>> box([-0.5, 0.0, 0.5])
    array([1., 1., 0.], dtype=float32)
    """

    family = KernelFamily.BOX
    _support_length = 1
    _cardinal = True

    def _prepare(self) -> None:
        T = self._type
        self._lo = T(-0.5)
        self._hi = T(0.5)
        self._one = T(1)
        self._zero = T(0)

    def _evaluate(self, x: np.floating) -> np.floating:
        return self._one if self._lo <= x < self._hi else self._zero

    def _evaluate_array(self, x: np.ndarray) -> np.ndarray:
        inside = (x >= self._lo) & (x < self._hi)
        return np.where(inside, self._one, self._zero).astype(self._dtype)


class TriangleKernel(SingletonKernel):
    """Triangle kernel, the order 2 (linear) B-spline.

    Also known as the Bartlett, Fejér, hat or tent window. Used for
    linear interpolation: ``1 - |x|`` for ``|x| < 1``.
    """

    family = KernelFamily.TRIANGLE
    _support_length = 2
    _cardinal = True

    def _prepare(self) -> None:
        self._one = self._type(1)
        self._zero = self._type(0)

    def _evaluate(self, x: np.floating) -> np.floating:
        t = abs(x)
        return self._one - t if t < self._one else self._zero

    def _evaluate_array(self, x: np.ndarray) -> np.ndarray:
        t = np.abs(x)
        out = np.zeros_like(t)
        inside = t < self._one
        out[inside] = self._one - t[inside]
        return out


class QuadraticKernel(SingletonKernel):
    """Quadratic kernel, the order 3 B-spline.

    ``3/4 - t^2`` for ``t <= 1/2``, ``(t - 3/2)^2 / 2`` for
    ``1/2 < t < 3/2`` and zero beyond, with ``t = |x|``. Smooth but not
    cardinal: ``quadratic(1) == 1/8``.
    """

    family = KernelFamily.QUADRATIC
    _support_length = 3
    _cardinal = False

    def _prepare(self) -> None:
        T = self._type
        self._half = T(0.5)
        self._three_halves = T(1.5)
        self._three_quarters = T(0.75)
        self._zero = T(0)

    def _evaluate(self, x: np.floating) -> np.floating:
        t = abs(x)
        if t >= self._three_halves:
            return self._zero
        if t <= self._half:
            return self._three_quarters - t * t
        t = t - self._three_halves
        return self._half * t * t

    def _evaluate_array(self, x: np.ndarray) -> np.ndarray:
        t = np.abs(x)
        out = np.zeros_like(t)
        outside = t >= self._three_halves
        inner = t <= self._half
        outer = ~(outside | inner)

        ti = t[inner]
        out[inner] = self._three_quarters - ti * ti
        to = t[outer] - self._three_halves
        out[outer] = self._half * to * to
        return out


class CubicKernel(SingletonKernel):
    """Cubic kernel, the order 4 B-spline.

    Also known as the Parzen or de la Vallée Poussin window. Equal to
    the Mitchell-Netravali kernel with ``(b, c) = (1, 0)``. Not
    cardinal: ``cubic(0) == 2/3`` and ``cubic(1) == 1/6``.
    """

    family = KernelFamily.CUBIC
    _support_length = 4
    _cardinal = False

    def _prepare(self) -> None:
        T = self._type
        self._half = T(0.5)
        self._one = T(1)
        self._two = T(2)
        self._two_thirds = T(2) / T(3)
        self._one_sixth = T(1) / T(6)
        self._zero = T(0)

    def _evaluate(self, x: np.floating) -> np.floating:
        t = abs(x)
        if t >= self._two:
            return self._zero
        if t <= self._one:
            return (self._half * t - self._one) * t * t + self._two_thirds
        t = self._two - t
        return self._one_sixth * t * t * t

    def _evaluate_array(self, x: np.ndarray) -> np.ndarray:
        t = np.abs(x)
        out = np.zeros_like(t)
        outside = t >= self._two
        inner = t <= self._one
        outer = ~(outside | inner)

        ti = t[inner]
        out[inner] = (self._half * ti - self._one) * ti * ti + self._two_thirds
        to = self._two - t[outer]
        out[outer] = self._one_sixth * to * to * to
        return out


def box_kernel(dtype: Any = np.float64) -> BoxKernel:
    """Return the shared box kernel for ``dtype``.

    Convenience factory function. See :class:`BoxKernel`.
    """
    return BoxKernel(dtype)


def triangle_kernel(dtype: Any = np.float64) -> TriangleKernel:
    """Return the shared triangle kernel for ``dtype``.

    Convenience factory function. See :class:`TriangleKernel`.
    """
    return TriangleKernel(dtype)


def quadratic_kernel(dtype: Any = np.float64) -> QuadraticKernel:
    """Return the shared quadratic B-spline kernel for ``dtype``.

    Convenience factory function. See :class:`QuadraticKernel`.
    """
    return QuadraticKernel(dtype)


def cubic_kernel(dtype: Any = np.float64) -> CubicKernel:
    """Return the shared cubic B-spline kernel for ``dtype``.

    Convenience factory function. See :class:`CubicKernel`.
    """
    return CubicKernel(dtype)
