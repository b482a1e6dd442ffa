# -*- coding: utf-8 -*-
"""
Cubic Convolution Kernels - Catmull-Rom, Keys and Mitchell-Netravali.

Two-piece cubic kernels with support ``[-2, 2)``, evaluated from a
``CubicCoefficients`` record (see :mod:`interp_kernels.coefficients`)
for ``t = |x|``:

    (p3*t + p2)*t*t + p0                  for t <= 1
    ((q3*t + q2)*t + q1)*t + q0           for 1 < t < 2

Every member of the family is normalized and has continuous value and
first derivative. Some ``(b, c)`` values of the Mitchell-Netravali
family give other well known kernels:

==============  ==========================================
``(b, c)``      Kernel
==============  ==========================================
``(1, 0)``      Cubic B-spline (:class:`CubicKernel`)
``(0, -a)``     Keys cardinal cubic with parameter ``a``
``(0, 1/2)``    Catmull-Rom spline
``(b, 0)``      Duff's tensioned B-spline
``(1/3, 1/3)``  Mitchell-Netravali recommendation (default)
==============  ==========================================

Choosing ``b + 2c = 1`` gives at least quadratic order of
approximation.

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
import logging
from typing import Any, Optional, Tuple

# Third-party
import numpy as np

# Kernels internal
from interp_kernels.base import Kernel, SingletonKernel
from interp_kernels.coefficients import (
    CubicCoefficients,
    catmull_rom_coefficients,
    keys_coefficients,
    mitchell_netravali_coefficients,
)
from interp_kernels.vocabulary import KernelFamily

logger = logging.getLogger(__name__)


# ── Piecewise cubic evaluation ──────────────────────────────────────────


class _PiecewiseCubic:
    """Evaluation shared by the cubic convolution kernels.

    Concrete classes set ``self._coefficients`` before first use.
    """

    _coefficients: CubicCoefficients

    @property
    def coefficients(self) -> CubicCoefficients:
        """Piecewise polynomial coefficients."""
        return self._coefficients

    def _evaluate(self, x: np.floating) -> np.floating:
        c = self._coefficients
        t = abs(x)
        if t >= 2:
            return type(x)(0)
        if t <= 1:
            return (c.p3 * t + c.p2) * t * t + c.p0
        return ((c.q3 * t + c.q2) * t + c.q1) * t + c.q0

    def _evaluate_array(self, x: np.ndarray) -> np.ndarray:
        c = self._coefficients
        t = np.abs(x)
        out = np.zeros_like(t)
        outside = t >= 2
        inner = t <= 1
        outer = ~(outside | inner)

        ti = t[inner]
        out[inner] = (c.p3 * ti + c.p2) * ti * ti + c.p0
        to = t[outer]
        out[outer] = ((c.q3 * to + c.q2) * to + c.q1) * to + c.q0
        return out


# ── Kernels ─────────────────────────────────────────────────────────────


class CatmullRomKernel(_PiecewiseCubic, SingletonKernel):
    """Catmull-Rom spline kernel.

    Cardinal cubic with cubic order of approximation. Identical to
    ``KeysKernel(a=-0.5)`` and ``MitchellNetravaliKernel(b=0, c=0.5)``,
    but without shape parameters, so it is shared per element type.

    References
    ----------
    E. Catmull and R. Rom, "A class of local interpolating splines,"
    Computer Aided Geometric Design, 1974.
    """

    family = KernelFamily.CATMULL_ROM
    _support_length = 4
    _cardinal = True

    def _prepare(self) -> None:
        self._coefficients = catmull_rom_coefficients(self._dtype)


class KeysKernel(_PiecewiseCubic, Kernel):
    """Keys cardinal cubic convolution kernel.

    Piecewise normalized cardinal cubic depending on one parameter
    ``a``. Coefficients are derived once, at construction.

    Parameters
    ----------
    dtype : np.dtype, type or str
        Floating-point element type. Default is ``np.float64``.
    a : float
        Shape parameter (slope of the kernel at ``|x| = 1``). Common
        values:

        - -0.5 — Catmull-Rom, third order accurate, default
        - -0.75 — sharper, used by several image libraries
        - -1.0 — sharpest of the usual choices

    References
    ----------
    R. G. Keys, "Cubic convolution interpolation for digital image
    processing," IEEE Trans. Acoustics, Speech, and Signal Processing,
    vol. ASSP-29, no. 6, pp. 1153-1160, Dec. 1981.

    Examples
    --------
    >>> keys = KeysKernel(np.float64, a=-0.75)
    >>> weights = keys(np.array([-1.25, -0.25, 0.75, 1.75]))
    """

    family = KernelFamily.KEYS
    _support_length = 4
    _cardinal = True
    _param_names = ('a',)

    def __init__(self, dtype: Any = np.float64, a: Any = -0.5) -> None:
        super().__init__(dtype)
        self._a = self._type(a)
        self._coefficients = keys_coefficients(self._a, self._dtype)
        logger.debug("Created %r with %s", self, self._coefficients)

    @property
    def a(self) -> np.floating:
        """Keys shape parameter in the element type."""
        return self._a

    def _params(self) -> Tuple[np.floating, ...]:
        return (self._a,)


class MitchellNetravaliKernel(_PiecewiseCubic, Kernel):
    """Mitchell-Netravali two-parameter cubic kernel.

    Whatever ``(b, c)``, the kernel is normalized and symmetric with
    continuous value and first derivative. It is cardinal if and only
    if ``b == 0``, so unlike every other kernel :attr:`is_cardinal`
    depends on the instance rather than on the class.

    Parameters
    ----------
    dtype : np.dtype, type or str
        Floating-point element type. Default is ``np.float64``.
    b : float, optional
        B-spline blending parameter. Default is ``1/3``.
    c : float, optional
        Tension parameter. Default is ``1/3``.

    The defaults are the values recommended by Mitchell and Netravali
    and are formed as ``T(1) / T(3)`` in the element type ``T``.

    References
    ----------
    D. P. Mitchell and A. N. Netravali, "Reconstruction filters in
    computer graphics," Computer Graphics, vol. 22, no. 4,
    pp. 221-228, Aug. 1988.
    """

    family = KernelFamily.MITCHELL_NETRAVALI
    _support_length = 4
    _cardinal = False
    _param_names = ('b', 'c')

    def __init__(
        self,
        dtype: Any = np.float64,
        b: Optional[Any] = None,
        c: Optional[Any] = None,
    ) -> None:
        super().__init__(dtype)
        T = self._type
        third = T(1) / T(3)
        self._b = third if b is None else T(b)
        self._c = third if c is None else T(c)
        self._coefficients = mitchell_netravali_coefficients(
            self._b, self._c, self._dtype,
        )
        logger.debug("Created %r with %s", self, self._coefficients)

    @property
    def b(self) -> np.floating:
        """B-spline blending parameter in the element type."""
        return self._b

    @property
    def c(self) -> np.floating:
        """Tension parameter in the element type."""
        return self._c

    @property
    def is_cardinal(self) -> bool:
        """Whether ``b == 0``."""
        return bool(self._b == 0)

    def _params(self) -> Tuple[np.floating, ...]:
        return (self._b, self._c)


# ── Factories ───────────────────────────────────────────────────────────


def catmull_rom_kernel(dtype: Any = np.float64) -> CatmullRomKernel:
    """Return the shared Catmull-Rom kernel for ``dtype``.

    Convenience factory function. See :class:`CatmullRomKernel`.
    """
    return CatmullRomKernel(dtype)


def keys_kernel(dtype: Any = np.float64, a: Any = -0.5) -> KeysKernel:
    """Create a Keys cardinal cubic kernel.

    Convenience factory function. See :class:`KeysKernel` for full
    documentation.

    Parameters
    ----------
    dtype : np.dtype, type or str
        Floating-point element type. Default is ``np.float64``.
    a : float
        Shape parameter. Default is -0.5.

    Returns
    -------
    KeysKernel
        Callable kernel.
    """
    return KeysKernel(dtype, a=a)


def mitchell_netravali_kernel(
    dtype: Any = np.float64,
    b: Optional[Any] = None,
    c: Optional[Any] = None,
) -> MitchellNetravaliKernel:
    """Create a Mitchell-Netravali cubic kernel.

    Convenience factory function. See :class:`MitchellNetravaliKernel`
    for full documentation.

    Parameters
    ----------
    dtype : np.dtype, type or str
        Floating-point element type. Default is ``np.float64``.
    b, c : float, optional
        Shape parameters. Default is ``1/3`` each.

    Returns
    -------
    MitchellNetravaliKernel
        Callable kernel.
    """
    return MitchellNetravaliKernel(dtype, b=b, c=c)
