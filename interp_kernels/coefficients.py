# -*- coding: utf-8 -*-
"""
Cubic Convolution Coefficients - Piecewise polynomial coefficients for
the two-piece cubic kernel families.

Every kernel of the cubic convolution family is written, for
``t = |x|``, as

    (p3*t + p2)*t*t + p0                  for t <= 1
    ((q3*t + q2)*t + q1)*t + q0           for 1 < t < 2

and zero elsewhere. The functions here derive the seven coefficients
from the shape parameters of the Keys and Mitchell-Netravali families.
Parameters are first converted to the kernel element type and every
subsequent operation is carried out in that type, so the stored
coefficients are exactly those used at evaluation time.

Parameter values are not validated: every real ``a`` or ``(b, c)``
yields a kernel, even when the result is no longer a useful
interpolant.

References
----------
R. G. Keys, "Cubic convolution interpolation for digital image
processing," IEEE Trans. Acoustics, Speech, and Signal Processing,
vol. ASSP-29, no. 6, pp. 1153-1160, Dec. 1981.

D. P. Mitchell and A. N. Netravali, "Reconstruction filters in
computer graphics," Computer Graphics, vol. 22, no. 4, pp. 221-228,
Aug. 1988.

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
from dataclasses import dataclass
from typing import Any

# Third-party
import numpy as np

# Kernels internal
from interp_kernels._validation import validate_dtype


@dataclass(frozen=True)
class CubicCoefficients:
    """Coefficients of a two-piece cubic kernel.

    ``p*`` belong to the inner piece (``t <= 1``, no linear term) and
    ``q*`` to the outer piece (``1 < t < 2``). All values share the
    kernel element type.
    """

    p0: np.floating
    p2: np.floating
    p3: np.floating
    q0: np.floating
    q1: np.floating
    q2: np.floating
    q3: np.floating


def keys_coefficients(a: Any, dtype: Any = np.float64) -> CubicCoefficients:
    """Derive the coefficients of the Keys cardinal cubic.

    Parameters
    ----------
    a : float
        Keys shape parameter. ``-0.5`` gives the Catmull-Rom spline and
        the third-order accurate interpolant; ``-0.75`` and ``-1.0``
        are common sharper choices.
    dtype : np.dtype, type or str
        Floating-point element type. Default is ``np.float64``.

    Returns
    -------
    CubicCoefficients
    """
    T = validate_dtype(dtype).type
    a = T(a)
    return CubicCoefficients(
        p0=T(1),
        p2=-a - T(3),
        p3=a + T(2),
        q0=-T(4) * a,
        q1=T(8) * a,
        q2=-T(5) * a,
        q3=a,
    )


def mitchell_netravali_coefficients(
    b: Any,
    c: Any,
    dtype: Any = np.float64,
) -> CubicCoefficients:
    """Derive the coefficients of a Mitchell-Netravali cubic.

    Parameters
    ----------
    b : float
        B-spline blending parameter. The kernel is cardinal iff
        ``b == 0``.
    c : float
        Cardinal-spline tension parameter.
    dtype : np.dtype, type or str
        Floating-point element type. Default is ``np.float64``.

    Returns
    -------
    CubicCoefficients
    """
    T = validate_dtype(dtype).type
    b = T(b)
    c = T(c)
    six = T(6)
    return CubicCoefficients(
        p0=(six - T(2) * b) / six,
        p2=(T(-18) + T(12) * b + six * c) / six,
        p3=(T(12) - T(9) * b - six * c) / six,
        q0=(T(8) * b + T(24) * c) / six,
        q1=(-T(12) * b - T(48) * c) / six,
        q2=(six * b + T(30) * c) / six,
        q3=(-b - six * c) / six,
    )


def catmull_rom_coefficients(dtype: Any = np.float64) -> CubicCoefficients:
    """Coefficients of the Catmull-Rom spline.

    Exact in every floating-point type:
    ``(3/2 t - 5/2) t^2 + 1`` and ``((5/2 - t/2) t - 4) t + 2``.
    """
    T = validate_dtype(dtype).type
    return CubicCoefficients(
        p0=T(1),
        p2=T(-2.5),
        p3=T(1.5),
        q0=T(2),
        q1=T(-4),
        q2=T(2.5),
        q3=T(-0.5),
    )
