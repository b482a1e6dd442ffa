# -*- coding: utf-8 -*-
"""
interp_kernels - Piecewise polynomial kernels for resampling, filtering
and interpolation.

Symmetric, compactly supported 1D kernel functions with a uniform
callable signature: ``kernel(x)`` returns one weight for a scalar
``x`` and an array of weights, of the same shape, for an array ``x``.
Every kernel is parameterized by a floating-point element type and
exposes ``support_length``, ``is_cardinal`` and ``is_normalized``.

Available kernels:

- ``BoxKernel`` — order 1 B-spline, half-open support ``[-1/2, 1/2)``.
- ``TriangleKernel`` — order 2 B-spline (linear interpolation).
- ``QuadraticKernel`` — order 3 B-spline.
- ``CubicKernel`` — order 4 B-spline.
- ``CatmullRomKernel`` — cardinal cubic, cubic order of approximation.
- ``KeysKernel`` — Keys cardinal cubic with shape parameter ``a``.
- ``MitchellNetravaliKernel`` — two-parameter ``(b, c)`` cubic family.

Shared double-precision instances: ``box``, ``triangle``,
``quadratic``, ``cubic``, ``catmull_rom``, ``keys`` (``a = -1/2``) and
``mitchell_netravali`` (``b = c = 1/3``).

Dependencies
------------
numpy

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

__version__ = "0.1.0"
__author__ = "Duane Smalley"

from interp_kernels.exceptions import (
    KernelError,
    ValidationError,
    DTypeError,
)
from interp_kernels.vocabulary import KernelFamily
from interp_kernels.base import Kernel, SingletonKernel
from interp_kernels.coefficients import (
    CubicCoefficients,
    keys_coefficients,
    mitchell_netravali_coefficients,
    catmull_rom_coefficients,
)
from interp_kernels.bspline import (
    BoxKernel,
    TriangleKernel,
    QuadraticKernel,
    CubicKernel,
    box_kernel,
    triangle_kernel,
    quadratic_kernel,
    cubic_kernel,
)
from interp_kernels.cubic_convolution import (
    CatmullRomKernel,
    KeysKernel,
    MitchellNetravaliKernel,
    catmull_rom_kernel,
    keys_kernel,
    mitchell_netravali_kernel,
)
from interp_kernels.registry import (
    available_kernels,
    create_kernel,
    kernel_class,
    resolve_family,
)

box = BoxKernel()
triangle = TriangleKernel()
quadratic = QuadraticKernel()
cubic = CubicKernel()
catmull_rom = CatmullRomKernel()
keys = KeysKernel()
mitchell_netravali = MitchellNetravaliKernel()

__all__ = [
    'KernelError',
    'ValidationError',
    'DTypeError',
    'KernelFamily',
    'Kernel',
    'SingletonKernel',
    'CubicCoefficients',
    'keys_coefficients',
    'mitchell_netravali_coefficients',
    'catmull_rom_coefficients',
    'BoxKernel',
    'TriangleKernel',
    'QuadraticKernel',
    'CubicKernel',
    'CatmullRomKernel',
    'KeysKernel',
    'MitchellNetravaliKernel',
    'box_kernel',
    'triangle_kernel',
    'quadratic_kernel',
    'cubic_kernel',
    'catmull_rom_kernel',
    'keys_kernel',
    'mitchell_netravali_kernel',
    'available_kernels',
    'create_kernel',
    'kernel_class',
    'resolve_family',
    'box',
    'triangle',
    'quadratic',
    'cubic',
    'catmull_rom',
    'keys',
    'mitchell_netravali',
]
