# -*- coding: utf-8 -*-
"""
Kernel Registry - Build kernels from a family name and keyword parameters.

Lets an outer configuration or command-line layer select a kernel by
name (``'keys'``, ``'mitchell_netravali'``, ...) without importing the
individual classes.

Usage
-----
::

    from interp_kernels.registry import create_kernel

    ker = create_kernel('keys', dtype='float32', a=-0.75)
    ker = create_kernel(KernelFamily.MITCHELL_NETRAVALI, b=0.0, c=0.5)

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
from typing import Any, Dict, List, Tuple, Type, Union

# Third-party
import numpy as np

# Kernels internal
from interp_kernels.base import Kernel
from interp_kernels.bspline import (
    BoxKernel,
    CubicKernel,
    QuadraticKernel,
    TriangleKernel,
)
from interp_kernels.cubic_convolution import (
    CatmullRomKernel,
    KeysKernel,
    MitchellNetravaliKernel,
)
from interp_kernels.exceptions import ValidationError
from interp_kernels.vocabulary import KernelFamily

logger = logging.getLogger(__name__)


# Kernel class and accepted shape parameter names, per family.
_REGISTRY: Dict[KernelFamily, Tuple[Type[Kernel], Tuple[str, ...]]] = {
    KernelFamily.BOX: (BoxKernel, ()),
    KernelFamily.TRIANGLE: (TriangleKernel, ()),
    KernelFamily.QUADRATIC: (QuadraticKernel, ()),
    KernelFamily.CUBIC: (CubicKernel, ()),
    KernelFamily.CATMULL_ROM: (CatmullRomKernel, ()),
    KernelFamily.KEYS: (KeysKernel, ('a',)),
    KernelFamily.MITCHELL_NETRAVALI: (MitchellNetravaliKernel, ('b', 'c')),
}


def resolve_family(family: Union[KernelFamily, str]) -> KernelFamily:
    """Resolve a family given as enum member or name.

    Parameters
    ----------
    family : KernelFamily or str
        Enum member, or its value in any letter case. Hyphens are
        accepted in place of underscores (``'catmull-rom'``).

    Returns
    -------
    KernelFamily

    Raises
    ------
    ValidationError
        If ``family`` names no known kernel.
    """
    if isinstance(family, KernelFamily):
        return family
    if isinstance(family, str):
        key = family.strip().lower().replace('-', '_')
        try:
            return KernelFamily(key)
        except ValueError:
            pass
    raise ValidationError(
        f"family must be one of {available_kernels()}, got {family!r}"
    )


def available_kernels() -> List[str]:
    """Names of all kernel families, in declaration order."""
    return [family.value for family in KernelFamily]


def kernel_class(family: Union[KernelFamily, str]) -> Type[Kernel]:
    """Return the kernel class implementing ``family``."""
    return _REGISTRY[resolve_family(family)][0]


def create_kernel(
    family: Union[KernelFamily, str],
    dtype: Any = np.float64,
    **params: Any,
) -> Kernel:
    """Create a kernel by family name.

    Parameters
    ----------
    family : KernelFamily or str
        Kernel family. See :func:`available_kernels`.
    dtype : np.dtype, type or str
        Floating-point element type. Default is ``np.float64``.
    **params
        Shape parameters: ``a`` for ``'keys'``; ``b`` and ``c`` for
        ``'mitchell_netravali'``. Omitted parameters take the class
        defaults. Other families accept none.

    Returns
    -------
    Kernel
        Callable kernel.

    Raises
    ------
    ValidationError
        If ``family`` is unknown or ``params`` holds names the family
        does not accept.
    DTypeError
        If ``dtype`` is not a floating-point type.
    """
    resolved = resolve_family(family)
    cls, accepted = _REGISTRY[resolved]
    unexpected = sorted(set(params) - set(accepted))
    if unexpected:
        raise ValidationError(
            f"{resolved.value} kernel accepts parameters {list(accepted)}, "
            f"got unexpected {unexpected}"
        )
    logger.debug("Creating %s kernel (dtype=%s, params=%s)",
                 resolved.value, dtype, params)
    return cls(dtype, **params)
