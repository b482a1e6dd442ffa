# -*- coding: utf-8 -*-
"""
Kernel Validation Helpers - Shared element type validation.

Every kernel class and the coefficient derivation functions call
``validate_dtype`` so that the floating-point constraint on the kernel
element type is enforced in exactly one place.

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
from interp_kernels.exceptions import DTypeError


def validate_dtype(dtype: Any, name: str = 'dtype') -> np.dtype:
    """Resolve and validate a kernel element type.

    Parameters
    ----------
    dtype : Any
        Anything accepted by ``np.dtype``: a numpy scalar type
        (``np.float32``), a builtin (``float``), a dtype instance or a
        dtype name (``'float64'``).
    name : str
        Parameter name for error messages. Default ``'dtype'``.

    Returns
    -------
    np.dtype
        The resolved floating-point dtype, in native byte order.

    Raises
    ------
    DTypeError
        If ``dtype`` is ``None``, does not name a dtype, or names one
        that is not a real floating-point type.
    """
    # np.dtype(None) silently means float64
    if dtype is None:
        raise DTypeError(f"{name} must be a floating-point dtype, got None")
    try:
        resolved = np.dtype(dtype)
    except TypeError as exc:
        raise DTypeError(
            f"{name} must be a floating-point dtype, got {dtype!r}"
        ) from exc
    if not np.issubdtype(resolved, np.floating):
        raise DTypeError(
            f"{name} must be a floating-point dtype, got {resolved.name!r}"
        )
    return resolved.newbyteorder('=')
