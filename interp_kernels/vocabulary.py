# -*- coding: utf-8 -*-
"""
Vocabulary - Canonical enum of the supported kernel families.

Single source of truth for kernel family names. The registry, the
kernel classes and any outer configuration layer refer to families
through this enum so that names stay consistent and typo-free.

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

from enum import Enum


class KernelFamily(Enum):
    """Closed set of kernel families.

    B-spline kernels (``BOX`` through ``CUBIC``) have no shape
    parameters. ``CATMULL_ROM`` is a fixed member of the cubic
    convolution family, ``KEYS`` takes one parameter ``a`` and
    ``MITCHELL_NETRAVALI`` takes two, ``b`` and ``c``.
    """

    BOX = "box"
    TRIANGLE = "triangle"
    QUADRATIC = "quadratic"
    CUBIC = "cubic"
    CATMULL_ROM = "catmull_rom"
    KEYS = "keys"
    MITCHELL_NETRAVALI = "mitchell_netravali"
