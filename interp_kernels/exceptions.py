# -*- coding: utf-8 -*-
"""
Kernel Exception Hierarchy - Domain-specific exceptions for kernel construction.

Provides a small exception hierarchy that lets downstream resampling code
catch kernel-library errors distinctly from Python built-in exceptions.
All exceptions subclass both ``KernelError`` and the appropriate built-in
exception, so ``except ValueError`` and ``except TypeError`` keep working.

Evaluating a kernel never raises for real input; these exceptions are
only raised while building a kernel.

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


class KernelError(Exception):
    """Base exception for all kernel library errors."""


class ValidationError(KernelError, ValueError):
    """Invalid kernel selection or construction parameters.

    Raised for unknown kernel family names and for keyword parameters
    that the selected family does not accept.
    """


class DTypeError(KernelError, TypeError):
    """Requested element type is not a floating-point type.

    Kernel breakpoints are fractional and the piecewise polynomials
    need floating-point arithmetic, so integer, boolean, complex and
    object element types are rejected at construction time.
    """
