# -*- coding: utf-8 -*-
"""
Kernel Base Classes - ABCs for symmetric, compactly supported kernels.

Defines the ``Kernel`` ABC (callable interface, element type handling,
scalar/array dispatch and metadata queries) and ``SingletonKernel``
(kernels without shape parameters, shared as one instance per element
type).

Calling a kernel with a scalar evaluates it once and returns a numpy
scalar of the kernel's element type. Calling it with an array-like
evaluates every element independently and returns a new array of the
same shape, again with the kernel's element type. Subclasses only
implement :meth:`Kernel._evaluate` and :meth:`Kernel._evaluate_array`.

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
from abc import ABC, abstractmethod
from typing import Any, ClassVar, Dict, Tuple, Union

# Third-party
import numpy as np

# Kernels internal
from interp_kernels._validation import validate_dtype
from interp_kernels.vocabulary import KernelFamily

logger = logging.getLogger(__name__)


class Kernel(ABC):
    """Abstract base class for 1D interpolation and filtering kernels.

    All kernels are symmetric about zero and vanish for
    ``|x| >= support_length / 2``. A kernel is parameterized by the
    floating-point element type of its argument and return value.

    Parameters
    ----------
    dtype : np.dtype, type or str
        Floating-point element type. Default is ``np.float64``.

    Raises
    ------
    DTypeError
        If ``dtype`` is not a floating-point type.
    """

    family: ClassVar[KernelFamily]
    _support_length: ClassVar[int]
    _cardinal: ClassVar[bool]
    _normalized: ClassVar[bool] = True
    _param_names: ClassVar[Tuple[str, ...]] = ()

    def __init__(self, dtype: Any = np.float64) -> None:
        self._dtype = validate_dtype(dtype)
        self._type = self._dtype.type

    # ── Metadata ────────────────────────────────────────────────────────

    @property
    def dtype(self) -> np.dtype:
        """Element type of the kernel argument and result."""
        return self._dtype

    @property
    def support_length(self) -> int:
        """Width of the support; the kernel is zero outside
        ``[-support_length / 2, support_length / 2)``."""
        return self._support_length

    @property
    def support(self) -> Tuple[float, float]:
        """Support interval as ``(-support_length / 2, support_length / 2)``."""
        half = self._support_length / 2
        return (-half, half)

    @property
    def is_cardinal(self) -> bool:
        """Whether the kernel is one at zero and zero at every nonzero
        integer."""
        return self._cardinal

    @property
    def is_normalized(self) -> bool:
        """Whether integer shifts of the kernel sum to one (partition of
        unity)."""
        return self._normalized

    def __len__(self) -> int:
        return self._support_length

    # ── Evaluation ──────────────────────────────────────────────────────

    def __call__(self, x: Any) -> Union[np.floating, np.ndarray]:
        """Evaluate the kernel.

        Parameters
        ----------
        x : float or array_like
            Position(s) in sample-spacing units. Scalars are converted to
            the kernel element type before evaluation; arrays are
            converted elementwise.

        Returns
        -------
        np.floating or np.ndarray
            A scalar of the kernel element type for scalar input, or a
            new array of the same shape as ``x`` with the kernel
            element type. Integers too large for the element type
            convert to signed infinity, where every kernel is zero.
        """
        if isinstance(x, np.ndarray) or np.ndim(x) > 0:
            try:
                x = np.asarray(x, dtype=self._dtype)
            except OverflowError:
                x = np.asarray(x, dtype=object)
                x = np.array(
                    [self._convert(v) for v in x.reshape(-1)],
                    dtype=self._dtype,
                ).reshape(x.shape)
            return self._evaluate_array(x.reshape(-1)).reshape(x.shape)
        return self._evaluate(self._convert(x))

    def _convert(self, x: Any) -> np.floating:
        """Convert one real value to the element type."""
        try:
            return self._type(x)
        except OverflowError:
            return self._type(-np.inf if x < 0 else np.inf)

    @abstractmethod
    def _evaluate(self, x: np.floating) -> np.floating:
        """Evaluate at a single position already converted to the
        element type."""
        ...

    @abstractmethod
    def _evaluate_array(self, x: np.ndarray) -> np.ndarray:
        """Evaluate elementwise over a 1D array of the element type.

        Must not modify ``x`` and must return a new array of the same
        length whose values match :meth:`_evaluate` element by element.
        """
        ...

    # ── Value semantics ─────────────────────────────────────────────────

    def _params(self) -> Tuple[np.floating, ...]:
        """Shape parameters, in constructor order."""
        return ()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Kernel):
            return NotImplemented
        return (
            type(self) is type(other)
            and self._dtype == other._dtype
            and self._params() == other._params()
        )

    def __hash__(self) -> int:
        return hash((type(self), self._dtype, self._params()))

    def __reduce__(self):
        return (type(self), (self._dtype,) + self._params())

    def __repr__(self) -> str:
        args = [repr(self._dtype.name)]
        args.extend(
            f"{name}={float(value)!r}"
            for name, value in zip(self._param_names, self._params())
        )
        return f"{type(self).__name__}({', '.join(args)})"


class SingletonKernel(Kernel):
    """Base class for kernels without shape parameters.

    Such a kernel is fully determined by its element type, so a single
    instance per ``(class, dtype)`` pair is created and shared.
    Constructing the same kernel twice returns the same object.

    Subclasses precompute their per-dtype constants in :meth:`_prepare`,
    which runs once when the shared instance is created.
    """

    _instances: ClassVar[Dict[Tuple[type, np.dtype], 'SingletonKernel']] = {}

    def __new__(cls, dtype: Any = np.float64) -> 'SingletonKernel':
        resolved = validate_dtype(dtype)
        key = (cls, resolved)
        instance = SingletonKernel._instances.get(key)
        if instance is not None:
            return instance
        instance = super().__new__(cls)
        Kernel.__init__(instance, resolved)
        instance._prepare()
        instance = SingletonKernel._instances.setdefault(key, instance)
        logger.debug("Created shared %r", instance)
        return instance

    def __init__(self, dtype: Any = np.float64) -> None:
        # The shared instance is fully initialized in __new__.
        pass

    def _prepare(self) -> None:
        """Precompute constants in the element type."""
