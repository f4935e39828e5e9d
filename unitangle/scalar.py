"""Sealed floating-point abstraction backing every angle type.

This module defines which floating-point representations can carry an angle
value. The set is closed: exactly single precision (``float32``) and double
precision (``float64``), modelled as the two members of the ``Float``
enumeration. An enumeration with members cannot be subclassed, so no third
scalar kind can ever be introduced.

Each member carries a constant table expressed in its own dtype: identities,
machine epsilon, the fractions of π used by the named angle constants and the
unit conversion factors. The π fractions come from a hand-written decimal
table that is rounded exactly once into each precision; the conversion
factors are then computed in that precision, so single-precision values match
IEEE-754 binary32 arithmetic bit for bit.

Trigonometric functions are delegated to a pluggable backend. ``numpy`` is the
default; the standard ``math`` module is available as an alternative. The
angle types never depend on which backend is active.

Classes:
    Float: The closed set of scalar kinds (``F32`` and ``F64``).
    TrigBackend: Base class of the trigonometric strategies.
    NumpyBackend: Trigonometry computed by NumPy in the scalar's dtype.
    MathBackend: Trigonometry computed by the ``math`` module, cast back.

Example:
    >>> from unitangle.scalar import F32
    >>> F32.PI
    np.float32(3.1415927)
    >>> F32.RAD_TO_DEG * F32.FRAC_PI_2
    np.float32(90.0)
"""

from __future__ import annotations

import logging
import math
from enum import Enum

import numpy as np

from . import config

logger = logging.getLogger(__name__)

# π fractions, rounded once into each precision.
_PI_TABLE = {
    "PI": "3.14159265358979323846264338327950288",
    "TAU": "6.28318530717958647692528676655900577",
    "FRAC_PI_2": "1.57079632679489661923132169163975144",
    "FRAC_PI_3": "1.04719755119659774615421446109316763",
    "FRAC_PI_4": "0.785398163397448309615660845819875721",
    "FRAC_PI_6": "0.523598775598298873077107230546583814",
    "FRAC_PI_8": "0.392699081698724154807830422909937861",
}


class Float(Enum):
    """Closed set of floating-point kinds an angle can be stored in.

    Attributes:
        dtype: NumPy scalar type of the kind.
        ZERO, ONE: Additive and multiplicative identities.
        EPSILON: Machine epsilon.
        DOUBLE_EPSILON: Twice the machine epsilon.
        NAN, MAX, MIN: Quiet NaN and the largest/smallest finite values.
        PI, TAU, FRAC_PI_2, FRAC_PI_3, FRAC_PI_4, FRAC_PI_6, FRAC_PI_8:
            π and its fractions.
        DEG_TO_RAD, RAD_TO_DEG, TURNS_TO_RAD, RAD_TO_TURNS, GRAD_TO_RAD,
        RAD_TO_GRAD: Unit conversion factors.
    """

    F32 = "float32"
    F64 = "float64"

    def __init__(self, dtype_name: str):
        dtype = np.dtype(dtype_name).type
        info = np.finfo(dtype)

        self.dtype = dtype
        self.ZERO = dtype(0)
        self.ONE = dtype(1)
        self.EPSILON = dtype(info.eps)
        self.DOUBLE_EPSILON = self.EPSILON * dtype(2)
        self.NAN = dtype("nan")
        self.MAX = dtype(info.max)
        self.MIN = dtype(info.min)

        for name, literal in _PI_TABLE.items():
            setattr(self, name, dtype(literal))

        self.DEG_TO_RAD = self.PI / dtype(180)
        self.RAD_TO_DEG = dtype(180) / self.PI
        self.TURNS_TO_RAD = self.TAU
        self.RAD_TO_TURNS = self.ONE / self.TAU
        self.GRAD_TO_RAD = self.PI / dtype(200)
        self.RAD_TO_GRAD = dtype(200) / self.PI

    @classmethod
    def of(cls, value) -> Float:
        """Return the kind matching the precision of ``value``.

        ``numpy.float32`` values map to ``F32``; every other number maps to
        ``F64``.
        """
        if isinstance(value, np.float32):
            return cls.F32
        return cls.F64

    def cast(self, value):
        """Convert a real number to this kind's dtype.

        Values outside the representable range become infinite; this is not
        an error. Python integers too large for any float included.
        """
        if isinstance(value, int):
            try:
                value = float(value)
            except OverflowError:
                value = math.inf if value > 0 else -math.inf
        with np.errstate(over="ignore"):
            return self.dtype(value)

    def is_nan(self, value) -> bool:
        return bool(np.isnan(value))

    def is_finite(self, value) -> bool:
        return bool(np.isfinite(value))

    def fmod(self, x, y):
        """Truncating remainder of ``x / y``; the result has the sign of ``x``."""
        with np.errstate(invalid="ignore"):
            return np.fmod(self.dtype(x), self.dtype(y))

    def sin(self, value):
        return _backend.sin(self, value)

    def cos(self, value):
        return _backend.cos(self, value)

    def tan(self, value):
        return _backend.tan(self, value)

    def sin_cos(self, value):
        return _backend.sin_cos(self, value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}.{self.name}"


F32 = Float.F32
F64 = Float.F64


class TrigBackend:
    """Strategy computing trigonometric functions for a scalar kind."""

    NAME = ""

    def sin(self, kind: Float, value):
        raise NotImplementedError

    def cos(self, kind: Float, value):
        raise NotImplementedError

    def tan(self, kind: Float, value):
        raise NotImplementedError

    def sin_cos(self, kind: Float, value):
        return self.sin(kind, value), self.cos(kind, value)


class NumpyBackend(TrigBackend):
    NAME = "numpy"

    def sin(self, kind, value):
        with np.errstate(invalid="ignore"):
            return kind.dtype(np.sin(kind.dtype(value)))

    def cos(self, kind, value):
        with np.errstate(invalid="ignore"):
            return kind.dtype(np.cos(kind.dtype(value)))

    def tan(self, kind, value):
        with np.errstate(invalid="ignore"):
            return kind.dtype(np.tan(kind.dtype(value)))


class MathBackend(TrigBackend):
    """Trigonometry from the standard ``math`` module.

    ``math`` raises on infinite input, so non-finite values short-circuit to
    NaN before the call.
    """

    NAME = "math"

    @staticmethod
    def _apply(func, kind, value):
        if not kind.is_finite(value):
            return kind.NAN
        return kind.cast(func(float(value)))

    def sin(self, kind, value):
        return self._apply(math.sin, kind, value)

    def cos(self, kind, value):
        return self._apply(math.cos, kind, value)

    def tan(self, kind, value):
        return self._apply(math.tan, kind, value)


_BACKENDS: dict[str, TrigBackend] = {
    backend.NAME: backend for backend in (NumpyBackend(), MathBackend())
}


def get_trig_backend() -> TrigBackend:
    return _backend


def set_trig_backend(name: str) -> TrigBackend:
    """Select the trigonometric backend used by every scalar kind.

    Args:
        name: ``"numpy"`` or ``"math"``.

    Returns:
        TrigBackend: The backend now in use.

    Raises:
        ValueError: If ``name`` is not a known backend.
    """
    global _backend

    try:
        backend = _BACKENDS[name]
    except KeyError:
        msg = f"unknown trig backend {name!r}, expected one of {sorted(_BACKENDS)}"
        raise ValueError(msg) from None
    logger.debug("using %s trig backend", name)
    _backend = backend
    return backend


if config.TRIG_BACKEND not in _BACKENDS:
    logger.warning(
        "ignoring %s=%r, falling back to the numpy trig backend",
        config.TRIG_BACKEND_ENV,
        config.TRIG_BACKEND,
    )
_backend: TrigBackend = _BACKENDS.get(config.TRIG_BACKEND, _BACKENDS["numpy"])
