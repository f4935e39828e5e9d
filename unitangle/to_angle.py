"""Shorthand constructors turning a plain number into an angle.

The precision of the angle follows the number: a ``numpy.float32`` gives a
single-precision angle, anything else a double-precision one. Pass ``kind``
to choose explicitly.

Example:
    >>> import numpy as np
    >>> rad(0.5)
    Angle64(0.5)
    >>> turns(np.float32(0.25))
    Angle32(1.5707964)
    >>> deg_unbounded(450) > deg_unbounded(90)
    True
"""

from __future__ import annotations

from .angle import Angle
from .config import BASE_TYPE
from .scalar import Float
from .unbounded import AngleUnbounded


def _flavour(root, value, kind: Float | None):
    return root.FLAVOURS[kind or Float.of(value)]


def rad(value: BASE_TYPE, kind: Float | None = None) -> Angle:
    """Create a bounded angle from a value in radians."""
    return _flavour(Angle, value, kind).from_radians(value)


def deg(value: BASE_TYPE, kind: Float | None = None) -> Angle:
    """Create a bounded angle from a value in degrees."""
    return _flavour(Angle, value, kind).from_degrees(value)


def turns(value: BASE_TYPE, kind: Float | None = None) -> Angle:
    """Create a bounded angle from a value in turns."""
    return _flavour(Angle, value, kind).from_turns(value)


def grad(value: BASE_TYPE, kind: Float | None = None) -> Angle:
    """Create a bounded angle from a value in gradians."""
    return _flavour(Angle, value, kind).from_gradians(value)


def rad_unbounded(value: BASE_TYPE, kind: Float | None = None) -> AngleUnbounded:
    return _flavour(AngleUnbounded, value, kind).from_radians(value)


def deg_unbounded(value: BASE_TYPE, kind: Float | None = None) -> AngleUnbounded:
    return _flavour(AngleUnbounded, value, kind).from_degrees(value)


def turns_unbounded(value: BASE_TYPE, kind: Float | None = None) -> AngleUnbounded:
    return _flavour(AngleUnbounded, value, kind).from_turns(value)


def grad_unbounded(value: BASE_TYPE, kind: Float | None = None) -> AngleUnbounded:
    return _flavour(AngleUnbounded, value, kind).from_gradians(value)
