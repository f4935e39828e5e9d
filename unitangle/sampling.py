"""Random angle generation on top of NumPy random generators.

Two operations are provided:

- ``random_angle`` draws an angle uniformly distributed on the full circle.
  Bounded angles cover ``(-π, π]``; unbounded angles are drawn the same way
  and embedded, so they also lie in ``(-π, π]``.
- ``uniform`` draws an angle uniformly between two bounds.

For bounded angles the bounds of ``uniform`` are points on the circle, not
numbers: the sample lies on the arc going counterclockwise from ``low`` to
``high``. When the radian value of ``low`` exceeds that of ``high`` the arc
crosses ``±π``, so one full turn is added to ``high`` before drawing. Swapping
the bounds therefore selects the other side of the circle.

Unbounded angles are ordered, so an inverted range is a caller mistake and
raises ``EmptyRangeError``.

Every function accepts ``rng`` as a ``numpy.random.Generator``, an integer
seed, or ``None`` for a fresh generator.

Example:
    >>> from unitangle import Angle32
    >>> top, bottom = Angle32.DEG_90, -Angle32.DEG_90
    >>> left = uniform(top, bottom, rng=7)   # cos(left) <= 0
    >>> right = uniform(bottom, top, rng=7)  # cos(right) >= 0
"""

from __future__ import annotations

import logging

import numpy as np

from .angle import Angle
from .errors import EmptyRangeError
from .unbounded import AngleUnbounded
from .unit_angle import Unit

logger = logging.getLogger(__name__)


def _rng(rng) -> np.random.Generator:
    if isinstance(rng, np.random.Generator):
        return rng
    return np.random.default_rng(rng)


def random_angle(angle_cls: type, rng=None, *, unit: type[Unit] | None = None):
    """Draw an angle uniformly distributed on the circle.

    Args:
        angle_cls: Concrete angle class to build (``Angle32``, ...).
        rng: Generator, seed or None.
        unit: Optional unit wrapper class; the result is wrapped in it. The
            unit has no influence on the drawn value.

    Returns:
        A new angle of ``angle_cls``, or a unit wrapper around one.
    """
    kind = angle_cls._kind()
    # [0, 1) -> [0, τ) -> [-π, π) -> (-π, π]
    u = kind.cast(_rng(rng).random(dtype=kind.dtype))
    radians = -(u * kind.TAU - kind.PI)

    bounded_cls = Angle.FLAVOURS[kind]
    bounded = bounded_cls._new(bounded_cls._canonical_two_turns(radians))
    if issubclass(angle_cls, AngleUnbounded):
        angle = bounded.to_unbounded()
    else:
        angle = bounded
    return unit(angle) if unit is not None else angle


def _uniform_radians(rng: np.random.Generator, low, high, kind, inclusive: bool):
    u = kind.cast(rng.random(dtype=kind.dtype))
    with np.errstate(all="ignore"):
        scale = high - low
        if inclusive:
            # stretch [0, 1) so that its largest value lands on `high`
            scale = scale / (kind.ONE - kind.EPSILON)
        radians = low + scale * u
        if inclusive and radians > high:
            radians = high
        elif not inclusive and radians >= high:
            radians = np.nextafter(high, low)
    return radians


def uniform(low, high, rng=None, *, inclusive: bool = False):
    """Draw an angle uniformly between ``low`` and ``high``.

    Args:
        low: Lower bound, an angle.
        high: Upper bound, an angle of the same class as ``low``.
        rng: Generator, seed or None.
        inclusive: Whether ``high`` itself may be drawn.

    Returns:
        A new angle of the same class as the bounds.

    Raises:
        TypeError: If the bounds are not angles of the same class.
        EmptyRangeError: If the range contains no value: equal bounds with
            ``inclusive=False``, or ``low > high`` for unbounded angles.
    """
    angle_cls = type(low)
    if not issubclass(angle_cls, (Angle, AngleUnbounded)) or type(high) is not angle_cls:
        msg = f"cannot sample between {type(low).__name__} and {type(high).__name__}"
        raise TypeError(msg)

    kind = angle_cls.KIND
    lo, hi = low.to_radians(), high.to_radians()
    if lo == hi and not inclusive:
        msg = f"cannot sample empty range [{low!r}, {high!r})"
        raise EmptyRangeError(msg)

    if isinstance(low, Angle):
        if lo > hi:
            logger.debug("range %r..%r crosses ±π, taking the counterclockwise arc", low, high)
            hi = hi + kind.TAU
    elif lo > hi:
        msg = f"cannot sample empty range [{low!r}, {high!r}]"
        raise EmptyRangeError(msg)

    radians = _uniform_radians(_rng(rng), lo, hi, kind, inclusive)
    return angle_cls.from_radians(radians)
