"""Bounded angles: canonical points on the circle.

This module provides the bounded angle family. A bounded angle represents a
point on the circle, not a signed displacement: its radian value is always
normalised into the main range ``(-π, π]``. Two values describing the same
point, such as 90° and -270°, build equal angles.

Every constructor, arithmetic operator and precision conversion re-establishes
the main-range invariant. Anomalous input (NaN, ±∞, division by zero) yields
the NaN angle instead of raising; ``is_nan()`` is the way to detect it.

Bounded angles have no ordering since points on a circle have none; ``<`` and
friends raise ``TypeError``.

Classes:
    Angle: Family root of the bounded angles.
    Angle32: Bounded angle stored in single precision.
    Angle64: Bounded angle stored in double precision.

Example:
    >>> a = Angle64.from_degrees(90)
    >>> b = Angle64.from_degrees(-270)
    >>> a == b
    True
    >>> Angle64.QUARTER + Angle64.QUARTER == Angle64.HALF
    True
    >>> -Angle64.HALF == Angle64.HALF  # π is its own opposite
    True
"""

from __future__ import annotations

import numpy as np

from .config import BASE_TYPE
from .normalize import is_canonical, normalize, normalize_within_two_turns
from .scalar import Float
from .unit_base import AngleBase, check_scalar


class Angle(AngleBase):
    """Unit-agnostic angle normalised into ``(-π, π]`` radians.

    Equality compares the normalised radian values, so the unit used at
    construction does not matter. NaN angles are never equal, even to
    themselves.

    Attributes:
        IS_FAMILY_ROOT (bool): True, this class is the root of the bounded family.
    """

    __slots__ = ()

    IS_FAMILY_ROOT = True

    @classmethod
    def _canonical(cls, radians):
        return normalize(radians, cls.KIND)

    @classmethod
    def _canonical_two_turns(cls, radians):
        return normalize_within_two_turns(radians, cls.KIND)

    @classmethod
    def from_radians_unchecked(cls, radians: BASE_TYPE) -> Angle:
        """Create an angle from a radian value already inside ``(-π, π]``.

        No normalisation is applied. Passing a value outside the main range
        breaks the class invariant; it is only caught by an assertion.
        """
        kind = cls._kind()
        radians = kind.cast(radians)
        assert is_canonical(radians, kind), f"{radians} is outside (-π, π]"
        return cls._new(radians)

    @classmethod
    def from_turns(cls, turns: BASE_TYPE) -> Angle:
        """Create an angle from a value in turns.

        The value is reduced modulo one turn before the conversion to radians,
        so turn counts too large to be expressed in radians still produce a
        finite angle.
        """
        kind = cls._kind()
        check_scalar(turns)
        with np.errstate(over="ignore", invalid="ignore"):
            radians = kind.fmod(kind.cast(turns), kind.ONE) * kind.TURNS_TO_RAD
        return cls._new(normalize_within_two_turns(radians, kind))

    @classmethod
    def from_unbounded(cls, angle) -> Angle:
        """Normalise an unbounded angle of the same precision."""
        from .unbounded import AngleUnbounded

        kind = cls._kind()
        if not isinstance(angle, AngleUnbounded) or angle.KIND is not kind:
            msg = f"cannot build {cls.__name__} from {type(angle).__name__}"
            raise TypeError(msg)
        return cls._new(normalize(angle.to_radians(), kind))

    def to_unbounded(self):
        """Embed this angle, unchanged, into the unbounded family."""
        from .unbounded import AngleUnbounded

        return AngleUnbounded.FLAVOURS[self.KIND]._new(self._radians)

    def _convert(self, kind: Float) -> Angle:
        target = self.ROOT.FLAVOURS[kind]
        radians = kind.cast(self._radians)
        if kind is Float.F64:
            # Widening is exact, the value is still in range.
            return target.from_radians_unchecked(radians)
        return target._new(normalize(radians, kind))

    def __neg__(self) -> Angle:
        """Return the opposite angle. π is a fixed point."""
        if self._radians == self.KIND.PI:
            return self
        return self._new(-self._radians)


class Angle32(Angle):
    """Bounded angle stored as a ``numpy.float32``."""

    __slots__ = ()

    KIND = Float.F32


class Angle64(Angle):
    """Bounded angle stored as a ``numpy.float64``."""

    __slots__ = ()

    KIND = Float.F64
