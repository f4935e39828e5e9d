"""Unbounded angles: angular displacements that keep their winding count.

Unlike a bounded ``Angle``, an unbounded angle stores its radian value as
given, so one full turn and zero turns are different values. Arithmetic never
wraps, and the family has the total order of the real numbers.

The bridge between both families lives here: ``to_bounded()`` applies the
same normalisation as the bounded constructors, and ``from_bounded()`` embeds
a bounded angle without any change. Embedding then normalising gives back the
original bounded angle.

Classes:
    AngleUnbounded: Family root of the unbounded angles.
    AngleUnbounded32: Unbounded angle stored in single precision.
    AngleUnbounded64: Unbounded angle stored in double precision.

Example:
    >>> a = AngleUnbounded64.from_degrees(90)
    >>> b = AngleUnbounded64.from_degrees(450)
    >>> a == b, a < b
    (False, True)
    >>> a.to_bounded() == b.to_bounded()
    True
"""

from __future__ import annotations

from .angle import Angle
from .scalar import Float
from .unit_base import AngleBase


class AngleUnbounded(AngleBase):
    """Unit-agnostic angle holding any radian value.

    Attributes:
        IS_FAMILY_ROOT (bool): True, this class is the root of the unbounded family.
    """

    __slots__ = ()

    IS_FAMILY_ROOT = True

    @classmethod
    def from_bounded(cls, angle: Angle) -> AngleUnbounded:
        """Embed a bounded angle of the same precision, value unchanged."""
        kind = cls._kind()
        if not isinstance(angle, Angle) or angle.KIND is not kind:
            msg = f"cannot build {cls.__name__} from {type(angle).__name__}"
            raise TypeError(msg)
        return cls._new(angle.to_radians())

    def to_bounded(self) -> Angle:
        """Normalise this angle into the bounded family."""
        return Angle.FLAVOURS[self.KIND].from_unbounded(self)

    # -------------------------------- Ordering --------------------------------
    def __lt__(self, other: AngleUnbounded) -> bool:
        self._check_same_root(other)
        return bool(self._radians < other._radians)

    def __le__(self, other: AngleUnbounded) -> bool:
        self._check_same_root(other)
        return bool(self._radians <= other._radians)

    def __gt__(self, other: AngleUnbounded) -> bool:
        self._check_same_root(other)
        return bool(self._radians > other._radians)

    def __ge__(self, other: AngleUnbounded) -> bool:
        self._check_same_root(other)
        return bool(self._radians >= other._radians)


class AngleUnbounded32(AngleUnbounded):
    """Unbounded angle stored as a ``numpy.float32``."""

    __slots__ = ()

    KIND = Float.F32


class AngleUnbounded64(AngleUnbounded):
    """Unbounded angle stored as a ``numpy.float64``."""

    __slots__ = ()

    KIND = Float.F64
