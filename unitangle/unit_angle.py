"""Angular unit definitions for display, serialization and conversion tables.

This module provides the four angular units supported by the library:
radians, degrees, turns and gradians. Angles themselves are unit agnostic and
always store radians; a unit class wraps an angle to say in which unit its
value should be shown or written out.

Each unit also owns a static conversion table per scalar kind: the factor to
radians, its reciprocal, and the value in that unit of seven fractions of the
circle (full, half, quarter, sixth, eighth, twelfth, sixteenth). Radian
values are taken from the scalar kind's own π constants; the other units use
exact integer circles divided in the kind's precision. ``AngleBase.to`` and
``Unit.value`` read their factor from these tables; the fractions are a
public lookup for callers.

Classes:
    UnitTable: Conversion factors and special values of a unit.
    Unit: Base class of the unit wrappers, with the unit registry.
    Radians: Unit wrapper for radians (" rad").
    Degrees: Unit wrapper for degrees ("°", 360 per turn).
    Turns: Unit wrapper for turns (" tr", 1 per turn).
    Gradians: Unit wrapper for gradians ("g", 400 per turn).

Example:
    >>> from unitangle import Angle32
    >>> print(Degrees(Angle32.QUARTER))
    90.0°
    >>> print(Turns(Angle32.QUARTER))
    0.25 tr
    >>> Degrees.table(Float.F32).sixth
    np.float32(60.0)
"""

from __future__ import annotations

from functools import cache
from typing import ClassVar, NamedTuple

from .scalar import Float
from .unit_base import AngleBase


class UnitTable(NamedTuple):
    """Conversion factors and fractions of the circle for one unit and kind."""

    to_rad: object
    from_rad: object
    full: object
    half: object
    quarter: object
    sixth: object
    eighth: object
    twelfth: object
    sixteenth: object


class Unit:
    """Base class for the angle unit wrappers.

    A subclass names its unit with ``NAME`` (matching the ``to_<NAME>`` and
    ``from_<NAME>`` methods of the angles) and registers itself under that
    name when it is defined.

    Attributes:
        NAME (ClassVar[str]): Unit name, e.g. ``"degrees"``.
        SYMBOL (ClassVar[str]): Suffix used for display, e.g. ``"°"``.
        FULL_CIRCLE (ClassVar[int]): Value of a full turn in this unit, for
            units whose full turn is an exact integer.
        REGISTRY (ClassVar[dict[str, type[Unit]]]): Registered units by name.
    """

    __slots__ = ("angle",)

    NAME: ClassVar[str] = ""
    SYMBOL: ClassVar[str] = ""
    FULL_CIRCLE: ClassVar[int] = 0
    TO_RAD: ClassVar[str] = ""
    FROM_RAD: ClassVar[str] = ""
    REGISTRY: ClassVar[dict[str, type[Unit]]] = {}

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if cls.NAME:
            Unit.REGISTRY[cls.NAME] = cls

    def __init__(self, angle: AngleBase):
        """Wrap an angle.

        Raises:
            TypeError: If ``angle`` is not an angle.
        """
        if not isinstance(angle, AngleBase):
            msg = f"{type(self).__name__} wraps an angle, got {type(angle).__name__}"
            raise TypeError(msg)
        self.angle = angle

    @classmethod
    def lookup(cls, name: str) -> type[Unit]:
        """Return the unit registered under ``name`` (case insensitive).

        Raises:
            KeyError: If no unit has that name.
        """
        try:
            return cls.REGISTRY[name.lower()]
        except KeyError:
            msg = f"unknown angle unit {name!r}, expected one of {sorted(cls.REGISTRY)}"
            raise KeyError(msg) from None

    @classmethod
    def from_value(cls, angle_cls: type[AngleBase], value) -> Unit:
        """Build ``angle_cls`` from a value expressed in this unit, and wrap it."""
        return cls(getattr(angle_cls, f"from_{cls.NAME}")(value))

    @classmethod
    def table(cls, kind: Float) -> UnitTable:
        return _table(cls, kind)

    @classmethod
    def _build_table(cls, kind: Float) -> UnitTable:
        full = kind.cast(cls.FULL_CIRCLE)
        fractions = (full / kind.cast(n) for n in (1, 2, 4, 6, 8, 12, 16))
        return UnitTable(getattr(kind, cls.TO_RAD), getattr(kind, cls.FROM_RAD), *fractions)

    @property
    def value(self):
        """The wrapped angle expressed in this unit."""
        return self.angle.to(type(self))

    def __eq__(self, other) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.angle == other.angle

    def __hash__(self) -> int:
        return hash((self.NAME, self.angle))

    def __str__(self) -> str:
        return f"{self.value!s}{self.SYMBOL}"

    def __format__(self, spec: str) -> str:
        if not spec:
            return str(self)
        return f"{format(self.value, spec)}{self.SYMBOL}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.angle!r})"


@cache
def _table(unit: type[Unit], kind: Float) -> UnitTable:
    return unit._build_table(kind)


class Radians(Unit):
    """Angular unit: Radian.

    A full turn is 2π radians. The table is filled from the scalar kind's π
    constants so the special values are exact to the last bit.
    """

    NAME = "radians"
    SYMBOL = " rad"
    TO_RAD = "ONE"
    FROM_RAD = "ONE"

    @classmethod
    def _build_table(cls, kind: Float) -> UnitTable:
        return UnitTable(
            kind.ONE,
            kind.ONE,
            kind.TAU,
            kind.PI,
            kind.FRAC_PI_2,
            kind.FRAC_PI_3,
            kind.FRAC_PI_4,
            kind.FRAC_PI_6,
            kind.FRAC_PI_8,
        )


class Degrees(Unit):
    """Angular unit: Degree (1/360 of a full rotation)."""

    NAME = "degrees"
    SYMBOL = "°"
    FULL_CIRCLE = 360
    TO_RAD = "DEG_TO_RAD"
    FROM_RAD = "RAD_TO_DEG"


class Turns(Unit):
    """Angular unit: Turn (one full rotation)."""

    NAME = "turns"
    SYMBOL = " tr"
    FULL_CIRCLE = 1
    TO_RAD = "TURNS_TO_RAD"
    FROM_RAD = "RAD_TO_TURNS"


class Gradians(Unit):
    """Angular unit: Gradian (1/400 of a full rotation)."""

    NAME = "gradians"
    SYMBOL = "g"
    FULL_CIRCLE = 400
    TO_RAD = "GRAD_TO_RAD"
    FROM_RAD = "RAD_TO_GRAD"
