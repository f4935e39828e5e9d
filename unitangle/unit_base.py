"""Base angle class shared by the bounded and unbounded angle families.

This module provides the ``AngleBase`` class that both angle families derive
from. It implements the family system using automatic ROOT class assignment,
which allows operations between angles of the same family and precision
while rejecting any mix of bounded with unbounded angles, or of single with
double precision.

An angle family is a kind of angle value (bounded or unbounded). Each family
has one concrete class per scalar kind. Concrete classes declare their
``KIND`` and receive, when they are created, the named angle constants
(``ZERO``, ``QUARTER``, ``DEG_90``, ...) and a slot in the family's
``FLAVOURS`` table so that precision conversions can find their sibling.

Key Concepts:
- ROOT Class: Each angle family has a root class that defines the family
- IS_FAMILY_ROOT: Boolean flag marking the base class of each family
- KIND: The scalar kind (``Float.F32`` or ``Float.F64``) of a concrete class
- Canonicalisation hooks: ``_canonical`` and ``_canonical_two_turns`` decide
  whether the family wraps its values onto the circle

Classes:
    AngleBase: Abstract base class for all angle types.

Example:
    >>> class Heading(AngleBase):
    ...     IS_FAMILY_ROOT = True  # This becomes the ROOT for heading angles
    >>> class Heading64(Heading):
    ...     KIND = Float.F64  # Automatically gets ROOT = Heading
"""

from __future__ import annotations

from typing import ClassVar

import numpy as np

from .config import BASE_TYPE
from .scalar import Float

# Named constants and the π fraction each one is built from.
_NAMED_CONSTANTS = {
    "ZERO": "ZERO",
    "EPSILON": "DOUBLE_EPSILON",
    "RAD_PI": "PI",
    "RAD_FRAC_PI_2": "FRAC_PI_2",
    "RAD_FRAC_PI_3": "FRAC_PI_3",
    "RAD_FRAC_PI_4": "FRAC_PI_4",
    "RAD_FRAC_PI_6": "FRAC_PI_6",
    "RAD_FRAC_PI_8": "FRAC_PI_8",
    "DEG_180": "PI",
    "DEG_90": "FRAC_PI_2",
    "DEG_60": "FRAC_PI_3",
    "DEG_45": "FRAC_PI_4",
    "DEG_30": "FRAC_PI_6",
    "DEG_22_5": "FRAC_PI_8",
    "HALF": "PI",
    "QUARTER": "FRAC_PI_2",
    "SIXTH": "FRAC_PI_3",
    "EIGHTH": "FRAC_PI_4",
    "TWELFTH": "FRAC_PI_6",
    "SIXTEENTH": "FRAC_PI_8",
    "GRAD_200": "PI",
    "GRAD_100": "FRAC_PI_2",
    "GRAD_66_6": "FRAC_PI_3",
    "GRAD_50": "FRAC_PI_4",
    "GRAD_33_3": "FRAC_PI_6",
    "GRAD_25": "FRAC_PI_8",
}


def check_scalar(value) -> None:
    """Reject anything that is not a real number usable as a scalar.

    Raises:
        TypeError: If ``value`` is a bool, a string, an angle or any other
            non-numeric object.
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, BASE_TYPE):
        msg = f"expected a real number, got {type(value).__name__}"
        raise TypeError(msg)


class AngleBase:
    """Base class for all angle types.

    Stores a single radian value in the dtype of the class's scalar kind.
    Instances are immutable values: every operation returns a new angle.

    Attributes:
        ROOT (ClassVar[type[AngleBase]]): Root class defining the angle family.
        IS_FAMILY_ROOT (ClassVar[bool]): Indicates if this class is a root.
        KIND (ClassVar[Float]): Scalar kind of concrete classes.
        FLAVOURS (ClassVar[dict[Float, type[AngleBase]]]): Concrete classes of
            the family, keyed by scalar kind. Defined on each root.
    """

    __slots__ = ("_radians",)
    __array_priority__ = 1000
    __array_ufunc__ = None

    ROOT: ClassVar[type[AngleBase]]
    IS_FAMILY_ROOT: ClassVar[bool] = False
    KIND: ClassVar[Float | None] = None
    FLAVOURS: ClassVar[dict[Float, type[AngleBase]]]

    def __init_subclass__(cls, **kwargs):
        """Set the family ROOT and install constants on concrete classes.

        The ROOT is the first ancestor with ``IS_FAMILY_ROOT=True``, or the
        class itself. A class declaring ``KIND`` is registered in its root's
        ``FLAVOURS`` table and gets the named constants as class attributes.
        """
        super().__init_subclass__(**kwargs)
        if cls.__dict__.get("IS_FAMILY_ROOT", False):
            cls.ROOT = cls
            cls.FLAVOURS = {}
        else:
            for base in cls.mro()[1:]:
                if base.__dict__.get("IS_FAMILY_ROOT", False):
                    cls.ROOT = base
                    break
            else:
                cls.ROOT = cls
                cls.FLAVOURS = {}

        kind = cls.__dict__.get("KIND")
        if kind is not None:
            cls.ROOT.FLAVOURS[kind] = cls
            for name, source in _NAMED_CONSTANTS.items():
                setattr(cls, name, cls._new(getattr(kind, source)))

    # -------------------------------- Construction --------------------------------
    def __init__(self, radians: BASE_TYPE = 0.0):
        """Create an angle from a value in radians.

        Args:
            radians: Angle value in radians.

        Raises:
            TypeError: If the class has no scalar kind or ``radians`` is not
                a real number.
        """
        kind = self._kind()
        check_scalar(radians)
        self._radians = self._canonical(kind.cast(radians))

    @classmethod
    def _kind(cls) -> Float:
        if cls.KIND is None:
            flavours = [c.__name__ for c in getattr(cls, "FLAVOURS", {}).values()]
            msg = f"{cls.__name__} has no scalar kind, use one of {flavours}"
            raise TypeError(msg)
        return cls.KIND

    @classmethod
    def _new(cls, radians):
        """Wrap a value of the class dtype without any check."""
        angle = object.__new__(cls)
        angle._radians = radians
        return angle

    @classmethod
    def _canonical(cls, radians):
        """Bring an arbitrary radian value into the family's storage form."""
        return radians

    @classmethod
    def _canonical_two_turns(cls, radians):
        """Same as ``_canonical`` for values within one turn of zero."""
        return radians

    @classmethod
    def _from_unit(cls, value: BASE_TYPE, factor_name: str):
        kind = cls._kind()
        check_scalar(value)
        with np.errstate(over="ignore", invalid="ignore"):
            radians = kind.cast(value) * getattr(kind, factor_name)
        return cls._new(cls._canonical(radians))

    @classmethod
    def from_radians(cls, radians: BASE_TYPE):
        """Create an angle from a value in radians."""
        return cls(radians)

    @classmethod
    def from_degrees(cls, degrees: BASE_TYPE):
        """Create an angle from a value in degrees."""
        return cls._from_unit(degrees, "DEG_TO_RAD")

    @classmethod
    def from_turns(cls, turns: BASE_TYPE):
        """Create an angle from a value in turns (1 turn = full circle)."""
        return cls._from_unit(turns, "TURNS_TO_RAD")

    @classmethod
    def from_gradians(cls, gradians: BASE_TYPE):
        """Create an angle from a value in gradians (400g = full circle)."""
        return cls._from_unit(gradians, "GRAD_TO_RAD")

    # -------------------------------- Getters --------------------------------
    def to_radians(self):
        """Return the stored value in radians."""
        return self._radians

    def to_degrees(self):
        return self._radians * self.KIND.RAD_TO_DEG

    def to_turns(self):
        return self._radians * self.KIND.RAD_TO_TURNS

    def to_gradians(self):
        return self._radians * self.KIND.RAD_TO_GRAD

    def to(self, unit):
        """Return the value of the angle in ``unit``.

        The factor is read from the unit's conversion table for this angle's
        scalar kind.

        Args:
            unit: A unit wrapper class (``Degrees``, ...) or its registered
                name (``"degrees"``, ...).

        Raises:
            KeyError: If no unit is registered under that name.
            TypeError: If ``unit`` is neither a unit class nor a name.
        """
        from .unit_angle import Unit

        unit_cls = Unit.lookup(unit) if isinstance(unit, str) else unit
        if not (isinstance(unit_cls, type) and issubclass(unit_cls, Unit)):
            msg = f"expected a unit class or name, got {unit!r}"
            raise TypeError(msg)
        return self._radians * unit_cls.table(self.KIND).from_rad

    def is_nan(self) -> bool:
        """Return True if this angle is NaN."""
        return self.KIND.is_nan(self._radians)

    # -------------------------------- Maths --------------------------------
    def sin(self):
        return self.KIND.sin(self._radians)

    def cos(self):
        return self.KIND.cos(self._radians)

    def tan(self):
        return self.KIND.tan(self._radians)

    def sin_cos(self):
        """Compute the sine and the cosine at once, as ``(sin, cos)``."""
        return self.KIND.sin_cos(self._radians)

    # -------------------------------- Precision --------------------------------
    def _convert(self, kind: Float):
        target = self.ROOT.FLAVOURS[kind]
        return target._new(target._canonical(kind.cast(self._radians)))

    def to_f32(self):
        """Return the same angle stored in single precision."""
        if self.KIND is Float.F32:
            return self
        return self._convert(Float.F32)

    def to_f64(self):
        """Return the same angle stored in double precision."""
        if self.KIND is Float.F64:
            return self
        return self._convert(Float.F64)

    # -------------------------------- Family checks --------------------------------
    def _check_same_root(self, other) -> None:
        """Check that ``other`` belongs to the same family and precision.

        Raises:
            TypeError: If ``other`` is not an angle of exactly this class.
        """
        if type(other) is not type(self):
            msg = f"cannot combine {type(self).__name__} with {type(other).__name__}"
            raise TypeError(msg)

    @classmethod
    def sum(cls, angles):
        """Add up angles of this class.

        The radian values are accumulated in the class dtype and brought into
        storage form once at the end.

        Args:
            angles: Iterable of angles of this exact class.

        Returns:
            The sum, as an angle of this class.

        Raises:
            TypeError: If an element is not an angle of this class.
        """
        kind = cls._kind()

        def radians_of(angle):
            if type(angle) is not cls:
                msg = f"cannot sum {type(angle).__name__} into {cls.__name__}"
                raise TypeError(msg)
            return angle._radians

        values = np.fromiter((radians_of(angle) for angle in angles), dtype=kind.dtype)
        with np.errstate(over="ignore", invalid="ignore"):
            total = kind.dtype(np.add.reduce(values))
        return cls._new(cls._canonical(total))

    # -------------------------------- Arithmetic Operations --------------------------------
    def __add__(self, other):
        self._check_same_root(other)
        with np.errstate(over="ignore", invalid="ignore"):
            radians = self._radians + other._radians
        return self._new(self._canonical_two_turns(radians))

    def __sub__(self, other):
        self._check_same_root(other)
        with np.errstate(over="ignore", invalid="ignore"):
            radians = self._radians - other._radians
        return self._new(self._canonical_two_turns(radians))

    def __mul__(self, k: BASE_TYPE):
        """Scale the angle by a real number."""
        check_scalar(k)
        with np.errstate(all="ignore"):
            radians = self._radians * self.KIND.cast(k)
        return self._new(self._canonical(radians))

    def __rmul__(self, k: BASE_TYPE):
        return self.__mul__(k)

    def __truediv__(self, k: BASE_TYPE):
        """Divide the angle by a real number. Division by zero yields NaN or ±∞."""
        check_scalar(k)
        with np.errstate(all="ignore"):
            radians = self._radians / self.KIND.cast(k)
        return self._new(self._canonical(radians))

    def __neg__(self):
        return self._new(-self._radians)

    def __pos__(self):
        return self

    # -------------------------------- Comparison --------------------------------
    def __eq__(self, other) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return bool(self._radians == other._radians)

    def __ne__(self, other) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return bool(self._radians != other._radians)

    def __hash__(self) -> int:
        return hash(float(self._radians))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._radians!s})"
