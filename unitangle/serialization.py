"""Conversion of angles to and from plain JSON values.

By default an angle is written as its value in radians, whatever its family.
Wrapping it in a unit class (``Degrees(angle)``, ...) writes the value in that
unit instead. Reading goes the other way: a number is interpreted as radians
unless a unit is given, and is then fed to the matching ``from_<unit>``
constructor, so bounded angles come back normalised.

Non-finite numbers are not an error: they load as NaN bounded angles, or as
the same non-finite value for unbounded ones.

Example:
    >>> from unitangle import Angle32, Degrees
    >>> dumps({"heading": Degrees(Angle32.QUARTER), "raw": Angle32.ZERO})
    '{"heading": 90.0, "raw": 0.0}'
    >>> loads_angle("1.25", Angle32, unit="turns") == Angle32.QUARTER
    True
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping

import numpy as np

from .config import BASE_TYPE
from .unit_angle import Radians, Unit
from .unit_base import AngleBase

logger = logging.getLogger(__name__)


def _resolve_unit(unit) -> type[Unit]:
    if unit is None:
        return Radians
    if isinstance(unit, type) and issubclass(unit, Unit):
        return unit
    if isinstance(unit, str):
        try:
            return Unit.lookup(unit)
        except KeyError as err:
            raise ValueError(err.args[0]) from None
    msg = f"expected a unit class or name, got {unit!r}"
    raise TypeError(msg)


def to_value(obj) -> float:
    """Return the JSON number for an angle or a unit-wrapped angle.

    Raises:
        TypeError: If ``obj`` is neither.
    """
    if isinstance(obj, Unit):
        return float(obj.value)
    if isinstance(obj, AngleBase):
        return float(obj.to_radians())
    msg = f"{type(obj).__name__} is not an angle"
    raise TypeError(msg)


def from_value(angle_cls: type[AngleBase], value, unit=None) -> AngleBase:
    """Build an angle of ``angle_cls`` from a JSON number.

    Args:
        angle_cls: Concrete angle class to build.
        value: The number read from the document.
        unit: Unit class or name the number is expressed in. Radians if None.

    Raises:
        TypeError: If ``value`` is not a number (booleans included).
        ValueError: If ``unit`` names no known unit.
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, BASE_TYPE):
        msg = f"expected a number for {angle_cls.__name__}, got {type(value).__name__}"
        raise TypeError(msg)
    unit_cls = _resolve_unit(unit)
    kind = angle_cls._kind()
    if not kind.is_finite(kind.cast(value)):
        logger.debug("loading non-finite value %r as %s", value, angle_cls.__name__)
    return unit_cls.from_value(angle_cls, value).angle


class AngleJSONEncoder(json.JSONEncoder):
    """JSON encoder writing angles and unit-wrapped angles as numbers."""

    def default(self, o):
        if isinstance(o, (AngleBase, Unit)):
            return to_value(o)
        return super().default(o)


def dumps(obj, **kwargs) -> str:
    """``json.dumps`` that understands angles."""
    kwargs.setdefault("cls", AngleJSONEncoder)
    return json.dumps(obj, **kwargs)


def loads_angle(text: str, angle_cls: type[AngleBase], unit=None) -> AngleBase:
    """Parse a JSON number and build an angle from it."""
    return from_value(angle_cls, json.loads(text), unit)


def load_mapping(data: Mapping, fields: Mapping) -> dict:
    """Build angles for several fields of a decoded JSON object.

    Args:
        data: The decoded object.
        fields: Field name to either an angle class (value in radians) or an
            ``(angle_class, unit)`` pair.

    Returns:
        dict: A new dict where each listed field holds an angle. Other fields
        are copied unchanged.

    Raises:
        KeyError: If a listed field is missing from ``data``.
    """
    result = dict(data)
    for name, field in fields.items():
        angle_cls, unit = field if isinstance(field, tuple) else (field, None)
        result[name] = from_value(angle_cls, data[name], unit)
    return result
