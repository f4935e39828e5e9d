"""Exceptions raised by the angle library.

Numeric anomalies never raise: they produce NaN angles. The exceptions here
cover caller mistakes only.
"""


class UnitAngleError(Exception):
    """Base class for errors raised by this package."""


class EmptyRangeError(UnitAngleError, ValueError):
    """Raised when sampling from a range that contains no value."""
