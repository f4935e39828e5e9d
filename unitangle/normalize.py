"""Reduction of raw radian values to the main range ``(-π, π]``.

Every bounded angle goes through one of the two functions below. The main
range is left-open and right-closed: ``π`` is a valid canonical value and
``-π`` maps onto it, so both describe the same point on the circle.

Non-finite input has no usable angular information and yields NaN.
"""

from __future__ import annotations

from .scalar import Float


def normalize(radians, kind: Float):
    """Map any radian value onto its representative in ``(-π, π]``.

    The truncating remainder bounds the value to one turn before the single
    correcting step, so huge finite inputs never overflow and never loop.

    Args:
        radians: Raw angle in radians.
        kind: Scalar kind the computation is carried out in.

    Returns:
        The canonical value in ``kind``'s dtype, or NaN for NaN/±∞ input.
    """
    radians = kind.cast(radians)
    if not kind.is_finite(radians):
        return kind.NAN
    return normalize_within_two_turns(kind.fmod(radians, kind.TAU), kind)


def normalize_within_two_turns(radians, kind: Float):
    """Single-step reduction for values known to lie within one turn of zero.

    Precondition: ``radians`` is NaN or in ``[-τ, τ]``. On that domain the
    result is bit-identical to :func:`normalize`. NaN passes through.
    """
    radians = kind.cast(radians)
    assert kind.is_nan(radians) or -kind.TAU <= radians <= kind.TAU, radians
    if radians > kind.PI:
        return radians - kind.TAU
    if radians <= -kind.PI:
        return radians + kind.TAU
    return radians


def is_canonical(radians, kind: Float) -> bool:
    """Return True if ``radians`` is NaN or inside ``(-π, π]``."""
    return kind.is_nan(radians) or bool(-kind.PI < radians <= kind.PI)
