"""Unit-agnostic angle values for geometry, graphics and signal processing.

This package provides type-safe angle values that remove the class of bugs
where a raw float is ambiguously degrees, radians, turns or gradians. Angles
are built from a value in an explicit unit, store radians internally and give
back a value in whichever unit is asked for.

Architecture:
    The package is organized into small modules, leaves first:

    - config: Type aliases and runtime settings
    - scalar: The closed set of scalar kinds (float32, float64) and their
      constant tables and trigonometric backends
    - normalize: Reduction of any radian value to the main range (-π, π]
    - unit_base: Base class shared by both angle families
    - angle: Bounded angles (points on the circle)
    - unbounded: Unbounded angles (displacements keeping their winding count)
    - unit_angle: Unit wrappers and conversion tables
    - to_angle: Shorthand constructors
    - sampling: Random angles on NumPy generators
    - serialization: JSON values

Angle Families:
    - Bounded: Angle32, Angle64. Always normalised, 90° == 450°, no ordering.
    - Unbounded: AngleUnbounded32, AngleUnbounded64. Stored as given,
      90° != 450°, totally ordered.

Error Handling:
    Numeric anomalies (NaN or infinite input, division by zero) produce NaN
    angles; check them with ``is_nan()``. Exceptions are only raised for
    caller mistakes such as mixing angle classes.

Example:
    >>> from unitangle import Angle32, Angle64, AngleUnbounded32, Degrees
    >>>
    >>> a = Angle32.QUARTER
    >>> a.to_degrees(), a.to_turns(), a.to_gradians()
    (np.float32(90.0), np.float32(0.25), np.float32(100.0))
    >>>
    >>> Angle64.from_degrees(90) == Angle64.from_degrees(-270)
    True
    >>> AngleUnbounded32.from_degrees(90) == AngleUnbounded32.from_degrees(450)
    False
    >>> print(Degrees(-Angle32.HALF))
    180.0°
"""

import logging

from .angle import Angle, Angle32, Angle64
from .errors import EmptyRangeError, UnitAngleError
from .normalize import normalize, normalize_within_two_turns
from .sampling import random_angle, uniform
from .scalar import F32, F64, Float, get_trig_backend, set_trig_backend
from .serialization import AngleJSONEncoder, dumps, from_value, load_mapping, loads_angle, to_value
from .to_angle import (
    deg,
    deg_unbounded,
    grad,
    grad_unbounded,
    rad,
    rad_unbounded,
    turns,
    turns_unbounded,
)
from .unbounded import AngleUnbounded, AngleUnbounded32, AngleUnbounded64
from .unit_angle import Degrees, Gradians, Radians, Turns, Unit, UnitTable
from .unit_base import AngleBase

__version__ = "0.6.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

# Define public API
__all__ = [
    # Scalar kinds
    "Float",
    "F32",
    "F64",
    "get_trig_backend",
    "set_trig_backend",
    # Normalisation
    "normalize",
    "normalize_within_two_turns",
    # Angles
    "AngleBase",
    "Angle",
    "Angle32",
    "Angle64",
    "AngleUnbounded",
    "AngleUnbounded32",
    "AngleUnbounded64",
    # Units
    "Unit",
    "UnitTable",
    "Radians",
    "Degrees",
    "Turns",
    "Gradians",
    # Shorthand constructors
    "rad",
    "deg",
    "turns",
    "grad",
    "rad_unbounded",
    "deg_unbounded",
    "turns_unbounded",
    "grad_unbounded",
    # Sampling
    "random_angle",
    "uniform",
    # Serialization
    "AngleJSONEncoder",
    "dumps",
    "loads_angle",
    "load_mapping",
    "to_value",
    "from_value",
    # Errors
    "UnitAngleError",
    "EmptyRangeError",
]
