"""Global configuration and type definitions for the angle library.

This module provides centralized configuration and the fundamental type
definitions used throughout the package. It establishes the numeric types
accepted by constructors and operators, and the runtime settings read from
the environment when the package is imported.

Type Definitions:
    BASE_TYPE: Union type defining every numeric type accepted as an angle
               value or scaling factor, NumPy floating scalars included.

Settings:
    TRIG_BACKEND: Name of the trigonometric backend used by ``sin``, ``cos``,
                  ``tan`` and ``sin_cos``. Read from ``UNITANGLE_TRIG_BACKEND``;
                  either ``"numpy"`` (default) or ``"math"``.

Example:
    >>> from unitangle.config import BASE_TYPE
    >>> import numpy as np
    >>> scalar_int: BASE_TYPE = 42
    >>> scalar_single: BASE_TYPE = np.float32(3.14159)
"""

import os

from numpy import floating, integer

BASE_TYPE = int | float | integer | floating

TRIG_BACKEND_ENV = "UNITANGLE_TRIG_BACKEND"

TRIG_BACKEND = os.environ.get(TRIG_BACKEND_ENV, "numpy").strip().lower()
