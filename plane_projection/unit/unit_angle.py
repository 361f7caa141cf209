"""Angular units.

Angles are stored in radians. Public geographic values are degrees, so any
``Degree`` (or subclass such as ``Latitude``) read back with ``float()`` gives
radians, and must go through ``.to(Degree)`` to return to degrees.

Example:
    >>> bearing = Degree(90)
    >>> float(bearing)
    1.5707963267948966
    >>> bearing.to(Degree)
    90.0
"""

from __future__ import annotations

from math import pi

from .unit_float import UnitFloat


class Radian(UnitFloat):
    """Angle in radians (SI root of the angle family)."""

    IS_FAMILY_ROOT = True
    SCALE_TO_SI = 1.0
    SYMBOL = "rad"


class Degree(Radian):
    """Angle in degrees, stored as radians.

    Attributes:
        SCALE_TO_SI (float): pi / 180.
        SYMBOL (str): "°".
    """

    SCALE_TO_SI = pi / 180
    SYMBOL = "°"


Angle = Radian | Degree
