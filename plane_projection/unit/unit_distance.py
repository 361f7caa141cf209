"""Length units used to select the output scale of a projection.

All lengths are stored in meters. A projection built with a given unit
multiplies its per-degree scales by ``unit.factor_from_si()`` once, so every
distance it returns is already expressed in that unit.

Classes:
    Meter: SI root of the length family.
    Kilometer: 1000 m.
    Mile: International statute mile, 1609.344 m.
    NauticalMile: 1852 m.
    Foot: International foot, 0.3048 m.

Example:
    >>> Mile(1).to(Kilometer)
    1.609344
"""

from __future__ import annotations

from .unit_float import UnitFloat


class Meter(UnitFloat):
    """Length in meters (SI root)."""

    IS_FAMILY_ROOT = True
    SCALE_TO_SI = 1.0
    SYMBOL = "m"


class Kilometer(Meter):
    """Length in kilometers."""

    SCALE_TO_SI = 1000.0
    SYMBOL = "km"


class Mile(Meter):
    """Length in international statute miles."""

    SCALE_TO_SI = 1609.344
    SYMBOL = "mi"


class NauticalMile(Meter):
    """Length in nautical miles (one minute of arc of latitude, by definition)."""

    SCALE_TO_SI = 1852.0
    SYMBOL = "NM"


class Foot(Meter):
    SCALE_TO_SI = 0.3048
    SYMBOL = "ft"


Length = Meter | Kilometer | Mile | NauticalMile | Foot
