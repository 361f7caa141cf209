"""Typed units for angles and lengths.

Modules:
    - unit_base: ``Unit`` with family management
    - unit_float: ``UnitFloat``, float values stored in SI
    - unit_angle: ``Radian``, ``Degree``
    - unit_distance: ``Meter``, ``Kilometer``, ``Mile``, ``NauticalMile``, ``Foot``

Length classes double as the unit selector of
:class:`plane_projection.geo.PlaneProjection`:

    >>> from plane_projection import PlaneProjection
    >>> from plane_projection.unit import NauticalMile
    >>> proj = PlaneProjection(55.65, unit=NauticalMile)
"""

from .unit_angle import Angle, Degree, Radian
from .unit_base import Unit
from .unit_distance import Foot, Kilometer, Length, Meter, Mile, NauticalMile
from .unit_float import UnitFloat

__all__ = [
    # Base classes
    "Unit",
    "UnitFloat",
    # Angular units
    "Radian",
    "Degree",
    "Angle",
    # Distance units
    "Meter",
    "Kilometer",
    "Mile",
    "NauticalMile",
    "Foot",
    "Length",
]
