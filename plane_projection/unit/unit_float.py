"""Float-backed units stored in SI.

``UnitFloat`` subclasses ``float`` so typed quantities drop into ordinary
arithmetic, while keeping their family for safety checks. The stored value is
always SI (meters, radians); ``to`` converts back to a unit's own scale.

Example:
    >>> from plane_projection.unit import Kilometer, Meter
    >>> leg = Kilometer(2.5)
    >>> float(leg)
    2500.0
    >>> leg.to(Meter)
    2500.0
    >>> str(leg)
    '2.5 km'
"""

from __future__ import annotations

from typing import ClassVar

from .unit_base import Number, Unit


class UnitFloat(float, Unit):
    """Type-safe float quantity with automatic SI conversion.

    Attributes:
        SCALE_TO_SI (ClassVar[float]): SI value of one unit.
        SYMBOL (ClassVar[str]): Display symbol.
        IS_FAMILY_ROOT (ClassVar[bool]): Family root flag.
    """

    SCALE_TO_SI: ClassVar[float] = 1.0
    IS_FAMILY_ROOT: ClassVar[bool] = True

    def __new__(cls, value: Number):
        """Create a quantity from a value in this unit's own scale."""
        si_val = float(value) * cls.SCALE_TO_SI
        return float.__new__(cls, si_val)

    @classmethod
    def from_si(cls, si_value: float) -> UnitFloat:
        """Wrap a value that is already in SI."""
        return float.__new__(cls, si_value)

    @classmethod
    def factor_from_si(cls) -> float:
        """Multiplier that turns an SI value into this unit's scale.

        Example:
            >>> Kilometer.factor_from_si()
            0.001
        """
        return 1.0 / cls.SCALE_TO_SI

    def to(self, unit_type: type[UnitFloat]) -> float:
        """Return the plain value expressed in ``unit_type``.

        Raises:
            TypeError: If ``unit_type`` is from another family.
        """
        self._check_same_root(unit_type)
        return float(self) / unit_type.SCALE_TO_SI

    def as_unit(self, unit_type: type[UnitFloat]) -> UnitFloat:
        """Re-type the quantity as ``unit_type`` without changing its SI value."""
        self._check_same_root(unit_type)
        return unit_type.from_si(float(self))

    # -------------------------------- Arithmetic Operations --------------------------------
    def __add__(self, other: UnitFloat) -> UnitFloat:
        self._check_same_root(type(other))
        return type(self).from_si(float(self) + float(other))

    def __radd__(self, other: UnitFloat) -> UnitFloat:
        return self.__add__(other)

    def __sub__(self, other: UnitFloat) -> UnitFloat:
        self._check_same_root(type(other))
        return type(self).from_si(float(self) - float(other))

    def __rsub__(self, other: UnitFloat) -> UnitFloat:
        self._check_same_root(type(other))
        return type(self).from_si(float(other) - float(self))

    def __mul__(self, k: Number) -> UnitFloat:
        """Scale by a plain number.

        Raises:
            TypeError: If ``k`` is not an int or float.
        """
        if isinstance(k, Number) and not isinstance(k, Unit):
            return type(self).from_si(float(self) * float(k))
        raise TypeError(f"cannot scale {type(self).__name__} by {type(k).__name__}")

    def __rmul__(self, k: Number) -> UnitFloat:
        return self.__mul__(k)

    def __truediv__(self, k: Number) -> UnitFloat:
        if isinstance(k, Number) and not isinstance(k, Unit):
            return type(self).from_si(float(self) / float(k))
        raise TypeError(f"cannot divide {type(self).__name__} by {type(k).__name__}")

    def __neg__(self) -> UnitFloat:
        return type(self).from_si(-float(self))

    # -------------------------------- Comparisons --------------------------------
    def __lt__(self, other: UnitFloat) -> bool:
        self._check_same_root(type(other))
        return float(self) < float(other)

    def __le__(self, other: UnitFloat) -> bool:
        self._check_same_root(type(other))
        return float(self) <= float(other)

    def __gt__(self, other: UnitFloat) -> bool:
        self._check_same_root(type(other))
        return float(self) > float(other)

    def __ge__(self, other: UnitFloat) -> bool:
        self._check_same_root(type(other))
        return float(self) >= float(other)

    def __eq__(self, other: UnitFloat) -> bool:
        """Compare SI values of two quantities from the same family.

        Raises:
            TypeError: If ``other`` is from another family or a plain number.
        """
        self._check_same_root(type(other))
        return float(self) == float(other)

    def __ne__(self, other: UnitFloat) -> bool:
        self._check_same_root(type(other))
        return float(self) != float(other)

    __hash__ = float.__hash__

    def __str__(self) -> str:
        """Value and symbol in the unit's own scale, e.g. ``"90.0 °"``."""
        return f"{self.to(type(self))} {type(self).SYMBOL}".strip()

    def __repr__(self) -> str:
        """Own-scale value with its SI equivalent, e.g. ``"90 ° (= 1.5708 SI)"``."""
        return f"{self.to(type(self)):g} {type(self).SYMBOL} (= {float(self):g} SI)"
