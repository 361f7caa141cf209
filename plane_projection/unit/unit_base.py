"""Unit family foundation for typed angles and lengths.

Every unit class belongs to exactly one family (angle, length, latitude,
longitude). The family is the nearest ancestor flagged with
``IS_FAMILY_ROOT`` and is assigned automatically when the class is created.
Values from different families never combine: a latitude cannot be added to a
longitude, and a length cannot be used where an angle is expected.

Example:
    >>> class Length(Unit):
    ...     IS_FAMILY_ROOT = True
    >>> class Meter(Length):
    ...     pass
    >>> Meter.ROOT is Length
    True
"""

from __future__ import annotations

from typing import ClassVar

Number = int | float


class Unit:
    """Base class for all unit types.

    Attributes:
        ROOT (ClassVar[type[Unit]]): Root class of the unit family.
        SYMBOL (ClassVar[str]): Symbol used when printing values.
        IS_FAMILY_ROOT (ClassVar[bool]): Marks the class that starts a family.
    """

    __slots__ = ()

    ROOT: ClassVar[type[Unit]]
    SYMBOL: ClassVar[str] = ""
    IS_FAMILY_ROOT: ClassVar[bool] = False

    def __init_subclass__(cls, **kwargs):
        """Resolve ROOT from the first ancestor flagged as a family root."""
        super().__init_subclass__(**kwargs)
        if "ROOT" in cls.__dict__ and cls.ROOT is not None:
            return

        if cls.__dict__.get("IS_FAMILY_ROOT", False):
            cls.ROOT = cls
            return

        for base in cls.mro()[1:]:
            if base.__dict__.get("IS_FAMILY_ROOT", False):
                cls.ROOT = base
                return

        cls.ROOT = cls

    @classmethod
    def _check_same_root(cls, unit_type: type) -> None:
        """Raise TypeError unless ``unit_type`` belongs to this family.

        Plain numbers (anything without a ROOT) are rejected as well, so a
        bare float never silently passes for a typed quantity.

        Raises:
            TypeError: If the families differ.
        """
        other_root = getattr(unit_type, "ROOT", None)
        if cls.ROOT is not other_root:
            other_name = other_root.__name__ if other_root else unit_type.__name__
            msg = f"incompatible units: {cls.ROOT.__name__} and {other_name}"
            raise TypeError(msg)
