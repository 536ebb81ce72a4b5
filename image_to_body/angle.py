"""Unit-tagged angle value type.

An Angle is a float paired with the unit it was expressed in. Conversions
between units are explicit; there is no implicit coercion to float, so a
degree value can never be fed to ``math.tan`` by accident.
"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from enum import Enum

from image_to_body.types import Degrees, Radians


class AngleUnit(Enum):
    """Unit an Angle's value is expressed in."""

    RADIANS = "radians"
    DEGREES = "degrees"


@dataclass(frozen=True)
class Angle:
    """Immutable angle tagged with its unit.

    Attributes:
        value: Raw numeric value, in ``unit``.
        unit: Unit of ``value``.

    Example:
        >>> fov = Angle.from_degrees(32.0)
        >>> round(fov.radians, 6)
        0.558505
        >>> Angle.from_radians(math.pi / 4).tangent()
        0.9999999999999999
    """

    value: float
    unit: AngleUnit = AngleUnit.RADIANS

    def __post_init__(self) -> None:
        """Validate the unit tag and store the value as a float."""
        if not isinstance(self.unit, AngleUnit):
            raise TypeError(f"unit must be an AngleUnit, got {self.unit!r}")
        if isinstance(self.value, bool) or not isinstance(self.value, numbers.Real):
            raise TypeError(f"value must be a real number, got {type(self.value).__name__}")
        object.__setattr__(self, "value", float(self.value))

    @classmethod
    def from_radians(cls, value: float) -> Angle:
        """Create an angle from a value in radians."""
        return cls(float(value), AngleUnit.RADIANS)

    @classmethod
    def from_degrees(cls, value: float) -> Angle:
        """Create an angle from a value in degrees."""
        return cls(float(value), AngleUnit.DEGREES)

    @property
    def radians(self) -> Radians:
        """Value converted to radians."""
        if self.unit is AngleUnit.RADIANS:
            return Radians(self.value)
        return Radians(math.radians(self.value))

    @property
    def degrees(self) -> Degrees:
        """Value converted to degrees."""
        if self.unit is AngleUnit.DEGREES:
            return Degrees(self.value)
        return Degrees(math.degrees(self.value))

    def to(self, unit: AngleUnit) -> Angle:
        """Return the same angle expressed in ``unit``."""
        if unit is AngleUnit.RADIANS:
            return to_radians(self)
        return to_degrees(self)

    def tangent(self) -> float:
        """Tangent of the angle (computed from the radian value)."""
        return math.tan(self.radians)


def to_radians(angle: Angle) -> Angle:
    """Convert an angle to a radian-tagged angle."""
    if angle.unit is AngleUnit.RADIANS:
        return angle
    return Angle(math.radians(angle.value), AngleUnit.RADIANS)


def to_degrees(angle: Angle) -> Angle:
    """Convert an angle to a degree-tagged angle."""
    if angle.unit is AngleUnit.DEGREES:
        return angle
    return Angle(math.degrees(angle.value), AngleUnit.DEGREES)


def as_radians(angle: Angle | float) -> Radians:
    """Radian value of an Angle, or a bare float taken to be radians."""
    if isinstance(angle, Angle):
        return angle.radians
    return Radians(float(angle))
