"""Planar angle value type."""

import math
from dataclasses import dataclass, field
from typing import ClassVar

from .units import Degrees, Radians


@dataclass(frozen=True, slots=True, init=False, order=True)
class Angle:
    """
    Immutable planar angle.

    Radians are the canonical value used for equality and ordering; degrees
    are cached at construction. Build instances with `from_degrees` or
    `from_radians`. No range invariant holds unless the angle is explicitly
    folded with `normalized_latitude` or `normalized_longitude`.
    """

    ZERO: ClassVar["Angle"]
    POS90: ClassVar["Angle"]
    NEG90: ClassVar["Angle"]
    POS180: ClassVar["Angle"]
    NEG180: ClassVar["Angle"]
    MINUTE: ClassVar["Angle"]

    _radians: float
    _degrees: float = field(compare=False)

    @classmethod
    def _create(cls, radians: float, degrees: float) -> "Angle":
        instance = object.__new__(cls)
        object.__setattr__(instance, "_radians", float(radians))
        object.__setattr__(instance, "_degrees", float(degrees))
        return instance

    @classmethod
    def from_degrees(cls, degrees: Degrees | float) -> "Angle":
        return cls._create(math.radians(degrees), degrees)

    @classmethod
    def from_radians(cls, radians: Radians | float) -> "Angle":
        return cls._create(radians, math.degrees(radians))

    @property
    def degrees(self) -> Degrees:
        return Degrees(self._degrees)

    @property
    def radians(self) -> Radians:
        return Radians(self._radians)

    def add(self, other: "Angle") -> "Angle":
        return Angle.from_radians(self._radians + other._radians)

    def subtract(self, other: "Angle") -> "Angle":
        return Angle.from_radians(self._radians - other._radians)

    def negated(self) -> "Angle":
        return Angle._create(-self._radians, -self._degrees)

    def cos(self) -> float:
        return math.cos(self._radians)

    def sin(self) -> float:
        return math.sin(self._radians)

    def tan_half_angle(self) -> float:
        """Tangent of half this angle, used for camera distance trigonometry."""
        return math.tan(0.5 * self._radians)

    def normalized_latitude(self) -> "Angle":
        """
        Fold this angle into the latitude range [-90, 90].

        The remainder keeps the sign of the dividend, then values past a pole
        are reflected back. A fold landing on a pole compares equal to
        POS90 or NEG90.
        """
        latitude = math.fmod(self._degrees, 180.0)
        if latitude > 90.0:
            latitude = 180.0 - latitude
        elif latitude < -90.0:
            latitude = -180.0 - latitude
        return Angle.from_degrees(latitude)

    def normalized_longitude(self) -> "Angle":
        """Fold this angle into the longitude range [-180, 180]."""
        longitude = math.fmod(self._degrees, 360.0)
        if longitude > 180.0:
            longitude -= 360.0
        elif longitude < -180.0:
            longitude += 360.0
        return Angle.from_degrees(longitude)

    def is_normal_latitude(self) -> bool:
        return -90.0 <= self._degrees <= 90.0

    def is_normal_longitude(self) -> bool:
        return -180.0 <= self._degrees <= 180.0

    def __add__(self, other: "Angle") -> "Angle":
        if not isinstance(other, Angle):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: "Angle") -> "Angle":
        if not isinstance(other, Angle):
            return NotImplemented
        return self.subtract(other)

    def __neg__(self) -> "Angle":
        return self.negated()

    def __repr__(self) -> str:
        return f"Angle.from_degrees({self._degrees!r})"

    def __str__(self) -> str:
        return f"{self._degrees}°"


Angle.ZERO = Angle.from_degrees(0.0)
Angle.POS90 = Angle.from_degrees(90.0)
Angle.NEG90 = Angle.from_degrees(-90.0)
Angle.POS180 = Angle.from_degrees(180.0)
Angle.NEG180 = Angle.from_degrees(-180.0)
Angle.MINUTE = Angle.from_degrees(1.0 / 60.0)
