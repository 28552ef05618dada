"""Length value type with unit-safe construction."""

from dataclasses import dataclass, field
from typing import ClassVar

from geoframe.domain.constants import (
    FEET_PER_METER,
    FEET_PER_MILE,
    FEET_PER_YARD,
    METERS_PER_KILOMETER,
    METERS_PER_NAUTICAL_MILE,
)
from geoframe.domain.exceptions import ZeroDistanceError
from .units import Feet, Kilometers, Meters


@dataclass(frozen=True, slots=True, init=False, order=True)
class Distance:
    """
    Immutable length.

    Meters are the canonical value used for equality and ordering; feet are
    cached at construction. There is no numeric constructor: `Distance(10)`
    raises TypeError, so every length is created through a named unit
    factory such as `Distance.from_meters(10)`.
    """

    ZERO: ClassVar["Distance"]

    _meters: float
    _feet: float = field(compare=False)

    @classmethod
    def _create(cls, meters: float, feet: float) -> "Distance":
        instance = object.__new__(cls)
        object.__setattr__(instance, "_meters", float(meters))
        object.__setattr__(instance, "_feet", float(feet))
        return instance

    # Factories

    @classmethod
    def from_feet(cls, feet: Feet | float) -> "Distance":
        return cls._create(feet / FEET_PER_METER, feet)

    @classmethod
    def from_yards(cls, yards: float) -> "Distance":
        return cls.from_feet(yards * FEET_PER_YARD)

    @classmethod
    def from_miles(cls, miles: float) -> "Distance":
        return cls.from_feet(miles * FEET_PER_MILE)

    @classmethod
    def from_meters(cls, meters: Meters | float) -> "Distance":
        return cls._create(meters, meters * FEET_PER_METER)

    @classmethod
    def from_kilometers(cls, kilometers: Kilometers | float) -> "Distance":
        return cls.from_meters(kilometers * METERS_PER_KILOMETER)

    @classmethod
    def from_nautical_miles(cls, nautical_miles: float) -> "Distance":
        return cls.from_meters(nautical_miles * METERS_PER_NAUTICAL_MILE)

    # Accessors

    @property
    def feet(self) -> Feet:
        return Feet(self._feet)

    @property
    def yards(self) -> float:
        return self._feet / FEET_PER_YARD

    @property
    def miles(self) -> float:
        return self._feet / FEET_PER_MILE

    @property
    def meters(self) -> Meters:
        return Meters(self._meters)

    @property
    def kilometers(self) -> Kilometers:
        return Kilometers(self._meters / METERS_PER_KILOMETER)

    @property
    def nautical_miles(self) -> float:
        return self._meters / METERS_PER_NAUTICAL_MILE

    # Arithmetic

    def add(self, other: "Distance") -> "Distance":
        return Distance.from_meters(self._meters + other._meters)

    def subtract(self, other: "Distance") -> "Distance":
        return Distance.from_meters(self._meters - other._meters)

    def multiplied_by(self, scalar: float) -> "Distance":
        # Distance * Distance would be an area and is deliberately absent.
        if isinstance(scalar, Distance):
            raise TypeError("A Distance can only be multiplied by a scalar")
        return Distance.from_meters(self._meters * scalar)

    def divided_by(self, divisor: "float | Distance") -> "float | Distance":
        """
        Divide by a scalar or by another Distance.

        Args:
            divisor: Plain number, or a Distance to get a dimensionless ratio

        Returns:
            Distance for a scalar divisor, float for a Distance divisor

        Raises:
            ZeroDistanceError: If divisor is a zero Distance
        """
        if isinstance(divisor, Distance):
            if divisor.is_zero():
                raise ZeroDistanceError(f"Cannot divide {self} by a zero distance")
            return self._meters / divisor._meters
        return Distance.from_meters(self._meters / divisor)

    def is_zero(self) -> bool:
        return self._meters == 0.0

    def __add__(self, other: "Distance") -> "Distance":
        if not isinstance(other, Distance):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: "Distance") -> "Distance":
        if not isinstance(other, Distance):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, scalar: float) -> "Distance":
        if isinstance(scalar, Distance):
            return NotImplemented
        return self.multiplied_by(scalar)

    __rmul__ = __mul__

    def __truediv__(self, divisor: "float | Distance") -> "float | Distance":
        return self.divided_by(divisor)

    def __abs__(self) -> "Distance":
        return Distance.from_meters(abs(self._meters))

    def __neg__(self) -> "Distance":
        return Distance.from_meters(-self._meters)

    def __repr__(self) -> str:
        return f"Distance.from_meters({self._meters!r})"

    def __str__(self) -> str:
        return f"{self._meters}m"


Distance.ZERO = Distance.from_meters(0.0)
