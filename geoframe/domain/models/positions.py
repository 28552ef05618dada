"""Surface and geodetic position value types."""

from dataclasses import dataclass, replace
from typing import Any, ClassVar

from geoframe.domain.validators import ValidationError, validate_altitude, validate_angle
from .angle import Angle
from .coordinates import Coordinates
from .distance import Distance
from .units import Degrees, Meters, Radians


@dataclass(frozen=True, slots=True)
class SurfacePosition:
    """
    A (latitude, longitude) pair on the reference surface.

    Values are kept as given; `normalized` folds them into the canonical
    ranges -90 <= lat <= 90 and -180 <= lon <= 180.
    """

    ZERO: ClassVar["SurfacePosition"]

    latitude: Angle
    longitude: Angle

    def __post_init__(self) -> None:
        validate_angle(self.latitude, "latitude")
        validate_angle(self.longitude, "longitude")

    @classmethod
    def from_degrees(cls, latitude: Degrees | float, longitude: Degrees | float) -> "SurfacePosition":
        return cls(Angle.from_degrees(latitude), Angle.from_degrees(longitude))

    @classmethod
    def from_radians(cls, latitude: Radians | float, longitude: Radians | float) -> "SurfacePosition":
        return cls(Angle.from_radians(latitude), Angle.from_radians(longitude))

    def is_normal(self) -> bool:
        return self.latitude.is_normal_latitude() and self.longitude.is_normal_longitude()

    def normalized_latitude(self) -> Angle:
        return self.latitude.normalized_latitude()

    def normalized_longitude(self) -> Angle:
        return self.longitude.normalized_longitude()

    def normalized(self) -> "SurfacePosition":
        return SurfacePosition(self.normalized_latitude(), self.normalized_longitude())

    def with_latitude(self, latitude: Angle) -> "SurfacePosition":
        return replace(self, latitude=latitude)

    def with_longitude(self, longitude: Angle) -> "SurfacePosition":
        return replace(self, longitude=longitude)

    def to_dict(self) -> dict[str, Any]:
        return {"lat": self.latitude.degrees, "lon": self.longitude.degrees}


@dataclass(frozen=True, slots=True)
class GeodeticPosition:
    """
    A surface position with an altitude above the reference surface.

    Altitude is unconstrained and is left untouched by normalization.
    """

    ZERO: ClassVar["GeodeticPosition"]

    surface: SurfacePosition
    altitude: Distance

    def __post_init__(self) -> None:
        if not isinstance(self.surface, SurfacePosition):
            raise ValidationError(
                f"surface must be a SurfacePosition, got {type(self.surface).__name__}"
            )
        validate_altitude(self.altitude)

    @classmethod
    def from_angles(
        cls, latitude: Angle, longitude: Angle, altitude: Distance = Distance.ZERO
    ) -> "GeodeticPosition":
        return cls(SurfacePosition(latitude, longitude), altitude)

    @classmethod
    def from_degrees(
        cls,
        latitude: Degrees | float,
        longitude: Degrees | float,
        altitude: Meters | float = 0.0,
    ) -> "GeodeticPosition":
        return cls(
            SurfacePosition.from_degrees(latitude, longitude),
            Distance.from_meters(altitude),
        )

    @classmethod
    def from_radians(
        cls,
        latitude: Radians | float,
        longitude: Radians | float,
        altitude: Meters | float = 0.0,
    ) -> "GeodeticPosition":
        return cls(
            SurfacePosition.from_radians(latitude, longitude),
            Distance.from_meters(altitude),
        )

    @classmethod
    def from_coordinates(cls, coordinates: Coordinates) -> "GeodeticPosition":
        return cls.from_degrees(coordinates.lat, coordinates.lon, coordinates.alt)

    @property
    def latitude(self) -> Angle:
        return self.surface.latitude

    @property
    def longitude(self) -> Angle:
        return self.surface.longitude

    def is_normal(self) -> bool:
        return self.surface.is_normal()

    def normalized_latitude(self) -> Angle:
        return self.surface.normalized_latitude()

    def normalized_longitude(self) -> Angle:
        return self.surface.normalized_longitude()

    def normalized(self) -> "GeodeticPosition":
        return GeodeticPosition(self.surface.normalized(), self.altitude)

    def with_latitude(self, latitude: Angle) -> "GeodeticPosition":
        return replace(self, surface=self.surface.with_latitude(latitude))

    def with_longitude(self, longitude: Angle) -> "GeodeticPosition":
        return replace(self, surface=self.surface.with_longitude(longitude))

    def with_altitude(self, altitude: Distance) -> "GeodeticPosition":
        return replace(self, altitude=altitude)

    def contains(self, point: "GeodeticPosition") -> bool:
        """
        Exact match of latitude, longitude and altitude.

        No tolerance is applied, so a point and its normalized form only
        match when normalization did not change it.
        """
        return (
            self.latitude.radians == point.latitude.radians
            and self.longitude.radians == point.longitude.radians
            and self.altitude.meters == point.altitude.meters
        )

    def to_coordinates(self) -> Coordinates:
        return Coordinates(
            lat=self.latitude.degrees,
            lon=self.longitude.degrees,
            alt=self.altitude.meters,
        )

    def to_dict(self) -> dict[str, Any]:
        return {**self.surface.to_dict(), "alt_m": self.altitude.meters}


SurfacePosition.ZERO = SurfacePosition(Angle.ZERO, Angle.ZERO)
GeodeticPosition.ZERO = GeodeticPosition(SurfacePosition.ZERO, Distance.ZERO)
