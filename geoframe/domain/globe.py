"""Reference globe: local radius and surface distances."""

import math
from dataclasses import dataclass
from functools import lru_cache
from typing import Protocol

from pyproj import Geod

from geoframe.domain.constants import (
    WGS84_EQUATORIAL_RADIUS_M,
    WGS84_POLAR_RADIUS_M,
)
from geoframe.domain.models.distance import Distance
from geoframe.domain.models.positions import GeodeticPosition
from geoframe.domain.validators import validate_radius
from geoframe.logging_config import get_logger

logger = get_logger(__name__)


class Globe(Protocol):
    """Reference surface consumed by offsets and framing."""

    def radius_at(self, position: GeodeticPosition) -> Distance:
        """Distance from the globe center to the surface below position."""
        ...

    def surface_distance(
        self, start: GeodeticPosition, end: GeodeticPosition
    ) -> Distance | None:
        """Shortest path length along the surface, or None if undefined."""
        ...


@lru_cache(maxsize=16)
def _geod(equatorial_m: float, polar_m: float) -> Geod:
    return Geod(a=equatorial_m, b=polar_m)


@dataclass(frozen=True, slots=True)
class EllipsoidalGlobe:
    """
    Ellipsoid of revolution given by its equatorial and polar radii.

    A sphere is the special case of equal radii.
    """

    equatorial_radius: Distance
    polar_radius: Distance

    def __post_init__(self) -> None:
        validate_radius(self.equatorial_radius)
        validate_radius(self.polar_radius)

    @classmethod
    def sphere(cls, radius: Distance) -> "EllipsoidalGlobe":
        return cls(radius, radius)

    @property
    def eccentricity_squared(self) -> float:
        a = self.equatorial_radius.meters
        b = self.polar_radius.meters
        return (a * a - b * b) / (a * a)

    def radius_at(self, position: GeodeticPosition) -> Distance:
        """
        Geocentric radius of the surface point at the position's latitude.

        The surface point is placed on the ellipsoid using the geodetic
        latitude; longitude does not matter on an ellipsoid of revolution.
        """
        a = self.equatorial_radius.meters
        e2 = self.eccentricity_squared
        if e2 == 0.0:
            return self.equatorial_radius

        sin_lat = position.latitude.sin()
        cos_lat = position.latitude.cos()

        prime_vertical = a / math.sqrt(1.0 - e2 * sin_lat * sin_lat)
        x = prime_vertical * cos_lat
        z = prime_vertical * (1.0 - e2) * sin_lat
        return Distance.from_meters(math.hypot(x, z))

    def surface_distance(
        self, start: GeodeticPosition, end: GeodeticPosition
    ) -> Distance | None:
        """
        Geodesic length between two positions, ignoring altitude.

        Returns:
            Distance, or None when the inverse solution is not finite
        """
        geod = _geod(self.equatorial_radius.meters, self.polar_radius.meters)
        _, _, length_m = geod.inv(
            start.longitude.degrees,
            start.latitude.degrees,
            end.longitude.degrees,
            end.latitude.degrees,
        )
        if not math.isfinite(length_m):
            logger.warning(f"Degenerate surface distance between {start} and {end}")
            return None
        return Distance.from_meters(length_m)


WGS84 = EllipsoidalGlobe(
    equatorial_radius=Distance.from_meters(WGS84_EQUATORIAL_RADIUS_M),
    polar_radius=Distance.from_meters(WGS84_POLAR_RADIUS_M),
)
