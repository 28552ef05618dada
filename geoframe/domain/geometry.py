import numpy as np
from numpy.typing import NDArray

from geoframe.domain.models.angle import Angle
from geoframe.domain.models.distance import Distance
from geoframe.domain.models.positions import GeodeticPosition
from geoframe.domain.validators import (
    validate_arccos_domain,
    validate_interpolation_amount,
)


def to_unit_vector(position: GeodeticPosition) -> NDArray[np.float64]:
    """
    Convert a position to a unit vector from the sphere center.

    Args:
        position: Geodetic position (altitude ignored)

    Returns:
        numpy array [x, y, z]; z points at the north pole, x at (0°, 0°)
    """
    lat = position.latitude.radians
    lon = position.longitude.radians
    return np.array(
        [np.cos(lat) * np.cos(lon), np.cos(lat) * np.sin(lon), np.sin(lat)]
    )


def central_angle(start: GeodeticPosition, end: GeodeticPosition) -> Angle:
    """Angle subtended at the sphere center by two positions."""
    dot = float(np.dot(to_unit_vector(start), to_unit_vector(end)))
    return Angle.from_radians(float(np.arccos(validate_arccos_domain(dot))))


def interpolate_great_circle(
    amount: float, start: GeodeticPosition, end: GeodeticPosition
) -> GeodeticPosition:
    """
    Position a fraction of the way along the great circle from start to end.

    Uses spherical linear interpolation of the unit vectors. Altitude is
    interpolated linearly. For (near) antipodal positions the great circle is
    not unique and the plain latitude/longitude average is returned instead.

    Args:
        amount: Fraction in [0, 1]; 0 gives start, 1 gives end
        start: First position
        end: Second position

    Raises:
        ValidationError: If amount is outside [0, 1]
    """
    validate_interpolation_amount(amount)

    altitude = Distance.from_meters(
        (1.0 - amount) * start.altitude.meters + amount * end.altitude.meters
    )
    if amount == 0.0:
        return start.with_altitude(altitude)
    if amount == 1.0:
        return end.with_altitude(altitude)

    omega = central_angle(start, end).radians
    sin_omega = np.sin(omega)
    if omega == 0.0:
        return start.with_altitude(altitude)
    if sin_omega < 1e-12:
        return GeodeticPosition.from_angles(
            Angle.from_degrees(
                (1.0 - amount) * start.latitude.degrees + amount * end.latitude.degrees
            ),
            Angle.from_degrees(
                (1.0 - amount) * start.longitude.degrees + amount * end.longitude.degrees
            ),
            altitude,
        )

    weight_start = np.sin((1.0 - amount) * omega) / sin_omega
    weight_end = np.sin(amount * omega) / sin_omega
    x, y, z = weight_start * to_unit_vector(start) + weight_end * to_unit_vector(end)

    latitude = np.arctan2(z, np.hypot(x, y))
    longitude = np.arctan2(y, x)
    return GeodeticPosition.from_angles(
        Angle.from_radians(float(latitude)),
        Angle.from_radians(float(longitude)),
        altitude,
    )


def great_circle_midpoint(
    start: GeodeticPosition, end: GeodeticPosition
) -> GeodeticPosition:
    return interpolate_great_circle(0.5, start, end)
