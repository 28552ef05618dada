"""
Move a position by a ground distance along the reference globe.

East/west moves follow the circle of constant latitude, whose radius shrinks
with cos(latitude) and vanishes at the poles. North/south moves follow a
meridian, a great circle of the full local radius. Latitude is clamped at the
poles instead of wrapping over them.
"""

from dataclasses import replace

from geoframe.domain.globe import Globe
from geoframe.domain.models.angle import Angle
from geoframe.domain.models.distance import Distance
from geoframe.domain.models.positions import GeodeticPosition
from geoframe.domain.validators import validate_offset_distance, validate_radius


def latitude_circle_radius(position: GeodeticPosition, radius: Distance) -> Distance:
    """Radius of the circle of constant latitude through position.

    Args:
        position: Position on the circle
        radius: Local globe radius at position

    Returns:
        radius * cos(latitude), or Distance.ZERO exactly at a pole
    """
    validate_radius(radius)
    normalized_latitude = position.normalized_latitude()
    if normalized_latitude == Angle.POS90 or normalized_latitude == Angle.NEG90:
        return Distance.ZERO
    return radius.multiplied_by(position.latitude.cos())


def _longitude_delta(
    position: GeodeticPosition, distance: Distance, radius: Distance
) -> Angle | None:
    validate_offset_distance(distance)
    ring_radius = latitude_circle_radius(position, radius)
    if ring_radius.is_zero():
        return None
    return Angle.from_radians(distance.divided_by(ring_radius))


def _latitude_delta(distance: Distance, radius: Distance) -> Angle:
    validate_offset_distance(distance)
    validate_radius(radius)
    return Angle.from_radians(distance.divided_by(radius))


def west(position: GeodeticPosition, distance: Distance, radius: Distance) -> GeodeticPosition:
    """Move position west by distance; a pole position keeps its longitude."""
    delta = _longitude_delta(position, distance, radius)
    if delta is None:
        return replace(position)
    return position.with_longitude(position.longitude.subtract(delta))


def east(position: GeodeticPosition, distance: Distance, radius: Distance) -> GeodeticPosition:
    """Move position east by distance; a pole position keeps its longitude."""
    delta = _longitude_delta(position, distance, radius)
    if delta is None:
        return replace(position)
    return position.with_longitude(position.longitude.add(delta))


def north(position: GeodeticPosition, distance: Distance, radius: Distance) -> GeodeticPosition:
    """Move position north by distance, stopping at the north pole."""
    latitude = position.latitude.add(_latitude_delta(distance, radius))
    if latitude.degrees > 90.0:
        latitude = Angle.POS90
    return position.with_latitude(latitude)


def south(position: GeodeticPosition, distance: Distance, radius: Distance) -> GeodeticPosition:
    """Move position south by distance, stopping at the south pole."""
    latitude = position.latitude.subtract(_latitude_delta(distance, radius))
    if latitude.degrees < -90.0:
        latitude = Angle.NEG90
    return position.with_latitude(latitude)


def pad_minimum_position(
    position: GeodeticPosition, margin: Distance, globe: Globe
) -> GeodeticPosition:
    """
    Push a minimum corner outward: west first, then south.

    The west step must come first because its longitude delta depends on
    the latitude the corner starts at.
    """
    moved = west(position, margin, globe.radius_at(position))
    return south(moved, margin, globe.radius_at(moved))


def pad_maximum_position(
    position: GeodeticPosition, margin: Distance, globe: Globe
) -> GeodeticPosition:
    """Push a maximum corner outward: east first, then north."""
    moved = east(position, margin, globe.radius_at(position))
    return north(moved, margin, globe.radius_at(moved))
