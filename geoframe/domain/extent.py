"""Bounding extent over a collection of geodetic positions."""

from collections.abc import Iterable

import numpy as np
from numpy.typing import NDArray

from geoframe.domain.models.framing import BoundingExtent
from geoframe.domain.models.positions import GeodeticPosition


def _axis_table(
    positions: Iterable[GeodeticPosition] | None,
) -> NDArray[np.float64] | None:
    """Normalize positions into an (N, 3) array of lat deg, lon deg, alt m."""
    if positions is None:
        return None

    rows = []
    for position in positions:
        normal = position.normalized()
        rows.append(
            (normal.latitude.degrees, normal.longitude.degrees, normal.altitude.meters)
        )

    if not rows:
        return None
    return np.array(rows, dtype=np.float64)


def _position_from_row(row: NDArray[np.float64]) -> GeodeticPosition:
    lat, lon, alt = (float(value) for value in row)
    return GeodeticPosition.from_degrees(lat, lon, alt)


def minimum_position(
    positions: Iterable[GeodeticPosition] | None,
) -> GeodeticPosition | None:
    """
    Smallest latitude, longitude and altitude of the normalized positions.

    Each axis is reduced independently, so the result is generally not one
    of the inputs. Returns None for empty or missing input.
    """
    table = _axis_table(positions)
    if table is None:
        return None
    return _position_from_row(table.min(axis=0))


def maximum_position(
    positions: Iterable[GeodeticPosition] | None,
) -> GeodeticPosition | None:
    """Largest latitude, longitude and altitude; see `minimum_position`."""
    table = _axis_table(positions)
    if table is None:
        return None
    return _position_from_row(table.max(axis=0))


def bounding_extent(
    positions: Iterable[GeodeticPosition] | None,
) -> BoundingExtent | None:
    """
    Minimum and maximum corners of the normalized positions.

    Longitudes are compared as plain numbers, so a set straddling the
    antimeridian yields an extent spanning the long way around the globe.

    Returns:
        BoundingExtent, or None when there are no positions
    """
    table = _axis_table(positions)
    if table is None:
        return None
    return BoundingExtent(
        minimum=_position_from_row(table.min(axis=0)),
        maximum=_position_from_row(table.max(axis=0)),
    )
