"""Unit-safe geodetic geometry and map view framing."""

from geoframe.adapter import GeoFrameAPI
from geoframe.domain.models.angle import Angle
from geoframe.domain.models.distance import Distance
from geoframe.domain.models.positions import GeodeticPosition, SurfacePosition

__all__ = [
    "GeoFrameAPI",
    "Angle",
    "Distance",
    "GeodeticPosition",
    "SurfacePosition",
]
