"""
Camera distance needed to fit a ground extent into a field of view.

The eye looks straight down at the extent center. Half the extent, half the
field of view and the eye distance form a right triangle, so
distance = (span / 2) / tan(fov / 2).
"""

from geoframe.domain.globe import Globe
from geoframe.domain.models.angle import Angle
from geoframe.domain.models.distance import Distance
from geoframe.domain.models.framing import FramingAxis
from geoframe.domain.models.positions import GeodeticPosition
from geoframe.domain.validators import (
    validate_aspect_ratio,
    validate_field_of_view,
    validate_vertical_field_of_view,
)
from geoframe.logging_config import get_logger

logger = get_logger(__name__)


def _span(globe: Globe, start: GeodeticPosition, end: GeodeticPosition) -> Distance:
    distance = globe.surface_distance(start, end)
    if distance is None:
        logger.warning("Treating degenerate span as zero")
        return Distance.ZERO
    return distance


def longitude_span(
    globe: Globe, minimum: GeodeticPosition, maximum: GeodeticPosition
) -> Distance:
    """Ground length covered by longitude alone, along the minimum's latitude."""
    return _span(globe, minimum, minimum.with_longitude(maximum.longitude))


def latitude_span(
    globe: Globe, minimum: GeodeticPosition, maximum: GeodeticPosition
) -> Distance:
    """Ground length covered by latitude alone, along the minimum's meridian."""
    return _span(globe, minimum, minimum.with_latitude(maximum.latitude))


def vertical_field_of_view(horizontal_fov: Angle, aspect_ratio: float) -> Angle:
    """
    Approximate vertical field of view as horizontal FOV * aspect ratio.

    This is a linear scaling, not the projection-correct angle.
    """
    return Angle.from_radians(horizontal_fov.radians * aspect_ratio)


def constraining_axis(
    horizontal_span: Distance, vertical_span: Distance, aspect_ratio: float
) -> FramingAxis:
    """
    Pick the extent axis that limits the zoom.

    The vertical axis constrains when vertical / horizontal exceeds the
    viewport's height / width. A zero horizontal span leaves the vertical
    axis constraining whenever the vertical span is non-zero.
    """
    if horizontal_span.is_zero():
        vertical_constrains = not vertical_span.is_zero()
    else:
        vertical_constrains = vertical_span.divided_by(horizontal_span) > aspect_ratio
    return FramingAxis.VERTICAL if vertical_constrains else FramingAxis.HORIZONTAL


def eye_distance(span: Distance, field_of_view: Angle) -> Distance:
    """Distance at which span exactly fills field_of_view."""
    validate_field_of_view(field_of_view)
    return span.divided_by(2.0).divided_by(field_of_view.tan_half_angle())


def minimum_elevation(
    horizontal_span: Distance,
    vertical_span: Distance,
    aspect_ratio: float,
    horizontal_fov: Angle,
) -> tuple[Distance, FramingAxis]:
    """Eye distance that fits both spans, and the axis that decided it.

    Args:
        horizontal_span: Ground length covered by longitude
        vertical_span: Ground length covered by latitude
        aspect_ratio: Viewport height / width
        horizontal_fov: Horizontal field of view

    Raises:
        ValidationError: If aspect ratio or either field of view is invalid;
            the vertical one is checked even when the horizontal axis constrains
    """
    validate_aspect_ratio(aspect_ratio)
    validate_field_of_view(horizontal_fov)
    validate_vertical_field_of_view(horizontal_fov, aspect_ratio)

    axis = constraining_axis(horizontal_span, vertical_span, aspect_ratio)
    if axis is FramingAxis.VERTICAL:
        elevation = eye_distance(
            vertical_span, vertical_field_of_view(horizontal_fov, aspect_ratio)
        )
    else:
        elevation = eye_distance(horizontal_span, horizontal_fov)
    return elevation, axis
