"""View framing service (fits a set of positions into a viewport)"""

from collections.abc import Iterable

from geoframe.application.services.base import BaseViewport
from geoframe.domain.extent import bounding_extent
from geoframe.domain.framing import latitude_span, longitude_span, minimum_elevation
from geoframe.domain.geodesic import pad_maximum_position, pad_minimum_position
from geoframe.domain.geometry import great_circle_midpoint
from geoframe.domain.globe import WGS84, Globe
from geoframe.domain.models.angle import Angle
from geoframe.domain.models.distance import Distance
from geoframe.domain.models.framing import ViewEye
from geoframe.domain.models.positions import GeodeticPosition
from geoframe.logging_config import get_logger

logger = get_logger(__name__)


class ViewFramingService:
    """
    Computes and applies the camera view that shows a set of positions.

    `compute_view_eye` is a pure calculation; `apply` is the only step that
    touches the viewport.

    Known limitation: extents crossing the antimeridian are not handled.
    The bounding extent compares raw longitudes, the padding moves the
    corners in plain west/east directions, and the longitude span is
    measured between those corners. All of it assumes the extent does not
    wrap around 180 degrees.
    """

    def __init__(self, globe: Globe = WGS84):
        """
        Args:
            globe: Reference surface for local radii and span distances
        """
        self.globe = globe

    def compute_view_eye(
        self,
        positions: Iterable[GeodeticPosition] | None,
        margin: Distance,
        aspect_ratio: float,
        horizontal_fov: Angle,
    ) -> ViewEye | None:
        """
        Compute the camera that fits the padded extent of positions.

        Args:
            positions: Targets to show; need not be normalized
            margin: Ground padding around the extent; its magnitude is used
            aspect_ratio: Viewport height / width
            horizontal_fov: Horizontal field of view of the camera

        Returns:
            ViewEye, or None when there are no positions

        Raises:
            ValidationError: If aspect ratio or field of view is invalid
        """
        positions = list(positions or ())
        extent = bounding_extent(positions)
        if extent is None:
            logger.debug("No positions to frame")
            return None
        logger.debug(f"Framing {len(positions)} position(s): {positions}")

        margin = abs(margin)
        padded_minimum = pad_minimum_position(extent.minimum, margin, self.globe)
        padded_maximum = pad_maximum_position(extent.maximum, margin, self.globe)

        horizontal_span = longitude_span(self.globe, padded_minimum, padded_maximum)
        vertical_span = latitude_span(self.globe, padded_minimum, padded_maximum)

        elevation, axis = minimum_elevation(
            horizontal_span, vertical_span, aspect_ratio, horizontal_fov
        )
        center = great_circle_midpoint(padded_minimum, padded_maximum)

        logger.debug(
            f"Spans {horizontal_span} x {vertical_span}, {axis.value} axis "
            f"constrains, elevation {elevation}"
        )
        return ViewEye(
            center=center,
            elevation=elevation,
            padded_minimum=padded_minimum,
            padded_maximum=padded_maximum,
            horizontal_span=horizontal_span,
            vertical_span=vertical_span,
            constraining_axis=axis,
        )

    def apply(self, viewport: BaseViewport, eye: ViewEye) -> None:
        """Reset the heading and move the camera to the computed eye."""
        viewport.set_heading(Angle.ZERO)
        viewport.go_to(eye.center, eye.elevation)

    def frame(
        self,
        viewport: BaseViewport,
        positions: Iterable[GeodeticPosition],
        margin: Distance = Distance.ZERO,
    ) -> ViewEye | None:
        """
        Frame the viewport on positions with the given margin.

        Reads the aspect ratio and field of view from the viewport, computes
        the eye and applies it.

        Returns:
            The applied ViewEye, or None when nothing was done
        """
        aspect_ratio = viewport.aspect_ratio
        if aspect_ratio <= 0:
            logger.warning(f"Viewport has no usable shape (aspect ratio {aspect_ratio}), skipping")
            return None

        eye = self.compute_view_eye(
            positions, margin, aspect_ratio, viewport.field_of_view
        )
        if eye is None:
            return None

        self.apply(viewport, eye)
        logger.info(f"Camera moved to {eye.center.to_dict()} at {eye.elevation}")
        return eye
