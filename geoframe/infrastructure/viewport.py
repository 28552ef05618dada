from dataclasses import dataclass

from geoframe.application.services.base import BaseViewport
from geoframe.domain.constants import DEFAULT_FIELD_OF_VIEW_DEG
from geoframe.domain.models.angle import Angle
from geoframe.domain.models.distance import Distance
from geoframe.domain.models.positions import GeodeticPosition
from geoframe.domain.validators import ValidationError


@dataclass(slots=True)
class CameraState:
    """Mutable camera pose held by VirtualViewport."""

    center: GeodeticPosition = GeodeticPosition.ZERO
    elevation: Distance = Distance.ZERO
    heading: Angle = Angle.ZERO


class VirtualViewport(BaseViewport):
    """
    In-memory viewport of a given pixel size.

    Used by the command line and by hosts without a renderer: it records
    the pose it was last moved to instead of drawing anything.
    """

    def __init__(
        self,
        width: int,
        height: int,
        field_of_view: Angle = Angle.from_degrees(DEFAULT_FIELD_OF_VIEW_DEG),
    ):
        if width < 0 or height < 0:
            raise ValidationError(f"Viewport size must be non-negative, got {width}x{height}")
        self.width = width
        self.height = height
        self._field_of_view = field_of_view
        self.camera = CameraState()
        self.moves = 0

    @property
    def aspect_ratio(self) -> float:
        if self.width == 0:
            return 0.0
        return self.height / self.width

    @property
    def field_of_view(self) -> Angle:
        return self._field_of_view

    def set_heading(self, heading: Angle) -> None:
        self.camera.heading = heading

    def go_to(self, center: GeodeticPosition, elevation: Distance) -> None:
        self.camera.center = center
        self.camera.elevation = elevation
        self.moves += 1
