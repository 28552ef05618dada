from dataclasses import dataclass, field
from enum import Enum
from typing import Any, NamedTuple

from .angle import Angle
from .distance import Distance
from .positions import GeodeticPosition


class BoundingExtent(NamedTuple):
    """Per-axis minimum and maximum over a set of positions."""

    minimum: GeodeticPosition
    maximum: GeodeticPosition


class FramingAxis(str, Enum):
    """Extent that limits how close the camera may get."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


@dataclass(frozen=True, slots=True)
class ViewEye:
    """
    Camera parameters that fit a padded extent into a viewport.

    `elevation` is the eye distance from the look-at point, not an
    altitude above sea level.
    """

    center: GeodeticPosition
    elevation: Distance
    padded_minimum: GeodeticPosition
    padded_maximum: GeodeticPosition
    horizontal_span: Distance
    vertical_span: Distance
    constraining_axis: FramingAxis
    heading: Angle = field(default=Angle.ZERO)

    def to_dict(self) -> dict[str, Any]:
        return {
            "center": self.center.to_dict(),
            "elevation_m": self.elevation.meters,
            "heading_deg": self.heading.degrees,
            "padded_minimum": self.padded_minimum.to_dict(),
            "padded_maximum": self.padded_maximum.to_dict(),
            "horizontal_span_m": self.horizontal_span.meters,
            "vertical_span_m": self.vertical_span.meters,
            "constraining_axis": self.constraining_axis.value,
        }
