"""Command that zooms a viewport onto a fixed set of positions."""

from collections.abc import Iterable

from geoframe.application.services.base import BaseViewport
from geoframe.application.services.framing import ViewFramingService
from geoframe.domain.models.distance import Distance
from geoframe.domain.models.framing import ViewEye
from geoframe.domain.models.positions import GeodeticPosition
from geoframe.domain.validators import ValidationError
from geoframe.logging_config import get_logger

logger = get_logger(__name__)


class ScaleToPointsAction:
    """
    Frames a viewport on a snapshot of positions.

    The action is performable only when a viewport is attached and it holds
    at least `minimum_point_count` positions.
    """

    def __init__(
        self,
        viewport: BaseViewport | None,
        positions: Iterable[GeodeticPosition] = (),
        margin: Distance = Distance.ZERO,
        minimum_point_count: int = 1,
        framing_service: ViewFramingService | None = None,
    ):
        if minimum_point_count < 0:
            raise ValidationError(
                f"Minimum point count must be non-negative, got {minimum_point_count}"
            )
        self.viewport = viewport
        self.positions: tuple[GeodeticPosition, ...] = tuple(positions)
        self.margin = margin
        self.minimum_point_count = minimum_point_count
        self.framing_service = framing_service or ViewFramingService()

    def with_positions(self, positions: Iterable[GeodeticPosition]) -> "ScaleToPointsAction":
        return ScaleToPointsAction(
            self.viewport,
            positions,
            margin=self.margin,
            minimum_point_count=self.minimum_point_count,
            framing_service=self.framing_service,
        )

    def is_performable(self) -> bool:
        return (
            self.viewport is not None
            and len(self.positions) >= self.minimum_point_count
        )

    def perform(self) -> ViewEye | None:
        if not self.is_performable():
            logger.debug(
                f"Not performable: {len(self.positions)} position(s), "
                f"{self.minimum_point_count} required"
            )
            return None
        return self.framing_service.frame(self.viewport, self.positions, self.margin)
