from abc import ABC, abstractmethod

from geoframe.domain.models.angle import Angle
from geoframe.domain.models.distance import Distance
from geoframe.domain.models.positions import GeodeticPosition


class BaseViewport(ABC):
    """
    Abstract base class for the camera that framing moves.

    Implementations wrap whatever renders the map; the framing core only
    reads the viewport shape and issues a single move.
    """

    @property
    @abstractmethod
    def aspect_ratio(self) -> float:
        """
        Current viewport height divided by width.

        :return: The ratio, or 0 when the viewport has no width.
        """
        pass

    @property
    @abstractmethod
    def field_of_view(self) -> Angle:
        """Current horizontal field of view."""
        pass

    @abstractmethod
    def set_heading(self, heading: Angle) -> None:
        pass

    @abstractmethod
    def go_to(self, center: GeodeticPosition, elevation: Distance) -> None:
        """
        Move the camera to look down at center from elevation.

        :param center: Look-at position.
        :param elevation: Eye distance from center.
        """
        pass
