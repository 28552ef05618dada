"""Facade adapter for simplified API integration."""

from collections.abc import Iterable

from environs import Env

from geoframe.application.scale_to_points import ScaleToPointsAction
from geoframe.application.services.base import BaseViewport
from geoframe.application.services.framing import ViewFramingService
from geoframe.application.services.user_input_parser import CoordinateParser
from geoframe.domain.constants import EARTH_RADIUS_M
from geoframe.domain.globe import WGS84, EllipsoidalGlobe, Globe
from geoframe.domain.models.angle import Angle
from geoframe.domain.models.distance import Distance
from geoframe.domain.models.framing import ViewEye
from geoframe.domain.models.positions import GeodeticPosition

GLOBE_NAMES = ("wgs84", "sphere")


class GeoFrameAPI:
    """
    Simplified facade for external integration.

    Bundles the globe, default margin and parser so that a host only needs
    a viewport and some points.
    """

    def __init__(
        self,
        globe: Globe = WGS84,
        default_margin: Distance = Distance.ZERO,
        minimum_point_count: int = 1,
    ):
        """
        Args:
            globe: Reference surface for offsets and spans
            default_margin: Margin used when a call does not pass one
            minimum_point_count: Points required before scaling a viewport
        """
        self.globe = globe
        self.default_margin = default_margin
        self.minimum_point_count = minimum_point_count
        self._framing_service = ViewFramingService(globe)
        self._coord_parser = CoordinateParser()

    @classmethod
    def create_from_env(cls, env: Env) -> "GeoFrameAPI":
        """
        Factory method: one-line initialization from environment.

        Args:
            env: Environment variable handler (Env instance)

        Returns:
            Configured GeoFrameAPI

        Raises:
            ValueError: If GEOFRAME_GLOBE names an unknown globe

        Example:
            >>> from environs import Env
            >>> env = Env()
            >>> env.read_env()
            >>> facade = GeoFrameAPI.create_from_env(env)
        """
        globe_name = env.str("GEOFRAME_GLOBE", "wgs84").lower()
        if globe_name == "wgs84":
            globe = WGS84
        elif globe_name == "sphere":
            radius_m = env.float("GEOFRAME_SPHERE_RADIUS_M", EARTH_RADIUS_M)
            globe = EllipsoidalGlobe.sphere(Distance.from_meters(radius_m))
        else:
            raise ValueError(
                f"Unknown globe {globe_name!r}, expected one of {', '.join(GLOBE_NAMES)}"
            )

        return cls(
            globe=globe,
            default_margin=Distance.from_meters(env.float("GEOFRAME_MARGIN_M", 0.0)),
            minimum_point_count=env.int("GEOFRAME_MIN_POINTS", 1),
        )

    def parse_positions(self, text: str) -> list[GeodeticPosition]:
        """
        Parse positions from free text.

        Raises:
            ValueError: If the coordinate text cannot be parsed
        """
        try:
            return self._coord_parser.parse_positions(text)
        except ValueError as e:
            raise ValueError(
                f"Could not parse coordinates. {e}\n"
                "Expected latitude/longitude pairs, e.g. '55.75 37.62' or "
                "'55°45'00\" N 37°37'12\" E'."
            ) from e

    def compute_view(
        self,
        positions: Iterable[GeodeticPosition],
        aspect_ratio: float,
        horizontal_fov: Angle,
        margin: Distance | None = None,
    ) -> ViewEye | None:
        """Compute the framing camera without moving any viewport."""
        return self._framing_service.compute_view_eye(
            positions,
            self.default_margin if margin is None else margin,
            aspect_ratio,
            horizontal_fov,
        )

    def scale_to_points(
        self,
        viewport: BaseViewport,
        positions: Iterable[GeodeticPosition],
        margin: Distance | None = None,
    ) -> ViewEye | None:
        """
        Frame viewport on positions.

        Returns:
            The applied ViewEye, or None when there are fewer positions than
            the configured minimum or nothing to frame
        """
        action = ScaleToPointsAction(
            viewport,
            positions,
            margin=self.default_margin if margin is None else margin,
            minimum_point_count=self.minimum_point_count,
            framing_service=self._framing_service,
        )
        return action.perform()
