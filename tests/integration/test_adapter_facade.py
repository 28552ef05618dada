"""
Integration tests for the GeoFrameAPI.

These tests verify that the facade wires configuration, parsing and framing
together and drives a real viewport.
"""

import pytest
from environs import Env

from geoframe.adapter import GeoFrameAPI
from geoframe.domain.constants import EARTH_RADIUS_M
from geoframe.domain.globe import WGS84
from geoframe.domain.models.angle import Angle
from geoframe.domain.models.distance import Distance
from geoframe.domain.models.positions import GeodeticPosition
from geoframe.infrastructure.viewport import VirtualViewport

ENV_NAMES = (
    "GEOFRAME_GLOBE",
    "GEOFRAME_SPHERE_RADIUS_M",
    "GEOFRAME_MARGIN_M",
    "GEOFRAME_MIN_POINTS",
)


@pytest.fixture
def env(monkeypatch):
    for name in ENV_NAMES:
        monkeypatch.delenv(name, raising=False)
    return Env()


@pytest.fixture
def api():
    return GeoFrameAPI()


class TestCreateFromEnv:
    """Configuration read through environs."""

    def test_defaults(self, env):
        api = GeoFrameAPI.create_from_env(env)
        assert api.globe is WGS84
        assert api.default_margin == Distance.ZERO
        assert api.minimum_point_count == 1

    def test_sphere_globe(self, env, monkeypatch):
        monkeypatch.setenv("GEOFRAME_GLOBE", "Sphere")
        monkeypatch.setenv("GEOFRAME_MARGIN_M", "250.5")
        monkeypatch.setenv("GEOFRAME_MIN_POINTS", "2")
        api = GeoFrameAPI.create_from_env(env)

        assert api.globe.equatorial_radius == Distance.from_meters(EARTH_RADIUS_M)
        assert api.globe.polar_radius == api.globe.equatorial_radius
        assert api.default_margin == Distance.from_meters(250.5)
        assert api.minimum_point_count == 2

    def test_custom_sphere_radius(self, env, monkeypatch):
        monkeypatch.setenv("GEOFRAME_GLOBE", "sphere")
        monkeypatch.setenv("GEOFRAME_SPHERE_RADIUS_M", "1000")
        api = GeoFrameAPI.create_from_env(env)
        assert api.globe.equatorial_radius == Distance.from_meters(1000.0)

    def test_unknown_globe(self, env, monkeypatch):
        monkeypatch.setenv("GEOFRAME_GLOBE", "flat")
        with pytest.raises(ValueError, match="Unknown globe 'flat'"):
            GeoFrameAPI.create_from_env(env)


class TestAdapterFacade:
    """Test suite for the GeoFrameAPI."""

    def test_parse_positions(self, api):
        positions = api.parse_positions("55.367269 91.646198 55.989642 92.899899")
        assert len(positions) == 2
        assert positions[1].latitude.degrees == pytest.approx(55.989642)
        assert positions[1].longitude.degrees == pytest.approx(92.899899)

    def test_parse_error_is_explained(self, api):
        with pytest.raises(ValueError, match="Could not parse coordinates. Found an odd number"):
            api.parse_positions("1.0 2.0 3.0")

    def test_compute_view_uses_default_margin(self):
        positions = [
            GeodeticPosition.from_degrees(-1.0, 0.0),
            GeodeticPosition.from_degrees(1.0, 0.0),
        ]
        fov = Angle.from_degrees(45.0)
        padded = GeoFrameAPI(default_margin=Distance.from_kilometers(10))

        default_eye = padded.compute_view(positions, 0.75, fov)
        explicit_eye = GeoFrameAPI().compute_view(
            positions, 0.75, fov, margin=Distance.from_kilometers(10)
        )
        assert default_eye == explicit_eye

        override_eye = padded.compute_view(positions, 0.75, fov, margin=Distance.ZERO)
        assert override_eye.elevation < default_eye.elevation

    def test_compute_view_without_positions(self, api):
        assert api.compute_view([], 0.75, Angle.from_degrees(45.0)) is None

    def test_scale_to_points_moves_viewport(self, api):
        viewport = VirtualViewport(1024, 768)
        positions = api.parse_positions("50.0 14.0\n50.1 14.1\n49.9 14.3")

        eye = api.scale_to_points(viewport, positions, margin=Distance.from_meters(500))

        assert eye is not None
        assert viewport.moves == 1
        assert viewport.camera.center == eye.center
        assert viewport.camera.elevation == eye.elevation
        assert viewport.camera.heading == Angle.ZERO
        assert 49.9 < eye.center.latitude.degrees < 50.1
        assert 14.0 < eye.center.longitude.degrees < 14.3

    def test_scale_to_points_respects_minimum(self):
        api = GeoFrameAPI(minimum_point_count=3)
        viewport = VirtualViewport(800, 600)
        positions = api.parse_positions("50.0 14.0 50.1 14.1")

        assert api.scale_to_points(viewport, positions) is None
        assert viewport.moves == 0
