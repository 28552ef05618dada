import pytest
from numpy.testing import assert_allclose

from geoframe.domain.extent import bounding_extent, maximum_position, minimum_position
from geoframe.domain.models.positions import GeodeticPosition


@pytest.fixture
def scattered_positions():
    return [
        GeodeticPosition.from_degrees(10.0, -20.0, 500.0),
        GeodeticPosition.from_degrees(-5.0, 30.0, 100.0),
        GeodeticPosition.from_degrees(25.0, 5.0, -10.0),
        GeodeticPosition.from_degrees(100.0, 200.0, 50.0),  # folds to (80, -160)
    ]


def _as_row(position):
    return [position.latitude.degrees, position.longitude.degrees, position.altitude.meters]


class TestBoundingExtent:
    def test_axes_chosen_independently(self, scattered_positions):
        extent = bounding_extent(scattered_positions)
        assert_allclose(_as_row(extent.minimum), [-5.0, -160.0, -10.0])
        assert_allclose(_as_row(extent.maximum), [80.0, 30.0, 500.0])

    def test_extrema_need_not_be_input_points(self, scattered_positions):
        extent = bounding_extent(scattered_positions)
        assert not any(extent.minimum.contains(p) for p in scattered_positions)

    def test_every_point_is_inside(self, scattered_positions):
        extent = bounding_extent(scattered_positions)
        for position in scattered_positions:
            row = _as_row(position.normalized())
            assert all(lo <= value <= hi for lo, value, hi in zip(
                _as_row(extent.minimum), row, _as_row(extent.maximum)
            ))

    def test_single_point(self):
        position = GeodeticPosition.from_degrees(12.0, 34.0, 56.0)
        extent = bounding_extent([position])
        assert extent.minimum == position.normalized()
        assert extent.maximum == position.normalized()

    def test_single_unnormalized_point(self):
        extent = bounding_extent([GeodeticPosition.from_degrees(0.0, 190.0)])
        assert extent.minimum == extent.maximum
        assert extent.minimum.longitude.degrees == pytest.approx(-170.0)

    @pytest.mark.parametrize("positions", [None, [], iter(())])
    def test_empty_input_has_no_extent(self, positions):
        assert bounding_extent(positions) is None

    def test_accepts_generators(self, scattered_positions):
        assert bounding_extent(p for p in scattered_positions) == bounding_extent(
            scattered_positions
        )


class TestMinimumMaximum:
    def test_match_extent(self, scattered_positions):
        extent = bounding_extent(scattered_positions)
        assert minimum_position(scattered_positions) == extent.minimum
        assert maximum_position(scattered_positions) == extent.maximum

    def test_empty(self):
        assert minimum_position([]) is None
        assert maximum_position(None) is None
