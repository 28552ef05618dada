import pytest

from geoframe.application.scale_to_points import ScaleToPointsAction
from geoframe.application.services.framing import ViewFramingService
from geoframe.domain.models.distance import Distance
from geoframe.domain.models.positions import GeodeticPosition
from geoframe.domain.validators import ValidationError
from tests.mocks import MockViewport


@pytest.fixture
def positions():
    return [
        GeodeticPosition.from_degrees(50.0, 14.0),
        GeodeticPosition.from_degrees(50.1, 14.1),
        GeodeticPosition.from_degrees(49.9, 14.3),
    ]


class TestScaleToPointsAction:
    def test_performable_with_viewport_and_points(self, positions):
        action = ScaleToPointsAction(MockViewport(), positions)
        assert action.is_performable()

    def test_not_performable_without_viewport(self, positions):
        action = ScaleToPointsAction(None, positions)
        assert not action.is_performable()
        assert action.perform() is None

    def test_minimum_point_count(self, positions):
        viewport = MockViewport()
        action = ScaleToPointsAction(viewport, positions, minimum_point_count=4)
        assert not action.is_performable()
        assert action.perform() is None
        assert viewport.calls == []

    def test_zero_minimum_allows_empty_set(self):
        """An empty set is performable but frames nothing."""
        viewport = MockViewport()
        action = ScaleToPointsAction(viewport, [], minimum_point_count=0)
        assert action.is_performable()
        assert action.perform() is None
        assert viewport.calls == []

    def test_negative_minimum_rejected(self):
        with pytest.raises(ValidationError, match="non-negative"):
            ScaleToPointsAction(MockViewport(), [], minimum_point_count=-1)

    def test_perform_moves_viewport(self, positions):
        viewport = MockViewport()
        margin = Distance.from_kilometers(5)
        eye = ScaleToPointsAction(viewport, positions, margin=margin).perform()

        assert eye is not None
        assert viewport.calls[-1] == ("go_to", eye.center, eye.elevation)
        assert eye.padded_minimum.latitude.degrees < 49.9

    def test_positions_are_snapshotted(self, positions):
        action = ScaleToPointsAction(MockViewport(), positions)
        positions.clear()
        assert len(action.positions) == 3

    def test_with_positions_keeps_settings(self, positions):
        service = ViewFramingService()
        action = ScaleToPointsAction(
            MockViewport(), [], margin=Distance.from_meters(10),
            minimum_point_count=2, framing_service=service,
        )
        updated = action.with_positions(positions)

        assert updated is not action
        assert updated.positions == tuple(positions)
        assert updated.margin == action.margin
        assert updated.minimum_point_count == 2
        assert updated.framing_service is service
        assert action.positions == ()
