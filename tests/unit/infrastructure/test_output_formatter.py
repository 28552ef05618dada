"""Test angle text formats and framing output"""

import json

import pytest

from geoframe.domain.models.angle import Angle
from geoframe.domain.models.distance import Distance
from geoframe.domain.models.framing import FramingAxis, ViewEye
from geoframe.domain.models.positions import GeodeticPosition
from geoframe.infrastructure.output.formatters import (
    ConsoleOutputFormatter,
    DecimalDegreeFormat,
    DegreeMinuteSecondFormat,
    JSONOutputFormatter,
)


@pytest.fixture
def sample_eye():
    """Create a sample view eye for testing"""
    return ViewEye(
        center=GeodeticPosition.from_degrees(0.0, 0.0),
        elevation=Distance.from_meters(268517.123456789),
        padded_minimum=GeodeticPosition.from_degrees(-1.0, 0.0),
        padded_maximum=GeodeticPosition.from_degrees(1.0, 0.0),
        horizontal_span=Distance.ZERO,
        vertical_span=Distance.from_meters(222389.853),
        constraining_axis=FramingAxis.VERTICAL,
    )


class TestDegreeMinuteSecondFormat:
    def setup_method(self):
        self.fmt = DegreeMinuteSecondFormat()

    def test_format_positive(self):
        assert self.fmt.format(Angle.from_degrees(12.5)) == "12° 30’  0.00”"

    def test_format_seconds(self):
        angle = Angle.from_degrees(45 + 15 / 60 + 5.25 / 3600)
        assert self.fmt.format(angle) == "45° 15’  5.25”"

    def test_format_negative_keeps_sign_below_one_degree(self):
        assert self.fmt.format(Angle.from_degrees(-0.5)) == "-0° 30’  0.00”"

    def test_format_carries_rounded_seconds(self):
        """59.999 seconds round up into the next minute and degree."""
        angle = Angle.from_degrees(10 + 59 / 60 + 59.999 / 3600)
        assert self.fmt.format(angle) == "11°  0’  0.00”"

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("12° 30’  0.00”", 12.5),
            ("-0° 30’  0.00”", -0.5),
            ("45°15'36\"", 45.26),
            ("  -10° 0’ 36.00”  ", -10.01),
        ],
    )
    def test_parse(self, text, expected):
        assert self.fmt.parse(text).degrees == pytest.approx(expected)

    @pytest.mark.parametrize("degrees", [0.0, 12.5, -73.25, 179.999, -0.01])
    def test_round_trip_within_display_precision(self, degrees):
        angle = Angle.from_degrees(degrees)
        parsed = self.fmt.parse(self.fmt.format(angle))
        assert parsed.degrees == pytest.approx(degrees, abs=0.005 / 3600)

    @pytest.mark.parametrize("text", ["", "12.5", "12° 30’", "abc° 1’ 2”"])
    def test_parse_rejects_malformed(self, text):
        with pytest.raises(ValueError, match="Not a degree-minute-second angle"):
            self.fmt.parse(text)


class TestDecimalDegreeFormat:
    def test_one_fraction_digit_by_default(self):
        fmt = DecimalDegreeFormat()
        assert fmt.format(Angle.from_degrees(12.345)) == "12.3"
        assert fmt.format(Angle.from_degrees(12.0)) == "12"
        assert fmt.format(Angle.from_degrees(-0.25)) == "-0.2"

    def test_more_digits(self):
        assert DecimalDegreeFormat(3).format(Angle.from_degrees(1.23456)) == "1.235"

    def test_parse(self):
        assert DecimalDegreeFormat().parse(" 45.5 ").degrees == 45.5

    def test_parse_rejects_text(self):
        with pytest.raises(ValueError, match="Not a decimal degree angle"):
            DecimalDegreeFormat().parse("north")


class TestConsoleOutputFormatter:
    def test_prints_report(self, sample_eye, capsys):
        ConsoleOutputFormatter().format_result(sample_eye)
        output = capsys.readouterr().out

        assert "View Framing Result" in output
        assert "0°  0’  0.00”" in output
        assert "268517.1 m" in output
        assert "268.52 km" in output
        assert "Constraining axis:" in output
        assert "vertical" in output


class TestJSONOutputFormatter:
    def test_json_structure(self, sample_eye):
        data = json.loads(JSONOutputFormatter().format_result(sample_eye))

        assert data["center"] == {"lat": 0.0, "lon": 0.0, "alt_m": 0.0}
        assert data["elevation_m"] == 268517.123457
        assert data["heading_deg"] == 0.0
        assert data["constraining_axis"] == "vertical"
        assert data["padded_minimum"]["lat"] == -1.0
        assert data["horizontal_span_m"] == 0.0
