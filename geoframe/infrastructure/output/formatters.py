"""Angle text formats and output formatting for console display."""

import json
import math
import re
from typing import Any, Protocol

from geoframe.domain.models.angle import Angle
from geoframe.domain.models.framing import ViewEye

DEGREE_SYMBOL = "°"
MINUTE_SYMBOL = "’"
SECOND_SYMBOL = "”"


class DegreeMinuteSecondFormat:
    """
    Converts angles to and from degree-minute-second text.

    Text looks like `12° 30’  5.25”`; only the degrees carry a leading `-`,
    so angles between -1 and 0 degrees keep their sign.
    """

    _NUMBER = r"(\d+(?:\.\d*)?|\.\d+)"
    _PATTERN = re.compile(
        rf"^\s*(-)?\s*{_NUMBER}\s*{DEGREE_SYMBOL}"
        rf"\s*{_NUMBER}\s*[{MINUTE_SYMBOL}']"
        rf"\s*{_NUMBER}\s*[{SECOND_SYMBOL}\"]\s*$"
    )

    def format(self, angle: Angle) -> str:
        value = angle.degrees
        absolute = abs(value)

        degrees = math.floor(absolute)
        angle_minutes = (absolute - degrees) * 60.0
        minutes = math.floor(angle_minutes)
        seconds = round((angle_minutes - minutes) * 60.0, 2)

        # Carry rounding overflow
        if seconds == 60.0:
            minutes += 1
            seconds = 0.0
        if minutes == 60:
            degrees += 1
            minutes = 0

        sign = "-" if value < 0 else ""
        return (
            f"{sign}{degrees:d}{DEGREE_SYMBOL} {minutes:2d}{MINUTE_SYMBOL} "
            f"{seconds:5.2f}{SECOND_SYMBOL}"
        )

    def parse(self, text: str) -> Angle:
        """
        Parse degree-minute-second text.

        Raises:
            ValueError: If text is not in degree-minute-second form
        """
        match = self._PATTERN.match(text)
        if match is None:
            raise ValueError(f"Not a degree-minute-second angle: {text!r}")

        negative, degrees, minutes, seconds = match.groups()
        value = float(degrees) + float(minutes) / 60.0 + float(seconds) / 3600.0
        # Sign applied last so that 0° with non-zero minutes stays negative
        if negative:
            value = -value
        return Angle.from_degrees(value)


class DecimalDegreeFormat:
    """Converts angles to and from plain decimal degrees."""

    def __init__(self, max_fraction_digits: int = 1):
        if max_fraction_digits < 0:
            raise ValueError("max_fraction_digits must be non-negative")
        self.max_fraction_digits = max_fraction_digits

    def format(self, angle: Angle) -> str:
        text = f"{angle.degrees:,.{self.max_fraction_digits}f}"
        if "." in text:
            text = text.rstrip("0").rstrip(".")
        return text

    def parse(self, text: str) -> Angle:
        try:
            return Angle.from_degrees(float(text.strip().replace(",", "")))
        except ValueError:
            raise ValueError(f"Not a decimal degree angle: {text!r}") from None


def _format_dict_floats(d: dict[str, Any], precision: int) -> dict[str, Any]:
    for k, v in d.items():
        if isinstance(v, float):
            d[k] = round(v, precision)
        elif isinstance(v, dict):
            _format_dict_floats(v, precision)
    return d


def _build_output_dict(eye: ViewEye) -> dict[str, Any]:
    return _format_dict_floats(eye.to_dict(), 6)


class OutputFormatter(Protocol):
    """Protocol for output formatting strategies"""

    def format_result(self, eye: ViewEye) -> Any:
        """Format a computed view eye"""
        ...


class ConsoleOutputFormatter:
    """Format framing results for console output"""

    def __init__(self) -> None:
        self.angle_format = DegreeMinuteSecondFormat()

    def _position_line(self, label: str, latitude: Angle, longitude: Angle) -> str:
        return (
            f"  {label:<24} {self.angle_format.format(latitude)}, "
            f"{self.angle_format.format(longitude)}"
        )

    def format_result(self, eye: ViewEye) -> None:
        print(f"\n{'=' * 60}")
        print("View Framing Result")
        print(f"{'=' * 60}")

        print("\n🎯 Camera:")
        print(self._position_line("Center:", eye.center.latitude, eye.center.longitude))
        print(
            f"  {'Elevation:':<24} {eye.elevation.meters:.1f} m "
            f"({eye.elevation.kilometers:.2f} km)"
        )
        print(f"  {'Heading:':<24} {eye.heading.degrees:.1f}°")

        print("\n📐 Padded Extent:")
        print(
            self._position_line(
                "Minimum:", eye.padded_minimum.latitude, eye.padded_minimum.longitude
            )
        )
        print(
            self._position_line(
                "Maximum:", eye.padded_maximum.latitude, eye.padded_maximum.longitude
            )
        )
        print(f"  {'Longitude span:':<24} {eye.horizontal_span.kilometers:.2f} km")
        print(f"  {'Latitude span:':<24} {eye.vertical_span.kilometers:.2f} km")
        print(f"  {'Constraining axis:':<24} {eye.constraining_axis.value}")

        print(f"{'=' * 60}\n")


class JSONOutputFormatter:
    """Format framing results as JSON (for API/automation)"""

    def format_result(self, eye: ViewEye) -> str:
        return json.dumps(_build_output_dict(eye), indent=2)
