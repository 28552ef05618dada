import re

from geoframe.domain.models.coordinates import Coordinates
from geoframe.domain.models.positions import GeodeticPosition

# Degree, minute and second marks, typographic and ASCII
_MARKS = re.compile(r"[°º’′'”″\"]")
_TOKEN = re.compile(r"[+-]?\d+(?:\.\d+)?|[NSEW](?![A-Z])|[^\s;,]+", re.IGNORECASE)

HEMISPHERE_SIGNS = {"N": 1, "E": 1, "S": -1, "W": -1}


class CoordinateParser:
    """
    Parses latitude/longitude pairs from free text.

    Values may be decimal degrees or whole degrees-minutes-seconds, each
    optionally followed by a hemisphere letter. Values are paired in reading
    order: latitude, longitude, latitude, longitude, ...
    """

    @staticmethod
    def _is_number(token: str) -> bool:
        try:
            float(token)
        except ValueError:
            return False
        return True

    @staticmethod
    def _is_hemisphere(tokens: list[str], i: int) -> bool:
        return i < len(tokens) and tokens[i].upper() in HEMISPHERE_SIGNS

    @staticmethod
    def _dms_to_dd(degrees: float, minutes: float, seconds: float) -> float:
        sign = -1 if degrees < 0 else 1
        return sign * (abs(degrees) + minutes / 60.0 + seconds / 3600.0)

    def _read_value(
        self, tokens: list[str], i: int, marked: bool = False
    ) -> tuple[float, int]:
        """
        Read one coordinate value starting at tokens[i]; return it and the next index.

        Three numbers are read as degrees, minutes and seconds only when the
        line carried degree or minute marks, or a hemisphere letter follows
        them. Bare whole numbers stay plain decimal degrees.
        """
        window = tokens[i : i + 3]
        is_dms = (
            len(window) == 3
            and all(self._is_number(t) for t in window)
            and "." not in window[0]
            and "." not in window[1]
            and (marked or self._is_hemisphere(tokens, i + 3))
        )
        if is_dms:
            degrees, minutes, seconds = (float(t) for t in window)
            if not (0 <= minutes < 60 and 0 <= seconds < 60):
                raise ValueError(
                    "Invalid DMS coordinate: minutes or seconds out of range"
                )
            value = self._dms_to_dd(degrees, minutes, seconds)
            i += 3
        else:
            value = float(tokens[i])
            i += 1

        if self._is_hemisphere(tokens, i):
            if value >= 0:
                value *= HEMISPHERE_SIGNS[tokens[i].upper()]
            i += 1
        return value, i

    def parse_values(self, text: str) -> list[float]:
        values = []
        for line in text.splitlines():
            line = line.strip()
            if not line:
                continue
            marked = _MARKS.search(line) is not None
            line = _MARKS.sub(" ", line)

            tokens = _TOKEN.findall(line)
            i = 0
            while i < len(tokens):
                if self._is_number(tokens[i]):
                    value, i = self._read_value(tokens, i, marked)
                    values.append(value)
                else:
                    i += 1
        return values

    def parse(self, text: str) -> list[Coordinates]:
        """
        Parse text into coordinate pairs.

        Raises:
            ValueError: If the text is empty, holds no coordinates, or holds
                an odd number of values
        """
        if not text.strip():
            raise ValueError("Input cannot be empty.")

        values = self.parse_values(text)
        if not values:
            raise ValueError("No coordinates found in the input text.")
        if len(values) % 2 != 0:
            raise ValueError(f"Found an odd number of coordinate values: {len(values)}")

        return [
            Coordinates(lat=values[i], lon=values[i + 1])
            for i in range(0, len(values), 2)
        ]

    def parse_positions(self, text: str) -> list[GeodeticPosition]:
        """Parse text into positions on the reference surface (altitude 0)."""
        return [GeodeticPosition.from_coordinates(c) for c in self.parse(text)]
