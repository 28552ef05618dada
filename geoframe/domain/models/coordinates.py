from typing import NamedTuple


class Coordinates(NamedTuple):
    """Raw decimal-degree coordinates as read from text input."""

    lat: float
    lon: float
    alt: float = 0.0
