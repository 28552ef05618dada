# geoframe/domain/models/__init__.py
from .units import Meters, Kilometers, Feet, Degrees, Radians
from .angle import Angle
from .distance import Distance
from .coordinates import Coordinates

__all__ = [
    "Meters",
    "Kilometers",
    "Feet",
    "Degrees",
    "Radians",
    "Angle",
    "Distance",
    "Coordinates",
]
