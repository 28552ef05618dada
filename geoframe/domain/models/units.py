# geoframe/domain/models/units.py
"""
Scalar unit aliases for raw numbers crossing the value-type boundary.

Angle and Distance carry their unit inside the value. These NewTypes mark the
plain floats that go in and out of their factories and accessors, so that
a type checker can tell a degree value from a radian value.

Usage:
    from geoframe.domain.models.units import Degrees, Meters

    def ring_length(radius: Meters) -> Meters:
        return Meters(2 * math.pi * radius)
"""

from typing import NewType

# Base physical units
Meters = NewType("Meters", float)  # Length in meters
Kilometers = NewType("Kilometers", float)  # Length in kilometers
Feet = NewType("Feet", float)  # Length in international feet
Degrees = NewType("Degrees", float)  # Angle in degrees
Radians = NewType("Radians", float)  # Angle in radians
