"""Constants used across the application."""

# Length conversion factors
FEET_PER_METER = 3.2808399
METERS_PER_KILOMETER = 1000.0
METERS_PER_NAUTICAL_MILE = 1852.0
FEET_PER_YARD = 3.0
FEET_PER_MILE = 5280.0

# WGS84 reference ellipsoid
WGS84_EQUATORIAL_RADIUS_M = 6378137.0
WGS84_POLAR_RADIUS_M = 6356752.3142

# Earth's mean radius in meters
EARTH_RADIUS_M = 6371000.0

# Default horizontal field of view of a freshly created viewport
DEFAULT_FIELD_OF_VIEW_DEG = 45.0
