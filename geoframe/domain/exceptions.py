class GeoFrameException(Exception):
    """
    Base exception for all geoframe errors.
    """


class ZeroDistanceError(GeoFrameException, ZeroDivisionError):
    """
    Raised when a Distance is divided by a zero Distance.
    The ratio of two lengths is undefined for a zero divisor.
    """
