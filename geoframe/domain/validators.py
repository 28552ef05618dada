"""Input validation utilities for geodetic and framing calculations."""

import math

import numpy as np

from geoframe.domain.models.angle import Angle
from geoframe.domain.models.distance import Distance


class ValidationError(ValueError):
    """Raised when validation fails."""

    pass


def validate_angle(value: object, name: str) -> None:
    """Validate that a required position component is an Angle.

    Args:
        value: Candidate latitude or longitude
        name: Component name for error messages

    Raises:
        ValidationError: If value is missing or not an Angle
    """
    if value is None:
        raise ValidationError(f"{name} may not be None")

    if not isinstance(value, Angle):
        raise ValidationError(f"{name} must be an Angle, got {type(value).__name__}")


def validate_altitude(value: object) -> None:
    if not isinstance(value, Distance):
        raise ValidationError(
            f"altitude must be a Distance, got {type(value).__name__}"
        )


def validate_radius(radius: Distance) -> None:
    """Validate a local globe radius.

    Args:
        radius: Radius of the reference globe at a position

    Raises:
        ValidationError: If radius is not a positive finite Distance
    """
    if not isinstance(radius, Distance):
        raise ValidationError(f"Radius must be a Distance, got {type(radius).__name__}")

    if not math.isfinite(radius.meters) or radius.meters <= 0:
        raise ValidationError(f"Radius must be positive, got {radius}")


def validate_offset_distance(distance: Distance) -> None:
    """Validate the distance a position is moved by.

    Raises:
        ValidationError: If distance is not a non-negative finite Distance
    """
    if not isinstance(distance, Distance):
        raise ValidationError(
            f"Offset must be a Distance, got {type(distance).__name__}"
        )

    if not math.isfinite(distance.meters) or distance.meters < 0:
        raise ValidationError(f"Offset must be non-negative, got {distance}")


def validate_aspect_ratio(aspect_ratio: float) -> None:
    """Validate a viewport aspect ratio (height / width).

    Raises:
        ValidationError: If ratio is not a positive finite number
    """
    if not isinstance(aspect_ratio, (int, float)):
        raise ValidationError(
            f"Aspect ratio must be numeric, got {type(aspect_ratio).__name__}"
        )

    if not math.isfinite(aspect_ratio) or aspect_ratio <= 0:
        raise ValidationError(f"Aspect ratio must be positive, got {aspect_ratio}")


def validate_field_of_view(field_of_view: Angle) -> None:
    """Validate a camera field of view.

    Raises:
        ValidationError: If angle is not strictly between 0 and 180 degrees
    """
    if not isinstance(field_of_view, Angle):
        raise ValidationError(
            f"Field of view must be an Angle, got {type(field_of_view).__name__}"
        )

    if not 0 < field_of_view.degrees < 180:
        raise ValidationError(
            f"Invalid field of view {field_of_view.degrees}°. Must be in range (0, 180)"
        )


def validate_vertical_field_of_view(horizontal_fov: Angle, aspect_ratio: float) -> None:
    """Validate the vertical field of view derived as horizontal FOV * aspect ratio.

    A tall viewport can scale an otherwise valid horizontal FOV past 180
    degrees, where the eye distance would come out negative or infinite.

    Raises:
        ValidationError: If the derived angle is not below 180 degrees
    """
    vertical_degrees = horizontal_fov.degrees * aspect_ratio
    if not vertical_degrees < 180:
        raise ValidationError(
            f"Viewport too tall: vertical field of view {vertical_degrees}° "
            f"({horizontal_fov.degrees}° x aspect ratio {aspect_ratio}) must be below 180"
        )


def validate_interpolation_amount(amount: float) -> None:
    if not 0.0 <= amount <= 1.0:
        raise ValidationError(
            f"Interpolation amount {amount} outside range [0, 1]"
        )


def validate_arccos_domain(value: float) -> float:
    """Clip value to valid arccos domain [-1, 1].

    Args:
        value: Input to arccos

    Returns:
        Clipped value within [-1, 1]

    Note:
        Dot products of unit vectors can land slightly outside [-1, 1].
        Values within a small epsilon are clipped, anything further raises.
    """
    epsilon = 1e-10

    if value < -1 - epsilon or value > 1 + epsilon:
        raise ValidationError(
            f"Value {value} is far outside arccos domain [-1, 1]. "
            "This indicates a serious calculation error, not just floating-point precision."
        )

    return float(np.clip(value, -1.0, 1.0))
