# geoframe/application/services/__init__.py
from .base import BaseViewport
from .framing import ViewFramingService
from .user_input_parser import CoordinateParser

__all__ = [
    "BaseViewport",
    "ViewFramingService",
    "CoordinateParser",
]
