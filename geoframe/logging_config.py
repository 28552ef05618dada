import logging
import sys
from environs import Env
from .log_filters import TruncatingFilter

FRAMING_LOGGER_NAMES = (
    "geoframe.application.services.framing",
    "geoframe.application.scale_to_points",
)


def setup_logging(env: Env) -> None:
    """Set up logging configuration."""
    if logging.root.handlers:  # Logging already configured by the host
        return

    log_level_str = env.str("LOGGING_LEVEL", "INFO").upper()

    # DEBUG flag overrides log level when set to True
    if env.bool("DEBUG", default=False):
        log_level_str = "DEBUG"

    numeric_level = getattr(logging, log_level_str, None)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {log_level_str}")

    logging.basicConfig(
        level=numeric_level,
        format="[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s",
        stream=sys.stdout,
    )

    # Point lists logged while framing can be arbitrarily long
    for name in FRAMING_LOGGER_NAMES:
        framing_logger = logging.getLogger(name)
        framing_logger.setLevel(numeric_level)
        framing_logger.addFilter(TruncatingFilter(max_length=160))

    # pyproj only reports its own data directory lookups
    logging.getLogger("pyproj").setLevel(logging.WARNING)

    # Force the level on loggers created before setup_logging ran
    for logger_name in logging.Logger.manager.loggerDict:
        if not logger_name.startswith("geoframe"):
            continue
        logger = logging.getLogger(logger_name)
        if logger.level == logging.NOTSET:
            logger.setLevel(numeric_level)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance."""
    return logging.getLogger(name)
