"""Logging setup for applications using zos_files.

Library modules only create loggers with ``logging.getLogger(__name__)``;
handlers and levels are left to the application.
"""

import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str = "info") -> int:
    """Configure root logging.

    Pass `ZosmfSettings.log_level` (e.g. `configure_logging(load_config().log_level)`)
    to use the level from the z/OSMF configuration.

    Args:
        level: Level name such as "debug" or "info" (unknown names fall back to info)

    Returns:
        Numeric level applied
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO
    logging.basicConfig(level=numeric_level, format=LOG_FORMAT)
    logging.getLogger("zos_files").setLevel(numeric_level)
    return numeric_level
