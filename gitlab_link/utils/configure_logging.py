import logging
import os
import sys

from ..constants import LOG_LEVEL_ENV

# Prevent multiple configurations
_CONFIGURED = False


def configure_logging(level: str | None = None) -> None:
    """Configure unified gitlab-link logging.

    Stdout carries preprocessor output, so records always go to stderr.

    Args:
        level: Level name. If None, read from GITLAB_LINK_LOG (default WARNING).
            Unknown names fall back to WARNING.
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV) or "WARNING"
    unknown = level.upper() not in logging.getLevelNamesMapping()

    root_logger = logging.getLogger("gitlab_link")
    root_logger.setLevel("WARNING" if unknown else level.upper())

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setFormatter(formatter)
    root_logger.addHandler(stream_handler)

    _CONFIGURED = True

    if unknown:
        root_logger.warning("Unknown log level %r, using WARNING", level)
