import logging
import sys

from tasktrack.core.config import Settings

APP_LOGGER = "tasktrack"


def setup_logging(settings: Settings) -> logging.Logger:
    """Level and format come from LOG_LEVEL / LOG_FORMAT.

    The package logger always takes the configured level. A stdout handler is
    attached to the root only when nothing else (uvicorn, pytest) has one yet.
    """
    level = settings.log_level_value
    app_logger = logging.getLogger(APP_LOGGER)
    app_logger.setLevel(level)

    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(level)
        handler.setFormatter(logging.Formatter(settings.log_format))
        root.addHandler(handler)
    return app_logger
