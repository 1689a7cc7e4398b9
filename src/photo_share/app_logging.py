"""Logging setup for the photo API process."""

import logging

LOGGER_NAME = "photo_share"
_HANDLER_NAME = "photo_share.console"
_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | int = logging.INFO) -> logging.Logger:
    """Attach the console handler to the package logger and apply ``level``.

    The handler is installed once per process; the level always follows the
    most recent call, so each app instance can bring its own settings.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False
    if not any(handler.get_name() == _HANDLER_NAME for handler in logger.handlers):
        handler = logging.StreamHandler()
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter(_FORMAT))
        logger.addHandler(handler)
    return logger
