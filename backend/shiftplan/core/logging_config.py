"""Logging setup for the shiftplan logger tree."""
import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

_configured = False


def configure_logging(level: int | str = logging.INFO) -> logging.Logger:
    """Attach a single stream handler to the ``shiftplan`` logger and return it."""
    global _configured
    logger = logging.getLogger("shiftplan")
    logger.setLevel(level)
    if _configured:
        return logger

    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False

    _configured = True
    logger.debug("Logging initialized (level=%s)", level)
    return logger
