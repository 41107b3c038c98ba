import logging
import os
from logging.handlers import RotatingFileHandler

LOGGER_NAME = "hangeul"
_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logger(level=logging.WARNING, log_file=None):
    """Configure the `hangeul` parent logger.

    Module loggers (`hangeul.domain.*`, `hangeul.services.*`) propagate here.
    Calling this again replaces the handlers instead of stacking them.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    formatter = logging.Formatter(_FORMAT)
    logger = logging.getLogger(LOGGER_NAME)

    # drop handlers from a previous call
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir and not os.path.exists(log_dir):
            os.makedirs(log_dir)
        rotating_handler = RotatingFileHandler(
            log_file, maxBytes=5 * 1024 * 1024, backupCount=3, encoding="utf-8"
        )
        rotating_handler.setFormatter(formatter)
        logger.addHandler(rotating_handler)

    logger.setLevel(level)
    return logger
