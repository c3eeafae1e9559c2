import logging

LOGGER_NAME = "maxheap"
LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def get_logger(name=None):
    if not name:
        return logging.getLogger(LOGGER_NAME)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


class StreamHandler(logging.StreamHandler):
    pass


def configure(level=logging.WARNING):
    """Attach a stream handler to the package logger. Calling it again only updates the level."""
    logger = get_logger()
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    logger.setLevel(level)
    if not any(isinstance(handler, StreamHandler) for handler in logger.handlers):
        handler = StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger


def print_(message, *args):
    # Trace output for the data structures
    get_logger().debug(message, *args)
