import logging
import sys

from factcheck.core.config import settings

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] → %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# SDK / transport loggers that would otherwise echo every request
NOISY_LIBRARY_LOGGERS = ("groq", "httpx", "httpcore", "aiohttp.access")

_libraries_quieted = False


def _stdout_handler() -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    return handler


def _quiet_libraries() -> None:
    global _libraries_quieted
    if _libraries_quieted:
        return
    for name in NOISY_LIBRARY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    _libraries_quieted = True


def get_logger(name: str) -> logging.Logger:
    """
    Logger for a fact checker module, writing to stdout at ``LOG_LEVEL``.

    Usage:
        logger = get_logger(__name__)
    """
    _quiet_libraries()
    logger = logging.getLogger(name)

    if not logger.handlers:
        logger.setLevel(settings.LOG_LEVEL.upper())
        logger.addHandler(_stdout_handler())
        logger.propagate = False

    return logger
