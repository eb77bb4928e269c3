"""
Logging Configuration
Console/file output for the 'worldmap' logger namespace.

The widget itself only logs; attaching output is left to whoever embeds it.
The demo calls ``setup_logging`` once at startup.
"""
import logging
import sys
from typing import Optional

LOGGER_NAME = "worldmap"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%H:%M:%S'

# Marks handlers installed here so a re-run replaces only those
_OWNED_HANDLER_ATTR = "_worldmap_owned"

logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())


def _own(handler: logging.Handler, level: int, formatter: logging.Formatter) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(formatter)
    setattr(handler, _OWNED_HANDLER_ATTR, True)
    return handler


def remove_owned_handlers(logger: Optional[logging.Logger] = None) -> None:
    """Detach and close the handlers added by ``setup_logging``."""
    logger = logger or logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        if getattr(handler, _OWNED_HANDLER_ATTR, False):
            logger.removeHandler(handler)
            handler.close()


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> None:
    """
    Configures output for the 'worldmap' namespace.

    Handlers attached by an embedding application are left alone; only the
    ones installed by a previous call are replaced.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to save logs to a file.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    remove_owned_handlers(logger)

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    logger.addHandler(_own(logging.StreamHandler(sys.stdout), level, formatter))

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        logger.addHandler(_own(file_handler, level, formatter))

    logger.info("Logging initialized.")
