import logging
import sys
from typing import Optional

LOGGER_NAME = "runtime_validation"

# Marks handlers installed here so reconfiguring replaces only our own.
_HANDLER_TAG = "_runtime_validation_split_stream"


class _MaxLevelFilter(logging.Filter):
    def __init__(self, max_level: int) -> None:
        super().__init__()
        self._max_level = max_level

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno <= self._max_level


def _tagged_handler(stream, level: int, formatter: logging.Formatter) -> logging.Handler:
    handler = logging.StreamHandler(stream=stream)
    handler.setLevel(level)
    handler.setFormatter(formatter)
    setattr(handler, _HANDLER_TAG, True)
    return handler


def configure_split_stream_logging(
    *,
    level: int = logging.WARNING,
    stderr_level: int = logging.WARNING,
    formatter: Optional[logging.Formatter] = None,
    logger_name: str = LOGGER_NAME,
) -> logging.Logger:
    """Configure the package logger for the command line tool:

    - records below ``stderr_level`` go to stdout
    - records at or above ``stderr_level`` go to stderr

    Only the ``runtime_validation`` logger tree is touched, so an application
    embedding the validator keeps its own root configuration. Handlers from an
    earlier call are replaced; foreign handlers are left alone.
    """

    logger = logging.getLogger(logger_name)
    for handler in list(logger.handlers):
        if getattr(handler, _HANDLER_TAG, False):
            logger.removeHandler(handler)
    logger.setLevel(level)
    logger.propagate = False

    if formatter is None:
        formatter = logging.Formatter("%(name)s - %(levelname)s - %(message)s")

    if stderr_level < logging.DEBUG:
        stderr_level = logging.DEBUG

    stdout_handler = _tagged_handler(sys.stdout, logging.DEBUG, formatter)
    stdout_handler.addFilter(_MaxLevelFilter(stderr_level - 1))

    logger.addHandler(stdout_handler)
    logger.addHandler(_tagged_handler(sys.stderr, stderr_level, formatter))
    return logger
