from contextlib import contextmanager
import logging
import time
from typing import Iterator


FORMAT = '%(asctime)s - %(name)s - %(levelname)-5s - %(message)s'


def get_logger(name: str) -> logging.Logger:
    """Return the logger `name` equipped with its own stream handler. The
    logger does not propagate to the root logger and its initial level is
    :data:`logging.WARNING`, so that importing :mod:`finsets` stays silent.
    Records with blank messages are dropped. Calling this twice for the same
    `name` does not add a second handler.

    >>> logger = get_logger('finsets.demo')
    >>> logger.propagate
    False
    >>> logger is get_logger('finsets.demo')
    True
    >>> len(logger.handlers)
    1
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        stream_handler = logging.StreamHandler()
        stream_handler.setFormatter(logging.Formatter(FORMAT))
        logger.propagate = False
        logger.addHandler(stream_handler)
        logger.addFilter(lambda record: str(record.msg).strip() != '')
        logger.setLevel(logging.WARNING)
    return logger


@contextmanager
def temporary_level(logger: logging.Logger, level: int) -> Iterator[logging.Logger]:
    """Set the level of `logger` to `level` within a ``with`` block and
    restore the previous level on exit. The level :data:`logging.NOTSET`
    leaves the logger untouched.

    >>> logger = get_logger('finsets.demo')
    >>> with temporary_level(logger, logging.DEBUG):
    ...     logger.level == logging.DEBUG
    True
    >>> logger.level == logging.WARNING
    True
    """
    if level == logging.NOTSET:
        yield logger
        return
    save_level = logger.level
    try:
        logger.setLevel(level)
        yield logger
    finally:
        logger.setLevel(save_level)


class Timer:
    """A simple timer measuring the wall time in seconds relative to the last
    :meth:`.reset`. Instances are implicitly reset when they are created.

    >>> timer = Timer()
    >>> timer.get() >= 0.0
    True
    """

    def __init__(self) -> None:
        self.reset()

    def get(self) -> float:
        """Get the wall time since last :meth:`.reset` in seconds.
        """
        return time.time() - self._reference_time

    def reset(self) -> None:
        self._reference_time = time.time()
