import logging
from typing import Dict, Tuple


class SeqfoldLogger:
    """Wraps a logging.Logger so that it's easy to use str.format syntax."""

    def __init__(self, logger: logging.Logger) -> None:
        self._logger = logger

    def debug(
        self, format_string: str, *args: object, **kwargs: object
    ) -> None:
        _log(self._logger, logging.DEBUG, format_string, args, kwargs)


def get_logger(name: str) -> SeqfoldLogger:
    python_logger = logging.getLogger(name)
    python_logger.addHandler(logging.NullHandler())
    return SeqfoldLogger(python_logger)


def _log(
    logger: logging.Logger,
    level: int,
    format_string: str,
    args: Tuple[object, ...],
    kwargs: Dict[str, object],
) -> None:
    # fold logs on every call
    if not logger.isEnabledFor(level):
        return
    # skip _log and SeqfoldLogger.debug
    logger.log(
        level, _DelayedFormat(format_string, args, kwargs), stacklevel=3
    )


class _DelayedFormat:
    def __init__(
        self,
        format_string: str,
        args: Tuple[object, ...],
        kwargs: Dict[str, object],
    ) -> None:
        self._format_string, self._args, self._kwargs = (
            format_string,
            args,
            kwargs,
        )

    def __str__(self) -> str:
        return self._format_string.format(*self._args, **self._kwargs)
