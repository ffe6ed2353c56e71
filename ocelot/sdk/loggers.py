"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Ocelot, a product of Garudex Labs

SDK logger contract.

The SDK talks to loggers through four methods: ``debug``, ``info``,
``warn`` and ``error``, each taking a message and optional ``%``-style
arguments. Applications may pass any object with those methods as the
``logger`` option; :class:`BasicLogger` is the implementation used when
they do not.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Mapping, Optional, Union

from ocelot import messages
from ocelot.exceptions import InvalidLoggerError
from ocelot.logging_config import get_logger

LOGGER_METHODS = ("debug", "info", "warn", "error")

LEVELS: Dict[str, int] = {
    "debug": 0,
    "info": 1,
    "warn": 2,
    "error": 3,
    "none": 4,
}

DEFAULT_PREFIX = "[Ocelot] "

Destination = Union[Callable[[str], Any], Mapping[str, Callable[[str], Any]]]

# structlog method for each SDK level
_STRUCTLOG_METHODS = {
    "debug": "debug",
    "info": "info",
    "warn": "warning",
    "error": "error",
}


def validate_logger(logger: Any) -> None:
    """Raise :class:`InvalidLoggerError` unless ``logger`` has all four SDK methods.

    ``None`` is accepted: it means "use the default logger".
    """
    if logger is None:
        return
    for method in LOGGER_METHODS:
        if not callable(getattr(logger, method, None)):
            raise InvalidLoggerError(messages.invalid_logger(method))


class BasicLogger:
    """
    Minimal SDK logger with level filtering and a message prefix.

    Messages below ``level`` are dropped; ``level="none"`` silences
    everything. ``destination`` may be a single callable receiving the
    formatted line, a mapping from level name to callable, or None to
    forward to the package's structlog logger.
    """

    def __init__(
        self,
        level: str = "info",
        prefix: Optional[str] = DEFAULT_PREFIX,
        destination: Optional[Destination] = None,
    ):
        level = (level or "info").lower()
        if level not in LEVELS:
            raise ValueError(f"Unknown log level: {level!r}")
        self.level = level
        self.prefix = DEFAULT_PREFIX if prefix is None else prefix
        self._destination = destination
        self._structlog = get_logger("sdk")

    def _enabled(self, level: str) -> bool:
        return LEVELS[level] >= LEVELS[self.level]

    def _write(self, level: str, message: Any, args: tuple) -> None:
        if not self._enabled(level):
            return
        text = str(message)
        if args:
            try:
                text = text % args
            except (TypeError, ValueError):
                text = " ".join([text] + [str(a) for a in args])

        destination = self._destination
        if destination is None:
            getattr(self._structlog, _STRUCTLOG_METHODS[level])(f"{self.prefix}{text}", sdk_level=level)
        elif isinstance(destination, Mapping):
            sink = destination.get(level)
            if sink is not None:
                sink(f"{self.prefix}{text}")
        else:
            destination(f"{level}: {self.prefix}{text}")

    def debug(self, message: Any, *args: Any) -> None:
        self._write("debug", message, args)

    def info(self, message: Any, *args: Any) -> None:
        self._write("info", message, args)

    def warn(self, message: Any, *args: Any) -> None:
        self._write("warn", message, args)

    def error(self, message: Any, *args: Any) -> None:
        self._write("error", message, args)

    def __repr__(self) -> str:
        return f"BasicLogger(level={self.level!r}, prefix={self.prefix!r})"


def create_default_logger() -> BasicLogger:
    """Logger used when neither the caller nor the options supply one."""
    return BasicLogger(level="info")
