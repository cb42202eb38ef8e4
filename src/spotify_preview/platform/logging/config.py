"""Logger configuration bootstrap.

Where: platform/logging/config.py
What: Expose the package logger and an explicit startup-time setup helper.
Why: Importing the library must not configure output; applications opt in once.
"""

from __future__ import annotations

import logging
from typing import Final

from rich.console import Console

from .handlers import CallbackHandler, LogSink, PreviewRichHandler


LOGGER_NAME: Final[str] = "spotify_preview"

# Above CRITICAL, so nothing passes the level check.
LEVEL_NONE: Final[int] = logging.CRITICAL + 10

_LEVEL_NAMES: Final[dict[str, int]] = {
    "none": LEVEL_NONE,
    "error": logging.ERROR,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
}


def parse_log_level(value: str | int) -> int:
    """Translate a level name (``none``, ``error``, ``warn``...) to a logging level.

    Raises:
        ValueError: If the name is not recognised.
    """

    if isinstance(value, int):
        return value
    try:
        return _LEVEL_NAMES[value.strip().lower()]
    except KeyError:
        choices = ", ".join(sorted(_LEVEL_NAMES))
        raise ValueError(f"Unknown log level {value!r}; expected one of: {choices}") from None


def setup_logger(
    level: str | int = logging.WARNING,
    *,
    timestamps: bool = True,
    sink: LogSink | None = None,
    console: Console | None = None,
) -> logging.Logger:
    """Set up the package logger.

    Meant to be called once during application startup. Existing handlers
    are closed and replaced.

    Args:
        level: Minimum level, either a logging constant or a level name.
        timestamps: Whether console output includes the time column.
        sink: Optional callable receiving ``(level_name, message, data)``.
            When given, it replaces console output.
        console: Rich console for output. Defaults to a stderr console.

    Returns:
        logging.Logger: The configured package logger.
    """

    resolved_level = parse_log_level(level)
    configured = logging.getLogger(LOGGER_NAME)
    configured.setLevel(resolved_level)

    for handler in list(configured.handlers):
        handler.close()
    configured.handlers.clear()

    if sink is not None:
        configured.addHandler(CallbackHandler(sink))
    else:
        target = console or Console(stderr=True, soft_wrap=True)
        configured.addHandler(PreviewRichHandler(console=target, timestamps=timestamps))

    return configured


logger: Final[logging.Logger] = logging.getLogger(LOGGER_NAME)
logger.addHandler(logging.NullHandler())


__all__ = ["LEVEL_NONE", "LOGGER_NAME", "logger", "parse_log_level", "setup_logger"]
