"""Where: src/spotify_preview/platform/logging/handlers.py
What: Logging handlers for console output and caller-supplied sinks.
Why: Render the structured ``data`` payload attached to pipeline log records.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable, Mapping
from typing import Any, cast

if sys.version_info >= (3, 12):
    from typing import override
else:
    from typing_extensions import override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.text import Text

LogSink = Callable[[str, str, Any], None]
"""Callable receiving ``(level_name, message, data)`` for each record."""


def record_payload(record: logging.LogRecord) -> Any:
    """Return the ``data`` extra of a record, or ``None`` when absent."""

    return getattr(record, "data", None)


def format_payload(data: Any) -> str:
    """Render a payload as ``key=value`` pairs when it is a mapping."""

    if isinstance(data, Mapping):
        items = cast(Mapping[str, Any], data)
        return " ".join(f"{key}={value}" for key, value in items.items())
    return str(data)


class PreviewRichHandler(RichHandler):
    """Rich handler that appends the structured payload to each message."""

    def __init__(self, *args: Any, timestamps: bool = True, **kwargs: Any) -> None:
        """Initialize the handler with package defaults.

        Args:
            *args: Positional arguments to pass to RichHandler.
            timestamps: Whether to render the time column.
            **kwargs: Keyword arguments to pass to RichHandler.
        """
        kwargs["show_time"] = timestamps
        kwargs["show_path"] = False
        kwargs["show_level"] = True
        kwargs["markup"] = False
        kwargs["rich_tracebacks"] = True
        super().__init__(*args, **kwargs)

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        rendered = super().render_message(record, message)
        data = record_payload(record)
        if data is None:
            return rendered

        text = rendered if isinstance(rendered, Text) else Text(message)
        _ = text.append(" ")
        _ = text.append(format_payload(data), style="dim")
        return text


class CallbackHandler(logging.Handler):
    """Forward records to a user callable instead of a stream."""

    def __init__(self, sink: LogSink, level: int = logging.NOTSET) -> None:
        super().__init__(level)
        self.sink: LogSink = sink

    @override
    def emit(self, record: logging.LogRecord) -> None:
        try:
            message = record.getMessage()
            self.sink(record.levelname, message, record_payload(record))
        except Exception:
            self.handleError(record)


__all__ = [
    "CallbackHandler",
    "LogSink",
    "PreviewRichHandler",
    "format_payload",
    "record_payload",
]
