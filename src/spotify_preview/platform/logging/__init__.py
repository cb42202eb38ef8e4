"""Logging facade exports.

Where: platform/logging/__init__.py
What: Re-export the package logger, setup helpers, and custom handlers.
Why: Provide a single canonical import path for pipeline modules.
"""

from __future__ import annotations

from .config import LEVEL_NONE, LOGGER_NAME, logger, parse_log_level, setup_logger
from .handlers import CallbackHandler, LogSink, PreviewRichHandler

__all__ = [
    "CallbackHandler",
    "LEVEL_NONE",
    "LOGGER_NAME",
    "LogSink",
    "PreviewRichHandler",
    "logger",
    "parse_log_level",
    "setup_logger",
]
