"""Configuration for the Spotify preview client."""

from __future__ import annotations

from .settings import (
    DEFAULT_SETTINGS,
    EMBED_BASE_URL,
    PreviewSettings,
    load_settings,
    settings_from_mapping,
)

__all__ = [
    "DEFAULT_SETTINGS",
    "EMBED_BASE_URL",
    "PreviewSettings",
    "load_settings",
    "settings_from_mapping",
]
