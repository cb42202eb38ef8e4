"""Where: src/spotify_preview/config/settings.py
What: Immutable runtime settings and a TOML loader for them.
Why: Settings travel explicitly with each client instead of living in globals.
"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Final, cast

from spotify_preview.platform.logging import logger, parse_log_level

EMBED_BASE_URL: Final[str] = "https://open.spotify.com/embed/track/"

# Optional table name when settings share a file with other tools.
_SECTION: Final[str] = "spotify_preview"


@dataclass(frozen=True, slots=True)
class PreviewSettings:
    """Settings consumed by the preview client and the CLI."""

    # Prefix the track ID is appended to
    embed_base_url: str = EMBED_BASE_URL

    # Seconds; None leaves the transport default in place
    timeout: float | None = None

    # Sent as User-Agent only when set
    user_agent: str | None = None

    log_level: str = "WARNING"
    log_timestamps: bool = True

    def __post_init__(self) -> None:
        timeout: object = self.timeout
        if timeout is not None:
            if isinstance(timeout, bool) or not isinstance(timeout, (int, float)):
                raise ValueError(f"timeout must be a number of seconds, got {timeout!r}")
            if timeout <= 0:
                raise ValueError(f"timeout must be positive, got {timeout!r}")
        if not isinstance(self.embed_base_url, str) or not self.embed_base_url:
            raise ValueError("embed_base_url must be a non-empty string")
        if not isinstance(self.log_level, str):
            raise ValueError(f"log_level must be a level name, got {self.log_level!r}")
        _ = parse_log_level(self.log_level)
        if not isinstance(self.log_timestamps, bool):
            raise ValueError(f"log_timestamps must be true or false, got {self.log_timestamps!r}")


def settings_from_mapping(values: dict[str, Any]) -> PreviewSettings:
    """Build settings from a plain mapping, rejecting unknown keys.

    Args:
        values: Key/value pairs, either flat or nested under ``[spotify_preview]``.

    Returns:
        PreviewSettings: Validated settings.

    Raises:
        ValueError: If a key is unknown or a value is out of range.
    """

    section = values.get(_SECTION)
    if isinstance(section, dict):
        values = cast(dict[str, Any], section)

    known = {f.name for f in fields(PreviewSettings)}
    unknown = sorted(set(values) - known)
    if unknown:
        raise ValueError(f"Unknown settings: {', '.join(unknown)}")

    timeout = values.get("timeout")
    if isinstance(timeout, int) and not isinstance(timeout, bool):
        values = {**values, "timeout": float(timeout)}

    return PreviewSettings(**values)


def load_settings(path: Path | str) -> PreviewSettings:
    """Load settings from a TOML file.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        ValueError: If the file holds unknown keys or invalid values.
    """

    config_file = Path(path).expanduser()
    with open(config_file, "rb") as f:
        raw = tomllib.load(f)

    settings = settings_from_mapping(raw)
    logger.debug("Settings loaded from %s", config_file)
    return settings


DEFAULT_SETTINGS: Final[PreviewSettings] = PreviewSettings()


__all__ = [
    "DEFAULT_SETTINGS",
    "EMBED_BASE_URL",
    "PreviewSettings",
    "load_settings",
    "settings_from_mapping",
]
