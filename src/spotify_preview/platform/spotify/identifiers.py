"""Where: src/spotify_preview/platform/spotify/identifiers.py
What: Normalise raw track IDs and track URLs into a single track ID.
Why: Reject malformed input before any network traffic happens.
"""

from __future__ import annotations

import logging
import re
from typing import Final, Literal

from spotify_preview.errors import InvalidSpotifyUrlError, InvalidTrackIdError
from spotify_preview.platform.logging import logger as package_logger

SPOTIFY_HOST_MARKER: Final[str] = "spotify.com"
TRACK_SEGMENT: Final[str] = "/track/"

# 22 alphanumerics, case-sensitive, nothing else.
TRACK_ID_PATTERN: Final[re.Pattern[str]] = re.compile(r"[a-zA-Z0-9]{22}")

# ID ends at the query string or the end of the URL.
TRACK_URL_PATTERN: Final[re.Pattern[str]] = re.compile(r"/track/([a-zA-Z0-9]+)(?:\?|\Z)")


def extract_track_id_from_url(url: str) -> str:
    """Extract the track ID from a Spotify track URL.

    Query parameters such as ``?si=...`` are stripped. The captured segment
    is returned as-is; its length is not re-checked.

    Args:
        url: URL such as ``https://open.spotify.com/track/3zhbXKFjUDw40pTYyCgt1Y``.

    Returns:
        str: The track ID.

    Raises:
        InvalidSpotifyUrlError: If the URL has no ``/track/`` ID segment.
    """

    if SPOTIFY_HOST_MARKER not in url or TRACK_SEGMENT not in url:
        raise InvalidSpotifyUrlError(url)

    match = TRACK_URL_PATTERN.search(url)
    if match is None or not match.group(1):
        raise InvalidSpotifyUrlError(url)

    return match.group(1)


def is_valid_track_id(track_id: str) -> bool:
    """Return whether ``track_id`` is exactly 22 alphanumeric characters."""

    return TRACK_ID_PATTERN.fullmatch(track_id) is not None


def validate_spotify_track_id(track_id: str) -> Literal[True]:
    """Validate a raw Spotify track ID.

    Raises:
        InvalidTrackIdError: If the ID is not 22 alphanumeric characters.
    """

    if not is_valid_track_id(track_id):
        raise InvalidTrackIdError(track_id)
    return True


def resolve_track_id(value: str, logger: logging.Logger | None = None) -> str:
    """Turn a raw ID or a track URL into a track ID.

    Anything mentioning ``spotify.com`` goes down the URL branch; everything
    else must be a raw ID.

    Args:
        value: Raw track ID or track URL.
        logger: Logger for this call. Defaults to the package logger.
    """

    log = logger or package_logger
    if SPOTIFY_HOST_MARKER in value:
        track_id = extract_track_id_from_url(value)
        log.debug("Extracted track ID from URL", extra={"data": {"url": value, "track_id": track_id}})
        return track_id

    _ = validate_spotify_track_id(value)
    log.debug("Using raw track ID", extra={"data": {"track_id": value}})
    return value


__all__ = [
    "TRACK_ID_PATTERN",
    "TRACK_URL_PATTERN",
    "extract_track_id_from_url",
    "is_valid_track_id",
    "resolve_track_id",
    "validate_spotify_track_id",
]
