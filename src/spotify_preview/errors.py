"""Where: src/spotify_preview/errors.py
What: Closed error taxonomy raised by the preview pipeline.
Why: Let callers branch on malformed input versus transport failure.
"""

from __future__ import annotations

from enum import Enum
from typing import ClassVar


class ErrorKind(str, Enum):
    """Discriminant shared by every preview error."""

    INVALID_TRACK_ID = "invalid_track_id"
    INVALID_SPOTIFY_URL = "invalid_spotify_url"
    NO_PREVIEW_AVAILABLE = "no_preview_available"
    API_ERROR = "api_error"


class SpotifyPreviewError(Exception):
    """Base class for all Spotify preview errors."""

    kind: ClassVar[ErrorKind]


class InvalidTrackIdError(SpotifyPreviewError):
    """Raised when a raw track ID is not 22 alphanumeric characters."""

    kind: ClassVar[ErrorKind] = ErrorKind.INVALID_TRACK_ID

    def __init__(self, track_id: str) -> None:
        super().__init__(
            f'Invalid track ID format: "{track_id}". '
            + "Track ID must be a 22-character alphanumeric string."
        )
        self.track_id: str = track_id


class InvalidSpotifyUrlError(SpotifyPreviewError):
    """Raised when a URL carries no ``/track/`` segment."""

    kind: ClassVar[ErrorKind] = ErrorKind.INVALID_SPOTIFY_URL

    def __init__(self, url: str) -> None:
        super().__init__(
            f'Invalid Spotify URL: "{url}". '
            + 'URL must contain "/track/" followed by a valid track ID.'
        )
        self.url: str = url


class NoPreviewAvailableError(SpotifyPreviewError):
    """Raised on request when the embed page exposes no preview."""

    kind: ClassVar[ErrorKind] = ErrorKind.NO_PREVIEW_AVAILABLE

    def __init__(self, track_id: str) -> None:
        super().__init__(f'No audio preview available for track ID: "{track_id}".')
        self.track_id: str = track_id


class SpotifyApiError(SpotifyPreviewError):
    """Raised for non-success responses and transport failures.

    ``status_code`` is ``None`` when the request never produced a response.
    """

    kind: ClassVar[ErrorKind] = ErrorKind.API_ERROR

    def __init__(self, message: str, status_code: int | None = None) -> None:
        suffix = f" (Status: {status_code})" if status_code else ""
        super().__init__(f"Spotify API error: {message}{suffix}")
        self.status_code: int | None = status_code


__all__ = [
    "ErrorKind",
    "InvalidSpotifyUrlError",
    "InvalidTrackIdError",
    "NoPreviewAvailableError",
    "SpotifyApiError",
    "SpotifyPreviewError",
]
