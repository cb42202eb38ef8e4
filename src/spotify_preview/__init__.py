# Where: spotify_preview.__init__
# What: Public API for resolving Spotify tracks to audio preview URLs.
# Why: Give callers one import path for the pipeline, its errors and settings.

from spotify_preview.config import PreviewSettings, load_settings
from spotify_preview.errors import (
    ErrorKind,
    InvalidSpotifyUrlError,
    InvalidTrackIdError,
    NoPreviewAvailableError,
    SpotifyApiError,
    SpotifyPreviewError,
)
from spotify_preview.platform.logging import setup_logger
from spotify_preview.platform.spotify import (
    HTTPClient,
    HTTPResult,
    SpotifyPreviewClient,
    extract_track_id_from_url,
    get_preview,
    is_valid_track_id,
    resolve_track_id,
    validate_spotify_track_id,
)

__version__ = "0.1.0"

__all__ = [
    "ErrorKind",
    "HTTPClient",
    "HTTPResult",
    "InvalidSpotifyUrlError",
    "InvalidTrackIdError",
    "NoPreviewAvailableError",
    "PreviewSettings",
    "SpotifyApiError",
    "SpotifyPreviewClient",
    "SpotifyPreviewError",
    "extract_track_id_from_url",
    "get_preview",
    "is_valid_track_id",
    "load_settings",
    "resolve_track_id",
    "setup_logger",
    "validate_spotify_track_id",
]
