"""Spotify embed-page package.

This package resolves track identifiers and scrapes the public embed page
for the 30-second audio preview URL. No API credentials are involved.
"""

from __future__ import annotations

from .client import SpotifyPreviewClient, get_preview
from .embed import build_embed_url, extract_preview_url, fetch_preview
from .http_client import HTTPClient, HTTPResult, RequestsHTTPClient
from .identifiers import (
    extract_track_id_from_url,
    is_valid_track_id,
    resolve_track_id,
    validate_spotify_track_id,
)

__all__ = [
    "HTTPClient",
    "HTTPResult",
    "RequestsHTTPClient",
    "SpotifyPreviewClient",
    "build_embed_url",
    "extract_preview_url",
    "extract_track_id_from_url",
    "fetch_preview",
    "get_preview",
    "is_valid_track_id",
    "resolve_track_id",
    "validate_spotify_track_id",
]
