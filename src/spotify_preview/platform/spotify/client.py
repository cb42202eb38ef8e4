"""Where: src/spotify_preview/platform/spotify/client.py
What: Facade resolving a track identifier to its audio preview URL.
Why: Sequence identifier resolution and the embed fetch behind one call.

The pipeline delegates to focused collaborators:
- ``identifiers`` validates raw IDs and parses track URLs
- ``embed`` downloads the embed page and extracts the preview URL
- ``http_client`` performs the single outbound request

The exposed API is ``get_preview`` and ``SpotifyPreviewClient``.
"""

from __future__ import annotations

import logging
from typing import Literal, overload

from spotify_preview.config.settings import DEFAULT_SETTINGS, PreviewSettings
from spotify_preview.errors import NoPreviewAvailableError
from spotify_preview.platform.logging import logger as package_logger

from .embed import fetch_preview
from .http_client import HTTPClient, RequestsHTTPClient
from .identifiers import resolve_track_id


class SpotifyPreviewClient:
    """Resolve Spotify tracks to preview URLs.

    Instances hold only immutable configuration, so one client can serve
    concurrent callers.
    """

    def __init__(
        self,
        settings: PreviewSettings | None = None,
        http_client: HTTPClient | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.settings: PreviewSettings = settings or DEFAULT_SETTINGS
        self.logger: logging.Logger = logger or package_logger
        self.http_client: HTTPClient = http_client or RequestsHTTPClient.from_settings(
            self.settings, logger=self.logger
        )

    @overload
    def get_preview(self, track: str, *, throws: Literal[True]) -> str: ...

    @overload
    def get_preview(self, track: str, *, throws: bool = False) -> str | None: ...

    def get_preview(self, track: str, *, throws: bool = False) -> str | None:
        """Get the audio preview URL for a Spotify track.

        Args:
            track: A track ID (``308Ir17KlNdlrbVLHWhlLe``) or a track URL
                (``https://open.spotify.com/track/308Ir17KlNdlrbVLHWhlLe``).
            throws: Raise instead of returning ``None`` when no preview exists.

        Returns:
            str | None: The preview URL, or ``None`` when none was found and
            ``throws`` is false.

        Raises:
            InvalidTrackIdError: If a raw ID is malformed.
            InvalidSpotifyUrlError: If a URL has no track segment.
            NoPreviewAvailableError: If no preview exists and ``throws`` is true.
            SpotifyApiError: If the embed page could not be retrieved.
        """

        self.logger.info("Resolving preview", extra={"data": {"track": track, "throws": throws}})
        # URL-derived IDs are fetched without a length re-check; raw IDs are fully validated.
        track_id = resolve_track_id(track, logger=self.logger)

        preview_url = fetch_preview(
            track_id,
            http_client=self.http_client,
            base_url=self.settings.embed_base_url,
            logger=self.logger,
        )
        if preview_url is not None:
            return preview_url

        if throws:
            self.logger.warning("No preview available", extra={"data": {"track_id": track_id}})
            raise NoPreviewAvailableError(track_id)
        return None


_default_client: SpotifyPreviewClient | None = None


def _get_default_client() -> SpotifyPreviewClient:
    global _default_client
    if _default_client is None:
        _default_client = SpotifyPreviewClient()
    return _default_client


@overload
def get_preview(track: str, *, throws: Literal[True], client: SpotifyPreviewClient | None = None) -> str: ...


@overload
def get_preview(
    track: str, *, throws: bool = False, client: SpotifyPreviewClient | None = None
) -> str | None: ...


def get_preview(
    track: str, *, throws: bool = False, client: SpotifyPreviewClient | None = None
) -> str | None:
    """Module-level variant delegating to ``client`` or a default client."""

    return (client or _get_default_client()).get_preview(track, throws=throws)


__all__ = [
    "SpotifyPreviewClient",
    "get_preview",
]
