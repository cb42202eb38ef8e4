"""Where: src/spotify_preview/platform/spotify/embed.py
What: Fetch a track's embed page and pull the audio preview URL out of it.
Why: The embed page carries preview metadata without requiring API credentials.
"""

from __future__ import annotations

import logging
import re
from typing import Final

from spotify_preview.config.settings import EMBED_BASE_URL
from spotify_preview.errors import SpotifyApiError
from spotify_preview.platform.logging import logger as package_logger

from .http_client import HTTPClient

PREVIEW_PATTERN: Final[re.Pattern[str]] = re.compile(
    r'"audioPreview":\s*\{\s*"url":\s*"([^"]+)"\s*\}'
)

# Loose sanity check; anything else counts as "no preview".
_REQUIRED_SCHEME: Final[str] = "https://"


def build_embed_url(track_id: str, base_url: str = EMBED_BASE_URL) -> str:
    """Return the embed page URL for ``track_id``."""

    return f"{base_url}{track_id}"


def extract_preview_url(document: str) -> str | None:
    """Find the ``audioPreview`` URL inside an embed page.

    Returns:
        str | None: The preview URL, or ``None`` when the page has none or the
        candidate does not contain ``https://``.
    """

    match = PREVIEW_PATTERN.search(document)
    candidate = match.group(1) if match else None
    if not candidate or _REQUIRED_SCHEME not in candidate:
        return None
    return candidate


def fetch_preview(
    track_id: str,
    *,
    http_client: HTTPClient,
    base_url: str = EMBED_BASE_URL,
    logger: logging.Logger | None = None,
) -> str | None:
    """Download the embed page for ``track_id`` and extract its preview URL.

    Args:
        track_id: Validated track ID.
        http_client: Transport performing the GET request.
        base_url: Embed endpoint prefix.
        logger: Logger for this call. Defaults to the package logger.

    Returns:
        str | None: The preview URL, or ``None`` when no preview is available.

    Raises:
        SpotifyApiError: On a non-success status (with ``status_code``) or any
            failure while requesting or reading the page (without one).
    """

    log = logger or package_logger
    url = build_embed_url(track_id, base_url)
    log.debug("Requesting embed page", extra={"data": {"track_id": track_id, "url": url}})

    try:
        result = http_client.get_text(url)
        if not result.ok:
            log.error(
                "Embed request failed",
                extra={"data": {"track_id": track_id, "status": result.status}},
            )
            raise SpotifyApiError(
                f"embed page request failed for track {track_id}",
                status_code=result.status,
            )
        preview_url = extract_preview_url(result.text)
    except SpotifyApiError:
        raise
    except Exception as exc:
        log.error(
            "Embed request raised %s",
            type(exc).__name__,
            extra={"data": {"track_id": track_id, "error": str(exc)}},
        )
        raise SpotifyApiError(str(exc) or type(exc).__name__) from exc

    if preview_url is None:
        log.info("No preview URL found", extra={"data": {"track_id": track_id}})
    else:
        log.debug("Preview URL found", extra={"data": {"track_id": track_id, "preview_url": preview_url}})
    return preview_url


__all__ = [
    "PREVIEW_PATTERN",
    "build_embed_url",
    "extract_preview_url",
    "fetch_preview",
]
