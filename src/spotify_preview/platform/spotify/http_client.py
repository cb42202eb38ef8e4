"""Where: src/spotify_preview/platform/spotify/http_client.py
What: HTTP transport used to download Spotify embed pages.
Why: Keep ``requests`` behind a small protocol so tests can swap it out.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Protocol

import requests

from spotify_preview.config.settings import PreviewSettings
from spotify_preview.platform.logging import logger as package_logger


@dataclass(frozen=True, slots=True)
class HTTPResult:
    """Represent an HTTP response relevant to the preview fetcher."""

    status: int
    text: str

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300


class HTTPClient(Protocol):
    """Protocol for HTTP clients able to fetch a text document."""

    def get_text(self, url: str) -> HTTPResult:
        ...


class RequestsHTTPClient:
    """Perform a single unauthenticated GET with ``requests``.

    No retries. Exceptions raised by ``requests`` propagate to the caller.
    """

    def __init__(
        self,
        timeout: float | None = None,
        user_agent: str | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.timeout: float | None = timeout
        self.user_agent: str | None = user_agent
        self.logger: logging.Logger = logger or package_logger

    @classmethod
    def from_settings(
        cls, settings: PreviewSettings, logger: logging.Logger | None = None
    ) -> RequestsHTTPClient:
        return cls(timeout=settings.timeout, user_agent=settings.user_agent, logger=logger)

    def get_text(self, url: str) -> HTTPResult:
        headers: dict[str, str] = {}
        if self.user_agent:
            headers["User-Agent"] = self.user_agent

        # timeout=None keeps the requests default (wait indefinitely)
        response = requests.get(url, headers=headers, timeout=self.timeout)

        status = int(response.status_code)
        self.logger.debug(
            "Embed response received",
            extra={"data": {"url": url, "status": status, "bytes": len(response.content)}},
        )

        return HTTPResult(status=status, text=response.text)


__all__ = [
    "HTTPClient",
    "HTTPResult",
    "RequestsHTTPClient",
]
