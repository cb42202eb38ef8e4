"""Shared pytest fixtures for the preview pipeline tests."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from spotify_preview.platform.logging import LOGGER_NAME
from spotify_preview.platform.spotify import HTTPResult, SpotifyPreviewClient

TRACK_ID: str = "1234567890123456789012"
PREVIEW_URL: str = "https://example.com/preview.mp3"
PREVIEW_DOCUMENT: str = f'{{"audioPreview": {{"url": "{PREVIEW_URL}"}}}}'


class FakeHTTPClient:
    """Record requested URLs and answer with a canned result or exception."""

    def __init__(
        self,
        text: str = "",
        status: int = 200,
        error: Exception | None = None,
    ) -> None:
        self.text: str = text
        self.status: int = status
        self.error: Exception | None = error
        self.calls: list[str] = []

    def get_text(self, url: str) -> HTTPResult:
        self.calls.append(url)
        if self.error is not None:
            raise self.error
        return HTTPResult(status=self.status, text=self.text)


@pytest.fixture
def make_http() -> type[FakeHTTPClient]:
    """Expose the fake transport class for tests needing custom responses."""

    return FakeHTTPClient


@pytest.fixture
def fake_http() -> FakeHTTPClient:
    """Provide a transport returning a page with a preview URL."""

    return FakeHTTPClient(text=PREVIEW_DOCUMENT)


@pytest.fixture
def preview_client(fake_http: FakeHTTPClient) -> SpotifyPreviewClient:
    """Provide a client wired to the fake transport."""

    return SpotifyPreviewClient(http_client=fake_http)


@pytest.fixture(autouse=True)
def restore_package_logger() -> Iterator[None]:
    """Undo ``setup_logger`` side effects between tests."""

    package_logger = logging.getLogger(LOGGER_NAME)
    original_handlers = list(package_logger.handlers)
    original_level = package_logger.level
    yield
    for handler in package_logger.handlers:
        if handler not in original_handlers:
            handler.close()
    package_logger.handlers[:] = original_handlers
    package_logger.setLevel(original_level)
