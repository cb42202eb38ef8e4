"""Tests for settings defaults and TOML loading."""

from __future__ import annotations

import dataclasses
import textwrap
import tomllib
from pathlib import Path

import pytest

from spotify_preview.config.settings import (
    DEFAULT_SETTINGS,
    EMBED_BASE_URL,
    PreviewSettings,
    load_settings,
    settings_from_mapping,
)


def _write(tmp_path: Path, content: str) -> Path:
    path = tmp_path / "settings.toml"
    _ = path.write_text(textwrap.dedent(content), encoding="utf-8")
    return path


def test_defaults_match_embed_endpoint() -> None:
    assert DEFAULT_SETTINGS.embed_base_url == "https://open.spotify.com/embed/track/"
    assert DEFAULT_SETTINGS.embed_base_url == EMBED_BASE_URL
    assert DEFAULT_SETTINGS.timeout is None
    assert DEFAULT_SETTINGS.user_agent is None
    assert DEFAULT_SETTINGS.log_level == "WARNING"
    assert DEFAULT_SETTINGS.log_timestamps is True


def test_settings_are_immutable() -> None:
    with pytest.raises(dataclasses.FrozenInstanceError):
        DEFAULT_SETTINGS.timeout = 3.0  # pyright: ignore[reportAttributeAccessIssue]


@pytest.mark.parametrize("timeout", [0.0, -1.0])
def test_non_positive_timeout_is_rejected(timeout: float) -> None:
    with pytest.raises(ValueError, match="timeout"):
        _ = PreviewSettings(timeout=timeout)


def test_empty_base_url_is_rejected() -> None:
    with pytest.raises(ValueError, match="embed_base_url"):
        _ = PreviewSettings(embed_base_url="")


def test_load_flat_file(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        """
        timeout = 5
        user_agent = "preview-bot/2.0"
        log_level = "debug"
        log_timestamps = false
        """,
    )

    settings = load_settings(path)

    assert settings == PreviewSettings(
        timeout=5.0,
        user_agent="preview-bot/2.0",
        log_level="debug",
        log_timestamps=False,
    )
    assert isinstance(settings.timeout, float)


def test_load_nested_section(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        """
        [spotify_preview]
        embed_base_url = "http://localhost:9000/embed/track/"
        """,
    )

    settings = load_settings(str(path))

    assert settings.embed_base_url == "http://localhost:9000/embed/track/"
    assert settings.timeout is None


def test_unknown_keys_are_rejected(tmp_path: Path) -> None:
    path = _write(tmp_path, 'retries = 3\ncache = "memory"\n')

    with pytest.raises(ValueError, match="cache, retries"):
        _ = load_settings(path)


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        _ = load_settings(tmp_path / "absent.toml")


def test_malformed_toml_raises_decode_error(tmp_path: Path) -> None:
    path = _write(tmp_path, "timeout = = 3\n")

    with pytest.raises(tomllib.TOMLDecodeError):
        _ = load_settings(path)


def test_settings_from_empty_mapping_gives_defaults() -> None:
    assert settings_from_mapping({}) == DEFAULT_SETTINGS


@pytest.mark.parametrize(
    ("content", "match"),
    [
        ('log_level = "verbose"\n', "verbose"),
        ("log_level = 10\n", "log_level"),
        ('timeout = "10"\n', "timeout"),
        ("timeout = true\n", "timeout"),
        ('log_timestamps = "no"\n', "log_timestamps"),
        ("embed_base_url = 5\n", "embed_base_url"),
    ],
)
def test_invalid_values_in_file_raise_value_error(tmp_path: Path, content: str, match: str) -> None:
    path = _write(tmp_path, content)

    with pytest.raises(ValueError, match=match):
        _ = load_settings(path)


def test_level_names_are_accepted_case_insensitively() -> None:
    assert PreviewSettings(log_level="none").log_level == "none"
    assert PreviewSettings(log_level="Debug").log_level == "Debug"
