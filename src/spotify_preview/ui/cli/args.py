"""Command line argument parser."""

import argparse
from collections.abc import Sequence
from dataclasses import dataclass, replace
from pathlib import Path
from typing import final

from spotify_preview.config.settings import DEFAULT_SETTINGS, PreviewSettings, load_settings


@dataclass(frozen=True)
class PreviewArgs:
    """Parsed arguments for a single preview lookup."""

    track: str
    throws: bool
    settings: PreviewSettings


def _positive_float(value: str) -> float:
    try:
        parsed = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number: {value!r}") from None
    if parsed <= 0:
        raise argparse.ArgumentTypeError(f"must be positive: {value!r}")
    return parsed


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="spotify-preview",
            description="Print the 30-second audio preview URL of a Spotify track.",
        )
        _ = parser.add_argument(
            "track",
            metavar="TRACK",
            help="Track ID (22 characters) or open.spotify.com track URL",
        )
        _ = parser.add_argument(
            "--throws",
            action="store_true",
            help="Treat a missing preview as an error",
        )
        _ = parser.add_argument(
            "--config",
            type=Path,
            metavar="PATH",
            help="TOML settings file",
        )
        _ = parser.add_argument(
            "--timeout",
            type=_positive_float,
            metavar="SECONDS",
            help="Request timeout (default: no timeout)",
        )

        verbosity = parser.add_mutually_exclusive_group()
        _ = verbosity.add_argument(
            "--verbose",
            action="store_true",
            help="Show debug output",
        )
        _ = verbosity.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all log output",
        )
        _ = parser.add_argument(
            "--no-timestamps",
            action="store_true",
            help="Omit timestamps from log output",
        )
        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> PreviewArgs:
        """Parse arguments and merge them over file settings.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            PreviewArgs: Parsed arguments.
        """
        parser = ArgumentParser.create_parser()
        namespace = parser.parse_args(args_list)

        settings = load_settings(namespace.config) if namespace.config else DEFAULT_SETTINGS
        if namespace.timeout is not None:
            settings = replace(settings, timeout=namespace.timeout)
        if namespace.verbose:
            settings = replace(settings, log_level="DEBUG")
        elif namespace.quiet:
            settings = replace(settings, log_level="NONE")
        if namespace.no_timestamps:
            settings = replace(settings, log_timestamps=False)

        return PreviewArgs(track=namespace.track, throws=namespace.throws, settings=settings)
