"""Command line interface for spotify-preview."""

from collections.abc import Sequence
from typing import Final, final

from rich.console import Console

from spotify_preview.errors import (
    InvalidSpotifyUrlError,
    InvalidTrackIdError,
    NoPreviewAvailableError,
    SpotifyApiError,
)
from spotify_preview.platform.logging import setup_logger
from spotify_preview.platform.spotify import SpotifyPreviewClient
from spotify_preview.ui.cli.args import ArgumentParser, PreviewArgs

EXIT_OK: Final[int] = 0
EXIT_NO_PREVIEW: Final[int] = 1
EXIT_INVALID_INPUT: Final[int] = 2
EXIT_API_ERROR: Final[int] = 3
EXIT_INTERRUPTED: Final[int] = 130


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: Sequence[str] | None = None) -> int:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            int: Process exit code.
        """
        err_console = Console(stderr=True, soft_wrap=True, highlight=False)
        try:
            args = ArgumentParser.process_args(args_list)
        except (OSError, ValueError) as e:
            err_console.print(f"Could not load settings: {e}")
            return EXIT_INVALID_INPUT

        logger = setup_logger(
            args.settings.log_level,
            timestamps=args.settings.log_timestamps,
            console=err_console,
        )

        try:
            return CommandProcessor._lookup(args, err_console)
        except (InvalidTrackIdError, InvalidSpotifyUrlError) as e:
            logger.error("%s", e)
            return EXIT_INVALID_INPUT
        except NoPreviewAvailableError as e:
            logger.error("%s", e)
            return EXIT_NO_PREVIEW
        except SpotifyApiError as e:
            logger.error("%s", e)
            return EXIT_API_ERROR
        except KeyboardInterrupt:
            logger.info("Operation cancelled by user")
            return EXIT_INTERRUPTED

    @staticmethod
    def _lookup(args: PreviewArgs, err_console: Console) -> int:
        client = SpotifyPreviewClient(settings=args.settings)
        preview_url = client.get_preview(args.track, throws=args.throws)
        if preview_url is None:
            err_console.print("No preview available for this track.")
            return EXIT_NO_PREVIEW

        Console(soft_wrap=True, highlight=False).print(preview_url)
        return EXIT_OK


def main(args_list: Sequence[str] | None = None) -> int:
    """Main entry point.

    Returns:
        int: Process exit code.
    """
    return CommandProcessor.process_command(args_list)
