"""Allow ``python -m spotify_preview``."""

import sys

from spotify_preview.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
