"""Allow ``python -m ghmusic``."""

import sys

from ghmusic.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
