"""Module entry point for ``python -m purepath``."""

import sys

from purepath.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
