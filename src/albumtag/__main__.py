"""Module entry point so ``python -m albumtag`` runs the CLI."""

import sys

from albumtag.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
