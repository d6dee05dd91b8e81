"""CLI shim for `python -m gsm7_codec`."""

import sys

from gsm7_codec.cli import main

if __name__ == "__main__":
    sys.exit(main())
