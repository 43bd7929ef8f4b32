"""Main entry point for map-based Levy walk trace generation."""

from __future__ import annotations

import sys

from mapwalk.cli import main


if __name__ == "__main__":
    sys.exit(main())
