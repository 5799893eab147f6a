"""Command-line entry point for the 6502 declaration generator.

Thin wrapper around :mod:`py6502defs.cli` so the generator can be run from a
checkout with ``python run.py [mode]``.
"""

from __future__ import annotations

import sys

from py6502defs.cli import main


if __name__ == "__main__":
    sys.exit(main())
