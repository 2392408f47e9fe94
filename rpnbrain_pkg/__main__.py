"""Main entry point for running rpnbrain_pkg as a module.

This allows running RPN Brain with:
    python -m rpnbrain_pkg
    python -m rpnbrain_pkg --health-check
    python -m rpnbrain_pkg -e "4 2 -"

This is equivalent to running:
    python -m rpnbrain_pkg.cli
    python rpnbrain.py
"""

from __future__ import annotations

import sys

from .cli import main_entry

if __name__ == "__main__":
    sys.exit(main_entry())
