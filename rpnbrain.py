#!/usr/bin/env python3
"""
RPN Brain - Postfix Calculator

Main entry point for the RPN Brain calculator application.
This file serves as a thin wrapper that delegates all functionality
to the rpnbrain_pkg package.

Usage:
    python rpnbrain.py                      # Interactive REPL
    python rpnbrain.py -e "4 2 -"           # Evaluate one line of tokens
    python rpnbrain.py --help               # Show help
"""

from __future__ import annotations

import sys


def main() -> int:
    """
    Main entry point for RPN Brain.

    Delegates all functionality to the rpnbrain_pkg.cli module,
    which handles argument parsing, evaluation, and output formatting.

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    try:
        from rpnbrain_pkg.cli import main_entry

        return main_entry(sys.argv[1:])
    except KeyboardInterrupt:
        print("\nInterrupted by user.")
        return 1
    except ImportError as e:
        print(f"Error: Failed to import rpnbrain_pkg: {e}")
        print("Please ensure all dependencies are installed: pip install -e .")
        return 1


if __name__ == "__main__":
    sys.exit(main())
