from __future__ import annotations

import argparse
import json
import math
import sys
from typing import Any

from . import config as _config
from .api import evaluate, feed
from .brain import CalculatorBrain
from .config import REPL_COMMANDS, VERSION
from .logging_config import get_logger, setup_logging
from .parser import format_number, tokenize
from .types import EvalResult, ValidationError

logger = get_logger("cli")

INCOMPLETE = "(incomplete)"


def _format_result(value: float | None) -> str:
    return INCOMPLETE if value is None else format_number(value)


def _health_check() -> int:
    """Run health check to verify dependencies and basic operations.

    Returns:
        Exit code (0 for success, non-zero for failures)
    """
    checks_passed = 0
    checks_failed = 0

    print("Running RPN Brain health check...")
    print("-" * 50)

    try:
        import sympy as sp

        print(f"[OK] SymPy {sp.__version__} imported successfully")
        checks_passed += 1
    except ImportError as e:
        print(f"[FAIL] SymPy import failed: {e}")
        checks_failed += 1

    try:
        import numpy as np

        print(f"[OK] NumPy {np.__version__} imported successfully")
        checks_passed += 1
    except ImportError as e:
        print(f"[FAIL] NumPy import failed: {e}")
        checks_failed += 1

    cases = [
        ("4 2 −", 2.0),
        ("6 3 ×", 18.0),
        ("8 2 ÷", 4.0),
        ("9 √", 3.0),
        ("1 2 +", 3.0),
    ]
    for line, expected in cases:
        try:
            res = evaluate(line)
            if res.ok and res.result == expected:
                print(f"[OK] {line} = {format_number(expected)}")
                checks_passed += 1
            else:
                print(f"[FAIL] {line}: expected {expected}, got {res!r}")
                checks_failed += 1
        except Exception as e:
            print(f"[FAIL] {line}: {e}")
            checks_failed += 1

    print("-" * 50)
    print(f"Health check: {checks_passed} passed, {checks_failed} failed")
    return 0 if checks_failed == 0 else 1


def _json_safe(data: dict) -> dict:
    # Strict JSON has no inf/nan literals; spell them as strings instead
    result = data.get("result")
    if isinstance(result, float) and not math.isfinite(result):
        data = dict(data, result=str(result))
    return data


def print_result_pretty(res: EvalResult, output_format: str = "human") -> None:
    if output_format == "json":
        print(json.dumps(_json_safe(res.to_dict()), ensure_ascii=False, allow_nan=False))
        return
    if not res.ok:
        print(f"Error: {res.error}")
        return
    print(_format_result(res.result))
    if _config.TRACE_ENABLED:
        print(f"  stack: {' '.join(res.stack or [])}")
        if res.remaining:
            print(f"  left over: {' '.join(res.remaining)}")


def print_help_text() -> None:
    help_text = """RPN Brain - postfix calculator

Enter operands and operators separated by spaces; every token is pushed onto
the stack and the whole stack is re-evaluated.

Operators:
  ×  (or * x)    multiply
  ÷  (or /)      divide        8 2 ÷  -> 4
  +              add
  −  (or -)      subtract      4 2 −  -> 2
  √  (or sqrt)   square root   9 √    -> 3

Operands: 2, -0.5, 1e3, 1/3, pi, e

Commands:
  stack   show the stack and the last evaluation trace
  ops     list the known operators
  help    show this text
  quit    leave (also: exit, Ctrl+D)
"""
    print(help_text)


def _handle_command(command: str, brain: CalculatorBrain) -> bool:
    """Run a REPL command. Returns False when the loop should stop."""
    if command in ("quit", "exit"):
        print("Goodbye.")
        return False
    if command == "help":
        print_help_text()
    elif command == "stack":
        print(brain.trace())
    elif command == "ops":
        print(" ".join(brain.registry.symbols))
    return True


def repl_loop(output_format: str = "human") -> None:
    """Interactive REPL feeding every line into one long-lived brain."""
    try:
        import readline  # noqa: F401
    except (ImportError, ModuleNotFoundError):
        # readline not available on Windows - that's fine
        pass

    brain = CalculatorBrain()
    print("RPN Brain - type 'help' for commands, 'quit' to exit.")

    while True:
        try:
            raw = input(">>> ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\nGoodbye.")
            break
        if not raw:
            continue
        if raw.lower() in REPL_COMMANDS:
            if not _handle_command(raw.lower(), brain):
                break
            continue

        result: float | None = brain.evaluate()
        try:
            for token in tokenize(raw):
                result = feed(brain, token)
        except ValidationError as e:
            # Tokens before the bad one stay on the stack
            res = EvalResult(ok=False, error=str(e))
            print_result_pretty(res, output_format)
            continue
        except Exception as e:
            logger.error(f"Unexpected error in REPL: {e}", exc_info=True)
            print("Error: unexpected failure, see log for details")
            continue

        trace = brain.last_trace
        res = EvalResult(
            ok=True,
            result=result,
            stack=trace.stack if trace else None,
            remaining=trace.remaining if trace else None,
        )
        print_result_pretty(res, output_format)


def _apply_overrides(args: Any) -> None:
    if args.precision is not None:
        _config.OUTPUT_PRECISION = int(args.precision)
    if args.trace:
        _config.TRACE_ENABLED = True


def main_entry(argv: list[str] | None = None) -> int:
    """
    Main entry point for RPN Brain CLI.

    Args:
        argv: Optional command-line arguments (defaults to sys.argv)

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = argparse.ArgumentParser(prog="rpnbrain")
    parser.add_argument(
        "-e",
        "--eval",
        type=str,
        help="Evaluate one line of postfix tokens and exit (non-interactive)",
        dest="eval_expr",
    )
    parser.add_argument(
        "--format",
        type=str,
        choices=["json", "human"],
        default="human",
        help="Output format: json (machine-readable) or human (human-readable)",
    )
    parser.add_argument(
        "-p", "--precision", type=int, help="Set output precision (significant digits)"
    )
    parser.add_argument(
        "--trace",
        action="store_true",
        help="Show the stack and unconsumed entries after each evaluation",
    )
    parser.add_argument(
        "-v", "--version", action="store_true", help="Show program version"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=_config.LOG_LEVEL.upper(),
        help="Set logging level",
    )
    parser.add_argument("--log-file", type=str, help="Write logs to file")
    parser.add_argument(
        "--health-check",
        action="store_true",
        help="Run health check and verify dependencies",
    )
    args = parser.parse_args(argv)
    if args.precision is not None and args.precision <= 0:
        parser.error("--precision must be a positive integer")

    setup_logging(level=args.log_level, log_file=args.log_file)
    _apply_overrides(args)

    if args.version:
        print(VERSION)
        return 0
    if args.health_check:
        return _health_check()
    if args.eval_expr is not None:
        line = args.eval_expr.strip()
        if line.startswith(">>>"):
            line = line[3:].strip()
        if not line:
            print("Error: Empty input. Please enter operands and operators.")
            return 1
        res = evaluate(line)
        print_result_pretty(res, args.format)
        return 0 if res.ok else 1

    repl_loop(args.format)
    return 0


if __name__ == "__main__":
    sys.exit(main_entry())
