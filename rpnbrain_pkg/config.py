"""Centralized configuration for RPN Brain.

This module defines:
- Output formatting (precision)
- Input validation limits for operand tokens
- The fixed operator symbols and their ASCII spellings
- Constants allowed when parsing operand tokens with SymPy

Configuration can be overridden via:
- CLI flags (see cli.py)
- Environment variables (prefixed with RPNBRAIN_)
"""

import os
import re

import sympy as sp

try:
    import importlib.metadata

    VERSION = importlib.metadata.version("rpnbrain")
except Exception:
    # Fallback if package not installed
    VERSION = "1.0.0"

# Output formatting
OUTPUT_PRECISION = int(os.getenv("RPNBRAIN_OUTPUT_PRECISION", "12"))  # significant digits
TRACE_ENABLED = os.getenv("RPNBRAIN_TRACE_ENABLED", "false").lower() == "true"
LOG_LEVEL = os.getenv("RPNBRAIN_LOG_LEVEL", "WARNING")

# Input validation limits
MAX_TOKEN_LENGTH = int(os.getenv("RPNBRAIN_MAX_TOKEN_LENGTH", "256"))  # characters
MAX_EXPRESSION_DEPTH = int(
    os.getenv("RPNBRAIN_MAX_EXPRESSION_DEPTH", "20")
)  # tree depth
MAX_EXPRESSION_NODES = int(
    os.getenv("RPNBRAIN_MAX_EXPRESSION_NODES", "100")
)  # total nodes
MAX_EXPONENT = int(os.getenv("RPNBRAIN_MAX_EXPONENT", "1000"))  # exponent magnitude

# Operator symbols known to the registry
SYMBOL_MULTIPLY = "×"
SYMBOL_DIVIDE = "÷"
SYMBOL_ADD = "+"
SYMBOL_SUBTRACT = "−"  # U+2212 MINUS SIGN, not the ASCII hyphen
SYMBOL_SQRT = "√"

OPERATOR_SYMBOLS = (
    SYMBOL_MULTIPLY,
    SYMBOL_DIVIDE,
    SYMBOL_ADD,
    SYMBOL_SUBTRACT,
    SYMBOL_SQRT,
)

# Keyboard spellings accepted by the token layer
SYMBOL_ALIASES = {
    "*": SYMBOL_MULTIPLY,
    "x": SYMBOL_MULTIPLY,
    "/": SYMBOL_DIVIDE,
    "-": SYMBOL_SUBTRACT,
    "sqrt": SYMBOL_SQRT,
}

ALLOWED_SYMPY_NAMES = {
    "pi": sp.pi,
    "E": sp.E,
    "e": sp.E,
}

# Basic denylist checked before handing a token to SymPy
FORBIDDEN_TOKENS = (
    "__",
    "import",
    "lambda",
    "eval",
    "exec",
    "open",
    "os.",
    "sys.",
    "subprocess",
    "builtins",
    "getattr",
    "setattr",
    "delattr",
    "compile",
    "globals",
    "locals",
    "memoryview",
    "bytes",
    "bytearray",
    ";",
    "\n",
)

REPL_COMMANDS = {
    "help",
    "stack",
    "ops",
    "quit",
    "exit",
}

# Cache configuration
CACHE_SIZE_PARSE = int(os.getenv("RPNBRAIN_CACHE_SIZE_PARSE", "1024"))

# Plain decimal literals skip SymPy entirely
NUMBER_REGEX = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?$")
