"""RPN Brain package: postfix evaluation engine, operator registry, token parser, and CLI."""

__all__ = [
    "config",
    "types",
    "operators",
    "brain",
    "parser",
    "api",
    "cli",
    "logging_config",
]

# Public API exports

__api_exports__ = [
    "CalculatorBrain",
    "OperatorRegistry",
    "evaluate",
    "validate_token",
    "known_operators",
]
