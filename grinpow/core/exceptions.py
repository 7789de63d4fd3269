"""
Exception classes for grinpow.

Every error carries the offending value so callers can log it or decide
whether the failure is fatal (bad configuration) or a single skipped attempt.
"""
from typing import Any


class GrinPowError(Exception):
    """Base exception class for all grinpow errors."""
    pass


class InvalidParameterError(GrinPowError, ValueError):
    """Raised when the edge bits value selects no known cuckoo variant."""

    def __init__(self, edge_bits: Any, message: str = "unsupported edge bits"):
        self.edge_bits = edge_bits
        super().__init__(f"{message}: {edge_bits!r}")


class InvalidSolutionError(GrinPowError, ValueError):
    """Raised when a solution is not a list of 42 unsigned 32-bit edge indices."""

    def __init__(self, message: str):
        super().__init__(f"Invalid solution: {message}")


class DifficultyError(GrinPowError, ArithmeticError):
    """Raised when a difficulty cannot be computed (zero digest, bad scale)."""

    def __init__(self, message: str, value: Any = None):
        self.value = value
        super().__init__(message)
