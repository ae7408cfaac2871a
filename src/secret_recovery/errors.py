"""Error taxonomy for secret recovery.

Every failure aborts the whole computation, so each kind carries the process
exit status the command line maps it to.
"""
from __future__ import annotations


class RecoveryError(Exception):
    """Base class for all recovery failures."""

    exit_code = 1


class InputUnreadable(RecoveryError):
    """Raised when the share document cannot be read."""

    exit_code = 1


class InsufficientShares(RecoveryError):
    """Raised when fewer than ``k`` usable shares are available."""

    exit_code = 2


class MalformedInput(RecoveryError):
    """Raised when a required key or field is absent or has the wrong type."""

    exit_code = 3


class InvalidBase(RecoveryError, ValueError):
    """Raised when a radix lies outside ``[2, 36]``."""

    exit_code = 4


class InvalidDigit(RecoveryError, ValueError):
    """Raised when a digit string contains a character invalid for its radix."""

    exit_code = 5


class DuplicateAbscissa(RecoveryError):
    """Raised when two selected shares have the same x-coordinate."""

    exit_code = 6


class ArithmeticInconsistency(RecoveryError):
    """Raised when the interpolated value at zero is not an integer."""

    exit_code = 7


__all__ = [
    "RecoveryError",
    "InputUnreadable",
    "InsufficientShares",
    "MalformedInput",
    "InvalidBase",
    "InvalidDigit",
    "DuplicateAbscissa",
    "ArithmeticInconsistency",
]
