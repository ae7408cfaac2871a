"""Recover the constant term of an integer polynomial from radix-encoded shares."""

from __future__ import annotations

from .errors import (
    ArithmeticInconsistency,
    DuplicateAbscissa,
    InputUnreadable,
    InsufficientShares,
    InvalidBase,
    InvalidDigit,
    MalformedInput,
    RecoveryError,
)
from .pipeline import RecoveryOutcome, recover_file
from .radix import decode, encode
from .shamir import Share, interpolate_at_zero, split_secret

__all__ = [
    "ArithmeticInconsistency",
    "DuplicateAbscissa",
    "InputUnreadable",
    "InsufficientShares",
    "InvalidBase",
    "InvalidDigit",
    "MalformedInput",
    "RecoveryError",
    "RecoveryOutcome",
    "Share",
    "decode",
    "encode",
    "interpolate_at_zero",
    "recover_file",
    "split_secret",
]
