"""Runtime configuration for secret recovery.

Values come from environment variables so deployments can change defaults
without code changes. Invalid overrides fall back to the defaults.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from .shamir import DIVISION_MODES


def _load_int(name: str, default: int) -> int:
    value = os.environ.get(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _load_choice(name: str, default: str, choices: tuple[str, ...]) -> str:
    value = os.environ.get(name)
    if value is None:
        return default
    value = value.strip().lower()
    return value if value in choices else default


def _load_log_level(name: str, default: str) -> str:
    value = os.environ.get(name)
    if value is None:
        return default
    value = value.strip().upper()
    return value if isinstance(logging.getLevelName(value), int) else default


@dataclass(frozen=True)
class RecoveryPolicy:
    """Holds runtime tunables for share loading and interpolation."""

    input_path: str = "input.json"
    division: str = "exact"
    log_level: str = "WARNING"
    coeff_bits: int = 64


def load_policy() -> RecoveryPolicy:
    """Load the recovery policy considering environment overrides."""

    coeff_bits = _load_int("SECRET_RECOVERY_COEFF_BITS", 64)
    return RecoveryPolicy(
        input_path=os.environ.get("SECRET_RECOVERY_INPUT") or "input.json",
        division=_load_choice("SECRET_RECOVERY_DIVISION", "exact", DIVISION_MODES),
        log_level=_load_log_level("SECRET_RECOVERY_LOG_LEVEL", "WARNING"),
        coeff_bits=coeff_bits if coeff_bits > 0 else 64,
    )


policy = load_policy()


__all__ = ["RecoveryPolicy", "policy", "load_policy"]
