"""Secret reconstruction over the integers.

Two helpers mirror each other:

``split_secret``
    Evaluate a random integer-coefficient polynomial whose constant term is
    the secret at ``x = 1..n``.

``interpolate_at_zero``
    Recover the constant term from ``k`` of those points with Lagrange
    interpolation at ``x = 0`` in exact rational arithmetic.
"""
from __future__ import annotations

import logging
import secrets
from dataclasses import dataclass
from fractions import Fraction
from typing import Literal, Sequence

from .errors import ArithmeticInconsistency, DuplicateAbscissa, InsufficientShares, MalformedInput

_logger = logging.getLogger(__name__)

DivisionMode = Literal["exact", "truncate"]
DIVISION_MODES: tuple[str, ...] = ("exact", "truncate")


@dataclass(frozen=True)
class Share:
    x: int
    y: int


def _truncating_div(numerator: int, denominator: int) -> int:
    # Rounds toward zero, unlike ``//`` which floors.
    quotient = abs(numerator) // abs(denominator)
    if (numerator < 0) != (denominator < 0):
        quotient = -quotient
    return quotient


def _basis_at_zero(index: int, shares: Sequence[Share]) -> tuple[int, int]:
    """Return the numerator and denominator of the ``index``-th basis at zero."""
    xi = shares[index].x
    num = 1
    den = 1
    for j, other in enumerate(shares):
        if j == index:
            continue
        if other.x == xi:
            raise DuplicateAbscissa(
                f"Shares #{index + 1} and #{j + 1} share the x-coordinate {xi}"
            )
        num *= -other.x
        den *= xi - other.x
    return num, den


def interpolate_at_zero(
    shares: Sequence[Share],
    k: int,
    *,
    division: DivisionMode = "exact",
) -> int:
    """Evaluate the degree ``k - 1`` polynomial through ``shares`` at zero.

    Only the first ``k`` shares are used. In ``"exact"`` mode the terms are
    summed as fractions and a non-integral result raises
    :class:`ArithmeticInconsistency`. ``"truncate"`` divides every term with
    truncation toward zero before summing.
    """
    if division not in DIVISION_MODES:
        raise ValueError(f"Unknown division mode: {division!r}")
    if k < 1:
        raise MalformedInput(f"Threshold k must be positive, got {k}")
    if len(shares) < k:
        raise InsufficientShares(f"Found only {len(shares)} shares, but k = {k}")

    selected = list(shares[:k])
    _logger.debug("Interpolating %d shares in %s mode", k, division)

    if division == "truncate":
        secret = 0
        for i, share in enumerate(selected):
            num, den = _basis_at_zero(i, selected)
            product = share.y * num
            if product % den:
                _logger.warning("Inexact Lagrange term for x=%s truncated", share.x)
            secret += _truncating_div(product, den)
        return secret

    total = Fraction(0)
    for i, share in enumerate(selected):
        num, den = _basis_at_zero(i, selected)
        total += Fraction(share.y * num, den)
    if total.denominator != 1:
        raise ArithmeticInconsistency(
            f"Shares do not lie on an integer polynomial: value at zero is {total}"
        )
    return total.numerator


def split_secret(secret: int, *, n: int, k: int, coeff_bits: int = 64) -> list[Share]:
    """Split ``secret`` into ``n`` shares with threshold ``k``."""
    if not (0 < k <= n):
        raise ValueError("Invalid n or k")
    if secret < 0:
        raise ValueError("Secret must be non-negative")
    if coeff_bits < 1:
        raise ValueError("coeff_bits must be positive")

    coeffs = [secret] + [secrets.randbits(coeff_bits) for _ in range(k - 1)]

    shares: list[Share] = []
    for x in range(1, n + 1):
        y = 0
        for c in reversed(coeffs):
            y = y * x + c
        shares.append(Share(x=x, y=y))
    return shares


__all__ = ["DIVISION_MODES", "DivisionMode", "Share", "interpolate_at_zero", "split_secret"]
