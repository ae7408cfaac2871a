import logging
import random

import pytest
from hypothesis import given
from hypothesis import strategies as st

from secret_recovery.errors import (
    ArithmeticInconsistency,
    DuplicateAbscissa,
    InsufficientShares,
    MalformedInput,
)
from secret_recovery.shamir import Share, interpolate_at_zero, split_secret


def _shares(*points):
    return [Share(x=x, y=y) for x, y in points]


def test_line_through_two_points():
    assert interpolate_at_zero(_shares((1, 3), (2, 5)), 2) == 1


def test_quadratic_through_three_points():
    # y = x^2 + x + 1
    assert interpolate_at_zero(_shares((1, 3), (2, 7), (3, 13)), 3) == 1
    # y = x^2 + 2
    assert interpolate_at_zero(_shares((1, 3), (2, 6), (3, 11)), 3) == 2


def test_canonical_sample_points():
    assert interpolate_at_zero(_shares((1, 4), (2, 7), (3, 12)), 3) == 3
    assert interpolate_at_zero(_shares((1, 4), (2, 7), (3, 33)), 3) == 24


def test_single_share_is_the_secret():
    assert interpolate_at_zero(_shares((5, 42)), 1) == 42


def test_only_first_k_shares_are_used():
    # The third point is off the line y = 2x + 1 and must be ignored.
    assert interpolate_at_zero(_shares((1, 3), (2, 5), (3, 1000)), 2) == 1


def test_non_consecutive_abscissae():
    # y = x: the x=1 term alone is 8/3, only the sum is integral.
    assert interpolate_at_zero(_shares((1, 1), (2, 2), (4, 4)), 3) == 0
    # y = 3x^2 - 5x + 11
    points = [(x, 3 * x * x - 5 * x + 11) for x in (2, 5, 9)]
    assert interpolate_at_zero(_shares(*points), 3) == 11


def test_duplicate_abscissa_fails():
    with pytest.raises(DuplicateAbscissa) as exc:
        interpolate_at_zero(_shares((1, 3), (2, 5), (1, 3)), 3)
    assert "#1 and #3" in str(exc.value)


def test_duplicate_between_later_shares_fails():
    with pytest.raises(DuplicateAbscissa) as exc:
        interpolate_at_zero(_shares((1, 3), (2, 5), (2, 7)), 3)
    assert "#2 and #3" in str(exc.value)


def test_duplicate_beyond_threshold_is_ignored():
    assert interpolate_at_zero(_shares((1, 3), (2, 5), (2, 5)), 2) == 1


def test_insufficient_shares():
    with pytest.raises(InsufficientShares) as exc:
        interpolate_at_zero(_shares((1, 3)), 2)
    assert "only 1" in str(exc.value)


def test_non_positive_threshold():
    with pytest.raises(MalformedInput):
        interpolate_at_zero(_shares((1, 3)), 0)


def test_unknown_division_mode():
    with pytest.raises(ValueError):
        interpolate_at_zero(_shares((1, 3), (2, 5)), 2, division="round")


def test_exact_mode_rejects_non_integral_result():
    # The line through (1, 1) and (3, 2) crosses x=0 at 1/2.
    with pytest.raises(ArithmeticInconsistency):
        interpolate_at_zero(_shares((1, 1), (3, 2)), 2)


def test_truncate_mode_rounds_each_term_toward_zero(caplog):
    # Terms: 1 * -3 / -2 = 1.5 -> 1 and 2 * -1 / 2 = -1 -> -1
    with caplog.at_level(logging.WARNING, logger="secret_recovery.shamir"):
        secret = interpolate_at_zero(_shares((1, 1), (3, 2)), 2, division="truncate")
    assert secret == 0
    assert "truncated" in caplog.text


def test_truncate_mode_matches_exact_for_consecutive_points():
    shares = split_secret(987654321, n=5, k=5)
    assert interpolate_at_zero(shares, 5, division="truncate") == 987654321


def test_split_secret():
    secret = 123456789
    parts = split_secret(secret, n=5, k=3)
    assert len(parts) == 5
    assert [share.x for share in parts] == [1, 2, 3, 4, 5]
    assert all(share.y >= secret for share in parts)


def test_reconstruct_secret_success():
    secret = 424242
    shares = split_secret(secret, n=6, k=4)
    assert interpolate_at_zero(shares[:4], 4) == secret
    assert interpolate_at_zero(shares[2:], 4) == secret


def test_reconstruct_from_any_subset():
    secret = 2**200 + 7
    n, k = 7, 4
    shares = split_secret(secret, n=n, k=k, coeff_bits=256)
    for _ in range(10):
        subset = random.sample(shares, k)
        assert interpolate_at_zero(subset, k) == secret


def test_split_edge_cases():
    one_share = split_secret(77, n=1, k=1)
    assert one_share == [Share(x=1, y=77)]

    with pytest.raises(ValueError):
        split_secret(1, n=2, k=3)
    with pytest.raises(ValueError):
        split_secret(-1, n=3, k=2)
    with pytest.raises(ValueError):
        split_secret(1, n=3, k=2, coeff_bits=0)


@given(
    coeffs=st.lists(st.integers(min_value=0, max_value=2**80), min_size=1, max_size=6),
    data=st.data(),
)
def test_reordering_shares_keeps_secret(coeffs, data):
    k = len(coeffs)
    xs = data.draw(st.lists(st.integers(min_value=1, max_value=50), min_size=k, max_size=k, unique=True))
    shares = [Share(x=x, y=sum(c * x**i for i, c in enumerate(coeffs))) for x in xs]
    shuffled = data.draw(st.permutations(shares))
    assert interpolate_at_zero(shares, k) == coeffs[0]
    assert interpolate_at_zero(shuffled, k) == coeffs[0]
