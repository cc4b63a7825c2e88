from __future__ import annotations

import pytest

from prime_report.services.prime_checker import (
    SievePrimeChecker,
    TrialDivisionPrimeChecker,
    build_prime_checker,
    is_prime,
)


def _reference_primes(limit: int) -> set[int]:
    # Independent reference sieve built with slice assignment.
    flags = bytearray([1]) * (limit + 1)
    flags[0:2] = b"\x00\x00"
    for p in range(2, int(limit**0.5) + 1):
        if flags[p]:
            flags[p * p :: p] = bytes(len(range(p * p, limit + 1, p)))
    return {n for n, flag in enumerate(flags) if flag}


def test_is_prime_fixed_values() -> None:
    # Basic primality rules (n < 2 not prime; 2 is the only even prime).
    assert is_prime(0) is False
    assert is_prime(1) is False
    assert is_prime(2) is True
    assert is_prime(3) is True
    assert is_prime(4) is False
    assert is_prime(17) is True
    assert is_prime(18) is False


def test_is_prime_agrees_with_reference_sieve_up_to_10000() -> None:
    primes = _reference_primes(10000)
    assert len(primes) == 1229
    for n in range(10001):
        assert is_prime(n) is (n in primes), n


def test_is_prime_squares_of_primes_are_composite() -> None:
    # i*i <= n must include equality, otherwise p*p slips through.
    for p in (3, 5, 7, 11, 97, 101):
        assert is_prime(p * p) is False


def test_is_prime_handles_large_values() -> None:
    # Python ints do not wrap; isqrt bounds the loop exactly.
    assert is_prime(2_147_483_647) is True
    assert is_prime(4_294_967_297) is False  # 641 * 6700417
    assert is_prime(1_000_000_007) is True


def test_is_prime_negative_is_false() -> None:
    assert is_prime(-7) is False


def test_trial_division_checker_delegates() -> None:
    checker = TrialDivisionPrimeChecker()
    assert [n for n in range(30) if checker.is_prime(n)] == [2, 3, 5, 7, 11, 13, 17, 19, 23, 29]


def test_sieve_checker_range_membership() -> None:
    checker = SievePrimeChecker.from_range(1, 30)
    for n in (2, 3, 5, 7, 11, 13, 17, 19, 23, 29):
        assert checker.is_prime(n) is True
    for n in (0, 1, 4, 6, 8, 9, 10, 12, 14, 15, 16, 18, 20, 21, 22, 24, 25, 26, 27, 28, 30):
        assert checker.is_prime(n) is False


def test_sieve_checker_outside_range_fallback() -> None:
    checker = SievePrimeChecker.from_max(30)
    assert checker.is_prime(97) is True
    assert checker.is_prime(99) is False


def test_sieve_checker_negative_range_is_clamped() -> None:
    checker = SievePrimeChecker.from_range(0, -5)
    assert checker.max_n == 0
    assert checker.is_prime(2) is True
    assert checker.is_prime(-3) is False


def test_sieve_checker_agrees_with_trial_division() -> None:
    checker = SievePrimeChecker.from_max(2000)
    for n in range(2500):
        assert checker.is_prime(n) is is_prime(n), n


def test_build_prime_checker_selects_strategy() -> None:
    assert isinstance(build_prime_checker("trial"), TrialDivisionPrimeChecker)
    sieve = build_prime_checker("sieve", max_n=50)
    assert isinstance(sieve, SievePrimeChecker)
    assert sieve.max_n == 50


def test_build_prime_checker_rejects_unknown_kind() -> None:
    with pytest.raises(ValueError):
        build_prime_checker("miller-rabin")
