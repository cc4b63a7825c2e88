from __future__ import annotations

import math
from dataclasses import dataclass, field

from prime_report.ports.prime_checker import PrimeChecker


def is_prime(n: int) -> bool:
    # Trial division by odd candidates up to isqrt(n); exact for arbitrarily large ints.
    if n < 2:
        return False
    if n == 2:
        return True
    if n % 2 == 0:
        return False
    limit = math.isqrt(n)
    for i in range(3, limit + 1, 2):
        if n % i == 0:
            return False
    return True


@dataclass(frozen=True, slots=True)
class TrialDivisionPrimeChecker(PrimeChecker):
    # Default checker: no precomputation, so any range size costs the same up front.
    def is_prime(self, value: int) -> bool:
        return is_prime(value)


@dataclass(frozen=True, slots=True)
class SievePrimeChecker(PrimeChecker):
    # Sieve-based checker for dense scans of a known range.
    _max_n: int = 0
    _is_prime: tuple[bool, ...] = field(default_factory=lambda: (False,))

    @classmethod
    def from_range(cls, min_n: int, max_n: int) -> SievePrimeChecker:
        # The sieve always starts at 0; min_n only documents the intended scan window.
        _ = min_n
        if max_n < 0:
            max_n = 0
        return cls(_max_n=max_n, _is_prime=_sieve(max_n))

    @classmethod
    def from_max(cls, max_n: int) -> SievePrimeChecker:
        return cls.from_range(0, max_n)

    @property
    def max_n(self) -> int:
        return self._max_n

    def is_prime(self, value: int) -> bool:
        if value <= 1:
            return False
        if value <= self._max_n:
            return self._is_prime[value]
        # Outside the precomputed table we fall back to trial division.
        return is_prime(value)


def _sieve(max_n: int) -> tuple[bool, ...]:
    # Sieve of Eratosthenes for fast membership checks.
    if max_n < 1:
        return tuple([False] * (max_n + 1))

    table = [True] * (max_n + 1)
    table[0] = False
    table[1] = False

    for p in range(2, math.isqrt(max_n) + 1):
        if table[p]:
            for multiple in range(p * p, max_n + 1, p):
                table[multiple] = False

    return tuple(table)


def build_prime_checker(kind: str, *, max_n: int = 0) -> PrimeChecker:
    # Strategy selection used by config and CLI wiring.
    if kind == "trial":
        return TrialDivisionPrimeChecker()
    if kind == "sieve":
        return SievePrimeChecker.from_max(max_n)
    raise ValueError(f"Unknown prime checker kind: {kind!r}")
