from __future__ import annotations

from dataclasses import dataclass

from .bounds import BoundRange


@dataclass(frozen=True, slots=True)
class Verdict:
    # Per-number primality result used by the verbose console listing.
    value: int
    is_prime: bool


@dataclass(frozen=True, slots=True)
class PrimeReport:
    # Result of one enumerate-and-report run: computed primes plus the text read back from the artifact.
    bounds: BoundRange
    primes: tuple[int, ...]
    content: str
    location: str

    @property
    def count(self) -> int:
        return len(self.primes)

    @property
    def first(self) -> int | None:
        return self.primes[0] if self.primes else None

    @property
    def last(self) -> int | None:
        return self.primes[-1] if self.primes else None
