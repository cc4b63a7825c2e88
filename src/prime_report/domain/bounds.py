from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


class InvalidBoundRangeError(ValueError):
    # Raised for out-of-order or negative bounds; a reversed range is never treated as empty.
    pass


@dataclass(frozen=True, slots=True)
class BoundRange:
    # Inclusive [start, end] interval of non-negative integers scanned for primes.
    start: int
    end: int

    def __post_init__(self) -> None:
        if isinstance(self.start, bool) or isinstance(self.end, bool):
            raise InvalidBoundRangeError("Bounds must be integers, not booleans")
        if not isinstance(self.start, int) or not isinstance(self.end, int):
            raise InvalidBoundRangeError("Bounds must be integers")
        if self.start < 0 or self.end < 0:
            raise InvalidBoundRangeError(f"Bounds must be non-negative: [{self.start}, {self.end}]")
        if self.start > self.end:
            raise InvalidBoundRangeError(f"start must not exceed end: [{self.start}, {self.end}]")

    def values(self) -> Iterator[int]:
        # Ascending scan order; enumeration relies on it for sorted output.
        return iter(range(self.start, self.end + 1))

    def __len__(self) -> int:
        return self.end - self.start + 1

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and self.start <= value <= self.end
