from .domain import BoundRange, InvalidBoundRangeError, PrimeReport, StorageError, StorageReadError, StorageWriteError
from .services import is_prime
from .usecases import enumerate_and_report, enumerate_primes, format_report, parse_report

__version__ = "0.1.0"

__all__ = [
    "BoundRange",
    "InvalidBoundRangeError",
    "PrimeReport",
    "StorageError",
    "StorageReadError",
    "StorageWriteError",
    "enumerate_and_report",
    "enumerate_primes",
    "format_report",
    "is_prime",
    "parse_report",
]
