from .bounds import BoundRange, InvalidBoundRangeError
from .errors import StorageError, StorageReadError, StorageWriteError
from .report import PrimeReport, Verdict

# Public domain exports keep imports explicit across layers.
__all__ = [
    "BoundRange",
    "InvalidBoundRangeError",
    "PrimeReport",
    "StorageError",
    "StorageReadError",
    "StorageWriteError",
    "Verdict",
]
