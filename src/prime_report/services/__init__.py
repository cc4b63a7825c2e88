from .prime_checker import SievePrimeChecker, TrialDivisionPrimeChecker, build_prime_checker, is_prime

__all__ = [
    "SievePrimeChecker",
    "TrialDivisionPrimeChecker",
    "build_prime_checker",
    "is_prime",
]
