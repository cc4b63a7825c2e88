from .reporting import classify_range, enumerate_and_report, enumerate_primes, format_report, parse_report

__all__ = [
    "classify_range",
    "enumerate_and_report",
    "enumerate_primes",
    "format_report",
    "parse_report",
]
