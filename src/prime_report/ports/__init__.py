from .log_sink import LogSink
from .prime_checker import PrimeChecker
from .report_store import ReportStore

# Public port exports keep wiring explicit at composition time.
__all__ = ["LogSink", "PrimeChecker", "ReportStore"]
