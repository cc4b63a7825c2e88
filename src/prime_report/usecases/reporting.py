from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from prime_report.adapters.report_store import FileReportStore
from prime_report.domain.bounds import BoundRange
from prime_report.domain.errors import StorageReadError, StorageWriteError
from prime_report.domain.report import PrimeReport, Verdict
from prime_report.observability.logging import LogMessage
from prime_report.ports.log_sink import LogSink
from prime_report.ports.prime_checker import PrimeChecker
from prime_report.ports.report_store import ReportStore
from prime_report.services.prime_checker import TrialDivisionPrimeChecker


def enumerate_primes(bounds: BoundRange, checker: PrimeChecker | None = None) -> tuple[int, ...]:
    # Ascending scan keeps the result sorted and duplicate-free.
    checker = checker or TrialDivisionPrimeChecker()
    return tuple(n for n in bounds.values() if checker.is_prime(n))


def classify_range(bounds: BoundRange, checker: PrimeChecker | None = None) -> tuple[Verdict, ...]:
    checker = checker or TrialDivisionPrimeChecker()
    return tuple(Verdict(value=n, is_prime=checker.is_prime(n)) for n in bounds.values())


def format_report(primes: Iterable[int]) -> str:
    return "".join(f"{p}\n" for p in primes)


def parse_report(text: str) -> tuple[int, ...]:
    """Parse artifact text back into the prime sequence.

    Every line must be a plain decimal integer; a blank or malformed line raises ValueError.
    """
    values: list[int] = []
    for line_no, line in enumerate(text.splitlines(), start=1):
        if not (line.isascii() and line.isdigit()):
            raise ValueError(f"Line {line_no} is not a decimal integer: {line!r}")
        values.append(int(line))
    return tuple(values)


def enumerate_and_report(
    start: int,
    end: int,
    sink: ReportStore | str | Path,
    *,
    checker: PrimeChecker | None = None,
    log_sink: LogSink | None = None,
) -> PrimeReport:
    """Enumerate primes in [start, end], persist them, and read the artifact back.

    The write is fully closed before the read-back starts. Storage failures surface as
    StorageWriteError / StorageReadError with the underlying cause attached; nothing is retried.
    """
    bounds = BoundRange(start=start, end=end)
    store = _as_store(sink)

    primes = enumerate_primes(bounds, checker)
    _log(log_sink, "info", "range.scanned", start=bounds.start, end=bounds.end, count=len(primes))
    for p in primes:
        _log(log_sink, "debug", "prime.found", value=p)

    try:
        store.write_lines(str(p) for p in primes)
    except StorageWriteError as exc:
        _log(log_sink, "error", "report.write_failed", location=store.location, error=str(exc.cause or exc))
        raise
    _log(log_sink, "info", "report.written", location=store.location, count=len(primes))

    try:
        content = store.read_text()
    except StorageReadError as exc:
        _log(log_sink, "error", "report.read_failed", location=store.location, error=str(exc.cause or exc))
        raise
    _log(log_sink, "info", "report.read_back", location=store.location, size=len(content))

    return PrimeReport(bounds=bounds, primes=primes, content=content, location=store.location)


def _as_store(sink: ReportStore | str | Path) -> ReportStore:
    # Bare paths get the default file store.
    if isinstance(sink, (str, Path)):
        return FileReportStore(path=Path(sink))
    return sink


def _log(log_sink: LogSink | None, level: str, message: str, **fields: object) -> None:
    if log_sink is None:
        return
    log_sink.emit(LogMessage(level=level, message=message, fields=dict(fields)))
