from __future__ import annotations

from pathlib import Path

import prime_report
from prime_report.adapters.log_sinks import JsonlLogSink
from prime_report.adapters.report_store import FileReportStore
from prime_report.services.prime_checker import SievePrimeChecker


def test_public_api_round_trip(tmp_path: Path) -> None:
    # Top-level exports cover the whole write-then-read flow.
    path = tmp_path / "primes.txt"
    report = prime_report.enumerate_and_report(1, 100, path)
    assert report.count == 25
    assert (report.first, report.last) == (2, 97)
    assert prime_report.parse_report(path.read_text(encoding="utf-8")) == report.primes
    assert all(prime_report.is_prime(p) for p in report.primes)


def test_sieve_atomic_run_with_debug_log(tmp_path: Path) -> None:
    path = tmp_path / "primes.txt"
    log_path = tmp_path / "run.jsonl"
    log_sink = JsonlLogSink(path=log_path, level="debug")
    try:
        report = prime_report.enumerate_and_report(
            90,
            110,
            FileReportStore(path=path, atomic_replace=True),
            checker=SievePrimeChecker.from_max(110),
            log_sink=log_sink,
        )
    finally:
        log_sink.close()

    assert report.primes == (97, 101, 103, 107, 109)
    assert path.read_text(encoding="utf-8") == "97\n101\n103\n107\n109\n"
    assert not (tmp_path / "primes.txt.tmp").exists()
    # range.scanned + one prime.found per prime + report.written + report.read_back
    assert len(log_path.read_text(encoding="utf-8").splitlines()) == 3 + len(report.primes)
