from __future__ import annotations

from pathlib import Path

import pytest

from prime_report.adapters.log_sinks import JsonlLogSink, NullLogSink, StdoutLogSink
from prime_report.adapters.report_store import FileReportStore, InMemoryReportStore
from prime_report.observability.logging import LogMessage
from prime_report.ports.log_sink import LogSink
from prime_report.ports.report_store import ReportStore


def test_report_store_port_conformance(tmp_path: Path) -> None:
    assert isinstance(FileReportStore(path=tmp_path / "out.txt"), ReportStore)
    assert isinstance(InMemoryReportStore(), ReportStore)


def test_report_store_port_default_raises() -> None:
    class _PortOnly(ReportStore):
        location = "nowhere"

    with pytest.raises(NotImplementedError):
        _PortOnly().write_lines(["2"])
    with pytest.raises(NotImplementedError):
        _PortOnly().read_text()


def test_log_sink_port_conformance(tmp_path: Path) -> None:
    assert isinstance(StdoutLogSink(), LogSink)
    jsonl = JsonlLogSink(path=tmp_path / "log.jsonl")
    assert isinstance(jsonl, LogSink)
    jsonl.close()
    assert isinstance(NullLogSink(), LogSink)


def test_log_sink_port_default_raises() -> None:
    class _PortOnly(LogSink):
        pass

    with pytest.raises(NotImplementedError):
        _PortOnly().emit(LogMessage(level="info", message="x"))
