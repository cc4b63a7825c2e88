from __future__ import annotations

from typing import Protocol, runtime_checkable

from prime_report.observability.logging import LogMessage


# LogSink port receives structured log messages; formatting and level filtering are the sink's job.
@runtime_checkable
class LogSink(Protocol):
    def emit(self, message: LogMessage) -> None:
        """Record a single structured log message."""
        # Port contract has no implementation; calling it directly is a wiring error.
        raise NotImplementedError("LogSink is a port; use a concrete adapter.")
