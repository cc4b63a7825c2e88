from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import TextIO

from prime_report.observability.logging import LogMessage, level_enabled
from prime_report.ports.log_sink import LogSink


@dataclass
class StdoutLogSink(LogSink):
    # Compact JSON per line on stdout.
    level: str = "info"

    def emit(self, message: LogMessage) -> None:
        if not level_enabled(message.level, self.level):
            return
        print(_dumps(message))

    def close(self) -> None:
        return None


@dataclass
class JsonlLogSink(LogSink):
    # File-backed structured log sink; appends so successive runs share one log.
    path: Path
    level: str = "info"
    _file: TextIO | None = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        # Opened eagerly so a bad path fails at wiring time, not mid-run.
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self._file = self.path.open("a", encoding="utf-8")

    def emit(self, message: LogMessage) -> None:
        if not level_enabled(message.level, self.level):
            return
        if self._file is None:
            raise ValueError(f"JsonlLogSink for {self.path} is closed")
        self._file.write(_dumps(message) + "\n")
        self._file.flush()

    def close(self) -> None:
        if self._file is None:
            return
        self._file.close()
        self._file = None


class NullLogSink(LogSink):
    def emit(self, message: LogMessage) -> None:
        return None

    def close(self) -> None:
        return None


def build_log_sink(sink: str, *, level: str = "info", path: str | None = None) -> StdoutLogSink | JsonlLogSink | NullLogSink:
    # Sink selection mirrors logging.sink in config.
    if sink == "stdout":
        return StdoutLogSink(level=level)
    if sink == "jsonl":
        if not path:
            raise ValueError("logging.path must be a non-empty string when sink is 'jsonl'")
        return JsonlLogSink(path=Path(path), level=level)
    if sink == "none":
        return NullLogSink()
    raise ValueError(f"Unknown log sink: {sink!r}")


def _dumps(message: LogMessage) -> str:
    return json.dumps(message.to_dict(), separators=(",", ":"), ensure_ascii=False)
