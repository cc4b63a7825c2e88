from __future__ import annotations

import codecs
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import TextIO

from prime_report.domain.errors import StorageReadError, StorageWriteError
from prime_report.ports.report_store import ReportStore


@dataclass
class FileReportStore(ReportStore):
    # File-backed report artifact: newline-terminated lines, create-or-truncate, optionally atomic.
    path: Path
    encoding: str = "utf-8"
    atomic_replace: bool = False
    _handle: TextIO | None = field(default=None, init=False, repr=False)
    _temp_path: Path | None = field(default=None, init=False, repr=False)

    @property
    def location(self) -> str:
        return str(self.path)

    def write_lines(self, lines: Iterable[str]) -> None:
        try:
            self._open()
            assert self._handle is not None
            for line in lines:
                self._handle.write(line + "\n")
            self._close()
        except (OSError, UnicodeError) as exc:
            self._abort()
            raise StorageWriteError(
                f"Failed to write report to {self.path}: {exc}",
                location=self.location,
                cause=exc,
            ) from exc

    def read_text(self) -> str:
        # Read-back only ever happens after write_lines closed the handle.
        try:
            # newline="" keeps the on-disk terminators as written.
            with self.path.open("r", encoding=self.encoding, newline="") as handle:
                return handle.read()
        except (OSError, UnicodeError) as exc:
            raise StorageReadError(
                f"Failed to read report from {self.path}: {exc}",
                location=self.location,
                cause=exc,
            ) from exc

    def _open(self) -> None:
        # newline="\n" pins the terminator regardless of platform.
        if self.atomic_replace:
            self._temp_path = self.path.with_suffix(self.path.suffix + ".tmp")
            self._handle = self._temp_path.open("w", encoding=self.encoding, newline="\n")
        else:
            self._handle = self.path.open("w", encoding=self.encoding, newline="\n")

    def _close(self) -> None:
        if self._handle is None:
            return
        self._handle.flush()
        self._handle.close()
        self._handle = None

        if self.atomic_replace and self._temp_path is not None:
            # Atomic replace commits the temp file to the final path.
            self._temp_path.replace(self.path)
            self._temp_path = None

    def _abort(self) -> None:
        # Release the handle and drop an uncommitted temp file; the original error is re-raised by the caller.
        handle, self._handle = self._handle, None
        if handle is not None:
            try:
                handle.close()
            except OSError:
                pass
        temp_path, self._temp_path = self._temp_path, None
        if temp_path is not None:
            temp_path.unlink(missing_ok=True)


@dataclass
class InMemoryReportStore(ReportStore):
    # In-memory stand-in for the artifact; used by embedding callers and tests.
    name: str = "report"
    writes: int = 0
    _text: str | None = field(default=None, init=False, repr=False)

    @property
    def location(self) -> str:
        return f"memory://{self.name}"

    def write_lines(self, lines: Iterable[str]) -> None:
        # Truncate semantics: each write replaces the previous content.
        self._text = "".join(line + "\n" for line in lines)
        self.writes += 1

    def read_text(self) -> str:
        if self._text is None:
            raise StorageReadError(
                f"Nothing has been written to {self.location}",
                location=self.location,
            )
        return self._text


def file_report_store(settings: Mapping[str, object]) -> FileReportStore:
    # Builds the file store from an output settings mapping (config or CLI).
    path = settings.get("path")
    if not isinstance(path, (str, Path)) or not str(path):
        raise ValueError("output.path must be a non-empty string")

    encoding = settings.get("encoding", "utf-8")
    if not isinstance(encoding, str) or not encoding:
        raise ValueError("output.encoding must be a non-empty string")
    try:
        codecs.lookup(encoding)
    except LookupError as exc:
        raise ValueError(f"output.encoding is not a known codec: {encoding}") from exc

    return FileReportStore(
        path=Path(path),
        encoding=encoding,
        atomic_replace=bool(settings.get("atomic_replace", False)),
    )
