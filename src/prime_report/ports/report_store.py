from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol, runtime_checkable


# ReportStore port owns the report artifact for the duration of a write-then-read run.
@runtime_checkable
class ReportStore(Protocol):
    location: str

    def write_lines(self, lines: Iterable[str]) -> None:
        """Create or truncate the artifact and write each line followed by a newline.

        The artifact must be fully flushed and closed when this returns.
        """
        # Port contract has no implementation; calling it directly is a wiring error.
        raise NotImplementedError("ReportStore is a port; use a concrete adapter.")

    def read_text(self) -> str:
        """Reopen the artifact and return its full text."""
        # Port contract has no implementation; calling it directly is a wiring error.
        raise NotImplementedError("ReportStore is a port; use a concrete adapter.")
