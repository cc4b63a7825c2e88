from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime

LEVELS = ("debug", "info", "error")


@dataclass(frozen=True, slots=True)
class LogMessage:
    # Structured log payload emitted by the enumeration use case.
    level: str
    message: str
    timestamp: datetime = field(default_factory=lambda: datetime.now(tz=UTC))
    fields: dict[str, object] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.level or not self.message:
            raise ValueError("LogMessage requires non-empty level/message")
        if self.level not in LEVELS:
            raise ValueError(f"LogMessage level must be one of: {', '.join(LEVELS)}")

    def to_dict(self) -> dict[str, object]:
        return {
            "level": self.level,
            "message": self.message,
            "timestamp": self.timestamp.isoformat().replace("+00:00", "Z"),
            "fields": self.fields,
        }


def level_enabled(level: str, threshold: str) -> bool:
    # Levels are ordered debug < info < error.
    return LEVELS.index(level) >= LEVELS.index(threshold)
