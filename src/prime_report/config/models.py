from __future__ import annotations

from typing import Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator

# Config models map YAML sections to typed structures.


class RangeConfig(BaseModel):
    # Inclusive bound range; reversed bounds are a configuration error, not an empty scan.
    model_config = ConfigDict(extra="forbid")
    start: int = Field(ge=0)
    end: int = Field(ge=0)

    @model_validator(mode="after")
    def _ordered(self) -> RangeConfig:
        if self.start > self.end:
            raise ValueError(f"range.start ({self.start}) must not exceed range.end ({self.end})")
        return self


class CheckerConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["trial", "sieve"] = "trial"


class OutputConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    # Accept both output.file and output.file_path; normalized to file_path.
    file_path: str = Field(validation_alias=AliasChoices("file_path", "file"), min_length=1)
    encoding: str = "utf-8"
    atomic_replace: bool = False

    def settings(self) -> dict[str, object]:
        # Settings mapping consumed by the file report store factory.
        return {"path": self.file_path, "encoding": self.encoding, "atomic_replace": self.atomic_replace}


class LoggingConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    sink: Literal["stdout", "jsonl", "none"] = "none"
    level: Literal["debug", "info", "error"] = "info"
    path: str | None = None

    @model_validator(mode="after")
    def _require_path(self) -> LoggingConfig:
        # For jsonl sink, a path is required to avoid silent defaults.
        if self.sink == "jsonl" and not self.path:
            raise ValueError("logging.path is required when sink is 'jsonl'")
        return self


class AppConfig(BaseModel):
    # AppConfig is the top-level typed view of configuration.
    model_config = ConfigDict(extra="forbid")
    version: int
    range: RangeConfig
    output: OutputConfig
    checker: CheckerConfig = Field(default_factory=CheckerConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
