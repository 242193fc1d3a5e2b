from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from kv_mock.domain.store import DEFAULT_VERSIONSTAMP

# Config models map the optional YAML file (or in-code overrides) to typed settings.


class LoggingConfig(BaseModel):
    # Structured logging of stub/record/verify events; off by default.
    model_config = ConfigDict(extra="forbid")
    enabled: bool = False
    level: Literal["debug", "info"] = "debug"
    sink: Literal["stdout", "jsonl", "memory"] = "memory"
    path: str | None = None

    @model_validator(mode="after")
    def _require_path(self) -> LoggingConfig:
        # A jsonl sink needs an explicit file to avoid silent defaults.
        if self.enabled and self.sink == "jsonl" and not self.path:
            raise ValueError("logging.path is required when sink is 'jsonl'")
        return self


class MockConfig(BaseModel):
    # Top-level typed view of mock configuration.
    model_config = ConfigDict(extra="forbid")
    display_limit: int = Field(default=10, ge=1)
    default_versionstamp: str = DEFAULT_VERSIONSTAMP
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @field_validator("default_versionstamp")
    @classmethod
    def _check_versionstamp(cls, value: str) -> str:
        # Versionstamps are fixed-width 20-digit strings.
        if len(value) != 20 or not value.isdigit():
            raise ValueError("default_versionstamp must be a 20-digit string")
        return value
