from __future__ import annotations

from pathlib import Path

import yaml

from kv_mock.config.models import MockConfig


class ConfigError(ValueError):
    # Raised for structurally invalid config files (fail fast).
    pass


def load_yaml_config(path: Path) -> dict[str, object]:
    # Raw YAML loader; returns a mapping for model validation.
    raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigError("Config root must be a mapping")
    return raw


def load_mock_config(path: Path) -> MockConfig:
    # Accept either a bare config mapping or one nested under a kv_mock section.
    raw = load_yaml_config(path)
    section = raw.get("kv_mock", raw)
    if not isinstance(section, dict):
        raise ConfigError("kv_mock section must be a mapping")
    return MockConfig.model_validate(section)
