from .loader import ConfigError, load_mock_config, load_yaml_config
from .models import LoggingConfig, MockConfig
from .wiring import build_log_emitter, build_log_sink

__all__ = [
    "ConfigError",
    "LoggingConfig",
    "MockConfig",
    "build_log_emitter",
    "build_log_sink",
    "load_mock_config",
    "load_yaml_config",
]
