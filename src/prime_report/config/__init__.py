from .loader import DEFAULT_CONFIG_PATH, ConfigError, load_config, parse_config
from .models import AppConfig, CheckerConfig, LoggingConfig, OutputConfig, RangeConfig

# Config exports are intentionally small.
__all__ = [
    "AppConfig",
    "CheckerConfig",
    "ConfigError",
    "DEFAULT_CONFIG_PATH",
    "LoggingConfig",
    "OutputConfig",
    "RangeConfig",
    "load_config",
    "parse_config",
]
