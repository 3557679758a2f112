from .loader import load_config, load_config_file
from .types import (
    AwsContext,
    ConfigError,
    FileDefaults,
    UnsupportedConfigFormatError,
    UsageError,
    WaiterConfig,
)

__all__ = [
    "load_config",
    "load_config_file",
    "AwsContext",
    "WaiterConfig",
    "FileDefaults",
    "ConfigError",
    "UnsupportedConfigFormatError",
    "UsageError",
]
