"""Configuration loading and validation package."""

from .loader import DEFAULT_CONFIG_PATH, load_relay_config
from .models import AppConfig, RelayConfig, SourceConfig, TelemetryConfig

__all__ = [
    "AppConfig",
    "DEFAULT_CONFIG_PATH",
    "RelayConfig",
    "SourceConfig",
    "TelemetryConfig",
    "load_relay_config",
]
