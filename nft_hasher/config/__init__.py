from .loader import (
    ConfigError,
    Settings,
    default_settings,
    load_config,
    resolve_settings,
)

__all__ = [
    "ConfigError",
    "Settings",
    "default_settings",
    "load_config",
    "resolve_settings",
]
