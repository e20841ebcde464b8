"""Configuration loading, schema, and defaults."""

from envaudit.config.loader import ConfigError, load_config
from envaudit.config.schema import EnvAuditConfig

__all__ = [
    "ConfigError",
    "EnvAuditConfig",
    "load_config",
]
