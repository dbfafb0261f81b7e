"""Application configuration helpers."""

from __future__ import annotations

from .env import require_env_vars
from .errors import ConfigurationError, MissingConfigurationError
from .logging import configure_logging
from .storage import DatabaseConfig, StorageConfig, get_database_config, get_storage_config
from .sync import (
    ReverseSyncConfig,
    SchedulerConfig,
    get_reverse_sync_config,
    get_scheduler_config,
)

__all__ = [
    "ConfigurationError",
    "DatabaseConfig",
    "MissingConfigurationError",
    "ReverseSyncConfig",
    "SchedulerConfig",
    "StorageConfig",
    "configure_logging",
    "get_database_config",
    "get_reverse_sync_config",
    "get_scheduler_config",
    "get_storage_config",
    "require_env_vars",
]
