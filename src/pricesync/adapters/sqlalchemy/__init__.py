"""SQLAlchemy adapter package for pricesync."""

from __future__ import annotations

from .changes import SqlAlchemyTransactionInspector
from .hooks import ReverseSyncFlushHook, install_reverse_sync
from .mappings import create_all_tables, mapper_registry, start_mappers
from .repositories import (
    SqlAlchemyIntegrationChannelRepository,
    SqlAlchemyProductRepository,
    SqlAlchemySalesChannelRepository,
)
from .unit_of_work import SqlAlchemyCatalogUnitOfWork, StartupError, shutdown, startup

__all__ = [
    "ReverseSyncFlushHook",
    "SqlAlchemyCatalogUnitOfWork",
    "SqlAlchemyIntegrationChannelRepository",
    "SqlAlchemyProductRepository",
    "SqlAlchemySalesChannelRepository",
    "SqlAlchemyTransactionInspector",
    "StartupError",
    "create_all_tables",
    "install_reverse_sync",
    "mapper_registry",
    "shutdown",
    "start_mappers",
    "startup",
]
