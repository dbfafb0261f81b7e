"""Domain port definitions for adapters."""

from __future__ import annotations

from .changes import ChangeSet, FieldChange, TransactionInspector
from .persistence import (
    IntegrationChannelRepository,
    ProductRepository,
    Repository,
    SalesChannelRepository,
)
from .scheduler import ScheduleReceipt, SchedulingError, SyncScheduler
from .session import ActorGate
from .unit_of_work import (
    CatalogRepositories,
    CatalogUnitOfWork,
    RepositoryCollection,
    UnitOfWork,
)

__all__ = [
    "ActorGate",
    "CatalogRepositories",
    "CatalogUnitOfWork",
    "ChangeSet",
    "FieldChange",
    "IntegrationChannelRepository",
    "ProductRepository",
    "Repository",
    "RepositoryCollection",
    "SalesChannelRepository",
    "ScheduleReceipt",
    "SchedulingError",
    "SyncScheduler",
    "TransactionInspector",
    "UnitOfWork",
]
