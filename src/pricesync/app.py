"""Application orchestration entry points."""

from __future__ import annotations

from collections.abc import Callable
from logging import getLogger
from typing import TYPE_CHECKING

from pricesync.adapters.scheduler import QueueSyncScheduler
from pricesync.adapters.session import ContextActorGate
from pricesync.adapters.sqlalchemy.unit_of_work import (
    SqlAlchemyCatalogUnitOfWork,
    configured_engine,
    is_started,
    startup,
)
from pricesync.config import get_database_config, get_reverse_sync_config
from pricesync.domain.price_sync import ReverseSyncPriceListener

if TYPE_CHECKING:
    from pricesync.config import ReverseSyncConfig
    from pricesync.domain.ports.scheduler import SyncScheduler
    from pricesync.domain.ports.session import ActorGate

type CatalogUnitOfWorkFactory = Callable[[], SqlAlchemyCatalogUnitOfWork]

log = getLogger(__name__)


def build_reverse_sync_listener(
    *,
    gate: ActorGate | None = None,
    scheduler: SyncScheduler | None = None,
    config: ReverseSyncConfig | None = None,
) -> ReverseSyncPriceListener:
    """Compose the reverse price sync listener from configured adapters."""

    effective_config = config or get_reverse_sync_config()
    log.info(
        "Reverse price sync: integration_type=%s, connector_type=%s",
        effective_config.integration_type,
        effective_config.connector_type,
    )
    return ReverseSyncPriceListener(
        gate=gate or ContextActorGate(),
        scheduler=scheduler or QueueSyncScheduler(),
        config=effective_config,
    )


def reverse_sync_unit_of_work_factory(
    listener: ReverseSyncPriceListener | None = None,
) -> CatalogUnitOfWorkFactory:
    """Return a factory of catalog units of work whose flushes run the reverse sync."""

    if not is_started():
        startup()
    effective_listener = listener or build_reverse_sync_listener()

    def factory() -> SqlAlchemyCatalogUnitOfWork:
        return SqlAlchemyCatalogUnitOfWork(listener=effective_listener)

    return factory


def initialise_database(*, database_uri: str | None = None) -> str:
    """Create or upgrade the schema and return the database URI that was used."""

    uri = database_uri or get_database_config().uri
    startup(database_uri=uri, force=is_started())
    engine = configured_engine()
    log.info("Database ready at %s", engine.url if engine is not None else uri)
    return uri
