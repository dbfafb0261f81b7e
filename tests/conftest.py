from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine  # noqa: TC002
from sqlalchemy.orm import Session, sessionmaker

from pricesync.adapters.scheduler import QueueSyncScheduler
from pricesync.adapters.session import StaticActorGate
from pricesync.adapters.sqlalchemy import start_mappers
from pricesync.adapters.sqlalchemy.migrations import upgrade_head
from pricesync.adapters.sqlalchemy.unit_of_work import (
    SqlAlchemyCatalogUnitOfWork,
    shutdown,
    startup,
)
from pricesync.config import ReverseSyncConfig, SchedulerConfig
from pricesync.domain.price_sync import ReverseSyncPriceListener
from tests.helpers.fakes import RecordingScheduler

os.environ.setdefault("DATABASE_URI", "sqlite+pysqlite:///:memory:")

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator


@pytest.fixture
def sync_config() -> ReverseSyncConfig:
    return ReverseSyncConfig()


@pytest.fixture
def recording_scheduler() -> RecordingScheduler:
    return RecordingScheduler()


@pytest.fixture
def queue_scheduler() -> QueueSyncScheduler:
    return QueueSyncScheduler(SchedulerConfig(max_pending_jobs=10))


@pytest.fixture
def actor_listener(
    recording_scheduler: RecordingScheduler,
    sync_config: ReverseSyncConfig,
) -> ReverseSyncPriceListener:
    return ReverseSyncPriceListener(
        gate=StaticActorGate(authenticated=True),
        scheduler=recording_scheduler,
        config=sync_config,
    )


@pytest.fixture
def sqlite_engine() -> Iterator[Engine]:
    engine = create_engine("sqlite+pysqlite:///:memory:", future=True)
    start_mappers()
    upgrade_head(engine=engine)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def sqlite_session(sqlite_engine: Engine) -> Iterator[Session]:
    session_factory = sessionmaker(bind=sqlite_engine, future=True, expire_on_commit=False)
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def sqlite_unit_of_work(
    sqlite_engine: Engine,
) -> Iterator[Callable[..., SqlAlchemyCatalogUnitOfWork]]:
    startup(engine=sqlite_engine, force=True)

    def factory(
        listener: ReverseSyncPriceListener | None = None,
    ) -> SqlAlchemyCatalogUnitOfWork:
        return SqlAlchemyCatalogUnitOfWork(listener=listener)

    try:
        yield factory
    finally:
        shutdown()
