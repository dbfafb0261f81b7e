"""SQLAlchemy-backed unit of work for catalog and price edits."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING, Literal, Self

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from pricesync.adapters.sqlalchemy.hooks import install_reverse_sync
from pricesync.adapters.sqlalchemy.mappings import start_mappers
from pricesync.adapters.sqlalchemy.migrations import upgrade_head
from pricesync.adapters.sqlalchemy.repositories import (
    SqlAlchemyIntegrationChannelRepository,
    SqlAlchemyProductRepository,
    SqlAlchemySalesChannelRepository,
)
from pricesync.config import get_database_config
from pricesync.domain.ports.unit_of_work import CatalogRepositories

if TYPE_CHECKING:
    from types import TracebackType

    from sqlalchemy.engine import Engine

    from pricesync.adapters.sqlalchemy.hooks import ReverseSyncFlushHook
    from pricesync.domain.price_sync import ReverseSyncPriceListener

log = getLogger(__name__)


class StartupError(RuntimeError):
    """Raised when the adapter is used before ``startup()`` or configured twice."""


@dataclass(slots=True)
class _AdapterState:
    engine: Engine | None = None
    session_factory: sessionmaker[Session] | None = None


_STATE = _AdapterState()


def startup(
    *,
    engine: Engine | None = None,
    database_uri: str | None = None,
    force: bool = False,
) -> None:
    """Bind the adapter to ``engine`` (or a new one), map the model and migrate."""

    if _STATE.engine is not None and not force:
        raise StartupError("SQLAlchemy adapter already started; pass force=True to rebind")

    resolved = engine or create_engine(database_uri or get_database_config().uri, future=True)
    start_mappers()
    upgrade_head(engine=resolved)
    _STATE.engine = resolved
    _STATE.session_factory = sessionmaker(bind=resolved, expire_on_commit=False)
    log.info("SQLAlchemy adapter started on %s", resolved.url)


def configured_engine() -> Engine | None:
    return _STATE.engine


def is_started() -> bool:
    return _STATE.engine is not None


def shutdown() -> None:
    """Dispose the engine and forget it (tests restart the adapter per case)."""

    if _STATE.engine is not None:
        _STATE.engine.dispose()
    _STATE.engine = None
    _STATE.session_factory = None


class SqlAlchemyCatalogUnitOfWork:
    """Session-scoped boundary for catalog edits.

    With a listener, every flush of the session first runs the reverse price
    sync; the installed hook is exposed as ``flush_hook``.
    """

    def __init__(self, *, listener: ReverseSyncPriceListener | None = None) -> None:
        if _STATE.session_factory is None:
            raise StartupError(
                "SQLAlchemy adapter not started. Call pricesync.adapters.sqlalchemy."
                "unit_of_work.startup() before requesting a unit of work."
            )
        self.session_factory = _STATE.session_factory
        self.listener = listener
        self.flush_hook: ReverseSyncFlushHook | None = None
        self._session: Session | None = None
        self._repositories: CatalogRepositories | None = None

    def __enter__(self) -> Self:
        if self._session is not None:
            raise StartupError("Unit of work session already open")
        session = self.session_factory()
        self._session = session
        self._repositories = CatalogRepositories(
            products=SqlAlchemyProductRepository(session),
            sales_channels=SqlAlchemySalesChannelRepository(session),
            integration_channels=SqlAlchemyIntegrationChannelRepository(session),
        )
        if self.listener is not None:
            self.flush_hook = install_reverse_sync(session, self.listener)
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> Literal[False]:
        session = self.session
        if exc_type is not None:
            session.rollback()
        session.close()
        self._session = None
        self._repositories = None
        return False

    def commit(self) -> None:
        self.session.commit()

    def rollback(self) -> None:
        self.session.rollback()

    @property
    def repositories(self) -> CatalogRepositories:
        if self._repositories is None:
            raise StartupError("Unit of work session not open")
        return self._repositories

    @property
    def session(self) -> Session:
        if self._session is None:
            raise StartupError("Unit of work session not open")
        return self._session
