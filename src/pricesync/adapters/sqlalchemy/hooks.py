"""Bind the reverse price sync listener to SQLAlchemy session flushes."""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING, Final

from sqlalchemy import event

from pricesync.adapters.sqlalchemy.changes import SqlAlchemyTransactionInspector

if TYPE_CHECKING:
    from collections.abc import Iterable

    from sqlalchemy.orm import Session, UOWTransaction

    from pricesync.domain.price_sync import DispatchReport, ReverseSyncPriceListener

DEFAULT_REPORT_HISTORY: Final[int] = 50


class ReverseSyncFlushHook:
    """``before_flush`` handler running the listener once per flush.

    Exceptions raised by the listener propagate and abort the flush. Only the
    reports of the last ``max_reports`` flushes are kept.
    """

    def __init__(
        self,
        listener: ReverseSyncPriceListener,
        *,
        max_reports: int = DEFAULT_REPORT_HISTORY,
    ) -> None:
        self.listener = listener
        self.reports: deque[DispatchReport] = deque(maxlen=max_reports)

    def __call__(
        self,
        session: Session,
        flush_context: UOWTransaction,
        instances: Iterable[object] | None,
    ) -> None:
        _ = flush_context, instances
        with session.no_autoflush:
            report = self.listener.on_flush(SqlAlchemyTransactionInspector(session))
        self.reports.append(report)

    def install(self, session: Session) -> None:
        event.listen(session, "before_flush", self)

    def remove(self, session: Session) -> None:
        if event.contains(session, "before_flush", self):
            event.remove(session, "before_flush", self)


def install_reverse_sync(
    session: Session,
    listener: ReverseSyncPriceListener,
    *,
    max_reports: int = DEFAULT_REPORT_HISTORY,
) -> ReverseSyncFlushHook:
    """Run ``listener`` before every flush of ``session``; returns the installed hook."""

    hook = ReverseSyncFlushHook(listener, max_reports=max_reports)
    hook.install(session)
    return hook
