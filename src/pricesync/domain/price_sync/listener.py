"""Flush hook propagating price edits back to integration channels."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from .candidates import select_price_candidates
from .dispatch import DispatchCoordinator, DispatchReport

if TYPE_CHECKING:
    from pricesync.config import ReverseSyncConfig
    from pricesync.domain.ports.changes import TransactionInspector
    from pricesync.domain.ports.scheduler import SyncScheduler
    from pricesync.domain.ports.session import ActorGate

log = getLogger(__name__)


class ReverseSyncPriceListener:
    """Schedules export jobs for price changes made by an authenticated actor.

    Changes flushed without an actor come from inbound synchronisation; sending them
    back would loop, so the hook does nothing for them.
    """

    def __init__(
        self,
        *,
        gate: ActorGate,
        scheduler: SyncScheduler,
        config: ReverseSyncConfig,
    ) -> None:
        self._gate = gate
        self._scheduler = scheduler
        self._config = config

    def on_flush(self, inspector: TransactionInspector) -> DispatchReport:
        if not self._gate.has_authenticated_actor():
            log.debug("No authenticated actor, reverse price sync skipped")
            return DispatchReport()

        entities = [*inspector.scheduled_insertions(), *inspector.scheduled_updates()]
        candidates = select_price_candidates(entities, inspector.change_set)
        if not candidates:
            return DispatchReport()

        coordinator = DispatchCoordinator(scheduler=self._scheduler, config=self._config)
        report = coordinator.dispatch_all(candidates)
        log.info(
            "Reverse price sync: candidates=%s, scheduled=%s, failed=%s, skipped=%s",
            len(candidates),
            len(report.scheduled),
            len(report.failed),
            report.skipped,
        )
        return report
