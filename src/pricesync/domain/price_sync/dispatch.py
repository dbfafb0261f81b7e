"""Turn price candidates into scheduler jobs, at most once per record per flush."""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from pricesync.domain.model import SyncAction
from pricesync.domain.ports.scheduler import SchedulingError

from .payload import PriceSyncPayload
from .resolve import eligible_integration_channels, final_price, sales_channel_for

if TYPE_CHECKING:
    from collections.abc import Iterable
    from uuid import UUID

    from pricesync.config import ReverseSyncConfig
    from pricesync.domain.model import IntegrationChannel, Price, Product
    from pricesync.domain.ports.scheduler import ScheduleReceipt, SyncScheduler

log = getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DispatchedJob:
    channel_id: UUID
    payload: PriceSyncPayload
    receipt: ScheduleReceipt


@dataclass(frozen=True, slots=True)
class FailedDispatch:
    channel_id: UUID
    payload: PriceSyncPayload
    error: str


@dataclass(slots=True)
class DispatchReport:
    """Outcome of one dispatch pass."""

    scheduled: list[DispatchedJob] = field(default_factory=list["DispatchedJob"])
    failed: list[FailedDispatch] = field(default_factory=list["FailedDispatch"])
    skipped: int = 0

    @property
    def attempted(self) -> int:
        return len(self.scheduled) + len(self.failed)


class DispatchCoordinator:
    """Schedules export jobs for price candidates of a single flush.

    Construct one per flush: the processed-set lives on the instance and is
    discarded with it.
    """

    def __init__(self, *, scheduler: SyncScheduler, config: ReverseSyncConfig) -> None:
        self._scheduler = scheduler
        self._config = config
        self._processed: set[Price] = set()
        self.report = DispatchReport()

    @property
    def processed(self) -> frozenset[Price]:
        return frozenset(self._processed)

    def dispatch_all(self, candidates: Iterable[Price]) -> DispatchReport:
        for candidate in candidates:
            self.dispatch(candidate)
        return self.report

    def dispatch(self, candidate: Price) -> None:
        if candidate in self._processed:
            log.debug(
                "Skipping already dispatched %s for %s", candidate.kind, candidate.product.sku
            )
            self.report.skipped += 1
            return

        channels = eligible_integration_channels(
            candidate, integration_type=self._config.integration_type
        )
        if not channels:
            log.debug(
                "No eligible integration channel for %s %s", candidate.kind, candidate.product.sku
            )
            self.report.skipped += 1
            return

        product = candidate.product
        attempted = False
        for channel in channels:
            sales_channel = sales_channel_for(product, channel)
            if sales_channel is None:
                continue
            if final_price(product, sales_channel) is not candidate:
                # superseded by a more specific price in this sales channel
                log.debug(
                    "%s for %s is not the final price in %s",
                    candidate.kind,
                    product.sku,
                    sales_channel.code,
                )
                continue

            payload = PriceSyncPayload.for_price(
                candidate,
                action=self._action_for(product, channel),
                processor_alias=self._config.processor_alias,
            )
            attempted = True
            self._submit(channel, payload)

        if attempted:
            self._processed.add(candidate)
        else:
            self.report.skipped += 1

    def _submit(self, channel: IntegrationChannel, payload: PriceSyncPayload) -> None:
        try:
            receipt = self._scheduler.schedule(channel.id, self._config.connector_type, payload)
        except SchedulingError as exc:
            log.warning(
                "Could not schedule %s %s for %s on channel %s: %s",
                payload.action,
                payload.entity_kind,
                payload.sku_filter,
                channel.name,
                exc,
            )
            self.report.failed.append(
                FailedDispatch(channel_id=channel.id, payload=payload, error=str(exc))
            )
            return

        log.info(
            "Scheduled %s %s for %s on channel %s (job %s)",
            payload.action,
            payload.entity_kind,
            payload.sku_filter,
            channel.name,
            receipt.job_id,
        )
        self.report.scheduled.append(
            DispatchedJob(channel_id=channel.id, payload=payload, receipt=receipt)
        )

    @staticmethod
    def _action_for(product: Product, channel: IntegrationChannel) -> SyncAction:
        if product.external_price_id(channel.id) is not None:
            return SyncAction.UPDATE
        return SyncAction.CREATE
