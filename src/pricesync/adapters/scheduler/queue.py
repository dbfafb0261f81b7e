"""In-process scheduler holding export jobs until a worker drains them."""

from __future__ import annotations

from collections import deque
from logging import getLogger
from typing import TYPE_CHECKING

from pydantic import ValidationError

from pricesync.config import get_scheduler_config
from pricesync.domain.ports.scheduler import ScheduleReceipt, SchedulingError

from .schema import PriceExportParameters, ScheduledPriceJob

if TYPE_CHECKING:
    from uuid import UUID

    from pricesync.config import SchedulerConfig
    from pricesync.domain.price_sync import PriceSyncPayload

log = getLogger(__name__)


class QueueSyncScheduler:
    """Bounded FIFO of validated jobs.

    ``schedule`` raises ``SchedulingError`` when the queue is full or the payload
    does not validate; jobs are never retried here.
    """

    def __init__(self, config: SchedulerConfig | None = None) -> None:
        self.config = config or get_scheduler_config()
        self._jobs: deque[ScheduledPriceJob] = deque()

    def schedule(
        self,
        channel_id: UUID,
        connector_type: str,
        payload: PriceSyncPayload,
    ) -> ScheduleReceipt:
        if len(self._jobs) >= self.config.max_pending_jobs:
            raise SchedulingError(
                f"Scheduler queue is full ({self.config.max_pending_jobs} pending jobs)"
            )
        try:
            job = ScheduledPriceJob(
                channel_id=channel_id,
                connector_type=connector_type,
                parameters=PriceExportParameters.model_validate(payload.as_parameters()),
            )
        except ValidationError as exc:
            raise SchedulingError(f"Invalid price export job: {exc}") from exc

        self._jobs.append(job)
        log.debug("Queued job %s for channel %s", job.job_id, channel_id)
        return ScheduleReceipt(job_id=job.job_id)

    @property
    def pending(self) -> tuple[ScheduledPriceJob, ...]:
        return tuple(self._jobs)

    def drain(self) -> list[ScheduledPriceJob]:
        """Remove and return all pending jobs in submission order."""
        jobs = list(self._jobs)
        self._jobs.clear()
        return jobs
