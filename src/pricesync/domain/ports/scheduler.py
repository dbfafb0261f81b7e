"""Port for the external job scheduler that performs the remote calls."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from uuid import UUID

    from pricesync.domain.price_sync.payload import PriceSyncPayload


class SchedulingError(RuntimeError):
    """Raised by schedulers that could not accept a job."""


@dataclass(frozen=True, slots=True)
class ScheduleReceipt:
    """Acknowledgement returned for an accepted job."""

    job_id: str


@runtime_checkable
class SyncScheduler(Protocol):
    """Accepts export jobs for an integration channel; execution is asynchronous."""

    def schedule(
        self,
        channel_id: UUID,
        connector_type: str,
        payload: PriceSyncPayload,
    ) -> ScheduleReceipt: ...
