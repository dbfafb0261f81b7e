"""Scheduler adapters for price export jobs."""

from __future__ import annotations

from .queue import QueueSyncScheduler
from .schema import PriceExportParameters, ScheduledPriceJob

__all__ = ["PriceExportParameters", "QueueSyncScheduler", "ScheduledPriceJob"]
