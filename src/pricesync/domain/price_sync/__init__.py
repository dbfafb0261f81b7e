"""Reverse synchronisation of price edits to integration channels.

Flow, per flush:
1) gate on an authenticated actor (inbound syncs write without one)
2) keep significant price changes, one per price slot, channel prices first
3) per candidate, find eligible integration channels
4) dispatch only if the candidate is the final price in that channel's sales channel
5) pick CREATE/UPDATE from recorded external price ids and schedule the job
"""

from __future__ import annotations

from .candidates import dedup_key, select_price_candidates
from .dispatch import DispatchCoordinator, DispatchedJob, DispatchReport, FailedDispatch
from .listener import ReverseSyncPriceListener
from .payload import PriceSyncPayload
from .resolve import (
    eligible_integration_channels,
    final_price,
    is_eligible,
    sales_channel_for,
)
from .significance import SYNC_FIELDS, is_sync_required

__all__ = [
    "SYNC_FIELDS",
    "DispatchCoordinator",
    "DispatchReport",
    "DispatchedJob",
    "FailedDispatch",
    "PriceSyncPayload",
    "ReverseSyncPriceListener",
    "dedup_key",
    "eligible_integration_channels",
    "final_price",
    "is_eligible",
    "is_sync_required",
    "sales_channel_for",
    "select_price_candidates",
]
