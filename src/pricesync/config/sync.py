"""Reverse-sync defaults for outbound price propagation."""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_int, env_str

DEFAULT_INTEGRATION_TYPE = "commerce"
DEFAULT_CONNECTOR_TYPE = "commerce_product_price"
DEFAULT_PROCESSOR_ALIAS = "commerce_product_price.export"
DEFAULT_MAX_PENDING_JOBS = 1000


@dataclass(frozen=True, slots=True)
class ReverseSyncConfig:
    """Which integration channels receive price changes, and how jobs are tagged."""

    integration_type: str = DEFAULT_INTEGRATION_TYPE
    connector_type: str = DEFAULT_CONNECTOR_TYPE
    processor_alias: str = DEFAULT_PROCESSOR_ALIAS


@dataclass(frozen=True, slots=True)
class SchedulerConfig:
    max_pending_jobs: int = DEFAULT_MAX_PENDING_JOBS


def get_reverse_sync_config() -> ReverseSyncConfig:
    return ReverseSyncConfig(
        integration_type=env_str("PRICESYNC_INTEGRATION_TYPE", DEFAULT_INTEGRATION_TYPE),
        connector_type=env_str("PRICESYNC_CONNECTOR_TYPE", DEFAULT_CONNECTOR_TYPE),
        processor_alias=env_str("PRICESYNC_PROCESSOR_ALIAS", DEFAULT_PROCESSOR_ALIAS),
    )


def get_scheduler_config() -> SchedulerConfig:
    return SchedulerConfig(
        max_pending_jobs=env_int(
            "PRICESYNC_MAX_PENDING_JOBS", DEFAULT_MAX_PENDING_JOBS, minimum=1
        ),
    )
