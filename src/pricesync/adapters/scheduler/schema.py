"""Pydantic models for jobs accepted by the in-process scheduler."""

from __future__ import annotations

from datetime import UTC, datetime
from decimal import Decimal  # noqa: TC003
from typing import Literal
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field


class SchedulerBaseModel(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)


class PriceExportParameters(SchedulerBaseModel):
    entity_name: Literal["ProductPrice", "ChannelPrice"] = Field(alias="entityName")
    action: Literal["create", "update"]
    sku_filter: str = Field(alias="skuFilter", min_length=1)
    value: Decimal
    currency: str = Field(min_length=1)
    processor_alias: str | None = Field(default=None, alias="processorAlias")


class ScheduledPriceJob(SchedulerBaseModel):
    job_id: str = Field(default_factory=lambda: uuid4().hex)
    channel_id: UUID
    connector_type: str = Field(min_length=1)
    parameters: PriceExportParameters
    scheduled_at: datetime = Field(default_factory=lambda: datetime.now(tz=UTC))
