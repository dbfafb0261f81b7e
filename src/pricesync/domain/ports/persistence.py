"""Ports for persisting catalog aggregates."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from pricesync.domain.model import IntegrationChannel, Product, SalesChannel


@runtime_checkable
class Repository[TEntity](Protocol):
    """Minimal repository contract for a persistent aggregate store."""

    def add(self, entity: TEntity) -> None: ...


@runtime_checkable
class ProductRepository(Repository[Product], Protocol):
    def get_by_sku(self, sku: str) -> Product | None: ...


@runtime_checkable
class SalesChannelRepository(Repository[SalesChannel], Protocol):
    def get_by_code(self, code: str) -> SalesChannel | None: ...


@runtime_checkable
class IntegrationChannelRepository(Repository[IntegrationChannel], Protocol):
    def get_by_name(self, name: str) -> IntegrationChannel | None: ...

    def list_by_type(self, channel_type: str) -> list[IntegrationChannel]: ...
