"""Repository implementations backed by SQLAlchemy sessions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import select

from pricesync.adapters.sqlalchemy.mappings import (
    integration_channel_table,
    product_table,
    sales_channel_table,
)
from pricesync.domain.model import IntegrationChannel, Product, SalesChannel

if TYPE_CHECKING:
    from sqlalchemy.orm import Session


class SqlAlchemyProductRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def add(self, entity: Product) -> None:
        self.session.add(entity)

    def get_by_sku(self, sku: str) -> Product | None:
        stmt = select(Product).where(product_table.c.sku == sku)
        return self.session.execute(stmt).scalar_one_or_none()


class SqlAlchemySalesChannelRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def add(self, entity: SalesChannel) -> None:
        self.session.add(entity)

    def get_by_code(self, code: str) -> SalesChannel | None:
        stmt = select(SalesChannel).where(sales_channel_table.c.code == code)
        return self.session.execute(stmt).scalar_one_or_none()


class SqlAlchemyIntegrationChannelRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def add(self, entity: IntegrationChannel) -> None:
        self.session.add(entity)

    def get_by_name(self, name: str) -> IntegrationChannel | None:
        stmt = (
            select(IntegrationChannel)
            .where(integration_channel_table.c.name == name)
            .limit(1)
        )
        return self.session.execute(stmt).scalar_one_or_none()

    def list_by_type(self, channel_type: str) -> list[IntegrationChannel]:
        stmt = (
            select(IntegrationChannel)
            .where(integration_channel_table.c.type == channel_type)
            .order_by(integration_channel_table.c.name)
        )
        return list(self.session.execute(stmt).scalars())
