from __future__ import annotations

from typing import TYPE_CHECKING

from pricesync.adapters.sqlalchemy import (
    SqlAlchemyIntegrationChannelRepository,
    SqlAlchemyProductRepository,
    SqlAlchemySalesChannelRepository,
)
from tests.helpers.catalog import make_integration_channel, make_linked_catalog

if TYPE_CHECKING:
    from sqlalchemy.orm import Session


def test_product_repository_get_by_sku(sqlite_session: Session) -> None:
    repository = SqlAlchemyProductRepository(sqlite_session)
    catalog = make_linked_catalog("SKU-1")
    repository.add(catalog.product)
    sqlite_session.commit()

    assert repository.get_by_sku("SKU-1") is catalog.product
    assert repository.get_by_sku("SKU-404") is None


def test_sales_channel_repository_get_by_code(sqlite_session: Session) -> None:
    repository = SqlAlchemySalesChannelRepository(sqlite_session)
    catalog = make_linked_catalog(code="web-eu")
    repository.add(catalog.sales_channel)
    sqlite_session.commit()

    assert repository.get_by_code("web-eu") is catalog.sales_channel
    assert repository.get_by_code("pos") is None


def test_integration_channel_repository_lookups(sqlite_session: Session) -> None:
    repository = SqlAlchemyIntegrationChannelRepository(sqlite_session)
    zeta = make_integration_channel("Zeta")
    alpha = make_integration_channel("Alpha")
    market = make_integration_channel("Market", channel_type="marketplace")
    for channel in (zeta, alpha, market):
        repository.add(channel)
    sqlite_session.commit()

    assert repository.get_by_name("Market") is market
    assert repository.get_by_name("Missing") is None
    assert repository.list_by_type("commerce") == [alpha, zeta]
    assert repository.list_by_type("marketplace") == [market]
