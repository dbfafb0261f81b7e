from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import TYPE_CHECKING

import pytest
from sqlalchemy import select, text

from pricesync.adapters.sqlalchemy.mappings import product_table
from pricesync.domain.model import IntegrationChannel, Product, ProductPrice, SyncSettings
from tests.helpers.catalog import make_linked_catalog

if TYPE_CHECKING:
    from sqlalchemy.orm import Session


def test_catalog_round_trip(sqlite_session: Session) -> None:
    catalog = make_linked_catalog("SKU-1")
    catalog.product.set_price("EUR", "10.50")
    catalog.product.set_channel_price(catalog.sales_channel, "9.90")
    catalog.product.record_external_price_id(catalog.integration_channel.id, "remote-1")
    sqlite_session.add(catalog.product)
    sqlite_session.commit()
    sqlite_session.expunge_all()

    product = sqlite_session.execute(
        select(Product).where(product_table.c.sku == "SKU-1")
    ).scalar_one()

    (sales_channel,) = product.sales_channels
    assert sales_channel.code == catalog.sales_channel.code
    assert sales_channel.integration_channel is not None
    assert sales_channel.integration_channel.id == catalog.integration_channel.id
    assert sales_channel.integration_channel.sync_settings.bidirectional_sync_enabled is True

    (price,) = product.prices
    assert price.value == Decimal("10.50")
    assert str(price.value) == "10.50"
    (channel_price,) = product.channel_prices
    assert channel_price.sales_channel is sales_channel
    assert channel_price.value == Decimal("9.90")
    assert product.external_price_id(catalog.integration_channel.id) == "remote-1"


def test_sync_settings_keep_unknown_keys(sqlite_session: Session) -> None:
    channel = IntegrationChannel(
        name="Storefront",
        type="commerce",
        sync_settings=SyncSettings(bidirectional_sync_enabled=True, extra={"batch": 50}),
    )
    sqlite_session.add(channel)
    sqlite_session.commit()
    sqlite_session.expunge_all()

    loaded = sqlite_session.get_one(IntegrationChannel, channel.id)

    assert loaded.sync_settings == SyncSettings(
        bidirectional_sync_enabled=True, extra={"batch": 50}
    )


def test_malformed_sync_settings_read_as_disabled(sqlite_session: Session) -> None:
    channel = IntegrationChannel(
        name="Storefront",
        type="commerce",
        sync_settings=SyncSettings(bidirectional_sync_enabled=True),
    )
    sqlite_session.add(channel)
    sqlite_session.commit()

    malformed = (
        "not json",
        '["bidirectional_sync_enabled"]',
        '{"bidirectional_sync_enabled": "1"}',
    )
    for raw in malformed:
        sqlite_session.execute(
            text("UPDATE integration_channel SET sync_settings = :raw"), {"raw": raw}
        )
        sqlite_session.expire_all()

        loaded = sqlite_session.get_one(IntegrationChannel, channel.id)

        assert loaded.sync_settings.bidirectional_sync_enabled is False


def test_non_numeric_stored_value_fails_the_load(sqlite_session: Session) -> None:
    catalog = make_linked_catalog()
    price = catalog.product.set_price("EUR", "10")
    sqlite_session.add(catalog.product)
    sqlite_session.commit()

    sqlite_session.execute(text("UPDATE product_price SET value = 'ten'"))
    sqlite_session.expire_all()

    with pytest.raises(InvalidOperation):
        sqlite_session.get_one(ProductPrice, price.id)
