from __future__ import annotations

from decimal import Decimal

from pricesync.domain.model import PriceKind, SyncAction
from pricesync.domain.price_sync import PriceSyncPayload
from tests.helpers.catalog import make_linked_catalog


def test_payload_for_channel_price() -> None:
    catalog = make_linked_catalog("SKU-7")
    price = catalog.product.set_channel_price(catalog.sales_channel, "9.95")

    payload = PriceSyncPayload.for_price(
        price, action=SyncAction.CREATE, processor_alias="commerce_product_price.export"
    )

    assert payload == PriceSyncPayload(
        entity_kind=PriceKind.CHANNEL_PRICE,
        action=SyncAction.CREATE,
        sku_filter="SKU-7",
        value=Decimal("9.95"),
        currency="EUR",
        processor_alias="commerce_product_price.export",
    )


def test_as_parameters_uses_connector_keys() -> None:
    catalog = make_linked_catalog("SKU-7")
    price = catalog.product.set_price("EUR", "10.00")

    payload = PriceSyncPayload.for_price(price, action=SyncAction.UPDATE, processor_alias="export")

    assert payload.as_parameters() == {
        "entityName": "ProductPrice",
        "action": "update",
        "skuFilter": "SKU-7",
        "value": Decimal("10.00"),
        "currency": "EUR",
        "processorAlias": "export",
    }


def test_as_parameters_omits_missing_processor_alias() -> None:
    catalog = make_linked_catalog()
    price = catalog.product.set_price("EUR", "10")

    parameters = PriceSyncPayload.for_price(price, action=SyncAction.CREATE).as_parameters()

    assert "processorAlias" not in parameters
