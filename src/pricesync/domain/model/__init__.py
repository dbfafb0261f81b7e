"""Public domain model surface."""

from __future__ import annotations

from pricesync.domain.model.catalog import (
    IntegrationChannel,
    Product,
    SalesChannel,
    SyncSettings,
)
from pricesync.domain.model.entity import Entity
from pricesync.domain.model.enums import PriceKind, SyncAction
from pricesync.domain.model.external_ids import ExternalPriceId, ExternalPriceIds
from pricesync.domain.model.pricing import (
    PRICE_TYPES,
    ChannelPrice,
    Price,
    PriceRecord,
    ProductPrice,
)
from pricesync.domain.model.primitives import Amount, CurrencyCode, Sku, to_decimal

__all__ = [  # noqa: RUF022
    # base
    "Entity",
    # catalog
    "IntegrationChannel",
    "Product",
    "SalesChannel",
    "SyncSettings",
    # pricing
    "PRICE_TYPES",
    "ChannelPrice",
    "Price",
    "PriceRecord",
    "ProductPrice",
    # external ids
    "ExternalPriceId",
    "ExternalPriceIds",
    # enums
    "PriceKind",
    "SyncAction",
    # primitives
    "Amount",
    "CurrencyCode",
    "Sku",
    "to_decimal",
]
