"""Catalog entities: products, sales channels and integration channels.

Ownership:
- Product owns its ProductPrices, ChannelPrices and ExternalPriceIds
- SalesChannel links to at most one IntegrationChannel
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Final

from pricesync.domain.model.entity import Entity
from pricesync.domain.model.external_ids import ExternalPriceIdsMixin
from pricesync.domain.model.pricing import ChannelPrice, ProductPrice
from pricesync.domain.model.primitives import to_decimal

if TYPE_CHECKING:
    from pricesync.domain.model.primitives import Amount, CurrencyCode, Sku

BIDIRECTIONAL_SYNC_KEY: Final[str] = "bidirectional_sync_enabled"


@dataclass(frozen=True, slots=True)
class SyncSettings:
    """Synchronisation switches of an integration channel.

    Unknown keys survive a round trip through ``extra`` so settings written by other
    components are not lost when the channel is saved again.
    """

    bidirectional_sync_enabled: bool = False
    extra: Mapping[str, object] = field(default_factory=dict[str, object])

    @classmethod
    def from_mapping(cls, data: Mapping[str, object] | None) -> SyncSettings:
        if not data:
            return cls()
        flag = data.get(BIDIRECTIONAL_SYNC_KEY, False)
        extra = {key: value for key, value in data.items() if key != BIDIRECTIONAL_SYNC_KEY}
        return cls(bidirectional_sync_enabled=flag is True, extra=extra)

    def as_mapping(self) -> dict[str, object]:
        return {**self.extra, BIDIRECTIONAL_SYNC_KEY: self.bidirectional_sync_enabled}


@dataclass(eq=False, kw_only=True)
class IntegrationChannel(Entity):
    """An external endpoint (e.g. a storefront) that can receive synchronised data."""

    name: str
    type: str
    enabled: bool = True
    sync_settings: SyncSettings = field(default_factory=SyncSettings)


@dataclass(eq=False, kw_only=True)
class SalesChannel(Entity):
    code: str
    currency: CurrencyCode
    name: str | None = None
    integration_channel: IntegrationChannel | None = field(default=None, repr=False)


@dataclass(eq=False, kw_only=True)
class Product(ExternalPriceIdsMixin):
    sku: Sku
    name: str | None = None

    _sales_channels: list[SalesChannel] = field(
        default_factory=list["SalesChannel"], repr=False
    )
    _prices: list[ProductPrice] = field(default_factory=list["ProductPrice"], repr=False)
    _channel_prices: list[ChannelPrice] = field(
        default_factory=list["ChannelPrice"], repr=False
    )

    @property
    def sales_channels(self) -> tuple[SalesChannel, ...]:
        return tuple(self._sales_channels)

    @property
    def prices(self) -> tuple[ProductPrice, ...]:
        return tuple(self._prices)

    @property
    def channel_prices(self) -> tuple[ChannelPrice, ...]:
        return tuple(self._channel_prices)

    def add_sales_channel(self, sales_channel: SalesChannel) -> None:
        if sales_channel not in self._sales_channels:
            self._sales_channels.append(sales_channel)

    def price_for(self, currency: CurrencyCode) -> ProductPrice | None:
        for price in self._prices:
            if price.currency == currency:
                return price
        return None

    def channel_price_for(self, sales_channel: SalesChannel) -> ChannelPrice | None:
        for price in self._channel_prices:
            if price.sales_channel is sales_channel:
                return price
        return None

    def set_price(self, currency: CurrencyCode, value: Amount) -> ProductPrice:
        """Create or update the product-wide price for ``currency``."""
        existing = self.price_for(currency)
        if existing is not None:
            existing.value = to_decimal(value)
            return existing
        return ProductPrice(product=self, currency=currency, value=to_decimal(value))

    def set_channel_price(
        self,
        sales_channel: SalesChannel,
        value: Amount,
        *,
        currency: CurrencyCode | None = None,
    ) -> ChannelPrice:
        """Create or update the override price for ``sales_channel``.

        The currency defaults to the sales channel's currency.
        """
        existing = self.channel_price_for(sales_channel)
        if existing is not None:
            existing.value = to_decimal(value)
            if currency is not None:
                existing.currency = currency
            return existing
        return ChannelPrice(
            product=self,
            sales_channel=sales_channel,
            currency=currency or sales_channel.currency,
            value=to_decimal(value),
        )

    # Friend primitives (called by the price constructors)
    def _attach_price(self, price: ProductPrice) -> None:
        if price not in self._prices:
            self._prices.append(price)

    def _attach_channel_price(self, price: ChannelPrice) -> None:
        if price not in self._channel_prices:
            self._channel_prices.append(price)
