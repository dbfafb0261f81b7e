"""Resolve integration channels and winning prices for a product."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pricesync.domain.model import ChannelPrice

if TYPE_CHECKING:
    from pricesync.domain.model import IntegrationChannel, Price, Product, SalesChannel


def is_eligible(channel: IntegrationChannel | None, *, integration_type: str) -> bool:
    """Channel is of the target type, enabled, and accepts changes back from us."""

    return (
        channel is not None
        and channel.type == integration_type
        and channel.enabled
        and channel.sync_settings.bidirectional_sync_enabled
    )


def eligible_integration_channels(
    price: Price,
    *,
    integration_type: str,
) -> tuple[IntegrationChannel, ...]:
    """Integration channels that should receive ``price``.

    A channel price targets at most its own sales channel's integration channel; a
    product price targets every eligible channel the product is sold through.
    """

    if isinstance(price, ChannelPrice):
        channel = price.sales_channel.integration_channel
        if channel is not None and is_eligible(channel, integration_type=integration_type):
            return (channel,)
        return ()

    channels: list[IntegrationChannel] = []
    for sales_channel in price.product.sales_channels:
        channel = sales_channel.integration_channel
        if channel is None or not is_eligible(channel, integration_type=integration_type):
            continue
        if any(seen is channel for seen in channels):
            continue
        channels.append(channel)
    return tuple(channels)


def sales_channel_for(
    product: Product,
    integration_channel: IntegrationChannel,
) -> SalesChannel | None:
    for sales_channel in product.sales_channels:
        if sales_channel.integration_channel is integration_channel:
            return sales_channel
    return None


def final_price(product: Product, sales_channel: SalesChannel) -> Price | None:
    """The authoritative price of ``product`` in ``sales_channel``: most specific wins."""

    channel_price = product.channel_price_for(sales_channel)
    if channel_price is not None:
        return channel_price
    return product.price_for(sales_channel.currency)
