"""Select the price records of a flush that need an outbound sync."""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from pricesync.domain.model import PRICE_TYPES, ChannelPrice, PriceKind

from .significance import is_sync_required

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from pricesync.domain.model import Price
    from pricesync.domain.ports.changes import ChangeSet

# Channel prices are evaluated before product-wide prices.
_PRECEDENCE: Final[dict[PriceKind, int]] = {
    PriceKind.CHANNEL_PRICE: 0,
    PriceKind.PRODUCT_PRICE: 1,
}


def dedup_key(price: Price) -> str:
    """Key of the logical price slot ``price`` occupies.

    ``sku_currency`` for product prices, ``sku_currency_<integration channel id>``
    for channel prices. A channel price whose sales channel has no integration
    channel is keyed by its sales channel instead, so unrelated unlinked channels
    never collapse into one slot.
    """

    key = f"{price.product.sku}_{price.currency}"
    if isinstance(price, ChannelPrice):
        integration_channel = price.sales_channel.integration_channel
        if integration_channel is not None:
            return f"{key}_{integration_channel.id}"
        return f"{key}_sales-channel-{price.sales_channel.id}"
    return key


def select_price_candidates(
    entities: Iterable[object],
    change_set_for: Callable[[object], ChangeSet],
) -> list[Price]:
    """Return significant price records, one per slot, channel prices first.

    Later records overwrite earlier ones sharing a dedup key. The sort is stable, so
    records of the same kind keep their relative order.
    """

    by_key: dict[str, Price] = {}
    for entity in entities:
        if not isinstance(entity, PRICE_TYPES):
            continue
        if not is_sync_required(change_set_for(entity)):
            continue
        by_key[dedup_key(entity)] = entity

    return sorted(by_key.values(), key=lambda price: _PRECEDENCE[price.kind])
