"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class PriceKind(StrEnum):
    """Discriminator of the price variants; the value is the label sent to schedulers."""

    PRODUCT_PRICE = "ProductPrice"
    CHANNEL_PRICE = "ChannelPrice"


class SyncAction(StrEnum):
    CREATE = "create"
    UPDATE = "update"
