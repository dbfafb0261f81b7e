"""Price records.

Two variants share the price capability (product, currency, value) without a
common base class: ``Price`` is a tagged union and code that needs to tell them
apart switches on the variant explicitly.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, ClassVar, Protocol

from pricesync.domain.model.entity import Entity
from pricesync.domain.model.enums import PriceKind

if TYPE_CHECKING:
    from decimal import Decimal

    from pricesync.domain.model.catalog import Product, SalesChannel
    from pricesync.domain.model.primitives import CurrencyCode


class PriceRecord(Protocol):
    """Structural contract common to every price variant."""

    @property
    def kind(self) -> PriceKind: ...

    @property
    def product(self) -> Product: ...

    @property
    def currency(self) -> CurrencyCode: ...

    @property
    def value(self) -> Decimal: ...


@dataclass(eq=False, kw_only=True)
class ProductPrice(Entity):
    """Default price of a product in one currency."""

    KIND: ClassVar[PriceKind] = PriceKind.PRODUCT_PRICE

    product: Product = field(repr=False)
    currency: CurrencyCode
    value: Decimal

    def __post_init__(self) -> None:
        # Keep product graph consistent without ORM.
        self.product._attach_price(self)  # pyright: ignore[reportPrivateUsage] # noqa: SLF001

    @property
    def kind(self) -> PriceKind:
        return self.KIND


@dataclass(eq=False, kw_only=True)
class ChannelPrice(Entity):
    """Override price of a product inside one sales channel."""

    KIND: ClassVar[PriceKind] = PriceKind.CHANNEL_PRICE

    product: Product = field(repr=False)
    sales_channel: SalesChannel = field(repr=False)
    currency: CurrencyCode
    value: Decimal

    def __post_init__(self) -> None:
        self.product._attach_channel_price(self)  # pyright: ignore[reportPrivateUsage] # noqa: SLF001

    @property
    def kind(self) -> PriceKind:
        return self.KIND


type Price = ProductPrice | ChannelPrice

PRICE_TYPES: tuple[type[ProductPrice], type[ChannelPrice]] = (ProductPrice, ChannelPrice)
