"""Job payload handed to the scheduler for one price export."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from decimal import Decimal

    from pricesync.domain.model import CurrencyCode, Price, PriceKind, Sku, SyncAction


@dataclass(frozen=True, slots=True)
class PriceSyncPayload:
    entity_kind: PriceKind
    action: SyncAction
    sku_filter: Sku
    value: Decimal
    currency: CurrencyCode
    processor_alias: str | None = None

    @classmethod
    def for_price(
        cls,
        price: Price,
        *,
        action: SyncAction,
        processor_alias: str | None = None,
    ) -> PriceSyncPayload:
        return cls(
            entity_kind=price.kind,
            action=action,
            sku_filter=price.product.sku,
            value=price.value,
            currency=price.currency,
            processor_alias=processor_alias,
        )

    def as_parameters(self) -> dict[str, object]:
        """Connector parameters in the shape export processors read them."""
        parameters: dict[str, object] = {
            "entityName": self.entity_kind.value,
            "action": self.action.value,
            "skuFilter": self.sku_filter,
            "value": self.value,
            "currency": self.currency,
        }
        if self.processor_alias:
            parameters["processorAlias"] = self.processor_alias
        return parameters
