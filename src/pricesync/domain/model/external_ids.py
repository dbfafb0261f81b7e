"""External price identifiers recorded per integration channel.

The export writer records the remote identifier after a successful create; the
reverse-sync listener only reads it to decide between CREATE and UPDATE.
"""

from __future__ import annotations

from abc import ABC
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol

from pricesync.domain.model.entity import Entity

if TYPE_CHECKING:
    from uuid import UUID


@dataclass(eq=False, kw_only=True)
class ExternalPriceId(Entity):
    integration_channel_id: UUID
    external_id: str | None = None


class ExternalPriceIds(Protocol):
    """Read-only access to recorded external price identifiers."""

    def external_price_id(self, integration_channel_id: UUID) -> str | None: ...


@dataclass(eq=False, kw_only=True)
class ExternalPriceIdsMixin(Entity, ABC):
    """Capability: owns ExternalPriceIds, one per integration channel."""

    _external_price_ids: list[ExternalPriceId] = field(
        default_factory=list["ExternalPriceId"], repr=False, init=False
    )

    @property
    def external_price_ids(self) -> tuple[ExternalPriceId, ...]:
        return tuple(self._external_price_ids)

    def external_price_id(self, integration_channel_id: UUID) -> str | None:
        """Return the remote price id for ``integration_channel_id``.

        Blank or non-string entries count as "never synchronised".
        """
        for entry in self._external_price_ids:
            if entry.integration_channel_id != integration_channel_id:
                continue
            value = entry.external_id
            if isinstance(value, str) and value.strip():
                return value.strip()
            return None
        return None

    def record_external_price_id(
        self, integration_channel_id: UUID, external_id: str | None
    ) -> ExternalPriceId:
        for entry in self._external_price_ids:
            if entry.integration_channel_id == integration_channel_id:
                entry.external_id = external_id
                return entry
        entry = ExternalPriceId(
            integration_channel_id=integration_channel_id,
            external_id=external_id,
        )
        self._external_price_ids.append(entry)
        return entry
