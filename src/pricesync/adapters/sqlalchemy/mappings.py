"""SQLAlchemy mapping metadata for the pricing domain model."""

from __future__ import annotations

import json
import logging
import uuid
from decimal import Decimal
from functools import cache
from typing import TYPE_CHECKING, Any, cast

from sqlalchemy import (
    Boolean,
    Column,
    Dialect,
    ForeignKey,
    String,
    Table,
    Text,
    TypeDecorator,
    UniqueConstraint,
    Uuid,
    orm,
)
from sqlalchemy.orm import configure_mappers, relationship

from pricesync.domain.model import (
    ChannelPrice,
    ExternalPriceId,
    IntegrationChannel,
    Product,
    ProductPrice,
    SalesChannel,
    SyncSettings,
)

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

log = logging.getLogger(__name__)

UUIDColumnType = Uuid[uuid.UUID]


class DecimalString(TypeDecorator[Decimal]):
    """Store decimals as text so no backend rounds them (SQLite has no DECIMAL)."""

    impl = String(64)
    cache_ok = True

    def process_bind_param(self, value: Decimal | None, dialect: Dialect) -> str | None:
        _ = dialect
        if value is None:
            return None
        return str(value)

    def process_result_value(self, value: str | None, dialect: Dialect) -> Decimal | None:
        _ = dialect
        if value is None:
            return None
        # non-numeric text raises decimal.InvalidOperation and aborts the load
        return Decimal(value)


class SyncSettingsType(TypeDecorator[SyncSettings]):
    impl = Text
    cache_ok = True

    def process_bind_param(self, value: SyncSettings | None, dialect: Dialect) -> str | None:
        _ = dialect
        if value is None:
            return None
        return json.dumps(value.as_mapping(), sort_keys=True, default=str)

    def process_result_value(self, value: str | None, dialect: Dialect) -> SyncSettings:
        _ = dialect
        if not value:
            return SyncSettings()
        try:
            loaded = json.loads(value)
        except json.JSONDecodeError:
            log.warning("Ignoring malformed sync settings %r", value)
            return SyncSettings()
        if not isinstance(loaded, dict):
            return SyncSettings()
        return SyncSettings.from_mapping(cast(dict[str, Any], loaded))


mapper_registry = orm.registry()
mapper_registry.metadata.naming_convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_label)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_label)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

# Catalog tables ----------------------------------------------------------------

integration_channel_table = Table(
    "integration_channel",
    mapper_registry.metadata,
    Column("id", UUIDColumnType, primary_key=True, default=uuid.uuid4),
    Column("name", String, nullable=False),
    Column("type", String(64), nullable=False),
    Column("enabled", Boolean, nullable=False, default=True),
    Column("sync_settings", SyncSettingsType(), nullable=False),
)

sales_channel_table = Table(
    "sales_channel",
    mapper_registry.metadata,
    Column("id", UUIDColumnType, primary_key=True, default=uuid.uuid4),
    Column("code", String(64), nullable=False, unique=True),
    Column("name", String, nullable=True),
    Column("currency", String(3), nullable=False),
    Column(
        "integration_channel_id",
        UUIDColumnType,
        ForeignKey("integration_channel.id", ondelete="SET NULL"),
        nullable=True,
        unique=True,
    ),
)

product_table = Table(
    "product",
    mapper_registry.metadata,
    Column("id", UUIDColumnType, primary_key=True, default=uuid.uuid4),
    Column("sku", String(255), nullable=False, unique=True),
    Column("name", String, nullable=True),
)

product_sales_channel_table = Table(
    "product_sales_channel",
    mapper_registry.metadata,
    Column(
        "product_id",
        UUIDColumnType,
        ForeignKey("product.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "sales_channel_id",
        UUIDColumnType,
        ForeignKey("sales_channel.id", ondelete="CASCADE"),
        primary_key=True,
    ),
)

# Pricing tables ----------------------------------------------------------------

product_price_table = Table(
    "product_price",
    mapper_registry.metadata,
    Column("id", UUIDColumnType, primary_key=True, default=uuid.uuid4),
    Column(
        "product_id", UUIDColumnType, ForeignKey("product.id", ondelete="CASCADE"), nullable=False
    ),
    Column("currency", String(3), nullable=False),
    Column("value", DecimalString(), nullable=False),
    UniqueConstraint("product_id", "currency", name="uq_product_price_slot"),
)

channel_price_table = Table(
    "channel_price",
    mapper_registry.metadata,
    Column("id", UUIDColumnType, primary_key=True, default=uuid.uuid4),
    Column(
        "product_id", UUIDColumnType, ForeignKey("product.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "sales_channel_id",
        UUIDColumnType,
        ForeignKey("sales_channel.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("currency", String(3), nullable=False),
    Column("value", DecimalString(), nullable=False),
    UniqueConstraint("product_id", "sales_channel_id", "currency", name="uq_channel_price_slot"),
)

external_price_id_table = Table(
    "external_price_id",
    mapper_registry.metadata,
    Column("id", UUIDColumnType, primary_key=True, default=uuid.uuid4),
    Column(
        "product_id", UUIDColumnType, ForeignKey("product.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "integration_channel_id",
        UUIDColumnType,
        ForeignKey("integration_channel.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("external_id", String, nullable=True),
    UniqueConstraint("product_id", "integration_channel_id", name="uq_external_price_id_owner"),
)


@cache
def start_mappers() -> orm.registry:
    """Configure SQLAlchemy mappers for the domain model."""

    log.info("Starting SQLAlchemy mappers")

    mapper_registry.map_imperatively(IntegrationChannel, integration_channel_table)

    mapper_registry.map_imperatively(
        SalesChannel,
        sales_channel_table,
        properties={
            "integration_channel": relationship(IntegrationChannel),
        },
    )

    mapper_registry.map_imperatively(
        Product,
        product_table,
        properties={
            "_sales_channels": relationship(
                SalesChannel,
                secondary=product_sales_channel_table,
            ),
            # prices attach themselves through the collection so the append cascades
            "_prices": relationship(
                ProductPrice,
                cascade="all, delete-orphan",
                overlaps="product",
            ),
            "_channel_prices": relationship(
                ChannelPrice,
                cascade="all, delete-orphan",
                overlaps="product",
            ),
            "_external_price_ids": relationship(
                ExternalPriceId,
                cascade="all, delete-orphan",
            ),
        },
    )

    mapper_registry.map_imperatively(
        ProductPrice,
        product_price_table,
        properties={
            "product": relationship(Product, overlaps="_prices"),
        },
    )

    mapper_registry.map_imperatively(
        ChannelPrice,
        channel_price_table,
        properties={
            "product": relationship(Product, overlaps="_channel_prices"),
            "sales_channel": relationship(SalesChannel),
        },
    )

    mapper_registry.map_imperatively(ExternalPriceId, external_price_id_table)

    configure_mappers()
    return mapper_registry


def create_all_tables(engine: Engine) -> None:
    """Create database tables for the mapped metadata."""

    log.info("Creating all tables")
    mapper_registry.metadata.create_all(engine)
