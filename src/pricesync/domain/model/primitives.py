"""Domain primitives: scalar aliases + small conversions."""

from __future__ import annotations

from decimal import Decimal

type Sku = str
type CurrencyCode = str
type Amount = Decimal | int | float | str


def to_decimal(value: Amount) -> Decimal:
    """Coerce ``value`` into a ``Decimal``.

    Floats go through ``str`` so ``10.1`` stays ``Decimal("10.1")`` rather than the
    binary expansion. Raises ``decimal.InvalidOperation`` for non-numeric strings.
    """

    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)
