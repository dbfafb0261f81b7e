"""Decide whether a pending price change has to be propagated outward."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import TYPE_CHECKING, Final

from pricesync.domain.model import to_decimal

if TYPE_CHECKING:
    from pricesync.domain.ports.changes import ChangeSet

SYNC_FIELDS: Final[frozenset[str]] = frozenset({"value", "currency"})
NUMERIC_FIELDS: Final[frozenset[str]] = frozenset({"value"})


def is_sync_required(change_set: ChangeSet) -> bool:
    """Return whether ``change_set`` touches a synchronised field.

    New records always qualify. For updates only ``value`` (compared as a number)
    and ``currency`` (compared as an exact string) count.
    """

    if change_set.inserted or not change_set.fields:
        return True

    for name, change in change_set.fields.items():
        if name not in SYNC_FIELDS:
            continue
        old, new = change.old, change.new
        if name in NUMERIC_FIELDS:
            old, new = _as_number(old), _as_number(new)
        if old != new:
            return True
    return False


def _as_number(value: object) -> object:
    if isinstance(value, bool):
        return value
    if isinstance(value, Decimal | int | float | str):
        try:
            return to_decimal(value)
        except InvalidOperation:
            return value
    return value
