"""Ports for inspecting the pending changes of a unit of work."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence


@dataclass(frozen=True, slots=True)
class FieldChange:
    """Old and new value of one changed field."""

    old: object
    new: object


@dataclass(frozen=True, slots=True)
class ChangeSet:
    """Changed fields of one pending record.

    ``fields`` is empty for records that are about to be inserted.
    """

    inserted: bool = False
    fields: Mapping[str, FieldChange] = field(default_factory=dict[str, FieldChange])

    @classmethod
    def insertion(cls) -> ChangeSet:
        return cls(inserted=True)

    @classmethod
    def update(cls, **changes: tuple[object, object]) -> ChangeSet:
        return cls(
            fields={name: FieldChange(old=old, new=new) for name, (old, new) in changes.items()}
        )


@runtime_checkable
class TransactionInspector(Protocol):
    """Read-only view of the records a flush is about to write."""

    def scheduled_insertions(self) -> Sequence[object]: ...

    def scheduled_updates(self) -> Sequence[object]: ...

    def change_set(self, entity: object) -> ChangeSet: ...
