"""Expose a flushing session's pending changes through the transaction port."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import inspect

from pricesync.domain.ports.changes import ChangeSet, FieldChange

if TYPE_CHECKING:
    from sqlalchemy.orm import InstanceState, Session


class SqlAlchemyTransactionInspector:
    """Reads ``session.new``/``session.dirty`` and column history.

    Only valid while the session is flushing (``before_flush``); afterwards the
    history has been reset.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def scheduled_insertions(self) -> list[object]:
        return list(self.session.new)

    def scheduled_updates(self) -> list[object]:
        # dirty also holds objects whose attributes were set to their current value
        return [
            entity
            for entity in self.session.dirty
            if self.session.is_modified(entity, include_collections=False)
        ]

    def change_set(self, entity: object) -> ChangeSet:
        state: InstanceState[object] = inspect(entity)
        if state.transient or state.pending:
            return ChangeSet.insertion()

        # foreign keys only get history during the flush, so many-to-one
        # reassignments are reported under the relationship name
        keys = [column_attr.key for column_attr in state.mapper.column_attrs]
        keys.extend(rel.key for rel in state.mapper.relationships if not rel.uselist)

        fields: dict[str, FieldChange] = {}
        for key in keys:
            history = state.attrs[key].history
            if not history.has_changes():
                continue
            old = history.deleted[0] if history.deleted else None
            new = history.added[0] if history.added else None
            fields[key] = FieldChange(old=old, new=new)
        return ChangeSet(fields=fields)
