"""
Base building block:
identity semantics shared by all persisted entities.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from uuid import UUID, uuid4


def new_id() -> UUID:
    return uuid4()


@dataclass(eq=False, kw_only=True)
class Entity:
    """Internal identity exists immediately in the domain.

    ``eq=False`` keeps the default identity-based ``__eq__``/``__hash__``: two
    entity objects are the same record only if they are the same object.
    """

    id: UUID = field(default_factory=new_id)
