"""Actor-session gates."""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

_current_actor: ContextVar[str | None] = ContextVar("pricesync_current_actor", default=None)


@contextmanager
def authenticated_actor(name: str) -> Iterator[str]:
    """Mark the code inside the block as acting on behalf of ``name``."""

    if not name.strip():
        raise ValueError("actor name must not be blank")
    token = _current_actor.set(name)
    try:
        yield name
    finally:
        _current_actor.reset(token)


def current_actor() -> str | None:
    return _current_actor.get()


class ContextActorGate:
    """Open while inside an ``authenticated_actor`` block of the current context."""

    def has_authenticated_actor(self) -> bool:
        return current_actor() is not None


@dataclass(frozen=True, slots=True)
class StaticActorGate:
    authenticated: bool

    def has_authenticated_actor(self) -> bool:
        return self.authenticated
