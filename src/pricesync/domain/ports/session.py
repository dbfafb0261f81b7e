"""Port for the actor-session gate."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ActorGate(Protocol):
    """Tells whether the current change was made by an authenticated actor.

    Changes written by inbound synchronisation run without an actor and must not be
    echoed back to the integration they came from.
    """

    def has_authenticated_actor(self) -> bool: ...
