"""Protocols for the collaborators the engine drives but does not own."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Any, Protocol


if TYPE_CHECKING:
    from spellcraft.models.events import SpellEvent
    from spellcraft.models.world_state import WorldState


class World(Protocol):
    """Live handle on the running game world."""

    def get_current_level_name(self) -> str: ...

    def get_current_map_name(self) -> str: ...

    def disable_player_movement(self) -> None: ...

    def enable_player_movement(self) -> None: ...

    def use_tool(self, name: str) -> None: ...

    def stop_using_tool(self) -> None: ...

    def wait(self, ms: int) -> Awaitable[Any]:
        """Return an awaitable that resolves after ``ms`` milliseconds."""
        ...


class ObjectHelpers(Protocol):
    """Animation and object lifecycle primitives for the current cast."""

    def apply_disappear_tween(self, key: str) -> Awaitable[Any]:
        """Start the disappear animation; the awaitable resolves when it ends."""
        ...

    def destroy_object(self, key: str) -> None: ...

    def unlock_object(self, key: str) -> None: ...

    def unlock_transition(self, key: str) -> None: ...

    def open_door(self, key: str) -> None: ...


HelperFactory = Callable[["SpellEvent", World, "WorldState"], ObjectHelpers]


__all__ = [
    "World",
    "ObjectHelpers",
    "HelperFactory",
]
