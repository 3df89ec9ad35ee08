"""Spell effect behaviors.

Each behavior runs its immediate part synchronously and returns the
asyncio.Task carrying its continuation (or None when there is nothing to
wait for). Every behavior ends by handing control back to the player:
the dispatcher has already disabled movement and marked the tool in use,
so a behavior that forgot to restore them would lock the player for good.
Restoration therefore sits in a ``finally`` block. If the synchronous part
raises before a continuation exists, the dispatcher restores control.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, assert_never

from spellcraft.core.exceptions import SpellEngineError
from spellcraft.core.logging import get_logger
from spellcraft.models.events import SpellBehavior


if TYPE_CHECKING:
    from spellcraft.core.config import SpellSettings
    from spellcraft.engine.interfaces import ObjectHelpers, World
    from spellcraft.models.events import SpellEvent, Targetable

logger = get_logger(__name__)


@dataclass
class BehaviorContext:
    """Everything a behavior needs for one cast."""

    event: SpellEvent
    world: World
    helpers: ObjectHelpers
    settings: SpellSettings

    @property
    def target(self) -> Targetable:
        if self.event.target is None:
            raise SpellEngineError("Behavior invoked for an event without a target")
        return self.event.target


def restore_control(world: World) -> None:
    """Give the player back movement and put the tool away."""
    world.stop_using_tool()
    world.enable_player_movement()
    logger.debug("Player control restored")


async def _resume_after(
    signal: Awaitable[Any],
    world: World,
    then: Callable[[], None] | None = None,
) -> None:
    try:
        await signal
        if then is not None:
            then()
    except Exception:
        logger.exception("Spell continuation failed")
        raise
    finally:
        restore_control(world)


# =============================================================================
# Behaviors
# =============================================================================


def disappear(ctx: BehaviorContext) -> asyncio.Task[None]:
    """Tween the target away, then destroy it and unlock what it guarded."""
    target = ctx.target
    identifier = target.identifier
    tween = ctx.helpers.apply_disappear_tween(identifier)

    def finish() -> None:
        ctx.helpers.destroy_object(identifier)
        if target.unlocks_object:
            ctx.helpers.unlock_object(target.unlocks_object)
        if target.unlocks_transition:
            ctx.helpers.unlock_transition(target.unlocks_transition)

    return asyncio.create_task(_resume_after(tween, ctx.world, finish))


def move(ctx: BehaviorContext) -> None:
    """Placeholder for relocating a target.

    Has no effect on the target yet; it only returns control right away
    so the cast does not leave the player locked.
    """
    restore_control(ctx.world)


def unlock(ctx: BehaviorContext) -> asyncio.Task[None]:
    """Open the target door now and return control after a delay."""
    ctx.helpers.open_door(ctx.target.identifier)
    delay = ctx.world.wait(ctx.settings.unlock_delay_ms)
    return asyncio.create_task(_resume_after(delay, ctx.world))


def perform_behavior(behavior: SpellBehavior, ctx: BehaviorContext) -> asyncio.Task[None] | None:
    """Run the behavior for ``behavior``.

    Returns:
        The continuation task, or None if control was restored already.
    """
    logger.debug("Performing spell behavior", behavior=str(behavior))
    match behavior:
        case SpellBehavior.DISAPPEAR:
            return disappear(ctx)
        case SpellBehavior.MOVE:
            move(ctx)
            return None
        case SpellBehavior.UNLOCK:
            return unlock(ctx)
        case _:
            assert_never(behavior)


__all__ = [
    "BehaviorContext",
    "restore_control",
    "disappear",
    "move",
    "unlock",
    "perform_behavior",
]
