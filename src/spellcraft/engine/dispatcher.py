"""Spell dispatch: from a cast event to a running effect.

The dispatcher is the entry point for the input layer. For each event it

1. ignores targets that are not spellable,
2. resolves the active world state section once,
3. asks the requirement evaluator whether the cast may proceed,
4. locks player movement, marks the tool in use and runs the behavior.

Casts arriving while a previous cast still holds the player lock are
refused under the default ``reject`` overlap policy. With ``allow`` they
proceed and re-lock, as the engine always did before the policy existed.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

from spellcraft.core.config import SpellSettings, get_settings
from spellcraft.core.exceptions import SpellEngineError, UnknownSpellTypeError
from spellcraft.core.logging import get_logger
from spellcraft.engine.behaviors import BehaviorContext, perform_behavior, restore_control
from spellcraft.engine.naming import resolve_state_section_name
from spellcraft.engine.requirements import all_requirements_met


if TYPE_CHECKING:
    from spellcraft.engine.interfaces import HelperFactory, World
    from spellcraft.models.events import SpellBehavior, SpellEvent
    from spellcraft.models.world_state import WorldState

logger = get_logger(__name__)


class CastStatus(StrEnum):
    """Outcome of handing an event to the dispatcher."""

    NOT_SPELLABLE = "not_spellable"
    """Target missing or not spellable; nothing happened."""

    REQUIREMENTS_UNMET = "requirements_unmet"
    """A requirement failed; the world was not touched."""

    BUSY = "busy"
    """Refused because a previous cast still holds the player lock."""

    DISPATCHED = "dispatched"
    """Player locked and behavior started."""


@dataclass
class SpellCastResult:
    """Result of processing one cast event.

    Attributes:
        status: What the dispatcher did.
        section_name: World state section consulted, if resolved.
        entity_key: Target group or key.
        behavior: Behavior started, when dispatched.
        completion: Task that restores player control, when the behavior
            has a continuation. Callers must await it (or add a done
            callback that reads its result); a continuation failure is
            logged and then re-raised through this task.
    """

    status: CastStatus
    section_name: str | None = None
    entity_key: str | None = None
    behavior: SpellBehavior | None = None
    completion: asyncio.Task[None] | None = None

    @property
    def dispatched(self) -> bool:
        return self.status == CastStatus.DISPATCHED


class SpellDispatcher:
    """Resolves cast events against world state and runs their effects.

    Behaviors schedule their continuations on the running event loop, so
    ``handle`` and ``run_spell`` must be called from inside one.

    Example:
        >>> dispatcher = SpellDispatcher(make_helpers)
        >>> result = await dispatcher.handle(event, world, world_state)
        >>> if result.completion is not None:
        ...     await result.completion
    """

    def __init__(
        self,
        helper_factory: HelperFactory,
        *,
        settings: SpellSettings | None = None,
    ) -> None:
        self.helper_factory = helper_factory
        self.settings = settings or get_settings()
        self._active: asyncio.Task[None] | None = None

    @property
    def busy(self) -> bool:
        """Whether a cast is still waiting to restore player control."""
        return self._active is not None and not self._active.done()

    async def handle(
        self,
        event: SpellEvent,
        world: World,
        world_state: WorldState,
    ) -> SpellCastResult:
        """Process one cast event end to end."""
        if not event.is_spellable:
            return SpellCastResult(status=CastStatus.NOT_SPELLABLE)

        section_name = resolve_state_section_name(world)
        return self.run_spell(event, world, world_state, section_name)

    def run_spell(
        self,
        event: SpellEvent,
        world: World,
        world_state: WorldState,
        section_name: str,
    ) -> SpellCastResult:
        """Check requirements and, if they pass, lock the player and cast.

        Must be called from inside a running event loop, since behaviors
        schedule their continuations on it.

        Raises:
            SpellEngineError: If no event loop is running or the event has
                no target.
            UnknownSpellTypeError: If the target carries no spell type.
        """
        try:
            asyncio.get_running_loop()
        except RuntimeError as exc:
            raise SpellEngineError("run_spell requires a running event loop") from exc

        target = event.target
        if target is None:
            raise SpellEngineError(
                "Cannot run a spell for an event without a target",
                details={"section": section_name},
            )
        entity_key = target.identifier
        log = logger.bind(section=section_name, entity=entity_key)

        if target.spell_type is None:
            raise UnknownSpellTypeError(
                "Spellable target has no spell type",
                details={"entity": entity_key, "section": section_name},
            )

        if self.busy and self.settings.overlap_policy == "reject":
            log.info("Cast refused while another spell resolves")
            return SpellCastResult(
                status=CastStatus.BUSY,
                section_name=section_name,
                entity_key=entity_key,
            )

        met = all_requirements_met(
            entity_key,
            event,
            world,
            world_state,
            section_name,
            fail_open=self.settings.fail_open_on_missing_config,
        )
        if not met:
            log.debug("Spell requirements not met", spell_type=str(target.spell_type))
            return SpellCastResult(
                status=CastStatus.REQUIREMENTS_UNMET,
                section_name=section_name,
                entity_key=entity_key,
            )

        context = BehaviorContext(
            event=event,
            world=world,
            helpers=self.helper_factory(event, world, world_state),
            settings=self.settings,
        )

        try:
            world.disable_player_movement()
            world.use_tool(self.settings.tool_name)
            completion = perform_behavior(target.spell_type, context)
        except Exception:
            log.exception("Spell behavior failed to start")
            restore_control(world)
            raise
        self._active = completion
        log.debug("Spell dispatched", behavior=str(target.spell_type))

        return SpellCastResult(
            status=CastStatus.DISPATCHED,
            section_name=section_name,
            entity_key=entity_key,
            behavior=target.spell_type,
            completion=completion,
        )


async def handle_spells(
    event: SpellEvent,
    world: World,
    world_state: WorldState,
    helper_factory: HelperFactory,
    *,
    settings: SpellSettings | None = None,
) -> SpellCastResult:
    """Handle a single cast with a fresh dispatcher.

    One-shot dispatchers cannot see earlier casts, so the overlap policy
    only applies when a SpellDispatcher is reused across events.
    """
    dispatcher = SpellDispatcher(helper_factory, settings=settings)
    return await dispatcher.handle(event, world, world_state)


__all__ = [
    "CastStatus",
    "SpellCastResult",
    "SpellDispatcher",
    "handle_spells",
]
