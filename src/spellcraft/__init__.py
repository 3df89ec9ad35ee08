"""spellcraft - requirement-gated spell dispatch for 2D tile worlds.

A player casts at a map object; spellcraft decides whether the cast is
allowed by the author's world state and, if so, runs the effect and hands
control back to the player when it finishes.

Example:
    >>> from spellcraft import SpellDispatcher, SpellEvent, WorldState
    >>>
    >>> world_state = WorldState.from_mapping(raw_world_state)
    >>> dispatcher = SpellDispatcher(make_helpers)
    >>> event = SpellEvent.model_validate({"target": tiled_object.properties})
    >>> result = await dispatcher.handle(event, world, world_state)

Modules:
    core: Configuration, logging, and base exceptions.
    models: Pydantic models for events and world state.
    engine: Naming, requirement evaluation, behaviors and dispatch.
"""

from __future__ import annotations

# Core
from spellcraft.core.config import SpellSettings, get_settings
from spellcraft.core.exceptions import SpellcraftError, UnknownSpellTypeError
from spellcraft.core.logging import configure_logging, get_logger

# Models
from spellcraft.models import (
    EntityConfig,
    RequirementContext,
    SpellBehavior,
    SpellEvent,
    SpellRule,
    StateSection,
    Targetable,
    WorldState,
)

# Engine
from spellcraft.engine import (
    CastStatus,
    SpellCastResult,
    SpellDispatcher,
    all_requirements_met,
    handle_spells,
    resolve_state_section_name,
)


__version__ = "0.1.0"
__all__ = [
    "__version__",
    # Core
    "SpellcraftError",
    "UnknownSpellTypeError",
    "SpellSettings",
    "get_settings",
    "configure_logging",
    "get_logger",
    # Models
    "EntityConfig",
    "RequirementContext",
    "SpellBehavior",
    "SpellEvent",
    "SpellRule",
    "StateSection",
    "Targetable",
    "WorldState",
    # Engine
    "CastStatus",
    "SpellCastResult",
    "SpellDispatcher",
    "all_requirements_met",
    "handle_spells",
    "resolve_state_section_name",
]
