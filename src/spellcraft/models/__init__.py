"""Pydantic models for cast events and author world state."""

from __future__ import annotations

from spellcraft.models.events import SpellBehavior, SpellEvent, Targetable
from spellcraft.models.world_state import (
    SECTION_PREFIX,
    EntityConfig,
    Hook,
    Requirement,
    RequirementContext,
    SpellRule,
    StateSection,
    WorldState,
)


__all__ = [
    # Events
    "SpellBehavior",
    "SpellEvent",
    "Targetable",
    # World state
    "SECTION_PREFIX",
    "EntityConfig",
    "Hook",
    "Requirement",
    "RequirementContext",
    "SpellRule",
    "StateSection",
    "WorldState",
]
