"""Spell engine for spellcraft.

Submodules:
    interfaces: Protocols for the world and object helpers
    naming: World state section name resolution
    requirements: Rule lookup and requirement evaluation
    behaviors: Spell effect behaviors
    dispatcher: Event entry point and spell dispatch

Example:
    >>> from spellcraft.engine import SpellDispatcher
    >>> dispatcher = SpellDispatcher(make_helpers)
    >>> result = await dispatcher.handle(event, world, world_state)
"""

from __future__ import annotations

# =============================================================================
# Naming
# =============================================================================
from spellcraft.engine.naming import (
    format_world_state_name,
    resolve_state_section_name,
)

# =============================================================================
# Requirements
# =============================================================================
from spellcraft.engine.requirements import (
    Found,
    MissingEntities,
    MissingEntity,
    MissingSection,
    MissingSpellRule,
    RuleLookup,
    all_requirements_met,
    evaluate_requirements,
    lookup_spell_rule,
)

# =============================================================================
# Behaviors & Dispatch
# =============================================================================
from spellcraft.engine.behaviors import (
    BehaviorContext,
    perform_behavior,
    restore_control,
)
from spellcraft.engine.dispatcher import (
    CastStatus,
    SpellCastResult,
    SpellDispatcher,
    handle_spells,
)
from spellcraft.engine.interfaces import HelperFactory, ObjectHelpers, World


__all__ = [
    # Interfaces
    "World",
    "ObjectHelpers",
    "HelperFactory",
    # Naming
    "format_world_state_name",
    "resolve_state_section_name",
    # Requirements
    "Found",
    "MissingSection",
    "MissingEntities",
    "MissingEntity",
    "MissingSpellRule",
    "RuleLookup",
    "lookup_spell_rule",
    "evaluate_requirements",
    "all_requirements_met",
    # Behaviors
    "BehaviorContext",
    "perform_behavior",
    "restore_control",
    # Dispatch
    "CastStatus",
    "SpellCastResult",
    "SpellDispatcher",
    "handle_spells",
]
