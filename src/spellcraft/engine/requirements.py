"""Requirement evaluation for spell casts.

Looking up the rule for an entity/spell pair yields a RuleLookup: either
Found with the rule, or one of the Missing* variants naming the absent
node. Missing configuration is not fatal. The evaluator warns and returns
the configured fail-open verdict (True by default) so a typo in the world
state never silently blocks play.

Requirements run strictly in insertion order. Each one fires its success
or failure hook (when defined) before the next is evaluated, and the first
failing requirement stops evaluation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, assert_never

from spellcraft.core.config import get_settings
from spellcraft.core.logging import get_logger
from spellcraft.models.world_state import RequirementContext, SpellRule


if TYPE_CHECKING:
    from spellcraft.engine.interfaces import World
    from spellcraft.models.events import SpellEvent
    from spellcraft.models.world_state import WorldState

logger = get_logger(__name__)


# =============================================================================
# Lookup Results
# =============================================================================


@dataclass(frozen=True)
class Found:
    """Rule located for the entity/spell pair."""

    rule: SpellRule


@dataclass(frozen=True)
class MissingSection:
    """No world state section for the active area."""

    section_name: str

    def describe(self) -> str:
        return (
            f'No "{self.section_name}" property found! '
            "Make sure one exists in your world state."
        )


@dataclass(frozen=True)
class MissingEntities:
    """The section has no entities mapping."""

    section_name: str

    def describe(self) -> str:
        return f'No "{self.section_name}.entities" property could be found in your world state!'


@dataclass(frozen=True)
class MissingEntity:
    """The target's group/key is not listed under the section's entities."""

    section_name: str
    entity_key: str | None

    def describe(self) -> str:
        return (
            f'No "{self.entity_key}" entity could be found in "{self.section_name}.entities" '
            "of your world state! Make sure it shares the name of the Tiled object's "
            '"group" property (or "key" property if you\'re not using "group").'
        )


@dataclass(frozen=True)
class MissingSpellRule:
    """The entity has no rule for the cast spell type."""

    section_name: str
    entity_key: str | None
    spell_type: str | None

    def describe(self) -> str:
        return (
            f'No "{self.spell_type}" property found in '
            f'"{self.section_name}.entities["{self.entity_key}"].spell"!'
        )


Missing = MissingSection | MissingEntities | MissingEntity | MissingSpellRule
RuleLookup = Found | Missing


# =============================================================================
# Lookup & Evaluation
# =============================================================================


def lookup_spell_rule(
    entity_key: str | None,
    spell_type: str | None,
    world_state: WorldState,
    section_name: str,
) -> RuleLookup:
    """Find the rule for an entity/spell pair in the named section."""
    section = world_state.section(section_name)
    if section is None:
        return MissingSection(section_name)

    if section.entities is None:
        return MissingEntities(section_name)

    entity = section.entities.get(entity_key) if entity_key is not None else None
    if entity is None:
        return MissingEntity(section_name, entity_key)

    rule = entity.spell.get(spell_type) if spell_type is not None else None
    if rule is None:
        return MissingSpellRule(section_name, entity_key, spell_type)

    return Found(rule)


def evaluate_requirements(rule: SpellRule, context: RequirementContext) -> bool:
    """Run a rule's requirements in order, firing hooks as they resolve.

    Returns:
        True if every requirement passed, False at the first failure.
    """
    for name, predicate in rule.requirements.items():
        met = bool(predicate(context))
        hook = rule.success_actions.get(name) if met else rule.failure_actions.get(name)
        if hook is not None:
            hook(context)

        logger.debug("Requirement evaluated", requirement=name, met=met)

        if not met:
            return False

    return True


def all_requirements_met(
    entity_key: str | None,
    event: SpellEvent,
    world: World,
    world_state: WorldState,
    section_name: str,
    *,
    fail_open: bool | None = None,
) -> bool:
    """Decide whether the cast on ``entity_key`` may proceed.

    Args:
        entity_key: Target group, or key when no group is set.
        event: The cast event.
        world: Live world handle, passed through to predicates.
        world_state: Author world state.
        section_name: Active section, resolved once per event.
        fail_open: Verdict for missing configuration. Defaults to the
            ``fail_open_on_missing_config`` setting.

    Returns:
        The verdict. Missing configuration logs one warning and yields
        ``fail_open``.
    """
    if fail_open is None:
        fail_open = get_settings().fail_open_on_missing_config

    spell_type = event.target.spell_type if event.target is not None else None
    lookup = lookup_spell_rule(entity_key, spell_type, world_state, section_name)

    match lookup:
        case Found(rule=rule):
            context = RequirementContext(event=event, world=world, world_state=world_state)
            return evaluate_requirements(rule, context)
        case MissingSection() | MissingEntities() | MissingEntity() | MissingSpellRule():
            logger.warning(
                lookup.describe(),
                section=section_name,
                entity=entity_key,
                spell_type=spell_type,
                fail_open=fail_open,
            )
            return fail_open
        case _:
            assert_never(lookup)


__all__ = [
    "Found",
    "MissingSection",
    "MissingEntities",
    "MissingEntity",
    "MissingSpellRule",
    "Missing",
    "RuleLookup",
    "lookup_spell_rule",
    "evaluate_requirements",
    "all_requirements_met",
]
