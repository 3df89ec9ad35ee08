"""Author-provided world state describing spell rules per area.

The world state is keyed by section name (``inside`` + area name). Each
section lists entities by their Tiled ``group``/``key`` and, per spell
type, the ordered requirements that gate the spell:

    {
        "insideForestClearing": {
            "entities": {
                "boulder": {
                    "spell": {
                        "disappear": {
                            "requirements": {"hasWand": has_wand},
                            "failureActions": {"hasWand": say_need_wand},
                        }
                    }
                }
            }
        },
        "playerHasWand": False,
    }

Anything that is not a section is kept as free-form ``flags`` which
predicates read and hooks are free to mutate.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from spellcraft.core.exceptions import ValidationError


if TYPE_CHECKING:
    from spellcraft.engine.interfaces import World
    from spellcraft.models.events import SpellEvent


SECTION_PREFIX = "inside"


@dataclass(frozen=True)
class RequirementContext:
    """Argument handed to every requirement predicate and hook."""

    event: SpellEvent
    world: World
    world_state: WorldState


Requirement = Callable[[RequirementContext], bool]
Hook = Callable[[RequirementContext], Any]


class SpellRule(BaseModel):
    """Requirements and hooks for one spell type on one entity.

    Attributes:
        requirements: Named predicates, evaluated in insertion order.
        success_actions: Hooks fired when the same-named requirement passes.
        failure_actions: Hooks fired when the same-named requirement fails.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    requirements: dict[str, Requirement] = Field(default_factory=dict)
    success_actions: dict[str, Hook] = Field(default_factory=dict)
    failure_actions: dict[str, Hook] = Field(default_factory=dict)


class EntityConfig(BaseModel):
    """Spell rules for a single entity, keyed by spell type."""

    spell: dict[str, SpellRule] = Field(default_factory=dict)


class StateSection(BaseModel):
    """Configuration block for one map or level."""

    entities: dict[str, EntityConfig] | None = None


class WorldState(BaseModel):
    """Sections keyed by name plus free-form author flags.

    Attributes:
        sections: Spell configuration per area.
        flags: Any other author data. Hooks may mutate it.
    """

    sections: dict[str, StateSection] = Field(default_factory=dict)
    flags: dict[str, Any] = Field(default_factory=dict)

    def section(self, name: str) -> StateSection | None:
        return self.sections.get(name)

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> WorldState:
        """Build a WorldState from the raw author mapping.

        Keys starting with ``inside`` whose values are mappings become
        sections; everything else is kept as flags.

        Raises:
            ValidationError: If a section cannot be interpreted.
        """
        sections: dict[str, StateSection] = {}
        flags: dict[str, Any] = {}

        for name, value in raw.items():
            if name.startswith(SECTION_PREFIX) and isinstance(value, StateSection):
                sections[name] = value
            elif name.startswith(SECTION_PREFIX) and isinstance(value, Mapping):
                try:
                    sections[name] = StateSection.model_validate(value)
                except PydanticValidationError as exc:
                    raise ValidationError(
                        f"World state section {name!r} is malformed",
                        field_name=name,
                        details={"errors": exc.error_count()},
                    ) from exc
            else:
                flags[name] = value

        return cls(sections=sections, flags=flags)


__all__ = [
    "SECTION_PREFIX",
    "RequirementContext",
    "Requirement",
    "Hook",
    "SpellRule",
    "EntityConfig",
    "StateSection",
    "WorldState",
]
