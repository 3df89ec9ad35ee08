"""Cast events and spell targets.

A SpellEvent is what the input layer hands the engine when the player
casts at something. Its target mirrors the custom properties authored on
a Tiled object, so both snake_case and camelCase names are accepted.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from spellcraft.core.exceptions import UnknownSpellTypeError


class SpellBehavior(StrEnum):
    """The closed set of spell effects a target can request."""

    DISAPPEAR = "disappear"
    """Tween the target away, destroy it, then unlock whatever it guarded."""

    MOVE = "move"
    """Reserved for relocating a target. Currently does nothing."""

    UNLOCK = "unlock"
    """Open a door immediately and return control after a short delay."""

    @classmethod
    def parse(cls, value: str) -> SpellBehavior:
        """Resolve a raw spell type name.

        Raises:
            UnknownSpellTypeError: If no behavior is registered under value.
        """
        try:
            return cls(value)
        except ValueError as exc:
            raise UnknownSpellTypeError(
                f"No spell behavior registered for {value!r}",
                spell_type=value,
                details={"known": [member.value for member in cls]},
            ) from exc


class Targetable(BaseModel):
    """An entity or map object that may receive a spell.

    Attributes:
        spellable: Gates all spell processing for this target.
        spell_type: Behavior requested when a spell hits the target.
        group: Shared identifier for multi-object targets (preferred).
        key: Individual object identifier.
        unlocks_object: Object unlocked once the target disappears.
        unlocks_transition: Map transition unlocked once the target disappears.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    spellable: bool = False
    spell_type: SpellBehavior | None = None
    group: str | None = None
    key: str | None = None
    unlocks_object: str | None = None
    unlocks_transition: str | None = None

    @property
    def identifier(self) -> str | None:
        """Key used for world state lookups and object helpers."""
        return self.group or self.key


class SpellEvent(BaseModel):
    """A single cast action."""

    model_config = ConfigDict(extra="ignore")

    target: Targetable | None = Field(
        default=None,
        description="What the spell was cast at, if anything",
    )

    @property
    def is_spellable(self) -> bool:
        return self.target is not None and self.target.spellable


__all__ = [
    "SpellBehavior",
    "Targetable",
    "SpellEvent",
]
