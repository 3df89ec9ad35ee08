"""Tests for world state models."""

from __future__ import annotations

import pydantic
import pytest

from spellcraft.core.exceptions import ValidationError
from spellcraft.models import EntityConfig, SpellRule, StateSection, WorldState


def always(ctx: object) -> bool:
    return True


class TestSpellRule:
    """Tests for SpellRule."""

    def test_defaults(self) -> None:
        rule = SpellRule()
        assert rule.requirements == {}
        assert rule.success_actions == {}
        assert rule.failure_actions == {}

    def test_requirement_order_preserved(self) -> None:
        rule = SpellRule.model_validate(
            {"requirements": {"zeta": always, "alpha": always, "mid": always}}
        )
        assert list(rule.requirements) == ["zeta", "alpha", "mid"]

    def test_camel_case_action_names(self) -> None:
        rule = SpellRule.model_validate(
            {
                "requirements": {"a": always},
                "successActions": {"a": always},
                "failureActions": {"a": always},
            }
        )
        assert rule.success_actions["a"] is always
        assert rule.failure_actions["a"] is always

    def test_non_callable_requirement_rejected(self) -> None:
        with pytest.raises(pydantic.ValidationError):
            SpellRule.model_validate({"requirements": {"a": "not callable"}})


class TestWorldState:
    """Tests for WorldState construction and lookup."""

    def test_from_mapping_splits_sections_and_flags(self) -> None:
        world_state = WorldState.from_mapping(
            {
                "insideCave1": {"entities": {"door": {"spell": {}}}},
                "insideTower": StateSection(),
                "hasWand": True,
                "insideCount": 3,
            }
        )

        assert set(world_state.sections) == {"insideCave1", "insideTower"}
        assert world_state.flags == {"hasWand": True, "insideCount": 3}
        assert isinstance(world_state.section("insideCave1").entities["door"], EntityConfig)

    def test_section_without_entities(self) -> None:
        world_state = WorldState.from_mapping({"insideCave1": {}})
        assert world_state.section("insideCave1").entities is None

    def test_missing_section(self) -> None:
        assert WorldState().section("insideNowhere") is None

    def test_malformed_section(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            WorldState.from_mapping({"insideCave1": {"entities": ["door"]}})

        assert exc_info.value.details["field_name"] == "insideCave1"

    def test_flags_are_mutable(self) -> None:
        world_state = WorldState.from_mapping({"mana": 2})
        world_state.flags["mana"] -= 1
        assert world_state.flags["mana"] == 1
