"""Pytest configuration and shared fixtures.

Provides recording fakes for the world and object helpers. Both write to
one shared call log so tests can assert on the order of side effects
across collaborators.
"""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, Any, Callable

import pytest
import structlog


if TYPE_CHECKING:
    from collections.abc import Generator


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_settings_cache() -> Generator[None, None, None]:
    """Reset the settings cache before and after each test."""
    from spellcraft.core.config import clear_settings_cache

    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture(autouse=True)
def reset_structlog() -> Generator[None, None, None]:
    """Undo any logging configuration a test applied."""
    yield
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()


@pytest.fixture
def settings() -> Any:
    """Settings with defaults, independent of the environment."""
    from spellcraft.core.config import SpellSettings

    return SpellSettings(_env_file=None)


# =============================================================================
# Collaborator Fakes
# =============================================================================


class FakeWorld:
    """World double that records every call.

    ``wait`` hands back a future the test resolves explicitly.
    """

    def __init__(
        self,
        calls: list[tuple[Any, ...]],
        *,
        level_name: str = "forest_clearing",
        map_name: str = "default",
    ) -> None:
        self.calls = calls
        self.level_name = level_name
        self.map_name = map_name
        self.movement_enabled = True
        self.tool: str | None = None
        self.waits: list[asyncio.Future[None]] = []

    def get_current_level_name(self) -> str:
        self.calls.append(("get_current_level_name",))
        return self.level_name

    def get_current_map_name(self) -> str:
        self.calls.append(("get_current_map_name",))
        return self.map_name

    def disable_player_movement(self) -> None:
        self.calls.append(("disable_player_movement",))
        self.movement_enabled = False

    def enable_player_movement(self) -> None:
        self.calls.append(("enable_player_movement",))
        self.movement_enabled = True

    def use_tool(self, name: str) -> None:
        self.calls.append(("use_tool", name))
        self.tool = name

    def stop_using_tool(self) -> None:
        self.calls.append(("stop_using_tool",))
        self.tool = None

    def wait(self, ms: int) -> asyncio.Future[None]:
        self.calls.append(("wait", ms))
        future: asyncio.Future[None] = asyncio.get_running_loop().create_future()
        self.waits.append(future)
        return future


class FakeHelpers:
    """Object helper double. Tweens are futures the test resolves."""

    def __init__(self, calls: list[tuple[Any, ...]], *, fail_destroy: bool = False) -> None:
        self.calls = calls
        self.fail_destroy = fail_destroy
        self.tweens: list[asyncio.Future[None]] = []

    def apply_disappear_tween(self, key: str) -> asyncio.Future[None]:
        self.calls.append(("apply_disappear_tween", key))
        future: asyncio.Future[None] = asyncio.get_running_loop().create_future()
        self.tweens.append(future)
        return future

    def destroy_object(self, key: str) -> None:
        self.calls.append(("destroy_object", key))
        if self.fail_destroy:
            raise RuntimeError(f"cannot destroy {key}")

    def unlock_object(self, key: str) -> None:
        self.calls.append(("unlock_object", key))

    def unlock_transition(self, key: str) -> None:
        self.calls.append(("unlock_transition", key))

    def open_door(self, key: str) -> None:
        self.calls.append(("open_door", key))


@pytest.fixture
def calls() -> list[tuple[Any, ...]]:
    """Shared, ordered call log."""
    return []


@pytest.fixture
def world(calls: list[tuple[Any, ...]]) -> FakeWorld:
    """World in the forest clearing level, default map."""
    return FakeWorld(calls)


@pytest.fixture
def make_world(calls: list[tuple[Any, ...]]) -> Callable[..., FakeWorld]:
    """Factory for worlds on other levels or maps."""

    def factory(**kwargs: Any) -> FakeWorld:
        return FakeWorld(calls, **kwargs)

    return factory


@pytest.fixture
def helpers(calls: list[tuple[Any, ...]]) -> FakeHelpers:
    return FakeHelpers(calls)


@pytest.fixture
def failing_helpers(calls: list[tuple[Any, ...]]) -> FakeHelpers:
    return FakeHelpers(calls, fail_destroy=True)


@pytest.fixture
def helper_factory(helpers: FakeHelpers) -> Callable[..., FakeHelpers]:
    """Helper factory handing every cast the same recording helpers."""
    return lambda event, world, world_state: helpers


# =============================================================================
# Model Fixtures
# =============================================================================


@pytest.fixture
def make_event() -> Callable[..., Any]:
    """Build a SpellEvent from target properties."""
    from spellcraft.models import SpellEvent

    def factory(**target: Any) -> Any:
        target.setdefault("spellable", True)
        return SpellEvent.model_validate({"target": target})

    return factory


@pytest.fixture
def boulder_world_state(calls: list[tuple[Any, ...]]) -> Any:
    """World state where the boulder needs a wand and some mana."""
    from spellcraft.models import WorldState

    def has_wand(ctx: Any) -> bool:
        calls.append(("requirement", "hasWand"))
        return bool(ctx.world_state.flags.get("hasWand"))

    def has_mana(ctx: Any) -> bool:
        calls.append(("requirement", "hasMana"))
        return ctx.world_state.flags.get("mana", 0) > 0

    def spend_mana(ctx: Any) -> None:
        calls.append(("success", "hasMana"))
        ctx.world_state.flags["mana"] -= 1

    return WorldState.from_mapping(
        {
            "insideForestClearing": {
                "entities": {
                    "boulder": {
                        "spell": {
                            "disappear": {
                                "requirements": {"hasWand": has_wand, "hasMana": has_mana},
                                "successActions": {"hasMana": spend_mana},
                                "failureActions": {
                                    "hasWand": lambda ctx: calls.append(("failure", "hasWand")),
                                    "hasMana": lambda ctx: calls.append(("failure", "hasMana")),
                                },
                            }
                        }
                    }
                }
            },
            "hasWand": True,
            "mana": 1,
        }
    )
