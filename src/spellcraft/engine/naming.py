"""Resolve the world state section name for the active area.

World state sections follow the ``inside`` + CamelCasedName convention,
derived from the level name when the map is ``default`` and from the map
name otherwise.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from spellcraft.core.logging import get_logger
from spellcraft.models.world_state import SECTION_PREFIX


if TYPE_CHECKING:
    from spellcraft.engine.interfaces import World

logger = get_logger(__name__)

DEFAULT_MAP_NAME = "default"

# First character, unless it starts "inside" (or any "?nside")
_LEADING_CHAR = re.compile(r"^(.)(?!nside)")
_UNDERSCORE_CHAR = re.compile(r"_(.)")


def format_world_state_name(name: str) -> str:
    """Turn a Tiled level or map name into world state casing.

    >>> format_world_state_name("forest_clearing")
    'ForestClearing'
    >>> format_world_state_name("inside_tower")
    'insideTower'
    """
    name = _LEADING_CHAR.sub(lambda match: match.group(1).upper(), name, count=1)
    return _UNDERSCORE_CHAR.sub(lambda match: match.group(1).upper(), name)


def resolve_state_section_name(world: World) -> str:
    """Name of the world state section for the world's current area."""
    level_name = world.get_current_level_name()
    map_name = world.get_current_map_name()

    if map_name == DEFAULT_MAP_NAME:
        section_name = format_world_state_name(level_name)
    else:
        section_name = format_world_state_name(map_name)

    if SECTION_PREFIX not in section_name:
        section_name = SECTION_PREFIX + section_name

    logger.debug(
        "Resolved world state section",
        level=level_name,
        map=map_name,
        section=section_name,
    )
    return section_name


__all__ = [
    "DEFAULT_MAP_NAME",
    "format_world_state_name",
    "resolve_state_section_name",
]
