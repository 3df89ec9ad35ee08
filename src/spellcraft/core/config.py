"""Configuration management for spellcraft.

Settings are loaded with pydantic-settings from environment variables
(prefix ``SPELLCRAFT_``) and an optional ``.env`` file.

Example:
    >>> from spellcraft.core.config import get_settings
    >>> settings = get_settings()
    >>> settings.tool_name
    'wand'

Environment Variables:
    SPELLCRAFT_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    SPELLCRAFT_JSON_LOGS: Emit JSON log lines instead of console output
    SPELLCRAFT_TOOL_NAME: Tool marked in use while a spell resolves
    SPELLCRAFT_UNLOCK_DELAY_MS: Delay before control returns after an unlock
    SPELLCRAFT_FAIL_OPEN_ON_MISSING_CONFIG: Treat missing spell config as satisfied
    SPELLCRAFT_OVERLAP_POLICY: "reject" or "allow" casts while one is resolving
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from spellcraft.core.exceptions import ConfigurationError


DEFAULT_TOOL_NAME = "wand"
DEFAULT_UNLOCK_DELAY_MS = 1000


class SpellSettings(BaseSettings):
    """Settings for the spell dispatch engine.

    Attributes:
        log_level: Application logging level.
        json_logs: Render logs as JSON.
        tool_name: Tool marked in use while a spell resolves.
        unlock_delay_ms: Wait before control is restored after an unlock.
        fail_open_on_missing_config: Verdict returned when spell
            configuration for a target is missing.
        overlap_policy: What to do with a cast that arrives while a
            previous cast still holds the player lock.
    """

    model_config = SettingsConfigDict(
        env_prefix="SPELLCRAFT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    json_logs: bool = Field(
        default=False,
        description="Render logs as JSON",
    )
    tool_name: str = Field(
        default=DEFAULT_TOOL_NAME,
        description="Tool marked in use while a spell resolves",
    )
    unlock_delay_ms: int = Field(
        default=DEFAULT_UNLOCK_DELAY_MS,
        ge=0,
        description="Delay before control is restored after an unlock",
    )
    fail_open_on_missing_config: bool = Field(
        default=True,
        description="Treat missing spell configuration as satisfied",
    )
    overlap_policy: Literal["reject", "allow"] = Field(
        default="reject",
        description="Handling of casts arriving while the player is locked",
    )

    @model_validator(mode="after")
    def validate_tool_name(self) -> "SpellSettings":
        """Ensure the tool name is not blank.

        Returns:
            Self if validation passes.

        Raises:
            ConfigurationError: If tool_name is empty or whitespace.
        """
        if not self.tool_name.strip():
            raise ConfigurationError(
                "tool_name must not be blank",
                config_key="tool_name",
            )
        return self


@lru_cache(maxsize=1)
def get_settings() -> SpellSettings:
    """Get the settings singleton.

    Returns:
        The cached SpellSettings instance.

    Raises:
        ConfigurationError: If the configuration is invalid.
    """
    try:
        return SpellSettings()
    except ConfigurationError:
        raise
    except Exception as exc:
        raise ConfigurationError(
            f"Failed to load spellcraft settings: {exc}",
            details={"original_error": str(exc)},
        ) from exc


def clear_settings_cache() -> None:
    """Clear the settings cache, forcing a reload on next access."""
    get_settings.cache_clear()


__all__ = [
    "DEFAULT_TOOL_NAME",
    "DEFAULT_UNLOCK_DELAY_MS",
    "SpellSettings",
    "get_settings",
    "clear_settings_cache",
]
