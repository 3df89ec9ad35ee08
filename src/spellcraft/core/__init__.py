"""Core module providing configuration, logging, and base exceptions.

Exports:
    Exceptions:
        SpellcraftError: Base exception for all engine errors.
        ConfigurationError: Invalid settings.
        ValidationError: Malformed author data.
        SpellEngineError: Spell resolution errors.
        UnknownSpellTypeError: Spell type with no registered behavior.

    Configuration:
        SpellSettings: Engine settings class.
        get_settings: Get the settings singleton.
        clear_settings_cache: Force settings reload.

    Logging:
        configure_logging: Set up application logging.
        get_logger: Get a configured logger instance.
        bind_context: Add context to log entries.
        clear_context: Clear logging context.
"""

from __future__ import annotations

from spellcraft.core.config import (
    SpellSettings,
    clear_settings_cache,
    get_settings,
)
from spellcraft.core.exceptions import (
    ConfigurationError,
    SpellcraftError,
    SpellEngineError,
    UnknownSpellTypeError,
    ValidationError,
)
from spellcraft.core.logging import (
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
)


__all__ = [
    # Exceptions
    "SpellcraftError",
    "ConfigurationError",
    "ValidationError",
    "SpellEngineError",
    "UnknownSpellTypeError",
    # Configuration
    "SpellSettings",
    "get_settings",
    "clear_settings_cache",
    # Logging
    "configure_logging",
    "get_logger",
    "bind_context",
    "clear_context",
]
