"""Custom exception hierarchy for spellcraft.

All exceptions inherit from SpellcraftError so callers can handle every
engine failure at the boundary while keeping the domain context.

Note that an unmet requirement is never an exception: the evaluator
always answers with a boolean verdict.

Example:
    >>> from spellcraft.core.exceptions import UnknownSpellTypeError
    >>> raise UnknownSpellTypeError("No behavior for spell", spell_type="teleport")
"""

from __future__ import annotations

from typing import Any


class SpellcraftError(Exception):
    """Base exception for all spellcraft errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dictionary containing additional error context.
    """

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        """Initialize the base exception.

        Args:
            message: Human-readable error description.
            details: Optional dictionary containing additional error context.
        """
        self.message = message
        self.details = details or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the exception message with optional details.

        Returns:
            Formatted error message including any provided details.
        """
        if self.details:
            detail_str = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
            return f"{self.message} [{detail_str}]"
        return self.message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message={self.message!r}, details={self.details!r})"


# =============================================================================
# Configuration & Validation Exceptions
# =============================================================================


class ConfigurationError(SpellcraftError):
    """Raised when engine settings are invalid."""

    def __init__(
        self,
        message: str,
        *,
        config_key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize configuration error with config key context.

        Args:
            message: Human-readable error description.
            config_key: The configuration key that caused the error.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if config_key:
            combined_details["config_key"] = config_key
        super().__init__(message, details=combined_details)


class ValidationError(SpellcraftError):
    """Raised when author-provided world state data is malformed.

    This covers shapes that cannot be interpreted at all, such as a
    section that is not a mapping. Merely missing nodes are not errors.
    """

    def __init__(
        self,
        message: str,
        *,
        field_name: str | None = None,
        invalid_value: Any | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize validation error with field context.

        Args:
            message: Human-readable error description.
            field_name: Name of the field that failed validation.
            invalid_value: The value that failed validation.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if field_name:
            combined_details["field_name"] = field_name
        if invalid_value is not None:
            combined_details["invalid_value"] = invalid_value
        super().__init__(message, details=combined_details)


# =============================================================================
# Spell Engine Exceptions
# =============================================================================


class SpellEngineError(SpellcraftError):
    """Base exception for spell resolution and dispatch errors."""


class UnknownSpellTypeError(SpellEngineError):
    """Raised when a spell type names no registered behavior.

    This is a programming error in the calling layer, not a runtime
    condition to recover from.
    """

    def __init__(
        self,
        message: str,
        *,
        spell_type: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize unknown spell type error.

        Args:
            message: Human-readable error description.
            spell_type: The offending spell type value.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if spell_type is not None:
            combined_details["spell_type"] = spell_type
        super().__init__(message, details=combined_details)


__all__ = [
    "SpellcraftError",
    "ConfigurationError",
    "ValidationError",
    "SpellEngineError",
    "UnknownSpellTypeError",
]
