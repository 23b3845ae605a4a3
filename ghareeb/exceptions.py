"""
Custom exceptions for the ghareeb library.

All exceptions inherit from GhareebError for easy catching of library-specific errors.
The matching engines themselves never raise for degenerate text; these are raised
only at the API boundary (record ingestion, caller-supplied policy values).
"""

from typing import Any


class GhareebError(Exception):
    """Base exception for all ghareeb errors."""

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            ctx_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({ctx_str})"
        return self.message


class LexiconError(GhareebError):
    """Raised when a raw lexicon record cannot be validated."""

    def __init__(
        self,
        message: str,
        record_index: int | None = None,
        word_text: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        ctx = context or {}
        if record_index is not None:
            ctx["record_index"] = record_index
        if word_text:
            ctx["word_text"] = word_text
        super().__init__(message, ctx)
        self.record_index = record_index
        self.word_text = word_text


class ConfigurationError(GhareebError):
    """Raised when configuration or a caller-supplied policy value is invalid."""

    def __init__(
        self,
        message: str,
        setting_name: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        ctx = context or {}
        if setting_name:
            ctx["setting"] = setting_name
        super().__init__(message, ctx)
        self.setting_name = setting_name
