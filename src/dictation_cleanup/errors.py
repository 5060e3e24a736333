"""Error types for dictation-cleanup.

The correction and filtering passes never raise. These errors come from
the outer surfaces only: loading settings and reading CLI input.
"""

from __future__ import annotations

from enum import Enum


class ErrorCategory(str, Enum):
    """Categories of errors for handling decisions."""

    VALIDATION = "validation"  # Bad input
    CONFIGURATION = "configuration"  # Bad or unreadable settings
    RESOURCE = "resource"  # Missing file
    INTERNAL = "internal"  # Bug in code


class DictationCleanupError(Exception):
    """Base exception for dictation-cleanup errors.

    Attributes:
        message: Human-readable error message
        category: Error category for handling
        context: Additional context information
    """

    category: ErrorCategory = ErrorCategory.INTERNAL

    def __init__(self, message: str, context: dict | None = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            return f"{self.message} (context: {self.context})"
        return self.message


class ValidationError(DictationCleanupError):
    """Input validation error.

    Examples: empty input text, unreadable stdin.
    """

    category = ErrorCategory.VALIDATION


class ConfigurationError(DictationCleanupError):
    """Configuration error.

    Examples: malformed settings JSON, wrong field types.
    """

    category = ErrorCategory.CONFIGURATION


class ResourceError(DictationCleanupError):
    """Resource not found or unavailable.

    Examples: missing settings file.
    """

    category = ErrorCategory.RESOURCE


def format_error_for_display(error: Exception) -> str:
    """Format an error message for user display.

    Args:
        error: Error to format

    Returns:
        Human-readable error message
    """
    if isinstance(error, DictationCleanupError):
        category = error.category.value
        base_message = error.message

        if error.context:
            context_str = ", ".join(f"{k}={v}" for k, v in error.context.items())
            return f"[{category}] {base_message} ({context_str})"

        return f"[{category}] {base_message}"

    return f"[error] {type(error).__name__}: {error}"
