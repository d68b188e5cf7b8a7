"""
Unified exception hierarchy for appcommon.

This module provides the base class shared by every error the library raises,
making it possible to catch all of them with a single except clause.
"""

from typing import Any


class CommonError(Exception):
    """
    Base exception for all appcommon errors.

    Example:
        try:
            registry.register(cmd)
        except CommonError as e:
            lg.error(f"registration failed: {e}")
    """

    def __init__(self, message: str, **context: Any) -> None:
        """
        Initialize the exception with a message and optional context.

        Args:
            message: Human-readable error message
            **context: Additional context information (stored in self.context)
        """
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self) -> str:
        """String representation with context if available."""
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


class ConfigError(CommonError):
    """
    Configuration-related errors.

    Raised when configuration read from the environment or from a
    configuration mapping cannot be used.
    """

    pass


class ValidationError(CommonError):
    """
    Validation-related errors.

    Raised when a raw value cannot be converted to the requested type.

    Examples:
        - Malformed duration string
        - Unknown duration unit
    """

    pass
