"""
Custom exception hierarchy for sort and pagination errors.
"""
from __future__ import annotations

from typing import Dict, Optional


class QueryableExtensionsError(Exception):
    """
    Base exception for all queryable-extensions errors.

    All errors are serialized to JSON format: {"error": "type", "details": "message"}
    """

    def __init__(self, error_type: str, details: str):
        """
        Initialize a queryable-extensions error.

        Args:
            error_type: The error type identifier (e.g., "invalid_argument")
            details: Human-readable error message
        """
        self.error_type = error_type
        self.details = details
        super().__init__(details)

    def to_dict(self) -> Dict[str, str]:
        """
        Convert error to dictionary format for JSON responses.

        Returns:
            Dictionary with "error" and "details" keys
        """
        return {"error": self.error_type, "details": self.details}


class InvalidArgumentError(QueryableExtensionsError, ValueError):
    """Raised when a caller passes a missing source or a malformed sort term."""

    def __init__(self, details: str, argument: Optional[str] = None, error_type: str = "invalid_argument"):
        """
        Initialize an invalid argument error.

        Args:
            details: Description of the problem
            argument: Name of the offending argument, if known
            error_type: Error type identifier (overridden by subclasses)
        """
        self.argument = argument
        super().__init__(error_type, details)


class PropertyNotFoundError(InvalidArgumentError):
    """Raised when a property path segment does not exist on the searched type."""

    def __init__(self, segment: str, type_name: str, reason: Optional[str] = None):
        """
        Initialize a property not found error.

        Args:
            segment: The single path segment that failed to resolve
            type_name: Name of the type the segment was searched on
            reason: Optional note appended to the message (e.g. which member has no known type)
        """
        self.segment = segment
        self.type_name = type_name
        self.reason = reason
        details = f"Property '{segment}' not found on type '{type_name}'."
        if reason:
            details = f"{details[:-1]} ({reason})."
        super().__init__(
            details,
            argument="sort",
            error_type="property_not_found",
        )
