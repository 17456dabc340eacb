"""
Error handling for queryable-extensions.
"""
from queryable_extensions.errors.exceptions import (
    InvalidArgumentError,
    PropertyNotFoundError,
    QueryableExtensionsError,
)

__all__ = [
    "QueryableExtensionsError",
    "InvalidArgumentError",
    "PropertyNotFoundError",
]
