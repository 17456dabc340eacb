"""
queryable-extensions: string-driven multi-key sorting and page slicing for Python
sequences and SQLAlchemy queries.
"""
from queryable_extensions.errors import InvalidArgumentError, PropertyNotFoundError, QueryableExtensionsError
from queryable_extensions.sorting import (
    PropertyPath,
    SortDirection,
    SortSpec,
    SortTerm,
    parse_sort_spec,
    resolve_property_path,
)
from queryable_extensions.utils import order_by_expression, paginate

__version__ = "1.0.0"

__all__ = [
    "order_by_expression",
    "paginate",
    "parse_sort_spec",
    "resolve_property_path",
    "PropertyPath",
    "SortDirection",
    "SortSpec",
    "SortTerm",
    "QueryableExtensionsError",
    "InvalidArgumentError",
    "PropertyNotFoundError",
]
