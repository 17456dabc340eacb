"""
Sort expression parsing, property path resolution and ordering backends.
"""
from queryable_extensions.sorting.backends import is_sqlalchemy_query, order_statement, sort_in_memory
from queryable_extensions.sorting.resolver import PropertyPath, describe_type, resolve_property_path
from queryable_extensions.sorting.spec import SortDirection, SortSpec, SortTerm, parse_sort_spec

__all__ = [
    "SortDirection",
    "SortSpec",
    "SortTerm",
    "parse_sort_spec",
    "PropertyPath",
    "describe_type",
    "resolve_property_path",
    "is_sqlalchemy_query",
    "order_statement",
    "sort_in_memory",
]
