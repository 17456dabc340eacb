"""
Utility functions for queryable-extensions.
"""
from queryable_extensions.utils.data_helpers import order_by_expression, paginate

__all__ = [
    "order_by_expression",
    "paginate",
]
