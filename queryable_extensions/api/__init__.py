"""
FastAPI integration: query-string parameters and 400 error mapping.
"""
from queryable_extensions.api.params import SortPageParams, sort_page_params
from queryable_extensions.errors.handlers import register_error_handlers

__all__ = [
    "SortPageParams",
    "sort_page_params",
    "register_error_handlers",
]
