"""
FastAPI query-string parameters for sorting and pagination.

Usage:

    @app.get("/products")
    def list_products(params: SortPageParams = Depends(sort_page_params)):
        return params.apply(PRODUCTS)
"""
from __future__ import annotations

from typing import Any, Optional

from fastapi import Query
from pydantic import BaseModel, Field, field_validator

from queryable_extensions.config import config
from queryable_extensions.utils.data_helpers import order_by_expression, paginate


class SortPageParams(BaseModel):
    """Sort expression and page window taken from a request."""

    sort: Optional[str] = None
    page: int = Field(default=1, ge=1)
    # the configured default never exceeds the configured maximum
    page_size: int = Field(default_factory=lambda: min(config.default_page_size, config.max_page_size), ge=1)

    @field_validator("page_size")
    @classmethod
    def _check_max_page_size(cls, value: int) -> int:
        if value > config.max_page_size:
            raise ValueError(f"page_size must be <= {config.max_page_size}")
        return value

    def apply(self, source: Any, element_type: Optional[type] = None) -> Any:
        """Order the source by the sort expression, then cut out the requested page."""
        ordered = order_by_expression(source, self.sort, element_type)
        return paginate(ordered, self.page, self.page_size)


def sort_page_params(
    sort: Optional[str] = Query(
        None, description="Sort expression", examples=["name:asc,category.name:desc"]
    ),
    page: int = Query(1, description="1-based page number"),
    page_size: Optional[int] = Query(None, description="Items per page"),
) -> SortPageParams:
    """FastAPI dependency building SortPageParams from the query string."""
    if page_size is None:
        return SortPageParams(sort=sort, page=page)
    return SortPageParams(sort=sort, page=page, page_size=page_size)
