"""
Data manipulation utilities for sorting and pagination.
"""
from __future__ import annotations

import logging
from collections.abc import Sequence
from itertools import islice
from typing import Any, Optional, Union

from queryable_extensions.errors.exceptions import InvalidArgumentError
from queryable_extensions.log_helper.decorators import operation_logger
from queryable_extensions.sorting.backends import is_sqlalchemy_query, order_statement, sort_in_memory
from queryable_extensions.sorting.spec import SortSpec, parse_sort_spec

log = logging.getLogger("queryable.ext")


def _require_source(source: Any) -> None:
    if source is None:
        raise InvalidArgumentError("source must not be None.", argument="source")


@operation_logger("order-by-expression")
def order_by_expression(
    source: Any,
    sort: Union[str, SortSpec, None],
    element_type: Optional[type] = None,
) -> Any:
    """
    Order a sequence or SQLAlchemy query by a sort expression.

    Args:
        source: Iterable of elements, or a sqlalchemy Select / ORM Query
        sort: Sort expression such as "Category.Name:asc, Name:desc" (or an already parsed spec)
        element_type: Type to resolve property paths against; inferred when omitted

    Returns:
        The source itself when the expression is empty; otherwise a sorted list (iterables)
        or a new unexecuted statement (SQLAlchemy)

    Raises:
        InvalidArgumentError: If source is None or a term has an empty property path
        PropertyNotFoundError: If a path segment does not exist on the searched type
    """
    _require_source(source)
    spec = parse_sort_spec(sort) if sort is None or isinstance(sort, str) else tuple(sort)
    if not spec:
        return source

    log.debug("Applying %d sort term(s)", len(spec),
              extra={"sort": ", ".join(str(t) for t in spec), "terms": len(spec)})
    if is_sqlalchemy_query(source):
        return order_statement(source, spec, element_type)
    return sort_in_memory(source, spec, element_type)


@operation_logger("paginate")
def paginate(source: Any, page_number: int, page_size: int) -> Any:
    """
    Return one page of a sequence or SQLAlchemy query.

    Args:
        source: Sequence, iterable, or a sqlalchemy Select / ORM Query
        page_number: 1-based page number
        page_size: Number of elements per page

    Returns:
        Slice of the same type for sequences, a lazy iterator for other iterables,
        or a statement with OFFSET/LIMIT for SQLAlchemy

    Raises:
        InvalidArgumentError: If source is None
    """
    _require_source(source)
    start = max(0, (page_number - 1) * page_size)
    if is_sqlalchemy_query(source):
        return source.offset(start).limit(page_size)
    stop = start + max(0, page_size)
    if isinstance(source, Sequence):
        return source[start:stop]
    return islice(source, start, stop)
