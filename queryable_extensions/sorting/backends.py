"""
Ordering backends.

Two execution paths sit behind ``order_by_expression``:
    - SQLAlchemy ``Select`` / ORM ``Query``: ORDER BY clauses are added to the statement,
      relationships are outer-joined, nothing is executed.
    - Any other iterable: a single stable sort with a composite comparator.
"""
from __future__ import annotations

from functools import cmp_to_key
from typing import Any, Dict, Iterable, List, Optional, Tuple

from sqlalchemy import Select
from sqlalchemy.orm import Query, aliased

from queryable_extensions.errors.exceptions import InvalidArgumentError
from queryable_extensions.sorting.resolver import PropertyPath, resolve_property_path
from queryable_extensions.sorting.spec import SortSpec


def is_sqlalchemy_query(source: Any) -> bool:
    return isinstance(source, (Select, Query))


def _resolve_terms(element_type: Any, spec: SortSpec) -> List[Tuple[PropertyPath, bool]]:
    return [(resolve_property_path(element_type, t.property_path), t.descending) for t in spec]


def _compare_keys(terms: List[Tuple[PropertyPath, bool]]):
    def compare(left: Tuple[Any, ...], right: Tuple[Any, ...]) -> int:
        for (_, descending), a, b in zip(terms, left, right):
            # None sorts last regardless of direction
            if a is None or b is None:
                if a is None and b is None:
                    continue
                return 1 if a is None else -1
            if a < b:
                result = -1
            elif b < a:
                result = 1
            else:
                continue
            return -result if descending else result
        return 0
    return compare


def sort_in_memory(source: Iterable[Any], spec: SortSpec, element_type: Optional[type] = None) -> List[Any]:
    """
    Order an iterable by every sort term in one stable pass.

    Args:
        source: Any iterable of elements (consumed)
        spec: Parsed sort terms, primary first
        element_type: Type to resolve paths against (defaults to the first element's type)

    Returns:
        New list in sorted order; ties keep their input order

    Raises:
        PropertyNotFoundError: If a term's path does not resolve
        TypeError: If resolved values are not mutually orderable
    """
    terms = _resolve_terms(element_type, spec) if element_type is not None else None
    items = list(source)
    if not items:
        return items
    if terms is None:
        terms = _resolve_terms(type(items[0]), spec)

    keys = [tuple(path.get_value(item) for path, _ in terms) for item in items]
    compare = _compare_keys(terms)
    order = sorted(range(len(items)), key=cmp_to_key(lambda i, j: compare(keys[i], keys[j])))
    return [items[i] for i in order]


def order_statement(stmt: Any, spec: SortSpec, element_type: Optional[type] = None) -> Any:
    """
    Build ORDER BY clauses for a SQLAlchemy Select or ORM Query.

    Any existing ORDER BY is replaced. Nested paths are LEFT OUTER JOINed through one alias
    per relationship chain, so rows with an unset relationship are kept.

    Args:
        stmt: sqlalchemy.Select or sqlalchemy.orm.Query
        spec: Parsed sort terms, primary first
        element_type: Mapped class to resolve paths against (defaults to the first entity)

    Returns:
        A new, unexecuted statement of the same kind
    """
    if element_type is None:
        element_type = stmt.column_descriptions[0].get("entity")
        if element_type is None:
            raise InvalidArgumentError(
                "Cannot infer the element type of the statement; pass element_type.",
                argument="element_type",
            )

    joins: Dict[Tuple[str, ...], Any] = {}
    clauses = []
    for path, descending in _resolve_terms(element_type, spec):
        target = element_type
        prefix: Tuple[str, ...] = ()
        for member in path.members[:-1]:
            prefix += (member.name,)
            alias = joins.get(prefix)
            if alias is None:
                alias = aliased(member.value_type)
                stmt = stmt.outerjoin(getattr(target, member.name).of_type(alias))
                joins[prefix] = alias
            target = alias
        column = getattr(target, path.members[-1].name)
        clauses.append(column.desc() if descending else column.asc())

    return stmt.order_by(None).order_by(*clauses)
