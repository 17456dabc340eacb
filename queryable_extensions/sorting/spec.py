"""
Sort specification parsing.

Turns a query-string style sort expression such as ``"Category.Name:asc, Name:desc"``
into an ordered tuple of sort terms.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from queryable_extensions.errors.exceptions import InvalidArgumentError


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"

    @classmethod
    def parse(cls, token: Optional[str]) -> "SortDirection":
        """Any token starting with "desc" (any case) is descending; everything else ascending."""
        if token and token.strip().lower().startswith("desc"):
            return cls.DESC
        return cls.ASC


@dataclass(frozen=True)
class SortTerm:
    """A single ``path[:direction]`` entry of a sort expression."""

    property_path: str
    direction: SortDirection = SortDirection.ASC

    @property
    def descending(self) -> bool:
        return self.direction is SortDirection.DESC

    @property
    def segments(self) -> Tuple[str, ...]:
        return tuple(self.property_path.split("."))

    def __str__(self) -> str:
        return f"{self.property_path}:{self.direction.value}"


SortSpec = Tuple[SortTerm, ...]


def parse_sort_spec(text: Optional[str]) -> SortSpec:
    """
    Parse a comma-separated sort expression.

    Args:
        text: Sort expression, e.g. "Name", "Name:desc", "Category.Name:asc, Id:DESC"

    Returns:
        Tuple of SortTerm in precedence order (empty for None/blank input)

    Raises:
        InvalidArgumentError: If a term has an empty property path (e.g. ":asc")
    """
    if text is None or not text.strip():
        return ()

    terms = []
    for raw in text.split(","):
        term = raw.strip()
        if not term:
            # consecutive or trailing commas
            continue
        path, _, direction = term.partition(":")
        path = path.strip()
        if not path:
            raise InvalidArgumentError(
                f"Sort term '{term}' has an empty property path.", argument="sort"
            )
        terms.append(SortTerm(path, SortDirection.parse(direction)))
    return tuple(terms)
