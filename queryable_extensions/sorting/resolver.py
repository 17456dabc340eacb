"""
Property path resolution.

A dotted path such as ``"Category.Name"`` is resolved against the static structure of an
element type, one segment at a time and case-insensitively. Member metadata for a type is
built once and cached, so repeated sorts over the same type do no further introspection.

Supported element types:
    - dataclasses, pydantic models and any class with annotations
    - named tuples and classes declaring ``__slots__`` (fields without annotations are untyped)
    - classes exposing ``property`` / ``functools.cached_property`` members
    - ``TypedDict`` types (values are read by key)
    - SQLAlchemy mapped classes (column attributes and relationships)
"""
from __future__ import annotations

import functools
import inspect
import sys
import types
import typing
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Tuple

from pydantic import BaseModel
from sqlalchemy import inspect as sa_inspect
from sqlalchemy.orm import Mapped, Mapper

from queryable_extensions.errors.exceptions import PropertyNotFoundError

ATTRIBUTE = "attribute"
ITEM = "item"
COLUMN = "column"
RELATIONSHIP = "relationship"


@dataclass(frozen=True)
class Member:
    """A public member of a type: its real name, value type and how it is read."""

    name: str
    value_type: Any
    kind: str = ATTRIBUTE
    # annotation text when it could not be evaluated
    hint: Optional[str] = None


@dataclass(frozen=True)
class TypeMetadata:
    """Name -> member map for one type, with a lower-cased index for lookups."""

    type_name: str
    members: Mapping[str, Member]
    folded: Mapping[str, Member] = field(default_factory=dict)

    def find(self, segment: str) -> Optional[Member]:
        # exact spelling wins over a case-folded match
        return self.members.get(segment) or self.folded.get(segment.lower())


@dataclass(frozen=True)
class PropertyPath:
    """
    A resolved property path.

    Attributes:
        path: The path as written by the caller
        root_type: Element type the path was resolved against
        members: Resolved member per segment, in order
        owner_types: Type each segment was searched on, in order
    """

    path: str
    root_type: Any
    members: Tuple[Member, ...]
    owner_types: Tuple[Any, ...]

    @property
    def value_type(self) -> Any:
        return self.members[-1].value_type

    @property
    def attribute_names(self) -> Tuple[str, ...]:
        return tuple(m.name for m in self.members)

    def get_value(self, obj: Any) -> Any:
        """
        Read the path's value from a live object.

        A None intermediate short-circuits to None instead of raising.
        """
        value = obj
        for member in self.members:
            if value is None:
                return None
            if member.kind == ITEM:
                value = value.get(member.name)
            else:
                value = getattr(value, member.name)
        return value


def type_name(tp: Any) -> str:
    return getattr(tp, "__name__", None) or repr(tp)


_REQUIRED_WRAPPERS = tuple(
    w for w in (getattr(typing, "Required", None), getattr(typing, "NotRequired", None)) if w is not None
)


def unwrap_type(tp: Any) -> Any:
    """Strip Optional/Union-with-None, Annotated, Mapped and (Not)Required wrappers down to the value type."""
    if tp is None or isinstance(tp, (str, typing.ForwardRef)):
        return Any
    origin = typing.get_origin(tp)
    if origin is typing.Union or origin is types.UnionType:
        args = [a for a in typing.get_args(tp) if a is not type(None)]
        return unwrap_type(args[0]) if len(args) == 1 else Any
    if origin is typing.Annotated or origin is Mapped or origin in _REQUIRED_WRAPPERS:
        return unwrap_type(typing.get_args(tp)[0])
    return tp


def _own_annotations(klass: type) -> Dict[str, Any]:
    try:
        return inspect.get_annotations(klass)
    except NameError:
        # deferred annotations (3.14+) naming an undefined type
        import annotationlib

        return annotationlib.get_annotations(klass, format=annotationlib.Format.STRING)


def _class_hints(cls: type) -> Tuple[Dict[str, Any], Dict[str, str]]:
    """
    Evaluate annotations field by field along the MRO.

    Each class's string annotations are evaluated against its own module globals, then its
    class namespace. A field whose annotation cannot be evaluated (e.g. a name imported only
    under TYPE_CHECKING) becomes Any and its text is reported in the second mapping; the
    other fields are unaffected.

    Returns:
        (name -> evaluated hint, name -> unevaluated annotation text)
    """
    hints: Dict[str, Any] = {}
    unresolved: Dict[str, str] = {}
    for klass in reversed(cls.__mro__):
        module = sys.modules.get(klass.__module__)
        module_ns = dict(vars(module)) if module is not None else {}
        class_ns = dict(vars(klass))
        for name, raw in _own_annotations(klass).items():
            if isinstance(raw, typing.ForwardRef):
                raw = raw.__forward_arg__
            if isinstance(raw, str):
                try:
                    raw = eval(raw, class_ns, module_ns)
                except Exception:
                    hints[name] = Any
                    unresolved[name] = raw
                    continue
            hints[name] = raw
            unresolved.pop(name, None)
    return hints, unresolved


def _is_classvar(hint: Any, text: Optional[str] = None) -> bool:
    if text is not None:
        return text.startswith(("ClassVar", "typing.ClassVar"))
    return hint is typing.ClassVar or typing.get_origin(hint) is typing.ClassVar


def _slot_names(klass: type) -> Tuple[str, ...]:
    slots = vars(klass).get("__slots__", ())
    if isinstance(slots, str):
        return (slots,)
    return tuple(slots)


def _property_type(attr: Any) -> Any:
    fget = attr.fget if isinstance(attr, property) else attr.func
    try:
        return typing.get_type_hints(fget).get("return", Any)
    except Exception:
        return Any


def _mapped_members(mapper: Mapper) -> Dict[str, Member]:
    members: Dict[str, Member] = {}
    for prop in mapper.column_attrs:
        try:
            value_type = prop.columns[0].type.python_type
        except NotImplementedError:
            value_type = Any
        members[prop.key] = Member(prop.key, value_type, COLUMN)
    for rel in mapper.relationships:
        value_type = list if rel.uselist else rel.mapper.class_
        members[rel.key] = Member(rel.key, value_type, RELATIONSHIP)
    return members


def _plain_members(cls: type) -> Dict[str, Member]:
    kind = ITEM if typing.is_typeddict(cls) else ATTRIBUTE
    members: Dict[str, Member] = {}
    unresolved: Dict[str, str] = {}
    if issubclass(cls, BaseModel):
        hints = {name: info.annotation for name, info in cls.model_fields.items()}
    else:
        hints, unresolved = _class_hints(cls)
    for name, hint in hints.items():
        text = unresolved.get(name)
        if name.startswith("_") or _is_classvar(hint, text):
            continue
        members[name] = Member(name, unwrap_type(hint), kind, text)
    if kind == ATTRIBUTE:
        if issubclass(cls, tuple):
            # collections.namedtuple fields carry no annotations
            for name in getattr(cls, "_fields", ()):
                members.setdefault(name, Member(name, Any))
        for klass in reversed(cls.__mro__):
            if klass.__module__.partition(".")[0] == "pydantic":
                continue
            for name in _slot_names(klass):
                if not name.startswith("_"):
                    members.setdefault(name, Member(name, Any))
            for name, attr in vars(klass).items():
                if name.startswith("_"):
                    continue
                if isinstance(attr, (property, functools.cached_property)):
                    members[name] = Member(name, unwrap_type(_property_type(attr)))
    return members


@functools.lru_cache(maxsize=None)
def describe_type(tp: Any) -> TypeMetadata:
    """
    Build (once per type) the public member map used for path resolution.

    Args:
        tp: Element type to describe

    Returns:
        TypeMetadata for the type (empty for non-class types such as Any)
    """
    if not isinstance(tp, type):
        return TypeMetadata(type_name(tp), {})

    mapper = sa_inspect(tp, raiseerr=False)
    if isinstance(mapper, Mapper):
        members = _mapped_members(mapper)
    else:
        members = _plain_members(tp)

    folded: Dict[str, Member] = {}
    for name, member in members.items():
        folded.setdefault(name.lower(), member)
    return TypeMetadata(type_name(tp), members, folded)


def resolve_property_path(element_type: Any, path: str) -> PropertyPath:
    """
    Resolve a dotted property path against an element type.

    Segments are matched case-insensitively, left to right; each segment is searched on the
    value type of the previous one.

    Args:
        element_type: Type the path starts from
        path: Dotted path, e.g. "Category.Name"

    Returns:
        The resolved PropertyPath

    Raises:
        PropertyNotFoundError: naming the first segment that does not resolve and the type searched;
            when that type is unknown (untyped or unevaluable annotation), the owning member is named
    """
    current = element_type
    members = []
    owners = []
    for segment in path.split("."):
        segment = segment.strip()
        meta = describe_type(current)
        member = meta.find(segment)
        if member is None:
            if members and members[-1].value_type is Any:
                # untyped or unevaluable parent member
                parent = members[-1]
                raise PropertyNotFoundError(
                    segment,
                    parent.hint or meta.type_name,
                    reason=f"type of '{type_name(owners[-1])}.{parent.name}' is unknown",
                )
            raise PropertyNotFoundError(segment, meta.type_name)
        members.append(member)
        owners.append(current)
        current = member.value_type
    return PropertyPath(path, element_type, tuple(members), tuple(owners))
