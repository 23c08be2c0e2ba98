"""Wire-level description of shape classes, derived from their annotations."""

import functools
import types
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Optional, Union, get_args, get_origin

from awsmodels.model.base import AwsShape, HttpBinding


class ShapeKind(str, Enum):
    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"
    TIMESTAMP = "timestamp"
    BLOB = "blob"
    LIST = "list"
    MAP = "map"
    STRUCTURE = "structure"


@dataclass(frozen=True)
class TypeSpec:
    """Type of a member: a scalar kind, or a container with its member type."""

    kind: ShapeKind
    member: Optional["TypeSpec"] = None
    model: Optional[type] = None


@dataclass(frozen=True)
class MemberSpec:
    name: str
    wire_name: str
    spec: TypeSpec
    binding: Optional[HttpBinding] = None


@dataclass(frozen=True)
class StructureSpec:
    model: type
    members: tuple[MemberSpec, ...]
    _by_wire_name: dict[str, MemberSpec] = field(default_factory=dict, compare=False, repr=False)

    def __post_init__(self) -> None:
        self._by_wire_name.update({m.wire_name: m for m in self.members})

    def member_for_wire_name(self, wire_name: str) -> Optional[MemberSpec]:
        return self._by_wire_name.get(wire_name)

    @property
    def payload_members(self) -> tuple[MemberSpec, ...]:
        """Members carried in the body."""
        return tuple(m for m in self.members if m.binding is None)

    def bound_members(self, location: str) -> tuple[MemberSpec, ...]:
        return tuple(m for m in self.members if m.binding and m.binding.location == location)


_SCALARS: tuple[tuple[type, ShapeKind], ...] = (
    # bool first: it is a subclass of int
    (bool, ShapeKind.BOOLEAN),
    (int, ShapeKind.INTEGER),
    (float, ShapeKind.FLOAT),
    (str, ShapeKind.STRING),
    (datetime, ShapeKind.TIMESTAMP),
    (bytes, ShapeKind.BLOB),
)


def resolve_type(annotation: Any) -> TypeSpec:
    """
    Map a field annotation to its wire type.

    Raises:
        TypeError: If the annotation has no wire representation
    """
    origin = get_origin(annotation)
    if origin is Union or origin is types.UnionType:
        # members may differ in python type but must share one wire type
        specs = {resolve_type(a) for a in get_args(annotation) if a is not type(None)}
        if len(specs) != 1:
            raise TypeError(f"Unsupported union annotation: {annotation!r}")
        return specs.pop()
    if origin is list:
        (item,) = get_args(annotation)
        return TypeSpec(ShapeKind.LIST, member=resolve_type(item))
    if origin is dict:
        key, value = get_args(annotation)
        if key is not str:
            raise TypeError(f"Map keys must be strings: {annotation!r}")
        return TypeSpec(ShapeKind.MAP, member=resolve_type(value))
    if isinstance(annotation, type):
        if issubclass(annotation, AwsShape):
            return TypeSpec(ShapeKind.STRUCTURE, model=annotation)
        for python_type, kind in _SCALARS:
            if issubclass(annotation, python_type):
                return TypeSpec(kind)
    raise TypeError(f"Unsupported annotation: {annotation!r}")


@functools.lru_cache(maxsize=None)
def describe_structure(model_cls: type[AwsShape]) -> StructureSpec:
    """Describe the members of a shape class; the result is cached per class."""
    members = []
    for name, info in model_cls.model_fields.items():
        binding = next((m for m in info.metadata if isinstance(m, HttpBinding)), None)
        members.append(
            MemberSpec(
                name=name,
                wire_name=info.alias or name,
                spec=resolve_type(info.annotation),
                binding=binding,
            )
        )
    return StructureSpec(model=model_cls, members=tuple(members))
