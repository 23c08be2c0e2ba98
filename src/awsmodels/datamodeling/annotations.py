"""
Markers that map pydantic models onto DynamoDB items.

Classes are marked with decorators, fields with ``Annotated`` metadata::

    @dynamodb_table("Books")
    class Book(BaseModel):
        isbn: Annotated[str, HashKey()]
        edition: Annotated[Optional[int], RangeKey()] = None
        title: Annotated[Optional[str], Attribute("Title")] = None
        version: Annotated[Optional[int], VersionAttribute()] = None
        cached_cover: Annotated[Optional[bytes], Ignore()] = None
"""

from dataclasses import dataclass
from typing import Callable, Optional, TypeVar

TABLE_ATTR = "__dynamodb_table__"
DOCUMENT_ATTR = "__dynamodb_document__"

C = TypeVar("C", bound=type)


@dataclass(frozen=True)
class DynamoDBTable:
    table_name: str


def dynamodb_table(table_name: str) -> Callable[[C], C]:
    """Mark a class as stored in ``table_name``."""

    def decorate(cls: C) -> C:
        setattr(cls, TABLE_ATTR, DynamoDBTable(table_name))
        return cls

    return decorate


def dynamodb_document(cls: C) -> C:
    """Mark a class as stored as a nested map inside an item."""
    setattr(cls, DOCUMENT_ATTR, True)
    return cls


@dataclass(frozen=True)
class NamedAttribute:
    """Field marker; ``attribute_name`` overrides the item attribute name."""

    attribute_name: Optional[str] = None


class HashKey(NamedAttribute):
    """Partition key of the table."""


class RangeKey(NamedAttribute):
    """Sort key of the table."""


class IndexHashKey(NamedAttribute):
    """Partition key of a secondary index."""


class IndexRangeKey(NamedAttribute):
    """Sort key of a secondary index."""


class Attribute(NamedAttribute):
    """Plain attribute, only needed to rename it."""


class VersionAttribute(NamedAttribute):
    """Integer incremented on every save and checked on save and delete."""


@dataclass(frozen=True)
class AutoGeneratedKey:
    """On a key field: a random UUID is assigned when the value is unset at save time."""


@dataclass(frozen=True)
class Ignore:
    """Field is not stored."""
