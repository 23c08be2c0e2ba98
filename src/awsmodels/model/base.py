"""Base classes for service request and response records."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, field_validator

from awsmodels.utils.date_utils import as_utc

S = TypeVar("S", bound="AwsShape")


@dataclass(frozen=True)
class HttpBinding:
    """Binds a member to a part of a REST request or response other than the body."""

    URI = "uri"
    QUERYSTRING = "querystring"
    HEADER = "header"
    HEADERS = "headers"

    location: str
    name: str

    @classmethod
    def uri(cls, name: str) -> "HttpBinding":
        return cls(cls.URI, name)

    @classmethod
    def querystring(cls, name: str) -> "HttpBinding":
        return cls(cls.QUERYSTRING, name)

    @classmethod
    def header(cls, name: str) -> "HttpBinding":
        return cls(cls.HEADER, name)

    @classmethod
    def header_prefix(cls, prefix: str) -> "HttpBinding":
        """All headers starting with ``prefix``, keyed by the remainder."""
        return cls(cls.HEADERS, prefix)


def to_camel(snake_str: str) -> str:
    """Convert snake_case to the camelCase used by most JSON services."""
    components = snake_str.split("_")
    return components[0] + "".join(x.title() for x in components[1:])


def to_pascal(snake_str: str) -> str:
    """Convert snake_case to the PascalCase used by query and older JSON services."""
    return "".join(x.title() for x in snake_str.split("_"))


def _freeze(value: Any) -> Any:
    if isinstance(value, list):
        return tuple(_freeze(v) for v in value)
    if isinstance(value, dict):
        return frozenset((k, _freeze(v)) for k, v in value.items())
    return value


class AwsShape(BaseModel):
    """
    Plain-data record shared by every service.

    Fields are optional; ``None`` means "absent" and is never written to the
    wire. Equality is field-wise and the hash agrees with it.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        validate_assignment=True,
        extra="ignore",
    )

    @field_validator("*")
    @classmethod
    def validate_timestamps(cls, v: Any) -> Any:
        """Timestamps are held in UTC, matching what the wire returns."""
        if isinstance(v, datetime):
            return as_utc(v)
        return v

    def with_fields(self: S, **values: Any) -> S:
        """
        Assign fields by python name and return this instance for chaining.

        Raises:
            AttributeError: If a name is not a field of this shape
        """
        fields = type(self).model_fields
        for name, value in values.items():
            if name not in fields:
                raise AttributeError(f"{type(self).__name__} has no field '{name}'")
            setattr(self, name, value)
        return self

    def _field_values(self) -> tuple[Any, ...]:
        return tuple(getattr(self, name) for name in type(self).model_fields)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._field_values() == other._field_values()

    def __hash__(self) -> int:
        return hash((type(self), _freeze(list(self._field_values()))))

    def __str__(self) -> str:
        parts = []
        for name, field in type(self).model_fields.items():
            value = getattr(self, name)
            if value is not None:
                parts.append(f"{field.alias or name}: {value}")
        return "{" + ", ".join(parts) + "}"


class AwsRequest(AwsShape):
    """Base for operation inputs."""

    _custom_request_headers: dict[str, str] = PrivateAttr(default_factory=dict)

    @property
    def custom_request_headers(self) -> dict[str, str]:
        """Extra headers sent with this request, in addition to the marshalled ones."""
        return dict(self._custom_request_headers)

    def put_custom_request_header(self, name: str, value: str) -> Optional[str]:
        """Add a header to the outgoing request, returning any previous value."""
        previous = self._custom_request_headers.get(name)
        self._custom_request_headers[name] = value
        return previous


class ResponseMetadata(BaseModel):
    """Transport details of the response a result was read from."""

    request_id: Optional[str] = None
    http_status_code: Optional[int] = None
    http_headers: dict[str, str] = Field(default_factory=dict)


class AwsResult(AwsShape):
    """Base for operation outputs."""

    _response_metadata: Optional[ResponseMetadata] = PrivateAttr(default=None)

    @property
    def response_metadata(self) -> Optional[ResponseMetadata]:
        return self._response_metadata

    def set_response_metadata(self, metadata: ResponseMetadata) -> None:
        self._response_metadata = metadata
