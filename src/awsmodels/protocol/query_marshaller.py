"""Query protocol marshalling (form-encoded ``Action``/``Version`` requests)."""

from datetime import datetime
from enum import Enum
from typing import Any
from urllib.parse import quote, urlencode

from awsmodels.exceptions import MarshallingError
from awsmodels.log import get_logger
from awsmodels.model.base import AwsRequest, AwsShape
from awsmodels.model.shapes import ShapeKind, TypeSpec, describe_structure
from awsmodels.protocol.base import RequestMarshaller
from awsmodels.protocol.request import Request
from awsmodels.utils import string_utils

logger = get_logger(__name__)

CONTENT_TYPE = "application/x-www-form-urlencoded; charset=utf-8"


def flatten_structure(shape: AwsShape, prefix: str = "") -> list[tuple[str, str]]:
    """
    Flatten a shape into query parameters.

    Nested members are joined with dots, list items become
    ``Name.member.N`` and map entries ``Name.entry.N.key``/``.value``,
    counting from 1.
    """
    params: list[tuple[str, str]] = []
    for member in describe_structure(type(shape)).members:
        value = getattr(shape, member.name)
        if value is not None:
            name = f"{prefix}.{member.wire_name}" if prefix else member.wire_name
            _flatten_value(member.spec, value, name, params)
    return params


def _flatten_value(spec: TypeSpec, value: Any, name: str, params: list[tuple[str, str]]) -> None:
    kind = spec.kind
    if kind is ShapeKind.STRUCTURE:
        params.extend(flatten_structure(value, name))
    elif kind is ShapeKind.LIST:
        if not value:
            params.append((name, ""))
            return
        for index, item in enumerate((i for i in value if i is not None), start=1):
            _flatten_value(spec.member, item, f"{name}.member.{index}", params)
    elif kind is ShapeKind.MAP:
        for index, (key, item) in enumerate(
            ((k, v) for k, v in value.items() if v is not None), start=1
        ):
            params.append((f"{name}.entry.{index}.key", key))
            _flatten_value(spec.member, item, f"{name}.entry.{index}.value", params)
    else:
        params.append((name, format_scalar(kind, value)))


def format_scalar(kind: ShapeKind, value: Any) -> str:
    if kind is ShapeKind.BOOLEAN:
        return string_utils.from_boolean(value)
    if kind is ShapeKind.INTEGER:
        return string_utils.from_integer(value)
    if kind is ShapeKind.FLOAT:
        return string_utils.from_double(value)
    if kind is ShapeKind.TIMESTAMP:
        if not isinstance(value, datetime):
            raise MarshallingError(f"Expected a datetime, got {type(value).__name__}")
        return string_utils.from_date(value)
    if kind is ShapeKind.BLOB:
        return string_utils.from_bytes(value)
    if isinstance(value, Enum):
        return str(value.value)
    return string_utils.from_string(value)


class QueryRequestMarshaller(RequestMarshaller):
    """POSTs ``Action``, ``Version`` and the flattened members as a form body."""

    def _marshall_into(self, request: Request, request_obj: AwsRequest) -> None:
        request.resource_path = "/"
        params = [("Action", self.operation.name), ("Version", self.service.api_version)]
        params.extend(flatten_structure(request_obj))
        content = urlencode(params, safe="-_.~", quote_via=quote).encode(string_utils.UTF8)
        request.content = content
        request.add_header("Content-Type", CONTENT_TYPE)
        request.add_header("Content-Length", str(len(content)))
        logger.debug(
            "Marshalled %s.%s with %d parameters",
            self.service.name,
            self.operation.name,
            len(params),
        )
