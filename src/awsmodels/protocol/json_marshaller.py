"""JSON protocol marshalling."""

import json
from enum import Enum
from typing import Any

from awsmodels.exceptions import MarshallingError
from awsmodels.log import get_logger
from awsmodels.model.base import AwsRequest, AwsShape
from awsmodels.model.shapes import ShapeKind, TypeSpec, describe_structure
from awsmodels.protocol.base import RequestMarshaller
from awsmodels.protocol.request import Request
from awsmodels.utils import string_utils
from awsmodels.utils.date_utils import to_epoch_seconds

logger = get_logger(__name__)


class JsonValueMarshaller:
    """Converts shapes into JSON-ready python values. Absent members are omitted."""

    def marshall_structure(self, shape: AwsShape, payload_only: bool = False) -> dict[str, Any]:
        spec = describe_structure(type(shape))
        members = spec.payload_members if payload_only else spec.members
        document: dict[str, Any] = {}
        for member in members:
            value = getattr(shape, member.name)
            if value is not None:
                document[member.wire_name] = self.marshall_value(member.spec, value)
        return document

    def marshall_value(self, spec: TypeSpec, value: Any) -> Any:
        kind = spec.kind
        if kind is ShapeKind.STRUCTURE:
            return self.marshall_structure(value)
        if kind is ShapeKind.LIST:
            return [self.marshall_value(spec.member, item) for item in value if item is not None]
        if kind is ShapeKind.MAP:
            return {
                key: self.marshall_value(spec.member, item)
                for key, item in value.items()
                if item is not None
            }
        if kind is ShapeKind.TIMESTAMP:
            return to_epoch_seconds(value)
        if kind is ShapeKind.BLOB:
            return string_utils.from_bytes(value)
        if kind is ShapeKind.STRING:
            return value.value if isinstance(value, Enum) else value
        return value


def dump_json(document: Any) -> bytes:
    return json.dumps(document, separators=(",", ":"), allow_nan=False).encode(string_utils.UTF8)


class JsonRequestMarshaller(RequestMarshaller):
    """
    AWS JSON protocol: ``POST /`` with an ``X-Amz-Target`` header naming the
    operation and the request members as a JSON object body.
    """

    def _marshall_into(self, request: Request, request_obj: AwsRequest) -> None:
        request.resource_path = "/"
        request.add_header("X-Amz-Target", f"{self.service.target_prefix}.{self.operation.name}")
        try:
            content = dump_json(JsonValueMarshaller().marshall_structure(request_obj))
        except (TypeError, ValueError, AttributeError) as e:
            raise MarshallingError(f"Unable to marshall request to JSON: {e}") from e
        request.content = content
        request.add_header("Content-Length", str(len(content)))
        request.add_header("Content-Type", f"application/x-amz-json-{self.service.json_version}")
        logger.debug(
            "Marshalled %s.%s (%d bytes)", self.service.name, self.operation.name, len(content)
        )
