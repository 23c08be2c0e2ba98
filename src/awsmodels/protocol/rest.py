"""REST protocols: members bound to the URI, query string and headers."""

import re
from typing import Any, Optional
from urllib.parse import quote

from awsmodels.exceptions import MarshallingError, UnmarshallingError
from awsmodels.log import get_logger
from awsmodels.model.base import AwsRequest, AwsResult, AwsShape, HttpBinding
from awsmodels.model.shapes import ShapeKind, StructureSpec, describe_structure
from awsmodels.protocol.base import RequestMarshaller, ResponseHandler
from awsmodels.protocol.json_marshaller import JsonValueMarshaller, dump_json
from awsmodels.protocol.json_unmarshaller import (
    JsonUnmarshallerContext,
    build_shape,
    get_structure_unmarshaller,
)
from awsmodels.protocol.query_marshaller import format_scalar
from awsmodels.protocol.request import HttpResponse, Request
from awsmodels.protocol.xml_unmarshaller import XmlShapeUnmarshaller, parse_xml
from awsmodels.utils import string_utils
from awsmodels.utils.date_utils import format_rfc822, parse_timestamp

logger = get_logger(__name__)

_URI_LABEL = re.compile(r"\{(?P<name>[^}+]+)(?P<greedy>\+)?\}")


class RestRequestMarshaller(RequestMarshaller):
    """
    Expands the operation's URI template and places bound members.

    For rest-json services the unbound members that are set form a JSON body.
    """

    def _marshall_into(self, request: Request, request_obj: AwsRequest) -> None:
        spec = describe_structure(type(request_obj))
        path, _, static_query = self.operation.request_uri.partition("?")
        request.resource_path = self._expand_uri(path, spec, request_obj)

        if static_query:
            for pair in static_query.split("&"):
                key, _, value = pair.partition("=")
                request.add_parameter(key, value)

        for member in spec.bound_members(HttpBinding.QUERYSTRING):
            value = getattr(request_obj, member.name)
            if value is None:
                continue
            if member.spec.kind is ShapeKind.LIST:
                for item in value:
                    request.add_parameter(member.binding.name, format_scalar(member.spec.member.kind, item))
            else:
                request.add_parameter(member.binding.name, format_scalar(member.spec.kind, value))

        for member in spec.bound_members(HttpBinding.HEADER):
            value = getattr(request_obj, member.name)
            if value is None:
                continue
            if member.spec.kind is ShapeKind.TIMESTAMP:
                request.add_header(member.binding.name, format_rfc822(value))
            else:
                request.add_header(member.binding.name, format_scalar(member.spec.kind, value))

        for member in spec.bound_members(HttpBinding.HEADERS):
            for key, value in (getattr(request_obj, member.name) or {}).items():
                request.add_header(member.binding.name + key, value)

        self._marshall_payload(request, request_obj)
        logger.debug(
            "Marshalled %s.%s to %s %s",
            self.service.name,
            self.operation.name,
            request.http_method,
            request.resource_path,
        )

    def _expand_uri(self, path: str, spec: StructureSpec, request_obj: AwsShape) -> str:
        labels = {m.binding.name: m for m in spec.bound_members(HttpBinding.URI)}

        def substitute(match: "re.Match[str]") -> str:
            label = match.group("name")
            member = labels.get(label)
            value = getattr(request_obj, member.name) if member else None
            if value is None or value == "":
                raise MarshallingError(f"{label} must be specified for {self.operation.name}")
            safe = "/~" if match.group("greedy") else "~"
            return quote(str(value), safe=safe)

        return _URI_LABEL.sub(substitute, path)

    def _marshall_payload(self, request: Request, request_obj: AwsRequest) -> None:
        if self.service.protocol != "rest-json":
            return
        try:
            payload = JsonValueMarshaller().marshall_structure(request_obj, payload_only=True)
            if not payload:
                return
            content = dump_json(payload)
        except (TypeError, ValueError, AttributeError) as e:
            raise MarshallingError(f"Unable to marshall request to JSON: {e}") from e
        request.content = content
        request.add_header("Content-Type", "application/json")
        request.add_header("Content-Length", str(len(content)))


def parse_header_value(kind: ShapeKind, raw: str) -> Any:
    if kind is ShapeKind.INTEGER:
        return string_utils.to_integer(raw)
    if kind is ShapeKind.FLOAT:
        return float(raw)
    if kind is ShapeKind.BOOLEAN:
        return string_utils.to_boolean(raw)
    if kind is ShapeKind.TIMESTAMP:
        return parse_timestamp(raw)
    if kind is ShapeKind.BLOB:
        return string_utils.to_bytes(raw)
    return raw


class RestResponseHandler(ResponseHandler):
    """Reads header-bound members from headers and the rest from the body."""

    def _unmarshall(self, response: HttpResponse, output_shape: type[AwsResult]) -> Optional[AwsResult]:
        spec = describe_structure(output_shape)
        values: dict[str, Any] = {}

        if spec.payload_members and response.body.strip():
            values.update(self._unmarshall_payload(response, output_shape))

        for member in spec.bound_members(HttpBinding.HEADER):
            raw = response.header(member.binding.name)
            if raw is None:
                continue
            try:
                values[member.name] = parse_header_value(member.spec.kind, raw)
            except (TypeError, ValueError) as e:
                raise UnmarshallingError(f"Unable to read header {member.binding.name}: {e}") from e

        for member in spec.bound_members(HttpBinding.HEADERS):
            prefix = member.binding.name.lower()
            prefixed = {
                name[len(prefix):]: value
                for name, value in response.headers.items()
                if name.startswith(prefix)
            }
            if prefixed:
                values[member.name] = prefixed

        return build_shape(output_shape, values)

    def _unmarshall_payload(self, response: HttpResponse, output_shape: type[AwsResult]) -> dict[str, Any]:
        if self.service.protocol == "rest-json":
            context = JsonUnmarshallerContext(response.body, response.headers)
            return get_structure_unmarshaller(output_shape).unmarshall_values(context) or {}
        return XmlShapeUnmarshaller().unmarshall_values(output_shape, parse_xml(response.body))
