"""Unmarshalling of XML responses (query and rest-xml protocols)."""

from typing import Any, Optional
from xml.etree import ElementTree as ET

from awsmodels.exceptions import UnmarshallingError
from awsmodels.log import get_logger
from awsmodels.model.base import AwsResult, AwsShape
from awsmodels.model.shapes import ShapeKind, TypeSpec, describe_structure
from awsmodels.protocol.base import ErrorHandler, ResponseHandler, response_metadata
from awsmodels.protocol.json_unmarshaller import build_shape
from awsmodels.protocol.request import HttpResponse
from awsmodels.utils import string_utils
from awsmodels.utils.date_utils import parse_timestamp

logger = get_logger(__name__)


def local_name(tag: str) -> str:
    """Tag name without its ``{namespace}`` prefix."""
    return tag.rsplit("}", 1)[-1]


def parse_xml(body: bytes) -> ET.Element:
    try:
        return ET.fromstring(body)
    except ET.ParseError as e:
        raise UnmarshallingError(f"Unable to parse response as XML: {e}") from e


def find_child(element: ET.Element, name: str) -> Optional[ET.Element]:
    return next((child for child in element if local_name(child.tag) == name), None)


def child_text(element: ET.Element, name: str) -> Optional[str]:
    child = find_child(element, name)
    return child.text if child is not None else None


class XmlShapeUnmarshaller:
    """Reads shapes from element trees. Lists use ``member`` items, maps ``entry`` items."""

    def unmarshall_values(self, model_cls: type[AwsShape], element: ET.Element) -> dict[str, Any]:
        spec = describe_structure(model_cls)
        values: dict[str, Any] = {}
        for child in element:
            member = spec.member_for_wire_name(local_name(child.tag))
            if member is None or member.binding is not None:
                continue
            values[member.name] = self.unmarshall_value(member.spec, child)
        return values

    def unmarshall_structure(self, model_cls: type[AwsShape], element: ET.Element) -> AwsShape:
        return build_shape(model_cls, self.unmarshall_values(model_cls, element))

    def unmarshall_value(self, spec: TypeSpec, element: ET.Element) -> Any:
        kind = spec.kind
        if kind is ShapeKind.STRUCTURE:
            return self.unmarshall_structure(spec.model, element)
        if kind is ShapeKind.LIST:
            return [
                self.unmarshall_value(spec.member, item)
                for item in element
                if local_name(item.tag) == "member"
            ]
        if kind is ShapeKind.MAP:
            entries = {}
            for entry in element:
                if local_name(entry.tag) != "entry":
                    continue
                key = child_text(entry, "key")
                value = find_child(entry, "value")
                entries[key] = self.unmarshall_value(spec.member, value) if value is not None else None
            return entries

        text = element.text or ""
        try:
            if kind is ShapeKind.STRING:
                return text
            if kind is ShapeKind.INTEGER:
                return string_utils.to_integer(text)
            if kind is ShapeKind.FLOAT:
                return float(text)
            if kind is ShapeKind.BOOLEAN:
                return string_utils.to_boolean(text)
            if kind is ShapeKind.TIMESTAMP:
                return parse_timestamp(text.strip())
            return string_utils.to_bytes(text)
        except (TypeError, ValueError) as e:
            raise UnmarshallingError(f"Unable to read '{local_name(element.tag)}': {e}") from e


class QueryResponseHandler(ResponseHandler):
    """
    Reads ``<OperationResponse><OperationResult>...`` documents.

    The request id comes from ``ResponseMetadata/RequestId``.
    """

    def _unmarshall(self, response: HttpResponse, output_shape: type[AwsResult]) -> Optional[AwsResult]:
        if not response.body.strip():
            return None
        root = parse_xml(response.body)
        wrapper = self.operation.result_wrapper or f"{self.operation.name}Result"
        result = find_child(root, wrapper)
        if result is None:
            logger.debug("No %s element in %s response", wrapper, self.operation.name)
            return None
        shape = XmlShapeUnmarshaller().unmarshall_structure(output_shape, result)
        request_id = None
        if (metadata := find_child(root, "ResponseMetadata")) is not None:
            request_id = child_text(metadata, "RequestId")
        shape.set_response_metadata(response_metadata(response, request_id))
        return shape


class XmlErrorHandler(ErrorHandler):
    """Reads ``<ErrorResponse><Error>`` (query) or ``<Error>`` (S3) documents."""

    def _parse(self, response: HttpResponse) -> tuple[Optional[str], Optional[str], Optional[str]]:
        if not response.body.strip():
            return None, None, None
        try:
            root = parse_xml(response.body)
        except UnmarshallingError:
            logger.debug("Error response from %s is not XML", self.service.name)
            return None, None, None

        error = root if local_name(root.tag) == "Error" else find_child(root, "Error")
        if error is None:
            return None, None, child_text(root, "RequestId")
        request_id = child_text(error, "RequestId") or child_text(root, "RequestId")
        return child_text(error, "Code"), child_text(error, "Message"), request_id
