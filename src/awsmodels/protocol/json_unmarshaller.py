"""Unmarshalling of JSON responses by walking a token cursor."""

import threading
from abc import ABC, abstractmethod
from functools import cached_property
from typing import Any, Generic, Optional, TypeVar, Union

from pydantic import ValidationError

from awsmodels.exceptions import UnmarshallingError
from awsmodels.log import get_logger
from awsmodels.model.base import AwsResult, AwsShape
from awsmodels.model.shapes import MemberSpec, ShapeKind, TypeSpec, describe_structure
from awsmodels.protocol.base import ErrorHandler, ResponseHandler
from awsmodels.protocol.json_tokens import JsonToken, iter_tokens, load_document
from awsmodels.protocol.request import HttpResponse
from awsmodels.utils import string_utils
from awsmodels.utils.date_utils import parse_timestamp

logger = get_logger(__name__)

T = TypeVar("T")
M = TypeVar("M", bound=AwsShape)

_START_TOKENS = (JsonToken.START_OBJECT, JsonToken.START_ARRAY)
_END_TOKENS = (JsonToken.END_OBJECT, JsonToken.END_ARRAY)


class JsonUnmarshallerContext:
    """
    Cursor over the tokens of a JSON document.

    ``current_depth`` counts the containers open at the current token; a
    START token is reported at the depth it opens, an END token at the depth
    it returns to.
    """

    def __init__(
        self,
        content: Union[bytes, str, dict, list],
        headers: Optional[dict[str, str]] = None,
    ) -> None:
        document = content if isinstance(content, (dict, list)) else load_document(content)
        self._tokens = iter_tokens(document)
        self._value: Any = None
        self._parents: list[Optional[str]] = []
        self.headers = {k.lower(): v for k, v in (headers or {}).items()}
        self.current_token: Optional[JsonToken] = None
        self.current_depth = 0
        self.current_field_name: Optional[str] = None

    @property
    def current_parent_element(self) -> Optional[str]:
        """Field name owning the innermost open container."""
        return self._parents[-1] if self._parents else None

    def header(self, name: str) -> Optional[str]:
        return self.headers.get(name.lower())

    def next_token(self) -> Optional[JsonToken]:
        """Advance the cursor. Returns ``None`` at the end of the document."""
        token, value = next(self._tokens, (None, None))
        if token in _START_TOKENS:
            self.current_depth += 1
            self._parents.append(self.current_field_name)
        elif token in _END_TOKENS:
            self.current_depth -= 1
            self.current_field_name = self._parents.pop()
        elif token is JsonToken.FIELD_NAME:
            self.current_field_name = value
        self.current_token = token
        self._value = value
        return token

    def read_value(self) -> Any:
        """Value of the current scalar token, or the name of the current field."""
        return self._value

    def skip_value(self) -> None:
        """Move past the value starting at the current token."""
        if self.current_token not in _START_TOKENS:
            return
        depth = self.current_depth
        while self.current_depth >= depth:
            if self.next_token() is None:
                raise UnmarshallingError("Unexpected end of JSON document")

    def expect(self, *tokens: JsonToken) -> JsonToken:
        token = self.current_token
        if token not in tokens:
            found = token.name if token else "end of document"
            raise UnmarshallingError(
                f"Expected {' or '.join(t.name for t in tokens)} "
                f"at '{self.current_field_name or '<root>'}', found {found}"
            )
        return token


class Unmarshaller(ABC, Generic[T]):
    """Reads one value starting at the context's current token."""

    @abstractmethod
    def unmarshall(self, context: JsonUnmarshallerContext) -> Optional[T]:
        """Return the value, leaving the cursor on its last token."""


class SimpleTypeJsonUnmarshaller(Unmarshaller[T]):
    def unmarshall(self, context: JsonUnmarshallerContext) -> Optional[T]:
        token = context.current_token or context.next_token()
        if token is None or token is JsonToken.VALUE_NULL:
            return None
        if not token.is_scalar:
            raise UnmarshallingError(
                f"Expected a scalar at '{context.current_field_name}', found {token.name}"
            )
        try:
            return self.convert(context.read_value())
        except (TypeError, ValueError) as e:
            raise UnmarshallingError(
                f"Unable to read '{context.current_field_name}': {e}"
            ) from e

    @abstractmethod
    def convert(self, value: Any) -> T:
        """Convert a decoded JSON scalar."""


class StringJsonUnmarshaller(SimpleTypeJsonUnmarshaller[str]):
    def convert(self, value: Any) -> str:
        if isinstance(value, bool):
            return string_utils.from_boolean(value)
        return str(value)


class IntegerJsonUnmarshaller(SimpleTypeJsonUnmarshaller[int]):
    def convert(self, value: Any) -> int:
        if isinstance(value, str):
            return string_utils.to_integer(value)
        return int(value)


class FloatJsonUnmarshaller(SimpleTypeJsonUnmarshaller[float]):
    def convert(self, value: Any) -> float:
        return float(value)


class BooleanJsonUnmarshaller(SimpleTypeJsonUnmarshaller[bool]):
    def convert(self, value: Any) -> bool:
        if isinstance(value, str):
            return string_utils.to_boolean(value)
        return bool(value)


class DateJsonUnmarshaller(SimpleTypeJsonUnmarshaller[Any]):
    def convert(self, value: Any) -> Any:
        return parse_timestamp(value)


class BlobJsonUnmarshaller(SimpleTypeJsonUnmarshaller[bytes]):
    def convert(self, value: Any) -> bytes:
        return string_utils.to_bytes(value)


class ListUnmarshaller(Unmarshaller[list]):
    """Null items are dropped, as the marshaller never writes them."""

    def __init__(self, item_unmarshaller: Unmarshaller) -> None:
        self.item_unmarshaller = item_unmarshaller

    def unmarshall(self, context: JsonUnmarshallerContext) -> Optional[list]:
        token = context.current_token or context.next_token()
        if token is JsonToken.VALUE_NULL:
            return None
        context.expect(JsonToken.START_ARRAY)
        depth = context.current_depth
        items = []
        while True:
            token = context.next_token()
            if token is None:
                raise UnmarshallingError("Unexpected end of JSON document")
            if token is JsonToken.END_ARRAY and context.current_depth < depth:
                return items
            item = self.item_unmarshaller.unmarshall(context)
            if item is not None:
                items.append(item)


class MapUnmarshaller(Unmarshaller[dict]):
    """Entries with a null value are dropped."""

    def __init__(self, value_unmarshaller: Unmarshaller) -> None:
        self.value_unmarshaller = value_unmarshaller

    def unmarshall(self, context: JsonUnmarshallerContext) -> Optional[dict]:
        token = context.current_token or context.next_token()
        if token is JsonToken.VALUE_NULL:
            return None
        context.expect(JsonToken.START_OBJECT)
        depth = context.current_depth
        entries = {}
        while True:
            token = context.next_token()
            if token is None:
                raise UnmarshallingError("Unexpected end of JSON document")
            if token is JsonToken.END_OBJECT and context.current_depth < depth:
                return entries
            key = context.read_value()
            context.next_token()
            value = self.value_unmarshaller.unmarshall(context)
            if value is not None:
                entries[key] = value


class StructureJsonUnmarshaller(Unmarshaller[M]):
    """Populates a shape from the members of a JSON object. Unknown keys are skipped."""

    def __init__(self, model_cls: type[M]) -> None:
        self.model_cls = model_cls

    @cached_property
    def _members(self) -> dict[str, tuple[MemberSpec, Unmarshaller]]:
        spec = describe_structure(self.model_cls)
        return {m.wire_name: (m, unmarshaller_for(m.spec)) for m in spec.payload_members}

    def unmarshall_values(self, context: JsonUnmarshallerContext) -> Optional[dict[str, Any]]:
        """Read the object into ``{python_name: value}`` without building the shape."""
        token = context.current_token or context.next_token()
        if token is None or token is JsonToken.VALUE_NULL:
            return None
        context.expect(JsonToken.START_OBJECT)
        depth = context.current_depth
        members = self._members
        values: dict[str, Any] = {}
        while True:
            token = context.next_token()
            if token is None:
                raise UnmarshallingError("Unexpected end of JSON document")
            if token is JsonToken.END_OBJECT and context.current_depth < depth:
                return values
            entry = members.get(context.read_value())
            context.next_token()
            if entry is None:
                context.skip_value()
                continue
            member, unmarshaller = entry
            values[member.name] = unmarshaller.unmarshall(context)

    def unmarshall(self, context: JsonUnmarshallerContext) -> Optional[M]:
        values = self.unmarshall_values(context)
        if values is None:
            return None
        return build_shape(self.model_cls, values)


def build_shape(model_cls: type[M], values: dict[str, Any]) -> M:
    try:
        return model_cls(**values)
    except ValidationError as e:
        raise UnmarshallingError(f"Unable to build {model_cls.__name__}: {e}") from e


_SCALAR_UNMARSHALLERS: dict[ShapeKind, Unmarshaller] = {
    ShapeKind.STRING: StringJsonUnmarshaller(),
    ShapeKind.INTEGER: IntegerJsonUnmarshaller(),
    ShapeKind.FLOAT: FloatJsonUnmarshaller(),
    ShapeKind.BOOLEAN: BooleanJsonUnmarshaller(),
    ShapeKind.TIMESTAMP: DateJsonUnmarshaller(),
    ShapeKind.BLOB: BlobJsonUnmarshaller(),
}

_structure_unmarshallers: dict[type, StructureJsonUnmarshaller] = {}
_structure_lock = threading.Lock()


def get_structure_unmarshaller(model_cls: type[M]) -> StructureJsonUnmarshaller[M]:
    """Shared unmarshaller for a shape class, created on first use."""
    unmarshaller = _structure_unmarshallers.get(model_cls)
    if unmarshaller is None:
        with _structure_lock:
            unmarshaller = _structure_unmarshallers.setdefault(
                model_cls, StructureJsonUnmarshaller(model_cls)
            )
    return unmarshaller


def unmarshaller_for(spec: TypeSpec) -> Unmarshaller:
    if spec.kind is ShapeKind.LIST:
        return ListUnmarshaller(unmarshaller_for(spec.member))
    if spec.kind is ShapeKind.MAP:
        return MapUnmarshaller(unmarshaller_for(spec.member))
    if spec.kind is ShapeKind.STRUCTURE:
        return get_structure_unmarshaller(spec.model)
    return _SCALAR_UNMARSHALLERS[spec.kind]


class JsonResponseHandler(ResponseHandler):
    """Reads the output shape from a JSON object body."""

    def _unmarshall(self, response: HttpResponse, output_shape: type[AwsResult]) -> Optional[AwsResult]:
        if not response.body.strip():
            return None
        context = JsonUnmarshallerContext(response.body, response.headers)
        return get_structure_unmarshaller(output_shape).unmarshall(context)


class JsonErrorHandler(ErrorHandler):
    """
    Reads error code and message from a JSON error response.

    The code comes from the ``x-amzn-ErrorType`` header when present, else
    from ``__type`` (stripped of its namespace) or ``code`` in the body.
    """

    def _parse(self, response: HttpResponse) -> tuple[Optional[str], Optional[str], Optional[str]]:
        body: Any = {}
        if response.body.strip():
            try:
                body = load_document(response.body)
            except UnmarshallingError:
                logger.debug("Error response from %s is not JSON", self.service.name)
        if not isinstance(body, dict):
            body = {}
        nested = body.get("error") if isinstance(body.get("error"), dict) else {}

        code = None
        if error_type := response.header("x-amzn-ErrorType"):
            code = error_type.split(":", 1)[0]
        code = code or body.get("__type") or body.get("code") or nested.get("code")
        if code:
            code = str(code).rsplit("#", 1)[-1]

        message = (
            body.get("message")
            or body.get("Message")
            or body.get("errorMessage")
            or nested.get("message")
        )
        request_id = nested.get("rid")
        return code, message, request_id
