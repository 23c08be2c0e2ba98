"""Token stream over a JSON document."""

import json
from collections.abc import Iterator
from enum import Enum
from typing import Any, Union

from awsmodels.exceptions import UnmarshallingError


class JsonToken(Enum):
    START_OBJECT = "START_OBJECT"
    END_OBJECT = "END_OBJECT"
    START_ARRAY = "START_ARRAY"
    END_ARRAY = "END_ARRAY"
    FIELD_NAME = "FIELD_NAME"
    VALUE_STRING = "VALUE_STRING"
    VALUE_NUMBER_INT = "VALUE_NUMBER_INT"
    VALUE_NUMBER_FLOAT = "VALUE_NUMBER_FLOAT"
    VALUE_TRUE = "VALUE_TRUE"
    VALUE_FALSE = "VALUE_FALSE"
    VALUE_NULL = "VALUE_NULL"

    @property
    def is_scalar(self) -> bool:
        return self not in _STRUCTURAL


_STRUCTURAL = frozenset(
    {
        JsonToken.START_OBJECT,
        JsonToken.END_OBJECT,
        JsonToken.START_ARRAY,
        JsonToken.END_ARRAY,
        JsonToken.FIELD_NAME,
    }
)


def load_document(content: Union[bytes, str]) -> Any:
    """
    Decode a JSON body.

    Raises:
        UnmarshallingError: If the body is not valid JSON
    """
    if isinstance(content, bytes):
        content = content.decode("utf-8")
    try:
        return json.loads(content)
    except ValueError as e:
        raise UnmarshallingError(f"Unable to parse response as JSON: {e}") from e


def iter_tokens(document: Any) -> Iterator[tuple[JsonToken, Any]]:
    """Yield ``(token, value)`` pairs for a decoded document, depth first, in key order."""
    if isinstance(document, dict):
        yield JsonToken.START_OBJECT, None
        for key, value in document.items():
            yield JsonToken.FIELD_NAME, key
            yield from iter_tokens(value)
        yield JsonToken.END_OBJECT, None
    elif isinstance(document, list):
        yield JsonToken.START_ARRAY, None
        for item in document:
            yield from iter_tokens(item)
        yield JsonToken.END_ARRAY, None
    elif document is None:
        yield JsonToken.VALUE_NULL, None
    elif document is True:
        yield JsonToken.VALUE_TRUE, True
    elif document is False:
        yield JsonToken.VALUE_FALSE, False
    elif isinstance(document, int):
        yield JsonToken.VALUE_NUMBER_INT, document
    elif isinstance(document, float):
        yield JsonToken.VALUE_NUMBER_FLOAT, document
    elif isinstance(document, str):
        yield JsonToken.VALUE_STRING, document
    else:
        raise UnmarshallingError(f"Unexpected JSON value of type {type(document).__name__}")
