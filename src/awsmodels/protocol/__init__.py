"""
Wire protocols.

Each protocol contributes a request marshaller, a response handler for
successful responses and an error handler:

    json       JsonRequestMarshaller   JsonResponseHandler   JsonErrorHandler
    rest-json  RestRequestMarshaller   RestResponseHandler   JsonErrorHandler
    rest-xml   RestRequestMarshaller   RestResponseHandler   XmlErrorHandler
    query      QueryRequestMarshaller  QueryResponseHandler  XmlErrorHandler
"""

from typing import TYPE_CHECKING

from awsmodels.protocol.base import ErrorHandler, RequestMarshaller, ResponseHandler
from awsmodels.protocol.json_marshaller import JsonRequestMarshaller
from awsmodels.protocol.json_tokens import JsonToken
from awsmodels.protocol.json_unmarshaller import (
    JsonErrorHandler,
    JsonResponseHandler,
    JsonUnmarshallerContext,
    get_structure_unmarshaller,
)
from awsmodels.protocol.query_marshaller import QueryRequestMarshaller
from awsmodels.protocol.request import HttpMethod, HttpResponse, Request
from awsmodels.protocol.rest import RestRequestMarshaller, RestResponseHandler
from awsmodels.protocol.xml_unmarshaller import QueryResponseHandler, XmlErrorHandler

if TYPE_CHECKING:
    from awsmodels.service import OperationModel, ServiceModel

_PROTOCOLS: dict[str, tuple[type[RequestMarshaller], type[ResponseHandler], type[ErrorHandler]]] = {
    "json": (JsonRequestMarshaller, JsonResponseHandler, JsonErrorHandler),
    "rest-json": (RestRequestMarshaller, RestResponseHandler, JsonErrorHandler),
    "rest-xml": (RestRequestMarshaller, RestResponseHandler, XmlErrorHandler),
    "query": (QueryRequestMarshaller, QueryResponseHandler, XmlErrorHandler),
}


def _protocol(service: "ServiceModel"):
    try:
        return _PROTOCOLS[service.protocol]
    except KeyError:
        raise ValueError(f"Unsupported protocol '{service.protocol}' for {service.name}") from None


def create_marshaller(service: "ServiceModel", operation: "OperationModel") -> RequestMarshaller:
    marshaller_class = operation.marshaller_class or _protocol(service)[0]
    return marshaller_class(service, operation)


def create_response_handler(service: "ServiceModel", operation: "OperationModel") -> ResponseHandler:
    return _protocol(service)[1](service, operation)


def create_error_handler(service: "ServiceModel") -> ErrorHandler:
    return _protocol(service)[2](service)


__all__: list[str] = [
    "ErrorHandler",
    "HttpMethod",
    "HttpResponse",
    "JsonToken",
    "JsonUnmarshallerContext",
    "Request",
    "RequestMarshaller",
    "ResponseHandler",
    "create_error_handler",
    "create_marshaller",
    "create_response_handler",
    "get_structure_unmarshaller",
]
