"""HTTP request and response values exchanged with the transport."""

from dataclasses import dataclass, field
from typing import Any, Optional
from urllib.parse import quote, urlencode

from botocore.awsrequest import AWSRequest


class HttpMethod:
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    HEAD = "HEAD"
    PATCH = "PATCH"


@dataclass
class Request:
    """A marshalled request, not yet bound to an endpoint or signed."""

    service_name: str
    original_request: Any = None
    http_method: str = HttpMethod.POST
    resource_path: str = "/"
    headers: dict[str, str] = field(default_factory=dict)
    parameters: dict[str, list[str]] = field(default_factory=dict)
    content: bytes = b""

    def add_header(self, name: str, value: str) -> None:
        self.headers[name] = value

    def add_parameter(self, name: str, value: str) -> None:
        self.parameters.setdefault(name, []).append(value)

    def build_url(self, endpoint: str) -> str:
        url = endpoint.rstrip("/") + (self.resource_path or "/")
        if self.parameters:
            url += "?" + urlencode(self.parameters, doseq=True, safe="-_.~", quote_via=quote)
        return url

    def to_aws_request(self, endpoint: str) -> AWSRequest:
        """Bind to an endpoint as a botocore request, ready for signing."""
        return AWSRequest(
            method=self.http_method,
            url=self.build_url(endpoint),
            headers=dict(self.headers),
            data=self.content,
        )


@dataclass
class HttpResponse:
    """A raw response. Header names are stored lowercased."""

    status_code: int
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes = b""

    def __post_init__(self) -> None:
        self.headers = {k.lower(): v for k, v in self.headers.items()}

    def header(self, name: str) -> Optional[str]:
        return self.headers.get(name.lower())

    @property
    def request_id(self) -> Optional[str]:
        return (
            self.header("x-amzn-RequestId")
            or self.header("x-amz-request-id")
            or self.header("x-amz-id-2")
        )
