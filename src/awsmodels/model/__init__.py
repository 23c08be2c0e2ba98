"""Record types shared by the service models."""

from awsmodels.model.base import (
    AwsRequest,
    AwsResult,
    AwsShape,
    HttpBinding,
    ResponseMetadata,
    to_camel,
    to_pascal,
)
from awsmodels.model.shapes import (
    MemberSpec,
    ShapeKind,
    StructureSpec,
    TypeSpec,
    describe_structure,
    resolve_type,
)

__all__: list[str] = [
    "AwsRequest",
    "AwsResult",
    "AwsShape",
    "HttpBinding",
    "MemberSpec",
    "ResponseMetadata",
    "ShapeKind",
    "StructureSpec",
    "TypeSpec",
    "describe_structure",
    "resolve_type",
    "to_camel",
    "to_pascal",
]
