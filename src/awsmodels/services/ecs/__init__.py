"""Amazon EC2 Container Service: task definition families."""

from awsmodels.services.ecs.exceptions import (
    AmazonECSException,
    ClientException,
    InvalidParameterException,
    ServerException,
)
from awsmodels.services.ecs.models import (
    ListTaskDefinitionFamiliesRequest,
    ListTaskDefinitionFamiliesResult,
)
from awsmodels.services.ecs.service import SERVICE

__all__: list[str] = [
    "SERVICE",
    "AmazonECSException",
    "ClientException",
    "InvalidParameterException",
    "ListTaskDefinitionFamiliesRequest",
    "ListTaskDefinitionFamiliesResult",
    "ServerException",
]
