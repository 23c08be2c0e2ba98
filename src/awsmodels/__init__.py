"""
Typed request/response models and wire protocol support for AWS service APIs.

    from awsmodels import create_client
    from awsmodels.services.ecs import ListTaskDefinitionFamiliesRequest

    client = create_client("ecs")
    result = client.invoke(ListTaskDefinitionFamiliesRequest(family_prefix="web"))
"""

import logging

from awsmodels.client import ServiceClient, create_client
from awsmodels.config import ClientConfig
from awsmodels.exceptions import (
    MarshallingError,
    SdkClientError,
    SdkError,
    ServiceError,
    UnmarshallingError,
)
from awsmodels.log import configure_logging, get_logger
from awsmodels.service import OperationModel, ServiceModel
from awsmodels.services import available_services, get_service

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__: list[str] = [
    "ClientConfig",
    "MarshallingError",
    "OperationModel",
    "SdkClientError",
    "SdkError",
    "ServiceClient",
    "ServiceError",
    "ServiceModel",
    "UnmarshallingError",
    "__version__",
    "available_services",
    "configure_logging",
    "create_client",
    "get_logger",
    "get_service",
]
