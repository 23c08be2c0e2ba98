from awsmodels.service import OperationModel, ServiceModel
from awsmodels.services.ecs.exceptions import EXCEPTIONS, AmazonECSException
from awsmodels.services.ecs.models import (
    ListTaskDefinitionFamiliesRequest,
    ListTaskDefinitionFamiliesResult,
)

SERVICE = ServiceModel(
    name="ecs",
    service_name="AmazonECS",
    endpoint_prefix="ecs",
    signing_name="ecs",
    api_version="2014-11-13",
    protocol="json",
    target_prefix="AmazonEC2ContainerServiceV20141113",
    base_exception=AmazonECSException,
    operations=(
        OperationModel(
            "ListTaskDefinitionFamilies",
            ListTaskDefinitionFamiliesRequest,
            ListTaskDefinitionFamiliesResult,
        ),
    ),
    exceptions=EXCEPTIONS,
)
