from awsmodels.service import OperationModel, ServiceModel
from awsmodels.services.codepipeline.exceptions import EXCEPTIONS, AWSCodePipelineException
from awsmodels.services.codepipeline.models import (
    GetPipelineStateRequest,
    GetPipelineStateResult,
    ListPipelinesRequest,
    ListPipelinesResult,
)

SERVICE = ServiceModel(
    name="codepipeline",
    service_name="AWSCodePipeline",
    endpoint_prefix="codepipeline",
    signing_name="codepipeline",
    api_version="2015-07-09",
    protocol="json",
    target_prefix="CodePipeline_20150709",
    base_exception=AWSCodePipelineException,
    operations=(
        OperationModel("ListPipelines", ListPipelinesRequest, ListPipelinesResult),
        OperationModel("GetPipelineState", GetPipelineStateRequest, GetPipelineStateResult),
    ),
    exceptions=EXCEPTIONS,
)
