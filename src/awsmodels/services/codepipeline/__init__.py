"""AWS CodePipeline: pipelines and their stage states."""

from awsmodels.services.codepipeline.exceptions import (
    AWSCodePipelineException,
    InvalidNextTokenException,
    LimitExceededException,
    PipelineNotFoundException,
    ValidationException,
)
from awsmodels.services.codepipeline.models import (
    ActionState,
    GetPipelineStateRequest,
    GetPipelineStateResult,
    ListPipelinesRequest,
    ListPipelinesResult,
    PipelineSummary,
    StageExecution,
    StageState,
    TransitionState,
)
from awsmodels.services.codepipeline.service import SERVICE

__all__: list[str] = [
    "SERVICE",
    "AWSCodePipelineException",
    "ActionState",
    "GetPipelineStateRequest",
    "GetPipelineStateResult",
    "InvalidNextTokenException",
    "LimitExceededException",
    "ListPipelinesRequest",
    "ListPipelinesResult",
    "PipelineNotFoundException",
    "PipelineSummary",
    "StageExecution",
    "StageState",
    "TransitionState",
    "ValidationException",
]
