"""AWS CodePipeline records."""

from datetime import datetime
from typing import Optional

from pydantic import ConfigDict

from awsmodels.model.base import AwsRequest, AwsResult, AwsShape, to_camel

_CAMEL_CASE = ConfigDict(alias_generator=to_camel)


class PipelineSummary(AwsShape):
    model_config = _CAMEL_CASE

    name: Optional[str] = None
    version: Optional[int] = None
    created: Optional[datetime] = None
    updated: Optional[datetime] = None


class TransitionState(AwsShape):
    """Whether artifacts may flow into a stage."""

    model_config = _CAMEL_CASE

    enabled: Optional[bool] = None
    last_changed_by: Optional[str] = None
    last_changed_at: Optional[datetime] = None
    disabled_reason: Optional[str] = None


class ActionState(AwsShape):
    model_config = _CAMEL_CASE

    action_name: Optional[str] = None
    entity_url: Optional[str] = None
    revision_url: Optional[str] = None


class StageExecution(AwsShape):
    model_config = _CAMEL_CASE

    pipeline_execution_id: Optional[str] = None
    status: Optional[str] = None


class StageState(AwsShape):
    model_config = _CAMEL_CASE

    stage_name: Optional[str] = None
    inbound_transition_state: Optional[TransitionState] = None
    action_states: Optional[list[ActionState]] = None
    latest_execution: Optional[StageExecution] = None


class ListPipelinesRequest(AwsRequest):
    model_config = _CAMEL_CASE

    next_token: Optional[str] = None


class ListPipelinesResult(AwsResult):
    model_config = _CAMEL_CASE

    pipelines: Optional[list[PipelineSummary]] = None
    next_token: Optional[str] = None


class GetPipelineStateRequest(AwsRequest):
    model_config = _CAMEL_CASE

    name: Optional[str] = None


class GetPipelineStateResult(AwsResult):
    model_config = _CAMEL_CASE

    pipeline_name: Optional[str] = None
    pipeline_version: Optional[int] = None
    stage_states: Optional[list[StageState]] = None
    created: Optional[datetime] = None
    updated: Optional[datetime] = None
