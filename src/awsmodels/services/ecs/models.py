"""Amazon ECS records."""

from typing import Optional

from pydantic import ConfigDict, Field

from awsmodels.model.base import AwsRequest, AwsResult, to_camel

_CAMEL_CASE = ConfigDict(alias_generator=to_camel)


class ListTaskDefinitionFamiliesRequest(AwsRequest):
    """
    Lists the task definition families registered in the account.

    Attributes:
        family_prefix: Only families whose name starts with this value
        next_token: Token from a previous truncated result
        max_results: Page size, between 1 and 100
    """

    model_config = _CAMEL_CASE

    family_prefix: Optional[str] = None
    next_token: Optional[str] = None
    max_results: Optional[int] = Field(None, ge=1, le=100)


class ListTaskDefinitionFamiliesResult(AwsResult):
    model_config = _CAMEL_CASE

    families: Optional[list[str]] = None
    next_token: Optional[str] = None
