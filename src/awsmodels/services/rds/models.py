"""Amazon RDS records."""

from datetime import datetime
from typing import Optional

from pydantic import ConfigDict, Field

from awsmodels.model.base import AwsRequest, AwsResult, AwsShape, to_pascal

_PASCAL_CASE = ConfigDict(alias_generator=to_pascal)


class DBSnapshot(AwsShape):
    """A DB snapshot as returned by the snapshot operations."""

    model_config = _PASCAL_CASE

    db_snapshot_identifier: Optional[str] = Field(None, alias="DBSnapshotIdentifier")
    db_instance_identifier: Optional[str] = Field(None, alias="DBInstanceIdentifier")
    snapshot_create_time: Optional[datetime] = None
    engine: Optional[str] = None
    allocated_storage: Optional[int] = None
    status: Optional[str] = None
    port: Optional[int] = None
    availability_zone: Optional[str] = None
    vpc_id: Optional[str] = None
    instance_create_time: Optional[datetime] = None
    master_username: Optional[str] = None
    engine_version: Optional[str] = None
    license_model: Optional[str] = None
    snapshot_type: Optional[str] = None
    iops: Optional[int] = None
    option_group_name: Optional[str] = None
    percent_progress: Optional[int] = None
    source_region: Optional[str] = None
    source_db_snapshot_identifier: Optional[str] = Field(
        None, alias="SourceDBSnapshotIdentifier"
    )
    storage_type: Optional[str] = None
    tde_credential_arn: Optional[str] = None
    encrypted: Optional[bool] = None
    kms_key_id: Optional[str] = None
    db_snapshot_arn: Optional[str] = Field(None, alias="DBSnapshotArn")


class DeleteDBSnapshotRequest(AwsRequest):
    """
    Deletes a DB snapshot. The snapshot must be in the ``available`` state.

    Attributes:
        db_snapshot_identifier: Identifier of the snapshot to delete
    """

    model_config = _PASCAL_CASE

    db_snapshot_identifier: Optional[str] = Field(None, alias="DBSnapshotIdentifier")


class DeleteDBSnapshotResult(AwsResult):
    model_config = _PASCAL_CASE

    db_snapshot: Optional[DBSnapshot] = Field(None, alias="DBSnapshot")
