"""Amazon RDS: DB snapshot deletion."""

from awsmodels.services.rds.exceptions import (
    AmazonRDSException,
    DBSnapshotNotFoundFault,
    InvalidDBSnapshotStateFault,
)
from awsmodels.services.rds.models import DBSnapshot, DeleteDBSnapshotRequest, DeleteDBSnapshotResult
from awsmodels.services.rds.service import SERVICE

__all__: list[str] = [
    "SERVICE",
    "AmazonRDSException",
    "DBSnapshot",
    "DBSnapshotNotFoundFault",
    "DeleteDBSnapshotRequest",
    "DeleteDBSnapshotResult",
    "InvalidDBSnapshotStateFault",
]
