from awsmodels.service import OperationModel, ServiceModel
from awsmodels.services.rds.exceptions import EXCEPTIONS, AmazonRDSException
from awsmodels.services.rds.models import DeleteDBSnapshotRequest, DeleteDBSnapshotResult

SERVICE = ServiceModel(
    name="rds",
    service_name="AmazonRDS",
    endpoint_prefix="rds",
    signing_name="rds",
    api_version="2014-10-31",
    protocol="query",
    base_exception=AmazonRDSException,
    operations=(
        OperationModel(
            "DeleteDBSnapshot",
            DeleteDBSnapshotRequest,
            DeleteDBSnapshotResult,
            result_wrapper="DeleteDBSnapshotResult",
        ),
    ),
    exceptions=EXCEPTIONS,
)
