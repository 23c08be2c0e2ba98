from awsmodels.service import OperationModel, ServiceModel
from awsmodels.services.config.exceptions import EXCEPTIONS, AmazonConfigException
from awsmodels.services.config.models import PutEvaluationsRequest, PutEvaluationsResult

SERVICE = ServiceModel(
    name="config",
    service_name="AmazonConfig",
    endpoint_prefix="config",
    signing_name="config",
    api_version="2014-11-12",
    protocol="json",
    target_prefix="StarlingDoveService",
    base_exception=AmazonConfigException,
    operations=(
        OperationModel("PutEvaluations", PutEvaluationsRequest, PutEvaluationsResult),
    ),
    exceptions=EXCEPTIONS,
)
