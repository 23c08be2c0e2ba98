from awsmodels.service import OperationModel, ServiceModel
from awsmodels.services.codedeploy.exceptions import EXCEPTIONS, AmazonCodeDeployException
from awsmodels.services.codedeploy.models import GetDeploymentRequest, GetDeploymentResult

SERVICE = ServiceModel(
    name="codedeploy",
    service_name="AmazonCodeDeploy",
    endpoint_prefix="codedeploy",
    signing_name="codedeploy",
    api_version="2014-10-06",
    protocol="json",
    target_prefix="CodeDeploy_20141006",
    base_exception=AmazonCodeDeployException,
    operations=(OperationModel("GetDeployment", GetDeploymentRequest, GetDeploymentResult),),
    exceptions=EXCEPTIONS,
)
