"""Unit tests for the service registry and service models."""

import pytest
from botocore.exceptions import ClientError

from awsmodels.exceptions import ServiceError
from awsmodels.service import to_snake_case
from awsmodels.services import SERVICE_NAMES, available_services, get_service
from awsmodels.services import codedeploy, config, rds, s3
from awsmodels.services.config import PutEvaluationsRequest


class TestServiceRegistry:
    """Test lazy lookup of service models."""

    def test_get_service_returns_package_model(self):
        """Test that the registry hands out the model declared by the package."""
        assert get_service("config") is config.SERVICE
        assert get_service("config") is get_service("config")

    def test_unknown_service(self):
        with pytest.raises(KeyError, match="Unknown service 'sqs'"):
            get_service("sqs")

    def test_available_services(self):
        assert available_services() == SERVICE_NAMES
        assert "s3" in available_services()

    @pytest.mark.parametrize("name", SERVICE_NAMES)
    def test_every_service_is_complete(self, name):
        """Test that each registered service declares operations and typed errors."""
        service = get_service(name)

        assert service.name == name
        assert service.protocol in {"json", "rest-json", "rest-xml", "query"}
        assert service.operations
        for operation in service.operations:
            assert service.operation(operation.name) is operation
            assert service.operation(operation.python_name) is operation
        for exception_class in service.exceptions:
            assert issubclass(exception_class, service.base_exception)
        assert issubclass(service.base_exception, ServiceError)

    @pytest.mark.parametrize("name", [n for n in SERVICE_NAMES if get_service(n).protocol == "json"])
    def test_json_services_have_target_prefix(self, name):
        assert get_service(name).target_prefix


class TestServiceModel:
    """Test operation and error lookup on a service model."""

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("PutEvaluations", "put_evaluations"),
            ("DescribeVTLDevices", "describe_vtl_devices"),
            ("DeleteDBSnapshot", "delete_db_snapshot"),
            ("GetObjectMetadata", "get_object_metadata"),
            ("ListTaskDefinitionFamilies", "list_task_definition_families"),
        ],
    )
    def test_to_snake_case(self, name, expected):
        assert to_snake_case(name) == expected

    def test_unknown_operation(self):
        with pytest.raises(KeyError, match="config has no operation 'DeleteConfigRule'"):
            config.SERVICE.operation("DeleteConfigRule")

    def test_operation_for_request(self):
        operation = config.SERVICE.operation_for_request(PutEvaluationsRequest())

        assert operation.name == "PutEvaluations"
        with pytest.raises(KeyError):
            rds.SERVICE.operation_for_request(PutEvaluationsRequest())

    def test_exception_class_for(self):
        assert rds.SERVICE.exception_class_for("DBSnapshotNotFound") is rds.DBSnapshotNotFoundFault
        assert rds.SERVICE.exception_class_for("DBSnapshotNotFoundFault") is rds.AmazonRDSException

    def test_endpoint_for(self):
        assert config.SERVICE.endpoint_for("eu-west-1") == "https://config.eu-west-1.amazonaws.com"
        assert s3.SERVICE.endpoint_for("cn-north-1") == "https://s3.cn-north-1.amazonaws.com.cn"

    def test_translate_client_error(self):
        """Test mapping errors raised by boto3 clients to typed exceptions."""
        error = ClientError(
            {
                "Error": {"Code": "DeploymentDoesNotExistException", "Message": "no such deployment"},
                "ResponseMetadata": {"HTTPStatusCode": 400, "RequestId": "req-42"},
            },
            "GetDeployment",
        )

        translated = codedeploy.SERVICE.translate_client_error(error)

        assert isinstance(translated, codedeploy.DeploymentDoesNotExistException)
        assert translated.error_message == "no such deployment"
        assert translated.status_code == 400
        assert translated.request_id == "req-42"
        assert translated.service_name == "AmazonCodeDeploy"
        assert translated.__cause__ is error

    def test_translate_unknown_client_error(self):
        error = ClientError({"Error": {"Code": "Throttling", "Message": "slow"}}, "PutEvaluations")

        translated = config.SERVICE.translate_client_error(error)

        assert type(translated) is config.AmazonConfigException
        assert translated.error_code == "Throttling"
        assert translated.status_code is None
        assert translated.error_type == "Unknown"
