"""Unit tests for the exception hierarchy."""

from botocore.exceptions import ClientError

from awsmodels.exceptions import MarshallingError, SdkClientError, SdkError, ServiceError, UnmarshallingError


class SampleServiceException(ServiceError):
    pass


class SampleFault(SampleServiceException):
    error_code = "Sample"


class TestSdkClientError:
    def test_hierarchy(self):
        assert issubclass(MarshallingError, SdkClientError)
        assert issubclass(UnmarshallingError, SdkClientError)
        assert issubclass(SdkClientError, SdkError)
        assert issubclass(ServiceError, SdkError)
        assert not issubclass(ServiceError, SdkClientError)

    def test_details(self):
        error = SdkClientError("failed", {"attempts": 2})

        assert str(error) == "failed"
        assert error.message == "failed"
        assert error.details == {"attempts": 2}
        assert SdkClientError("failed").details == {}


class TestServiceError:
    """Test error codes, types and formatting."""

    def test_code_defaults_to_class_name(self):
        assert SampleServiceException("boom").error_code == "SampleServiceException"

    def test_declared_wire_code(self):
        assert SampleFault("boom").error_code == "Sample"
        assert SampleFault.wire_code() == "Sample"
        assert SampleServiceException.wire_code() == "SampleServiceException"

    def test_explicit_code_wins(self):
        assert SampleFault("boom", error_code="Other").error_code == "Other"
        assert SampleFault.error_code == "Sample"

    def test_error_type_from_status(self):
        assert SampleServiceException(status_code=400).error_type == ServiceError.ERROR_TYPE_CLIENT
        assert SampleServiceException(status_code=503).error_type == ServiceError.ERROR_TYPE_SERVICE
        assert SampleServiceException().error_type == ServiceError.ERROR_TYPE_UNKNOWN
        assert SampleServiceException(status_code=503, error_type="Client").error_type == "Client"

    def test_str_without_optional_details(self):
        assert str(SampleServiceException("boom")) == "boom (Error Code: SampleServiceException)"

    def test_from_client_error(self):
        error = ClientError(
            {"Error": {"Code": "Sample", "Message": "bad"}, "ResponseMetadata": {"HTTPStatusCode": 409}},
            "DoThing",
        )

        translated = SampleServiceException.from_client_error(error, (SampleFault,), "SampleService")

        assert type(translated) is SampleFault
        assert translated.status_code == 409
        assert translated.service_name == "SampleService"
        assert translated.error_type == "Client"
