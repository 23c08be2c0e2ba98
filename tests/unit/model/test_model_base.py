"""Unit tests for the shared shape base classes."""

from datetime import datetime, timezone

import pytest

from awsmodels.model.base import ResponseMetadata, to_camel, to_pascal
from awsmodels.services.config import ComplianceType, Evaluation, PutEvaluationsRequest
from awsmodels.services.devicefarm import Radios
from awsmodels.services.ecs import ListTaskDefinitionFamiliesRequest, ListTaskDefinitionFamiliesResult


class TestAliasGenerators:
    """Test snake_case to wire name conversion."""

    def test_to_camel(self):
        assert to_camel("family_prefix") == "familyPrefix"
        assert to_camel("sum_of_squares") == "sumOfSquares"
        assert to_camel("arn") == "arn"

    def test_to_pascal(self):
        assert to_pascal("compliance_resource_id") == "ComplianceResourceId"
        assert to_pascal("result_token") == "ResultToken"


class TestAwsShape:
    """Test equality, hashing, builders and rendering of shapes."""

    def test_unset_fields_are_none(self):
        request = ListTaskDefinitionFamiliesRequest()

        assert request.family_prefix is None
        assert request.next_token is None
        assert request.max_results is None

    def test_populate_by_wire_name_or_field_name(self):
        by_alias = ListTaskDefinitionFamiliesRequest.model_validate({"familyPrefix": "web"})
        by_name = ListTaskDefinitionFamiliesRequest(family_prefix="web")

        assert by_alias == by_name

    def test_with_fields_returns_same_instance(self):
        request = ListTaskDefinitionFamiliesRequest()

        returned = request.with_fields(family_prefix="web", max_results=10)

        assert returned is request
        assert request.family_prefix == "web"
        assert request.max_results == 10

    def test_with_fields_rejects_unknown_field(self):
        with pytest.raises(AttributeError, match="no field 'family'"):
            ListTaskDefinitionFamiliesRequest().with_fields(family="web")

    def test_equal_shapes_hash_equal(self):
        first = Radios(wifi=True, bluetooth=False, nfc=True, gps=False)
        second = Radios(wifi=True, bluetooth=False, nfc=True, gps=False)

        assert first == second
        assert hash(first) == hash(second)
        assert len({first, second}) == 1

    def test_null_and_set_fields_differ(self):
        assert Radios(wifi=True) != Radios(wifi=True, gps=False)
        assert Radios(wifi=None) != Radios(wifi=False)

    def test_shapes_of_different_types_are_not_equal(self):
        assert ListTaskDefinitionFamiliesRequest() != ListTaskDefinitionFamiliesResult()

    def test_nested_lists_hash_consistently(self):
        stamp = datetime(2016, 1, 1, tzinfo=timezone.utc)
        first = PutEvaluationsRequest(
            evaluations=[Evaluation(compliance_resource_id="i-1", ordering_timestamp=stamp)],
            result_token="token",
        )
        second = PutEvaluationsRequest(
            evaluations=[Evaluation(compliance_resource_id="i-1", ordering_timestamp=stamp)],
            result_token="token",
        )

        assert first == second
        assert hash(first) == hash(second)

    def test_str_lists_non_null_fields_by_wire_name(self):
        request = ListTaskDefinitionFamiliesRequest(family_prefix="web", max_results=5)

        assert str(request) == "{familyPrefix: web, maxResults: 5}"

    def test_str_of_empty_shape(self):
        assert str(Radios()) == "{}"

    def test_enum_field_accepts_wire_value(self):
        evaluation = Evaluation(compliance_type="NON_COMPLIANT")

        assert evaluation.compliance_type is ComplianceType.NON_COMPLIANT

    def test_enum_field_keeps_unknown_wire_value(self):
        evaluation = Evaluation(compliance_type="PARTIALLY_COMPLIANT")

        assert evaluation.compliance_type == "PARTIALLY_COMPLIANT"

    def test_naive_timestamps_are_taken_as_utc(self):
        evaluation = Evaluation(ordering_timestamp=datetime(2016, 3, 1, 12))
        expected = datetime(2016, 3, 1, 12, tzinfo=timezone.utc)

        assert evaluation.ordering_timestamp.tzinfo is timezone.utc
        assert evaluation == Evaluation(ordering_timestamp=expected)

        evaluation.ordering_timestamp = datetime(2016, 3, 2)
        assert evaluation.ordering_timestamp == datetime(2016, 3, 2, tzinfo=timezone.utc)

    def test_assignment_is_validated(self):
        request = ListTaskDefinitionFamiliesRequest()

        with pytest.raises(ValueError):
            request.max_results = "not a number"


class TestRequestAndResultBases:
    """Test custom headers and response metadata."""

    def test_custom_request_headers(self):
        request = ListTaskDefinitionFamiliesRequest()

        assert request.put_custom_request_header("X-Trace", "a") is None
        assert request.put_custom_request_header("X-Trace", "b") == "a"
        assert request.custom_request_headers == {"X-Trace": "b"}

    def test_custom_headers_do_not_affect_equality(self):
        request = ListTaskDefinitionFamiliesRequest(family_prefix="web")
        request.put_custom_request_header("X-Trace", "a")

        assert request == ListTaskDefinitionFamiliesRequest(family_prefix="web")

    def test_response_metadata_is_outside_equality(self):
        result = ListTaskDefinitionFamiliesResult(families=["web"])
        result.set_response_metadata(ResponseMetadata(request_id="abc", http_status_code=200))

        assert result.response_metadata.request_id == "abc"
        assert result == ListTaskDefinitionFamiliesResult(families=["web"])
