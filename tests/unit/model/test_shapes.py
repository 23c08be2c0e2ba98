"""Unit tests for shape descriptions derived from annotations."""

from datetime import datetime
from typing import Optional, Union

import pytest

from awsmodels.model.base import AwsShape, HttpBinding
from awsmodels.model.shapes import ShapeKind, TypeSpec, describe_structure, resolve_type
from awsmodels.services.cloudsearchdomain import Hit, SearchRequest
from awsmodels.services.config import ComplianceType, Evaluation
from awsmodels.services.s3 import ObjectMetadata


class TestResolveType:
    """Test mapping of annotations to wire types."""

    @pytest.mark.parametrize(
        "annotation,kind",
        [
            (Optional[str], ShapeKind.STRING),
            (Optional[int], ShapeKind.INTEGER),
            (Optional[float], ShapeKind.FLOAT),
            (Optional[bool], ShapeKind.BOOLEAN),
            (Optional[datetime], ShapeKind.TIMESTAMP),
            (Optional[bytes], ShapeKind.BLOB),
            (ComplianceType, ShapeKind.STRING),
        ],
    )
    def test_scalars(self, annotation, kind):
        assert resolve_type(annotation) == TypeSpec(kind)

    def test_bool_is_not_an_integer(self):
        assert resolve_type(bool).kind is ShapeKind.BOOLEAN

    def test_containers(self):
        spec = resolve_type(Optional[dict[str, list[str]]])

        assert spec.kind is ShapeKind.MAP
        assert spec.member.kind is ShapeKind.LIST
        assert spec.member.member.kind is ShapeKind.STRING

    def test_union_syntax(self):
        assert resolve_type(int | None).kind is ShapeKind.INTEGER

    def test_union_sharing_a_wire_type(self):
        assert resolve_type(Optional[Union[ComplianceType, str]]) == TypeSpec(ShapeKind.STRING)
        assert describe_structure(Evaluation).member_for_wire_name("ComplianceType").spec.kind is ShapeKind.STRING

    def test_structure(self):
        spec = resolve_type(Optional[Evaluation])

        assert spec.kind is ShapeKind.STRUCTURE
        assert spec.model is Evaluation

    def test_unsupported_annotations(self):
        with pytest.raises(TypeError):
            resolve_type(dict[int, str])
        with pytest.raises(TypeError):
            resolve_type(Optional[object])
        with pytest.raises(TypeError):
            resolve_type(Optional[int | str])


class TestDescribeStructure:
    """Test member descriptions."""

    def test_members_keep_declaration_order_and_wire_names(self):
        spec = describe_structure(Hit)

        assert [m.name for m in spec.members] == ["id", "fields", "exprs", "highlights"]
        assert spec.member_for_wire_name("fields").spec.kind is ShapeKind.MAP

    def test_is_cached_per_class(self):
        assert describe_structure(Hit) is describe_structure(Hit)

    def test_http_bindings(self):
        spec = describe_structure(SearchRequest)
        query = {m.name: m.binding for m in spec.bound_members(HttpBinding.QUERYSTRING)}

        assert query["query"] == HttpBinding.querystring("q")
        assert query["return_fields"] == HttpBinding.querystring("return")
        assert spec.payload_members == ()

    def test_header_prefix_binding(self):
        spec = describe_structure(ObjectMetadata)
        (member,) = spec.bound_members(HttpBinding.HEADERS)

        assert member.name == "user_metadata"
        assert member.binding.name == "x-amz-meta-"

    def test_unknown_wire_name(self):
        class Empty(AwsShape):
            pass

        assert describe_structure(Empty).member_for_wire_name("anything") is None
