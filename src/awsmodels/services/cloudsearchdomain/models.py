"""Amazon CloudSearch Domain records.

Search parameters travel in the query string; results are a JSON document.
"""

from typing import Annotated, Optional

from pydantic import ConfigDict, Field

from awsmodels.model.base import AwsRequest, AwsResult, AwsShape, HttpBinding, to_camel

_CAMEL_CASE = ConfigDict(alias_generator=to_camel)


class SearchRequest(AwsRequest):
    """
    A search against a CloudSearch domain.

    Attributes:
        query: Search criteria (``q``); syntax depends on ``query_parser``
        query_parser: simple, structured, lucene or dismax (``q.parser``)
        query_options: JSON object of parser options (``q.options``)
        filter_query: Structured query that filters without scoring (``fq``)
        cursor: Deep paging cursor, ``initial`` for the first page
        start: Offset of the first hit to return
        size: Maximum number of hits to return
        sort: Comma-separated ``field asc|desc`` list
        return_fields: Comma-separated fields to return (``return``)
        highlight: JSON object of fields to highlight
        facet: JSON object of fields to compute facets for
        expr: JSON object of expressions to compute
        partial: Return partial results when some partitions are unavailable
        stats: JSON object of fields to compute statistics for
    """

    model_config = _CAMEL_CASE

    query: Annotated[Optional[str], HttpBinding.querystring("q")] = None
    query_parser: Annotated[Optional[str], HttpBinding.querystring("q.parser")] = None
    query_options: Annotated[Optional[str], HttpBinding.querystring("q.options")] = None
    filter_query: Annotated[Optional[str], HttpBinding.querystring("fq")] = None
    cursor: Annotated[Optional[str], HttpBinding.querystring("cursor")] = None
    start: Annotated[Optional[int], HttpBinding.querystring("start")] = None
    size: Annotated[Optional[int], HttpBinding.querystring("size")] = None
    sort: Annotated[Optional[str], HttpBinding.querystring("sort")] = None
    return_fields: Annotated[Optional[str], HttpBinding.querystring("return")] = Field(
        None, alias="return"
    )
    highlight: Annotated[Optional[str], HttpBinding.querystring("highlight")] = None
    facet: Annotated[Optional[str], HttpBinding.querystring("facet")] = None
    expr: Annotated[Optional[str], HttpBinding.querystring("expr")] = None
    partial: Annotated[Optional[bool], HttpBinding.querystring("partial")] = None
    stats: Annotated[Optional[str], HttpBinding.querystring("stats")] = None


class SearchStatus(AwsShape):
    model_config = _CAMEL_CASE

    timems: Optional[int] = None
    rid: Optional[str] = None


class Hit(AwsShape):
    """
    A matching document.

    ``fields`` maps each returned field to its values; ``exprs`` and
    ``highlights`` map expression and field names to strings.
    """

    model_config = _CAMEL_CASE

    id: Optional[str] = None
    fields: Optional[dict[str, list[str]]] = None
    exprs: Optional[dict[str, str]] = None
    highlights: Optional[dict[str, str]] = None


class Hits(AwsShape):
    model_config = _CAMEL_CASE

    found: Optional[int] = None
    start: Optional[int] = None
    cursor: Optional[str] = None
    hit: Optional[list[Hit]] = None


class Bucket(AwsShape):
    model_config = _CAMEL_CASE

    value: Optional[str] = None
    count: Optional[int] = None


class BucketInfo(AwsShape):
    model_config = _CAMEL_CASE

    buckets: Optional[list[Bucket]] = None


class FieldStats(AwsShape):
    """Statistics of a numeric or date field. ``min``, ``max`` and ``mean`` keep the field's own format."""

    model_config = _CAMEL_CASE

    min: Optional[str] = None
    max: Optional[str] = None
    count: Optional[int] = None
    missing: Optional[int] = None
    sum: Optional[float] = None
    sum_of_squares: Optional[float] = None
    mean: Optional[str] = None
    stddev: Optional[float] = None


class SearchResult(AwsResult):
    model_config = _CAMEL_CASE

    status: Optional[SearchStatus] = None
    hits: Optional[Hits] = None
    facets: Optional[dict[str, BucketInfo]] = None
    stats: Optional[dict[str, FieldStats]] = None
