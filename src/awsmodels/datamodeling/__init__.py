"""Mapping of pydantic models onto DynamoDB items."""

from awsmodels.datamodeling.annotations import (
    Attribute,
    AutoGeneratedKey,
    DynamoDBTable,
    HashKey,
    Ignore,
    IndexHashKey,
    IndexRangeKey,
    RangeKey,
    VersionAttribute,
    dynamodb_document,
    dynamodb_table,
)
from awsmodels.datamodeling.exceptions import (
    AmazonDynamoDBException,
    ConditionalCheckFailedException,
    DynamoDBMappingError,
)
from awsmodels.datamodeling.mapper import DynamoDBMapper, DynamoDBMapperConfig
from awsmodels.datamodeling.reflector import DynamoDBReflector

__all__: list[str] = [
    "AmazonDynamoDBException",
    "Attribute",
    "AutoGeneratedKey",
    "ConditionalCheckFailedException",
    "DynamoDBMapper",
    "DynamoDBMapperConfig",
    "DynamoDBMappingError",
    "DynamoDBReflector",
    "DynamoDBTable",
    "HashKey",
    "Ignore",
    "IndexHashKey",
    "IndexRangeKey",
    "RangeKey",
    "VersionAttribute",
    "dynamodb_document",
    "dynamodb_table",
]
