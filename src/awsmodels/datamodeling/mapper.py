"""Object persistence for mapped pydantic models on top of the boto3 DynamoDB client."""

import uuid
from decimal import Decimal
from typing import Any, Optional, TypeVar

import boto3
from boto3.dynamodb.types import TypeDeserializer, TypeSerializer
from botocore.config import Config
from botocore.exceptions import ClientError
from pydantic import BaseModel, Field, ValidationError

from awsmodels.config import ClientConfig
from awsmodels.datamodeling.exceptions import EXCEPTIONS, AmazonDynamoDBException, DynamoDBMappingError
from awsmodels.datamodeling.reflector import DynamoDBReflector
from awsmodels.log import get_logger

logger = get_logger(__name__)

T = TypeVar("T", bound=BaseModel)

DYNAMODB_SERVICE_NAME = "AmazonDynamoDBv2"


class DynamoDBMapperConfig(BaseModel):
    """Per-mapper settings."""

    table_name_prefix: str = Field("", description="Prepended to every table name")
    consistent_reads: bool = Field(False, description="Use strongly consistent reads in load")


def _to_dynamo(value: Any) -> Any:
    if isinstance(value, bool):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    if isinstance(value, BaseModel):
        return {k: _to_dynamo(v) for k, v in value.model_dump().items() if v is not None}
    if isinstance(value, dict):
        return {k: _to_dynamo(v) for k, v in value.items() if v is not None}
    if isinstance(value, (list, tuple)):
        return [_to_dynamo(v) for v in value]
    if isinstance(value, (set, frozenset)):
        return {_to_dynamo(v) for v in value}
    return value


class DynamoDBMapper:
    """
    Saves, loads and deletes instances of classes decorated with ``dynamodb_table``.

    Fields marked ``VersionAttribute`` give optimistic locking: a save or
    delete only succeeds when the stored version equals the object's, and a
    successful save increments it. Key fields marked ``AutoGeneratedKey``
    receive a random UUID when unset.
    """

    def __init__(
        self,
        client: Optional[Any] = None,
        config: Optional[DynamoDBMapperConfig] = None,
        client_config: Optional[ClientConfig] = None,
        reflector: Optional[DynamoDBReflector] = None,
    ) -> None:
        """
        Args:
            client: boto3 DynamoDB client; created from ``client_config`` when omitted
            config: Mapper settings
            client_config: Connection settings for the client created here
            reflector: Shared reflector, a new one when omitted
        """
        self.config = config or DynamoDBMapperConfig()
        self.reflector = reflector or DynamoDBReflector()
        if client is None:
            settings = client_config or ClientConfig.from_env()
            session = boto3.Session(
                region_name=settings.region_name, profile_name=settings.profile_name
            )
            client = session.client(
                "dynamodb",
                endpoint_url=settings.endpoint_url,
                verify=settings.verify,
                config=Config(
                    retries={"total_max_attempts": settings.max_attempts, "mode": "standard"},
                    connect_timeout=settings.connect_timeout,
                    read_timeout=settings.read_timeout,
                    max_pool_connections=settings.max_pool_connections,
                ),
            )
        self.client = client
        self._serializer = TypeSerializer()
        self._deserializer = TypeDeserializer()

    def table_name(self, model_cls: type[BaseModel]) -> str:
        return self.config.table_name_prefix + self.reflector.get_table(model_cls).table_name

    def save(self, obj: BaseModel) -> None:
        """
        Write ``obj`` as a full item, replacing any existing one.

        Raises:
            ConditionalCheckFailedException: If the stored version differs
            DynamoDBMappingError: If the object cannot be mapped
        """
        model_cls = type(obj)
        table_name = self.table_name(model_cls)
        self.reflector.get_primary_hash_key(model_cls)

        item: dict[str, Any] = {}
        condition: Optional[str] = None
        names: dict[str, str] = {}
        values: dict[str, Any] = {}
        new_version: Optional[tuple[str, int]] = None

        for field_name in self.reflector.get_relevant_fields(model_cls):
            attribute_name = self.reflector.get_attribute_name(model_cls, field_name)
            value = getattr(obj, field_name)

            if value is None and self.reflector.is_assignable_key(model_cls, field_name):
                value = str(uuid.uuid4())
                self.reflector.get_setter(model_cls, field_name)(obj, value)

            if self.reflector.is_version_attribute(model_cls, field_name):
                names["#version"] = attribute_name
                if value is None:
                    condition = "attribute_not_exists(#version)"
                    value = 1
                else:
                    condition = "#version = :expected"
                    values[":expected"] = self._serialize(value)
                    value = value + 1
                new_version = (field_name, value)

            if value is not None:
                item[attribute_name] = self._serialize(value)

        request: dict[str, Any] = {"TableName": table_name, "Item": item}
        if condition:
            request["ConditionExpression"] = condition
            request["ExpressionAttributeNames"] = names
            if values:
                request["ExpressionAttributeValues"] = values

        logger.debug("Saving %s to table %s", model_cls.__name__, table_name)
        self._call("put_item", **request)

        if new_version is not None:
            field_name, version = new_version
            self.reflector.get_setter(model_cls, field_name)(obj, version)

    def load(self, model_cls: type[T], hash_key: Any, range_key: Any = None) -> Optional[T]:
        """
        Read an item by primary key.

        Returns:
            The mapped object, or ``None`` if the item does not exist
        """
        table_name = self.table_name(model_cls)
        key = self._key(model_cls, hash_key, range_key)
        response = self._call(
            "get_item",
            TableName=table_name,
            Key=key,
            ConsistentRead=self.config.consistent_reads,
        )
        item = response.get("Item")
        if not item:
            logger.debug("No %s item in table %s for key %s", model_cls.__name__, table_name, key)
            return None
        return self.unmarshall_item(model_cls, item)

    def delete(self, obj: BaseModel) -> None:
        """
        Delete the item of ``obj``; versioned objects only if the stored version matches.

        Raises:
            ConditionalCheckFailedException: If the stored version differs
        """
        model_cls = type(obj)
        hash_key = getattr(obj, self.reflector.get_primary_hash_key(model_cls))
        range_field = self.reflector.get_primary_range_key(model_cls)
        range_key = getattr(obj, range_field) if range_field else None

        request: dict[str, Any] = {
            "TableName": self.table_name(model_cls),
            "Key": self._key(model_cls, hash_key, range_key),
        }
        for field_name in self.reflector.get_relevant_fields(model_cls):
            if not self.reflector.is_version_attribute(model_cls, field_name):
                continue
            version = getattr(obj, field_name)
            request["ExpressionAttributeNames"] = {
                "#version": self.reflector.get_attribute_name(model_cls, field_name)
            }
            if version is None:
                request["ConditionExpression"] = "attribute_not_exists(#version)"
            else:
                request["ConditionExpression"] = "#version = :expected"
                request["ExpressionAttributeValues"] = {":expected": self._serialize(version)}

        logger.debug("Deleting %s from table %s", model_cls.__name__, request["TableName"])
        self._call("delete_item", **request)

    def unmarshall_item(self, model_cls: type[T], item: dict[str, Any]) -> T:
        """Build an instance from a low-level item. Unmapped attributes are ignored."""
        values = {}
        for field_name in self.reflector.get_relevant_fields(model_cls):
            attribute_name = self.reflector.get_attribute_name(model_cls, field_name)
            if attribute_name in item:
                values[field_name] = self._deserializer.deserialize(item[attribute_name])
        try:
            return model_cls.model_validate(values)
        except ValidationError as e:
            raise DynamoDBMappingError(f"Unable to build {model_cls.__name__} from item: {e}") from e

    def _key(self, model_cls: type[BaseModel], hash_key: Any, range_key: Any) -> dict[str, Any]:
        if hash_key is None:
            raise DynamoDBMappingError(f"Hash key of {model_cls.__name__} must be set")
        key = {self.reflector.get_primary_hash_key_name(model_cls): self._serialize(hash_key)}
        range_key_name = self.reflector.get_primary_range_key_name(model_cls)
        if range_key_name is not None:
            if range_key is None:
                raise DynamoDBMappingError(f"Range key of {model_cls.__name__} must be set")
            key[range_key_name] = self._serialize(range_key)
        return key

    def _serialize(self, value: Any) -> dict[str, Any]:
        try:
            return self._serializer.serialize(_to_dynamo(value))
        except TypeError as e:
            raise DynamoDBMappingError(f"Unsupported attribute value {value!r}: {e}") from e

    def _call(self, method: str, **kwargs: Any) -> dict[str, Any]:
        try:
            return getattr(self.client, method)(**kwargs)
        except ClientError as e:
            raise AmazonDynamoDBException.from_client_error(
                e, EXCEPTIONS, DYNAMODB_SERVICE_NAME
            ) from e
