"""Reflection over mapped classes: which fields are stored, under which names, and which are keys."""

import inspect
import threading
from typing import Any, Callable, Optional

from pydantic import BaseModel

from awsmodels.datamodeling.annotations import (
    DOCUMENT_ATTR,
    TABLE_ATTR,
    Attribute,
    AutoGeneratedKey,
    DynamoDBTable,
    HashKey,
    IndexHashKey,
    IndexRangeKey,
    Ignore,
    RangeKey,
    VersionAttribute,
)
from awsmodels.datamodeling.exceptions import DynamoDBMappingError

Setter = Callable[[Any, Any], None]

# Order in which explicit attribute names are honoured.
_NAMING_MARKERS = (HashKey, IndexHashKey, RangeKey, IndexRangeKey, Attribute, VersionAttribute)
_KEY_MARKERS = (HashKey, RangeKey, IndexHashKey, IndexRangeKey)


def _is_document_type(cls: type) -> bool:
    return getattr(cls, TABLE_ATTR, None) is not None or getattr(cls, DOCUMENT_ATTR, False)


def _declaring_class(model_cls: type[BaseModel], field_name: str) -> type:
    for klass in model_cls.__mro__:
        if field_name in inspect.get_annotations(klass):
            return klass
    return model_cls


class DynamoDBReflector:
    """
    Answers mapping questions about pydantic model classes.

    Class metadata never changes after class creation, so each answer is
    computed once per class (or class and field) and cached. Caches are
    guarded so one reflector can be shared between threads.
    """

    def __init__(self) -> None:
        self._relevant_fields: dict[type, tuple[str, ...]] = {}
        self._hash_keys: dict[type, str] = {}
        self._range_keys: dict[type, Optional[str]] = {}
        self._setters: dict[tuple[type, str], Setter] = {}
        self._version_fields: dict[tuple[type, str], bool] = {}
        self._assignable_keys: dict[tuple[type, str], bool] = {}
        self._cache_lock = threading.RLock()

        self._attribute_names: dict[tuple[type, str], str] = {}
        self._attribute_names_lock = threading.Lock()

    def get_relevant_fields(self, model_cls: type[BaseModel]) -> tuple[str, ...]:
        """Fields declared on a table or document class that are not ignored, in declaration order."""
        with self._cache_lock:
            if model_cls not in self._relevant_fields:
                self._relevant_fields[model_cls] = tuple(
                    name
                    for name in model_cls.model_fields
                    if _is_document_type(_declaring_class(model_cls, name))
                    and self._marker(model_cls, name, Ignore) is None
                )
            return self._relevant_fields[model_cls]

    def get_primary_hash_key(self, model_cls: type[BaseModel]) -> str:
        """
        Raises:
            DynamoDBMappingError: If no relevant field is marked ``HashKey``
        """
        with self._cache_lock:
            if model_cls not in self._hash_keys:
                for name in self.get_relevant_fields(model_cls):
                    if self._marker(model_cls, name, HashKey) is not None:
                        self._hash_keys[model_cls] = name
                        break
            hash_key = self._hash_keys.get(model_cls)
        if hash_key is None:
            raise DynamoDBMappingError(
                f"{model_cls.__name__} must declare a field annotated with HashKey"
            )
        return hash_key

    def get_primary_range_key(self, model_cls: type[BaseModel]) -> Optional[str]:
        with self._cache_lock:
            if model_cls not in self._range_keys:
                self._range_keys[model_cls] = next(
                    (
                        name
                        for name in self.get_relevant_fields(model_cls)
                        if self._marker(model_cls, name, RangeKey) is not None
                    ),
                    None,
                )
            return self._range_keys[model_cls]

    def get_primary_key_fields(self, model_cls: type[BaseModel]) -> list[str]:
        return [
            name
            for name in self.get_relevant_fields(model_cls)
            if self._marker(model_cls, name, HashKey) is not None
            or self._marker(model_cls, name, RangeKey) is not None
        ]

    def get_table(self, model_cls: type) -> DynamoDBTable:
        """
        Raises:
            DynamoDBMappingError: If the class is not decorated with ``dynamodb_table``
        """
        table = getattr(model_cls, TABLE_ATTR, None)
        if table is None:
            raise DynamoDBMappingError(
                f"Class {model_cls.__name__} must be decorated with dynamodb_table"
            )
        return table

    def get_attribute_name(self, model_cls: type[BaseModel], field_name: str) -> str:
        """
        Item attribute name of a field.

        The first non-empty ``attribute_name`` among the field's HashKey,
        IndexHashKey, RangeKey, IndexRangeKey, Attribute and VersionAttribute
        markers wins; otherwise the field name is used.
        """
        key = (model_cls, field_name)
        with self._attribute_names_lock:
            if (cached := self._attribute_names.get(key)) is not None:
                return cached

        attribute_name = field_name
        for marker_type in _NAMING_MARKERS:
            marker = self._marker(model_cls, field_name, marker_type)
            if marker is not None and marker.attribute_name:
                attribute_name = marker.attribute_name
                break

        with self._attribute_names_lock:
            return self._attribute_names.setdefault(key, attribute_name)

    def get_setter(self, model_cls: type[BaseModel], field_name: str) -> Setter:
        """
        Raises:
            DynamoDBMappingError: If the field is unknown or cannot be assigned
        """
        key = (model_cls, field_name)
        with self._cache_lock:
            if key not in self._setters:
                info = model_cls.model_fields.get(field_name)
                if info is None:
                    raise DynamoDBMappingError(
                        f"{model_cls.__name__} has no field '{field_name}'"
                    )
                if model_cls.model_config.get("frozen") or info.frozen:
                    raise DynamoDBMappingError(
                        f"Field '{field_name}' of {model_cls.__name__} cannot be assigned"
                    )

                def setter(obj: Any, value: Any) -> None:
                    setattr(obj, field_name, value)

                self._setters[key] = setter
            return self._setters[key]

    def is_version_attribute(self, model_cls: type[BaseModel], field_name: str) -> bool:
        key = (model_cls, field_name)
        with self._cache_lock:
            if key not in self._version_fields:
                self._version_fields[key] = (
                    self._marker(model_cls, field_name, VersionAttribute) is not None
                )
            return self._version_fields[key]

    def is_assignable_key(self, model_cls: type[BaseModel], field_name: str) -> bool:
        """True for key fields (table or index) that carry ``AutoGeneratedKey``."""
        key = (model_cls, field_name)
        with self._cache_lock:
            if key not in self._assignable_keys:
                self._assignable_keys[key] = self._marker(
                    model_cls, field_name, AutoGeneratedKey
                ) is not None and any(
                    self._marker(model_cls, field_name, marker) is not None
                    for marker in _KEY_MARKERS
                )
            return self._assignable_keys[key]

    def get_primary_hash_key_name(self, model_cls: type[BaseModel]) -> str:
        return self.get_attribute_name(model_cls, self.get_primary_hash_key(model_cls))

    def get_primary_range_key_name(self, model_cls: type[BaseModel]) -> Optional[str]:
        range_key = self.get_primary_range_key(model_cls)
        return None if range_key is None else self.get_attribute_name(model_cls, range_key)

    def has_primary_range_key(self, model_cls: type[BaseModel]) -> bool:
        return self.get_primary_range_key(model_cls) is not None

    @staticmethod
    def _marker(model_cls: type[BaseModel], field_name: str, marker_type: type) -> Any:
        info = model_cls.model_fields.get(field_name)
        if info is None:
            return None
        return next((m for m in info.metadata if type(m) is marker_type), None)
