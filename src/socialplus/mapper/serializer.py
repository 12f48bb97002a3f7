"""
Generic schema-driven serializer.

Converts between in-memory values (model instances, enums, datetimes) and
their JSON wire form. Every target is a type descriptor; validation runs
through a pydantic TypeAdapter built for that descriptor, and pydantic's
errors are reported as a ValidationError carrying the offending field path
in wire names (``actorUsers[1].userHandle``).
"""

from collections.abc import Mapping
from datetime import datetime
from typing import Any, Union

from pydantic import StrictBool, StrictFloat, StrictInt, StrictStr, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from ..errors import MapperError, ValidationError
from .types import (
    BOOLEAN,
    DATETIME,
    NUMBER,
    STRING,
    CompositeType,
    DateTime,
    EnumType,
    PrimitiveType,
    SequenceType,
    TypeDescriptor,
)

_PRIMITIVES: dict[PrimitiveType, Any] = {
    STRING: StrictStr,
    NUMBER: Union[StrictInt, StrictFloat],
    BOOLEAN: StrictBool,
    DATETIME: DateTime,
}

_timestamps = TypeAdapter(DateTime)


def join_path(path: str, name: str) -> str:
    """Append a field name to a dotted field path."""
    return f"{path}.{name}" if path else name


def index_path(path: str, index: int) -> str:
    """Qualify a field path with a sequence index."""
    return f"{path}[{index}]"


def parse_datetime(raw: str) -> datetime:
    """
    Parse an ISO-8601 timestamp as sent by the service.

    Raises:
        ValidationError: If ``raw`` is not a timestamp
    """
    try:
        return _timestamps.validate_python(raw)
    except PydanticValidationError as e:
        raise ValidationError("", e.errors()[0]["msg"], "DateTime") from None


class Serializer:
    """
    Mapper-driven serializer.

    Usage:
        serializer = Serializer(MODELS)
        wire = serializer.serialize(activity)
        activity = serializer.deserialize(wire, ActivityView)
    """

    def __init__(self, models: Mapping[str, type]):
        """
        Initialize serializer.

        Args:
            models: Registry mapping model class names to model classes.
                Each class exposes ``mapper() -> ModelMapper``.
        """
        self.models = models
        self._adapters: dict[TypeDescriptor, TypeAdapter] = {}

    def resolve(self, class_name: str) -> type:
        """Resolve a composite class name to its model class."""
        try:
            return self.models[class_name]
        except KeyError:
            raise MapperError(f"Unknown model type: {class_name}") from None

    def _descriptor_for(self, target: Any) -> TypeDescriptor:
        if isinstance(target, (PrimitiveType, EnumType, CompositeType, SequenceType)):
            return target
        if isinstance(target, str):
            return CompositeType(self.resolve(target).__name__)
        if isinstance(target, type) and hasattr(target, "mapper"):
            name = target.mapper().class_name
            if self.models.get(name) is not target:
                raise MapperError(f"Model {name} is not registered with this serializer")
            return CompositeType(name)
        raise MapperError(f"Cannot serialize against {target!r}")

    def annotation(self, descriptor: TypeDescriptor) -> Any:
        """Python type that values of ``descriptor`` are validated against."""
        if isinstance(descriptor, SequenceType):
            return list[self.annotation(descriptor.element)]
        if isinstance(descriptor, CompositeType):
            return self.resolve(descriptor.class_name)
        if isinstance(descriptor, EnumType):
            return descriptor.enum_class
        try:
            return _PRIMITIVES[descriptor]
        except KeyError:
            raise MapperError(f"Unknown primitive type: {descriptor.name}") from None

    def adapter(self, descriptor: TypeDescriptor) -> TypeAdapter:
        if descriptor not in self._adapters:
            self._adapters[descriptor] = TypeAdapter(self.annotation(descriptor))
        return self._adapters[descriptor]

    # ------------------------------------------------------------------
    # Serialize / deserialize
    # ------------------------------------------------------------------

    def serialize(self, value: Any, target: Any = None, path: str = "") -> Any:
        """
        Convert an in-memory value to its JSON-compatible wire form.

        Args:
            value: Model instance, mapping, list or primitive
            target: Model class, class name or type descriptor. Defaults to
                the model class of ``value``.
            path: Field path prefix used in error messages

        Returns:
            JSON-compatible value; optional fields that are unset are omitted

        Raises:
            ValidationError: If the value does not match its mapper
        """
        if target is None:
            if not hasattr(type(value), "mapper"):
                raise MapperError(
                    f"No target type given for value of type {type(value).__name__}"
                )
            target = type(value)
        descriptor = self._descriptor_for(target)
        adapter = self.adapter(descriptor)
        validated = self._validate(adapter, descriptor, value, path)
        return adapter.dump_python(validated, mode="json", by_alias=True, exclude_none=True)

    def deserialize(self, data: Any, target: Any, path: str = "") -> Any:
        """
        Convert decoded JSON into in-memory values.

        Args:
            data: Decoded JSON (dict, list or primitive)
            target: Model class, class name or type descriptor
            path: Field path prefix used in error messages

        Returns:
            Model instance, list, enum member, datetime or primitive

        Raises:
            ValidationError: If the data does not match the mapper
        """
        descriptor = self._descriptor_for(target)
        return self._validate(self.adapter(descriptor), descriptor, data, path)

    def _validate(self, adapter: TypeAdapter, descriptor: TypeDescriptor, value: Any, path: str) -> Any:
        try:
            return adapter.validate_python(value)
        except PydanticValidationError as e:
            raise self.convert_error(e, descriptor, path) from None

    # ------------------------------------------------------------------
    # Errors
    # ------------------------------------------------------------------

    def convert_error(
        self, error: PydanticValidationError, descriptor: TypeDescriptor, path: str = ""
    ) -> ValidationError:
        """
        Report the first pydantic error against ``descriptor`` as a ValidationError.

        The error location is walked through the mappers so the path uses
        wire names and sequence indices, and enum failures carry the
        allowed values.
        """
        first = error.errors()[0]
        field_path, field_type = self._locate(descriptor, first["loc"], path)
        value = first.get("input")

        if first["type"] == "missing" or value is None:
            return ValidationError(field_path, "required field is missing", field_type.describe())
        if isinstance(field_type, EnumType):
            return ValidationError(
                field_path,
                f"{value!r} is not an allowed value",
                field_type.describe(),
                field_type.allowed_values,
            )
        return ValidationError(field_path, first["msg"], field_type.describe())

    def _locate(
        self, descriptor: TypeDescriptor, loc: tuple, path: str
    ) -> tuple[str, TypeDescriptor]:
        for item in loc:
            if isinstance(descriptor, SequenceType) and isinstance(item, int):
                path = index_path(path, item)
                descriptor = descriptor.element
            elif isinstance(descriptor, CompositeType) and isinstance(item, str):
                cls = self.models.get(descriptor.class_name)
                if cls is None:
                    break
                try:
                    field = cls.mapper().field(item)
                except KeyError:
                    break
                path = join_path(path, field.serialized_name)
                descriptor = field.type
            else:
                # Union member tags and validator names carry no wire meaning
                break
        return path, descriptor
