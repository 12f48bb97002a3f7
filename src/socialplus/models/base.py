"""
Model base class and declaration helpers.

Models are pydantic models whose fields are declared with wire(). The field
annotation gives the wire type (``StrictStr``, ``StrictInt``, ``StrictBool``,
``DateTime``, an enum, another model or a list of those) and wire() gives the
wire name and requiredness. The @model decorator derives the class's
ModelMapper from those pydantic fields and registers the class by name so
composite references can be resolved:

    @model("PostPinRequest")
    class PostPinRequest(Model):
        topic_handle: StrictStr = wire("topicHandle", required=True)
"""

import logging
from collections.abc import Mapping
from functools import lru_cache
from typing import Any, Callable, ClassVar, TypeVar

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic import ValidationError as PydanticValidationError

from ..errors import MapperError
from ..mapper import CompositeType, FieldMapper, ModelMapper, Serializer, describe_annotation

logger = logging.getLogger(__name__)

M = TypeVar("M", bound="Model")

MODELS: dict[str, type["Model"]] = {}


def wire(serialized_name: str, required: bool = False, description: str = "") -> Any:
    """Declare a model field under its wire name."""
    if required:
        return Field(alias=serialized_name, description=description or None)
    return Field(default=None, alias=serialized_name, description=description or None)


def model(serialized_name: str | None = None) -> Callable[[type[M]], type[M]]:
    """
    Class decorator: derive the model's mapper and register it.

    Args:
        serialized_name: Wire name of the type (defaults to the class name)
    """

    def decorate(cls: type[M]) -> type[M]:
        fields = []
        for name, info in cls.model_fields.items():
            if info.alias is None:
                raise MapperError(f"{cls.__name__}.{name} is not declared with wire()")
            fields.append(
                FieldMapper(
                    attribute=name,
                    serialized_name=info.alias,
                    type=describe_annotation(info.annotation),
                    required=info.is_required(),
                    description=info.description or "",
                )
            )

        cls.__mapper__ = ModelMapper(
            class_name=cls.__name__,
            serialized_name=serialized_name or cls.__name__,
            fields=tuple(fields),
        )
        if cls.__name__ in MODELS:
            raise MapperError(f"Model {cls.__name__} registered twice")
        MODELS[cls.__name__] = cls
        get_serializer.cache_clear()
        return cls

    return decorate


@lru_cache(maxsize=1)
def get_serializer() -> Serializer:
    """Serializer bound to every registered model."""
    return Serializer(MODELS)


class Model(BaseModel):
    """
    Base class for every SocialPlus data-transfer object.

    Fields accept either their attribute name or their wire name. Invalid
    values raise socialplus.errors.ValidationError at construction, and
    instances are validated again whenever they are serialized, so values
    changed after construction are caught too.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        revalidate_instances="always",
        extra="ignore",
    )

    __mapper__: ClassVar[ModelMapper]

    def __init__(self, **data: Any) -> None:
        try:
            super().__init__(**data)
        except PydanticValidationError as e:
            raise get_serializer().convert_error(e, CompositeType(type(self).__name__)) from None

    @model_validator(mode="before")
    @classmethod
    def use_wire_keys(cls, data: Any) -> Any:
        """Key mappings by wire name; a None attribute key never hides a wire key."""
        if not isinstance(data, Mapping):
            return data

        merged = dict(data)
        wire_names = set()
        for name, info in cls.model_fields.items():
            alias = info.alias or name
            wire_names.add(alias)
            if alias == name or name not in merged:
                continue
            value = merged.pop(name)
            if value is not None or merged.get(alias) is None:
                merged[alias] = value

        unknown = set(merged) - wire_names
        if unknown:
            logger.debug(f"Ignoring unknown keys on {cls.__name__}: {sorted(unknown)}")
        return merged

    @classmethod
    def mapper(cls) -> ModelMapper:
        """Wire description of this model."""
        return cls.__mapper__

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dict keyed by wire names."""
        return get_serializer().serialize(self)

    @classmethod
    def from_dict(cls: type[M], data: Any) -> M:
        """Deserialize decoded JSON into an instance of this model."""
        return get_serializer().deserialize(data, cls)
