"""
Type descriptors used by model mappers.

A mapper describes how a model travels over the wire. Every field points at
one of four descriptor kinds:
- PrimitiveType: String, Number, Boolean, DateTime
- EnumType: a closed set of string values backed by a str Enum
- CompositeType: another model, referenced by class name
- SequenceType: an ordered list of any other descriptor
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from types import UnionType
from typing import Annotated, Any, Union, get_args, get_origin

from pydantic import BaseModel, BeforeValidator, PlainSerializer

from ..errors import MapperError


@dataclass(frozen=True)
class PrimitiveType:
    """Scalar wire type."""

    name: str

    def describe(self) -> str:
        return self.name


@dataclass(frozen=True)
class EnumType:
    """String restricted to the values of an Enum class."""

    enum_class: type[Enum]

    @property
    def name(self) -> str:
        return "Enum"

    @property
    def allowed_values(self) -> tuple[str, ...]:
        return tuple(member.value for member in self.enum_class)

    def describe(self) -> str:
        return self.enum_class.__name__


@dataclass(frozen=True)
class CompositeType:
    """Nested model, resolved by class name through the model registry."""

    class_name: str

    @property
    def name(self) -> str:
        return "Composite"

    def describe(self) -> str:
        return self.class_name


@dataclass(frozen=True)
class SequenceType:
    """Ordered sequence of elements of a single type."""

    element: "TypeDescriptor"

    @property
    def name(self) -> str:
        return "Sequence"

    def describe(self) -> str:
        return f"Sequence[{self.element.describe()}]"


TypeDescriptor = Union[PrimitiveType, EnumType, CompositeType, SequenceType]

STRING = PrimitiveType("String")
NUMBER = PrimitiveType("Number")
BOOLEAN = PrimitiveType("Boolean")
DATETIME = PrimitiveType("DateTime")


def format_datetime(value: datetime) -> str:
    return value.isoformat()


def _timestamp_only(value: Any) -> Any:
    # Numbers are never timestamps on the wire
    if isinstance(value, (str, datetime)):
        return value
    raise ValueError("value is not an ISO-8601 timestamp")


# Field annotation for DateTime values. Parsing accepts any ISO-8601 form the
# service sends (trailing "Z", 1 to 7 fractional digits); output keeps the
# value's own offset, or none for naive values.
DateTime = Annotated[
    datetime,
    BeforeValidator(_timestamp_only),
    PlainSerializer(format_datetime, return_type=str, when_used="json"),
]


def describe_annotation(annotation: Any) -> "TypeDescriptor":
    """
    Derive the wire descriptor of a model field from its type annotation.

    ``X | None`` describes the same wire type as ``X``; requiredness is a
    property of the field, not of its type.

    Raises:
        MapperError: If the annotation has no wire representation
    """
    origin = get_origin(annotation)
    if origin is Annotated:
        return describe_annotation(get_args(annotation)[0])
    if origin in (Union, UnionType):
        members = {describe_annotation(a) for a in get_args(annotation) if a is not type(None)}
        if len(members) == 1:
            return members.pop()
        raise MapperError(f"Ambiguous wire type: {annotation!r}")
    if origin is list:
        return SequenceType(describe_annotation(get_args(annotation)[0]))

    if annotation is bool:
        return BOOLEAN
    if annotation in (int, float):
        return NUMBER
    if annotation is str:
        return STRING
    if annotation is datetime:
        return DATETIME
    if isinstance(annotation, type) and issubclass(annotation, Enum):
        return EnumType(annotation)
    if isinstance(annotation, type) and issubclass(annotation, BaseModel):
        return CompositeType(annotation.__name__)
    raise MapperError(f"No wire type for annotation {annotation!r}")


@dataclass(frozen=True)
class FieldMapper:
    """Wire description of a single model field."""

    attribute: str
    serialized_name: str
    type: TypeDescriptor
    required: bool = False
    description: str = ""


@dataclass(frozen=True)
class ModelMapper:
    """Wire description of a model: its name and its fields in order."""

    class_name: str
    serialized_name: str
    fields: tuple[FieldMapper, ...]

    @property
    def required_fields(self) -> tuple[FieldMapper, ...]:
        return tuple(f for f in self.fields if f.required)

    def field(self, name: str) -> FieldMapper:
        """Look up a field by attribute name or wire name."""
        for f in self.fields:
            if f.attribute == name or f.serialized_name == name:
                return f
        raise KeyError(f"{self.class_name} has no field {name!r}")

    def composite_references(self) -> set[str]:
        """Class names of every composite type this model embeds."""
        refs: set[str] = set()
        for f in self.fields:
            descriptor = f.type
            while isinstance(descriptor, SequenceType):
                descriptor = descriptor.element
            if isinstance(descriptor, CompositeType):
                refs.add(descriptor.class_name)
        return refs
