"""Declarative wire mappers and the generic serializer that walks them."""

from .serializer import Serializer, parse_datetime
from .types import (
    BOOLEAN,
    DATETIME,
    NUMBER,
    STRING,
    CompositeType,
    DateTime,
    EnumType,
    FieldMapper,
    ModelMapper,
    PrimitiveType,
    SequenceType,
    TypeDescriptor,
    describe_annotation,
    format_datetime,
)

__all__ = [
    "Serializer",
    "format_datetime",
    "parse_datetime",
    "describe_annotation",
    "BOOLEAN",
    "DATETIME",
    "NUMBER",
    "STRING",
    "CompositeType",
    "DateTime",
    "EnumType",
    "FieldMapper",
    "ModelMapper",
    "PrimitiveType",
    "SequenceType",
    "TypeDescriptor",
]
