"""
Checks run against every registered model.

Each model gets a sample wire document built from its own mapper, so new
models are covered without touching this file.
"""

from typing import Any

import pytest

from socialplus.errors import ValidationError
from socialplus.mapper import (
    BOOLEAN,
    DATETIME,
    NUMBER,
    STRING,
    CompositeType,
    EnumType,
    SequenceType,
    TypeDescriptor,
)
from socialplus.models import MODELS, get_serializer

SAMPLES = {
    STRING: "x",
    NUMBER: 1,
    BOOLEAN: True,
    DATETIME: "2024-05-01T12:30:00+00:00",
}


def sample(descriptor: TypeDescriptor, include_optional: bool) -> Any:
    if isinstance(descriptor, SequenceType):
        return [sample(descriptor.element, include_optional)]
    if isinstance(descriptor, EnumType):
        return descriptor.allowed_values[0]
    if isinstance(descriptor, CompositeType):
        return sample_wire(MODELS[descriptor.class_name], include_optional)
    return SAMPLES[descriptor]


def sample_wire(cls: type, include_optional: bool = False) -> dict[str, Any]:
    """Wire document for cls with every required (and optionally every) field set."""
    return {
        f.serialized_name: sample(f.type, include_optional)
        for f in cls.mapper().fields
        if f.required or include_optional
    }


ALL_MODELS = [pytest.param(cls, id=name) for name, cls in sorted(MODELS.items())]

REQUIRED_FIELDS = [
    pytest.param(cls, f, id=f"{name}.{f.serialized_name}")
    for name, cls in sorted(MODELS.items())
    for f in cls.mapper().required_fields
]

ENUM_FIELDS = [
    pytest.param(cls, f, id=f"{name}.{f.serialized_name}")
    for name, cls in sorted(MODELS.items())
    for f in cls.mapper().fields
    if isinstance(f.type, EnumType)
    or (isinstance(f.type, SequenceType) and isinstance(f.type.element, EnumType))
]


@pytest.fixture
def serializer():
    return get_serializer()


@pytest.mark.parametrize("cls", ALL_MODELS)
def test_minimal_round_trip(serializer, cls) -> None:
    wire = sample_wire(cls)

    instance = serializer.deserialize(wire, cls)

    assert isinstance(instance, cls)
    assert serializer.serialize(instance) == wire


@pytest.mark.parametrize("cls", ALL_MODELS)
def test_full_round_trip(serializer, cls) -> None:
    wire = sample_wire(cls, include_optional=True)

    instance = serializer.deserialize(wire, cls)

    assert serializer.serialize(instance) == wire
    assert cls.from_dict(instance.to_dict()) == instance


@pytest.mark.parametrize("cls,field", REQUIRED_FIELDS)
def test_each_required_field_is_enforced(serializer, cls, field) -> None:
    wire = sample_wire(cls)
    del wire[field.serialized_name]

    with pytest.raises(ValidationError) as exc_info:
        serializer.deserialize(wire, cls)

    assert exc_info.value.path == field.serialized_name
    assert exc_info.value.reason == "required field is missing"


@pytest.mark.parametrize("cls,field", ENUM_FIELDS)
def test_each_enum_field_rejects_unknown_values(serializer, cls, field) -> None:
    wire = sample_wire(cls, include_optional=True)
    if isinstance(field.type, SequenceType):
        wire[field.serialized_name] = ["NotAValue"]
        expected_path = f"{field.serialized_name}[0]"
        allowed = field.type.element.allowed_values
    else:
        wire[field.serialized_name] = "NotAValue"
        expected_path = field.serialized_name
        allowed = field.type.allowed_values

    with pytest.raises(ValidationError) as exc_info:
        serializer.deserialize(wire, cls)

    assert exc_info.value.path == expected_path
    assert exc_info.value.allowed_values == allowed
    assert "NotAValue" in exc_info.value.reason


def test_enum_fields_exist() -> None:
    assert len(ENUM_FIELDS) > 0
