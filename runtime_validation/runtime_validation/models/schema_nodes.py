from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple, Union

from .prop_type import PropType


Primitive = Union[str, int, float, bool, None]


def _common_fields(node, out: Dict[str, Any]) -> Dict[str, Any]:
    if node.optional:
        out["optional"] = True
    if node.allowed_values is not None:
        out["allowedValues"] = list(node.allowed_values)
    return out


@dataclass(frozen=True)
class LeafSchema:
    data_type: PropType
    optional: bool = False
    allowed_values: Optional[Tuple[Primitive, ...]] = None

    def to_dict(self) -> Dict[str, Any]:
        return _common_fields(self, {"dataType": self.data_type.value})


@dataclass(frozen=True)
class ObjectSchema:
    # Declaration order of properties drives error order.
    properties: Dict[str, "CanonicalSchema"] = field(default_factory=dict)
    additional_properties: bool = False
    optional: bool = False
    allowed_values: Optional[Tuple[Primitive, ...]] = None

    @property
    def data_type(self) -> PropType:
        return PropType.OBJECT

    def to_dict(self) -> Dict[str, Any]:
        return _common_fields(
            self,
            {
                "dataType": PropType.OBJECT.value,
                "properties": {key: value.to_dict() for key, value in self.properties.items()},
                "additionalProperties": self.additional_properties,
            },
        )


@dataclass(frozen=True)
class ArraySchema:
    items: "CanonicalSchema"
    optional: bool = False
    allowed_values: Optional[Tuple[Primitive, ...]] = None

    @property
    def data_type(self) -> PropType:
        return PropType.ARRAY

    def to_dict(self) -> Dict[str, Any]:
        return _common_fields(self, {"dataType": PropType.ARRAY.value, "items": self.items.to_dict()})


@dataclass(frozen=True)
class UnionSchema:
    one_of: Tuple["CanonicalSchema", ...]
    optional: bool = False
    allowed_values: Optional[Tuple[Primitive, ...]] = None

    def to_dict(self) -> Dict[str, Any]:
        return _common_fields(self, {"oneOf": [option.to_dict() for option in self.one_of]})


@dataclass(frozen=True)
class InvalidSchema:
    """A schema fragment the normalizer could not recognize.

    Never validated against; the engine reports it as an invalid-schema error.
    """

    source: Any
    reason: str
    optional: bool = False
    allowed_values: Optional[Tuple[Primitive, ...]] = None

    def to_dict(self) -> Any:
        return self.source


CanonicalSchema = Union[LeafSchema, ObjectSchema, ArraySchema, UnionSchema, InvalidSchema]

CANONICAL_TYPES = (LeafSchema, ObjectSchema, ArraySchema, UnionSchema, InvalidSchema)
