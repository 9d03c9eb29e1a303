"""Data model: type tags, canonical schema nodes and validation errors."""

from .prop_type import UNDEFINED, PropType, get_type_of
from .schema_nodes import (
    ArraySchema,
    CanonicalSchema,
    InvalidSchema,
    LeafSchema,
    ObjectSchema,
    UnionSchema,
)
from .validation_error import ErrorCode, ValidationError
