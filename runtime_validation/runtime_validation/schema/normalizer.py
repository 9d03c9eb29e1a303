# Copyright 2026 TIER IV, inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Schema normalizer.

Turns any accepted surface notation into the canonical node tree:

- a bare type tag (``PropType.STRING`` or ``"string"``) becomes a leaf
- ``[X]`` is an array of ``X``; ``[X, Y, ...]`` an array of the union of X, Y, ...
- a mapping without ``dataType``/``oneOf`` is an implicit object schema whose
  keys are the property names
- a mapping with ``oneOf`` is a union, one with ``dataType`` an explicit leaf,
  object or array schema

Normalization never raises. Shapes that match none of the rules become
``InvalidSchema`` nodes which the engine reports at validation time.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Dict, Optional, Tuple

from ..models.prop_type import PropType, is_sequence
from ..models.schema_nodes import (
    CANONICAL_TYPES,
    ArraySchema,
    CanonicalSchema,
    InvalidSchema,
    LeafSchema,
    ObjectSchema,
    UnionSchema,
)
from ..config import DEFAULT_CONFIG, ValidatorConfig

logger = logging.getLogger(__name__)


RESERVED_KEYS = ("dataType", "properties", "items", "oneOf", "optional", "allowedValues")

_PRIMITIVE_TYPES = (str, int, float, bool, type(None))


class _SchemaShapeError(Exception):
    """Internal signal for a malformed explicit schema field."""


def normalize(schema: Any, config: Optional[ValidatorConfig] = None) -> CanonicalSchema:
    """Normalize a surface schema into its canonical form.

    Already-canonical nodes are returned unchanged, so normalizing twice is the
    same as normalizing once.
    """
    if config is None:
        config = DEFAULT_CONFIG

    if isinstance(schema, CANONICAL_TYPES):
        return schema

    if isinstance(schema, (PropType, str)):
        data_type = PropType.from_value(schema)
        if data_type is None:
            return _invalid(schema, f"unknown type tag '{schema}'")
        return LeafSchema(data_type=data_type)

    if is_sequence(schema):
        return _normalize_sequence(schema, config)

    if isinstance(schema, Mapping):
        has_data_type = "dataType" in schema
        has_one_of = "oneOf" in schema
        if has_data_type and has_one_of:
            return _invalid(schema, "a schema cannot declare both 'dataType' and 'oneOf'")
        if has_one_of:
            return _normalize_union(schema, config)
        if has_data_type:
            return _normalize_explicit(schema, config)
        return _normalize_implicit_object(schema, config)

    return _invalid(schema, f"unsupported schema value of type {type(schema).__name__}")


def _invalid(source: Any, reason: str) -> InvalidSchema:
    logger.debug("Unrecognized schema shape: %s", reason)
    return InvalidSchema(source=source, reason=reason)


def _normalize_sequence(schema, config: ValidatorConfig) -> CanonicalSchema:
    if len(schema) == 0:
        return _invalid(schema, "an array shorthand needs at least one item schema")
    if len(schema) > 1:
        options = tuple(normalize(item, config) for item in schema)
        return ArraySchema(items=UnionSchema(one_of=options))
    # Nested sequences recurse through normalize: [[X]] is an array of arrays of X
    return ArraySchema(items=normalize(schema[0], config))


def _normalize_implicit_object(schema: Mapping, config: ValidatorConfig) -> ObjectSchema:
    properties: Dict[str, CanonicalSchema] = {}
    for key, value in schema.items():
        properties[str(key)] = normalize(value, config)
    return ObjectSchema(properties=properties, additional_properties=not config.strict)


def _read_modifiers(schema: Mapping) -> Tuple[bool, Optional[Tuple[Any, ...]]]:
    optional = schema.get("optional", False)
    if not isinstance(optional, bool):
        raise _SchemaShapeError("'optional' must be a boolean")

    allowed_values = schema.get("allowedValues")
    if allowed_values is not None:
        if not is_sequence(allowed_values):
            raise _SchemaShapeError("'allowedValues' must be a list of primitive values")
        if not all(isinstance(v, _PRIMITIVE_TYPES) for v in allowed_values):
            raise _SchemaShapeError("'allowedValues' may only contain primitive values")
        allowed_values = tuple(allowed_values)
    return optional, allowed_values


def _normalize_union(schema: Mapping, config: ValidatorConfig) -> CanonicalSchema:
    try:
        optional, allowed_values = _read_modifiers(schema)
    except _SchemaShapeError as exc:
        return _invalid(schema, str(exc))

    options = schema["oneOf"]
    if not is_sequence(options):
        return _invalid(schema, "'oneOf' must be a list of schemas")
    if len(options) == 0:
        return _invalid(schema, "'oneOf' needs at least one alternative")

    return UnionSchema(
        one_of=tuple(normalize(option, config) for option in options),
        optional=optional,
        allowed_values=allowed_values,
    )


def _normalize_explicit(schema: Mapping, config: ValidatorConfig) -> CanonicalSchema:
    data_type = PropType.from_value(schema["dataType"])
    if data_type is None:
        return _invalid(schema, f"unknown dataType '{schema['dataType']}'")

    try:
        optional, allowed_values = _read_modifiers(schema)
    except _SchemaShapeError as exc:
        return _invalid(schema, str(exc))

    if "properties" in schema:
        if data_type != PropType.OBJECT:
            return _invalid(schema, f"'properties' is only valid with dataType 'object', got '{data_type}'")
        properties = schema["properties"]
        if not isinstance(properties, Mapping):
            return _invalid(schema, "'properties' must be a mapping of property schemas")
        additional = schema.get("additionalProperties", False)
        if not isinstance(additional, bool):
            return _invalid(schema, "'additionalProperties' must be a boolean")
        return ObjectSchema(
            properties={str(key): normalize(value, config) for key, value in properties.items()},
            additional_properties=additional,
            optional=optional,
            allowed_values=allowed_values,
        )

    if "items" in schema:
        if data_type != PropType.ARRAY:
            return _invalid(schema, f"'items' is only valid with dataType 'array', got '{data_type}'")
        return ArraySchema(
            items=normalize(schema["items"], config),
            optional=optional,
            allowed_values=allowed_values,
        )

    return LeafSchema(data_type=data_type, optional=optional, allowed_values=allowed_values)
