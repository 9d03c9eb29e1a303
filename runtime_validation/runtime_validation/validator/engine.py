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

"""Recursive validation engine.

Walks data and the canonical schema in lock-step and collects every mismatch.
Sibling properties and array elements are always all visited; only a type
mismatch stops the checks of its own node.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Iterable, List, Optional

from ..config import DEFAULT_CONFIG, ValidatorConfig
from ..models.paths import join_index, join_key
from ..models.prop_type import UNDEFINED, PropType, get_type_of, is_sequence
from ..models.schema_nodes import (
    ArraySchema,
    CanonicalSchema,
    InvalidSchema,
    ObjectSchema,
    UnionSchema,
)
from ..models.validation_error import (
    ErrorCode,
    TypeDescriptor,
    UnionDescriptor,
    ValidationError,
    ValueDescriptor,
    ValueSetDescriptor,
    render_value,
)
from ..schema.normalizer import normalize

logger = logging.getLogger(__name__)


def _same_value(left: Any, right: Any) -> bool:
    # True == 1 in Python; a boolean must only match a boolean.
    if get_type_of(left) != get_type_of(right):
        return False
    return left == right


def is_allowed(value: Any, allowed_values: Iterable[Any]) -> bool:
    return any(_same_value(value, candidate) for candidate in allowed_values)


def _not_allowed_error(value: Any, allowed_values, path: str) -> ValidationError:
    return ValidationError(
        path=path,
        message=f"Value {render_value(value)} is not in the allowed set of values",
        code=ErrorCode.NOT_ALLOWED,
        expected_descriptor=ValueSetDescriptor(tuple(allowed_values)),
        received_descriptor=ValueDescriptor(value),
    )


def _union_error(schema: UnionSchema, received: PropType, path: str) -> ValidationError:
    return ValidationError(
        path=path,
        message="Value does not match any of the allowed schemas",
        code=ErrorCode.NO_UNION_MATCH,
        expected_descriptor=UnionDescriptor(len(schema.one_of)),
        received_descriptor=TypeDescriptor(received),
    )


def validate(
    data: Any,
    schema: Any,
    path: str = "",
    *,
    config: Optional[ValidatorConfig] = None,
) -> List[ValidationError]:
    """Validate ``data`` against ``schema`` and return every validation error.

    The schema may be in any surface notation; it is normalized first. An empty
    list means the data is valid. Missing object keys are passed down as
    ``UNDEFINED``.
    """
    if config is None:
        config = DEFAULT_CONFIG
    return _validate_node(data, normalize(schema, config), path, config)


def _validate_node(
    data: Any,
    schema: CanonicalSchema,
    path: str,
    config: ValidatorConfig,
) -> List[ValidationError]:
    # Canonical children may still hold surface fragments when built by hand.
    schema = normalize(schema, config)

    if isinstance(schema, InvalidSchema):
        return [
            ValidationError(
                path=path,
                message=f"Invalid schema: {schema.reason}",
                code=ErrorCode.INVALID_SCHEMA,
                expected_descriptor=TypeDescriptor("valid schema"),
                received_descriptor=TypeDescriptor(type(schema.source).__name__),
            )
        ]

    if data is UNDEFINED and schema.optional:
        return []

    if isinstance(schema, UnionSchema):
        return _validate_union(data, schema, path, config)

    errors: List[ValidationError] = []
    actual_type = get_type_of(data)

    if actual_type != schema.data_type:
        errors.append(
            ValidationError(
                path=path,
                message=f"Expected type {schema.data_type} but received {actual_type}",
                code=ErrorCode.TYPE_MISMATCH,
                expected_descriptor=TypeDescriptor(schema.data_type),
                received_descriptor=TypeDescriptor(actual_type),
            )
        )
        return errors

    if schema.allowed_values and not is_allowed(data, schema.allowed_values):
        errors.append(_not_allowed_error(data, schema.allowed_values, path))

    if isinstance(schema, ObjectSchema):
        errors.extend(_validate_object(data, schema, path, config))
    elif isinstance(schema, ArraySchema):
        errors.extend(_validate_array(data, schema, path, config))

    return errors


def _unique(errors: Iterable[ValidationError]) -> List[ValidationError]:
    seen = set()
    unique: List[ValidationError] = []
    for error in errors:
        if error.key() in seen:
            continue
        seen.add(error.key())
        unique.append(error)
    return unique


def _validate_union(
    data: Any,
    schema: UnionSchema,
    path: str,
    config: ValidatorConfig,
) -> List[ValidationError]:
    if data is UNDEFINED:
        return [_union_error(schema, PropType.UNDEFINED, path)]

    candidate_errors: List[ValidationError] = []
    for index, option in enumerate(schema.one_of):
        option_errors = _validate_node(data, option, path, config)
        if not option_errors:
            # First match wins; only the union's own allowed values apply.
            # A declared empty list admits nothing.
            logger.debug("Union at '%s' matched alternative %d", path, index)
            if schema.allowed_values is not None and not is_allowed(data, schema.allowed_values):
                return [_not_allowed_error(data, schema.allowed_values, path)]
            return []
        candidate_errors.extend(option_errors)

    # Broken alternatives are reported at the union's own path and must not be
    # folded into the generic mismatch.
    surfaced = [
        error for error in candidate_errors
        if error.path != path or error.code is ErrorCode.INVALID_SCHEMA
    ]
    if any(error.path != path for error in surfaced):
        # Errors inside a candidate object/array are more useful than a
        # generic mismatch.
        return _unique(surfaced)

    return [_union_error(schema, get_type_of(data), path)] + _unique(surfaced)


def _validate_object(
    data: Any,
    schema: ObjectSchema,
    path: str,
    config: ValidatorConfig,
) -> List[ValidationError]:
    if not isinstance(data, Mapping):
        received = type(data).__name__
        return [
            ValidationError(
                path=path,
                message=f"Expected object but received {received}",
                code=ErrorCode.NOT_AN_OBJECT,
                expected_descriptor=TypeDescriptor(PropType.OBJECT),
                received_descriptor=TypeDescriptor(received),
            )
        ]

    errors: List[ValidationError] = []
    for key, property_schema in schema.properties.items():
        errors.extend(
            _validate_node(data.get(key, UNDEFINED), property_schema, join_key(path, key), config)
        )

    if schema.additional_properties is not True:
        for key, value in data.items():
            if key in schema.properties:
                continue
            errors.append(
                ValidationError(
                    path=join_key(path, key),
                    message=f'Unexpected property "{key}"',
                    code=ErrorCode.UNEXPECTED_PROPERTY,
                    expected_descriptor=TypeDescriptor(PropType.UNDEFINED),
                    received_descriptor=TypeDescriptor(get_type_of(value)),
                )
            )
    return errors


def _validate_array(
    data: Any,
    schema: ArraySchema,
    path: str,
    config: ValidatorConfig,
) -> List[ValidationError]:
    if not is_sequence(data):
        received = get_type_of(data)
        return [
            ValidationError(
                path=path,
                message=f"Expected array but received {received}",
                code=ErrorCode.NOT_AN_ARRAY,
                expected_descriptor=TypeDescriptor(PropType.ARRAY),
                received_descriptor=TypeDescriptor(received),
            )
        ]

    errors: List[ValidationError] = []
    for index, item in enumerate(data):
        errors.extend(_validate_node(item, schema.items, join_index(path, index), config))
    return errors
