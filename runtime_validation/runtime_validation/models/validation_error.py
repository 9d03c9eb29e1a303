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

"""Validation error records.

``expected`` and ``received`` are kept as small descriptor objects and rendered
to the human-oriented strings on access, so callers can inspect ``code`` and the
descriptors instead of matching on message text.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Tuple, Union

from .prop_type import UNDEFINED, PropType


class ErrorCode(str, Enum):
    TYPE_MISMATCH = "type_mismatch"
    NOT_ALLOWED = "not_allowed"
    NO_UNION_MATCH = "no_union_match"
    NOT_AN_OBJECT = "not_an_object"
    NOT_AN_ARRAY = "not_an_array"
    UNEXPECTED_PROPERTY = "unexpected_property"
    INVALID_SCHEMA = "invalid_schema"


def render_value(value: Any) -> str:
    """Render a data value the way it appears in error text."""
    if value is UNDEFINED:
        return "undefined"
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (int, float)):
        return repr(value)
    try:
        return json.dumps(value, separators=(",", ":"), default=repr)
    except (TypeError, ValueError):
        return repr(value)


@dataclass(frozen=True)
class TypeDescriptor:
    tag: Union[PropType, str]

    def render(self) -> str:
        return str(self.tag)


@dataclass(frozen=True)
class UnionDescriptor:
    count: int

    def render(self) -> str:
        return f"one of {self.count} possible types"


@dataclass(frozen=True)
class ValueSetDescriptor:
    values: Tuple[Any, ...]

    def render(self) -> str:
        return "one of [" + ", ".join(render_value(v) for v in self.values) + "]"


@dataclass(frozen=True)
class ValueDescriptor:
    value: Any

    def render(self) -> str:
        return render_value(self.value)


Descriptor = Union[TypeDescriptor, UnionDescriptor, ValueSetDescriptor, ValueDescriptor]


@dataclass(frozen=True)
class ValidationError:
    path: str
    message: str
    code: ErrorCode
    expected_descriptor: Descriptor
    received_descriptor: Descriptor

    @property
    def expected(self) -> str:
        return self.expected_descriptor.render()

    @property
    def received(self) -> str:
        return self.received_descriptor.render()

    def to_dict(self) -> Dict[str, str]:
        """Wire form: exactly the four string fields."""
        return {
            "path": self.path,
            "expected": self.expected,
            "received": self.received,
            "message": self.message,
        }

    def key(self) -> Tuple[str, str, str, str]:
        return (self.path, self.expected, self.received, self.message)

    def __hash__(self) -> int:
        # Descriptors may hold list or dict values; hash the rendered form.
        return hash(self.key())

    def __str__(self) -> str:
        location = f'at "{self.path}"' if self.path else "at root"
        return f"{location}: {self.message} (expected {self.expected}, received {self.received})"
