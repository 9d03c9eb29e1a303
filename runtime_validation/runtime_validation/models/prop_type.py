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

"""Primitive type tags and the runtime type classifier."""

from __future__ import annotations

import numbers
from enum import Enum
from typing import Any, List, Optional


class PropType(str, Enum):
    """Closed set of primitive type tags."""

    UNDEFINED = "undefined"
    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def get_all_types(cls) -> List[str]:
        """Get all type tag values."""
        return [member.value for member in cls]

    @classmethod
    def from_value(cls, value: Any) -> Optional["PropType"]:
        """Return the tag for a PropType member or tag string, None otherwise."""
        if isinstance(value, PropType):
            return value
        if isinstance(value, str):
            try:
                return cls(value)
            except ValueError:
                return None
        return None


class _Undefined:
    """Sentinel type for an absent value."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __reduce__(self):
        return (_Undefined, ())


UNDEFINED = _Undefined()


def is_sequence(value: Any) -> bool:
    """Arrays are lists and tuples; strings and mappings are not."""
    return isinstance(value, (list, tuple))


def get_type_of(value: Any) -> PropType:
    """Classify a runtime value into one of the seven type tags.

    ``bool`` is checked before numbers because it subclasses ``int``. Values that
    are neither primitives nor sequences fall back to ``object``.
    """
    if value is UNDEFINED:
        return PropType.UNDEFINED
    if value is None:
        return PropType.NULL
    if isinstance(value, bool):
        return PropType.BOOLEAN
    if isinstance(value, numbers.Number):
        return PropType.NUMBER
    if isinstance(value, str):
        return PropType.STRING
    if is_sequence(value):
        return PropType.ARRAY
    return PropType.OBJECT
