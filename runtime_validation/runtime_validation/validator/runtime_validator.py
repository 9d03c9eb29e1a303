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

from __future__ import annotations

from typing import Any, List, Optional, Sequence

from ..config import DEFAULT_CONFIG, ValidatorConfig
from ..exceptions import ValidationFailedError
from ..models.schema_nodes import CanonicalSchema
from ..models.validation_error import ValidationError
from ..report.formatter import format_errors
from ..schema.normalizer import normalize
from .engine import validate


class RuntimeValidator:
    """Validator bound to one configuration.

    Instances are immutable; ``with_strict`` returns a new validator instead of
    flipping shared state, so validators with different modes can be used side
    by side.
    """

    def __init__(self, config: Optional[ValidatorConfig] = None, *, strict: Optional[bool] = None):
        config = config if config is not None else DEFAULT_CONFIG
        if strict is not None:
            config = config.with_strict(strict)
        self._config = config

    @property
    def config(self) -> ValidatorConfig:
        return self._config

    @property
    def strict(self) -> bool:
        return self._config.strict

    def with_strict(self, strict: bool) -> 'RuntimeValidator':
        return RuntimeValidator(self._config, strict=strict)

    def normalize(self, schema: Any) -> CanonicalSchema:
        return normalize(schema, self._config)

    def validate(self, data: Any, schema: Any, path: str = "") -> List[ValidationError]:
        return validate(data, schema, path, config=self._config)

    def is_valid(self, data: Any, schema: Any) -> bool:
        return not self.validate(data, schema)

    def assert_valid(self, data: Any, schema: Any) -> None:
        errors = self.validate(data, schema)
        if errors:
            raise ValidationFailedError(format_errors(errors), errors=errors)

    @staticmethod
    def format_errors(errors: Sequence[ValidationError]) -> str:
        return format_errors(errors)


def is_valid(data: Any, schema: Any, *, config: Optional[ValidatorConfig] = None) -> bool:
    """Return True when ``data`` matches ``schema``."""
    return not validate(data, schema, config=config)


def assert_valid(data: Any, schema: Any, *, config: Optional[ValidatorConfig] = None) -> None:
    """Raise ValidationFailedError carrying the errors when ``data`` does not match."""
    RuntimeValidator(config).assert_valid(data, schema)
