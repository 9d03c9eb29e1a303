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

"""Per-call configuration for normalization and validation."""

import os
import logging
from dataclasses import dataclass, replace

from .utils.logging_utils import configure_split_stream_logging


@dataclass(frozen=True)
class ValidatorConfig:
    """Configuration threaded through the normalizer and the validation engine.

    ``strict`` decides the ``additionalProperties`` default of implicit object
    schemas: strict mode closes them, permissive mode lets unknown keys through.
    """
    strict: bool = True
    log_level: str = "WARNING"
    print_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> 'ValidatorConfig':
        """Create configuration from environment variables."""
        return cls(
            strict=os.getenv('RUNTIME_VALIDATION_STRICT', 'true').lower() != 'false',
            log_level=os.getenv('RUNTIME_VALIDATION_LOG_LEVEL', 'WARNING'),
            print_level=os.getenv('RUNTIME_VALIDATION_PRINT_LEVEL', 'WARNING'),
        )

    def with_strict(self, strict: bool) -> 'ValidatorConfig':
        return replace(self, strict=strict)

    def set_logging(self) -> logging.Logger:
        """Setup logging based on configuration."""
        level = getattr(logging, self.log_level.upper(), logging.WARNING)
        stderr_level = getattr(logging, self.print_level.upper(), logging.WARNING)

        formatter = logging.Formatter('%(name)s - %(levelname)s - %(message)s')
        return configure_split_stream_logging(level=level, stderr_level=stderr_level, formatter=formatter)


# Immutable default used when callers pass no configuration
DEFAULT_CONFIG = ValidatorConfig()
