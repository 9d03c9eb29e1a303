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

"""Custom exceptions for the runtime validation package.

Validation itself never raises; these cover document loading, schema document
checks and the opt-in ``assert_valid`` helper.
"""


class RuntimeValidationError(Exception):
    """Base exception for runtime-validation related errors."""
    pass


class DocumentLoadError(RuntimeValidationError):
    """Exception raised when a schema or data document cannot be loaded."""
    pass


class SchemaDocumentError(RuntimeValidationError):
    """Exception raised when a schema document fails the meta-schema check."""

    def __init__(self, message: str, issues=None):
        super().__init__(message)
        self.issues = list(issues or [])


class ValidationFailedError(RuntimeValidationError):
    """Exception raised by ``assert_valid`` when data does not match its schema."""

    def __init__(self, message: str, errors=None):
        super().__init__(message)
        self.errors = list(errors or [])
