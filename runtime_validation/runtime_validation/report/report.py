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

"""Per-document results for the command line tool."""

from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from ..file_io.source_location import SourceLocation, SourceMap, format_source, lookup_source
from ..models.validation_error import ValidationError
from .formatter import errors_to_dicts, format_error, format_errors


class ValidationReport:
    """Container for the validation result of a single data document."""

    def __init__(self, file_path: Union[str, Path], source_map: Optional[SourceMap] = None):
        """Initialize the report.

        Args:
            file_path: Path to the data document
            source_map: Line/column map of the document, keyed by error path
        """
        self.file_path = Path(file_path)
        self.source_map = source_map or {}
        self.errors: List[ValidationError] = []
        self.load_error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.load_error is None and not self.errors

    def add_errors(self, errors: List[ValidationError]):
        self.errors.extend(errors)

    def set_load_error(self, message: str):
        """Record that the document could not be loaded."""
        self.load_error = message

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {
            'file': str(self.file_path),
            'valid': self.ok,
            'errors': errors_to_dicts(self.errors, self.source_map),
        }
        if self.load_error is not None:
            result['load_error'] = self.load_error
        return result

    def format_human(self) -> str:
        if self.load_error is not None:
            return f"{self.file_path}:\n  ERROR: {self.load_error}"
        if not self.errors:
            return f"{self.file_path}:\n  {format_errors(self.errors)}"

        lines = [f"{self.file_path}:"]
        for index, error in enumerate(self.errors, start=1):
            line = format_error(error, index)
            loc = lookup_source(self.source_map, error.path)
            if loc.line is not None:
                line += f" [line {loc.line}, column {loc.column}]"
            lines.append(f"  {line}")
        return "\n".join(lines)

    def source_of(self, error: ValidationError) -> SourceLocation:
        loc = lookup_source(self.source_map, error.path)
        return SourceLocation(
            file_path=self.file_path,
            data_path=error.path,
            line=loc.line,
            column=loc.column,
        )

    def describe(self, error: ValidationError) -> str:
        """One-line description of an error with its source location."""
        return f"{error}{format_source(self.source_of(error))}"
