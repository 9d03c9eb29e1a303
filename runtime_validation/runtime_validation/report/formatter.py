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

"""Rendering of validation errors for people and tools."""

import json
from typing import Dict, List, Optional, Sequence

from ..file_io.source_location import SourceLocation, lookup_source
from ..models.validation_error import ValidationError


NO_ERRORS_MESSAGE = "No validation errors"


def format_error(error: ValidationError, index: int) -> str:
    """Format one error as a numbered line of the human-readable list."""
    location = f'at "{error.path}"' if error.path else "at root"
    return f"{index}. {location}: {error.message} (expected {error.expected}, received {error.received})"


def format_errors(errors: Sequence[ValidationError]) -> str:
    """Format validation errors into a numbered, human-readable list.

    Args:
        errors: Validation errors in the order they were reported

    Returns:
        One line per error, or ``"No validation errors"`` for an empty list
    """
    if not errors:
        return NO_ERRORS_MESSAGE

    return "\n".join(format_error(error, index) for index, error in enumerate(errors, start=1))


def errors_to_dicts(
    errors: Sequence[ValidationError],
    source_map: Optional[Dict[str, Dict[str, int]]] = None,
) -> List[Dict[str, object]]:
    entries: List[Dict[str, object]] = []
    for error in errors:
        entry: Dict[str, object] = dict(error.to_dict())
        entry["code"] = error.code.value
        loc = lookup_source(source_map, error.path)
        if loc.line is not None:
            entry["line"] = loc.line
        if loc.column is not None:
            entry["column"] = loc.column
        entries.append(entry)
    return entries


def format_errors_json(
    errors: Sequence[ValidationError],
    source_map: Optional[Dict[str, Dict[str, int]]] = None,
) -> str:
    return json.dumps(errors_to_dicts(errors, source_map), indent=2)


def format_errors_github(
    errors: Sequence[ValidationError],
    file_path: str,
    source_map: Optional[Dict[str, Dict[str, int]]] = None,
) -> str:
    """Render errors as GitHub Actions workflow commands."""
    lines = []
    for error in errors:
        loc: SourceLocation = lookup_source(source_map, error.path)
        line = loc.line if loc.line is not None else 1
        location = f'at "{error.path}"' if error.path else "at root"
        lines.append(f"::error file={file_path},line={line}::{location}: {error.message}")
    return "\n".join(lines)
