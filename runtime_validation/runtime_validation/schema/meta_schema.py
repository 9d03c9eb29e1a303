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

"""Checks schema documents against the bundled meta-schema.

The normalizer accepts anything and defers problems to validation time. Schema
documents read from files can instead be checked up front: ``meta_schema.json``
describes every accepted notation as a JSON Schema, and ``jsonschema`` reports
each offending location.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

import jsonschema

from ..exceptions import SchemaDocumentError
from ..models.paths import format_path, join_index, join_key
from ..models.prop_type import is_sequence
from .normalizer import RESERVED_KEYS

logger = logging.getLogger(__name__)


META_SCHEMA_PATH = Path(__file__).parent / "meta_schema.json"

# Loaded once per process
_SCHEMA_CACHE: Dict[str, dict] = {}


@dataclass(frozen=True)
class SchemaIssue:
    message: str
    path: str = ""
    severity: str = "error"


def load_meta_schema() -> dict:
    """Load the bundled meta-schema.

    Raises:
        FileNotFoundError: If the package was installed without its data file
        json.JSONDecodeError: If the meta-schema file is invalid JSON
    """
    cache_key = str(META_SCHEMA_PATH)
    if cache_key in _SCHEMA_CACHE:
        return _SCHEMA_CACHE[cache_key]

    if not META_SCHEMA_PATH.exists():
        raise FileNotFoundError(f"Meta-schema file not found: {META_SCHEMA_PATH}")

    with open(META_SCHEMA_PATH, "r", encoding="utf-8") as f:
        schema = json.load(f)

    _SCHEMA_CACHE[cache_key] = schema
    return schema


def clear_cache() -> None:
    """Clear the meta-schema cache. Useful for testing."""
    _SCHEMA_CACHE.clear()


def check_schema_document(document: Any) -> List[SchemaIssue]:
    """Check a surface schema document.

    Returns:
        Errors for every location that violates the meta-schema, followed by
        warnings for implicit object schemas that use reserved key names as
        property names. Empty when the document is well formed.
    """
    validator = jsonschema.Draft7Validator(load_meta_schema())
    issues: List[SchemaIssue] = []

    for error in sorted(validator.iter_errors(document), key=lambda e: list(map(str, e.absolute_path))):
        issues.append(SchemaIssue(message=error.message, path=format_path(error.absolute_path)))

    issues.extend(_reserved_key_warnings(document, ""))
    logger.debug("Schema document check found %d issue(s)", len(issues))
    return issues


def require_valid_schema_document(document: Any, origin: Optional[str] = None) -> None:
    """Raise SchemaDocumentError if the document has error-level issues."""
    issues = check_schema_document(document)
    errors = [issue for issue in issues if issue.severity == "error"]
    if errors:
        where = f" in {origin}" if origin else ""
        details = "\n".join(
            f"  - {i.message}" + (f" (path={i.path})" if i.path else "")
            for i in errors
        )
        raise SchemaDocumentError(f"Schema document check failed{where}:\n{details}", issues=errors)


def _reserved_key_warnings(node: Any, path: str) -> List[SchemaIssue]:
    issues: List[SchemaIssue] = []

    if is_sequence(node):
        for idx, item in enumerate(node):
            issues.extend(_reserved_key_warnings(item, join_index(path, idx)))
        return issues

    if not isinstance(node, Mapping):
        return issues

    if "oneOf" in node:
        options = node.get("oneOf")
        if is_sequence(options):
            issues.extend(_reserved_key_warnings(options, join_key(path, "oneOf")))
        return issues

    if "dataType" in node:
        properties = node.get("properties")
        if isinstance(properties, Mapping):
            for key, value in properties.items():
                issues.extend(_reserved_key_warnings(value, join_key(join_key(path, "properties"), key)))
        if "items" in node:
            issues.extend(_reserved_key_warnings(node["items"], join_key(path, "items")))
        return issues

    for key, value in node.items():
        if key in RESERVED_KEYS:
            issues.append(
                SchemaIssue(
                    message=f"Implicit object schema uses reserved key '{key}' as a property name",
                    path=join_key(path, key),
                    severity="warning",
                )
            )
        issues.extend(_reserved_key_warnings(value, join_key(path, key)))
    return issues
