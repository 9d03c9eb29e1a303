"""Schema normalization and schema document checks.

This package intentionally avoids depending on the validation engine so that
schemas can be normalized and checked on their own.
"""

from .normalizer import RESERVED_KEYS, normalize
from .meta_schema import (
    SchemaIssue,
    check_schema_document,
    require_valid_schema_document,
)
