"""Runtime validation of JSON-shaped data against declarative schemas.

Typical use::

    from runtime_validation import PropType, validate, format_errors

    schema = {"name": PropType.STRING, "tags": [PropType.STRING]}
    errors = validate({"name": "John", "tags": ["a", 5]}, schema)
    print(format_errors(errors))
"""

__version__ = "1.1.0"

from .config import DEFAULT_CONFIG, ValidatorConfig
from .exceptions import (
    DocumentLoadError,
    RuntimeValidationError,
    SchemaDocumentError,
    ValidationFailedError,
)
from .models.prop_type import UNDEFINED, PropType, get_type_of
from .models.schema_nodes import (
    ArraySchema,
    CanonicalSchema,
    InvalidSchema,
    LeafSchema,
    ObjectSchema,
    UnionSchema,
)
from .models.validation_error import ErrorCode, ValidationError
from .report.formatter import format_errors
from .schema.meta_schema import SchemaIssue, check_schema_document
from .schema.normalizer import normalize
from .validator.engine import validate
from .validator.runtime_validator import RuntimeValidator, assert_valid, is_valid

__all__ = [
    "__version__",
    "DEFAULT_CONFIG",
    "ValidatorConfig",
    "DocumentLoadError",
    "RuntimeValidationError",
    "SchemaDocumentError",
    "ValidationFailedError",
    "UNDEFINED",
    "PropType",
    "get_type_of",
    "ArraySchema",
    "CanonicalSchema",
    "InvalidSchema",
    "LeafSchema",
    "ObjectSchema",
    "UnionSchema",
    "ErrorCode",
    "ValidationError",
    "format_errors",
    "SchemaIssue",
    "check_schema_document",
    "normalize",
    "validate",
    "RuntimeValidator",
    "assert_valid",
    "is_valid",
]
