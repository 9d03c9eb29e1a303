"""Error reporting."""

from .formatter import (
    NO_ERRORS_MESSAGE,
    format_error,
    format_errors,
    format_errors_github,
    format_errors_json,
)
from .report import ValidationReport
