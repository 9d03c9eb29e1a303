"""Validation engine and its configured facade."""

from .engine import is_allowed, validate
from .runtime_validator import RuntimeValidator, assert_valid, is_valid
