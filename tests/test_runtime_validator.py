"""Tests for configuration and the RuntimeValidator facade."""

from __future__ import annotations

import pytest

from runtime_validation import (
    DEFAULT_CONFIG,
    PropType,
    RuntimeValidator,
    ValidationFailedError,
    ValidatorConfig,
    assert_valid,
    is_valid,
    validate,
)

SCHEMA = {"name": PropType.STRING, "age": PropType.NUMBER}
EXTRA = {"name": "John", "age": 30, "email": "john@example.com"}


def test_default_config_is_strict() -> None:
    assert DEFAULT_CONFIG.strict is True
    assert RuntimeValidator().strict is True


def test_strict_mode_rejects_unknown_keys() -> None:
    errors = RuntimeValidator(strict=True).validate(EXTRA, SCHEMA)

    assert len(errors) == 1
    assert 'Unexpected property "email"' in errors[0].message


def test_permissive_mode_allows_unknown_keys() -> None:
    assert RuntimeValidator(strict=False).validate(EXTRA, SCHEMA) == []
    assert validate(EXTRA, SCHEMA, config=ValidatorConfig(strict=False)) == []


def test_explicit_additional_properties_overrides_mode() -> None:
    schema = {"dataType": PropType.OBJECT, "properties": SCHEMA, "additionalProperties": False}

    assert len(RuntimeValidator(strict=False).validate(EXTRA, schema)) == 1


def test_permissive_mode_reaches_nested_implicit_objects() -> None:
    schema = {"user": {"name": PropType.STRING}}
    data = {"user": {"name": "a", "extra": 1}}

    assert len(RuntimeValidator().validate(data, schema)) == 1
    assert RuntimeValidator(strict=False).validate(data, schema) == []


def test_with_strict_returns_new_validator() -> None:
    strict = RuntimeValidator()
    permissive = strict.with_strict(False)

    assert permissive is not strict
    assert strict.strict is True
    assert permissive.strict is False
    # Both keep working side by side
    assert len(strict.validate(EXTRA, SCHEMA)) == 1
    assert permissive.validate(EXTRA, SCHEMA) == []


def test_normalize_uses_validator_mode() -> None:
    assert RuntimeValidator(strict=False).normalize(SCHEMA).additional_properties is True


def test_is_valid() -> None:
    assert is_valid({"name": "John", "age": 30}, SCHEMA)
    assert not is_valid({"name": "John"}, SCHEMA)
    assert RuntimeValidator(strict=False).is_valid(EXTRA, SCHEMA)


def test_assert_valid_raises_with_errors() -> None:
    assert_valid({"name": "John", "age": 30}, SCHEMA)

    with pytest.raises(ValidationFailedError) as excinfo:
        assert_valid({"name": 1, "age": 30}, SCHEMA)

    assert len(excinfo.value.errors) == 1
    assert excinfo.value.errors[0].path == "name"
    assert str(excinfo.value).startswith('1. at "name": ')


def test_format_errors_on_facade() -> None:
    assert RuntimeValidator.format_errors([]) == "No validation errors"


def test_config_from_env(monkeypatch) -> None:
    monkeypatch.setenv("RUNTIME_VALIDATION_STRICT", "false")
    monkeypatch.setenv("RUNTIME_VALIDATION_LOG_LEVEL", "DEBUG")

    config = ValidatorConfig.from_env()

    assert config.strict is False
    assert config.log_level == "DEBUG"


def test_config_from_env_defaults(monkeypatch) -> None:
    monkeypatch.delenv("RUNTIME_VALIDATION_STRICT", raising=False)
    monkeypatch.delenv("RUNTIME_VALIDATION_LOG_LEVEL", raising=False)

    config = ValidatorConfig.from_env()

    assert config.strict is True
    assert config.log_level == "WARNING"


def test_with_strict_keeps_other_fields() -> None:
    config = ValidatorConfig(log_level="INFO").with_strict(False)

    assert config == ValidatorConfig(strict=False, log_level="INFO")
