"""
Shared pytest fixtures and utilities for testing the arith package.

This module provides:
- Settings isolation (environment overrides, cache resets)
- Utilities for testing Pydantic validation
- Common helpers for serialization
"""

import logging

import pytest
from typing import Any, Type, TypeVar
from pydantic import BaseModel, ValidationError

from arith.core.config import get_settings
from arith.parser import get_parser


T = TypeVar('T', bound=BaseModel)


def _clear_caches() -> None:
    get_settings.cache_clear()
    get_parser.cache_clear()


@pytest.fixture(autouse=True)
def fresh_settings():
    """Every test sees settings built from its own environment."""
    _clear_caches()
    yield
    _clear_caches()


@pytest.fixture
def settings_env(monkeypatch):
    """Set ARITH_* environment variables and rebuild cached settings."""
    def _set(**values: Any):
        for name, value in values.items():
            monkeypatch.setenv(f"ARITH_{name}", str(value))
        _clear_caches()
        return get_settings()
    return _set


@pytest.fixture
def arith_logger():
    """The package logger, restored to its pristine state afterwards."""
    logger = logging.getLogger("arith")
    saved = (list(logger.handlers), logger.level, logger.propagate)
    yield logger
    handlers, level, propagate = saved
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        if handler not in handlers:
            handler.close()
    for handler in handlers:
        logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = propagate


@pytest.fixture
def assert_validation_error():
    """Helper to assert that a ValidationError is raised with expected details."""
    def _assert_validation(
        model_class: Type[BaseModel],
        data: dict[str, Any],
        expected_field: str | None = None,
        expected_type: str | None = None,
    ) -> ValidationError:
        """
        Assert that validating data against a model raises ValidationError.

        Args:
            model_class: The Pydantic model class
            data: Invalid data to validate
            expected_field: Expected field name in error (optional)
            expected_type: Expected error type (optional)

        Returns:
            The ValidationError that was raised
        """
        with pytest.raises(ValidationError) as exc_info:
            model_class.model_validate(data)

        error = exc_info.value
        if expected_field:
            field_errors = [e for e in error.errors() if e['loc'] and e['loc'][0] == expected_field]
            assert len(field_errors) > 0, f"Expected error for field '{expected_field}' not found"

        if expected_type:
            assert any(
                expected_type in str(e['type']).lower() for e in error.errors()
            ), f"Expected error type containing '{expected_type}' not found"

        return error

    return _assert_validation


@pytest.fixture
def assert_serializable():
    """Helper to assert that a model survives a JSON round trip."""
    def _assert_serialization(model: BaseModel, model_class: Type[T]) -> T:
        """
        Assert that a model can be dumped to JSON and validated back.

        Args:
            model: The model instance to test
            model_class: The model class for reconstruction

        Returns:
            The reconstructed model
        """
        serialized = model.model_dump_json()
        reconstructed = model_class.model_validate_json(serialized)

        assert reconstructed.model_dump() == model.model_dump()

        return reconstructed

    return _assert_serialization
