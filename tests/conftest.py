"""Pytest configuration for dataknobs_validators tests."""

import sys
from pathlib import Path

import pytest

# Add the package source to path for testing
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from dataknobs_validators import (  # noqa: E402
    NumberValidator,
    TypeValidator,
    UuidValidator,
    ValidatorRegistry,
)


@pytest.fixture
def number_validator():
    return NumberValidator()


@pytest.fixture
def type_validator():
    return TypeValidator()


@pytest.fixture
def uuid_validator():
    return UuidValidator()


@pytest.fixture
def registry():
    """A fresh registry with the built-in validators."""
    return ValidatorRegistry()
