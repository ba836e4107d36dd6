"""Composable value validators.

Each validator checks a single value against declarative options and
returns a ``ValidationResult``:

- ``NumberValidator``: numeric-ness and relational bounds
- ``TypeValidator``: runtime type category membership
- ``UuidValidator``: UUID string layouts (default, hex, urn)

Example:
    ```python
    from dataknobs_validators import NumberValidator

    result = NumberValidator().validate(0, {"is": True, "greater_than": 0})
    result.valid
    # False
    result.reason
    # 'must be greater than 0'
    ```
"""

from .categories import TypeCategory, is_of_category
from .exceptions import UnknownValidatorError
from .factory import ValidatorFactory, validator_factory
from .formats import CONCRETE_FORMATS, UuidFormat, matches_format
from .options import keyword_options
from .registry import ValidatorRegistry, validator_registry
from .result import VALID, ValidationResult
from .rule import Rule
from .skipping import is_blank, should_skip, unless_skipping
from .validators import (
    NumberValidator,
    TypeValidator,
    UuidValidator,
    Validator,
    is_number,
)

__version__ = "0.1.0"

__all__ = [
    # Result types
    "ValidationResult",
    "VALID",
    # Validators
    "Validator",
    "NumberValidator",
    "TypeValidator",
    "UuidValidator",
    "is_number",
    # Categories and formats
    "TypeCategory",
    "is_of_category",
    "UuidFormat",
    "CONCRETE_FORMATS",
    "matches_format",
    # Options and gating
    "keyword_options",
    "should_skip",
    "is_blank",
    "unless_skipping",
    # Rules, registry and factories
    "Rule",
    "ValidatorRegistry",
    "validator_registry",
    "ValidatorFactory",
    "validator_factory",
    "UnknownValidatorError",
]
