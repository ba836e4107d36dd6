"""Registry of validators addressable by name.
"""

from __future__ import annotations

from typing import Any

from dataknobs_common.registry import Registry

from .exceptions import UnknownValidatorError
from .result import ValidationResult
from .skipping import unless_skipping
from .validators import NumberValidator, TypeValidator, UuidValidator, Validator


class ValidatorRegistry(Registry[Validator]):
    """Named validator instances.

    The built-in validators are registered as ``number``, ``type`` and
    ``uuid``. Additional validators can be registered under their own
    ``name``.
    """

    def __init__(self, builtins: bool = True):
        super().__init__("validators")
        if builtins:
            for validator in (NumberValidator(), TypeValidator(), UuidValidator()):
                self.register_validator(validator)

    def register_validator(self, validator: Validator, allow_overwrite: bool = False) -> None:
        self.register(
            validator.name,
            validator,
            metadata={"message_fields": list(validator.message_fields)},
            allow_overwrite=allow_overwrite,
        )

    def lookup(self, name: str) -> Validator:
        """Get a validator by name.

        Raises:
            UnknownValidatorError: If no validator is registered as ``name``
        """
        validator = self.get_optional(name)
        if validator is None:
            raise UnknownValidatorError(name, self.list_keys())
        return validator

    @unless_skipping
    def validate(self, name: str, value: Any, options: Any) -> ValidationResult:
        """Validate a value with the validator registered as ``name``.

        The skip gate is applied first, so an absent or blank value is valid
        when the options allow it.
        """
        return self.lookup(name).validate(value, options)


validator_registry = ValidatorRegistry()
