"""A validator bound to one configuration.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .result import ValidationResult
from .skipping import unless_skipping
from .validators import Validator


@dataclass(frozen=True)
class Rule:
    """Validator plus the options it is applied with.

    ``check`` applies the skip gate (``allow_nil``/``allow_blank``) before
    handing the value to the validator, so validators themselves never deal
    with absent values.
    """

    validator: Validator
    options: Any

    @property
    def name(self) -> str:
        return self.validator.name

    def check(self, value: Any) -> ValidationResult:
        return self._validate(value, self.options)

    __call__ = check

    @unless_skipping
    def _validate(self, value: Any, options: Any) -> ValidationResult:
        return self.validator.validate(value, options)
