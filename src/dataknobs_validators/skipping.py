"""Skip-when-absent gate applied in front of a validator.

Options in canonical form may enable two gates:

* ``allow_nil``: a ``None`` value is valid without running the validator.
* ``allow_blank``: ``None``, an empty string/bytes or an empty collection
  is valid without running the validator.
"""

from __future__ import annotations

import functools
import inspect
from collections.abc import Callable, Collection
from typing import Any

from .options import keyword_options
from .result import ValidationResult

ValidateFn = Callable[..., ValidationResult]


def is_blank(value: Any) -> bool:
    if value is None:
        return True
    return isinstance(value, Collection) and len(value) == 0


def should_skip(value: Any, options: Any) -> bool:
    """Decide whether validation of ``value`` is skipped.

    Shorthand options never enable a gate.

    Args:
        value: Value about to be validated
        options: Validator options, canonical or shorthand

    Returns:
        True if the value is valid by virtue of being absent or blank
    """
    keywords = keyword_options(options)
    if not keywords:
        return False
    if keywords.get("allow_nil") and value is None:
        return True
    if keywords.get("allow_blank") and is_blank(value):
        return True
    return False


def unless_skipping(validate: ValidateFn) -> ValidateFn:
    """Wrap a callable taking ``value`` and ``options`` arguments.

    The arguments are read by name, so they may be passed positionally or
    as keywords.
    """
    signature = inspect.signature(validate)

    @functools.wraps(validate)
    def wrapper(*args: Any, **kwargs: Any) -> ValidationResult:
        bound = signature.bind(*args, **kwargs)
        bound.apply_defaults()
        if should_skip(bound.arguments["value"], bound.arguments["options"]):
            return ValidationResult.success()
        return validate(*args, **kwargs)

    return wrapper
