"""Value validators with a uniform ``validate(value, options)`` API.
"""

from __future__ import annotations

import logging
import operator
from abc import ABC, abstractmethod
from decimal import Decimal
from numbers import Real
from typing import TYPE_CHECKING, Any, ClassVar

from .categories import TypeCategory, is_of_category
from .formats import UuidFormat, first_matching_format, matches_format
from .options import keyword_options
from .result import ValidationResult

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)


class Validator(ABC):
    """Base class for all validators.

    A validator is stateless. Each call first normalizes the options
    (expanding any shorthand) and then checks the value against the
    canonical options. Malformed options never raise: they produce an
    invalid result whose reason describes the configuration problem.
    """

    name: ClassVar[str]
    message_fields: ClassVar[dict[str, str]]
    options_error: ClassVar[str]

    def validate(self, value: Any, options: Any) -> ValidationResult:
        """Validate a value.

        Args:
            value: Value to validate; never modified
            options: Canonical options or a validator-specific shorthand

        Returns:
            ValidationResult with validation outcome
        """
        normalized = self.normalize(options)
        if normalized is None:
            return self.configuration_error(value, options, self.options_error)
        return self.check(value, normalized)

    def __call__(self, value: Any, options: Any) -> ValidationResult:
        return self.validate(value, options)

    @abstractmethod
    def normalize(self, options: Any) -> dict[str, Any] | None:
        """Expand options into canonical form, or None if not accepted."""

    @abstractmethod
    def check(self, value: Any, options: dict[str, Any]) -> ValidationResult:
        """Check a value against canonical options."""

    def configuration_error(self, value: Any, options: Any, reason: str) -> ValidationResult:
        logger.warning(f"Invalid {self.name} validator options {options!r}: {reason}")
        return ValidationResult.failure(reason, {"value": value, "options": options})

    def failure(self, reason: str, context: dict[str, Any]) -> ValidationResult:
        logger.debug(f"{self.name} validation failed: {reason}")
        return ValidationResult.failure(reason, context)


class TypeValidator(Validator):
    """Value must belong to a runtime type category.

    Options:
        is: A ``TypeCategory`` or its tag (``"integer"``, ``"float"``,
            ``"boolean"``, ``"atom"``, ``"string"``, ``"binary"``,
            ``"list"``, ``"map"``, ``"tuple"``)

    A bare category tag is shorthand for ``{"is": tag}``.
    """

    name = "type"
    message_fields = {"value": "Bad value", "is": "Is type"}
    options_error = "must provide a valid type in options"

    def normalize(self, options: Any) -> dict[str, Any] | None:
        if isinstance(options, str):
            category = TypeCategory.parse(options)
            return {"is": category} if category is not None else None
        return keyword_options(options)

    def check(self, value: Any, options: dict[str, Any]) -> ValidationResult:
        """Check the value's category membership."""
        category = TypeCategory.parse(options.get("is"))
        if category is None:
            return self.configuration_error(value, options, self.options_error)

        if is_of_category(value, category):
            return ValidationResult.success()
        return self.failure(
            f"must be of type {category.value}",
            {"value": value, "is": options.get("is")},
        )


def is_number(value: Any) -> bool:
    """Check numeric-ness; booleans are not numbers."""
    return isinstance(value, (Real, Decimal)) and not isinstance(value, bool)


class NumberValidator(Validator):
    """Value must (or must not) be a number, within optional bounds.

    Options:
        is: Boolean, whether the value must be a number
        equal_to: Value must be numerically equal to this number
        greater_than: Value must be strictly greater than this number
        greater_or_equal_than: Value must be greater than or equal to this number
        less_than: Value must be strictly less than this number
        less_or_equal_than: Value must be less than or equal to this number

    The operator spellings ``==``, ``>``, ``>=``, ``<`` and ``<=`` are
    accepted as aliases. A bare boolean is shorthand for ``{"is": flag}``.

    Constraints are combined with AND and evaluated in the order above,
    stopping at the first failure. A comparison against a value that is
    not a number always fails with that comparison's own message, whether
    or not ``is`` is configured. NaN operands (float or ``Decimal``) fail
    every comparison.
    """

    name = "number"
    message_fields = {
        "value": "Bad value",
        "is": "Is number",
        "equal_to": "Equal to",
        "greater_than": "Greater than",
        "greater_or_equal_than": "Greater or equal than",
        "less_than": "Less than",
        "less_or_equal_than": "Less or equal than",
    }
    options_error = "must provide valid number options"

    ALIASES: ClassVar[dict[str, str]] = {
        "==": "equal_to",
        ">": "greater_than",
        ">=": "greater_or_equal_than",
        "<": "less_than",
        "<=": "less_or_equal_than",
    }

    COMPARISONS: ClassVar[dict[str, tuple[Callable[[Any, Any], bool], str]]] = {
        "equal_to": (operator.eq, "must be equal to {}"),
        "greater_than": (operator.gt, "must be greater than {}"),
        "greater_or_equal_than": (operator.ge, "must be greater or equal than {}"),
        "less_than": (operator.lt, "must be less than {}"),
        "less_or_equal_than": (operator.le, "must be less or equal than {}"),
    }

    CONSTRAINTS: ClassVar[tuple[str, ...]] = ("is", *COMPARISONS)

    def normalize(self, options: Any) -> dict[str, Any] | None:
        if isinstance(options, bool):
            return {"is": options}
        keywords = keyword_options(options)
        if keywords is None:
            return None
        return {self.ALIASES.get(key, key): argument for key, argument in keywords.items()}

    def check(self, value: Any, options: dict[str, Any]) -> ValidationResult:
        """Evaluate the configured constraints in order."""
        must_be_number = options.get("is")
        if must_be_number is not None and not isinstance(must_be_number, bool):
            return self.configuration_error(
                value, options, "must provide a boolean for is in options"
            )
        for constraint in self.COMPARISONS:
            bound = options.get(constraint)
            if bound is not None and not is_number(bound):
                return self.configuration_error(
                    value, options, f"must provide a number for {constraint} in options"
                )

        fields = {"value": value}
        fields.update((constraint, options.get(constraint)) for constraint in self.CONSTRAINTS)

        if must_be_number is not None and is_number(value) != must_be_number:
            reason = "must be a number" if must_be_number else "must not be a number"
            return self.failure(reason, fields)

        for constraint, (compare, template) in self.COMPARISONS.items():
            bound = options.get(constraint)
            if bound is None:
                continue
            if not (is_number(value) and self._compare(compare, value, bound)):
                return self.failure(template.format(bound), fields)

        return ValidationResult.success()

    @staticmethod
    def _compare(compare: Callable[[Any, Any], bool], value: Any, bound: Any) -> bool:
        # Decimal NaN operands signal InvalidOperation instead of comparing false
        try:
            return bool(compare(value, bound))
        except (TypeError, ArithmeticError):
            return False


class UuidValidator(Validator):
    """Value must be a UUID string in a given format.

    Options:
        format: A ``UuidFormat`` or its tag:

            * ``default``: ``xxxxxxxx-xxxx-xxxx-xxxx-xxxxxxxxxxxx``
            * ``hex``: 32 hex digits, no separators
            * ``urn``: ``urn:uuid:`` followed by the default layout
            * ``any`` (or ``True``): any of the formats above
            * ``not_any`` (or ``False``): none of the formats above

    A bare format tag or boolean is shorthand for ``{"format": ...}``.
    """

    name = "uuid"
    message_fields = {"value": "Bad value", "format": "UUID format"}
    options_error = "must provide a valid UUID format in options"

    def normalize(self, options: Any) -> dict[str, Any] | None:
        if isinstance(options, (bool, str)):
            fmt = self._parse_format(options)
            return {"format": fmt} if fmt is not None else None
        return keyword_options(options)

    def check(self, value: Any, options: dict[str, Any]) -> ValidationResult:
        """Match the value against the configured format."""
        fmt = self._parse_format(options.get("format"))
        if fmt is None:
            return self.configuration_error(value, options, self.options_error)

        fields = {"value": value, "format": options.get("format")}

        if fmt is UuidFormat.ANY:
            if first_matching_format(value) is not None:
                return ValidationResult.success()
            return self.failure("must be a valid UUID", fields)

        if fmt is UuidFormat.NOT_ANY:
            if first_matching_format(value) is not None:
                return self.failure("must not be a UUID", fields)
            return ValidationResult.success()

        if matches_format(value, fmt):
            return ValidationResult.success()
        return self.failure(f"must be a valid UUID in {fmt.value} format", fields)

    @staticmethod
    def _parse_format(tag: Any) -> UuidFormat | None:
        if tag is True:
            return UuidFormat.ANY
        if tag is False:
            return UuidFormat.NOT_ANY
        return UuidFormat.parse(tag)
