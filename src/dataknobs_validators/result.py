"""Validation outcome shared by every validator.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ValidationResult:
    """Two-case outcome returned by all validators.

    A valid result carries no payload. An invalid result carries a
    standalone ``reason`` message and the ``context`` fields a message
    template may reference (always including the original ``value``).
    """

    valid: bool
    reason: str | None = None
    context: dict[str, Any] = field(default_factory=dict)

    def __bool__(self) -> bool:
        """Allow 'if result:' usage to check validity."""
        return self.valid

    @property
    def errors(self) -> list[str]:
        """Error messages, matching the shape of other dataknobs results."""
        return [self.reason] if self.reason is not None else []

    @classmethod
    def success(cls) -> ValidationResult:
        """Return the valid outcome."""
        return VALID

    @classmethod
    def failure(cls, reason: str, context: dict[str, Any] | None = None) -> ValidationResult:
        """Create a failed validation result.

        Args:
            reason: Complete, human-readable failure message
            context: Field values available to a message template

        Returns:
            Failed ValidationResult
        """
        return cls(valid=False, reason=reason, context=dict(context or {}))


VALID = ValidationResult(valid=True)
