"""Exceptions for the dataknobs_validators package.

Validation itself never raises; these cover building rules from
configuration.
"""

from __future__ import annotations

from dataknobs_common.exceptions import NotFoundError


class UnknownValidatorError(NotFoundError):
    """Raised when a rule names a validator that is not registered."""

    def __init__(self, name: str, available: list[str]):
        self.name = name
        super().__init__(
            f"Unknown validator '{name}'",
            context={"validator": name, "available": available},
        )
