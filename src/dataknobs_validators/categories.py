"""Runtime type categories recognized by the type validator.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any


class TypeCategory(str, Enum):
    """Closed set of value categories."""

    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"
    ATOM = "atom"
    STRING = "string"
    BINARY = "binary"
    LIST = "list"
    MAP = "map"
    TUPLE = "tuple"

    @classmethod
    def parse(cls, tag: Any) -> TypeCategory | None:
        """Look up a category by tag, returning None for unknown tags."""
        if isinstance(tag, cls):
            return tag
        if not isinstance(tag, str):
            return None
        try:
            return cls(tag)
        except ValueError:
            return None


def is_atom(value: Any) -> bool:
    # booleans and None are symbols too
    return value is None or isinstance(value, (bool, Enum))


def is_of_category(value: Any, category: TypeCategory) -> bool:
    """Test a value's membership in a category.

    Text and raw bytes share one representation, so a value belonging to
    ``string`` also belongs to ``binary`` and vice versa. Booleans belong
    to both ``boolean`` and ``atom``.

    Args:
        value: Value to test
        category: Target category

    Returns:
        True if the value belongs to the category
    """
    if category is TypeCategory.INTEGER:
        return isinstance(value, int) and not isinstance(value, bool)
    if category is TypeCategory.FLOAT:
        return isinstance(value, float)
    if category is TypeCategory.BOOLEAN:
        return isinstance(value, bool)
    if category is TypeCategory.ATOM:
        return is_atom(value)
    if category in (TypeCategory.STRING, TypeCategory.BINARY):
        return isinstance(value, (str, bytes, bytearray))
    if category is TypeCategory.LIST:
        return isinstance(value, list)
    if category is TypeCategory.MAP:
        return isinstance(value, Mapping)
    return isinstance(value, tuple)
