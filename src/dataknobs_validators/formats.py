"""Structural UUID formats.

Each concrete format is a fixed-length layout of hexadecimal digits::

    default  xxxxxxxx-xxxx-xxxx-xxxx-xxxxxxxxxxxx
    hex      xxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxx
    urn      urn:uuid:xxxxxxxx-xxxx-xxxx-xxxx-xxxxxxxxxxxx

Digits match ``[0-9A-Fa-f]`` exactly; case is never normalized.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Any


class UuidFormat(str, Enum):
    """UUID formats, including the ``any`` and ``not_any`` meta formats."""

    DEFAULT = "default"
    HEX = "hex"
    URN = "urn"
    ANY = "any"
    NOT_ANY = "not_any"

    @classmethod
    def parse(cls, tag: Any) -> UuidFormat | None:
        """Look up a format by tag, returning None for unknown tags."""
        if isinstance(tag, cls):
            return tag
        if not isinstance(tag, str):
            return None
        try:
            return cls(tag)
        except ValueError:
            return None


# Order matters: ``any`` and ``not_any`` try formats in this sequence.
CONCRETE_FORMATS = (UuidFormat.DEFAULT, UuidFormat.HEX, UuidFormat.URN)

URN_PREFIX = "urn:uuid:"

_DEFAULT_BODY = "[0-9A-Fa-f]{8}-[0-9A-Fa-f]{4}-[0-9A-Fa-f]{4}-[0-9A-Fa-f]{4}-[0-9A-Fa-f]{12}"

_LAYOUTS = {
    UuidFormat.DEFAULT: _DEFAULT_BODY,
    UuidFormat.HEX: "[0-9A-Fa-f]{32}",
    UuidFormat.URN: re.escape(URN_PREFIX) + _DEFAULT_BODY,
}

_TEXT_PATTERNS = {fmt: re.compile(layout) for fmt, layout in _LAYOUTS.items()}
_BYTES_PATTERNS = {fmt: re.compile(layout.encode("ascii")) for fmt, layout in _LAYOUTS.items()}

_LENGTHS = {UuidFormat.DEFAULT: 36, UuidFormat.HEX: 32, UuidFormat.URN: 45}


def matches_format(value: Any, fmt: UuidFormat) -> bool:
    """Check a value against one concrete format.

    Args:
        value: Candidate value; only ``str``, ``bytes`` and ``bytearray``
            can match
        fmt: A concrete format (``default``, ``hex`` or ``urn``)

    Returns:
        True if the whole value has exactly the format's layout
    """
    if isinstance(value, str):
        patterns = _TEXT_PATTERNS
    elif isinstance(value, (bytes, bytearray)):
        patterns = _BYTES_PATTERNS
    else:
        return False

    if len(value) != _LENGTHS[fmt]:
        return False
    return patterns[fmt].fullmatch(value) is not None


def first_matching_format(value: Any) -> UuidFormat | None:
    """Return the first concrete format the value matches, if any."""
    for fmt in CONCRETE_FORMATS:
        if matches_format(value, fmt):
            return fmt
    return None
