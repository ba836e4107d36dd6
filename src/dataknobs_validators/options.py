"""Normalization of validator options into canonical keyword form.

Validators accept their configuration either in canonical form or as a
single shorthand scalar. Canonical form is a mapping from option name to
argument, or an ordered sequence of ``(name, argument)`` pairs::

    {"is": True, "greater_than": 0}
    [("is", True), ("greater_than", 0)]

Shorthand expansion is validator specific and lives on each validator's
``normalize`` method; the helper here only recognizes the canonical shapes.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any


def keyword_options(options: Any) -> dict[str, Any] | None:
    """Convert canonical options to a dict.

    Args:
        options: Candidate configuration

    Returns:
        A new dict preserving the given order, or None when ``options`` is
        not in a canonical shape
    """
    if isinstance(options, Mapping):
        if not all(isinstance(key, str) for key in options):
            return None
        return dict(options)

    if isinstance(options, (str, bytes, bytearray)) or not isinstance(options, Sequence):
        return None

    result: dict[str, Any] = {}
    for item in options:
        if not (isinstance(item, tuple) and len(item) == 2 and isinstance(item[0], str)):
            return None
        key, argument = item
        result[key] = argument
    return result
