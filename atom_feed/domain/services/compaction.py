"""Omission of empty optional fields.

Every optional field in a canonical record or in the compact tree passes
through :func:`compact`, so an empty value never produces an element or an
attribute.
"""

from collections.abc import Mapping
from typing import Any


def is_empty(value: object) -> bool:
    """Check if a value counts as absent.

    Args:
        value: Value to check

    Returns:
        True for None, empty strings and empty containers
    """
    if value is None:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, (Mapping, list, tuple, set, frozenset)):
        return len(value) == 0
    return False


def compact(fields: Mapping[str, Any]) -> dict[str, Any]:
    """Return a copy of ``fields`` without empty values, keeping key order."""
    return {key: value for key, value in fields.items() if not is_empty(value)}
