"""Generic helpers."""

from typing import Any

__all__ = ["merge"]


def merge(merged: dict[str, Any], obj2: dict[str, Any], replace: bool = False) -> dict[str, Any]:
    """Merge the content of d2 into d1.

    Nested dictionaries are merged recursively, lists are concatenated
    unless `replace` is set.

    Args:
        merged: Dictionary to merge into
        obj2: Dictionary to merge from
        replace: If True, replace lists instead of extending them

    Returns:
        The merged dictionary
    """
    for key, value in obj2.items():
        if key in merged:
            if isinstance(value, dict) and isinstance(merged[key], dict):
                merge(merged[key], value, replace)
            elif isinstance(value, list) and isinstance(merged[key], list) and not replace:
                merged[key].extend(value)
            else:
                merged[key] = value
        else:
            merged[key] = value
    return merged
