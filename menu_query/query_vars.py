"""Query options, their defaults and how repeated calls combine them."""

import copy
from typing import Any

DEFAULT_QUERY_VARS: dict[str, Any] = {
    # The location the menu is attached to. Required.
    "location": "",
    # Keep only matching items. URLs (relative ones are mapped to the home
    # URL) or {"type": ..., "id": ...} records.
    "include": [],
    # Drop matching items, same criteria as include.
    "exclude": [],
    # Cap on top level items, -1 for all.
    "limit": -1,
    # Cap on child items, -1 for all.
    "limit_children": -1,
    # Items to skip before the limit is applied.
    "offset": 0,
    # Menu item id or URL whose children are wanted; 0 for top level.
    "parent": 0,
}


def merge_args(base: dict[str, Any], update: dict[str, Any] | None) -> dict[str, Any]:
    """Merge options over a base set.

    Keys missing from ``update`` keep their base value; lists are replaced,
    not extended.
    """
    result = base.copy()
    for key, value in (update or {}).items():
        result[key] = list(value) if isinstance(value, (list, tuple)) else value
    return result


def default_query_vars(overrides: dict[str, Any] | None = None) -> dict[str, Any]:
    """Return a fresh copy of the defaults with configured overrides applied."""
    return merge_args(copy.deepcopy(DEFAULT_QUERY_VARS), overrides)


def as_int(value: Any, default: int) -> int:
    """Coerce an integer option, falling back to the default."""
    if isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except ValueError:
        return default
