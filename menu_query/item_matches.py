"""Logic for matching menu items against include/exclude criteria."""

from collections.abc import Callable, Iterable, Mapping
from typing import Any

from menu_query.menu_item import MenuItem


def item_matches_url(item: MenuItem, url: str) -> bool:
    """Check if the item's URL equals an already-normalized URL."""
    return item.url == url


def item_matches_object(item: MenuItem, object_type: Any, object_id: Any) -> bool:
    """Check if the item points at the given object type and id."""
    if str(item.object) != str(object_type):
        return False
    return str(item.object_id) == str(object_id)


def item_matches(
    item: MenuItem,
    criterion: Any,
    filter_url: Callable[[str], str],
) -> bool:
    """Match one criterion: a URL string or a ``{"type", "id"}`` mapping."""
    if isinstance(criterion, Mapping):
        if "type" not in criterion or "id" not in criterion:
            return False
        return item_matches_object(item, criterion["type"], criterion["id"])
    return item_matches_url(item, filter_url(str(criterion)))


def item_matches_any(
    item: MenuItem,
    criteria: Iterable[Any],
    filter_url: Callable[[str], str],
) -> bool:
    """Check if the item matches at least one criterion."""
    return any(item_matches(item, c, filter_url) for c in criteria)
