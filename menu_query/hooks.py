"""Named filter extension points for queries and items."""

from collections.abc import Callable
from typing import Any

QUERY_VARS = "query_vars"
ITEM_IS_CURRENT = "item_is_current"

Filter = Callable[..., Any]


class MenuQueryHooks:
    """Holds filters that may replace values as a query runs.

    - ``query_vars``: ``callback(query_vars) -> query_vars``
    - ``item_is_current``: ``callback(is_current, item) -> bool``
    """

    def __init__(self) -> None:
        """Start with no filters registered."""
        self._filters: dict[str, list[tuple[int, int, Filter]]] = {}
        self._seq = 0

    def add_filter(self, name: str, callback: Filter, priority: int = 10) -> None:
        """Register a filter; lower priorities run first, ties in order added."""
        self._seq += 1
        self._filters.setdefault(name, []).append((priority, self._seq, callback))
        self._filters[name].sort(key=lambda f: (f[0], f[1]))

    def remove_filter(self, name: str, callback: Filter) -> bool:
        """Remove a filter; return whether it was registered."""
        filters = self._filters.get(name, [])
        kept = [f for f in filters if f[2] is not callback]
        self._filters[name] = kept
        return len(kept) != len(filters)

    def has_filter(self, name: str) -> bool:
        """Check if any filter is registered under the name."""
        return bool(self._filters.get(name))

    def apply_filters(self, name: str, value: Any, *args: Any) -> Any:
        """Pass the value through each filter in turn and return the result."""
        for _, _, callback in self._filters.get(name, []):
            value = callback(value, *args)
        return value
