"""The query engine: fetch, filter, paginate and iterate menu items.

A query goes through these stages, in order:

1. validate the ``location`` option
2. resolve the menu and fetch its raw items through the lookup cache
3. turn a URL ``parent`` into the id of the first raw item with that URL
4. keep the raw items whose parent id equals ``parent``
5. classify the survivors into ``MenuItem`` objects
6. apply ``include`` then ``exclude``
7. apply ``offset`` and ``limit`` (``limit_children`` below the top level)
8. update ``item_count``/``found_items``

Validation problems are recorded on ``diagnostics`` and leave the query
with no items; nothing is raised to the caller.
"""

import logging
from collections.abc import Iterator, Sequence
from typing import Any

from menu_query.classify_item import classify_item
from menu_query.diagnostics import (
    DiagnosticLog,
    MenuNotFoundError,
    MissingLocationError,
    NoMenuAttachedWarning,
    UnregisteredLocationWarning,
)
from menu_query.hooks import QUERY_VARS, MenuQueryHooks
from menu_query.item_matches import item_matches_any
from menu_query.lookup_cache import MenuLookupCache
from menu_query.menu_handle import MenuHandle
from menu_query.menu_item import MenuItem
from menu_query.page_context import PageContext
from menu_query.query_vars import as_int, default_query_vars, merge_args
from menu_query.raw_item import RawItem

logger = logging.getLogger(__name__)

UNQUERIED = "unqueried"
FETCHING = "fetching"
READY = "ready"
EMPTY = "empty"


class MenuQuery:
    """A query against the menu assigned to a location.

    Pass options to run the query straight away, or build it empty, call
    ``set()`` and then ``query()``. Options given to later ``query()``
    calls are merged over the ones already set.
    """

    def __init__(
        self,
        args: dict[str, Any] | None = None,
        *,
        cache: MenuLookupCache,
        context: PageContext | None = None,
        hooks: MenuQueryHooks | None = None,
        defaults: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the query and run it if options were given."""
        self.cache = cache
        self.context = context if context is not None else PageContext()
        self.hooks = hooks if hooks is not None else MenuQueryHooks()

        self.query_vars: dict[str, Any] = default_query_vars(defaults)
        self.items: list[MenuItem] = []
        self.item_count = 0
        self.found_items = 0  # no paging, always equal to item_count
        self.current_item = 0
        self.item: MenuItem | None = None
        self.diagnostics = DiagnosticLog()
        self.state = UNQUERIED

        if args is not None:
            self.query(args)

    def get(self, var_name: str) -> Any:
        """Return a query option."""
        return self.query_vars.get(var_name)

    def set(self, var_name: str, value: Any) -> None:
        """Set a query option; takes effect on the next ``query()``."""
        self.query_vars[var_name] = value

    def query(self, args: dict[str, Any] | None = None) -> list[MenuItem]:
        """Merge options over the current ones and fetch the items."""
        if args is not None:
            self._init_query_vars(merge_args(self.query_vars, args))

        self._fetch()
        return self.items

    # Loop

    def have_items(self) -> bool:
        """Check if the loop has items left to process."""
        return self.current_item < len(self.items)

    def the_item(self) -> MenuItem | None:
        """Move to the next item and return it, or None when exhausted."""
        if self.current_item < len(self.items):
            self.item = self.items[self.current_item]
            self.current_item += 1
            return self.item

        return None

    def rewind_items(self) -> None:
        """Reset the loop back to the start."""
        self.current_item = 0
        self.item = None

    def reset_items(self) -> None:
        """Alias of ``rewind_items``."""
        self.rewind_items()

    def __iter__(self) -> Iterator[MenuItem]:
        return iter(list(self.items))

    def __len__(self) -> int:
        return self.item_count

    # Menu

    def get_menu(self) -> MenuHandle:
        """Return the handle for the queried location."""
        return self.cache.get_menu_handle(self.get("location"), self.diagnostics)

    # Pipeline

    def _init_query_vars(self, args: dict[str, Any]) -> None:
        self.query_vars = self.hooks.apply_filters(QUERY_VARS, args)

    def _fetch(self) -> None:
        self.state = FETCHING
        self.diagnostics.clear()
        self.rewind_items()
        self.items = []

        handle = self._check_location()
        if handle is None:
            self._update_counts()
            self.state = EMPTY
            return

        raw_items = list(self.cache.get_raw_items(handle.menu_id))
        self._filter_parent_arg(raw_items)

        parent = self._effective_parent()
        raw_items = [raw for raw in raw_items if raw.parent_id == parent]

        items = [classify_item(raw, self.context, self.hooks) for raw in raw_items]
        items = [item for item in items if self._keep_item(item)]

        self.items = self._apply_limits(items, parent)
        self._update_counts()
        self.state = READY
        logger.debug(
            "Queried location %s: %s items", self.get("location"), self.item_count
        )

    def _check_location(self) -> MenuHandle | None:
        location = self.get("location")

        if not isinstance(location, str) or not location.strip():
            self.diagnostics.report(
                MissingLocationError("Location is a required key and must be set")
            )
            return None

        source = self.cache.source
        if not source.location_is_registered(location):
            self.diagnostics.report(
                UnregisteredLocationWarning(
                    f"The location '{location}' is not registered"
                )
            )
            return None

        if not source.location_has_menu(location):
            self.diagnostics.report(
                NoMenuAttachedWarning(
                    f"The location '{location}' does not have an attached menu"
                )
            )
            return None

        handle = self.get_menu()
        if not handle.is_resolved:
            if not self.diagnostics:
                # A handle served from the cache does not report again.
                self.diagnostics.report(
                    MenuNotFoundError(
                        f"The menu object for location '{location}' "
                        "could not be found"
                    )
                )
            return None

        return handle

    def _filter_parent_arg(self, raw_items: Sequence[RawItem]) -> None:
        # Replace a URL parent with the id of the first raw item linking to it.
        parent = self.get("parent")
        if isinstance(parent, str):
            url = self.context.filter_url(parent)
            self.set("parent", self._find_parent(raw_items, url))

    def _find_parent(self, raw_items: Sequence[RawItem], url: str) -> int:
        for raw in raw_items:
            if self.context.normalize_url(raw.url) == url:
                return raw.id
        return 0

    def _effective_parent(self) -> int:
        parent = self.get("parent")
        if isinstance(parent, bool) or not isinstance(parent, (int, float)):
            return 0
        return int(parent) if parent > 0 else 0

    def _keep_item(self, item: MenuItem) -> bool:
        include = self._criteria("include")
        if include and not item_matches_any(item, include, self.context.filter_url):
            return False

        exclude = self._criteria("exclude")
        return not (
            exclude and item_matches_any(item, exclude, self.context.filter_url)
        )

    def _criteria(self, var_name: str) -> list[Any]:
        value = self.get(var_name)
        if not value:
            return []
        if isinstance(value, (str, dict)):
            return [value]
        return list(value)

    def _apply_limits(self, items: list[MenuItem], parent: int) -> list[MenuItem]:
        limit_var = "limit" if parent == 0 else "limit_children"
        limit = as_int(self.get(limit_var), -1)
        if limit < 0:
            limit = len(items)

        offset = max(0, as_int(self.get("offset"), 0))
        return items[offset : offset + limit]

    def _update_counts(self) -> None:
        self.item_count = len(self.items)
        self.found_items = self.item_count
