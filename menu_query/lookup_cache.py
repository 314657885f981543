"""Request-scoped memoization of menu handles and raw menu items."""

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any, NoReturn

from menu_query.menu_source import MenuSource
from menu_query.raw_item import RawItem

if TYPE_CHECKING:
    from menu_query.diagnostics import DiagnosticLog
    from menu_query.hooks import MenuQueryHooks
    from menu_query.menu_handle import MenuHandle
    from menu_query.page_context import PageContext

logger = logging.getLogger(__name__)


class MenuLookupCache:
    """Caches location lookups and item fetches against one menu source.

    One instance serves one request. Bindings are never refreshed while
    the instance lives; start a new cache for the next request. Copies are
    refused so every query of a request shares the same entries.

    The page context, hooks and option defaults of the request are handed
    to every handle the cache builds, so queries started from a handle run
    against the same page.
    """

    def __init__(
        self,
        source: MenuSource,
        context: "PageContext | None" = None,
        hooks: "MenuQueryHooks | None" = None,
        defaults: dict[str, Any] | None = None,
    ) -> None:
        """Bind the cache to the store it reads from and the request scope."""
        self.source = source
        self.context = context
        self.hooks = hooks
        self.defaults = dict(defaults or {})
        self._location_cache: dict[str, "MenuHandle"] = {}
        self._item_cache: dict[int, tuple[RawItem, ...]] = {}

    def get_menu_handle(
        self, location: str, diagnostics: "DiagnosticLog | None" = None
    ) -> "MenuHandle":
        """Return the handle for a location, resolving it on first use."""
        from menu_query.menu_handle import MenuHandle

        handle = self._location_cache.get(location)
        if handle is not None:
            logger.debug("Location cache hit: %s", location)
            return handle

        logger.debug("Location cache miss: %s", location)
        handle = MenuHandle.resolve(
            location,
            self.source,
            diagnostics,
            cache=self,
            context=self.context,
            hooks=self.hooks,
            defaults=self.defaults,
        )
        self._location_cache[location] = handle
        return handle

    def get_raw_items(self, menu_id: int) -> Sequence[RawItem]:
        """Return a menu's raw items, fetching them on first use."""
        items = self._item_cache.get(menu_id)
        if items is not None:
            logger.debug("Item cache hit: menu %s", menu_id)
            return items

        logger.debug("Item cache miss: menu %s", menu_id)
        items = tuple(self.source.fetch_raw_items(menu_id))
        self._item_cache[menu_id] = items
        return items

    def __contains__(self, location: object) -> bool:
        return location in self._location_cache

    def __copy__(self) -> NoReturn:
        msg = "MenuLookupCache instances cannot be copied"
        raise TypeError(msg)

    def __deepcopy__(self, memo: dict) -> NoReturn:
        msg = "MenuLookupCache instances cannot be copied"
        raise TypeError(msg)

    def __reduce__(self) -> NoReturn:
        msg = "MenuLookupCache instances cannot be pickled"
        raise TypeError(msg)
