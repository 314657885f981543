"""Wiring for the menus queried while handling one request."""

import logging
from typing import Any

from menu_query.hooks import MenuQueryHooks
from menu_query.lookup_cache import MenuLookupCache
from menu_query.menu_handle import MenuHandle
from menu_query.menu_query import MenuQuery
from menu_query.menu_source import MenuSource
from menu_query.page_context import PageContext

logger = logging.getLogger(__name__)


class MenuRequest:
    """Shares one lookup cache between every query of a request.

    Create one per request. Long-lived workers must build a new instance
    (or call ``reset()``) before the next request so stale menu bindings
    are not served.
    """

    def __init__(
        self,
        source: MenuSource,
        context: PageContext | None = None,
        hooks: MenuQueryHooks | None = None,
        defaults: dict[str, Any] | None = None,
    ) -> None:
        """Bind the store, the page being viewed and any filters."""
        self.source = source
        self.context = context if context is not None else PageContext()
        self.hooks = hooks if hooks is not None else MenuQueryHooks()
        self.defaults = dict(defaults or {})
        self.cache = self._new_cache()

    def reset(self, context: PageContext | None = None) -> None:
        """Drop cached lookups, optionally switching to a new page."""
        logger.debug("Resetting menu lookup cache")
        if context is not None:
            self.context = context
        self.cache = self._new_cache()

    def _new_cache(self) -> MenuLookupCache:
        return MenuLookupCache(self.source, self.context, self.hooks, self.defaults)

    def new_query(self) -> MenuQuery:
        """Return an empty query; set options and call ``query()`` on it."""
        return MenuQuery(
            cache=self.cache,
            context=self.context,
            hooks=self.hooks,
            defaults=self.defaults,
        )

    def query(self, **args: Any) -> MenuQuery:
        """Run a query with the given options."""
        return MenuQuery(
            args,
            cache=self.cache,
            context=self.context,
            hooks=self.hooks,
            defaults=self.defaults,
        )

    def menu(self, location: str) -> MenuHandle:
        """Return the handle for a location."""
        return self.cache.get_menu_handle(location)
