"""Query, filter, paginate and iterate navigation menu items."""

from menu_query.diagnostics import (
    MenuNotFoundError,
    MenuQueryError,
    MenuQueryWarning,
    MissingLocationError,
    NoMenuAttachedWarning,
    UnregisteredLocationWarning,
)
from menu_query.hooks import MenuQueryHooks
from menu_query.lookup_cache import MenuLookupCache
from menu_query.menu_handle import MenuHandle
from menu_query.menu_item import MenuItem
from menu_query.menu_query import MenuQuery
from menu_query.menu_request import MenuRequest
from menu_query.page_context import PageContext

__all__ = [
    "MenuHandle",
    "MenuItem",
    "MenuLookupCache",
    "MenuNotFoundError",
    "MenuQuery",
    "MenuQueryError",
    "MenuQueryHooks",
    "MenuQueryWarning",
    "MenuRequest",
    "MissingLocationError",
    "NoMenuAttachedWarning",
    "PageContext",
    "UnregisteredLocationWarning",
]
