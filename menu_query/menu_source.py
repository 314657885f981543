"""Interface to the store holding menus and location assignments."""

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from menu_query.menu_object import MenuObject
from menu_query.raw_item import RawItem


@runtime_checkable
class MenuSource(Protocol):
    """Read-only access to registered locations, menus and their items.

    Any object with these methods can back a query; no inheritance needed.
    """

    def location_is_registered(self, location: str) -> bool:
        """Return whether the location has been registered by the theme."""
        ...

    def location_has_menu(self, location: str) -> bool:
        """Return whether a menu has been assigned to the location."""
        ...

    def resolve_location(self, location: str) -> MenuObject | None:
        """Return the menu assigned to the location, or None."""
        ...

    def fetch_raw_items(self, menu_id: int) -> Sequence[RawItem]:
        """Return the menu's items in menu order."""
        ...
