"""A location bound to the menu assigned to it."""

from typing import TYPE_CHECKING, Any

from menu_query.diagnostics import (
    DiagnosticLog,
    MenuNotFoundError,
    NoMenuAttachedWarning,
    UnregisteredLocationWarning,
)
from menu_query.menu_object import MenuObject
from menu_query.menu_source import MenuSource

if TYPE_CHECKING:
    from menu_query.hooks import MenuQueryHooks
    from menu_query.lookup_cache import MenuLookupCache
    from menu_query.menu_query import MenuQuery
    from menu_query.page_context import PageContext


class MenuHandle:
    """Describes the menu at a location; unresolved handles read as empty."""

    def __init__(
        self,
        location: str,
        menu: MenuObject | None,
        source: MenuSource,
        cache: "MenuLookupCache | None" = None,
        context: "PageContext | None" = None,
        hooks: "MenuQueryHooks | None" = None,
        defaults: dict[str, Any] | None = None,
    ) -> None:
        """Bind a location to its resolved menu (or None) and request scope."""
        self.location = location
        self.menu = menu
        self.source = source
        self.cache = cache
        self.context = context
        self.hooks = hooks
        self.defaults = dict(defaults or {})
        self._fields: dict[str, Any] = menu.as_fields() if menu else {}

    @classmethod
    def resolve(
        cls,
        location: str,
        source: MenuSource,
        diagnostics: DiagnosticLog | None = None,
        cache: "MenuLookupCache | None" = None,
        context: "PageContext | None" = None,
        hooks: "MenuQueryHooks | None" = None,
        defaults: dict[str, Any] | None = None,
    ) -> "MenuHandle":
        """Look up the menu at a location, reporting why it is missing."""
        log = diagnostics if diagnostics is not None else DiagnosticLog()
        menu = None

        if not source.location_is_registered(location):
            log.report(
                UnregisteredLocationWarning(
                    f"The location '{location}' is not registered"
                )
            )
        elif not source.location_has_menu(location):
            log.report(
                NoMenuAttachedWarning(
                    f"The location '{location}' does not have an attached menu"
                )
            )
        else:
            menu = source.resolve_location(location)
            if menu is None:
                log.report(
                    MenuNotFoundError(
                        f"The menu object for location '{location}' "
                        "could not be found"
                    )
                )

        return cls(location, menu, source, cache, context, hooks, defaults)

    @property
    def is_resolved(self) -> bool:
        return self.menu is not None

    @property
    def menu_id(self) -> int | None:
        return self.menu.menu_id if self.menu else None

    def get(self, name: str, default: Any = "") -> Any:
        """Return a menu field, or the default when unresolved or unknown."""
        return self._fields.get(name, default)

    def get_items(
        self,
        context: "PageContext | None" = None,
        hooks: "MenuQueryHooks | None" = None,
        **args: Any,
    ) -> "MenuQuery":
        """Run a fresh query for this handle's location.

        The page context, hooks and defaults the handle was built with are
        used unless others are given.
        """
        from menu_query.lookup_cache import MenuLookupCache
        from menu_query.menu_query import MenuQuery

        context = context if context is not None else self.context
        hooks = hooks if hooks is not None else self.hooks
        cache = self.cache
        if cache is None:
            cache = MenuLookupCache(self.source, context, hooks, self.defaults)

        args["location"] = self.location
        return MenuQuery(
            args,
            cache=cache,
            context=context,
            hooks=hooks,
            defaults=self.defaults,
        )

    def __repr__(self) -> str:
        return f"MenuHandle(location={self.location!r}, menu_id={self.menu_id!r})"
