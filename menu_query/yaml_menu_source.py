"""A menu store loaded from a YAML site description."""

import logging
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from menu_query.as_text import as_text
from menu_query.menu_object import MenuObject
from menu_query.raw_item import RawItem, raw_item_from_dict

logger = logging.getLogger(__name__)


class YamlMenuSource:
    """Serves locations, menus and items from an in-memory site description.

    Expected shape::

        locations:            # registered location -> label
          primary: Primary Menu
        assignments:          # location -> menu id
          primary: 2
        menus:
          2:
            name: Main
            slug: main
            items:
              - {id: 10, parent_id: 0, type: custom, url: /about/}
    """

    def __init__(self, site: Mapping[str, Any]) -> None:
        """Index the site description."""
        self.locations: dict[str, str] = {
            str(k): as_text(v) for k, v in (site.get("locations") or {}).items()
        }
        self.assignments: dict[str, int] = {}
        for location, menu_id in (site.get("assignments") or {}).items():
            if menu_id is not None:
                self.assignments[str(location)] = int(menu_id)

        self.menus: dict[int, MenuObject] = {}
        self.items: dict[int, list[RawItem]] = {}
        for menu_id, menu in (site.get("menus") or {}).items():
            self._add_menu(int(menu_id), menu or {})

    @classmethod
    def from_file(cls, path: str | Path) -> "YamlMenuSource":
        """Load a site description from a YAML file."""
        p = Path(path)
        if not p.exists():
            msg = f"Site file not found: {p}"
            raise FileNotFoundError(msg)

        site = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
        if not isinstance(site, dict):
            msg = f"Site file must contain a mapping: {p}"
            raise ValueError(msg)

        source = cls(site)
        logger.info(
            "Loaded %s menus and %s locations from %s",
            len(source.menus),
            len(source.locations),
            p,
        )
        return source

    def _add_menu(self, menu_id: int, menu: Mapping[str, Any]) -> None:
        raw_items = [raw_item_from_dict(it) for it in menu.get("items") or []]
        extra = {
            k: v
            for k, v in menu.items()
            if k not in {"items", "name", "slug", "description"}
        }
        self.menus[menu_id] = MenuObject(
            menu_id=menu_id,
            name=as_text(menu.get("name")),
            slug=as_text(menu.get("slug")),
            description=as_text(menu.get("description")),
            count=len(raw_items),
            extra=extra,
        )
        self.items[menu_id] = raw_items

    def location_is_registered(self, location: str) -> bool:
        """Return whether the location is registered."""
        return location in self.locations

    def location_has_menu(self, location: str) -> bool:
        """Return whether a menu id is assigned to the location."""
        return location in self.assignments

    def resolve_location(self, location: str) -> MenuObject | None:
        """Return the menu assigned to the location, or None."""
        menu_id = self.assignments.get(location)
        if menu_id is None:
            return None
        return self.menus.get(menu_id)

    def fetch_raw_items(self, menu_id: int) -> Sequence[RawItem]:
        """Return the items of a menu, or an empty list for unknown menus."""
        return list(self.items.get(menu_id, []))
