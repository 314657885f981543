"""Data models for a resolved menu."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class MenuObject:
    """Represents the menu attached to a location (a nav menu term)."""

    menu_id: int
    name: str
    slug: str = ""
    description: str = ""
    count: int = 0
    extra: dict[str, Any] = field(default_factory=dict)

    def as_fields(self) -> dict[str, Any]:
        """Return every field, extras included, keyed by name."""
        fields: dict[str, Any] = dict(self.extra)
        fields.update(
            {
                "menu_id": self.menu_id,
                "term_id": self.menu_id,
                "name": self.name,
                "slug": self.slug,
                "description": self.description,
                "count": self.count,
            }
        )
        return fields
