"""Data models for classified, queryable menu items."""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class MenuItem:
    """Represents one classified menu item owned by a query result.

    ``object_id`` depends on ``kind``: the post id for ``post_type``, the
    post type slug for ``post_type_archive``, the term id for ``taxonomy``
    and the item URL for ``custom``.
    """

    id: int
    parent_id: int
    kind: str
    object: str
    object_id: Any
    url: str
    title: str = ""
    type_label: str = ""
    target: str = ""
    description: str = ""
    classes: list[str] = field(default_factory=list)
    meta: dict[str, Any] = field(default_factory=dict)
    current: bool = False

    def is_current(self) -> bool:
        """Return whether this item points at the page being viewed."""
        return self.current

    def set_current(self, current: bool = True) -> None:
        """Override the current-page flag."""
        self.current = bool(current)

    def get_meta(self, name: str, default: Any = "") -> Any:
        """Return a metadata value stored against the item, or the default."""
        return self.meta.get(name, default)
